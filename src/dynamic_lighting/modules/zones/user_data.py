"""Best-effort parsing of entity user data.

Zone entities carry free-form JSON metadata written by users. A broken blob
must never break lighting, so parsing returns a result instead of raising.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserDataResult:
    """Outcome of parsing a user data blob.

    Attributes:
        ok: True if the blob was a JSON object.
        data: Parsed object (empty when ok is False).
        error: Why parsing failed, if it did.
    """

    ok: bool
    data: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None


def parse_user_data(raw: Any) -> UserDataResult:
    """Parse entity user data as a JSON object.

    Never raises. Missing, empty, malformed or non-object data yields an
    empty mapping.
    """
    if raw is None or raw == "":
        return UserDataResult(ok=False, error="no user data")

    if not isinstance(raw, (str, bytes, bytearray)):
        return UserDataResult(ok=False, error=f"unsupported type {type(raw).__name__}")

    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        logger.debug(f"Unparseable user data: {e}")
        return UserDataResult(ok=False, error=str(e))

    if not isinstance(data, dict):
        return UserDataResult(ok=False, error=f"expected JSON object, got {type(data).__name__}")

    return UserDataResult(ok=True, data=data)


def lighting_properties(result: UserDataResult) -> Mapping[str, Any]:
    """Extract the "lighting" overrides from parsed user data."""
    lighting = result.data.get("lighting")
    if not isinstance(lighting, dict):
        return {}
    return lighting
