"""
Zone dataclass.

A Zone represents one spatial region the user is currently standing in,
together with the lighting overrides it requests.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Zone:
    """
    A spatial region with lighting overrides.

    Attributes:
        id: Unique identifier of the zone entity
        size: Specificity metric (smaller = more specific, wins on conflicts)
        properties: Lighting attribute name -> value (may be empty)
    """

    id: str
    size: float
    properties: Mapping[str, Any] = field(default_factory=dict)

    def defines(self, key: str) -> bool:
        """Check if this zone overrides the given lighting attribute."""
        return key in self.properties
