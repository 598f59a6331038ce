"""
Zone entity adapter.

Translates entity lifecycle callbacks (preload, unload, enter, leave) from the
host platform into lighting module calls.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .models import Vec3, ZoneBounds
from .user_data import lighting_properties, parse_user_data

if TYPE_CHECKING:
    from dynamic_lighting.modules.lighting import DynamicLightingModule

logger = logging.getLogger(__name__)


class EntityPlatform(ABC):
    """Host platform access needed by zone entities."""

    @abstractmethod
    def get_entity_properties(self, entity_id: str, names: List[str]) -> Dict[str, Any]:
        """
        Read entity properties.

        Args:
            entity_id: The entity ID
            names: Property names to read (e.g. "position", "dimensions", "userData")

        Returns:
            Dict of property name -> value
        """
        pass

    @abstractmethod
    def get_avatar_position(self) -> Vec3:
        """Current position of the user's avatar."""
        pass


class DynamicLightingZone:
    """
    Manages the interaction between one zone entity and the lighting module.

    The host calls the lifecycle methods; foreign entity IDs are ignored.
    """

    def __init__(self, platform: EntityPlatform, lighting: "DynamicLightingModule") -> None:
        """
        Initialize the adapter.

        Args:
            platform: Host platform for entity properties and avatar position
            lighting: The lighting module to notify
        """
        self._platform = platform
        self._lighting = lighting
        self.id: Optional[str] = None

    def preload(self, entity_id: str) -> None:
        """
        Called by the host when the entity is loaded.

        Fires a synthetic enter if the user is already standing inside.

        Raises:
            ValueError: If entity_id is empty
        """
        if not entity_id:
            raise ValueError("Zone entity ID must not be empty")

        self.id = entity_id
        logger.info(f"Zone entity loaded: {entity_id}")

        bounds = self._get_bounds()
        if bounds.contains(self._platform.get_avatar_position()):
            logger.debug(f"Avatar already inside {entity_id}")
            self.enter_entity(entity_id)

    def unload(self, entity_id: str) -> None:
        """Called by the host when the entity is unloaded."""
        if entity_id != self.id:
            return
        self._lighting.exited_zone(entity_id)

    def enter_entity(self, entity_id: str) -> None:
        """Called by the host when the user goes inside the entity."""
        if entity_id != self.id:
            return

        size = self._get_bounds().size
        self._lighting.entered_zone(entity_id, size, self.get_lighting_properties())

    def leave_entity(self, entity_id: str) -> None:
        """Called by the host when the user goes outside the entity."""
        if entity_id != self.id:
            return
        self._lighting.exited_zone(entity_id)

    def get_lighting_properties(self) -> Dict[str, Any]:
        """Lighting overrides from the entity's user data (empty on any problem)."""
        if self.id is None:
            return {}

        props = self._platform.get_entity_properties(self.id, ["userData"])
        result = parse_user_data(props.get("userData"))
        if not result.ok:
            logger.debug(f"No usable user data on {self.id}: {result.error}")
        return dict(lighting_properties(result))

    def _get_bounds(self) -> ZoneBounds:
        props = self._platform.get_entity_properties(self.id, ["position", "dimensions"])
        return ZoneBounds(
            position=_as_vec3(props["position"]),
            dimensions=_as_vec3(props["dimensions"]),
        )


def _as_vec3(value: Any) -> Vec3:
    """Accept a Vec3, an (x, y, z) sequence or an {"x", "y", "z"} dict."""
    if isinstance(value, Vec3):
        return value
    if isinstance(value, dict):
        return Vec3.from_dict(value)
    x, y, z = value
    return Vec3(float(x), float(y), float(z))
