"""
ZoneRegistry for the zones the user currently occupies.

The registry owns the zone set and the priority order, not the lighting behavior.
"""

from typing import Any, List, Mapping, Optional, Tuple
import logging

from dynamic_lighting.core.zone import Zone

logger = logging.getLogger(__name__)


class ZoneRegistry:
    """
    Holds the zones containing the user, ordered by priority.

    Responsibilities:
    - Keep at most one zone per id (re-entering replaces)
    - Keep zones sorted ascending by size after every mutation
    - Resolve lighting attributes from the most specific zone defining them

    Does NOT touch the renderer or run animations.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._zones: List[Zone] = []

    def enter(
        self,
        id: str,
        size: float,
        properties: Optional[Mapping[str, Any]] = None,
    ) -> bool:
        """
        Register a zone the user is inside of.

        Any existing zone with the same id is replaced. Properties that are
        missing or not a mapping are treated as an empty mapping.

        Args:
            id: The zone entity ID
            size: The zone size; smaller zones take priority
            properties: Lighting overrides for this zone

        Returns:
            True if the registry was empty before this call
        """
        was_empty = not self._zones

        if not isinstance(properties, Mapping):
            if properties is not None:
                logger.debug(
                    f"Ignoring non-mapping properties for zone {id}: {type(properties).__name__}"
                )
            properties = {}

        zones = [zone for zone in self._zones if zone.id != id]
        zones.append(Zone(id=id, size=size, properties=dict(properties)))

        # list.sort is stable, equal sizes keep insertion order
        zones.sort(key=lambda zone: zone.size)
        self._zones = zones

        logger.debug(f"Entered zone {id} (size={size}, {len(self._zones)} active)")
        return was_empty

    def exit(self, id: str) -> bool:
        """
        Unregister a zone. Exiting a zone that isn't registered is a no-op.

        Args:
            id: The zone entity ID

        Returns:
            True if a zone was removed and the registry is now empty
        """
        removed = self._remove(id)
        if not removed:
            logger.debug(f"Exit for unknown zone {id} ignored")
            return False

        logger.debug(f"Exited zone {id} ({len(self._zones)} active)")
        return not self._zones

    def resolve(self, key: str, default: Any = None) -> Any:
        """
        Get a lighting attribute as specified by the current zone(s).

        Args:
            key: The property name
            default: Returned as-is if no current zone defines the property

        Returns:
            The value from the smallest zone defining the property, or default
        """
        zone = self.winning_zone(key)
        if zone is None:
            return default
        return zone.properties[key]

    def winning_zone(self, key: str) -> Optional[Zone]:
        """
        Get the most specific zone that defines a property.

        Args:
            key: The property name

        Returns:
            The Zone or None if no current zone defines the property
        """
        for zone in self._zones:
            if zone.defines(key):
                return zone
        return None

    def get(self, id: str) -> Optional[Zone]:
        """Get a registered zone by ID."""
        for zone in self._zones:
            if zone.id == id:
                return zone
        return None

    @property
    def zones(self) -> Tuple[Zone, ...]:
        """Snapshot of the registered zones, most specific first."""
        return tuple(self._zones)

    @property
    def is_empty(self) -> bool:
        return not self._zones

    def clear(self) -> None:
        """Drop all registered zones."""
        self._zones.clear()

    def __len__(self) -> int:
        return len(self._zones)

    def __contains__(self, id: object) -> bool:
        return any(zone.id == id for zone in self._zones)

    def _remove(self, id: str) -> bool:
        """Remove every zone with the given id. Returns True if any was removed."""
        count = len(self._zones)
        self._zones = [zone for zone in self._zones if zone.id != id]
        return len(self._zones) != count
