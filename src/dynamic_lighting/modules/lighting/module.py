"""
Dynamic Lighting Module implementation.

Aggregates the zones the user occupies, picks the most specific value per
lighting attribute and drives the renderer toward it.
"""

import logging
import math
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Tuple, TYPE_CHECKING

from dynamic_lighting.core.bus import Event, EventFilter
from dynamic_lighting.core.registry import ZoneRegistry
from dynamic_lighting.core.render import RenderView
from dynamic_lighting.core.timers import Scheduler
from dynamic_lighting.core.zone import Zone
from dynamic_lighting.modules.base import LightingModule

from .animator import ExposureAnimator
from .models import LightingConfig

if TYPE_CHECKING:
    from dynamic_lighting.core import EventBus

logger = logging.getLogger(__name__)


class DynamicLightingModule(LightingModule):
    """
    Dynamic Lighting Module - smooth lighting transitions between zones.

    Features:
    - Smallest-zone-wins resolution per lighting attribute
    - Lit render profile while inside any zone, defaults once all are left
    - Smooth exposure convergence on an injected scheduler
    - Works without a renderer (animation becomes a no-op)

    The host owns the instance: construct one per renderer and hand it to
    every zone entity adapter.
    """

    CURRENT_CONFIG_VERSION = 1

    def __init__(
        self,
        scheduler: Scheduler,
        render: Optional[RenderView] = None,
        config: Optional[LightingConfig] = None,
    ):
        """
        Initialize the lighting module.

        Args:
            scheduler: Timer facility for the exposure animation
            render: Renderer view (None until the renderer is available)
            config: Module configuration (defaults if omitted)
        """
        self._config = config or LightingConfig()
        self._config.validate()

        self._render = render
        self._bus: Optional["EventBus"] = None
        self._registry = ZoneRegistry()
        self._animator = ExposureAnimator(
            scheduler,
            render,
            step=self._config.exposure_step,
            interval_ms=self._config.frame_interval_ms,
        )

    @property
    def id(self) -> str:
        """Module identifier."""
        return "lighting"

    @property
    def config(self) -> LightingConfig:
        return self._config

    @property
    def registry(self) -> ZoneRegistry:
        return self._registry

    @property
    def animator(self) -> ExposureAnimator:
        return self._animator

    @property
    def zones(self) -> Tuple[Zone, ...]:
        """Zones the user is inside of, most specific first."""
        return self._registry.zones

    @property
    def is_lit(self) -> bool:
        """True while the user is inside at least one lighting zone."""
        return not self._registry.is_empty

    # =============================================================================
    # Module Lifecycle
    # =============================================================================

    def attach(self, bus: "EventBus") -> None:
        """Attach module to kernel and listen for zone events."""
        self._bus = bus
        bus.subscribe(self._on_zone_entered, EventFilter(event_type="zone.entered"))
        bus.subscribe(self._on_zone_exited, EventFilter(event_type="zone.exited"))
        logger.info("DynamicLightingModule attached")

    def attach_renderer(self, render: Optional[RenderView]) -> None:
        """
        Provide the renderer once it is available.

        If the user is already inside zones, the lit profile is applied and the
        exposure recomputed right away.
        """
        self._render = render
        self._animator.attach_renderer(render)
        if render is not None and self.is_lit:
            render.apply_profile(self._config.lit_profile)
            self.recompute()

    def default_config(self) -> Dict:
        """Default module configuration."""
        return LightingConfig().to_dict()

    def config_schema(self) -> Dict:
        """JSON schema for module configuration."""
        return {
            "type": "object",
            "properties": {
                "frame_interval_ms": {
                    "type": "number",
                    "title": "Frame Interval (ms)",
                    "description": "Time between exposure animation steps",
                    "exclusiveMinimum": 0,
                    "default": 1000 / 60,
                },
                "exposure_step": {
                    "type": "number",
                    "title": "Exposure Step",
                    "description": "Exposure change applied on each animation step",
                    "exclusiveMinimum": 0,
                    "default": 0.02,
                },
                "default_exposure": {
                    "type": "number",
                    "title": "Default Exposure",
                    "description": "Exposure used when no zone overrides it",
                    "default": 0.0,
                },
                "exposure_key": {
                    "type": "string",
                    "title": "Exposure Property",
                    "description": "Zone lighting property that holds the exposure",
                    "default": "exposure",
                },
            },
        }

    def migrate_config(self, config: Dict) -> Dict:
        """Migrate configuration to current version."""
        version = config.get("version", 1)

        if version == self.CURRENT_CONFIG_VERSION:
            return config

        config["version"] = self.CURRENT_CONFIG_VERSION
        return config

    def on_config_changed(self, config: Dict) -> None:
        """
        Apply a new configuration.

        Step and interval take effect from the next target. While lit, the new
        lit profile is applied right away.
        """
        new_config = LightingConfig.from_dict(self.migrate_config(dict(config)))
        new_config.validate()

        self._config = new_config
        self._animator.step = new_config.exposure_step
        self._animator.interval_ms = new_config.frame_interval_ms

        if self._render is not None and self.is_lit:
            self._render.apply_profile(new_config.lit_profile)
        logger.debug(f"Lighting config changed: {new_config.to_dict()}")

    # =============================================================================
    # Public API - Zone Events
    # =============================================================================

    def entered_zone(
        self,
        id: str,
        size: float,
        properties: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Register a zone that the user is inside of, and its lighting properties.

        Zones whose size is not a non-negative finite number are ignored.

        Args:
            id: The zone entity ID
            size: The zone size, used to decide which zone's lighting wins
            properties: Lighting properties (None = no overrides)
        """
        if not _is_finite_number(size) or size < 0:
            logger.warning(f"Ignoring zone {id} with invalid size {size!r}")
            return

        if self._registry.is_empty:
            self._set_lit(True)

        self._registry.enter(id, size, properties)
        self.recompute()

    def exited_zone(self, id: str) -> None:
        """
        Unregister a zone. Call this when the user leaves the zone.

        Args:
            id: The zone entity ID
        """
        if self._registry.exit(id):
            self._animator.stop()
            self._set_lit(False)
            return

        if self._registry.is_empty:
            return

        self.recompute()

    def resolve(self, key: str, default: Any = None) -> Any:
        """Get a value as specified by the current zone(s)."""
        return self._registry.resolve(key, default)

    def recompute(self) -> None:
        """Update the lighting based on the current zone(s)."""
        key = self._config.exposure_key
        exposure = self._registry.resolve(key, self._config.default_exposure)
        zone = self._registry.winning_zone(key)

        if not _is_finite_number(exposure):
            logger.warning(
                f"Ignoring non-numeric {key} override {exposure!r} from zone "
                f"{zone.id if zone else None}"
            )
            exposure = self._config.default_exposure
            zone = None

        self._animator.set_target(exposure)
        self._publish(
            "lighting.target_changed",
            {"exposure": exposure, "zone_id": zone.id if zone else None},
        )

    # =============================================================================
    # Private Helpers
    # =============================================================================

    def _set_lit(self, lit: bool) -> None:
        """Switch the renderer between the lit and the default profile."""
        profile = self._config.lit_profile if lit else self._config.default_profile

        if self._render is not None:
            self._render.apply_profile(profile)
            if profile.exposure is not None:
                self._animator.current = profile.exposure

        logger.info(f"Lighting mode: {'lit' if lit else 'default'}")
        self._publish("lighting.mode_changed", {"lit": lit})

    def _publish(self, event_type: str, payload: Dict[str, Any]) -> None:
        if self._bus is None:
            return
        self._bus.publish(Event(type=event_type, source=self.id, payload=payload))

    def _on_zone_entered(self, event: Event) -> None:
        """Handle zone.entered events from the bus."""
        if not event.zone_id:
            logger.debug("zone.entered event without zone_id ignored")
            return
        self.entered_zone(
            event.zone_id,
            event.payload.get("size", 0.0),
            event.payload.get("properties"),
        )

    def _on_zone_exited(self, event: Event) -> None:
        """Handle zone.exited events from the bus."""
        if not event.zone_id:
            logger.debug("zone.exited event without zone_id ignored")
            return
        self.exited_zone(event.zone_id)


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)
