"""
dynamic-lighting: Smooth ambient lighting across nested zones.

This library provides:
- Zone registry with smallest-zone-wins attribute resolution
- Smooth, cancellable exposure animation on an injected scheduler
- Lit/default render profiles for the renderer configuration
- Zone entity adapter with best-effort JSON user data
"""

from dynamic_lighting.core.zone import Zone
from dynamic_lighting.core.registry import ZoneRegistry
from dynamic_lighting.core.bus import Event, EventBus, EventFilter
from dynamic_lighting.core.render import RenderView, RenderProfile
from dynamic_lighting.core.timers import ManualScheduler, AsyncioScheduler
from dynamic_lighting.modules.lighting import DynamicLightingModule, LightingConfig

__version__ = "0.1.0"

__all__ = [
    "Zone",
    "ZoneRegistry",
    "Event",
    "EventBus",
    "EventFilter",
    "RenderView",
    "RenderProfile",
    "ManualScheduler",
    "AsyncioScheduler",
    "DynamicLightingModule",
    "LightingConfig",
]
