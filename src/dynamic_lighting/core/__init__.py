"""
Core components of the dynamic-lighting kernel.

This package contains:
- zone: Zone dataclass
- registry: ZoneRegistry for the zones the user occupies
- bus: Event Bus implementation
- render: Renderer configuration surface and render profiles
- timers: Scheduler facilities for recurring callbacks
"""

from dynamic_lighting.core.zone import Zone
from dynamic_lighting.core.registry import ZoneRegistry
from dynamic_lighting.core.bus import Event, EventBus, EventFilter
from dynamic_lighting.core.render import (
    ConfigBlock,
    RenderProfile,
    RenderView,
    LIT_PROFILE,
    DEFAULT_PROFILE,
)
from dynamic_lighting.core.timers import (
    Scheduler,
    TimerHandle,
    ManualScheduler,
    AsyncioScheduler,
)

__all__ = [
    "Zone",
    "ZoneRegistry",
    "Event",
    "EventBus",
    "EventFilter",
    "ConfigBlock",
    "RenderProfile",
    "RenderView",
    "LIT_PROFILE",
    "DEFAULT_PROFILE",
    "Scheduler",
    "TimerHandle",
    "ManualScheduler",
    "AsyncioScheduler",
]
