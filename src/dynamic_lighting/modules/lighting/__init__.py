"""
Lighting module for dynamic-lighting.

Provides smooth ambient lighting transitions as the user moves between
nested zones.

Architecture:
    Zone events mutate the registry, the registry resolves the winning
    exposure, and the animator converges the renderer on it.

    ┌─────────────────────────────────────┐
    │      DynamicLightingModule          │
    │   (lit/default render profiles)     │
    │        │                │           │
    │        ▼                ▼           │
    │  ┌────────────┐  ┌──────────────┐   │
    │  │ZoneRegistry│─▶│ExposureAnim. │   │
    │  └────────────┘  └──────────────┘   │
    └─────────────────────────────────────┘
"""

from .models import AnimatorState, LightingConfig
from .animator import ExposureAnimator
from .module import DynamicLightingModule

__all__ = [
    "AnimatorState",
    "LightingConfig",
    "ExposureAnimator",
    "DynamicLightingModule",
]
