"""
Zone entity adapter for dynamic-lighting.

Bridges host zone entities (with JSON user data and bounding boxes) to the
lighting module.
"""

from .models import Vec3, ZoneBounds
from .user_data import UserDataResult, parse_user_data, lighting_properties
from .adapter import EntityPlatform, DynamicLightingZone

__all__ = [
    "Vec3",
    "ZoneBounds",
    "UserDataResult",
    "parse_user_data",
    "lighting_properties",
    "EntityPlatform",
    "DynamicLightingZone",
]
