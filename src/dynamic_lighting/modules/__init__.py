"""
Modules package for dynamic-lighting.

Modules are plug-ins that add behavior on top of the kernel.
"""

from dynamic_lighting.modules.base import LightingModule

__all__ = ["LightingModule"]
