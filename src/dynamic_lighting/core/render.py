"""
Renderer configuration surface.

Renderer settings live in named, nested configuration blocks
(e.g. RenderMainView -> ToneMapping -> exposure). A RenderView wraps the main
view block and exposes the two things the lighting module needs: the
tone-mapping exposure and a way to apply a whole RenderProfile at once.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

MAIN_VIEW = "RenderMainView"
BLOOM = "Bloom"
BLOOM_THRESHOLD = "BloomThreshold"
TONE_MAPPING = "ToneMapping"


class ConfigBlock:
    """
    A named block of renderer settings with nested child blocks.

    Values are read and written as attributes. Reading a value that was never
    set raises AttributeError, like any missing attribute.
    """

    def __init__(self, name: str, **values: Any) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "_values", dict(values))
        object.__setattr__(self, "_children", {})

    def get_config(self, name: str) -> "ConfigBlock":
        """
        Get a child block, creating it on first access.

        Args:
            name: Child block name

        Returns:
            The child ConfigBlock
        """
        children: Dict[str, ConfigBlock] = self._children
        if name not in children:
            children[name] = ConfigBlock(name)
        return children[name]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize values and child blocks."""
        data: Dict[str, Any] = dict(self._values)
        for name, child in self._children.items():
            data[name] = child.to_dict()
        return data

    def __getattr__(self, key: str) -> Any:
        values = object.__getattribute__(self, "_values")
        try:
            return values[key]
        except KeyError:
            raise AttributeError(f"Config block '{self.name}' has no setting '{key}'") from None

    def __setattr__(self, key: str, value: Any) -> None:
        self._values[key] = value

    def __repr__(self) -> str:
        return f"ConfigBlock({self.name!r}, {self._values!r})"


@dataclass(frozen=True)
class RenderProfile:
    """
    A bundle of bloom and tone-mapping settings applied together.

    Attributes:
        bloom_enabled: Whether bloom is on
        bloom_intensity: Bloom strength
        bloom_threshold: Brightness threshold for bloom
        bloom_size: Bloom spread
        tone_mapping_enabled: Whether tone mapping is on
        tone_mapping_curve: Tone-mapping curve index
        exposure: Exposure to set, or None to leave exposure untouched
    """

    bloom_enabled: bool
    bloom_intensity: float
    bloom_threshold: float
    bloom_size: float
    tone_mapping_enabled: bool = True
    tone_mapping_curve: int = 1
    exposure: Optional[float] = None

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "bloom_enabled": self.bloom_enabled,
            "bloom_intensity": self.bloom_intensity,
            "bloom_threshold": self.bloom_threshold,
            "bloom_size": self.bloom_size,
            "tone_mapping_enabled": self.tone_mapping_enabled,
            "tone_mapping_curve": self.tone_mapping_curve,
            "exposure": self.exposure,
        }

    @classmethod
    def from_dict(cls, data: dict, base: Optional["RenderProfile"] = None) -> "RenderProfile":
        """Deserialize from dict, filling missing keys from base (or DEFAULT_PROFILE)."""
        base = base or DEFAULT_PROFILE
        return cls(
            bloom_enabled=data.get("bloom_enabled", base.bloom_enabled),
            bloom_intensity=data.get("bloom_intensity", base.bloom_intensity),
            bloom_threshold=data.get("bloom_threshold", base.bloom_threshold),
            bloom_size=data.get("bloom_size", base.bloom_size),
            tone_mapping_enabled=data.get("tone_mapping_enabled", base.tone_mapping_enabled),
            tone_mapping_curve=data.get("tone_mapping_curve", base.tone_mapping_curve),
            exposure=data.get("exposure", base.exposure),
        )


# Used while the user is inside at least one lighting zone
LIT_PROFILE = RenderProfile(
    bloom_enabled=True,
    bloom_intensity=1.0,
    bloom_threshold=0.0,
    bloom_size=0.7,
)

# Renderer defaults restored when the last zone is left
DEFAULT_PROFILE = RenderProfile(
    bloom_enabled=False,
    bloom_intensity=0.0,
    bloom_threshold=1.0,
    bloom_size=0.25,
    exposure=0.0,
)


class RenderView:
    """
    The renderer's main view configuration.

    Wraps the RenderMainView block of a renderer configuration tree. Hosts
    with their own renderer can pass its root block; otherwise an in-memory
    tree is created.
    """

    def __init__(self, root: Optional[ConfigBlock] = None) -> None:
        """
        Initialize the view.

        Args:
            root: Renderer configuration root (None = fresh in-memory tree)
        """
        self._root = root if root is not None else ConfigBlock("Render")
        tone_mapping = self.view.get_config(TONE_MAPPING)
        if "exposure" not in tone_mapping.to_dict():
            tone_mapping.exposure = 0.0

    @property
    def root(self) -> ConfigBlock:
        return self._root

    @property
    def view(self) -> ConfigBlock:
        return self._root.get_config(MAIN_VIEW)

    @property
    def exposure(self) -> float:
        """Current tone-mapping exposure."""
        return self.view.get_config(TONE_MAPPING).exposure

    @exposure.setter
    def exposure(self, value: float) -> None:
        self.view.get_config(TONE_MAPPING).exposure = value

    def apply_profile(self, profile: RenderProfile) -> None:
        """
        Write every setting of a profile to the renderer.

        Args:
            profile: The profile to apply
        """
        bloom = self.view.get_config(BLOOM)
        bloom.enabled = profile.bloom_enabled
        bloom.intensity = profile.bloom_intensity
        bloom.size = profile.bloom_size
        self.view.get_config(BLOOM_THRESHOLD).threshold = profile.bloom_threshold

        tone_mapping = self.view.get_config(TONE_MAPPING)
        tone_mapping.enable = profile.tone_mapping_enabled
        tone_mapping.curve = profile.tone_mapping_curve
        if profile.exposure is not None:
            tone_mapping.exposure = profile.exposure

        logger.debug(f"Applied render profile: {profile}")

    def snapshot(self) -> Dict[str, Any]:
        """Serialize the main view configuration."""
        return self.view.to_dict()
