"""
Data models for the lighting module.

Defines the animator states and the module configuration.
"""

from dataclasses import dataclass, field
from enum import Enum

from dynamic_lighting.core.render import RenderProfile, LIT_PROFILE, DEFAULT_PROFILE


class AnimatorState(Enum):
    """State of the exposure animator.

    Transitions:
        start:          IDLE/CONVERGING -> CONVERGING (previous loop cancelled)
        tick:           CONVERGING -> CONVERGING
        reached-target: CONVERGING -> IDLE (value snapped to target)
        cancel:         any -> IDLE (value left where it is)
    """

    IDLE = "idle"
    CONVERGING = "converging"


FRAME_INTERVAL_MS = 1000 / 60  # 60 Hz
EXPOSURE_STEP = 0.02


@dataclass
class LightingConfig:
    """Configuration for the dynamic lighting module."""

    version: int = 1
    frame_interval_ms: float = FRAME_INTERVAL_MS  # Time between animation ticks
    exposure_step: float = EXPOSURE_STEP          # Exposure change per tick
    default_exposure: float = 0.0                 # Used when no zone overrides exposure
    exposure_key: str = "exposure"                # Zone property holding the exposure
    lit_profile: RenderProfile = field(default=LIT_PROFILE)
    default_profile: RenderProfile = field(default=DEFAULT_PROFILE)

    def validate(self) -> None:
        """
        Check values the animator depends on.

        Raises:
            ValueError: If the step or the interval is not positive
        """
        if self.exposure_step <= 0:
            raise ValueError(f"exposure_step must be positive, got {self.exposure_step}")
        if self.frame_interval_ms <= 0:
            raise ValueError(f"frame_interval_ms must be positive, got {self.frame_interval_ms}")

    def to_dict(self) -> dict:
        """Serialize to dict."""
        return {
            "version": self.version,
            "frame_interval_ms": self.frame_interval_ms,
            "exposure_step": self.exposure_step,
            "default_exposure": self.default_exposure,
            "exposure_key": self.exposure_key,
            "lit_profile": self.lit_profile.to_dict(),
            "default_profile": self.default_profile.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LightingConfig":
        """Deserialize from dict."""
        return cls(
            version=data.get("version", 1),
            frame_interval_ms=data.get("frame_interval_ms", FRAME_INTERVAL_MS),
            exposure_step=data.get("exposure_step", EXPOSURE_STEP),
            default_exposure=data.get("default_exposure", 0.0),
            exposure_key=data.get("exposure_key", "exposure"),
            lit_profile=RenderProfile.from_dict(data.get("lit_profile", {}), LIT_PROFILE),
            default_profile=RenderProfile.from_dict(
                data.get("default_profile", {}), DEFAULT_PROFILE
            ),
        )
