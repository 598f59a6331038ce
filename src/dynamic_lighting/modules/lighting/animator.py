"""Smooth exposure transitions.

The ExposureAnimator moves the renderer's exposure toward a target by a fixed
step at a fixed cadence. The loop is a recurring callback on the injected
Scheduler, never a thread, and at most one loop is active at a time.
"""

import logging
import math
from typing import Optional, Protocol

from dynamic_lighting.core.timers import Scheduler, TimerHandle

from .models import AnimatorState, EXPOSURE_STEP, FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class ExposureSurface(Protocol):
    """Anything with a readable and writable exposure (e.g. RenderView)."""

    exposure: float


class ExposureAnimator:
    """State machine converging the renderer exposure on a target."""

    def __init__(
        self,
        scheduler: Scheduler,
        render: Optional[ExposureSurface] = None,
        step: float = EXPOSURE_STEP,
        interval_ms: float = FRAME_INTERVAL_MS,
    ) -> None:
        """Initialize an idle animator.

        Args:
            scheduler: Timer facility driving the ticks.
            render: Renderer exposure surface; None disables animation.
            step: Exposure change per tick.
            interval_ms: Milliseconds between ticks.
        """
        self._scheduler = scheduler
        self._render = render
        self.step = step
        self.interval_ms = interval_ms

        self.state = AnimatorState.IDLE
        self.current: float = render.exposure if render is not None else 0.0
        self.target: Optional[float] = None
        self._handle: Optional[TimerHandle] = None

    @property
    def is_active(self) -> bool:
        """Check if a convergence loop is running."""
        return self.state is AnimatorState.CONVERGING

    @property
    def has_renderer(self) -> bool:
        return self._render is not None

    def attach_renderer(self, render: Optional[ExposureSurface]) -> None:
        """Hand over (or drop) the renderer after construction.

        Dropping the renderer cancels a running loop.
        """
        if render is None:
            self.stop()
        self._render = render
        logger.debug(f"Renderer {'attached' if render is not None else 'detached'}")

    def set_target(self, target: float) -> None:
        """Start converging on a new exposure.

        Reads the current renderer exposure as the starting point and replaces
        any running loop. Without a renderer nothing is scheduled.

        Args:
            target: Desired exposure (finite).

        Raises:
            ValueError: If target is not a finite number.
        """
        if not math.isfinite(target):
            raise ValueError(f"Exposure target must be finite, got {target}")

        if self._render is None:
            logger.debug(f"No renderer attached, ignoring exposure target {target}")
            return

        self._cancel_handle()

        self.current = self._render.exposure
        self.target = target
        self._handle = self._scheduler.schedule_recurring(self.tick, self.interval_ms)
        self.state = AnimatorState.CONVERGING

        logger.debug(f"Converging exposure {self.current:.3f} -> {target:.3f}")

    def tick(self) -> None:
        """Move one step toward the target and write the value to the renderer."""
        if self.state is not AnimatorState.CONVERGING or self.target is None:
            return

        if self.current > self.target:
            self.current -= self.step
        elif self.current < self.target:
            self.current += self.step

        if abs(self.current - self.target) < self.step * 2:
            self.current = self.target
            self._cancel_handle()
            self.state = AnimatorState.IDLE
            logger.debug(f"Exposure settled at {self.target:.3f}")

        if self._render is not None:
            self._render.exposure = self.current

    def stop(self) -> None:
        """Cancel the running loop, if any, leaving the exposure where it is."""
        if self._cancel_handle():
            logger.debug(f"Exposure animation stopped at {self.current:.3f}")
        self.state = AnimatorState.IDLE

    def _cancel_handle(self) -> bool:
        if self._handle is None:
            return False
        self._scheduler.cancel(self._handle)
        self._handle = None
        return True
