"""Playback timing - tick delay and millisecond/step conversion.

Steps are key units at roughly 30 Hz: 100 ms is 3 steps, 3 steps are 100 ms.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from blendr.core.utils.math import clamp

MS_PER_STEP = 33  # ms -> steps divisor
STEP_DURATION_MS = 33.334  # steps -> ms multiplier


def ms_to_steps(ms: int, ms_per_step: int = MS_PER_STEP) -> int:
    """Convert milliseconds to whole steps.

    Example:
        >>> ms_to_steps(100)
        3
    """
    return int(ms // ms_per_step)


def steps_to_ms(steps: int, step_duration_ms: float = STEP_DURATION_MS) -> int:
    """Convert steps to whole milliseconds.

    Example:
        >>> steps_to_ms(3)
        100
    """
    return int(step_duration_ms * steps)


class PlaybackTiming(BaseModel):
    """Delay between playback ticks, adjustable at runtime within bounds."""

    delay_ms: int = Field(default=160, description="Milliseconds per playback step")
    min_delay_ms: int = Field(default=1, ge=1, description="Fastest allowed delay")
    max_delay_ms: int = Field(default=10000, ge=1, description="Slowest allowed delay")

    @model_validator(mode="after")
    def _validate_bounds(self) -> PlaybackTiming:
        """Validate that the delay lies inside its bounds."""
        if self.min_delay_ms > self.max_delay_ms:
            raise ValueError("min_delay_ms must be <= max_delay_ms")
        if not self.min_delay_ms <= self.delay_ms <= self.max_delay_ms:
            raise ValueError(
                f"delay_ms must be in [{self.min_delay_ms}, {self.max_delay_ms}], "
                f"got {self.delay_ms}"
            )
        return self

    @property
    def delay_s(self) -> float:
        return self.delay_ms / 1000.0

    def set_delay(self, delay_ms: int) -> int:
        """Set the delay, clamped to bounds. Returns the applied delay."""
        self.delay_ms = clamp(delay_ms, self.min_delay_ms, self.max_delay_ms)
        return self.delay_ms

    def faster(self, step: int = 1) -> int:
        """Shorten the delay by ``step`` ms."""
        return self.set_delay(self.delay_ms - step)

    def slower(self, step: int = 1) -> int:
        """Lengthen the delay by ``step`` ms."""
        return self.set_delay(self.delay_ms + step)
