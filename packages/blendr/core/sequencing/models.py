"""Keyframe sequencing models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeFloat, NonNegativeInt


class PlaybackDirection(str, Enum):
    """Net traversal direction of a keyframe sequence."""

    FORWARD = "forward"
    BACKWARD = "backward"


class Keyframe(BaseModel):
    """A (key, value) pair.

    The key is a non-negative ordinal or timestamp. Integral keys are the
    norm; fractional keys appear during sub-step playback and carry the
    blend weight in their fractional part.

    The value is an opaque payload: a string, a rendered frame, or any
    blendable value.

    Example:
        >>> kf = Keyframe(key=0, value="|")
        >>> kf.to_pair()
        (0, '|')
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: NonNegativeInt | NonNegativeFloat
    value: Any = None

    def to_pair(self) -> tuple[int | float, Any]:
        """Return the keyframe as a plain (key, value) tuple."""
        return (self.key, self.value)
