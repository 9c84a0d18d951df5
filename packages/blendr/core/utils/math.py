"""Math utilities for common operations."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def fractional_part(x: float) -> float:
    """Return the fractional part of x (truncated toward zero)."""
    return float(x - math.trunc(x))
