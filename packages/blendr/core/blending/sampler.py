"""Positional sampling of value sequences.

Positions are fractional storage indices, not keys: position 1.5 lies
halfway between the second and third element. Callers that want
key-space lookups must map keys to indices first.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from blendr.core.blending.mixer import ValueCategory, ensure_compatible, mix

if TYPE_CHECKING:
    from blendr.core.sequencing.sequence import KeyframeSequence

T = TypeVar("T")


def sample_at(
    values: Sequence[T],
    position: float,
    default: T | None = None,
    category: ValueCategory | None = None,
) -> T | None:
    """Sample a sequence at a fractional index.

    Args:
        values: Ordered values (list, tuple, deque, numpy array...)
        position: Fractional index into values
        default: Returned when values is empty
        category: Blend category forwarded to mix()

    Returns:
        The first element for position <= 0, the last element for
        position >= len - 1, otherwise the blend of the two bracketing
        elements. ``default`` for an empty sequence.

    Raises:
        TypeMismatchError: If the bracketing elements cannot be blended

    Example:
        >>> sample_at([10, 20, 40, 20, 10], 2.5)
        30.0
    """
    size = len(values)
    if size == 0:
        return default
    if size == 1:
        return values[0]

    # Clamp to range
    if position <= 0:
        return values[0]
    if position >= size - 1:
        return values[size - 1]

    index = math.floor(position)
    a = values[index]
    b = values[index + 1]
    ensure_compatible(a, b)
    return mix(a, b, position - index, category)


def sample_sequence(
    sequence: KeyframeSequence,
    position: float,
    default: Any = None,
) -> Any:
    """Sample the values of a keyframe sequence in storage order.

    Position 0 is the current keyframe and positions count along the
    playback flow, so the result follows rotation and reversal. Use
    resample_sequence() for a key-ordered view that ignores playback state.
    """
    return sample_at(sequence.values(), position, default)
