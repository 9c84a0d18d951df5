"""Sequence resampling.

Resampling builds a new sequence of a different length in two passes:

1. Every output slot samples the input at an evenly spaced fractional
   position.
2. Every original element is written back verbatim to its proportionally
   mapped slot, so blending error never touches a value that already
   existed.

Mapped slots are truncated to integers. When the output is shorter than
the input, two originals can map to the same slot; the later one wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar

from blendr.core.blending.mixer import ValueCategory
from blendr.core.blending.sampler import sample_at
from blendr.core.errors import PreconditionError
from blendr.core.sequencing.sequence import KeyframeSequence

logger = logging.getLogger(__name__)

T = TypeVar("T")

MIN_RESAMPLE_SIZE = 2


def mapped_index(index: int, size: int, new_size: int) -> int:
    """Output slot of original element ``index`` when resampling size -> new_size.

    Example:
        >>> [mapped_index(j, 5, 16) for j in range(5)]
        [0, 3, 7, 11, 15]
    """
    if size < 2:
        return 0
    return int(index * (new_size - 1) / (size - 1))


def resample(
    values: Sequence[T],
    new_size: int,
    default: T | None = None,
    category: ValueCategory | None = None,
) -> list[T | None]:
    """Resample values to ``new_size`` elements.

    The input is never modified.

    Args:
        values: Ordered values to resample
        new_size: Number of output elements. Must be >= 2.
        default: Fill value when values is empty
        category: Blend category forwarded to the sampler

    Returns:
        New list of new_size elements

    Raises:
        PreconditionError: If new_size < 2
        TypeMismatchError: If neighbouring values cannot be blended

    Example:
        >>> resample([0.0, 1.0], 5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if new_size < MIN_RESAMPLE_SIZE:
        raise PreconditionError(f"new_size must be >= {MIN_RESAMPLE_SIZE}, got {new_size}")

    size = len(values)
    if size == 0:
        return [default] * new_size

    span = size - 1
    last = new_size - 1

    # In-betweens
    result = [sample_at(values, span * i / last, default, category) for i in range(new_size)]

    # Restore original keyframes at their mapped slots
    if size > 1:
        for j in range(size):
            result[mapped_index(j, size, new_size)] = values[j]

    logger.debug(f"Resampled {size} values to {new_size}")
    return result


def resample_sequence(sequence: KeyframeSequence, new_size: int) -> KeyframeSequence:
    """Resample a keyframe sequence to ``new_size`` keyframes.

    Values are taken in key order, not storage order: the result is a new
    timeline keyed 0..new_size-1, so it must not depend on where playback
    currently sits or which way it runs. sample_sequence() is the
    playback-relative counterpart. The input sequence is untouched.

    Raises:
        PreconditionError: If new_size < 2
    """
    ordered: list[Any] = [kf.value for kf in sorted(sequence, key=lambda kf: kf.key)]
    return KeyframeSequence.from_pairs(enumerate(resample(ordered, new_size)))
