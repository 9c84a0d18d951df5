"""Status-line rendering of a keyframe sequence.

Read-only: formatting never changes the sequence.
"""

from __future__ import annotations

from blendr.core.sequencing.models import Keyframe
from blendr.core.sequencing.sequence import KeyframeSequence
from blendr.core.utils.math import fractional_part


def _format_keyframe(kf: Keyframe) -> str:
    return f"{kf.key:>3}.{kf.value}"


def format_status(sequence: KeyframeSequence, delay_ms: int | None = None) -> str:
    """Describe the current keyframe, the upcoming ones and the direction.

    Args:
        sequence: Sequence to describe
        delay_ms: Playback delay to include, if known

    Returns:
        Single status line

    Example:
        >>> format_status(KeyframeSequence.from_pairs([(0, "|"), (1, "/")]))
        'current[   0.| ] next[   1./ ] forward=1 backward=0 blend=0.00'
    """
    if not sequence:
        return "<empty>"

    current = sequence.current
    upcoming = ", ".join(_format_keyframe(kf) for kf in list(sequence)[1:])
    forward = sequence.is_forward()

    parts = [
        f"current[ {_format_keyframe(current)} ]",
        f"next[ {upcoming} ]",
        f"forward={int(forward)}",
        f"backward={int(not forward)}",
    ]
    if delay_ms is not None:
        parts.append(f"delay={delay_ms:>4}")
    parts.append(f"blend={fractional_part(current.key):.2f}")
    return " ".join(parts)
