"""Keyframe sequencing - models and the sequence state machine."""

from blendr.core.sequencing.models import Keyframe, PlaybackDirection
from blendr.core.sequencing.sequence import DataTrack, KeyframeSequence

__all__ = [
    "DataTrack",
    "Keyframe",
    "KeyframeSequence",
    "PlaybackDirection",
]
