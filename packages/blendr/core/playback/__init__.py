"""Playback - deferred-command controller, timing and host loop."""

from blendr.core.playback.commands import (
    BackwardCommand,
    Command,
    CommandKind,
    CycleCommand,
    ForwardCommand,
    RenderCommand,
    RepositionCommand,
    RestartCommand,
    ReverseCommand,
)
from blendr.core.playback.controller import PlaybackController
from blendr.core.playback.host import InputEvent, PlaybackHost
from blendr.core.playback.timing import PlaybackTiming, ms_to_steps, steps_to_ms

__all__ = [
    "BackwardCommand",
    "Command",
    "CommandKind",
    "CycleCommand",
    "ForwardCommand",
    "InputEvent",
    "PlaybackController",
    "PlaybackHost",
    "PlaybackTiming",
    "RenderCommand",
    "RepositionCommand",
    "RestartCommand",
    "ReverseCommand",
    "ms_to_steps",
    "steps_to_ms",
]
