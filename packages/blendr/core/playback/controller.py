"""Playback controller.

The controller owns a keyframe sequence and a data track. Collaborators
(input handlers, render triggers) register intent by queuing commands;
nothing changes until ``update()`` applies the queue once per tick. This
keeps every mutation of the sequence inside a single, ordered step.

Not thread-safe: a host running several threads must serialize all calls
into one controller instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from blendr.core.errors import PreconditionError
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
from blendr.core.sequencing.sequence import DataTrack, KeyframeSequence

logger = logging.getLogger(__name__)

SequenceCallback = Callable[[KeyframeSequence], None]


def _noop(_sequence: KeyframeSequence) -> None:
    pass


class PlaybackController:
    """Deferred-command controller around a KeyframeSequence.

    Example:
        >>> controller = PlaybackController(KeyframeSequence.from_pairs([(0, "a"), (1, "b")]))
        >>> controller.cycle(1)
        >>> controller.anim.current.key  # Nothing applied yet
        0
        >>> controller.update()
        >>> controller.anim.current.key
        1
    """

    def __init__(
        self,
        anim: KeyframeSequence,
        data: DataTrack | None = None,
        on_begin: SequenceCallback | None = None,
        on_end: SequenceCallback | None = None,
        on_render: SequenceCallback | None = None,
        check_continuity: bool = False,
    ) -> None:
        """Initialize controller.

        Args:
            anim: Sequence owned by this controller
            data: Auxiliary track in the same key space
            on_begin: Called after a tick that lands on the smallest key
            on_end: Called after a tick that lands on the largest key
            on_render: Called when a queued render command is applied
            check_continuity: Run the continuity check on every tick
        """
        self.anim = anim
        self.data = data if data is not None else DataTrack()
        self.on_begin: SequenceCallback = on_begin or _noop
        self.on_end: SequenceCallback = on_end or _noop
        self.on_render: SequenceCallback = on_render or _noop
        self.check_continuity = check_continuity
        self._pending: dict[CommandKind, Command] = {}

    @property
    def pending(self) -> list[Command]:
        """Queued commands in application order."""
        return list(self._pending.values())

    def queue(self, command: Command) -> None:
        """Queue a command, replacing any pending command of the same kind.

        A replaced command moves to the end of the queue.
        """
        replaced = self._pending.pop(command.kind, None)
        self._pending[command.kind] = command
        if replaced is not None:
            logger.debug(f"Replaced pending {command.kind.value}: {replaced} -> {command}")
        else:
            logger.debug(f"Queued {command}")

    def cycle(self, steps: int = 1) -> None:
        self.queue(CycleCommand(steps=steps))

    def render(self) -> None:
        self.queue(RenderCommand())

    def restart(self) -> None:
        self.queue(RestartCommand())

    def forward(self) -> None:
        self.queue(ForwardCommand())

    def backward(self) -> None:
        self.queue(BackwardCommand())

    def reverse(self) -> None:
        self.queue(ReverseCommand())

    def reposition(self, key: int) -> None:
        self.queue(RepositionCommand(key=key))

    def update(self) -> None:
        """Apply queued commands, clear the queue and fire lifecycle callbacks.

        ``on_begin`` fires when the current key is the smallest key and
        ``on_end`` when it is the largest; both fire for a single keyframe.

        Raises:
            PreconditionError: If the sequence is empty
        """
        if not self.anim:
            raise PreconditionError("Cannot update a controller with an empty sequence")

        commands = self.pending
        self._pending.clear()
        for command in commands:
            command.apply(self)

        if self.check_continuity and len(self.anim) >= 2:
            self.anim.check_continuity()

        current = self.anim.current.key
        if current == self.anim.min_key():
            self.on_begin(self.anim)
        if current == self.anim.max_key():
            self.on_end(self.anim)

    def current_payload(self, default: Any = None) -> Any:
        """Data track payload for the current keyframe's key."""
        return self.data.payload_for(self.anim.current.key, default)
