"""Deferred controller commands.

Each command is a small tagged value. The controller keeps at most one
pending command per CommandKind, so queuing cycle(1) twice before a tick
leaves a single cycle in the queue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from blendr.core.playback.controller import PlaybackController


class CommandKind(str, Enum):
    """Identity of a queued operation."""

    CYCLE = "cycle"
    RENDER = "render"
    RESTART = "restart"
    FORWARD = "forward"
    BACKWARD = "backward"
    REVERSE = "reverse"
    REPOSITION = "reposition"


@dataclass(frozen=True)
class Command:
    """Base class for queued commands."""

    kind: ClassVar[CommandKind]

    def apply(self, controller: PlaybackController) -> None:
        raise NotImplementedError(f"{type(self).__name__} must implement apply()")


@dataclass(frozen=True)
class CycleCommand(Command):
    """Advance playback by ``steps`` keyframes (0 freezes)."""

    kind: ClassVar[CommandKind] = CommandKind.CYCLE
    steps: int = 1

    def apply(self, controller: PlaybackController) -> None:
        controller.anim.cycle(self.steps)


@dataclass(frozen=True)
class RenderCommand(Command):
    kind: ClassVar[CommandKind] = CommandKind.RENDER

    def apply(self, controller: PlaybackController) -> None:
        controller.on_render(controller.anim)


@dataclass(frozen=True)
class RestartCommand(Command):
    kind: ClassVar[CommandKind] = CommandKind.RESTART

    def apply(self, controller: PlaybackController) -> None:
        controller.anim.restart()


@dataclass(frozen=True)
class ForwardCommand(Command):
    kind: ClassVar[CommandKind] = CommandKind.FORWARD

    def apply(self, controller: PlaybackController) -> None:
        controller.anim.forward()


@dataclass(frozen=True)
class BackwardCommand(Command):
    kind: ClassVar[CommandKind] = CommandKind.BACKWARD

    def apply(self, controller: PlaybackController) -> None:
        controller.anim.backward()


@dataclass(frozen=True)
class ReverseCommand(Command):
    kind: ClassVar[CommandKind] = CommandKind.REVERSE

    def apply(self, controller: PlaybackController) -> None:
        controller.anim.reverse()


@dataclass(frozen=True)
class RepositionCommand(Command):
    """Rotate until ``key`` is current."""

    kind: ClassVar[CommandKind] = CommandKind.REPOSITION
    key: int = 0

    def apply(self, controller: PlaybackController) -> None:
        controller.anim.reposition(self.key)
