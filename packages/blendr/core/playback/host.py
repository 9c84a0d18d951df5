"""Event-driven playback host.

The host turns input events into controller commands and drives one
controller update per tick. Events only queue intent; the sequence changes
when the tick runs.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping
from enum import Enum

from blendr.core.playback.controller import PlaybackController
from blendr.core.playback.timing import PlaybackTiming, steps_to_ms

logger = logging.getLogger(__name__)


class InputEvent(str, Enum):
    """Host-level input events."""

    FORWARD = "forward"
    BACKWARD = "backward"
    RESTART = "restart"
    PAUSE = "pause"  # Toggle freeze
    FASTER = "faster"
    SLOWER = "slower"


class PlaybackHost:
    """Drives a PlaybackController from events and a tick delay."""

    def __init__(
        self,
        controller: PlaybackController,
        timing: PlaybackTiming | None = None,
        delay_step_ms: int = 1,
    ) -> None:
        self.controller = controller
        self.timing = timing or PlaybackTiming()
        self.delay_step_ms = delay_step_ms
        self.frozen = False
        self.tick_count = 0

    def handle(self, event: InputEvent) -> None:
        """Translate one input event into controller commands or timing changes."""
        if event is InputEvent.FORWARD:
            self.controller.forward()
        elif event is InputEvent.BACKWARD:
            self.controller.backward()
        elif event is InputEvent.RESTART:
            self.controller.restart()
        elif event is InputEvent.PAUSE:
            self.frozen = not self.frozen
            logger.info("Playback frozen" if self.frozen else "Playback resumed")
        elif event is InputEvent.FASTER:
            self.timing.faster(self.delay_step_ms)
        elif event is InputEvent.SLOWER:
            self.timing.slower(self.delay_step_ms)
        else:
            raise ValueError(f"Unknown input event: {event}")

    def tick(self) -> None:
        """Queue a render and a step (or a freeze), then update once."""
        self.controller.render()
        self.controller.cycle(0 if self.frozen else 1)
        self.controller.update()
        self.tick_count += 1

    def run(
        self,
        ticks: int,
        events: Mapping[int, Iterable[InputEvent]] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Play ``ticks`` ticks.

        Args:
            ticks: Number of ticks to play
            events: Events to dispatch, keyed by the tick count at which
                they arrive
            sleep: Delay function, called with the tick delay in seconds
        """
        events = events or {}
        logger.info(f"Playback started: {ticks} ticks at {self.timing.delay_ms} ms")

        for _ in range(ticks):
            for event in events.get(self.tick_count, ()):
                self.handle(event)
            self.tick()
            sleep(self.timing.delay_s)

        logger.info(
            f"Playback stopped after {self.tick_count} ticks "
            f"({steps_to_ms(self.tick_count)} ms of keys)"
        )
