"""Keyframe sequence state machine.

A KeyframeSequence keeps keyframes in *storage order*, which is distinct
from key order. Storage position 0 is always the current keyframe, position
1 the next one, and so on. Playback advances by rotating storage order;
keys never change.

Direction is derived rather than stored: the first three storage keys are
three points on a circular timeline, and the parity of their ascending
pairs tells forward from backward traversal regardless of where the cursor
sits on the loop:

    keys      ascending pairs   direction
    0 1 2     3                 forward
    1 2 0     1                 forward
    2 0 1     1                 forward
    0 2 1     2                 backward
    2 1 0     0                 backward
    1 0 2     2                 backward
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any, Self

from blendr.core.errors import PreconditionError
from blendr.core.sequencing.models import Keyframe, PlaybackDirection

logger = logging.getLogger(__name__)


class KeyframeSequence:
    """Ordered, mutable, cyclic collection of keyframes.

    Example:
        >>> seq = KeyframeSequence.from_pairs([(0, "|"), (1, "/"), (2, "-"), (3, "\\\\")])
        >>> seq.cycle(1)
        >>> seq.keys()
        [1, 2, 3, 0]
        >>> seq.reverse()
        >>> seq.keys()
        [1, 0, 3, 2]
        >>> seq.restart()
        >>> seq.current.key
        0
    """

    def __init__(self, keyframes: Iterable[Keyframe] = ()) -> None:
        self._frames: deque[Keyframe] = deque(keyframes)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int | float, Any]]) -> Self:
        """Build a sequence from (key, value) pairs, keeping their order."""
        return cls(Keyframe(key=key, value=value) for key, value in pairs)

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Keyframe]:
        return iter(self._frames)

    def __getitem__(self, index: int) -> Keyframe:
        return self._frames[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyframeSequence):
            return NotImplemented
        return type(self) is type(other) and list(self._frames) == list(other._frames)

    def __repr__(self) -> str:
        pairs = ", ".join(f"({kf.key}, {kf.value!r})" for kf in self._frames)
        return f"{type(self).__name__}([{pairs}])"

    def copy(self) -> Self:
        """Return a shallow copy with the same storage order."""
        return type(self)(self._frames)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _require_keyframes(self, minimum: int, operation: str) -> None:
        if len(self._frames) < minimum:
            raise PreconditionError(
                f"{operation} requires at least {minimum} keyframe(s), got {len(self._frames)}"
            )

    @property
    def current(self) -> Keyframe:
        """The keyframe at storage position 0."""
        self._require_keyframes(1, "current")
        return self._frames[0]

    def keys(self) -> list[int | float]:
        """Keys in storage order."""
        return [kf.key for kf in self._frames]

    def values(self) -> list[Any]:
        """Values in storage order."""
        return [kf.value for kf in self._frames]

    def min_key(self) -> int | float:
        self._require_keyframes(1, "min_key")
        return min(self.keys())

    def max_key(self) -> int | float:
        self._require_keyframes(1, "max_key")
        return max(self.keys())

    def key_span(self) -> int | float:
        """Distance between the smallest and largest key (0 when empty)."""
        if not self._frames:
            return 0
        return self.max_key() - self.min_key()

    def frame_at(self, position: int) -> Keyframe | None:
        """Cyclic storage lookup.

        Positions wrap around the sequence in both directions, so -1 is the
        last keyframe and len(self) is the first again.

        Returns:
            Keyframe at the wrapped position, or None for an empty sequence
        """
        if not self._frames:
            return None
        return self._frames[position % len(self._frames)]

    # ------------------------------------------------------------------
    # Direction
    # ------------------------------------------------------------------

    def is_forward(self) -> bool:
        """Whether the sequence traverses its keys forward.

        Sequences with fewer than three keyframes are forward by convention.

        Raises:
            PreconditionError: If the sequence is empty
        """
        self._require_keyframes(1, "direction")
        if len(self._frames) <= 2:
            return True

        k1, k2, k3 = (self._frames[i].key for i in range(3))
        ascending = int(k1 < k2) + int(k2 < k3) + int(k1 < k3)
        return ascending % 2 == 1

    def is_backward(self) -> bool:
        return not self.is_forward()

    def direction(self) -> PlaybackDirection:
        return PlaybackDirection.FORWARD if self.is_forward() else PlaybackDirection.BACKWARD

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def reverse(self) -> None:
        """Flip the playback flow.

        The current keyframe stays in place; everything after it is
        reversed (4 5 0 1 2 3 -> 4 3 2 1 0 5). No-op for two keyframes or
        fewer.
        """
        if len(self._frames) <= 2:
            return
        current = self._frames.popleft()
        self._frames.reverse()
        self._frames.appendleft(current)

    def forward(self) -> None:
        """Make the sequence play forward (idempotent)."""
        if self.is_backward():
            self.reverse()

    def backward(self) -> None:
        """Make the sequence play backward (idempotent)."""
        if self.is_forward():
            self.reverse()

    def cycle(self, steps: int = 1) -> None:
        """Advance playback by rotating storage order left.

        Args:
            steps: Keyframes moved from the front to the back. 0 freezes
                playback; negative values rotate right.
        """
        if not self._frames or steps == 0:
            return
        self._frames.rotate(-steps)

    def reposition(self, key: int | float) -> None:
        """Rotate until the keyframe carrying ``key`` is current.

        The target is bounded by the sequence length, not by the key range:
        a key >= len(self) is ignored even if some keyframe carries it.

        Raises:
            PreconditionError: If the key is in bounds but no keyframe carries it
        """
        size = len(self._frames)
        if key >= size:
            logger.debug(f"Reposition to key {key} ignored: outside sequence length {size}")
            return

        for offset, kf in enumerate(self._frames):
            if kf.key == key:
                self.cycle(offset)
                return

        raise PreconditionError(f"No keyframe carries key {key}")

    def restart(self) -> None:
        """Rotate back to key 0."""
        self.reposition(0)

    # ------------------------------------------------------------------
    # Continuity
    # ------------------------------------------------------------------

    def check_continuity(self, key_range: tuple[int | float, int | float] | None = None) -> bool:
        """Check that the sequence forms a continuous loop.

        Sequences of three or more keyframes always pass. A pair passes when
        its keys are adjacent or are the two extremes of the key range.
        A failure is logged as a warning and never changes state.

        Args:
            key_range: (min, max) of the timeline the pair belongs to.
                Defaults to the sequence's own keys.

        Returns:
            True when continuous, False otherwise

        Raises:
            PreconditionError: If the sequence has fewer than two keyframes
        """
        self._require_keyframes(2, "check_continuity")
        if len(self._frames) > 2:
            return True

        k1, k2 = self._frames[0].key, self._frames[1].key
        distance = abs(k1 - k2)
        if key_range is None:
            span = self.key_span()
        else:
            span = key_range[1] - key_range[0]

        if distance <= 1 or distance == span:
            return True

        logger.warning(f"Continuity failed: keys {k1} and {k2} are {distance} apart (span {span})")
        return False


class DataTrack(KeyframeSequence):
    """Auxiliary (key, payload) track sharing a sequence's key space.

    Used to attach non-visual data such as audio triggers to keyframes.
    Rotation and repositioning behave exactly as for KeyframeSequence; the
    payloads are never blended.
    """

    def payload_for(self, key: int | float, default: Any = None) -> Any:
        """Payload of the first entry carrying ``key``, or ``default``."""
        for entry in self:
            if entry.key == key:
                return entry.value
        return default
