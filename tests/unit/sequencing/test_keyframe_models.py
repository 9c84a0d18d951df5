"""Tests for keyframe models."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from blendr.core.sequencing import Keyframe, PlaybackDirection


class TestKeyframe:
    """Test the Keyframe model."""

    def test_integer_key_stays_integer(self):
        """Integral keys are not coerced to float."""
        kf = Keyframe(key=3, value="-")

        assert kf.key == 3
        assert isinstance(kf.key, int)

    def test_fractional_key(self):
        """Sub-step keys are allowed."""
        assert Keyframe(key=1.5, value="/").key == pytest.approx(1.5)

    def test_negative_key_rejected(self):
        """Keys are non-negative."""
        with pytest.raises(ValidationError):
            Keyframe(key=-1, value="|")

    def test_value_defaults_to_none(self):
        """A keyframe may carry no payload."""
        assert Keyframe(key=0).value is None

    def test_arbitrary_payloads(self):
        """Values are opaque and may be any object."""
        payload = object()

        assert Keyframe(key=0, value=payload).value is payload

    def test_frozen(self):
        """Keyframes are immutable."""
        kf = Keyframe(key=0, value="|")

        with pytest.raises(ValidationError):
            kf.key = 1  # type: ignore[misc]

    def test_to_pair(self):
        """to_pair returns a plain tuple."""
        assert Keyframe(key=2, value="-").to_pair() == (2, "-")

    def test_equality_by_fields(self):
        """Keyframes compare by key and value."""
        assert Keyframe(key=1, value="/") == Keyframe(key=1, value="/")
        assert Keyframe(key=1, value="/") != Keyframe(key=1, value="-")


def test_playback_direction_values():
    """Directions serialize to lowercase names."""
    assert PlaybackDirection.FORWARD.value == "forward"
    assert PlaybackDirection("backward") is PlaybackDirection.BACKWARD
