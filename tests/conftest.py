"""Shared pytest fixtures for blendr tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from blendr.core.sequencing import DataTrack, KeyframeSequence

SPINNER_GLYPHS = ["|", "/", "-", "\\"]

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Sequence Fixtures
# ============================================================================


@pytest.fixture
def spinner() -> KeyframeSequence:
    """Four-glyph spinner keyed 0..3."""
    return KeyframeSequence.from_pairs(enumerate(SPINNER_GLYPHS))


@pytest.fixture
def six_frames() -> KeyframeSequence:
    """Six keyframes keyed 0..5 with letter values."""
    return KeyframeSequence.from_pairs(enumerate("abcdef"))


@pytest.fixture
def pulse_values() -> list[int]:
    """Rise-and-fall values used by the sampling tests."""
    return [10, 20, 40, 20, 10]


@pytest.fixture
def sound_track() -> DataTrack:
    """Data track with a trigger on the first and last spinner keys."""
    return DataTrack.from_pairs([(0, "tick"), (3, "tock")])


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logging():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
