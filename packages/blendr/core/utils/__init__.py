"""Shared utilities for blendr."""

from blendr.core.utils.json import read_json
from blendr.core.utils.math import clamp, fractional_part

__all__ = [
    "clamp",
    "fractional_part",
    "read_json",
]
