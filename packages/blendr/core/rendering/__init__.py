"""Read-only presentation of sequence state."""

from blendr.core.rendering.status import format_status

__all__ = ["format_status"]
