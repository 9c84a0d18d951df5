"""Exception hierarchy for blendr."""

from __future__ import annotations


class BlendrError(Exception):
    """Base exception for all blendr errors."""

    pass


class PreconditionError(BlendrError, ValueError):
    """Raised when an operation is called outside its contract.

    Examples: direction or continuity queries on an empty sequence,
    resampling to fewer than two slots, repositioning to an in-range
    key that no keyframe carries.
    """

    pass


class TypeMismatchError(BlendrError, TypeError):
    """Raised when two values cannot be blended with each other."""

    def __init__(self, a: object, b: object) -> None:
        self.left_type = type(a)
        self.right_type = type(b)
        super().__init__(
            f"Cannot blend {self.left_type.__name__} with {self.right_type.__name__}"
        )
