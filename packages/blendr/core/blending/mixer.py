"""Pairwise value blending.

A single ``mix`` operation is polymorphic over two value categories:

- CONTINUOUS values (numbers, numpy arrays, tuples/lists of numbers) are
  linearly interpolated.
- DISCRETE values (booleans, text, enums, anything without a natural
  blend) switch hard from ``a`` to ``b`` at the midpoint.

Blend factors outside [0, 1] are clamped, and the endpoints always return
the original objects untouched.
"""

from __future__ import annotations

from enum import Enum
from numbers import Number
from typing import Any, TypeVar

import numpy as np

from blendr.core.errors import TypeMismatchError

T = TypeVar("T")

DISCRETE_SWITCH_POINT = 0.5


class ValueCategory(str, Enum):
    """How a value type behaves under blending."""

    CONTINUOUS = "continuous"  # Linear interpolation
    DISCRETE = "discrete"  # Hard switch at the midpoint


# Explicit registrations, most recent first
_registered_categories: list[tuple[type, ValueCategory]] = []


def register_value_category(value_type: type, category: ValueCategory) -> None:
    """Declare the blend category for a value type.

    Registrations take precedence over the built-in rules (except for
    booleans, which are always discrete) and match subclasses.

    Args:
        value_type: Type to register
        category: Category used for instances of value_type

    Example:
        register_value_category(Vec2, ValueCategory.CONTINUOUS)
    """
    unregister_value_category(value_type)
    _registered_categories.insert(0, (value_type, category))


def unregister_value_category(value_type: type) -> None:
    """Remove a registration made with register_value_category."""
    _registered_categories[:] = [
        (registered, category)
        for registered, category in _registered_categories
        if registered is not value_type
    ]


def value_category(value: Any) -> ValueCategory:
    """Resolve the blend category of a value.

    Args:
        value: Value to classify

    Returns:
        ValueCategory for the value
    """
    if isinstance(value, (bool, np.bool_)):
        return ValueCategory.DISCRETE

    for registered, category in _registered_categories:
        if isinstance(value, registered):
            return category

    if isinstance(value, (str, bytes, Enum)):
        return ValueCategory.DISCRETE
    if isinstance(value, (Number, np.ndarray, np.generic)):
        return ValueCategory.CONTINUOUS
    if isinstance(value, (tuple, list)) and value:
        if all(value_category(item) is ValueCategory.CONTINUOUS for item in value):
            return ValueCategory.CONTINUOUS

    return ValueCategory.DISCRETE


def _is_scalar_number(value: Any) -> bool:
    return isinstance(value, (Number, np.number)) and not isinstance(value, (bool, np.bool_))


def is_compatible(a: Any, b: Any) -> bool:
    """Check whether two values can be blended with each other.

    Scalar numbers of any kind blend together. Arrays need equal shapes,
    tuples and lists need the same container type and length with
    compatible items, and everything else needs related types.
    """
    if value_category(a) is not value_category(b):
        return False

    if _is_scalar_number(a) and _is_scalar_number(b):
        return True

    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return isinstance(a, np.ndarray) and isinstance(b, np.ndarray) and a.shape == b.shape

    if isinstance(a, (tuple, list)):
        return (
            type(a) is type(b)
            and len(a) == len(b)
            and all(is_compatible(x, y) for x, y in zip(a, b, strict=True))
        )

    return isinstance(a, type(b)) or isinstance(b, type(a))


def ensure_compatible(a: Any, b: Any) -> None:
    """Raise TypeMismatchError unless a and b can be blended together."""
    if not is_compatible(a, b):
        raise TypeMismatchError(a, b)


def _lerp(a: Any, b: Any, t: float) -> Any:
    if isinstance(a, (tuple, list)):
        blended = [_lerp(x, y, t) for x, y in zip(a, b, strict=True)]
        if hasattr(a, "_make"):
            return a._make(blended)  # namedtuple
        return type(a)(blended)
    return a * (1 - t) + b * t


def mix(a: T, b: T, t: float, category: ValueCategory | None = None) -> T:
    """Blend two values of the same type.

    Args:
        a: Value at t=0
        b: Value at t=1
        t: Blend factor; values outside [0, 1] are clamped
        category: Blend category; resolved from ``a`` when None

    Returns:
        ``a`` for t <= 0, ``b`` for t >= 1, otherwise the blend of both

    Example:
        >>> mix(-100.0, 0.0, 0.5)
        -50.0
        >>> mix("hello", "world", 0.5)
        'world'
    """
    if t <= 0.0:
        return a
    if t >= 1.0:
        return b

    if category is None:
        category = value_category(a)

    if category is ValueCategory.DISCRETE:
        return a if t < DISCRETE_SWITCH_POINT else b

    return _lerp(a, b, t)
