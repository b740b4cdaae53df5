"""
Shared validation utilities for parameter checking.

These utilities provide consistent error messages across the library.
"""

from __future__ import annotations

import math
from typing import Any


def validate_positive_finite(value: float, name: str) -> None:
    """
    Validate that a value is positive and finite.

    Parameters
    ----------
    value : float
        Value to validate.
    name : str
        Parameter name for error message.

    Raises
    ------
    ValueError
        If value is not positive or not finite.
    """
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be positive and finite, got {value}")


def validate_kind(value: Any, expected: type, name: str) -> None:
    """
    Validate that a value is an instance of the expected ratio kind.

    Parameters
    ----------
    value : Any
        Value to validate.
    expected : type
        Ratio class the value must be an instance of.
    name : str
        Parameter name for error message.

    Raises
    ------
    TypeError
        If value is not an instance of ``expected``.
    """
    if not isinstance(value, expected):
        raise TypeError(
            f"{name} must be {expected.__name__}, got {type(value).__name__}"
        )
