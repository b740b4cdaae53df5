"""
Floating-point precision handling.

A :class:`FloatPrecision` bundles everything a conversion formula needs from
a floating-point type: the NumPy scalar type, typed constants, and the
``log10`` and ``power`` functions evaluated in that type. Formulas are
written once against this interface and instantiated for ``float32`` and
``float64`` without crossing precisions.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any

import numpy as np
import numpy.typing as npt


@dataclass(frozen=True)
class FloatPrecision:
    """
    A supported floating-point precision.

    Parameters
    ----------
    name : str
        Short name ("single" or "double").
    scalar_type : type
        NumPy scalar type (``np.float32`` or ``np.float64``).
    """

    name: str
    scalar_type: type[np.floating]

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.scalar_type)

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    def cast(self, value: Any) -> np.floating:
        """Convert a scalar into this precision."""
        return self.scalar_type(value)

    def log10(self, x: np.floating) -> np.floating:
        """Base-10 logarithm evaluated in this precision."""
        return np.log10(x, dtype=self.scalar_type)

    def power(self, base: np.floating, exponent: np.floating) -> np.floating:
        """``base ** exponent`` evaluated in this precision."""
        return np.power(base, exponent, dtype=self.scalar_type)


SINGLE = FloatPrecision("single", np.float32)
DOUBLE = FloatPrecision("double", np.float64)

SUPPORTED_PRECISIONS: tuple[FloatPrecision, ...] = (SINGLE, DOUBLE)

_BY_DTYPE = {p.dtype: p for p in SUPPORTED_PRECISIONS}


def get_precision(dtype: npt.DTypeLike) -> FloatPrecision:
    """
    Look up the precision for a dtype specifier.

    Parameters
    ----------
    dtype : dtype-like
        ``np.float32``, ``np.float64``, ``float``, ``"float32"``, ``"float64"``
        or an equivalent ``np.dtype``.

    Returns
    -------
    FloatPrecision
        The matching precision.

    Raises
    ------
    ValueError
        If the dtype is not a supported floating-point type.
    """
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise ValueError(f"Unknown dtype: {dtype!r}") from exc

    precision = _BY_DTYPE.get(resolved)
    if precision is None:
        supported = ", ".join(str(p.dtype) for p in SUPPORTED_PRECISIONS)
        raise ValueError(
            f"Unsupported dtype: '{resolved}'. Supported: {supported}"
        )
    return precision


def as_scalar(value: Any, dtype: npt.DTypeLike | None = None) -> np.floating:
    """
    Coerce a number into a supported NumPy floating scalar.

    With ``dtype=None``, ``np.float32`` and ``np.float64`` scalars are
    returned unchanged and other real numbers become ``np.float64`` (exact
    for Python floats). With an explicit dtype the value is cast into it.

    Raises
    ------
    TypeError
        If value is not a real scalar.
    ValueError
        If value (or dtype) has an unsupported floating-point precision, or
        value is an integer too large to represent in that precision.
    """
    if isinstance(value, np.ndarray):
        if value.ndim != 0:
            raise TypeError(
                f"Expected a scalar, got array with shape {value.shape}"
            )
        value = value[()]

    if isinstance(value, np.generic):
        if not isinstance(value, (np.floating, np.integer, np.bool_)):
            raise ValueError(f"Unsupported dtype: '{value.dtype}'")
    elif not isinstance(value, Real):
        raise TypeError(f"Expected a real number, got {type(value).__name__}")

    if dtype is not None:
        precision = get_precision(dtype)
    elif isinstance(value, np.floating):
        precision = get_precision(value.dtype)
    else:
        precision = DOUBLE

    try:
        return precision.cast(value)
    except OverflowError as exc:
        raise ValueError(
            f"value is out of range for {precision.dtype}, got {value}"
        ) from exc


def precision_of(value: np.floating) -> FloatPrecision:
    """Return the precision of a supported NumPy floating scalar."""
    return _BY_DTYPE[value.dtype]
