"""
Ratio value types.

Each type wraps a single NumPy floating scalar and tags it with its unit, so
an amplitude cannot be passed where a decibel value is expected (or vice
versa). Moving between kinds always goes through :mod:`decibel_ratio.convert`.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import numpy.typing as npt

from ._precision import FloatPrecision, as_scalar, precision_of


class _Ratio:
    """Immutable single-scalar value shared by the ratio kinds."""

    __slots__ = ("_value",)

    def __init__(self, value: Any, dtype: npt.DTypeLike | None = None) -> None:
        if isinstance(value, _Ratio):
            raise TypeError(
                f"Cannot construct {type(self).__name__} from "
                f"{type(value).__name__}; use a conversion function instead"
            )
        object.__setattr__(self, "_value", as_scalar(value, dtype))

    @property
    def value(self) -> np.floating:
        """The wrapped scalar, exactly as stored at construction."""
        return self._value

    @property
    def dtype(self) -> np.dtype:
        return self._value.dtype

    @property
    def precision(self) -> FloatPrecision:
        return precision_of(self._value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type, tuple[np.floating]]:
        """Rebuild through the constructor; slot state restore would hit __setattr__."""
        return (type(self), (self._value,))

    def __eq__(self, other: object) -> bool:
        # Different kinds never compare equal, even with equal values.
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({float(self._value)!r}, dtype={self.dtype.name})"


class AmplitudeRatio(_Ratio):
    """
    A linear amplitude ratio.

    For samples normalized so that 1.0 is full scale, converting to decibels
    gives dBFS. Zero and negative values are accepted.

    Parameters
    ----------
    value : float or np.floating
        The ratio. ``np.float32``/``np.float64`` scalars keep their precision;
        other real numbers are stored as ``np.float64``.
    dtype : dtype-like, optional
        Cast the value to this precision (``np.float32`` or ``np.float64``).

    Examples
    --------
    >>> AmplitudeRatio(0.5).to_decibels().decibel_value  # ~ -6.02 dBFS
    """

    __slots__ = ()

    @property
    def amplitude_value(self) -> np.floating:
        return self._value

    def to_decibels(self, ref: float = 1.0) -> DecibelRatio:
        from .convert import amplitude_to_db

        return amplitude_to_db(self, ref=ref)


class PowerRatio(_Ratio):
    """
    A linear power (energy) ratio, i.e. an amplitude ratio squared.

    Parameters
    ----------
    value : float or np.floating
        The ratio.
    dtype : dtype-like, optional
        Cast the value to this precision.
    """

    __slots__ = ()

    @property
    def power_value(self) -> np.floating:
        return self._value

    def to_decibels(self, ref: float = 1.0) -> DecibelRatio:
        from .convert import power_to_db

        return power_to_db(self, ref=ref)


class DecibelRatio(_Ratio):
    """
    A logarithmic ratio in decibels.

    ``-inf`` represents silence (a zero amplitude).

    Parameters
    ----------
    value : float or np.floating
        The level in dB.
    dtype : dtype-like, optional
        Cast the value to this precision.

    Examples
    --------
    >>> DecibelRatio(10.0).to_amplitude().amplitude_value  # ~ 3.162
    """

    __slots__ = ()

    @property
    def decibel_value(self) -> np.floating:
        return self._value

    def to_amplitude(self, ref: float = 1.0) -> AmplitudeRatio:
        from .convert import db_to_amplitude

        return db_to_amplitude(self, ref=ref)

    def to_power(self, ref: float = 1.0) -> PowerRatio:
        from .convert import db_to_power

        return db_to_power(self, ref=ref)
