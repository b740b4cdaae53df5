"""
Decibel conversion utilities.

Provides functions to convert between amplitude/power ratios and decibels.

All conversions are total: zero, negative, infinite and NaN inputs produce the
IEEE-754 result (``-inf``, ``nan``, ``inf``) without raising or warning. The
result always has the same floating-point precision as the input.
"""

from __future__ import annotations

import numpy as np

from ._precision import FloatPrecision, precision_of
from ._validation import validate_kind, validate_positive_finite
from .ratio import AmplitudeRatio, DecibelRatio, PowerRatio

# Decibels per decade of amplitude and of power.
_AMPLITUDE_COEFFICIENT = 20.0
_POWER_COEFFICIENT = 10.0


def _cast_ref(p: FloatPrecision, ref: float) -> np.floating:
    """Cast the reference into the working precision and check it there."""
    with np.errstate(over="ignore", under="ignore"):
        ref_value = p.cast(ref)
    validate_positive_finite(ref_value, "ref")
    return ref_value


def _to_db(
    value: np.floating,
    ref: float,
    coefficient: float,
) -> np.floating:
    """
    Internal helper for converting a linear ratio to decibels.

    Parameters
    ----------
    value : np.floating
        Linear ratio (float32 or float64 scalar).
    ref : float
        Reference value, cast to the precision of ``value``.
    coefficient : float
        Multiplier for log10 (10.0 for power, 20.0 for amplitude).

    Returns
    -------
    np.floating
        Ratio in decibels, same precision as ``value``.
    """
    p: FloatPrecision = precision_of(value)
    ref_value = _cast_ref(p, ref)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        return p.cast(coefficient) * p.log10(value / ref_value)


def _from_db(
    value_db: np.floating,
    ref: float,
    coefficient: float,
) -> np.floating:
    """
    Internal helper for converting decibels back to a linear ratio.

    This computes: ref * 10^(value_db / coefficient)
    """
    p: FloatPrecision = precision_of(value_db)
    ref_value = _cast_ref(p, ref)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore", under="ignore"):
        return ref_value * p.power(p.cast(10.0), value_db / p.cast(coefficient))


def amplitude_to_db(
    amplitude: AmplitudeRatio,
    ref: float = 1.0,
) -> DecibelRatio:
    """
    Convert an amplitude ratio to decibels.

    This computes: 20 * log10(amplitude / ref)

    For amplitudes normalized to full scale (the default ``ref=1.0``) the
    result is in dBFS.

    Parameters
    ----------
    amplitude : AmplitudeRatio
        Linear amplitude ratio. Zero maps to ``-inf``; negative values map
        to NaN.
    ref : float, default=1.0
        Reference amplitude. Must be positive and finite in the precision
        of ``amplitude``.

    Returns
    -------
    DecibelRatio
        Level in decibels, same precision as ``amplitude``.

    Raises
    ------
    TypeError
        If ``amplitude`` is not an AmplitudeRatio.
    ValueError
        If ``ref`` is not positive and finite once cast to the precision
        of ``amplitude``.

    Examples
    --------
    >>> amplitude_to_db(AmplitudeRatio(0.5))  # ~ -6.02 dBFS
    DecibelRatio(-6.020599913279624, dtype=float64)
    """
    validate_kind(amplitude, AmplitudeRatio, "amplitude")
    return DecibelRatio(_to_db(amplitude.value, ref, _AMPLITUDE_COEFFICIENT))


def db_to_amplitude(
    decibels: DecibelRatio,
    ref: float = 1.0,
) -> AmplitudeRatio:
    """
    Convert decibels back to an amplitude ratio.

    This computes: ref * 10^(decibels / 20)

    Parameters
    ----------
    decibels : DecibelRatio
        Level in decibels. ``-inf`` maps to 0.0 and ``+inf`` to ``+inf``.
    ref : float, default=1.0
        Reference amplitude used in amplitude_to_db.

    Returns
    -------
    AmplitudeRatio
        Linear amplitude ratio, same precision as ``decibels``.

    Examples
    --------
    A +10 dB gain scales each sample by about 3.162:

    >>> db_to_amplitude(DecibelRatio(10.0)).amplitude_value
    np.float64(3.1622776601683795)
    """
    validate_kind(decibels, DecibelRatio, "decibels")
    return AmplitudeRatio(_from_db(decibels.value, ref, _AMPLITUDE_COEFFICIENT))


def power_to_db(
    power: PowerRatio,
    ref: float = 1.0,
) -> DecibelRatio:
    """
    Convert a power ratio to decibels.

    This computes: 10 * log10(power / ref)

    Parameters
    ----------
    power : PowerRatio
        Linear power ratio. Zero maps to ``-inf``; negative values map to NaN.
    ref : float, default=1.0
        Reference power. Must be positive and finite.

    Returns
    -------
    DecibelRatio
        Level in decibels, same precision as ``power``.
    """
    validate_kind(power, PowerRatio, "power")
    return DecibelRatio(_to_db(power.value, ref, _POWER_COEFFICIENT))


def db_to_power(
    decibels: DecibelRatio,
    ref: float = 1.0,
) -> PowerRatio:
    """
    Convert decibels back to a power ratio.

    This computes: ref * 10^(decibels / 10)

    Parameters
    ----------
    decibels : DecibelRatio
        Level in decibels.
    ref : float, default=1.0
        Reference power used in power_to_db.

    Returns
    -------
    PowerRatio
        Linear power ratio, same precision as ``decibels``.
    """
    validate_kind(decibels, DecibelRatio, "decibels")
    return PowerRatio(_from_db(decibels.value, ref, _POWER_COEFFICIENT))
