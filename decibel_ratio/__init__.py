"""
decibel-ratio: Conversions between linear ratios and decibels.

This library converts amplitude and power ratios to decibels (dB, or dBFS for
amplitudes normalized to full scale) and back, in single or double precision.
Values are wrapped in small immutable types so that a decibel level cannot be
passed where a linear ratio is expected.

Ratio Types
-----------
AmplitudeRatio : Linear amplitude ratio
PowerRatio : Linear power ratio
DecibelRatio : Logarithmic ratio in decibels

Decibel Conversions
-------------------
amplitude_to_db : Convert an amplitude ratio to decibels
db_to_amplitude : Convert decibels to an amplitude ratio
power_to_db : Convert a power ratio to decibels
db_to_power : Convert decibels to a power ratio

Precision
---------
FloatPrecision : Floating-point precision used by the conversions
SINGLE : 32-bit precision (np.float32)
DOUBLE : 64-bit precision (np.float64)
get_precision : Look up the precision for a dtype
"""

# Get version from package metadata (single source of truth in setup.py)
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version

    __version__ = _get_version("decibel-ratio")
except (ImportError, PackageNotFoundError):
    __version__ = "1.0.0"  # Fallback for source checkouts

# Decibel conversions
from .convert import (
    amplitude_to_db,
    db_to_amplitude,
    db_to_power,
    power_to_db,
)

# Precision
from ._precision import (
    DOUBLE,
    SINGLE,
    SUPPORTED_PRECISIONS,
    FloatPrecision,
    get_precision,
)

# Ratio types
from .ratio import (
    AmplitudeRatio,
    DecibelRatio,
    PowerRatio,
)

__all__ = [
    # Version
    "__version__",
    # Ratio types
    "AmplitudeRatio",
    "PowerRatio",
    "DecibelRatio",
    # Conversions
    "amplitude_to_db",
    "db_to_amplitude",
    "power_to_db",
    "db_to_power",
    # Precision
    "FloatPrecision",
    "SINGLE",
    "DOUBLE",
    "SUPPORTED_PRECISIONS",
    "get_precision",
]
