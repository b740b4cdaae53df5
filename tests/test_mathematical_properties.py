"""
Mathematical property validation tests for decibel-ratio.

These tests verify invariants that should hold for any correct conversion,
providing confidence beyond the reference value table.
"""
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from decibel_ratio import (
    AmplitudeRatio,
    DecibelRatio,
    PowerRatio,
    amplitude_to_db,
    db_to_amplitude,
    db_to_power,
    power_to_db,
)

# Relative round-trip tolerance per precision
RTOL_ROUND_TRIP = {np.float32: 1e-5, np.float64: 1e-12}


def _round_trip_errors(amplitudes, dtype):
    errors = []
    for a in amplitudes:
        original = AmplitudeRatio(a, dtype=dtype)
        recovered = db_to_amplitude(amplitude_to_db(original))
        errors.append(
            abs(float(recovered.amplitude_value) - float(original.amplitude_value))
            / float(original.amplitude_value)
        )
    return np.array(errors)


class TestRoundTrip:
    """Conversions are mutual inverses up to rounding error."""

    def test_amplitude_round_trip_absolute(self, float_dtype):
        for a in np.linspace(1e-4, 4.0, 101):
            original = AmplitudeRatio(a, dtype=float_dtype)
            recovered = db_to_amplitude(amplitude_to_db(original))
            np.testing.assert_allclose(
                recovered.amplitude_value, original.amplitude_value, rtol=0, atol=1e-3
            )

    def test_amplitude_round_trip_relative(self, float_dtype, positive_amplitudes):
        errors = _round_trip_errors(positive_amplitudes, float_dtype)
        assert errors.max() <= RTOL_ROUND_TRIP[float_dtype]

    def test_decibel_round_trip(self, float_dtype):
        for d in np.linspace(-120.0, 120.0, 97):
            original = DecibelRatio(d, dtype=float_dtype)
            recovered = amplitude_to_db(db_to_amplitude(original))
            np.testing.assert_allclose(
                recovered.decibel_value, original.decibel_value, rtol=0, atol=1e-3
            )

    def test_power_round_trip(self, float_dtype, positive_amplitudes):
        for p in positive_amplitudes:
            original = PowerRatio(p, dtype=float_dtype)
            recovered = db_to_power(power_to_db(original))
            np.testing.assert_allclose(
                recovered.power_value,
                original.power_value,
                rtol=RTOL_ROUND_TRIP[float_dtype],
            )

    def test_silence_round_trip(self, float_dtype):
        silence = AmplitudeRatio(0.0, dtype=float_dtype)
        assert db_to_amplitude(amplitude_to_db(silence)) == silence

    def test_double_at_least_as_accurate_as_single(self, positive_amplitudes):
        single = _round_trip_errors(positive_amplitudes, np.float32)
        double = _round_trip_errors(positive_amplitudes, np.float64)
        assert double.max() <= single.max()


class TestLogarithmicProperties:
    """Properties of the logarithmic scale."""

    def test_doubling_adds_six_db(self, float_dtype):
        for a in [1e-3, 0.1, 0.5, 1.0, 8.0]:
            low = amplitude_to_db(AmplitudeRatio(a, dtype=float_dtype))
            high = amplitude_to_db(AmplitudeRatio(2 * a, dtype=float_dtype))
            np.testing.assert_allclose(
                float(high.decibel_value) - float(low.decibel_value),
                6.02059991327962,
                atol=1e-3,
            )

    def test_reciprocal_negates(self, float_dtype):
        for a in [0.5, 2.0, 10.0, 1000.0]:
            up = amplitude_to_db(AmplitudeRatio(a, dtype=float_dtype))
            down = amplitude_to_db(AmplitudeRatio(1.0 / a, dtype=float_dtype))
            np.testing.assert_allclose(up.decibel_value, -down.decibel_value, atol=1e-3)

    def test_monotonic(self, float_dtype):
        amplitudes = np.logspace(-5, 5, 200)
        levels = [
            float(amplitude_to_db(AmplitudeRatio(a, dtype=float_dtype)).decibel_value)
            for a in amplitudes
        ]
        assert np.all(np.diff(levels) > 0)

    @pytest.mark.parametrize("decibels", [-40.0, -6.0, 0.0, 3.0, 20.0])
    def test_power_level_matches_amplitude_level(self, float_dtype, decibels):
        """An amplitude and its square describe the same level in dB."""
        amplitude = db_to_amplitude(DecibelRatio(decibels, dtype=float_dtype))
        power = PowerRatio(amplitude.amplitude_value**2)
        np.testing.assert_allclose(
            power_to_db(power).decibel_value, decibels, atol=1e-3
        )


class TestConcurrency:
    """Conversions hold no state and can run from many threads."""

    def test_threaded_matches_sequential(self, float_dtype, positive_amplitudes):
        ratios = [AmplitudeRatio(a, dtype=float_dtype) for a in positive_amplitudes]
        sequential = [amplitude_to_db(r) for r in ratios]

        with ThreadPoolExecutor(max_workers=8) as pool:
            threaded = list(pool.map(amplitude_to_db, ratios))

        assert threaded == sequential
