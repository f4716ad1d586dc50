"""
Tests for the low-pass decomposer
"""

import math

import numpy as np
import pytest

from inventory_trends.shared.types import Decomposition
from inventory_trends.temporal.analyzer import analyze_series, clamp, seasonal_strength
from inventory_trends.temporal.decomposition import decompose, normalize_series
from inventory_trends.temporal.pipeline import build_trend_report

ADDED = [45, 38, 52, 41, 47, 55]
USED = [120, 95, 110, 88, 102, 125]


def _random_series(n, seed):
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, 200.0, size=n).tolist()


class TestDecompose:

    @pytest.mark.parametrize("harmonics", [0, 1, 2, 10])
    def test_empty_series(self, harmonics):
        assert decompose([], harmonics) == Decomposition(trend=[], residual=[])

    @pytest.mark.parametrize("harmonics", [0, 1, 3, 10])
    def test_singleton_series(self, harmonics):
        result = decompose([7.5], harmonics)
        assert result.trend == [7.5]
        assert result.residual == [0.0]

    @pytest.mark.parametrize("n", [2, 3, 5, 6, 7, 12, 13, 24])
    def test_reconstruction_identity(self, n):
        series = _random_series(n, seed=n)
        for harmonics in range(1, n // 2 + 2):
            result = decompose(series, harmonics)
            assert len(result.trend) == n
            assert len(result.residual) == n
            np.testing.assert_allclose(np.add(result.trend, result.residual), series, atol=1e-9)

    @pytest.mark.parametrize("n", [6, 7, 12])
    def test_reconstruction_identity_with_rounding(self, n):
        series = _random_series(n, seed=10 + n)
        result = decompose(series, 2, precision=4)
        np.testing.assert_allclose(np.add(result.trend, result.residual), series, atol=1e-4)
        assert result.trend == [round(value, 4) for value in result.trend]

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 7, 11, 12])
    def test_full_bandwidth_keeps_series(self, n):
        series = _random_series(n, seed=50 + n)
        result = decompose(series, n // 2)
        np.testing.assert_allclose(result.trend, series, atol=1e-9)
        np.testing.assert_allclose(result.residual, np.zeros(n), atol=1e-9)

    def test_drops_nyquist_component_only(self):
        # n=6, h=2 removes only the alternating (-1)^t component
        result = decompose(ADDED, 2)
        np.testing.assert_allclose(
            result.trend, [43.3333333, 39.6666667, 50.3333333, 42.6666667, 45.3333333, 56.6666667], atol=1e-6
        )
        np.testing.assert_allclose(result.residual, [5 / 3, -5 / 3] * 3, atol=1e-9)

    def test_used_series_trend(self):
        result = decompose(USED, 2)
        np.testing.assert_allclose(result.trend, [116, 99, 106, 92, 98, 129], atol=1e-9)

    def test_single_harmonic_smooths_more_than_two(self):
        one = decompose(USED, 1)
        two = decompose(USED, 2)
        assert np.std(one.residual) > np.std(two.residual)

    def test_accepts_numpy_input(self):
        result = decompose(np.array(ADDED, dtype=float), 2)
        assert isinstance(result.trend, list)
        assert isinstance(result.trend[0], float)

    def test_deterministic(self):
        assert decompose(USED, 2) == decompose(USED, 2)

    def test_nan_propagates(self):
        result = decompose([1.0, float('nan'), 3.0, 4.0], 1)
        assert np.isnan(result.trend).all()

    def test_nan_propagates_through_analysis(self):
        series = [1.0, float('nan'), 3.0, 4.0]
        analysis = analyze_series(series, decompose(series, 1))
        assert math.isnan(analysis.momentum)
        assert math.isnan(analysis.series_std)
        assert math.isnan(analysis.seasonal_strength)
        assert math.isnan(analysis.stability)

    def test_nan_propagates_through_report(self):
        report = build_trend_report({"added": [1.0, float('nan'), 3.0, 4.0], "used": [1.0, 2.0, 3.0, 4.0]})
        metrics = report.metrics
        assert math.isnan(metrics.series["added"].seasonal_strength)
        assert not math.isnan(metrics.series["used"].seasonal_strength)
        assert math.isnan(metrics.overall_stability)
        assert math.isnan(metrics.average_seasonality)
        assert report.insights[-1] == "Seasonality is undetermined (n/a), trend stability n/a"
        assert "pronounced" not in report.insights[-1]

    def test_bounding_helpers_keep_nan(self):
        assert math.isnan(clamp(float('nan')))
        assert math.isnan(seasonal_strength(float('nan'), float('nan')))
        assert math.isnan(seasonal_strength(2.0, float('nan')))
        assert clamp(1.5) == 1.0
        assert clamp(-0.5) == 0.0


class TestNormalizeSeries:

    def test_min_max_scaling(self):
        assert normalize_series([2, 4, 6]) == [0.0, 0.5, 1.0]

    def test_constant_series(self):
        assert normalize_series([3, 3, 3]) == [0.5, 0.5, 0.5]

    def test_empty(self):
        assert normalize_series([]) == []
