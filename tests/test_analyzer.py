"""
Tests for the series trend analyzer
"""

import math

import pytest

from inventory_trends.core.config import AnalysisSettings
from inventory_trends.shared.types import Decomposition, Direction
from inventory_trends.temporal.analyzer import (
    analyze_series,
    classify_direction,
    compute_momentum,
    direction_threshold,
    population_std,
    seasonal_strength,
)
from inventory_trends.temporal.decomposition import decompose


class TestHelpers:

    def test_population_std_divides_by_n(self):
        assert population_std([1, 2, 3, 4]) == pytest.approx(math.sqrt(1.25))

    def test_population_std_short_series(self):
        assert population_std([]) == 0.0
        assert population_std([42.0]) == 0.0

    def test_threshold_floor(self):
        assert direction_threshold(1.0) == 1.0
        assert direction_threshold(10.0) == pytest.approx(3.5)

    def test_classify_direction_boundaries(self):
        assert classify_direction(2.0, 1.5) == Direction.UP
        assert classify_direction(-2.0, 1.5) == Direction.DOWN
        assert classify_direction(1.5, 1.5) == Direction.FLAT
        assert classify_direction(-1.5, 1.5) == Direction.FLAT

    def test_seasonal_strength_guards_zero_std(self):
        assert seasonal_strength(0.0, 5.0) == 0.0

    def test_seasonal_strength_capped(self):
        assert seasonal_strength(2.0, 4.0) == 1.0
        assert seasonal_strength(4.0, 1.0) == 0.25

    def test_momentum_lookback_shrinks_for_short_series(self):
        assert compute_momentum([1.0, 4.0]) == 3.0
        assert compute_momentum([5.0]) == 0.0
        assert compute_momentum([1.0, 2.0, 4.0, 8.0, 16.0]) == 14.0


class TestAnalyzeSeries:

    def test_empty_series_defaults(self):
        result = analyze_series([], Decomposition(trend=[], residual=[]))
        assert result.momentum == 0.0
        assert result.direction == Direction.FLAT
        assert result.seasonal_strength == 0.0
        assert result.stability == 1.0

    def test_singleton_series(self):
        result = analyze_series([9.0], decompose([9.0], 3))
        assert result.momentum == 0.0
        assert result.direction == Direction.FLAT
        assert result.seasonal_strength == 0.0
        assert result.stability == 1.0

    @pytest.mark.parametrize("value", [5.0, 0.1, -3.25, 1000.0])
    def test_constant_series(self, value):
        series = [value] * 6
        result = analyze_series(series, decompose(series, 2))
        assert result.seasonal_strength == 0
        assert result.stability == 1
        assert result.momentum == 0
        assert result.direction == Direction.FLAT

    @pytest.mark.parametrize("series", [
        [1.0, 2.0, 3.0, 4.0],
        [10.0, 20.0, 30.0, 40.0, 50.0, 60.0],
        [3.0, 5.5, 8.0, 10.5, 13.0, 15.5],
    ])
    def test_increasing_ramp_is_up(self, series):
        harmonics = max(1, len(series) // 3)
        result = analyze_series(series, decompose(series, harmonics))
        assert result.momentum > 0
        assert result.direction == Direction.UP

    @pytest.mark.parametrize("n", range(4, 13))
    def test_short_ramp_at_default_harmonics_is_up(self, n):
        series = [2.0 * i + 1.0 for i in range(n)]
        result = analyze_series(series, decompose(series, max(1, n // 3)))
        assert result.direction == Direction.UP

    @pytest.mark.parametrize("n", range(13, 40))
    def test_long_ramp_loses_direction_at_circular_boundary(self, n):
        # the periodic low-pass bends the trend back toward the series start
        series = [2.0 * i + 1.0 for i in range(n)]
        result = analyze_series(series, decompose(series, max(1, n // 3)))
        assert result.direction != Direction.UP

    @pytest.mark.parametrize("n,momentum", [(13, 2.42), (22, -0.05), (39, -4.8)])
    def test_long_ramp_boundary_momentum(self, n, momentum):
        series = [2.0 * i + 1.0 for i in range(n)]
        result = analyze_series(series, decompose(series, max(1, n // 3)))
        assert result.momentum == pytest.approx(momentum, abs=0.011)

    def test_decreasing_ramp_is_down(self):
        series = [60.0, 50.0, 40.0, 30.0, 20.0, 10.0]
        result = analyze_series(series, decompose(series, 2))
        assert result.momentum == pytest.approx(-20.0)
        assert result.direction == Direction.DOWN

    def test_added_series_metrics(self):
        series = [45, 38, 52, 41, 47, 55]
        result = analyze_series(series, decompose(series, 2))
        assert result.momentum == 6.33
        assert result.direction == Direction.UP
        assert result.series_std == pytest.approx(5.8784, abs=1e-4)
        assert result.seasonal_strength == pytest.approx(0.28352, abs=1e-4)
        assert result.stability == pytest.approx(1 - result.seasonal_strength)

    def test_small_move_stays_flat(self):
        series = [10.0, 10.5, 10.0, 10.5, 10.0, 10.5]
        result = analyze_series(series, decompose(series, 2))
        assert result.direction == Direction.FLAT

    def test_seasonal_strength_within_unit_interval(self):
        series = [0.0, 100.0, 0.0, 100.0, 0.0, 100.0]
        result = analyze_series(series, decompose(series, 1))
        assert 0.0 <= result.seasonal_strength <= 1.0
        assert result.stability == pytest.approx(1.0 - result.seasonal_strength)

    def test_custom_settings(self):
        series = [10.0, 20.0, 30.0, 40.0, 50.0, 60.0]
        strict = AnalysisSettings(direction_threshold_ratio=5.0)
        result = analyze_series(series, decompose(series, 2), strict)
        assert result.direction == Direction.FLAT

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            analyze_series([1.0, 2.0, 3.0], Decomposition(trend=[1.0], residual=[0.0]))
