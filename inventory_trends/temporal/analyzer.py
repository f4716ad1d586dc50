"""
Series Trend Analyzer - Momentum, direction, seasonal strength and stability

All numeric policy for the report lives here; the narrator only renders
what this module computes.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..core.config import AnalysisSettings, DEFAULT_SETTINGS
from ..shared.types import Decomposition, Direction, SeriesAnalysis

logger = logging.getLogger(__name__)

# Float noise floor below which a standard deviation counts as zero
_ZERO_STD = 1e-12


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """NaN passes through unchanged"""
    return float(np.clip(value, low, high))


def population_std(values: Sequence[float]) -> float:
    """Standard deviation dividing by n; zero for fewer than two samples"""
    data = np.asarray(values, dtype=float)
    if len(data) <= 1:
        return 0.0
    return float(np.std(data))


def direction_threshold(series_std: float, settings: AnalysisSettings = DEFAULT_SETTINGS) -> float:
    return max(settings.min_direction_threshold, series_std * settings.direction_threshold_ratio)


def classify_direction(momentum: float, threshold: float) -> Direction:
    if momentum > threshold:
        return Direction.UP
    if momentum < -threshold:
        return Direction.DOWN
    return Direction.FLAT


def compute_momentum(trend: Sequence[float], lookback: int = 3) -> float:
    """Trend change over the last `lookback` steps, full precision"""
    n = len(trend)
    if n <= 1:
        return 0.0
    window = min(lookback, n - 1)
    return float(trend[n - 1] - trend[n - 1 - window])


def seasonal_strength(series_std: float, residual_std: float) -> float:
    """Share of the series spread left in the residual, capped at 1"""
    if series_std <= _ZERO_STD:
        return 0.0
    return float(np.minimum(1.0, residual_std / series_std))


def analyze_series(series: Sequence[float], decomposition: Decomposition,
                   settings: Optional[AnalysisSettings] = None) -> SeriesAnalysis:
    """Derive the trend metrics of one series from its decomposition"""
    settings = settings or DEFAULT_SETTINGS
    n = len(series)

    if n == 0:
        return SeriesAnalysis(momentum=0.0, direction=Direction.FLAT,
                              seasonal_strength=0.0, stability=1.0, series_std=0.0)

    if len(decomposition) != n:
        raise ValueError(f"Decomposition length {len(decomposition)} does not match series length {n}")

    # + 0.0 folds a rounded -0.0 into 0.0
    momentum = round(compute_momentum(decomposition.trend, settings.momentum_lookback), 2) + 0.0

    series_std = population_std(series)
    residual_std = population_std(decomposition.residual)
    strength = seasonal_strength(series_std, residual_std)
    stability = clamp(1.0 - strength)

    threshold = direction_threshold(series_std, settings)
    direction = classify_direction(momentum, threshold)

    logger.debug(
        f"Series analysis: n={n} momentum={momentum} threshold={threshold:.4f} "
        f"seasonal={strength:.4f} direction={direction.value}"
    )

    return SeriesAnalysis(
        momentum=momentum,
        direction=direction,
        seasonal_strength=strength,
        stability=stability,
        series_std=series_std,
    )
