"""
Trend Report Pipeline - Decompose, analyze and narrate parallel series

Several series (e.g. items added vs items used) share one time axis. Each
one is decomposed and analyzed on its own, then the per-series metrics are
averaged into overall momentum, direction and stability. The whole report is
recomputed on every call.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from ..core.config import AnalysisSettings, DEFAULT_SETTINGS
from ..shared.types import (
    Decomposition, Direction, SeriesAnalysis, TrendMetrics, TrendPoint, TrendReport
)
from .analyzer import analyze_series, clamp, classify_direction, direction_threshold
from .decomposition import decompose
from .narrator import describe_direction, describe_seasonality

logger = logging.getLogger(__name__)


def default_harmonics(n: int, settings: AnalysisSettings = DEFAULT_SETTINGS) -> int:
    """Harmonic count for a length-n axis: one per `harmonics_divisor` samples, at least one"""
    if settings.harmonics_override is not None:
        return settings.harmonics_override
    return max(1, n // settings.harmonics_divisor)


def _validate_inputs(series: Mapping[str, Sequence[float]], labels: Optional[Sequence[str]]) -> int:
    if not series:
        raise ValueError("At least one series is required")

    lengths = {name: len(values) for name, values in series.items()}
    distinct = set(lengths.values())
    if len(distinct) != 1:
        raise ValueError(f"All series must share one time axis, got lengths {lengths}")

    n = distinct.pop()
    if labels is not None and len(labels) != n:
        raise ValueError(f"Expected {n} labels, got {len(labels)}")
    return n


def _build_points(labels: List[str], series: Mapping[str, np.ndarray],
                  decompositions: Dict[str, Decomposition], precision: int) -> List[TrendPoint]:
    points = []
    for i, label in enumerate(labels):
        points.append(TrendPoint(
            label=label,
            values={name: round(float(values[i]), precision) for name, values in series.items()},
            trend={name: round(decompositions[name].trend[i], precision) for name in series},
            seasonal={name: round(decompositions[name].residual[i], precision) for name in series},
        ))
    return points


def _empty_report(names: Sequence[str]) -> TrendReport:
    analyses = {
        name: SeriesAnalysis(momentum=0.0, direction=Direction.FLAT, seasonal_strength=0.0, stability=1.0)
        for name in names
    }
    return TrendReport(labels=[], points=[], metrics=TrendMetrics(series=analyses), insights=[])


def combine_metrics(analyses: Mapping[str, SeriesAnalysis],
                    settings: Optional[AnalysisSettings] = None) -> TrendMetrics:
    """Average per-series analyses into the overall report metrics"""
    settings = settings or DEFAULT_SETTINGS
    if not analyses:
        return TrendMetrics(series={})

    results = list(analyses.values())
    overall_momentum = round(float(np.mean([a.momentum for a in results])), 2) + 0.0
    mean_std = float(np.mean([a.series_std for a in results]))
    overall_direction = classify_direction(overall_momentum, direction_threshold(mean_std, settings))

    return TrendMetrics(
        series=dict(analyses),
        overall_momentum=overall_momentum,
        overall_direction=overall_direction,
        overall_stability=clamp(float(np.mean([a.stability for a in results]))),
        average_seasonality=clamp(float(np.mean([a.seasonal_strength for a in results]))),
    )


def build_trend_report(series: Mapping[str, Sequence[float]], labels: Optional[Sequence[str]] = None,
                       harmonics: Optional[int] = None,
                       settings: Optional[AnalysisSettings] = None) -> TrendReport:
    """
    Build the full trend report for parallel series

    Args:
        series: ordered mapping of series name to values, all the same length
        labels: one label per time step; defaults to "1".."n"
        harmonics: override for the low-pass harmonic count
        settings: numeric policy; defaults reproduce the reference behaviour

    Returns:
        TrendReport with rounded points, combined metrics and insight sentences
    """
    settings = settings or DEFAULT_SETTINGS
    n = _validate_inputs(series, labels)

    if n == 0:
        logger.debug("No samples on the time axis, returning empty trend report")
        return _empty_report(list(series))

    if harmonics is None:
        harmonics = default_harmonics(n, settings)

    arrays = {name: np.asarray(values, dtype=float) for name, values in series.items()}
    decompositions: Dict[str, Decomposition] = {}
    analyses: Dict[str, SeriesAnalysis] = {}

    for name, values in arrays.items():
        decompositions[name] = decompose(values, harmonics)
        analyses[name] = analyze_series(values, decompositions[name], settings)

    metrics = combine_metrics(analyses, settings)
    axis = [str(label) for label in labels] if labels is not None else [str(i + 1) for i in range(n)]
    points = _build_points(axis, arrays, decompositions, settings.presentation_precision)

    insights = [
        describe_direction(name, analysis.direction, analysis.momentum)
        for name, analysis in analyses.items()
    ]
    insights.append(describe_seasonality(metrics.average_seasonality, metrics.overall_stability, settings))

    logger.info(
        f"Trend report built: {len(arrays)} series x {n} samples, harmonics={harmonics}, "
        f"overall momentum {metrics.overall_momentum} ({metrics.overall_direction.value})"
    )

    return TrendReport(labels=axis, points=points, metrics=metrics, insights=insights)
