"""
Temporal Subsystem - DFT low-pass trend decomposition and trend insights

Public Interface:
- decompose: Split one series into trend and residual
- analyze_series: Momentum, direction, seasonality and stability of one series
- build_trend_report: Full report over parallel series sharing a time axis
"""

from .analyzer import analyze_series
from .decomposition import decompose, normalize_series
from .narrator import describe_direction, describe_seasonality
from .pipeline import build_trend_report, combine_metrics, default_harmonics
from .spectral import clamp_harmonics, inverse_filtered, keep_mask, transform

__all__ = [
    'transform', 'inverse_filtered', 'keep_mask', 'clamp_harmonics',
    'decompose', 'normalize_series', 'analyze_series',
    'describe_direction', 'describe_seasonality',
    'build_trend_report', 'combine_metrics', 'default_harmonics',
]
