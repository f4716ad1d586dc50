"""
Inventory Trends - Fourier low-pass trend analysis of monthly inventory counters

Public Interface:
- build_trend_report: Report over parallel series (e.g. items added vs used)
- decompose / analyze_series: Single-series trend split and metrics
- TrendConfig: Layered configuration producing AnalysisSettings
"""

from .core.config import AnalysisSettings, TrendConfig
from .shared.types import Decomposition, Direction, SeriesAnalysis, TrendMetrics, TrendPoint, TrendReport
from .temporal import analyze_series, build_trend_report, decompose

__version__ = "0.1.0"

__all__ = [
    'AnalysisSettings', 'TrendConfig',
    'Decomposition', 'Direction', 'SeriesAnalysis', 'TrendMetrics', 'TrendPoint', 'TrendReport',
    'analyze_series', 'build_trend_report', 'decompose',
]
