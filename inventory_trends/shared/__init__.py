from .types import Direction, Decomposition, SeriesAnalysis, TrendPoint, TrendMetrics, TrendReport

__all__ = ['Direction', 'Decomposition', 'SeriesAnalysis', 'TrendPoint', 'TrendMetrics', 'TrendReport']
