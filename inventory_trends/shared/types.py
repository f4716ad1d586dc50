"""
Shared Trend Types - Immutable results exchanged between the temporal layers

Every structure here is created fresh by a pipeline call and handed to the
presentation layer; none of them is mutated after construction.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Direction(Enum):
    """Three-way classification of recent trend momentum"""
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


@dataclass(frozen=True)
class Decomposition:
    """Low-pass split of one series: trend[i] + residual[i] == series[i]"""
    trend: List[float]
    residual: List[float]

    def __len__(self) -> int:
        return len(self.trend)


@dataclass(frozen=True)
class SeriesAnalysis:
    momentum: float
    direction: Direction
    seasonal_strength: float           # [0.0, 1.0]
    stability: float                   # 1 - seasonal_strength, clamped
    series_std: float = 0.0            # population std of the raw series

    def to_dict(self) -> Dict[str, Any]:
        return {
            'momentum': self.momentum,
            'direction': self.direction.value,
            'seasonal_strength': self.seasonal_strength,
            'stability': self.stability,
            'series_std': self.series_std,
        }


@dataclass(frozen=True)
class TrendPoint:
    """
    One time step of the report, keyed by series name

    values/trend/seasonal are already rounded to the presentation precision.
    """
    label: str
    values: Dict[str, float]
    trend: Dict[str, float]
    seasonal: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into chart-friendly columns"""
        row: Dict[str, Any] = {'label': self.label}
        for name, value in self.values.items():
            row[name] = value
            row[f"{name}_trend"] = self.trend[name]
            row[f"{name}_seasonal"] = self.seasonal[name]
        return row


@dataclass(frozen=True)
class TrendMetrics:
    series: Dict[str, SeriesAnalysis]
    overall_momentum: float = 0.0
    overall_direction: Direction = Direction.FLAT
    overall_stability: float = 1.0
    average_seasonality: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'series': {name: analysis.to_dict() for name, analysis in self.series.items()},
            'overall_momentum': self.overall_momentum,
            'overall_direction': self.overall_direction.value,
            'overall_stability': self.overall_stability,
            'average_seasonality': self.average_seasonality,
        }


@dataclass(frozen=True)
class TrendReport:
    labels: List[str]
    points: List[TrendPoint]
    metrics: TrendMetrics
    insights: List[str] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return len(self.points) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'labels': list(self.labels),
            'points': [point.to_dict() for point in self.points],
            'metrics': self.metrics.to_dict(),
            'insights': list(self.insights),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Deterministic JSON rendering for the presentation layer"""
        return json.dumps(self.to_dict(), sort_keys=True, indent=indent, ensure_ascii=False)
