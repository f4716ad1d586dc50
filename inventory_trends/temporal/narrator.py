"""
Insight Narrator - Template sentences over already-computed trend metrics
"""

import math
from typing import Optional

from ..core.config import AnalysisSettings, DEFAULT_SETTINGS
from ..shared.types import Direction

_DIRECTION_TEMPLATES = {
    Direction.UP: "{label} is trending up, momentum {momentum}",
    Direction.DOWN: "{label} is trending down, momentum {momentum}",
    Direction.FLAT: "{label} is holding flat, momentum {momentum}",
}


def format_momentum(value: float) -> str:
    """Signed one-decimal rendering, e.g. +6.3 / -2.0"""
    if value >= 0:
        return f"+{abs(value):.1f}"
    return f"{value:.1f}"


def format_percent(value: float) -> str:
    if math.isnan(value):
        return "n/a"
    return f"{int(round(value * 100))}%"


def seasonality_bucket(seasonality: float, settings: AnalysisSettings = DEFAULT_SETTINGS) -> str:
    if math.isnan(seasonality):
        return "undetermined"
    if seasonality > settings.pronounced_seasonality:
        return "pronounced"
    if seasonality > settings.moderate_seasonality:
        return "moderate"
    return "weak"


def describe_direction(label: str, direction: Direction, momentum: float) -> str:
    return _DIRECTION_TEMPLATES[direction].format(label=label, momentum=format_momentum(momentum))


def describe_seasonality(seasonality: float, stability: float,
                         settings: Optional[AnalysisSettings] = None) -> str:
    bucket = seasonality_bucket(seasonality, settings or DEFAULT_SETTINGS)
    return (
        f"Seasonality is {bucket} ({format_percent(seasonality)}), "
        f"trend stability {format_percent(stability)}"
    )
