"""
Low-Pass Decomposer - Splits a raw series into trend and residual
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from ..shared.types import Decomposition
from .spectral import clamp_harmonics, inverse_filtered, keep_mask, transform

logger = logging.getLogger(__name__)


def decompose(series: Sequence[float], harmonics: int = 2, precision: Optional[int] = None) -> Decomposition:
    """
    Low-pass filter a series through its DFT

    The trend keeps the lowest `harmonics` frequencies (clamped to what the
    length allows); the residual is whatever the trend does not explain.
    Full precision is kept unless `precision` is given, in which case both
    outputs are rounded to the same number of decimals.
    """
    data = np.asarray(series, dtype=float)
    n = len(data)

    if n == 0:
        return Decomposition(trend=[], residual=[])

    effective_harmonics = clamp_harmonics(n, harmonics)
    real, imag = transform(data)
    trend = inverse_filtered(real, imag, keep_mask(n, effective_harmonics), precision=precision)

    residual = data - trend
    if precision is not None:
        residual = np.round(residual, precision)

    logger.debug(f"Decomposed {n} samples with {effective_harmonics} harmonics (requested {harmonics})")
    return Decomposition(trend=trend.tolist(), residual=residual.tolist())


def normalize_series(series: Sequence[float]) -> List[float]:
    """Min-max scale into [0, 1]; a constant series sits at 0.5"""
    data = np.asarray(series, dtype=float)
    if len(data) == 0:
        return []

    low = float(np.min(data))
    high = float(np.max(data))
    if high == low:
        return [0.5] * len(data)

    return ((data - low) / (high - low)).tolist()
