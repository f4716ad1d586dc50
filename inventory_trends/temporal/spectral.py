"""
Spectral Engine - Direct DFT and harmonic-truncated reconstruction

Series here are tens of monthly samples, so the transform is evaluated by
direct O(n^2) summation over a matrix of angles rather than an FFT.
"""

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


def _angles(n: int) -> np.ndarray:
    """2*pi*t*k/n for every (t, k) pair"""
    steps = np.arange(n)
    return 2.0 * np.pi * np.outer(steps, steps) / n


def transform(series: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Forward DFT of a real series

    Returns (real, imag) with
        real[k] =  sum_t x[t] * cos(2*pi*t*k/n)
        imag[k] = -sum_t x[t] * sin(2*pi*t*k/n)
    """
    data = np.asarray(series, dtype=float)
    n = len(data)
    if n == 0:
        return np.zeros(0), np.zeros(0)

    angles = _angles(n)
    real = np.cos(angles).T @ data
    imag = -(np.sin(angles).T @ data)
    return real, imag


def keep_mask(n: int, harmonics: int) -> np.ndarray:
    """
    Boolean mask of retained coefficients

    Keeps DC, the low band 1..h and its mirror n-h..n-1 so the retained
    spectrum stays Hermitian and the reconstruction stays real.
    """
    index = np.arange(n)
    return (index == 0) | (index <= harmonics) | (index >= n - harmonics)


def clamp_harmonics(n: int, harmonics: int) -> int:
    """Limit the harmonic count to what a length-n series can carry"""
    if n <= 1:
        return 0
    return max(1, min(int(harmonics), n // 2))


def inverse_filtered(real: Sequence[float], imag: Sequence[float], mask: Sequence[bool],
                     precision: Optional[int] = None) -> np.ndarray:
    """
    Reconstruct the time-domain series from the masked coefficients

        x[t] = (1/n) * sum_k [real[k]*cos(2*pi*t*k/n) - imag[k]*sin(2*pi*t*k/n)]
    """
    real = np.asarray(real, dtype=float)
    imag = np.asarray(imag, dtype=float)
    mask = np.asarray(mask, dtype=bool)
    n = len(real)
    if n == 0:
        return np.zeros(0)

    if len(imag) != n or len(mask) != n:
        raise ValueError(f"Coefficient length mismatch: real={n}, imag={len(imag)}, mask={len(mask)}")

    filtered_real = np.where(mask, real, 0.0)
    filtered_imag = np.where(mask, imag, 0.0)

    angles = _angles(n)
    values = (np.cos(angles) @ filtered_real - np.sin(angles) @ filtered_imag) / n

    if precision is not None:
        values = np.round(values, precision)

    logger.debug(f"Reconstructed {n} samples from {int(mask.sum())} retained coefficients")
    return values
