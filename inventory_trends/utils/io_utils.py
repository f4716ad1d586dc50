# utils/io_utils.py

import logging
import os
from typing import Optional

import pandas as pd

from ..core.config import AnalysisSettings
from ..shared.types import TrendReport
from ..temporal.pipeline import build_trend_report

log = logging.getLogger(__name__)


def read_monthly_csv(file_path) -> pd.DataFrame:
    """
    Read monthly counters: first column holds the period labels, every
    other column is one series
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    df = pd.read_csv(file_path, index_col=0)
    df.index = df.index.astype(str)

    if df.shape[1] == 0:
        raise ValueError(f"CSV file {file_path} has no series columns")

    numeric_df = df.apply(pd.to_numeric, errors='coerce')
    bad_columns = [col for col in df.columns if numeric_df[col].isna().any()]
    if bad_columns:
        raise ValueError(f"Non-numeric or missing values in columns: {bad_columns}")

    log.debug(f"Loaded {len(numeric_df)} periods x {numeric_df.shape[1]} series from {file_path}")
    return numeric_df.astype(float)


def report_from_frame(df: pd.DataFrame, harmonics: Optional[int] = None,
                      settings: Optional[AnalysisSettings] = None) -> TrendReport:
    """Index becomes the labels, columns the series, in column order"""
    series = {str(col): df[col].to_numpy(dtype=float) for col in df.columns}
    labels = [str(label) for label in df.index]
    return build_trend_report(series, labels=labels, harmonics=harmonics, settings=settings)


def report_to_frame(report: TrendReport) -> pd.DataFrame:
    """One row per report point, flattened for charting or CSV export"""
    rows = [point.to_dict() for point in report.points]
    if not rows:
        return pd.DataFrame(columns=['label'])
    return pd.DataFrame(rows).set_index('label')
