from .config import AnalysisSettings, DEFAULT_SETTINGS, TrendConfig
from .logging_config import apply_config_level, setup_logging

__all__ = ['AnalysisSettings', 'DEFAULT_SETTINGS', 'TrendConfig', 'apply_config_level', 'setup_logging']
