"""
Configuration Management - Layered, schema-validated settings for the trend engine

Sources are applied in order: schema defaults, config/<TRENDS_ENV>.json,
an explicit JSON file, then TRENDS_* environment variables.
"""

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisSettings:
    """
    Numeric policy consumed by the pure temporal functions

    The defaults reproduce the reference behaviour; a TrendConfig only
    changes them when a source overrides a key.
    """
    harmonics_divisor: int = 3
    harmonics_override: Optional[int] = None
    momentum_lookback: int = 3
    direction_threshold_ratio: float = 0.35
    min_direction_threshold: float = 1.0
    pronounced_seasonality: float = 0.6
    moderate_seasonality: float = 0.35
    presentation_precision: int = 2


DEFAULT_SETTINGS = AnalysisSettings()


@dataclass
class ConfigurationSchema:
    """Schema for configuration validation"""
    key: str
    data_type: type
    default_value: Any
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    allowed_values: Optional[List[Any]] = None
    description: str = ""
    nullable: bool = False


class TrendConfig:
    """
    Centralized configuration for the trend engine.

    Responsibilities:
    - Load and validate settings from defaults, JSON files and the environment
    - Provide type-safe access to individual values
    - Hand an immutable AnalysisSettings snapshot to the analysis functions
    """

    ENV_PREFIX = 'TRENDS_'

    def __init__(self, config_file: Optional[str] = None, config_dir: str = "config"):
        self.config_file = config_file
        self.config_dir = config_dir
        self.settings: Dict[str, Any] = {}
        self.schemas: Dict[str, ConfigurationSchema] = {}
        self.environment = os.getenv('TRENDS_ENV', 'development')
        self.config_sources: List[str] = []
        self.validation_errors: List[str] = []
        self.load_timestamp = None

        self._initialize_schemas()
        self._load_all_configurations()

        logger.info(f"Trend configuration initialized for {self.environment} environment")

    def _initialize_schemas(self):
        """Initialize configuration schemas for validation"""
        schemas = [
            # Decomposition
            ConfigurationSchema('harmonics_divisor', int, DEFAULT_SETTINGS.harmonics_divisor, 1, 12,
                                description="Series length divisor for the default harmonic count"),
            ConfigurationSchema('harmonics_override', int, DEFAULT_SETTINGS.harmonics_override, 1, 1000,
                                description="Fixed harmonic count; unset means derive from length",
                                nullable=True),

            # Momentum and direction
            ConfigurationSchema('momentum_lookback', int, DEFAULT_SETTINGS.momentum_lookback, 1, 24,
                                description="Trend samples spanned by the momentum window"),
            ConfigurationSchema('direction_threshold_ratio', float, DEFAULT_SETTINGS.direction_threshold_ratio,
                                0.0, 5.0, description="Fraction of series std a move must exceed"),
            ConfigurationSchema('min_direction_threshold', float, DEFAULT_SETTINGS.min_direction_threshold,
                                0.0, 1e6, description="Absolute floor for the direction threshold"),

            # Narrative buckets
            ConfigurationSchema('pronounced_seasonality', float, DEFAULT_SETTINGS.pronounced_seasonality,
                                0.0, 1.0, description="Seasonality above which it is called pronounced"),
            ConfigurationSchema('moderate_seasonality', float, DEFAULT_SETTINGS.moderate_seasonality,
                                0.0, 1.0, description="Seasonality above which it is called moderate"),

            # Presentation
            ConfigurationSchema('presentation_precision', int, DEFAULT_SETTINGS.presentation_precision, 0, 10,
                                description="Decimals kept in report points"),
            ConfigurationSchema('log_level', str, 'INFO',
                                allowed_values=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                                description="Logging level"),
        ]

        for schema in schemas:
            self.schemas[schema.key] = schema

    def _load_all_configurations(self):
        """Load configurations from all sources"""
        self.settings = self._load_base_config()
        self.config_sources.append('base_defaults')

        self._load_environment_config()

        if self.config_file:
            self._load_config_file(self.config_file)

        self._load_environment_variables()
        self._validate_all_configs()

        self.load_timestamp = datetime.now()
        logger.info(f"Configuration loaded from sources: {', '.join(self.config_sources)}")

    def _load_base_config(self) -> Dict[str, Any]:
        """Load base configuration with defaults"""
        base_config = {key: schema.default_value for key, schema in self.schemas.items()}
        base_config['environment'] = self.environment
        return base_config

    def _load_environment_config(self):
        """Load environment-specific configuration"""
        config_file = os.path.join(self.config_dir, f"{self.environment}.json")

        if os.path.exists(config_file):
            self._load_config_file(config_file)
            logger.info(f"Loaded {self.environment} environment configuration")
        else:
            logger.debug(f"No {self.environment} environment config found")

    def _load_config_file(self, config_file: str):
        """Load configuration from JSON file"""
        try:
            with open(config_file, 'r') as f:
                file_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Error loading config file {config_file}: {e}")
            return

        if not isinstance(file_config, dict):
            logger.warning(f"Config file {config_file} does not contain a JSON object, skipping")
            return

        self.settings.update(file_config)
        self.config_sources.append(f'file_{config_file}')
        logger.info(f"Loaded configuration from {config_file}")

    def _load_environment_variables(self):
        """Load configuration from TRENDS_<KEY> environment variables"""
        env_overrides = 0
        for config_key, schema in self.schemas.items():
            env_var = f"{self.ENV_PREFIX}{config_key.upper()}"
            if env_var not in os.environ:
                continue

            raw = os.environ[env_var]
            try:
                value = self._convert(raw, schema)
            except ValueError as e:
                logger.warning(f"Error applying environment variable {env_var}: {e}")
                continue

            self.settings[config_key] = value
            env_overrides += 1

        if env_overrides > 0:
            self.config_sources.append(f'env_vars_{env_overrides}')
            logger.info(f"Applied {env_overrides} environment variable overrides")

    @staticmethod
    def _convert(raw: str, schema: ConfigurationSchema) -> Any:
        if schema.nullable and raw.strip().lower() in ('', 'none', 'null'):
            return None
        if schema.data_type == int:
            return int(raw)
        if schema.data_type == float:
            return float(raw)
        if schema.data_type == bool:
            return raw.lower() in ('true', '1', 'yes', 'on')
        return raw

    def _validate_all_configs(self):
        """Validate all configuration values"""
        self.validation_errors = []

        for key, schema in self.schemas.items():
            self._validate_config_value(key, self.settings.get(key), schema, self.validation_errors)

        low = self.settings.get('moderate_seasonality')
        high = self.settings.get('pronounced_seasonality')
        if isinstance(low, (int, float)) and isinstance(high, (int, float)) and low > high:
            self.validation_errors.append("'moderate_seasonality' must not exceed 'pronounced_seasonality'")

        if self.validation_errors:
            error_msg = f"Configuration validation failed: {', '.join(self.validation_errors)}"
            logger.error(error_msg)
            raise ValueError(error_msg)

        logger.debug("All configurations validated successfully")

    @staticmethod
    def _validate_config_value(key: str, value: Any, schema: ConfigurationSchema, errors: List[str]):
        """Validate a single configuration value"""
        if value is None:
            if not schema.nullable:
                errors.append(f"'{key}' is required")
            return

        # JSON has no int/float distinction for whole numbers
        if schema.data_type == float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)

        if not isinstance(value, schema.data_type) or (schema.data_type != bool and isinstance(value, bool)):
            errors.append(f"'{key}' must be {schema.data_type.__name__}")
            return

        if schema.min_value is not None and isinstance(value, (int, float)) and value < schema.min_value:
            errors.append(f"'{key}' must be >= {schema.min_value}")

        if schema.max_value is not None and isinstance(value, (int, float)) and value > schema.max_value:
            errors.append(f"'{key}' must be <= {schema.max_value}")

        if schema.allowed_values is not None and value not in schema.allowed_values:
            errors.append(f"'{key}' must be one of {schema.allowed_values}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value with optional default"""
        return self.settings.get(key, default)

    def get_typed(self, key: str, expected_type: type, default: Any = None) -> Any:
        """Get configuration value with type checking"""
        value = self.get(key, default)

        if value is not None and not isinstance(value, expected_type):
            try:
                if expected_type == bool and isinstance(value, str):
                    value = value.lower() in ('true', '1', 'yes', 'on')
                else:
                    value = expected_type(value)
            except (ValueError, TypeError):
                logger.warning(f"Could not convert '{key}' to {expected_type.__name__}")
                return default

        return value

    def set(self, key: str, value: Any, validate: bool = True) -> bool:
        """Set configuration value with optional validation"""
        if validate and key in self.schemas:
            errors: List[str] = []
            self._validate_config_value(key, value, self.schemas[key], errors)
            if errors:
                logger.error(f"Validation failed for '{key}': {errors}")
                return False

        old_value = self.settings.get(key)
        self.settings[key] = value
        logger.info(f"Configuration updated: {key} = {value} (was: {old_value})")
        return True

    def get_section(self, prefix: str) -> Dict[str, Any]:
        """Get all configuration values with a specific prefix"""
        return {
            key: value for key, value in self.settings.items()
            if key.startswith(prefix)
        }

    def get_analysis_settings(self) -> AnalysisSettings:
        """Snapshot the numeric policy for the analysis functions"""
        override = self.get('harmonics_override')
        return AnalysisSettings(
            harmonics_divisor=self.get_typed('harmonics_divisor', int),
            harmonics_override=int(override) if override is not None else None,
            momentum_lookback=self.get_typed('momentum_lookback', int),
            direction_threshold_ratio=self.get_typed('direction_threshold_ratio', float),
            min_direction_threshold=self.get_typed('min_direction_threshold', float),
            pronounced_seasonality=self.get_typed('pronounced_seasonality', float),
            moderate_seasonality=self.get_typed('moderate_seasonality', float),
            presentation_precision=self.get_typed('presentation_precision', int),
        )
