# core/logging_config.py

import logging
import os

DEFAULT_LOG_LEVEL = os.environ.get("TRENDS_LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO")).upper()
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty below WARNING when pandas loads
QUIET_LOGGERS = ("numexpr", "numexpr.utils", "fsspec")


def setup_logging(log_level=DEFAULT_LOG_LEVEL):
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[
            logging.StreamHandler()
        ]
    )

    # basicConfig leaves an already configured root untouched
    logging.getLogger().setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"Logging initialized at level: {log_level}")


def apply_config_level(config, override=None):
    """Reapply the root level once the configuration has loaded.

    An explicit override (the --log-level flag) wins over the configured
    `log_level`. Returns the level in effect.
    """
    level = (override or config.get('log_level') or DEFAULT_LOG_LEVEL).upper()
    logging.getLogger().setLevel(level)
    return level
