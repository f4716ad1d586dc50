# main.py

import argparse
import logging
import sys

from .core.config import TrendConfig
from .core.logging_config import DEFAULT_LOG_LEVEL, apply_config_level, setup_logging
from .utils.io_utils import read_monthly_csv, report_from_frame, report_to_frame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inventory trend decomposition report")
    parser.add_argument("csv", help="Monthly counters CSV: label column followed by one column per series")
    parser.add_argument("--harmonics", type=int, default=None, help="Override the low-pass harmonic count")
    parser.add_argument("--format", choices=["json", "csv", "text"], default="json", help="Output format")
    parser.add_argument("--config", default=None, help="JSON configuration file")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (overrides configuration)")
    return parser


def render(report, output_format: str) -> str:
    if output_format == "csv":
        return report_to_frame(report).to_csv()
    if output_format == "text":
        return "\n".join(report.insights)
    return report.to_json(indent=2)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # configured before TrendConfig so its load messages are emitted
    setup_logging(args.log_level or DEFAULT_LOG_LEVEL)

    try:
        config = TrendConfig(args.config)
    except ValueError as e:
        logging.error(f"Invalid configuration: {e}")
        return 1

    apply_config_level(config, args.log_level)

    if args.harmonics is not None and args.harmonics < 1:
        logging.error(f"--harmonics must be >= 1, got {args.harmonics}")
        return 1

    try:
        frame = read_monthly_csv(args.csv)
        report = report_from_frame(frame, harmonics=args.harmonics, settings=config.get_analysis_settings())
    except (OSError, ValueError) as e:
        logging.error(f"Report failed: {e}")
        return 1

    print(render(report, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
