"""Command line entry point for monthly footprint calculation."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import get_config_from_env, load_config
from .exceptions import ConfigError, FootprintError
from .pipeline import run_footprint
from .report import render_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridfootprint",
        description="Monthly carbon footprint of a half-hourly metered supply",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # January 2024 for one meter, key from the environment
  OPENVOLT_API_KEY=... gridfootprint 6514167223e3d1424bf82742 2024-01

  # Settings from a YAML file, with data-quality metrics
  gridfootprint 6514167223e3d1424bf82742 2024-02 --config footprint.yaml --quality
""",
    )
    parser.add_argument("meter_id", help="Meter identifier")
    parser.add_argument("period", help="Month to report, as YYYY-MM")
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--api-key",
        help="Meter API key (overrides config and OPENVOLT_API_KEY)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP request timeout in seconds",
    )
    parser.add_argument(
        "--quality",
        action="store_true",
        help="Also print consumption data-quality metrics",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config_from_env(load_config(args.config))
        if args.api_key:
            config.openvolt.api_key = args.api_key
        if args.timeout is not None:
            config.http.timeout = args.timeout
    except (ConfigError, ValidationError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        report = run_footprint(args.meter_id, args.period, config)
    except FootprintError as e:
        print(f"Error fetching and processing data: {e}", file=sys.stderr)
        return 1

    print(render_report(report.result))
    if args.quality:
        print(json.dumps(report.quality, indent=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())
