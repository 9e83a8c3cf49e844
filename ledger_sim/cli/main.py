"""Command-line entry point."""

import argparse
import sys

from ledger_sim.cli.app import LedgerApp
from ledger_sim.config import LedgerConfig, ROUNDING_MODES
from ledger_sim.exceptions import ConfigurationError
from ledger_sim.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger-sim",
        description="Interactive bank ledger with monthly interest statements",
    )
    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL or WARNING)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        help="Log format (default: LOG_FORMAT or standard)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print tables as JSON instead of text",
    )
    parser.add_argument(
        "--rounding",
        choices=sorted(ROUNDING_MODES),
        help="Rounding applied to monthly interest (default: HALF_EVEN)",
    )
    parser.add_argument(
        "--day-count",
        type=int,
        help="Days per year for daily interest (default: 365)",
    )
    return parser


def load_config(args: argparse.Namespace) -> LedgerConfig:
    """Environment configuration overridden by command-line flags."""
    config = LedgerConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level
    if args.log_format:
        config.log_format = args.log_format
    if args.json:
        config.display.output_format = "json"
    if args.rounding:
        config.interest.rounding = args.rounding
    if args.day_count is not None:
        config.interest.day_count = args.day_count
    return config.validate()


def main(argv: list[str] | None = None) -> int:
    """Run the interactive ledger; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    setup_logging(config.log_level, config.log_format)
    LedgerApp(config).run()
    return 0
