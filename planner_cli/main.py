"""Print a periodized training plan between two dates.

Usage:
    python -m planner_cli.main --start 2021-06-06 --race 2021-08-07
    python -m planner_cli.main --format csv      # dates from PLAN_* env vars
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from training_plan.planner import generate_training_plan
from training_plan.rendering.renderer import format_result
from training_plan.serialization import to_csv_string, to_json_string

from planner_cli.config import (
    PLAN_LOG_LEVEL,
    PLAN_OUTPUT_FORMAT,
    PLAN_RACE_DATE,
    PLAN_START_DATE,
)

OUTPUT_FORMATS = ("text", "json", "csv")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_date(value: str) -> date:
    """argparse type: ISO date ``YYYY-MM-DD``."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date {value!r}, expected YYYY-MM-DD"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a periodized week-by-week training plan"
    )
    parser.add_argument(
        "--start",
        type=_parse_date,
        default=PLAN_START_DATE,
        help="First day of training (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--race",
        type=_parse_date,
        default=PLAN_RACE_DATE,
        help="Race day (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=PLAN_OUTPUT_FORMAT,
        help="Output format",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=PLAN_LOG_LEVEL,
        help="Logging level",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse *argv*, also checking the environment-provided defaults.

    argparse converts string defaults through ``type`` but never checks them
    against ``choices``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.format not in OUTPUT_FORMATS:
        parser.error(
            f"invalid output format {args.format!r} "
            f"(choose from {', '.join(OUTPUT_FORMATS)})"
        )
    if args.log_level not in LOG_LEVELS:
        parser.error(
            f"invalid log level {args.log_level!r} "
            f"(choose from {', '.join(LOG_LEVELS)})"
        )
    return args


def render_output(start_date: date, race_date: date, output_format: str) -> tuple[str, bool]:
    """Generate the plan and render it in *output_format*.

    Returns:
        A tuple of (output text, whether the plan was generated).
    """
    result = generate_training_plan(start_date, race_date)
    if output_format == "json":
        text = to_json_string(result)
    elif output_format == "csv" and result.ok:
        text = to_csv_string(result).rstrip("\n")
    else:
        text = "\n".join(format_result(result))
    return text, result.ok


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # argparse runs string defaults (from the environment) through _parse_date too
    text, ok = render_output(args.start, args.race, args.format)
    print(text)
    # The planner has already logged why no plan was generated
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
