"""Print a loan's amortization schedule.

Defaults reproduce a 15 year, 7% monthly-pay loan with daily compounding::

    amortization --principal 200000 --term 15 --rate 7.0
"""

from __future__ import annotations

import argparse
import logging
from datetime import date

from amortization.config import ScheduleConfig
from amortization.loan import Loan
from amortization.logging import setup_logging
from amortization.models.enums import CompoundingFrequency, PaymentFrequency
from amortization.sinks.console import OUTPUT_FORMATS, ConsoleSink

logger = logging.getLogger(__name__)


def build_parser(config: ScheduleConfig) -> argparse.ArgumentParser:
    """Build the argument parser, seeding defaults from ``config``."""
    parser = argparse.ArgumentParser(description="Print a loan amortization schedule")
    parser.add_argument(
        "--principal",
        type=float,
        default=200000.0,
        help="Amount borrowed (default: 200000)",
    )
    parser.add_argument(
        "--term",
        type=float,
        default=15.0,
        help="Loan term in years (default: 15)",
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=7.0,
        help="Nominal annual rate in percent (default: 7.0)",
    )
    parser.add_argument(
        "--frequency",
        type=str.upper,
        choices=[f.value for f in PaymentFrequency],
        default=PaymentFrequency.MONTHLY.value,
        help="Payment frequency (default: MONTHLY)",
    )
    parser.add_argument(
        "--compounding",
        type=str.upper,
        choices=[c.value for c in CompoundingFrequency],
        default=CompoundingFrequency.DAILY.value,
        help="Compounding frequency (default: DAILY)",
    )
    parser.add_argument(
        "--origination",
        type=date.fromisoformat,
        default=date(2024, 2, 15),
        help="Origination date, YYYY-MM-DD (default: 2024-02-15)",
    )
    parser.add_argument(
        "--first-payment",
        type=date.fromisoformat,
        default=date(2024, 4, 1),
        help="First payment date, YYYY-MM-DD (default: 2024-04-01)",
    )
    parser.add_argument(
        "--decimal-places",
        type=int,
        default=config.decimal_places,
        help=f"Digits to round amounts to (default: {config.decimal_places})",
    )
    parser.add_argument(
        "--max-periods",
        type=int,
        default=config.max_periods,
        help=f"Cap on the number of payments (default: {config.max_periods})",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=config.output_format,
        help=f"Output format (default: {config.output_format})",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a summary after the schedule",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=config.log_format,
        help=f"Log format (default: {config.log_format})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = ScheduleConfig.from_env()
    args = build_parser(config).parse_args(argv)

    setup_logging(level=args.log_level, format_type=args.log_format)

    loan = Loan(
        args.principal,
        args.term,
        args.rate,
        PaymentFrequency(args.frequency),
        CompoundingFrequency(args.compounding),
        args.origination,
        args.first_payment,
        args.decimal_places,
        max_periods=args.max_periods,
    )
    logger.info(
        "Loan of %s over %s years at %s%%: %d payments of %s",
        args.principal,
        args.term,
        args.rate,
        loan.payment_count(),
        loan.payment_amount(),
    )
    sink = ConsoleSink(output_format=args.format, pretty=args.pretty)
    sink.write_schedule("scheduled", loan.scheduled_payments())
    if args.summary:
        sink.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
