"""Command line entry point for generating the monthly studio dashboard."""

from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path
from typing import Iterable, Tuple

from . import config
from .dashboard import build_dashboard
from .excel import write_dashboard_workbook
from .formatting import format_dashboard
from .loader import load_revenues, load_transactions
from .log import configure_logging, get_logger
from .periods import last_month_range, month_of

logger = get_logger(__name__)


def parse_month(value: str) -> Tuple[int, int]:
    """Parse ``YYYY-MM`` into a 0-based ``(month, year)`` pair."""

    try:
        parsed = datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}") from None
    return parsed.month - 1, parsed.year


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Summarise a month of studio revenues and expenses, including "
            "installment purchases, with a rolling trend."
        )
    )
    parser.add_argument(
        "transactions_path",
        nargs="?",
        default="transactions.csv",
        help="Path to the expense transactions export (CSV or JSON).",
    )
    parser.add_argument(
        "revenues_path",
        nargs="?",
        default="revenues.csv",
        help="Path to the revenues export (CSV or JSON).",
    )
    parser.add_argument(
        "--month",
        type=parse_month,
        help="Reporting month as YYYY-MM. Defaults to the previous calendar month.",
    )
    parser.add_argument(
        "--window",
        type=int,
        default=config.TREND_WINDOW,
        help=f"Number of months in the trend (default: {config.TREND_WINDOW}).",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=config.TOP_COST_LIMIT,
        help=f"Number of cost categories to list (default: {config.TOP_COST_LIMIT}).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the report to the specified file instead of printing to stdout.",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Also write the dashboard to this Excel workbook.",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"Logging verbosity (default: {config.LOG_LEVEL}).",
    )
    return parser.parse_args(argv)


def run(argv: Iterable[str] | None = None) -> str:
    args = parse_args(argv)
    configure_logging(args.log_level)

    transactions_path = Path(args.transactions_path)
    revenues_path = Path(args.revenues_path)
    for path in (transactions_path, revenues_path):
        if not path.exists():
            raise SystemExit(f"Input file not found: {path}")

    try:
        transactions = load_transactions(transactions_path)
        revenues = load_revenues(revenues_path)
    except ValueError as exc:
        raise SystemExit(str(exc))

    if args.month:
        month, year = args.month
    else:
        month, year = month_of(last_month_range()[0])
    logger.info("Building dashboard for %02d/%d", month + 1, year)

    dashboard = build_dashboard(transactions, revenues, month, year, args.window, args.top)
    output_text = format_dashboard(dashboard) + "\n"

    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)

    if args.excel_output:
        try:
            write_dashboard_workbook(dashboard, args.excel_output)
        except Exception as exc:
            raise SystemExit(f"Failed to write Excel workbook: {exc}")
    return output_text


def main() -> None:
    run()


if __name__ == "__main__":
    main()
