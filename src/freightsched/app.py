from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from freightsched.core.errors import InputError
from freightsched.core.flight_schedule import FlightRow
from freightsched.core.scheduler import OrderReport, OrderScheduler
from freightsched.data.excel_io import write_report_excel
from freightsched.data.text_io import load_orders_file, load_schedule_file
from freightsched.logging_conf import configure_logging
from freightsched.settings import Settings

logger = logging.getLogger(__name__)


def format_flight(row: FlightRow) -> str:
    return f"Flight: {row.number}, departure: {row.departure}, arrival: {row.destination}, day: {row.day}"


def format_order(row: OrderReport) -> str:
    if not row.scheduled:
        return f"order: {row.order_id}, flightNumber: not scheduled"
    return (
        f"order: {row.order_id}, flightNumber: {row.flight_number}, "
        f"departure: {row.departure}, arrival: {row.destination}, day: {row.day}"
    )


def print_flights(rows: list[FlightRow], out: TextIO) -> None:
    if not rows:
        print("There are no flights to display.", file=out)
        return
    for row in rows:
        print(format_flight(row), file=out)


def print_orders(rows: list[OrderReport], out: TextIO) -> None:
    if not rows:
        print("There are no orders to display", file=out)
        return
    for row in rows:
        print(format_order(row), file=out)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freightsched",
        description="Assign orders to flights, first flight with room wins.",
    )
    parser.add_argument("schedule", type=Path, help="Flight schedule text file")
    parser.add_argument("orders", type=Path, help="Orders JSON file (key order = priority)")
    parser.add_argument("--export", type=Path, default=None, help="Also write flights and orders to this .xlsx")
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument("--no-schedule", action="store_true", help="Do not print the flight schedule")
    return parser


def run(settings: Settings, out: TextIO) -> int:
    try:
        flight_schedule = load_schedule_file(settings.schedule_path)
    except InputError as exc:
        logger.error("Could not load flight schedule %s: %s", settings.schedule_path, exc)
        print(str(exc), file=out)
        return 1

    if settings.show_schedule:
        print_flights(flight_schedule.display(), out)

    try:
        orders = load_orders_file(settings.orders_path)
    except InputError as exc:
        logger.error("Could not load orders %s: %s", settings.orders_path, exc)
        print(str(exc), file=out)
        return 1

    scheduler = OrderScheduler(flight_schedule, orders)
    scheduler.schedule()
    report = scheduler.report()
    print_orders(report, out)

    if settings.export_path is not None:
        write_report_excel(settings.export_path, flight_schedule.display(), report)

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = Settings(
        schedule_path=args.schedule,
        orders_path=args.orders,
        export_path=args.export,
        log_level=args.log_level,
        show_schedule=not args.no_schedule,
    )
    configure_logging(settings.log_level)
    return run(settings, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
