from __future__ import annotations

import io
import logging
from pathlib import Path

import pandas as pd

from freightsched.core.flight_schedule import FlightRow
from freightsched.core.scheduler import OrderReport

logger = logging.getLogger(__name__)

FLIGHT_COLUMNS = ["flight", "departure", "arrival", "day", "load", "capacity"]
ORDER_COLUMNS = ["order", "flight", "departure", "arrival", "day", "status"]


def flights_frame(rows: list[FlightRow]) -> pd.DataFrame:
    """Flights as a DataFrame, one row per flight in schedule order."""
    return pd.DataFrame(
        [
            {
                "flight": r.number,
                "departure": r.departure,
                "arrival": r.destination,
                "day": r.day,
                "load": r.load,
                "capacity": r.capacity,
            }
            for r in rows
        ],
        columns=FLIGHT_COLUMNS,
    )


def report_frame(rows: list[OrderReport]) -> pd.DataFrame:
    """Order report as a DataFrame.

    Unscheduled orders have empty flight/day cells and status "not scheduled".
    Flight and day use the nullable Int64 dtype so they stay integers.
    """
    df = pd.DataFrame(
        [
            {
                "order": r.order_id,
                "flight": r.flight_number,
                "departure": r.departure,
                "arrival": r.destination,
                "day": r.day,
                "status": "scheduled" if r.scheduled else "not scheduled",
            }
            for r in rows
        ],
        columns=ORDER_COLUMNS,
    )
    df["flight"] = df["flight"].astype("Int64")
    df["day"] = df["day"].astype("Int64")
    return df


def write_report_excel_bytes(flights: list[FlightRow], orders: list[OrderReport]) -> bytes:
    """Write flights and orders to an .xlsx workbook (sheets "flights", "orders")."""
    bio = io.BytesIO()
    with pd.ExcelWriter(bio, engine="openpyxl") as writer:
        flights_frame(flights).to_excel(writer, sheet_name="flights", index=False)
        report_frame(orders).to_excel(writer, sheet_name="orders", index=False)
    return bio.getvalue()


def write_report_excel(path: str | Path, flights: list[FlightRow], orders: list[OrderReport]) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(write_report_excel_bytes(flights, orders))
    logger.info("Wrote %d flights and %d orders to %s", len(flights), len(orders), p)
    return p
