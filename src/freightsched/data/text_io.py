from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from freightsched.core.errors import EmptyOrNoInput, MalformedOrderInput, MalformedScheduleInput
from freightsched.core.flight_schedule import FlightSchedule
from freightsched.core.models import DEFAULT_ORIGIN, Order

logger = logging.getLogger(__name__)


def read_schedule_lines(path: str | Path) -> list[str]:
    p = Path(path)
    if not p.is_file():
        raise EmptyOrNoInput("Flight schedule file does not exist.")
    try:
        lines = p.read_text(encoding="utf-8-sig").splitlines()
    except UnicodeDecodeError as exc:
        raise MalformedScheduleInput(f"Flight schedule file is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise EmptyOrNoInput(f"Flight schedule file could not be read: {exc}") from exc
    if not lines:
        raise EmptyOrNoInput("Flight schedule file is empty.")
    return lines


def load_schedule_file(path: str | Path) -> FlightSchedule:
    schedule = FlightSchedule()
    schedule.load(read_schedule_lines(path))
    return schedule


def _unique_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in pairs:
        if key in out:
            raise MalformedOrderInput(f"duplicate key: {key!r}")
        out[key] = value
    return out


def _field(record: dict[str, Any], name: str) -> Any:
    # Field names are case-insensitive ("destination" / "Destination").
    for key, value in record.items():
        if key.lower() == name.lower():
            return value
    return None


def parse_orders(text: str, *, origin: str = DEFAULT_ORIGIN) -> dict[str, Order]:
    """Parse the orders JSON into Order objects keyed by order id.

    Expected shape (key order is the scheduling priority):

        {
            "order-001": {"destination": "YYZ"},
            "order-002": {"destination": "YYC"}
        }

    Each record may also carry "departure" (defaults to `origin`) and a null
    "schedFlight"; any other fields are ignored.
    """
    try:
        raw = json.loads(text, object_pairs_hook=_unique_pairs)
    except json.JSONDecodeError as exc:
        raise MalformedOrderInput(f"orders are not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise MalformedOrderInput("orders must be a JSON object keyed by order id")

    orders: dict[str, Order] = {}
    for order_id, record in raw.items():
        if not isinstance(record, dict):
            raise MalformedOrderInput(f"order {order_id!r}: record must be an object")

        destination = _field(record, "destination")
        if not isinstance(destination, str) or not destination.strip():
            raise MalformedOrderInput(f"order {order_id!r}: destination must be a non-empty string")

        departure = _field(record, "departure")
        if departure is None:
            departure = origin
        elif not isinstance(departure, str):
            raise MalformedOrderInput(f"order {order_id!r}: departure must be a string")

        orders[order_id] = Order(order_id=order_id, destination=destination.strip(), departure=departure.strip())

    logger.info("Loaded %d orders", len(orders))
    return orders


def load_orders_file(path: str | Path, *, origin: str = DEFAULT_ORIGIN) -> dict[str, Order]:
    p = Path(path)
    if not p.is_file():
        raise EmptyOrNoInput("Orders file does not exist.")
    try:
        text = p.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedOrderInput(f"Orders file is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise EmptyOrNoInput(f"Orders file could not be read: {exc}") from exc
    if not text.strip():
        raise EmptyOrNoInput("Orders file is empty.")
    return parse_orders(text, origin=origin)
