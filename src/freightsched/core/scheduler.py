from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from freightsched.core.flight_schedule import FlightSchedule
from freightsched.core.models import Assigned, Flight, Order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OrderReport:
    order_id: str
    flight_number: int | None
    departure: str
    destination: str
    day: int | None

    @property
    def scheduled(self) -> bool:
        return self.flight_number is not None


@dataclass(frozen=True)
class ScheduleSummary:
    scheduled: int
    unscheduled: int


def _bind(order: Order, flight: Flight) -> None:
    # add_order() raises before touching the load when the flight is full, and
    # assign() cannot fail on an unassigned order, so both happen or neither.
    flight.add_order()
    order.assign(flight)


class OrderScheduler:
    """Greedy first-fit assignment of orders to flights.

    Orders are taken in the mapping's iteration order (highest priority
    first). Each one goes on the first flight in schedule order that serves
    its destination and still has room. One pass, no reassignment.

    The scheduler borrows both collections; flights and orders are mutated
    in place.
    """

    def __init__(self, flight_schedule: FlightSchedule, orders: Mapping[str, Order]) -> None:
        self.flight_schedule = flight_schedule
        self.orders = orders

    def schedule(self) -> ScheduleSummary:
        scheduled = 0
        unscheduled = 0

        for order_id, order in self.orders.items():
            if order.is_assigned:
                continue

            flight = self.flight_schedule.next_available(order.destination)
            if flight is None:
                unscheduled += 1
                logger.info("No flight with room to %s for order %s", order.destination, order_id)
                continue

            _bind(order, flight)
            scheduled += 1

        logger.info("Scheduled %d orders, %d left unscheduled", scheduled, unscheduled)
        return ScheduleSummary(scheduled=scheduled, unscheduled=unscheduled)

    def report(self) -> list[OrderReport]:
        """One record per order, in priority order. Does not mutate anything."""
        rows: list[OrderReport] = []
        for order_id, order in self.orders.items():
            binding = order.binding
            if isinstance(binding, Assigned):
                rows.append(
                    OrderReport(
                        order_id=order_id,
                        flight_number=binding.flight.number,
                        departure=order.departure,
                        destination=order.destination,
                        day=binding.flight.day,
                    )
                )
            else:
                rows.append(
                    OrderReport(
                        order_id=order_id,
                        flight_number=None,
                        departure=order.departure,
                        destination=order.destination,
                        day=None,
                    )
                )
        return rows
