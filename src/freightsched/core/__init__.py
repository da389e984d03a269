"""Core package.

Flight schedule, order models and the greedy scheduler. No file or console
I/O happens here.
"""

from freightsched.core.errors import (
    EmptyOrNoInput,
    InputError,
    MalformedOrderInput,
    MalformedScheduleInput,
    MissingDayContext,
)
from freightsched.core.flight_schedule import FlightRow, FlightSchedule
from freightsched.core.models import DEFAULT_ORIGIN, FLIGHT_CAPACITY, Assigned, Flight, Order, Unassigned
from freightsched.core.scheduler import OrderReport, OrderScheduler, ScheduleSummary

__all__ = [
    "DEFAULT_ORIGIN",
    "FLIGHT_CAPACITY",
    "Assigned",
    "EmptyOrNoInput",
    "Flight",
    "FlightRow",
    "FlightSchedule",
    "InputError",
    "MalformedOrderInput",
    "MalformedScheduleInput",
    "MissingDayContext",
    "Order",
    "OrderReport",
    "OrderScheduler",
    "ScheduleSummary",
    "Unassigned",
]
