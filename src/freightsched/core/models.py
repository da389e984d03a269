from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from freightsched.core.errors import FlightFullError, OrderAlreadyAssignedError

# Every flight carries at most this many orders.
FLIGHT_CAPACITY = 20

# All orders ship out of Montreal.
DEFAULT_ORIGIN = "YUL"


@dataclass(eq=False)
class Flight:
    number: int
    departure: str
    destination: str
    day: int
    capacity: int = FLIGHT_CAPACITY
    load: int = 0

    def has_room(self) -> bool:
        return self.load < self.capacity

    def add_order(self) -> None:
        """Take one more order on this flight.

        Raises FlightFullError (and leaves the load untouched) when full.
        """
        if not self.has_room():
            raise FlightFullError(f"flight {self.number} is full ({self.load}/{self.capacity})")
        self.load += 1


@dataclass(frozen=True)
class Unassigned:
    pass


@dataclass(frozen=True)
class Assigned:
    flight: Flight


Binding = Union[Unassigned, Assigned]

UNASSIGNED = Unassigned()


@dataclass
class Order:
    order_id: str
    destination: str
    departure: str = DEFAULT_ORIGIN
    binding: Binding = field(default=UNASSIGNED)

    @property
    def is_assigned(self) -> bool:
        return isinstance(self.binding, Assigned)

    @property
    def flight(self) -> Flight | None:
        if isinstance(self.binding, Assigned):
            return self.binding.flight
        return None

    def assign(self, flight: Flight) -> None:
        # Unassigned -> Assigned is the only transition.
        if isinstance(self.binding, Assigned):
            raise OrderAlreadyAssignedError(
                f"order {self.order_id} already on flight {self.binding.flight.number}"
            )
        self.binding = Assigned(flight)
