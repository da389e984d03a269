from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from freightsched.core.errors import EmptyOrNoInput, MalformedScheduleInput, MissingDayContext
from freightsched.core.models import Flight

logger = logging.getLogger(__name__)

AIRPORT_CODE_LEN = 3

_DIGITS_RE = re.compile(r"^[0-9]+$")
_PAREN_GROUP_RE = re.compile(r"\(([^()]*)\)")


@dataclass(frozen=True)
class FlightRow:
    number: int
    departure: str
    destination: str
    day: int
    load: int
    capacity: int


def _parse_int(text: str, *, field: str, line_number: int, line: str) -> int:
    s = text.strip()
    if not _DIGITS_RE.match(s):
        raise MalformedScheduleInput(f"{field} is not an integer: {s!r}", line_number=line_number, line=line)
    return int(s)


def _airport_codes(line: str, *, line_number: int) -> tuple[str, str]:
    """Return (departure, destination) from the first two parenthesized groups."""
    groups = _PAREN_GROUP_RE.findall(line)
    if len(groups) < 2:
        raise MalformedScheduleInput(
            "flight line needs a departure and a destination code in parentheses",
            line_number=line_number,
            line=line,
        )
    codes = []
    for raw in groups[:2]:
        code = raw.strip()
        if len(code) != AIRPORT_CODE_LEN:
            raise MalformedScheduleInput(
                f"airport code must be {AIRPORT_CODE_LEN} characters: {raw!r}",
                line_number=line_number,
                line=line,
            )
        codes.append(code)
    return codes[0], codes[1]


class FlightSchedule:
    """Flights in the order the schedule declares them.

    That order is chronological (days ascend) and is also the tie-break order
    for `next_available`: earliest day, then earliest declared flight that day.
    """

    def __init__(self, flights: Iterable[Flight] | None = None) -> None:
        self._flights: list[Flight] = list(flights or [])

    def __len__(self) -> int:
        return len(self._flights)

    def __iter__(self) -> Iterator[Flight]:
        return iter(self._flights)

    @property
    def flights(self) -> tuple[Flight, ...]:
        return tuple(self._flights)

    def load(self, lines: Iterable[str]) -> int:
        """Parse schedule text into flights.

        Expected format:

            Day 1:
            Flight 1: Montreal airport(YUL) to Toronto(YYZ)
            Flight 2: Montreal(YUL) to Calgary(YYC)
            Day 2:
            Flight 3: Montreal(YUL) to Vancouver(YVR)

        Raises a MalformedScheduleInput (or MissingDayContext) on the first bad
        line and EmptyOrNoInput when there are no lines. On failure the
        current flights are kept as they were.

        Returns the number of flights loaded.
        """
        flights: list[Flight] = []
        day = 0
        seen_any = False

        for line_number, raw in enumerate(lines, start=1):
            seen_any = True
            line = raw.rstrip("\r\n")
            colon_idx = line.find(":")
            if colon_idx < 0:
                raise MalformedScheduleInput("missing ':' separator", line_number=line_number, line=line)

            if line.startswith("Day "):
                new_day = _parse_int(line[4:colon_idx], field="day", line_number=line_number, line=line)
                if new_day < 1:
                    raise MalformedScheduleInput("day must be 1 or greater", line_number=line_number, line=line)
                if new_day <= day:
                    raise MalformedScheduleInput(
                        f"day {new_day} does not come after day {day}", line_number=line_number, line=line
                    )
                day = new_day
            elif line.startswith("Flight "):
                if day == 0:
                    raise MissingDayContext("flight listed before any day", line_number=line_number, line=line)
                number = _parse_int(line[7:colon_idx], field="flight number", line_number=line_number, line=line)
                departure, destination = _airport_codes(line[colon_idx + 1 :], line_number=line_number)
                flights.append(Flight(number=number, departure=departure, destination=destination, day=day))
            else:
                logger.debug("Skipping schedule line %d: %r", line_number, line)

        if not seen_any:
            raise EmptyOrNoInput("Flight schedule is empty.")

        self._flights = flights
        logger.info("Loaded %d flights over %d days", len(flights), day)
        return len(flights)

    def next_available(self, destination: str) -> Flight | None:
        """First flight to `destination` that still has room, or None."""
        for flight in self._flights:
            if flight.destination == destination and flight.has_room():
                return flight
        return None

    def display(self) -> list[FlightRow]:
        return [
            FlightRow(
                number=f.number,
                departure=f.departure,
                destination=f.destination,
                day=f.day,
                load=f.load,
                capacity=f.capacity,
            )
            for f in self._flights
        ]
