from __future__ import annotations


class InputError(ValueError):
    """Base class for problems with the schedule or order inputs."""


class MalformedScheduleInput(InputError):
    """A schedule line does not have the expected shape."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class MissingDayContext(MalformedScheduleInput):
    """A flight line appeared before any `Day N:` header."""


class EmptyOrNoInput(InputError):
    """The input file is absent or has no lines."""


class MalformedOrderInput(InputError):
    pass


class SchedulingError(RuntimeError):
    pass


class FlightFullError(SchedulingError):
    pass


class OrderAlreadyAssignedError(SchedulingError):
    pass
