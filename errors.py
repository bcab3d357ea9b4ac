"""
Precondition errors raised by the simulator and its input readers.

Every violation has its own error kind so callers can tell a bad quantum
from an unsorted workload. All of them are ValueErrors.
"""


class SchedulingError(ValueError):
    """Base class for invalid simulator input."""


class InvalidQuantumError(SchedulingError):
    pass


class InvalidTraceLengthError(SchedulingError):
    pass


class EmptyWorkloadError(SchedulingError):
    pass


class DuplicateProcessError(SchedulingError):
    pass


class UnsortedArrivalsError(SchedulingError):
    """Processes are not listed in non-decreasing arrival order."""


class InvalidProcessError(SchedulingError):
    pass


class WorkloadFormatError(SchedulingError):
    """A process definition line could not be parsed."""

    def __init__(self, line_number, message):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number
