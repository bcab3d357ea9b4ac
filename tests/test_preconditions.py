"""
Tests for simulator input validation.
"""
import pytest
from test_utils import create_test_process, create_test_processes

from errors import (
    DuplicateProcessError,
    EmptyWorkloadError,
    InvalidProcessError,
    InvalidQuantumError,
    InvalidTraceLengthError,
    SchedulingError,
    UnsortedArrivalsError,
)
from processes import UNSET
from simulator import simulate


@pytest.mark.parametrize("quantum", [0, -2, 1.5, None])
def test_invalid_quantum(quantum):
    with pytest.raises(InvalidQuantumError):
        simulate(quantum, 10, create_test_processes((0, 3)))


@pytest.mark.parametrize("max_seq_len", [-1, 2.0])
def test_invalid_trace_length(max_seq_len):
    with pytest.raises(InvalidTraceLengthError):
        simulate(2, max_seq_len, create_test_processes((0, 3)))


def test_empty_workload():
    with pytest.raises(EmptyWorkloadError):
        simulate(2, 10, [])


def test_duplicate_ids():
    processes = [create_test_process(7, 0, 3), create_test_process(7, 1, 2)]
    with pytest.raises(DuplicateProcessError):
        simulate(2, 10, processes)


def test_unsorted_arrivals_are_rejected_not_sorted():
    processes = create_test_processes((4, 3), (1, 2))
    with pytest.raises(UnsortedArrivalsError, match="process 1"):
        simulate(2, 10, processes)

    # Nothing was scheduled
    assert all(p.start_time == UNSET and p.finish_time == UNSET for p in processes)


def test_equal_arrivals_are_sorted_enough():
    processes = create_test_processes((2, 1), (2, 1), (3, 1))
    simulate(2, 10, processes)
    assert all(p.finished for p in processes)


@pytest.mark.parametrize("arrival, burst", [(-1, 3), (0, 0), (0, -4)])
def test_invalid_process_fields(arrival, burst):
    with pytest.raises(InvalidProcessError):
        create_test_process(0, arrival, burst)


def test_errors_are_value_errors():
    for error in (InvalidQuantumError, InvalidTraceLengthError, EmptyWorkloadError,
                  DuplicateProcessError, UnsortedArrivalsError, InvalidProcessError):
        assert issubclass(error, SchedulingError)
        assert issubclass(error, ValueError)
