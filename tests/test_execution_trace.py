"""
Tests for the compressed execution trace.
"""
from execution_trace import ExecutionTrace
from processes import IDLE


def test_consecutive_entries_are_compressed():
    trace = ExecutionTrace(10)
    for entry in [IDLE, IDLE, 0, 0, 1, 0]:
        trace.emit(entry)

    assert trace.entries == [IDLE, 0, 1, 0]


def test_emit_reports_whether_entry_was_appended():
    trace = ExecutionTrace(2)

    assert trace.emit(3) is True
    assert trace.emit(3) is False
    assert trace.emit(4) is True
    assert trace.emit(5) is False  # full
    assert trace.full


def test_zero_capacity_never_records():
    trace = ExecutionTrace(0)
    trace.emit(IDLE)
    trace.emit_cycles([0, 1], 5)

    assert len(trace) == 0


def test_emit_cycles_single_occupant_is_one_entry():
    trace = ExecutionTrace(100)
    trace.emit_cycles([2], 10 ** 12)

    assert trace.entries == [2]


def test_emit_cycles_stops_at_capacity():
    trace = ExecutionTrace(5)
    trace.emit(1)
    trace.emit_cycles([1, 2, 3], 10 ** 12)

    assert list(trace) == [1, 2, 3, 1, 2]
