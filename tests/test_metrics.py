"""
Tests for schedule metrics.
"""
import pytest
from test_utils import create_test_process, create_test_processes

import metrics
from processes import IDLE
from simulator import simulate


@pytest.fixture
def finished_overlap(two_overlapping_processes):
    simulate(2, 10, two_overlapping_processes)
    return two_overlapping_processes


def test_per_process_times(finished_overlap):
    p0, p1 = finished_overlap

    assert metrics.turnaround_time(p0) == 6
    assert metrics.turnaround_time(p1) == 6
    assert metrics.waiting_time(p0) == 2
    assert metrics.waiting_time(p1) == 3
    assert metrics.response_time(p0) == 0
    assert metrics.response_time(p1) == 1


def test_averages(finished_overlap):
    assert metrics.avg_turnaround(finished_overlap) == pytest.approx(6.0)
    assert metrics.avg_waiting(finished_overlap) == pytest.approx(2.5)
    assert metrics.avg_response(finished_overlap) == pytest.approx(0.5)


def test_busy_cpu_is_fully_utilized(finished_overlap):
    assert metrics.makespan(finished_overlap) == pytest.approx(7.0)
    assert metrics.cpu_utilization(finished_overlap) == pytest.approx(1.0)
    assert metrics.idle_time(finished_overlap) == pytest.approx(0.0)


def test_idle_gaps_lower_utilization():
    processes = create_test_processes((0, 2), (5, 1))
    simulate(2, 10, processes)

    assert metrics.idle_time(processes) == pytest.approx(3.0)
    assert metrics.makespan(processes) == pytest.approx(6.0)
    assert metrics.cpu_utilization(processes) == pytest.approx(0.5)


def test_p95_slowdown(finished_overlap):
    # Slowdowns are 6/4 and 6/3
    assert metrics.p95_slowdown(finished_overlap) == pytest.approx(1.975)


def test_p95_slowdown_tau_floor(finished_overlap):
    assert metrics.p95_slowdown(finished_overlap, tau=6.0) == pytest.approx(1.0)


def test_unfinished_processes_are_ignored():
    pending = create_test_process(0, 0, 3)

    assert metrics.turnaround_time(pending) is None
    assert metrics.waiting_time(pending) is None
    assert metrics.response_time(pending) is None
    assert metrics.avg_turnaround([pending]) == 0.0
    assert metrics.avg_waiting([pending]) == 0.0
    assert metrics.makespan([pending]) == 0.0
    assert metrics.cpu_utilization([pending]) == 0.0
    assert metrics.p95_slowdown([pending]) == 0.0


@pytest.mark.parametrize("trace, expected", [
    ([], 0),
    ([0], 0),
    ([0, 1, 0, 1], 3),
    ([IDLE, 0], 0),
    ([0, IDLE, 0], 0),
    ([0, IDLE, 1], 1),
])
def test_context_switches(trace, expected):
    assert metrics.context_switches(trace) == expected
