"""
Schedule metrics for Round-Robin simulation results.

Per-process times:
1. Turnaround: finish - arrival
2. Waiting: turnaround - burst (time spent ready but not running)
3. Response: start - arrival (delay before first dispatch)

Aggregates average these over finished processes and add makespan, CPU
utilization, idle time, tail bounded slowdown and context switches.
"""
import numpy as np

from processes import IDLE


def turnaround_time(process):
    if not process.finished:
        return None
    return process.finish_time - process.arrival_time


def waiting_time(process):
    turnaround = turnaround_time(process)
    if turnaround is None:
        return None
    return turnaround - process.burst


def response_time(process):
    if not process.started:
        return None
    return process.start_time - process.arrival_time


def _finished(processes):
    return [p for p in processes if p.started and p.finished]


def avg_turnaround(processes):
    finished = _finished(processes)
    if not finished:
        return 0.0
    return float(np.mean([turnaround_time(p) for p in finished]))


def avg_waiting(processes):
    finished = _finished(processes)
    if not finished:
        return 0.0
    return float(np.mean([waiting_time(p) for p in finished]))


def avg_response(processes):
    finished = _finished(processes)
    if not finished:
        return 0.0
    return float(np.mean([response_time(p) for p in finished]))


def makespan(processes):
    """Time from the first arrival to the last completion."""
    finished = _finished(processes)
    if not finished:
        return 0.0
    first_arrival = min(p.arrival_time for p in finished)
    last_finish = max(p.finish_time for p in finished)
    return float(last_finish - first_arrival)


def cpu_utilization(processes):
    """
    Utilization = (sum of bursts) / makespan
    Returns a value in [0, 1].
    """
    span = makespan(processes)
    if span <= 0:
        return 0.0
    busy = sum(p.burst for p in _finished(processes))
    return busy / span


def idle_time(processes):
    """Time the CPU ran nothing between clock 0 and the last completion."""
    finished = _finished(processes)
    if not finished:
        return 0.0
    return float(max(p.finish_time for p in finished) - sum(p.burst for p in finished))


def p95_slowdown(processes, tau=1.0):
    """
    Calculate the 95th percentile of bounded slowdown across all processes.

    For each process:
      - bounded_slowdown = turnaround / max(burst, tau)

    Args:
        processes: List of Process objects
        tau: Floor on burst length so very short processes do not dominate

    Returns:
        P95 bounded slowdown as float, or 0.0 if no finished processes
    """
    finished = _finished(processes)
    if not finished:
        return 0.0

    slowdowns = [turnaround_time(p) / max(p.burst, tau) for p in finished]
    return float(np.percentile(slowdowns, 95))


def context_switches(trace):
    """Number of hand-overs between two different processes in a trace (idle gaps excluded)."""
    busy = [entry for entry in trace if entry != IDLE]
    return sum(1 for before, after in zip(busy, busy[1:]) if before != after)
