"""
Process definitions for simulation: text input and synthetic workloads.

Text format: one process per non-blank line, "arrival_time burst" as two
whitespace-separated integers. Anything after '#' is a comment. Ids are
assigned 0, 1, 2, ... in line order.

Synthetic workloads use:
- Poisson arrivals (exponential inter-arrival gaps, rounded to whole ticks)
- Exponential bursts (rounded up, at least one tick)

Supports Common Random Numbers (CRN) via configurable seed for low-variance
cross-quantum comparisons.
"""
import sys

import numpy as np

from errors import InvalidProcessError, WorkloadFormatError
from processes import Process


def parse_processes(lines):
    """
    Parse process definitions from an iterable of text lines.

    Raises:
        WorkloadFormatError: A line is not two integers or describes an invalid process
    """
    processes = []
    for line_number, line in enumerate(lines, start=1):
        text = line.split("#", 1)[0].strip()
        if not text:
            continue

        fields = text.split()
        if len(fields) != 2:
            raise WorkloadFormatError(line_number, f"expected 'arrival_time burst', got {text!r}")
        try:
            arrival_time, burst = int(fields[0]), int(fields[1])
        except ValueError:
            raise WorkloadFormatError(line_number, f"non-integer field in {text!r}") from None

        try:
            processes.append(Process(len(processes), arrival_time, burst))
        except InvalidProcessError as exc:
            raise WorkloadFormatError(line_number, str(exc)) from None
    return processes


def read_processes(source=None):
    """Read process definitions from a path, an open stream, or stdin when None."""
    if source is None:
        return parse_processes(sys.stdin)
    if hasattr(source, "read"):
        return parse_processes(source)
    with open(source, "r") as f:
        return parse_processes(f)


def generate_processes(
    num_processes=20,
    arrival_rate=0.5,   # processes per tick
    mean_burst=6.0,     # mean burst (ticks)
    seed=42
):
    """
    Generate a synthetic workload sorted by arrival time.
    Returns a list of Process objects with ids 0..num_processes-1.
    """
    rng = np.random.default_rng(seed)

    processes = []
    t = 0.0
    for pid in range(num_processes):
        # Interarrival time ~ Exponential(lambda = arrival_rate)
        if pid > 0:
            t += rng.exponential(1.0 / arrival_rate)
        burst = max(1, int(np.ceil(rng.exponential(mean_burst))))
        processes.append(Process(pid, int(t), burst))

    return processes
