"""
Discrete-event simulation kernel for preemptive Round-Robin CPU scheduling.

Implements a quantum-driven simulation with:
- Job queue of processes that have not arrived yet (caller order)
- Ready queue of arrived, unfinished processes (FIFO, preempted ones go to the back)
- Fast-forward over whole round-robin cycles in which nothing arrives or finishes
- Compressed, capped execution trace

Each step handles exactly one phase, chosen from whether the ready queue and
the job queue are empty. All loop state lives in a SimulationContext so the
state machine can be driven and inspected one step at a time.
"""
from collections import deque
from enum import Enum

from errors import (
    DuplicateProcessError,
    EmptyWorkloadError,
    InvalidQuantumError,
    InvalidTraceLengthError,
    UnsortedArrivalsError,
)
from execution_trace import ExecutionTrace
from processes import IDLE


class TieBreak(Enum):
    """Who queues first when a quantum expires at the exact tick of an arrival."""
    ARRIVAL_FIRST = "arrival-first"
    PREEMPTED_FIRST = "preempted-first"


class Phase(Enum):
    FINISHED = "finished"  # nothing ready, nothing left to arrive
    WAITING = "waiting"    # nothing ready, CPU idles until the next arrival
    STEADY = "steady"      # processes ready, more still to arrive
    DRAINING = "draining"  # processes ready, no more arrivals


# (ready queue non-empty, job queue non-empty) -> phase
PHASE_TABLE = {
    (False, False): Phase.FINISHED,
    (False, True): Phase.WAITING,
    (True, True): Phase.STEADY,
    (True, False): Phase.DRAINING,
}


class SimulationContext:
    """Mutable state of one simulation run."""

    def __init__(self, processes, max_seq_len):
        self.processes = {p.id: p for p in processes}
        self.time = 0
        self.idle_time = 0
        self.job_queue = deque(p.id for p in processes)
        self.ready_queue = deque()
        self.remaining = {p.id: p.burst for p in processes}
        self.trace = ExecutionTrace(max_seq_len)

    def next_arrival(self):
        return self.processes[self.job_queue[0]].arrival_time


class RoundRobinSimulator:
    def __init__(self, quantum, max_seq_len, processes, tie_break=TieBreak.ARRIVAL_FIRST, debug=False):
        self.quantum = quantum
        self.max_seq_len = max_seq_len
        self.processes = processes
        self.tie_break = tie_break
        self.debug = debug
        self.context = None
        self._handlers = {
            Phase.FINISHED: self._finish,
            Phase.WAITING: self._wait,
            Phase.STEADY: self._steady,
            Phase.DRAINING: self._drain,
        }

    def log(self, msg):
        if self.debug:
            time = self.context.time if self.context is not None else 0
            print(f"[t={time}] {msg}")

    def validate(self):
        """Raise a SchedulingError subclass for the first violated precondition."""
        if not isinstance(self.quantum, int) or self.quantum <= 0:
            raise InvalidQuantumError(f"quantum must be a positive integer, got {self.quantum!r}")
        if not isinstance(self.max_seq_len, int) or self.max_seq_len < 0:
            raise InvalidTraceLengthError(
                f"max_seq_len must be a non-negative integer, got {self.max_seq_len!r}")
        if not self.processes:
            raise EmptyWorkloadError("at least one process is required")

        seen = set()
        previous = None
        for process in self.processes:
            if process.id in seen:
                raise DuplicateProcessError(f"process id {process.id} appears more than once")
            seen.add(process.id)
            if previous is not None and process.arrival_time < previous.arrival_time:
                raise UnsortedArrivalsError(
                    f"process {process.id} arrives at {process.arrival_time}, before "
                    f"process {previous.id} listed ahead of it (arrives at {previous.arrival_time})")
            previous = process

    def reset(self):
        """Validate the input and start a fresh run from clock 0."""
        self.validate()
        # Reset all process state to avoid pollution from previous simulations
        for process in self.processes:
            process.reset()
        self.context = SimulationContext(self.processes, self.max_seq_len)

    def phase(self):
        ctx = self.context
        return PHASE_TABLE[(bool(ctx.ready_queue), bool(ctx.job_queue))]

    def step(self):
        """Handle one phase of the state machine and return it."""
        phase = self.phase()
        self._handlers[phase]()
        return phase

    def run(self):
        """
        Simulate until every process has finished.

        Returns:
            The compressed execution trace as a list of process ids and IDLE.
        """
        self.reset()
        while self.step() is not Phase.FINISHED:
            pass
        self.log(f"Simulation complete ({self.context.idle_time} idle)")
        return list(self.context.trace.entries)

    # Phase handlers

    def _finish(self):
        pass

    def _wait(self):
        ctx = self.context
        pid = ctx.job_queue.popleft()
        arrival = ctx.processes[pid].arrival_time
        if arrival > ctx.time:
            self.log(f"CPU IDLE until t={arrival}")
            ctx.trace.emit(IDLE)
            ctx.idle_time += arrival - ctx.time
            ctx.time = arrival
        ctx.ready_queue.append(pid)
        self.log(f"Process {pid} ARRIVED")
        self._admit_arrivals(inclusive=True)

    def _steady(self):
        ctx = self.context
        next_arrival = ctx.next_arrival()
        if next_arrival <= ctx.time:
            pid = ctx.job_queue.popleft()
            ctx.ready_queue.append(pid)
            self.log(f"Process {pid} ARRIVED")
            return
        if self._fast_forward(next_arrival):
            return
        self._dispatch()

    def _drain(self):
        ctx = self.context
        if len(ctx.ready_queue) == 1:
            self._complete()
            return
        if self._fast_forward(None):
            return
        self._dispatch()

    # Mechanics

    def _admit_arrivals(self, inclusive):
        """Move every job-queue process that has arrived by now to the ready queue."""
        ctx = self.context
        while ctx.job_queue:
            arrival = ctx.next_arrival()
            if arrival > ctx.time or (arrival == ctx.time and not inclusive):
                break
            pid = ctx.job_queue.popleft()
            ctx.ready_queue.append(pid)
            self.log(f"Process {pid} ARRIVED (at t={arrival})")

    def _skippable_cycles(self, next_arrival):
        ctx = self.context
        min_remaining = min(ctx.remaining[pid] for pid in ctx.ready_queue)
        # Every process must still be unfinished after the skipped cycles
        cycles = (min_remaining - 1) // self.quantum
        if next_arrival is not None:
            span = len(ctx.ready_queue) * self.quantum
            gap = next_arrival - ctx.time
            if self.tie_break is TieBreak.ARRIVAL_FIRST:
                # The last skipped preemption must happen strictly before the arrival
                cycles = min(cycles, (gap - 1) // span)
            else:
                cycles = min(cycles, gap // span)
        return max(cycles, 0)

    def _fast_forward(self, next_arrival):
        """
        Run as many whole round-robin cycles as possible in one go.

        Returns:
            True if at least one cycle was skipped.
        """
        ctx = self.context
        cycles = self._skippable_cycles(next_arrival)
        if cycles < 1:
            return False

        for index, pid in enumerate(ctx.ready_queue):
            process = ctx.processes[pid]
            if not process.started:
                process.start_time = ctx.time + self.quantum * index
            ctx.remaining[pid] -= self.quantum * cycles
        ctx.time += len(ctx.ready_queue) * self.quantum * cycles
        ctx.trace.emit_cycles(ctx.ready_queue, cycles)
        self.log(f"Fast-forwarded {cycles} cycle(s) over {list(ctx.ready_queue)}")
        return True

    def _dispatch(self):
        ctx = self.context
        pid = ctx.ready_queue[0]
        if ctx.remaining[pid] <= self.quantum:
            self._complete()
            return

        process = ctx.processes[pid]
        if not process.started:
            process.start_time = ctx.time
        ctx.time += self.quantum
        ctx.trace.emit(pid)
        ctx.remaining[pid] -= self.quantum
        ctx.ready_queue.popleft()
        # Arrivals at this exact tick are picked up by the next STEADY step otherwise
        self._admit_arrivals(inclusive=self.tie_break is TieBreak.ARRIVAL_FIRST)
        ctx.ready_queue.append(pid)
        self.log(f"Process {pid} PREEMPTED (remaining={ctx.remaining[pid]})")

    def _complete(self):
        ctx = self.context
        pid = ctx.ready_queue.popleft()
        process = ctx.processes[pid]
        if not process.started:
            process.start_time = ctx.time
        ctx.time += ctx.remaining[pid]
        ctx.trace.emit(pid)
        ctx.remaining[pid] = 0
        process.finish_time = ctx.time
        self.log(f"Process {pid} FINISHED (start={process.start_time})")
        self._admit_arrivals(inclusive=True)


def simulate(quantum, max_seq_len, processes, tie_break=TieBreak.ARRIVAL_FIRST, debug=False):
    """
    Run Round-Robin scheduling over `processes`.

    Args:
        quantum: Time slice given to a process before it is preempted (> 0)
        max_seq_len: Maximum number of trace entries to report (>= 0)
        processes: Process list in non-decreasing arrival order; start_time and
            finish_time are written back in place
        tie_break: Queue order when a quantum expires exactly at an arrival
        debug: Print a line per scheduling event

    Returns:
        Compressed execution trace: process ids, with IDLE for an idle CPU

    Raises:
        SchedulingError: A precondition is violated (see errors.py)
    """
    simulator = RoundRobinSimulator(quantum, max_seq_len, processes, tie_break=tie_break, debug=debug)
    return simulator.run()
