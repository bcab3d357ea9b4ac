"""
Process model for the Round-Robin CPU scheduling simulator.

A process is identified by its id and described by:
- arrival_time: simulated time it becomes eligible to run
- burst: total CPU time it needs to complete

The simulator writes exactly two fields back: start_time (first dispatch)
and finish_time (completion). Both start out as UNSET.
"""
from errors import InvalidProcessError

IDLE = -1  # Trace entry for a CPU running no process
UNSET = -1  # start_time / finish_time before the simulator writes them


class Process:
    def __init__(self, id, arrival_time, burst):
        if arrival_time < 0:
            raise InvalidProcessError(
                f"process {id}: arrival_time must be non-negative, got {arrival_time}")
        if burst <= 0:
            raise InvalidProcessError(f"process {id}: burst must be positive, got {burst}")

        self.id = id
        self.arrival_time = arrival_time
        self.burst = burst  # NEVER modify - remaining work is tracked by the simulator
        self.start_time = UNSET
        self.finish_time = UNSET

    def reset(self):
        """Forget the results of a previous simulation run."""
        self.start_time = UNSET
        self.finish_time = UNSET

    @property
    def started(self):
        return self.start_time != UNSET

    @property
    def finished(self):
        return self.finish_time != UNSET

    def __repr__(self):
        return (f"Process(id={self.id}, arrival={self.arrival_time}, burst={self.burst}, "
                f"start={self.start_time}, finish={self.finish_time})")
