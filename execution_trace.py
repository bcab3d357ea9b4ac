"""
Compressed, length-capped record of CPU occupancy.

Entries are process ids or IDLE. Consecutive identical occupants collapse
into one entry at emission time, and nothing is appended once the capacity
is reached.
"""


class ExecutionTrace:
    def __init__(self, capacity):
        self.capacity = capacity
        self.entries = []

    @property
    def full(self):
        return len(self.entries) >= self.capacity

    def emit(self, entry):
        """
        Record that `entry` occupied the CPU next.

        Returns:
            True if a new entry was appended, False if it was compressed
            into the previous one or dropped because the trace is full.
        """
        if self.full:
            return False
        if self.entries and self.entries[-1] == entry:
            return False
        self.entries.append(entry)
        return True

    def emit_cycles(self, occupants, cycles):
        """
        Record `cycles` back-to-back round-robin passes over `occupants`.

        A single occupant repeated is one entry after compression, and every
        pass over two or more distinct occupants appends at least one entry,
        so at most `capacity` passes are ever walked.
        """
        occupants = list(occupants)
        if len(occupants) == 1:
            cycles = min(cycles, 1)
        for _ in range(cycles):
            if self.full:
                break
            for entry in occupants:
                self.emit(entry)

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
