#!/usr/bin/env python3
"""
Figures for Round-Robin simulation results.

1. Schedule: per-process waiting span (arrival → first dispatch) and
   execution span (first dispatch → finish)
2. Quantum sweep: metric means with 95% CI error bars against quantum
"""
import sys

import numpy as np

try:
    import matplotlib
    matplotlib.use('Agg')  # Non-interactive backend
    import matplotlib.pyplot as plt
    MATPLOTLIB_AVAILABLE = True
except ImportError:
    MATPLOTLIB_AVAILABLE = False

from quantum_sensitivity import METRIC_NAMES

WAIT_COLOR = '#aec7e8'  # light blue
RUN_COLOR = '#1f77b4'   # blue

METRIC_LABELS = {
    'turnaround': 'Avg Turnaround',
    'waiting': 'Avg Waiting',
    'response': 'Avg Response',
    'switches': 'Context Switches',
}


def _require_matplotlib():
    if not MATPLOTLIB_AVAILABLE:
        print("⚠ matplotlib not available - skipping figure", file=sys.stderr)
        print("  Install: pip install matplotlib", file=sys.stderr)
        return False
    return True


def plot_schedule(processes, path, quantum=None):
    """
    Draw one row per process: waiting span then execution span.

    Returns:
        True if the figure was written.
    """
    if not _require_matplotlib():
        return False

    finished = [p for p in processes if p.started and p.finished]
    fig, ax = plt.subplots(figsize=(10, max(2.5, 0.45 * len(finished) + 1)))
    for row, process in enumerate(finished):
        ax.barh(row, process.start_time - process.arrival_time, left=process.arrival_time,
                color=WAIT_COLOR, edgecolor='black', linewidth=0.5)
        ax.barh(row, process.finish_time - process.start_time, left=process.start_time,
                color=RUN_COLOR, edgecolor='black', linewidth=0.5)

    ax.set_yticks(np.arange(len(finished)))
    ax.set_yticklabels([f"P{p.id}" for p in finished])
    ax.invert_yaxis()
    ax.set_xlabel("Time", fontsize=12, fontweight='bold')
    title = "Round-Robin Schedule"
    if quantum is not None:
        title += f" (quantum={quantum})"
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.legend(handles=[plt.Rectangle((0, 0), 1, 1, color=WAIT_COLOR),
                       plt.Rectangle((0, 0), 1, 1, color=RUN_COLOR)],
              labels=["Waiting for first dispatch", "Start → finish"], loc='lower right')
    ax.grid(True, axis='x', alpha=0.3, linestyle='--')
    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"✓ Generated {path}")
    return True


def plot_quantum_sweep(summary, path):
    """
    Draw one panel per metric from a quantum_sensitivity summary.

    Returns:
        True if the figure was written.
    """
    if not _require_matplotlib():
        return False

    quanta = sorted(summary)
    fig, axes = plt.subplots(1, len(METRIC_NAMES), figsize=(4 * len(METRIC_NAMES), 3.5))
    for ax, name in zip(axes, METRIC_NAMES):
        means = [summary[q][name]['mean'] for q in quanta]
        cis = [summary[q][name]['ci'] for q in quanta]
        ax.errorbar(quanta, means, yerr=cis, marker='o', capsize=4, color=RUN_COLOR)
        ax.set_xscale('log', base=2)
        ax.set_xlabel("Quantum", fontsize=11)
        ax.set_title(METRIC_LABELS[name], fontsize=12, fontweight='bold')
        ax.grid(True, alpha=0.3, linestyle='--')
    plt.tight_layout()
    plt.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    print(f"✓ Generated {path}")
    return True


def main():
    """Run the default quantum sweep and plot it."""
    import quantum_sensitivity

    summary = quantum_sensitivity.main([])
    plot_quantum_sweep(summary, 'quantum_sweep.png')


if __name__ == "__main__":
    main()
