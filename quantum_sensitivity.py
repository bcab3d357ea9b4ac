"""
Quantum sensitivity analysis: how the time slice shapes Round-Robin schedules.

Runs every quantum in a list over the same synthetic workloads (Common Random
Numbers) across several seeds, and reports mean ± 95% confidence interval for:
  - average turnaround time
  - average waiting time
  - average response time
  - context switches

Usage:
    python quantum_sensitivity.py                        # Default quanta and seeds
    python quantum_sensitivity.py --quanta 1 2 4 8       # Custom quanta
    python quantum_sensitivity.py --seeds 50 --base-seed 7
    python quantum_sensitivity.py --output sweep.csv     # Also save the summary
"""
import argparse
import csv
from copy import deepcopy

import numpy as np

import metrics
from simulator import simulate
from workload import generate_processes

DEBUG = False

DEFAULT_QUANTA = [1, 2, 4, 8, 16]
METRIC_NAMES = ["turnaround", "waiting", "response", "switches"]
MAX_SEQ_LEN = 10 ** 6  # Large enough to keep every hand-over for context switch counts


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Round-Robin quantum sensitivity analysis with CRN and 95% confidence intervals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python quantum_sensitivity.py                   # Default: quanta 1 2 4 8 16, 20 seeds
  python quantum_sensitivity.py --seeds 100       # Run 100 seeds
  python quantum_sensitivity.py --base-seed 42    # Reproducible: seeds 42-61
        """
    )
    parser.add_argument('--quanta', type=int, nargs='+', default=DEFAULT_QUANTA,
                        help='Quantum values to compare (default: 1 2 4 8 16)')
    parser.add_argument('--seeds', type=int, default=20,
                        help='Number of seeds to run (default: 20)')
    parser.add_argument('--base-seed', type=int, default=0,
                        help='Base seed; seeds will be base_seed to base_seed+N-1 (default: 0)')
    parser.add_argument('--processes', type=int, default=50,
                        help='Processes per generated workload (default: 50)')
    parser.add_argument('--arrival-rate', type=float, default=0.2,
                        help='Mean arrivals per tick (default: 0.2)')
    parser.add_argument('--mean-burst', type=float, default=4.0,
                        help='Mean burst in ticks (default: 4.0)')
    parser.add_argument('--output', default=None,
                        help='Write the summary to this CSV file')
    return parser.parse_args(argv)


def run_single_seed(base_processes, quanta):
    """Simulate one workload under every quantum (each run on its own copy)."""
    results = {}
    for quantum in quanta:
        processes = deepcopy(base_processes)
        trace = simulate(quantum, MAX_SEQ_LEN, processes, debug=DEBUG)
        results[quantum] = {
            'turnaround': metrics.avg_turnaround(processes),
            'waiting': metrics.avg_waiting(processes),
            'response': metrics.avg_response(processes),
            'switches': metrics.context_switches(trace),
        }
    return results


def run_quantum_sweep(quanta, num_seeds, base_seed=0, num_processes=50, arrival_rate=0.2, mean_burst=4.0):
    """
    Collect per-seed metrics for each quantum.

    Returns:
        {quantum: {metric_name: [value per seed]}}
    """
    results = {quantum: {name: [] for name in METRIC_NAMES} for quantum in quanta}
    for seed_idx in range(num_seeds):
        # Generate workload ONCE per seed (Common Random Numbers)
        base_processes = generate_processes(
            num_processes=num_processes,
            arrival_rate=arrival_rate,
            mean_burst=mean_burst,
            seed=base_seed + seed_idx
        )
        trial = run_single_seed(base_processes, quanta)
        for quantum in quanta:
            for name in METRIC_NAMES:
                results[quantum][name].append(trial[quantum][name])
    return results


def mean_ci(values):
    """Mean and half-width of the normal-approximation 95% confidence interval."""
    values = np.asarray(values, dtype=float)
    mean = float(np.mean(values))
    if len(values) < 2:
        return mean, 0.0
    std_err = np.std(values, ddof=1) / np.sqrt(len(values))
    return mean, float(1.96 * std_err)


def summarize(results):
    """
    Reduce per-seed values to mean ± CI.

    Returns:
        {quantum: {metric_name: {'mean': float, 'ci': float}}}
    """
    summary = {}
    for quantum, per_metric in results.items():
        summary[quantum] = {}
        for name, values in per_metric.items():
            mean, ci = mean_ci(values)
            summary[quantum][name] = {'mean': mean, 'ci': ci}
    return summary


def print_summary(summary):
    print(f"{'Quantum':>8}  " + "  ".join(f"{name:>18}" for name in METRIC_NAMES))
    print("-" * 90)
    for quantum in sorted(summary):
        row = f"{quantum:>8}  "
        row += "  ".join(f"{summary[quantum][name]['mean']:>10.2f}±{summary[quantum][name]['ci']:<7.2f}"
                         for name in METRIC_NAMES)
        print(row)


def write_summary_csv(summary, path):
    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['Quantum', 'Metric', 'Mean', 'CI95'])
        for quantum in sorted(summary):
            for name in METRIC_NAMES:
                stat = summary[quantum][name]
                writer.writerow([quantum, name, f"{stat['mean']:.6f}", f"{stat['ci']:.6f}"])


def main(argv=None):
    args = parse_args(argv)

    print("=" * 90)
    print(f"QUANTUM SENSITIVITY ANALYSIS: {args.seeds} seeds, {args.processes} processes per workload")
    print(f"Seed range: {args.base_seed} to {args.base_seed + args.seeds - 1}")
    print("=" * 90)

    results = run_quantum_sweep(
        args.quanta,
        args.seeds,
        base_seed=args.base_seed,
        num_processes=args.processes,
        arrival_rate=args.arrival_rate,
        mean_burst=args.mean_burst,
    )
    summary = summarize(results)
    print_summary(summary)

    if args.output:
        write_summary_csv(summary, args.output)
        print(f"\n✓ Summary saved to {args.output}")
    return summary


if __name__ == "__main__":
    main()
