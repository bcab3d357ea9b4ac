"""
Command-line front end for the Round-Robin scheduling simulator.

Usage:
    python main.py 3 20 < processes.txt           # quantum=3, keep 20 trace entries
    python main.py 3 20 --input processes.txt
    python main.py 2 50 --generate 10 --seed 7    # synthetic workload
    python main.py 2 50 --input p.txt --plot schedule.png --debug
"""
import argparse
import sys

import metrics
from errors import SchedulingError
from simulator import TieBreak, simulate
from workload import generate_processes, read_processes


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate preemptive Round-Robin CPU scheduling",
        epilog="Process definitions: one 'arrival_time burst' pair per line; ids follow line order.",
    )
    parser.add_argument('quantum', type=int, help='Time slice per dispatch')
    parser.add_argument('max_seq_len', type=int, help='Maximum number of execution sequence entries to report')
    parser.add_argument('--input', default=None,
                        help='Process definition file (default: read stdin)')
    parser.add_argument('--generate', type=int, default=None, metavar='N',
                        help='Simulate N synthetic processes instead of reading definitions')
    parser.add_argument('--seed', type=int, default=42,
                        help='Seed for --generate (default: 42)')
    parser.add_argument('--tie-break', choices=[t.value for t in TieBreak], default=TieBreak.ARRIVAL_FIRST.value,
                        help='Queue order when a quantum expires exactly at an arrival (default: arrival-first)')
    parser.add_argument('--debug', action='store_true', help='Print every scheduling event')
    parser.add_argument('--plot', default=None, metavar='FILE', help='Save a schedule figure to FILE')
    return parser.parse_args(argv)


def format_results(processes, trace):
    """Render the execution sequence, the per-process table and averages."""
    lines = [f"seq = [{', '.join(str(entry) for entry in trace)}]"]
    border = "+" + "+".join("-" * width for width in (6, 10, 8, 8, 8, 12, 9)) + "+"
    lines.append(border)
    lines.append("|{:>5} |{:>9} |{:>7} |{:>7} |{:>7} |{:>11} |{:>8} |".format(
        "Id", "Arrival", "Burst", "Start", "Finish", "Turnaround", "Waiting"))
    lines.append(border)
    for p in processes:
        lines.append("|{:>5} |{:>9} |{:>7} |{:>7} |{:>7} |{:>11} |{:>8} |".format(
            p.id, p.arrival_time, p.burst, p.start_time, p.finish_time,
            metrics.turnaround_time(p), metrics.waiting_time(p)))
    lines.append(border)
    lines.append(f"Average turnaround: {metrics.avg_turnaround(processes):.3f}")
    lines.append(f"Average waiting:    {metrics.avg_waiting(processes):.3f}")
    lines.append(f"Average response:   {metrics.avg_response(processes):.3f}")
    lines.append(f"CPU utilization:    {metrics.cpu_utilization(processes):.3f}")
    return "\n".join(lines)


def main(argv=None):
    args = parse_args(argv)

    try:
        if args.generate is not None:
            processes = generate_processes(num_processes=args.generate, seed=args.seed)
        else:
            processes = read_processes(args.input)
        trace = simulate(args.quantum, args.max_seq_len, processes,
                         tie_break=TieBreak(args.tie_break), debug=args.debug)
    except SchedulingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read {args.input}: {exc.strerror}", file=sys.stderr)
        return 1

    print(format_results(processes, trace))

    if args.plot:
        from plot_results import plot_schedule
        plot_schedule(processes, args.plot, quantum=args.quantum)
    return 0


if __name__ == "__main__":
    sys.exit(main())
