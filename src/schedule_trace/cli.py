"""schedule-trace CLI entry point.

Usage: uv run schedule-trace [command]
"""
import argparse
import json
import logging
import sys

from schedule_trace.intake.parser import InputError, InputLimits

log = logging.getLogger(__name__)

EXIT_CANNOT_FINISH = 1
EXIT_BAD_INPUT = 2

# a random connected DAG needs at least one edge
RANDOM_LIMITS = InputLimits(min_courses=2)


def _add_graph_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--courses", required=True,
        help="Number of courses (1-20)",
    )
    p.add_argument(
        "--prerequisites", default="[]",
        help='JSON array of [from, to] pairs, e.g. "[[1,0],[2,1]]" (default: [])',
    )


def _add_trace_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "trace",
        help="Print every step of Kahn's algorithm for the given graph.",
    )
    _add_graph_args(p)
    p.add_argument(
        "--json", action="store_true",
        help="Emit one JSON object per step instead of text panels.",
    )
    p.add_argument(
        "--listing", action="store_true",
        help="Show the code listing with the active line for every step.",
    )


def _add_check_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Report whether all courses can be finished.",
    )
    _add_graph_args(p)


def _add_random_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "random",
        help="Print a random connected DAG as a JSON prerequisite array.",
    )
    p.add_argument(
        "--courses", default="6",
        help="Number of courses, 2-20 (default: 6)",
    )
    p.add_argument(
        "--seed", type=int, default=None,
        help="RNG seed for reproducible graphs (default: random)",
    )


def _read_graph(args: argparse.Namespace) -> tuple[int, list[tuple[int, int]]]:
    from schedule_trace.intake.parser import parse_course_count, parse_prerequisites

    count = parse_course_count(args.courses)
    edges = parse_prerequisites(args.prerequisites, count)
    return count, edges


def _run_trace(args: argparse.Namespace) -> int:
    from schedule_trace.display.listing import render_listing
    from schedule_trace.display.report import format_step, format_summary
    from schedule_trace.graph.trace_generator import generate_trace

    count, edges = _read_graph(args)
    trace = generate_trace(count, edges)

    if args.json:
        for step in trace:
            print(json.dumps(step.to_dict()))
        return 0

    for step in trace:
        print(format_step(step, count))
        if args.listing:
            print(render_listing(step))
        print()
    print(format_summary(trace, count))
    return 0


def _run_check(args: argparse.Namespace) -> int:
    from schedule_trace.graph.adjacency import normalize
    from schedule_trace.graph.cycle_detector import detect_cycle
    from schedule_trace.graph.oracle import can_finish

    count, edges = _read_graph(args)
    if can_finish(count, edges):
        print(f"All {count} courses can be finished.")
        return 0

    result = detect_cycle(normalize(count, edges))
    print(f"Cannot finish all {count} courses.")
    if result.cycle_path is not None:
        print("Cycle: " + " -> ".join(map(str, result.cycle_path)))
    return EXIT_CANNOT_FINISH


def _run_random(args: argparse.Namespace) -> int:
    from schedule_trace.intake.parser import parse_course_count
    from schedule_trace.intake.random_dag import random_dag

    count = parse_course_count(args.courses, RANDOM_LIMITS)
    edges = random_dag(count, seed=args.seed)
    print(json.dumps([list(e) for e in edges]))
    return 0


_COMMANDS = {
    "trace": _run_trace,
    "check": _run_check,
    "random": _run_random,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="schedule-trace",
        description="Step-by-step trace of Kahn's topological sort over course prerequisites.",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_trace_parser(subparsers)
    _add_check_parser(subparsers)
    _add_random_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return _COMMANDS[args.command](args)
    except InputError as exc:
        log.debug("command %s failed on input", args.command)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
