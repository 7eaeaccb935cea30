from __future__ import annotations

import argparse
import logging
from typing import List

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .algorithms import run_all
from .config import ALGORITHM_ORDER, DEFAULT_QUANTUM, SimulationConfig
from .errors import InvalidArgsError, SchedulerError
from .report import ConsoleReport
from .workload_io import load_workload

logger = logging.getLogger(__name__)

EXIT_LOAD_ERROR = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="Batch CPU scheduling simulator (FCFS, SJF, Priority, Round-robin).",
    )
    parser.add_argument(
        "workload",
        nargs="*",
        help="CSV file with rows of pid,burst,arrival[,priority] (or a .json workload).",
    )
    parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
    )
    parser.add_argument(
        "--algorithms",
        "-a",
        nargs="+",
        choices=ALGORITHM_ORDER,
        default=list(ALGORITHM_ORDER),
        help="Algorithms to run; output order is always fcfs sjf priority rr.",
    )
    parser.add_argument(
        "--legacy-zero-arrival",
        action="store_true",
        help="Let processes arriving at time 0 keep the previous waiting time instead of recomputing it.",
    )
    parser.add_argument(
        "--skip-idle-gaps",
        action="store_true",
        help="Move the clock forward to a late arrival before charging its burst (FCFS, SJF, Priority).",
    )
    parser.add_argument(
        "--compare",
        action="store_true",
        help="Finish with a table comparing the averages of every algorithm.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Plain text output: no colour, text Gantt chart, ASCII tables.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics written to stderr (default: WARNING).",
    )
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _single_workload(paths: List[str]) -> str:
    if len(paths) != 1:
        raise InvalidArgsError("invalid args: must give exactly one scheduling file to process")
    return paths[0]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    err_console = Console(stderr=True)

    try:
        workload_path = _single_workload(args.workload)
        config = SimulationConfig(
            quantum=args.quantum,
            legacy_zero_arrival=args.legacy_zero_arrival,
            skip_idle_gaps=args.skip_idle_gaps,
            algorithms=tuple(args.algorithms),
        )
    except (InvalidArgsError, ValueError) as exc:
        logger.debug("Rejected arguments: %s", exc)
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]", highlight=False)
        parser.print_usage(err_console.file)
        return EXIT_USAGE

    try:
        processes = load_workload(workload_path)
    except SchedulerError as exc:
        logger.debug("Failed to load %s", workload_path, exc_info=True)
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]", highlight=False)
        return EXIT_LOAD_ERROR

    results = run_all(processes, config)

    console = Console(color_system=None) if args.plain else Console()
    report = ConsoleReport(console, plain=args.plain)
    for result in results:
        report.write_result(result)

    if args.compare:
        report.write_comparison(results)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
