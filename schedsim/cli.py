from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import run_algorithm
from .errors import SchedulerError
from .gantt import build_rich_gantt, render_gantt
from .metrics import summarize
from .models import Algorithm, ProcessSet, SchedulingResult
from .report import format_report
from .workload_io import Workload, load_workload, parse_bursts, parse_quantum

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schedsim",
        description="CPU scheduling simulator (FCFS, SJF, Round Robin).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run one scheduling algorithm.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        required=True,
        help="Algorithm to use (fcfs, sjf, rr).",
    )
    _add_workload_args(run_parser)
    run_parser.add_argument(
        "--quantum",
        "-q",
        default=None,
        help="Time quantum for round-robin (ignored by FCFS and SJF).",
    )
    run_parser.add_argument(
        "--plain",
        action="store_true",
        help="Print the plain-text report and Gantt chart instead of tables.",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run every algorithm on the same workload and compare average metrics.",
    )
    _add_workload_args(compare_parser)
    compare_parser.add_argument(
        "--quantum",
        "-q",
        default=None,
        help=f"Time quantum used for RR (default: workload quantum or {DEFAULT_QUANTUM}).",
    )

    subparsers.add_parser(
        "interactive",
        help="Prompt for process count, burst times, algorithm and quantum.",
    )

    return parser


def _add_workload_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--bursts",
        "-b",
        help="Comma separated burst times, e.g. '5,3,8'.",
    )
    source.add_argument(
        "--workload",
        "-w",
        help="Path to JSON or CSV workload file.",
    )
    parser.add_argument(
        "--count",
        "-n",
        type=int,
        default=None,
        help="Number of processes; must match the number of burst times.",
    )


def _load_args_workload(args: argparse.Namespace) -> Workload:
    if args.bursts is not None:
        return Workload(process_set=parse_bursts(args.bursts, count=args.count))

    workload = load_workload(args.workload)
    if args.count is not None:
        # Re-validate the declared count against the file contents.
        ProcessSet.from_bursts(workload.process_set.burst_times, count=args.count)
    return workload


def _resolve_quantum(text: Optional[str], workload: Workload) -> Optional[int]:
    if text is not None:
        return parse_quantum(text)
    return workload.quantum


def _print_result(result: SchedulingResult, console: Console) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm.value}")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    console.print()

    panel, time_marks = build_rich_gantt(result.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)

    console.print()

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    proc_table.add_column("Process", justify="center")
    for h in ("Burst", "Wait", "Turnaround"):
        proc_table.add_column(h, justify="right")

    for p, waiting, turnaround in result.rows():
        proc_table.add_row(p.label, str(p.burst_time), str(waiting), str(turnaround))

    console.print(proc_table)
    console.print()

    summary = summarize(result)
    sys_table = Table(title="Summary", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
    sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
    sys_table.add_row("Makespan", str(summary["makespan"]))
    sys_table.add_row("Context switches", str(summary["context_switches"]))

    console.print(sys_table)


def _print_plain(result: SchedulingResult, console: Console) -> None:
    console.print(format_report(result), markup=False, highlight=False)
    console.print()
    console.print(render_gantt(result.timeline), markup=False, highlight=False)


def _run_compare(workload: Workload, quantum: int, console: Console) -> None:
    """
    Run every algorithm on a workload and print the summary table.
    """
    summary_table = Table(title="Algorithm comparison", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Makespan", justify="right")
    summary_table.add_column("Context switches", justify="right")

    for alg in Algorithm:
        q = quantum if alg is Algorithm.ROUND_ROBIN else None
        result = run_algorithm(alg, workload.process_set, quantum=q)
        summary = summarize(result)
        summary_table.add_row(
            result.algorithm.value,
            "" if result.quantum is None else str(result.quantum),
            f"{summary['avg_waiting']:.2f}",
            f"{summary['avg_turnaround']:.2f}",
            str(summary["makespan"]),
            str(summary["context_switches"]),
        )

    console.print(summary_table)


def _interactive(console: Console, prompt: Callable[[str], str] = input) -> None:
    """
    Prompt-driven flow: process count, burst times, algorithm, quantum.
    Invalid input is reported and the round starts over. End of input
    (Ctrl-D) quits like "q".
    """
    try:
        _interactive_rounds(console, prompt)
    except EOFError:
        console.print()


def _interactive_rounds(console: Console, prompt: Callable[[str], str]) -> None:
    while True:
        console.print("\n[bold cyan]Scheduling Simulator[/bold cyan] [dim](q to quit)[/dim]")

        count_in = prompt("Number of processes: ").strip().lower()
        if count_in in {"q", "quit", "exit"}:
            return

        try:
            count = int(count_in)
        except ValueError:
            count = 0
        if count <= 0:
            console.print("[red]Number of processes must be a positive integer.[/red]")
            continue

        bursts_in = prompt("Burst times (comma separated): ")

        console.print("[bold]Select algorithm:[/bold]")
        for idx, alg in enumerate(Algorithm, start=1):
            console.print(f"  [yellow]{idx}[/yellow]. [white]{alg.value}[/white]")
        choice = prompt(f"Choice [1-{len(Algorithm)}]: ").strip()

        try:
            process_set = parse_bursts(bursts_in, count=count)

            algorithms = list(Algorithm)
            if choice.isdigit() and 1 <= int(choice) <= len(algorithms):
                algorithm = algorithms[int(choice) - 1]
            else:
                algorithm = Algorithm.parse(choice)

            quantum = None
            if algorithm is Algorithm.ROUND_ROBIN:
                quantum = parse_quantum(prompt("Time quantum: "))

            result = run_algorithm(algorithm, process_set, quantum=quantum)
        except SchedulerError as exc:
            logger.debug("Interactive input rejected: %s", exc)
            console.print(f"[red]Error: {exc}[/red]")
            continue

        _print_result(result, console)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)
    console = Console()

    try:
        if args.command == "run":
            algorithm = Algorithm.parse(args.algorithm)
            workload = _load_args_workload(args)
            quantum = None
            if algorithm is Algorithm.ROUND_ROBIN:
                quantum = _resolve_quantum(args.quantum, workload)
            logger.debug(
                "Running %s on %d processes (quantum=%s)",
                algorithm.value,
                len(workload.process_set),
                quantum,
            )
            result = run_algorithm(algorithm, workload.process_set, quantum=quantum)
            if args.plain:
                _print_plain(result, console)
            else:
                _print_result(result, console)
            return 0

        if args.command == "compare":
            workload = _load_args_workload(args)
            quantum = _resolve_quantum(args.quantum, workload)
            if quantum is None:
                quantum = DEFAULT_QUANTUM
            _run_compare(workload, quantum, console)
            return 0

        if args.command == "interactive":
            _interactive(console)
            return 0
    except SchedulerError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"[red]Error: {exc}[/red]")
        return 2

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
