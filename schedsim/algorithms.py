from __future__ import annotations

from typing import Callable, Dict, List, Optional

from .errors import ValidationError
from .metrics import build_result
from .models import Algorithm, Process, ProcessSet, ScheduledSlice, SchedulingResult

SchedulingPolicy = Callable[..., SchedulingResult]


def _run_in_order(order: List[Process]) -> tuple[Dict[int, int], List[ScheduledSlice]]:
    """
    Run processes back-to-back from time 0 and return waiting time per pid
    along with one slice per process.
    """
    time = 0
    waiting: Dict[int, int] = {}
    timeline: List[ScheduledSlice] = []

    for p in order:
        waiting[p.pid] = time
        timeline.append(ScheduledSlice(pid=p.pid, start_time=time, duration=p.burst_time))
        time += p.burst_time

    return waiting, timeline


def schedule_fcfs(process_set: ProcessSet, quantum: Optional[int] = None) -> SchedulingResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.
    """
    _check_process_set(process_set)
    waiting, timeline = _run_in_order(list(process_set))
    return build_result(
        Algorithm.FCFS,
        process_set,
        [waiting[p.pid] for p in process_set],
        timeline,
    )


def schedule_sjf(process_set: ProcessSet, quantum: Optional[int] = None) -> SchedulingResult:
    """
    Shortest Job First (non-preemptive).

    Processes are ordered by burst time once; sorted() is stable, so equal
    bursts keep their original order. Timing is then identical to FCFS over
    the sorted order.
    """
    _check_process_set(process_set)
    order = sorted(process_set, key=lambda p: p.burst_time)
    waiting, timeline = _run_in_order(order)
    return build_result(
        Algorithm.SJF,
        process_set,
        [waiting[p.pid] for p in process_set],
        timeline,
    )


def schedule_rr(process_set: ProcessSet, quantum: Optional[int] = None) -> SchedulingResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Every round scans the processes in their original order and gives each
    unfinished one a slice of at most ``quantum``. With every process ready
    at time 0 this matches a FIFO ready queue with tail reinsertion.
    """
    _check_process_set(process_set)
    _check_quantum(quantum)

    remaining = {p.pid: p.burst_time for p in process_set}
    waiting = {p.pid: 0 for p in process_set}

    time = 0
    timeline: List[ScheduledSlice] = []

    while any(rt > 0 for rt in remaining.values()):
        for p in process_set:
            if remaining[p.pid] == 0:
                continue

            run_time = min(quantum, remaining[p.pid])
            timeline.append(ScheduledSlice(pid=p.pid, start_time=time, duration=run_time))

            time += run_time
            remaining[p.pid] -= run_time

            if remaining[p.pid] == 0:
                # Total waiting = completion - burst
                waiting[p.pid] = time - p.burst_time

    return build_result(
        Algorithm.ROUND_ROBIN,
        process_set,
        [waiting[p.pid] for p in process_set],
        timeline,
        quantum=quantum,
    )


def _check_process_set(process_set) -> None:
    if not isinstance(process_set, ProcessSet):
        raise ValidationError(f"Expected a ProcessSet, got {type(process_set).__name__}")
    if len(process_set) == 0:
        raise ValidationError("At least one process is required")


def _check_quantum(quantum) -> None:
    if quantum is None:
        raise ValidationError("Round Robin requires a time quantum")
    if isinstance(quantum, bool) or not isinstance(quantum, int):
        raise ValidationError(f"Time quantum must be an integer, got {quantum!r}")
    if quantum <= 0:
        raise ValidationError(f"Time quantum must be positive, got {quantum}")


ALGORITHMS: Dict[Algorithm, SchedulingPolicy] = {
    Algorithm.FCFS: schedule_fcfs,
    Algorithm.SJF: schedule_sjf,
    Algorithm.ROUND_ROBIN: schedule_rr,
}


def run_algorithm(
    algorithm: "str | Algorithm",
    process_set: ProcessSet,
    quantum: Optional[int] = None,
) -> SchedulingResult:
    """
    Dispatch to the requested algorithm after validating every input.

    Quantum is only used by Round Robin; other algorithms ignore it.
    """
    algorithm = Algorithm.parse(algorithm)

    _check_process_set(process_set)

    if algorithm is Algorithm.ROUND_ROBIN:
        _check_quantum(quantum)

    func = ALGORITHMS[algorithm]
    return func(process_set, quantum=quantum)
