from __future__ import annotations

from typing import List, Optional, Sequence

from .models import Algorithm, ProcessSet, ScheduledSlice, SchedulingResult


def build_result(
    algorithm: Algorithm,
    process_set: ProcessSet,
    waiting_times: Sequence[int],
    timeline: List[ScheduledSlice],
    quantum: Optional[int] = None,
) -> SchedulingResult:
    """
    Derive turnaround times and averages from per-process waiting times and
    freeze everything into a SchedulingResult.

    ``waiting_times`` must be aligned with ``process_set`` order.
    """
    n = len(process_set)
    waiting = tuple(waiting_times)
    turnaround = tuple(w + p.burst_time for w, p in zip(waiting, process_set))

    return SchedulingResult(
        algorithm=algorithm,
        quantum=quantum,
        process_set=process_set,
        waiting_times=waiting,
        turnaround_times=turnaround,
        avg_waiting=sum(waiting) / n,
        avg_turnaround=sum(turnaround) / n,
        timeline=tuple(timeline),
    )


def summarize(result: SchedulingResult) -> dict:
    """
    Return averages plus a couple of timeline figures for quick comparison.
    """
    makespan = max((s.end_time for s in result.timeline), default=0)

    # Adjacent slices of the same process count as one continuous run.
    context_switches = sum(
        1 for prev, cur in zip(result.timeline, result.timeline[1:]) if prev.pid != cur.pid
    )

    return {
        "avg_waiting": result.avg_waiting,
        "avg_turnaround": result.avg_turnaround,
        "makespan": makespan,
        "context_switches": context_switches,
    }
