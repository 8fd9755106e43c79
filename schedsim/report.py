from __future__ import annotations

from .models import SchedulingResult

HEADERS = ("Process", "Burst Time", "Waiting Time", "Turnaround Time")


def format_report(result: SchedulingResult, precision: int = 2) -> str:
    """
    Plain-text table of per-process times in process-set order, followed by
    the average waiting and turnaround times.
    """
    rows = [
        (p.label, str(p.burst_time), str(waiting), str(turnaround))
        for p, waiting, turnaround in result.rows()
    ]

    widths = [len(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

    def fmt(cells) -> str:
        return "  ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

    lines = [fmt(HEADERS)]
    lines.extend(fmt(row) for row in rows)
    lines.append("")
    lines.append(f"Average Waiting Time = {result.avg_waiting:.{precision}f}")
    lines.append(f"Average Turnaround Time = {result.avg_turnaround:.{precision}f}")

    return "\n".join(lines)
