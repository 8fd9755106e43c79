from __future__ import annotations

from typing import Dict, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice


def render_gantt(slices: Sequence[ScheduledSlice]) -> str:
    """
    Plain-text Gantt chart. Each slice is drawn one character per time unit,
    widened to fit its "P<n>" label when it ran for less than that, so short
    and zero-length slices stay readable. The time marks always show true
    end times.
    """
    if not slices:
        return "(no execution)"

    line = "|"
    labels = " "
    time_marks = "0"

    for sl in slices:
        width = max(len(sl.label), sl.duration)
        line += "=" * width + "|"
        labels += sl.label.center(width) + " "

        # Each mark ends under the bar closing its slice.
        mark = str(sl.end_time)
        time_marks += mark.rjust(len(line) - len(time_marks))

    return "\n".join(
        [
            "Gantt Chart:",
            line,
            labels.rstrip(),
            time_marks,
        ]
    )


def build_rich_gantt(slices: Sequence[ScheduledSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.

    Blocks are sized like render_gantt: one column per time unit, but never
    narrower than the slice label.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt Chart")
        return panel, ""

    colors = ["red", "green", "yellow", "blue", "magenta", "cyan"]
    pid_to_color: Dict[int, str] = {}

    def pid_color(pid: int) -> str:
        if pid not in pid_to_color:
            idx = len(pid_to_color) % len(colors)
            pid_to_color[pid] = colors[idx]
        return pid_to_color[pid]

    timeline = Text()
    labels = Text()
    time_marks = "0"
    column = 0

    for sl in slices:
        width = max(len(sl.label), sl.duration)
        color = pid_color(sl.pid)

        timeline.append(" " * width, style=f"on {color}")
        labels.append(sl.label.center(width), style="bold")

        column += width
        mark = str(sl.end_time)
        time_marks += mark.rjust(max(len(mark), column - len(time_marks) + 1))

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt Chart")
    return panel, time_marks
