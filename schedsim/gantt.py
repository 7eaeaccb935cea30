from __future__ import annotations

from typing import Dict, List, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ExecutionSlice

CELL_WIDTH = 8


def render_gantt(slices: Sequence[ExecutionSlice]) -> str:
    """
    Plain-text Gantt chart: one fixed-width cell per slice, then the start
    time of every slice followed by the stop time of the last one.
    """
    if not slices:
        return "Gantt schedule\n(no execution)"

    cells = "|"
    for sl in slices:
        pid = str(sl.pid)
        padding = " " * ((CELL_WIDTH - len(pid)) // 2)
        cells += f"{padding}{pid}{padding}|"

    marks = "\t".join(str(sl.start) for sl in slices) + "\t" + str(slices[-1].stop)

    return "\n".join(["Gantt schedule", cells, marks])


def build_rich_gantt(slices: Sequence[ExecutionSlice]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not slices:
        panel = Panel("No execution", title="Gantt schedule")
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
    marks: List[str] = [str(slices[0].start)]

    for sl in slices:
        label = str(sl.pid)
        width = max(1, sl.duration, len(label), len(str(sl.stop)) + 1)

        timeline.append(" " * width, style=f"on {pid_color(sl.pid)}")
        labels.append(label.ljust(width), style="bold")

        marks.append(str(sl.stop).rjust(width))

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    panel = Panel.fit(table, title="Gantt schedule")
    return panel, "".join(marks)
