from __future__ import annotations

from typing import Protocol, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from .gantt import build_rich_gantt, render_gantt
from .metrics import summarize_rows
from .models import ExecutionSlice, ScheduleResult, ScheduleRow

TABLE_HEADERS = ["ID", "Priority", "Burst", "Arrival", "Wait", "Turnaround", "Exit"]


class ReportSink(Protocol):
    def write_title(self, name: str) -> None: ...

    def write_gantt(self, slices: Sequence[ExecutionSlice]) -> None: ...

    def write_table(
        self,
        rows: Sequence[ScheduleRow],
        avg_wait: float,
        avg_turnaround: float,
        throughput: float,
    ) -> None: ...


class ConsoleReport:
    """
    Report sink printing to a Rich console.

    With ``plain=True`` the output avoids colour and uses the text Gantt
    chart and ASCII table borders, which is friendlier to pipes and diffs.
    """

    def __init__(self, console: Console | None = None, plain: bool = False) -> None:
        self.console = console or Console()
        self.plain = plain

    def write_title(self, name: str) -> None:
        if self.plain:
            rule = "-" * (len(name) * 2)
            self.console.print(rule, markup=False, highlight=False)
            self.console.print(" " * (len(name) // 2) + " " + name, markup=False, highlight=False)
            self.console.print(rule, markup=False, highlight=False)
            return
        self.console.rule(f"[bold]{name}[/bold]")

    def write_gantt(self, slices: Sequence[ExecutionSlice]) -> None:
        if self.plain:
            self.console.print(render_gantt(slices), markup=False, highlight=False)
            self.console.print()
            return

        panel, time_marks = build_rich_gantt(slices)
        self.console.print(panel)
        if time_marks:
            self.console.print(time_marks, highlight=False)
        self.console.print()

    def write_table(
        self,
        rows: Sequence[ScheduleRow],
        avg_wait: float,
        avg_turnaround: float,
        throughput: float,
    ) -> None:
        footers = [
            "",
            "",
            "",
            "",
            f"Average\n{avg_wait:.2f}",
            f"Average\n{avg_turnaround:.2f}",
            f"Throughput\n{throughput:.2f}/t",
        ]

        table = Table(
            title="Schedule table",
            box=box.ASCII if self.plain else box.SIMPLE_HEAVY,
            show_footer=True,
        )
        for header, footer in zip(TABLE_HEADERS, footers):
            justify = "center" if header in {"ID", "Priority"} else "right"
            table.add_column(header, footer=footer, justify=justify)

        for r in rows:
            table.add_row(
                str(r.pid),
                str(r.priority),
                str(r.burst_time),
                str(r.arrival_time),
                str(r.waiting_time),
                str(r.turnaround_time),
                str(r.completion_time),
            )

        self.console.print(table)
        self.console.print()

    def write_result(self, result: ScheduleResult) -> None:
        write_result(self, result)

    def write_comparison(self, results: Sequence[ScheduleResult]) -> None:
        table = Table(
            title="Algorithm comparison",
            box=box.ASCII if self.plain else box.SIMPLE_HEAVY,
        )
        table.add_column("Algorithm")
        table.add_column("Quantum", justify="right")
        table.add_column("Avg waiting", justify="right")
        table.add_column("Avg turnaround", justify="right")
        table.add_column("Throughput", justify="right")

        for result in results:
            summary = result.summary or summarize_rows(result.rows)
            table.add_row(
                result.algorithm,
                "" if result.quantum is None else str(result.quantum),
                f"{summary.average_waiting_time:.2f}",
                f"{summary.average_turnaround_time:.2f}",
                f"{summary.throughput:.2f}/t",
            )

        self.console.print(table)


def write_result(sink: ReportSink, result: ScheduleResult) -> None:
    """
    Feed one run to a sink: title, then Gantt timeline, then the table.
    """
    summary = result.summary
    sink.write_title(result.algorithm)
    sink.write_gantt(result.timeline)
    sink.write_table(
        result.rows,
        summary.average_waiting_time,
        summary.average_turnaround_time,
        summary.throughput,
    )
