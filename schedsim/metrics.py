from __future__ import annotations

from typing import List, Sequence

from .models import ExecutionSlice, Process, RunSummary, ScheduleRow


def summarize_rows(rows: Sequence[ScheduleRow]) -> RunSummary:
    """
    Averages over ``rows``.

    Throughput divides by the completion time of the last row in the list,
    which is not necessarily the latest completion.
    """
    if not rows:
        return RunSummary(average_waiting_time=0.0, average_turnaround_time=0.0, throughput=0.0)

    n = len(rows)
    last_completion = rows[-1].completion_time
    return RunSummary(
        average_waiting_time=sum(r.waiting_time for r in rows) / n,
        average_turnaround_time=sum(r.turnaround_time for r in rows) / n,
        throughput=n / last_completion if last_completion > 0 else 0.0,
    )


class TimingAccumulator:
    """
    Shared clock and bookkeeping for a single scheduling run.

    Drivers feed processes in the order chosen by their ordering strategy.
    Non-preemptive drivers call ``charge`` once per process; round-robin
    calls ``run`` once per quantum and ``complete`` after the final one.

    ``charge`` advances the clock by the burst only, so a process that starts
    after an idle gap reports a slice whose stop precedes its start. With
    ``skip_idle_gaps`` the clock first jumps to the slice's start.
    """

    def __init__(self, legacy_zero_arrival: bool = False, skip_idle_gaps: bool = False) -> None:
        self.legacy_zero_arrival = legacy_zero_arrival
        self.skip_idle_gaps = skip_idle_gaps
        self.clock = 0
        self.rows: List[ScheduleRow] = []
        self.timeline: List[ExecutionSlice] = []

        self._waiting = 0

    def waiting_time_for(self, process: Process) -> int:
        if self.legacy_zero_arrival and process.arrival_time == 0:
            # Historic behaviour: zero-arrival processes inherit the last value.
            return self._waiting
        return max(0, self.clock - process.arrival_time)

    def charge(self, process: Process) -> ScheduleRow:
        """
        Run ``process`` to completion at the current clock.
        """
        waiting_time = self.waiting_time_for(process)
        self._waiting = waiting_time

        start = waiting_time + process.arrival_time
        turnaround_time = process.burst_time + waiting_time
        completion_time = process.burst_time + process.arrival_time + waiting_time

        if self.skip_idle_gaps:
            self.clock = max(self.clock, start)
        self.clock += process.burst_time
        self.timeline.append(ExecutionSlice(pid=process.pid, start=start, stop=self.clock))

        row = ScheduleRow(
            pid=process.pid,
            priority=process.priority,
            burst_time=process.burst_time,
            arrival_time=process.arrival_time,
            waiting_time=waiting_time,
            turnaround_time=turnaround_time,
            completion_time=completion_time,
        )
        self.rows.append(row)
        return row

    def run(self, process: Process, duration: int) -> ExecutionSlice:
        """
        Run ``process`` for ``duration`` time units without completing it.
        """
        start = max(self.clock, process.arrival_time)
        self.clock = start + duration
        slice_ = ExecutionSlice(pid=process.pid, start=start, stop=self.clock)
        self.timeline.append(slice_)
        return slice_

    def complete(self, process: Process) -> ScheduleRow:
        """
        Close out ``process`` whose final slice has just ended at the clock.
        """
        waiting_time = max(0, self.clock - process.arrival_time - process.burst_time)
        self._waiting = waiting_time

        row = ScheduleRow(
            pid=process.pid,
            priority=process.priority,
            burst_time=process.burst_time,
            arrival_time=process.arrival_time,
            waiting_time=waiting_time,
            turnaround_time=process.burst_time + waiting_time,
            completion_time=process.burst_time + process.arrival_time + waiting_time,
        )
        self.rows.append(row)
        return row

    def summary(self) -> RunSummary:
        # Rows are kept in the order they were computed.
        return summarize_rows(self.rows)
