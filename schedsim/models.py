from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Process:
    pid: int
    burst_time: int
    arrival_time: int
    priority: int = 0


@dataclass(frozen=True)
class ExecutionSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start: int
    stop: int

    @property
    def duration(self) -> int:
        return self.stop - self.start


@dataclass(frozen=True)
class ScheduleRow:
    pid: int
    priority: int
    burst_time: int
    arrival_time: int
    waiting_time: int
    turnaround_time: int
    completion_time: int


@dataclass(frozen=True)
class RunSummary:
    average_waiting_time: float
    average_turnaround_time: float
    throughput: float


@dataclass
class ScheduleResult:
    algorithm: str
    key: str
    quantum: Optional[int] = None
    rows: List[ScheduleRow] = field(default_factory=list)
    timeline: List[ExecutionSlice] = field(default_factory=list)
    summary: Optional[RunSummary] = None
