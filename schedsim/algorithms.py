from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from .config import DEFAULT_QUANTUM, SimulationConfig
from .metrics import TimingAccumulator
from .models import Process, ScheduleResult
from .ordering import order_fcfs, order_priority, order_sjf, round_robin_turns

logger = logging.getLogger(__name__)


def _run_to_completion(
    title: str,
    key: str,
    ordered: List[Process],
    legacy_zero_arrival: bool,
    skip_idle_gaps: bool,
) -> ScheduleResult:
    accumulator = TimingAccumulator(legacy_zero_arrival=legacy_zero_arrival, skip_idle_gaps=skip_idle_gaps)

    for p in ordered:
        row = accumulator.charge(p)
        logger.debug(
            "%s: pid=%s wait=%s turnaround=%s exit=%s",
            key,
            row.pid,
            row.waiting_time,
            row.turnaround_time,
            row.completion_time,
        )

    result = ScheduleResult(
        algorithm=title,
        key=key,
        rows=accumulator.rows,
        timeline=accumulator.timeline,
        summary=accumulator.summary(),
    )
    logger.info("%s: scheduled %d processes, clock ended at %d", key, len(ordered), accumulator.clock)
    return result


def schedule_fcfs(
    processes: Sequence[Process],
    quantum: Optional[int] = None,
    legacy_zero_arrival: bool = False,
    skip_idle_gaps: bool = False,
) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling in input order.
    """
    return _run_to_completion(
        "First-come, first-serve",
        "fcfs",
        order_fcfs(processes),
        legacy_zero_arrival,
        skip_idle_gaps,
    )


def schedule_sjf(
    processes: Sequence[Process],
    quantum: Optional[int] = None,
    legacy_zero_arrival: bool = False,
    skip_idle_gaps: bool = False,
) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    The whole batch is sorted once by burst time; equal bursts keep their
    input order.
    """
    return _run_to_completion(
        "Shortest-job-first",
        "sjf",
        order_sjf(processes),
        legacy_zero_arrival,
        skip_idle_gaps,
    )


def schedule_priority(
    processes: Sequence[Process],
    quantum: Optional[int] = None,
    legacy_zero_arrival: bool = False,
    skip_idle_gaps: bool = False,
) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority; ties keep input order.
    """
    return _run_to_completion(
        "Priority",
        "priority",
        order_priority(processes),
        legacy_zero_arrival,
        skip_idle_gaps,
    )


def schedule_rr(
    processes: Sequence[Process],
    quantum: Optional[int] = None,
    legacy_zero_arrival: bool = False,
    skip_idle_gaps: bool = False,
) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes join the ready queue as they arrive. Rows are reported in
    input order even though processes finish in a different order.
    """
    if quantum is None:
        quantum = DEFAULT_QUANTUM
    if quantum <= 0:
        raise ValueError("Round Robin requires a positive quantum (use --quantum)")

    accumulator = TimingAccumulator()

    for turn in round_robin_turns(processes, quantum):
        slice_ = accumulator.run(turn.process, turn.run_time)
        logger.debug("rr: pid=%s ran [%s, %s] remaining=%s", slice_.pid, slice_.start, slice_.stop, turn.remaining)
        if turn.remaining == 0:
            accumulator.complete(turn.process)

    position = {p.pid: idx for idx, p in enumerate(processes)}
    rows = sorted(accumulator.rows, key=lambda r: position[r.pid])

    result = ScheduleResult(
        algorithm="Round-robin",
        key="rr",
        quantum=quantum,
        rows=rows,
        timeline=accumulator.timeline,
        summary=accumulator.summary(),
    )
    logger.info(
        "rr: scheduled %d processes in %d slices (quantum %d)",
        len(rows),
        len(accumulator.timeline),
        quantum,
    )
    return result


SchedulerFunc = Callable[..., ScheduleResult]

ALGORITHMS: Dict[str, SchedulerFunc] = {
    "fcfs": schedule_fcfs,
    "sjf": schedule_sjf,
    "priority": schedule_priority,
    "rr": schedule_rr,
}


def run_algorithm(
    name: str,
    processes: Sequence[Process],
    config: Optional[SimulationConfig] = None,
) -> ScheduleResult:
    """
    Dispatch to the requested algorithm.
    """
    config = config or SimulationConfig()
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown or unimplemented algorithm '{name}'")

    func = ALGORITHMS[name]
    return func(
        processes,
        quantum=config.quantum,
        legacy_zero_arrival=config.legacy_zero_arrival,
        skip_idle_gaps=config.skip_idle_gaps,
    )


def run_all(processes: Sequence[Process], config: Optional[SimulationConfig] = None) -> List[ScheduleResult]:
    config = config or SimulationConfig()
    return [run_algorithm(name, processes, config) for name in config.algorithms]
