"""
Strategies deciding which process the CPU takes next.

The non-preemptive strategies return a reordered copy of the batch; Python's
sort is stable so equal keys keep their input order. Round-robin is a
generator of turns over a FIFO ready queue fed in arrival order.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, NamedTuple, Sequence

from .models import Process


def order_fcfs(processes: Sequence[Process]) -> List[Process]:
    return list(processes)


def order_sjf(processes: Sequence[Process]) -> List[Process]:
    return sorted(processes, key=lambda p: p.burst_time)


def order_priority(processes: Sequence[Process]) -> List[Process]:
    # Lower numeric value means higher priority.
    return sorted(processes, key=lambda p: p.priority)


class Turn(NamedTuple):
    process: Process
    start: int
    run_time: int
    remaining: int


def round_robin_turns(processes: Sequence[Process], quantum: int) -> Iterator[Turn]:
    """
    Yield one ``Turn`` per quantum until every process has run its burst.

    Processes join the ready queue once they have arrived, in arrival order
    (input order for equal arrivals). Arrivals during a turn are queued ahead
    of the preempted process. An empty queue moves the clock to the next
    arrival.
    """
    if quantum <= 0:
        raise ValueError("Round Robin requires a positive quantum")

    pending: Deque[Process] = deque(sorted(processes, key=lambda p: p.arrival_time))
    ready: Deque[tuple[Process, int]] = deque()
    clock = 0

    def admit_arrivals() -> None:
        while pending and pending[0].arrival_time <= clock:
            p = pending.popleft()
            ready.append((p, p.burst_time))

    admit_arrivals()

    while ready or pending:
        if not ready:
            clock = pending[0].arrival_time
            admit_arrivals()

        process, remaining = ready.popleft()
        run_time = min(quantum, remaining)
        remaining -= run_time

        yield Turn(process=process, start=clock, run_time=run_time, remaining=remaining)

        clock += run_time
        admit_arrivals()
        if remaining > 0:
            ready.append((process, remaining))
