from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_QUANTUM = 3

# Output order is fixed regardless of how algorithms are selected.
ALGORITHM_ORDER: Tuple[str, ...] = ("fcfs", "sjf", "priority", "rr")


@dataclass(frozen=True)
class SimulationConfig:
    quantum: int = DEFAULT_QUANTUM
    legacy_zero_arrival: bool = False
    skip_idle_gaps: bool = False
    algorithms: Tuple[str, ...] = ALGORITHM_ORDER

    def __post_init__(self) -> None:
        if self.quantum <= 0:
            raise ValueError(f"Quantum must be a positive integer, got {self.quantum}")

        unknown = [name for name in self.algorithms if name not in ALGORITHM_ORDER]
        if unknown:
            raise ValueError(f"Unknown algorithm(s): {', '.join(unknown)}")

        ordered = tuple(name for name in ALGORITHM_ORDER if name in self.algorithms)
        object.__setattr__(self, "algorithms", ordered)
