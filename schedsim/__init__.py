"""
schedsim package.

Simulates FCFS, SJF, Priority and Round-robin scheduling over a fixed batch
of processes and reports per-process timings with a Gantt timeline.
"""

__all__ = [
    "algorithms",
    "cli",
    "config",
    "errors",
    "gantt",
    "metrics",
    "models",
    "ordering",
    "report",
    "workload_io",
]
