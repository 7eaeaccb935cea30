"""
Error types raised while reading arguments and workloads.

Every error here is fatal for the CLI: it is reported and the run stops
before any schedule is printed.
"""

from __future__ import annotations

from typing import Optional


class SchedulerError(Exception):
    """Base class for all schedsim errors."""


class InvalidArgsError(SchedulerError):
    pass


class FileOpenError(SchedulerError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"error opening scheduling file {path}: {reason}")
        self.path = path


class WorkloadError(SchedulerError, ValueError):
    """Problem with the contents of a workload file."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class CSVParseError(WorkloadError):
    pass


class IntegerParseError(WorkloadError):
    def __init__(self, value: str, line: Optional[int] = None) -> None:
        super().__init__(f"invalid integer {value!r}", line=line)
        self.value = value


class FormatError(WorkloadError):
    pass
