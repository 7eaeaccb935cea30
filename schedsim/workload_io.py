from __future__ import annotations

import csv
import json
import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .errors import CSVParseError, FileOpenError, FormatError, IntegerParseError
from .models import Process

logger = logging.getLogger(__name__)

# ASCII digits only: no underscores or other Unicode digits.
_INTEGER = re.compile(r"[+-]?[0-9]+")


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload file into a list of Process objects, in file order.

    ``.json`` files hold a list of process objects; anything else is read as
    headerless CSV rows of ``pid,burst,arrival[,priority]``.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            if suffix == ".json":
                processes = _load_json(f)
            else:
                processes = _load_csv(f)
    except OSError as exc:
        raise FileOpenError(str(path), exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise CSVParseError(f"{path} is not UTF-8 text") from exc

    logger.info("Loaded %d processes from %s", len(processes), path)
    return processes


def _load_csv(f) -> List[Process]:
    reader = csv.reader(f, strict=True)
    numbered = []
    try:
        for row in reader:
            numbered.append((reader.line_num, row))
    except csv.Error as exc:
        raise CSVParseError(f"reading CSV: {exc}", line=reader.line_num) from exc
    return _parse_numbered(numbered)


def parse_rows(rows: Iterable[Sequence[str]]) -> List[Process]:
    """
    Build processes from already split CSV rows.
    """
    return _parse_numbered(enumerate(rows, start=1))


def _parse_numbered(numbered) -> List[Process]:
    processes: List[Process] = []
    for line, row in numbered:
        fields = [field.strip() for field in row]
        if not any(fields):
            continue
        processes.append(_process_from_fields(fields, line))

    _validate_batch(processes)
    return processes


def _process_from_fields(fields: Sequence[str], line: int) -> Process:
    if len(fields) < 3:
        raise FormatError(f"expected pid,burst,arrival[,priority] but got {len(fields)} field(s)", line=line)
    if len(fields) > 4:
        raise FormatError(f"expected at most 4 fields but got {len(fields)}", line=line)

    pid = _to_int(fields[0], line)
    burst_time = _to_int(fields[1], line)
    arrival_time = _to_int(fields[2], line)
    priority = _to_int(fields[3], line) if len(fields) == 4 else 0

    return _make_process(pid, burst_time, arrival_time, priority, line)


def _load_json(f) -> List[Process]:
    try:
        raw = json.load(f)
    except json.JSONDecodeError as exc:
        raise FormatError(f"invalid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise FormatError("JSON workload must be a list of process objects")

    processes: List[Process] = []
    for idx, entry in enumerate(raw, start=1):
        processes.append(_process_from_mapping(entry, idx))

    _validate_batch(processes)
    return processes


def _process_from_mapping(mapping, entry: int) -> Process:
    try:
        pid = _to_int(mapping["pid"], entry)
        burst_time = _to_int(mapping["burst_time"], entry)
        arrival_time = _to_int(mapping["arrival_time"], entry)
    except (KeyError, TypeError) as exc:
        raise FormatError(f"invalid process entry: {mapping!r}", line=entry) from exc

    priority_val = mapping.get("priority")
    priority = _to_int(priority_val, entry) if priority_val not in (None, "") else 0

    return _make_process(pid, burst_time, arrival_time, priority, entry)


def _to_int(value, line: Optional[int]) -> int:
    if isinstance(value, bool):
        raise IntegerParseError(str(value), line=line)
    if isinstance(value, int):
        return value
    text = str(value)
    if not _INTEGER.fullmatch(text):
        raise IntegerParseError(text, line=line)
    return int(text, 10)


def _make_process(pid: int, burst_time: int, arrival_time: int, priority: int, line: int) -> Process:
    if burst_time <= 0:
        raise FormatError(f"burst duration must be positive, got {burst_time}", line=line)
    if arrival_time < 0:
        raise FormatError(f"arrival time must not be negative, got {arrival_time}", line=line)

    process = Process(pid=pid, burst_time=burst_time, arrival_time=arrival_time, priority=priority)
    logger.debug("Parsed %s", process)
    return process


def _validate_batch(processes: List[Process]) -> None:
    if not processes:
        raise FormatError("workload contains no processes")

    seen = set()
    for p in processes:
        if p.pid in seen:
            raise FormatError(f"duplicate process id {p.pid}")
        seen.add(p.pid)
