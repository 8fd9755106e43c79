from __future__ import annotations

import csv
import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .errors import ConfigurationError, ValidationError
from .models import ProcessSet

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


@dataclass
class Workload:
    process_set: ProcessSet
    quantum: Optional[int] = None


def parse_bursts(text: str, count: Optional[int] = None) -> ProcessSet:
    """
    Parse comma- or whitespace-separated burst times, e.g. "5, 3, 8".
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    bursts = [_to_int(t, "burst time") for t in tokens]
    return ProcessSet.from_bursts(bursts, count=count)


def parse_quantum(text: str | int) -> int:
    quantum = _to_int(text, "time quantum")
    if quantum <= 0:
        raise ValidationError(f"Time quantum must be positive, got {quantum}")
    return quantum


def load_workload(path: str | Path) -> Workload:
    """
    Load burst times (and optionally a quantum) from a JSON or CSV file.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        workload = _load_json(path)
    elif suffix == ".csv":
        workload = _load_csv(path)
    else:
        raise ConfigurationError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.debug("Loaded %d processes from %s", len(workload.process_set), path)
    return workload


def _load_json(path: Path) -> Workload:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid JSON in {path}: {exc}") from exc

    quantum = None
    if isinstance(raw, dict):
        if "bursts" not in raw:
            raise ValidationError("JSON workload object must have a 'bursts' list")
        if raw.get("quantum") is not None:
            quantum = parse_quantum(raw["quantum"])
        raw = raw["bursts"]

    if not isinstance(raw, list):
        raise ValidationError("JSON workload must be a list of burst times or process objects")

    bursts = [_burst_from_entry(entry) for entry in raw]
    return Workload(process_set=ProcessSet.from_bursts(bursts), quantum=quantum)


def _load_csv(path: Path) -> Workload:
    bursts: List[int] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or "burst_time" not in reader.fieldnames:
            raise ValidationError("CSV workload must have a 'burst_time' column")
        for row in reader:
            bursts.append(_to_int(row["burst_time"], "burst time"))
    return Workload(process_set=ProcessSet.from_bursts(bursts))


def _burst_from_entry(entry) -> int:
    if isinstance(entry, dict):
        try:
            entry = entry["burst_time"]
        except KeyError as exc:
            raise ValidationError(f"Invalid process entry: {entry!r}") from exc
    return _to_int(entry, "burst time")


def _to_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {what}: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid {what}: {value!r}") from exc
