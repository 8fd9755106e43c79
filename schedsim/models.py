from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple

from .errors import ConfigurationError, ValidationError


class Algorithm(Enum):
    FCFS = "FCFS"
    SJF = "SJF"
    ROUND_ROBIN = "Round Robin"

    @classmethod
    def parse(cls, name: "str | Algorithm") -> "Algorithm":
        """
        Resolve an algorithm from its enum value or a common alias
        (fcfs, sjf, rr, round robin, roundrobin), ignoring case.
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ConfigurationError(f"Unknown algorithm {name!r}")

        key = name.strip().lower().replace("-", " ").replace("_", " ")
        try:
            return _ALIASES[key]
        except KeyError:
            raise ConfigurationError(
                f"Unknown algorithm '{name}' (choose from fcfs, sjf, rr)"
            ) from None


_ALIASES = {
    "fcfs": Algorithm.FCFS,
    "sjf": Algorithm.SJF,
    "rr": Algorithm.ROUND_ROBIN,
    "round robin": Algorithm.ROUND_ROBIN,
    "roundrobin": Algorithm.ROUND_ROBIN,
}


@dataclass(frozen=True)
class Process:
    pid: int
    burst_time: int

    def __post_init__(self) -> None:
        if isinstance(self.pid, bool) or not isinstance(self.pid, int) or self.pid <= 0:
            raise ValidationError(f"Process id must be a positive integer, got {self.pid!r}")
        if isinstance(self.burst_time, bool) or not isinstance(self.burst_time, int):
            raise ValidationError(
                f"Burst time for P{self.pid} must be an integer, got {self.burst_time!r}"
            )
        if self.burst_time < 0:
            raise ValidationError(
                f"Burst time for P{self.pid} must be non-negative, got {self.burst_time}"
            )

    @property
    def label(self) -> str:
        return f"P{self.pid}"


@dataclass(frozen=True)
class ProcessSet:
    """
    Ordered, read-only collection of processes, all ready at time 0.

    The order is the FCFS order and the SJF tie-break order. Process ids must
    run 1..n in that order so results can be aligned by identity.
    """

    processes: Tuple[Process, ...]

    def __post_init__(self) -> None:
        processes = tuple(self.processes)
        if not processes:
            raise ValidationError("At least one process is required")

        for expected, p in enumerate(processes, start=1):
            if not isinstance(p, Process):
                raise ValidationError(f"Expected a Process, got {type(p).__name__}")
            if p.pid != expected:
                raise ValidationError(
                    f"Process ids must be numbered 1..{len(processes)} in order, "
                    f"found P{p.pid} at position {expected}"
                )

        object.__setattr__(self, "processes", processes)

    @classmethod
    def from_bursts(cls, bursts: Iterable[int], count: Optional[int] = None) -> "ProcessSet":
        """
        Build a process set from burst times, numbering processes from 1.

        If ``count`` is given it must match the number of bursts supplied.
        """
        bursts = list(bursts)

        if count is not None:
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValidationError(f"Process count must be an integer, got {count!r}")
            if count <= 0:
                raise ValidationError(f"Process count must be positive, got {count}")
            if len(bursts) != count:
                raise ValidationError(
                    f"Number of burst times ({len(bursts)}) must match number of processes ({count})"
                )

        return cls(
            processes=tuple(
                Process(pid=pid, burst_time=burst) for pid, burst in enumerate(bursts, start=1)
            )
        )

    @property
    def burst_times(self) -> Tuple[int, ...]:
        return tuple(p.burst_time for p in self.processes)

    def __len__(self) -> int:
        return len(self.processes)

    def __iter__(self) -> Iterator[Process]:
        return iter(self.processes)

    def __getitem__(self, index: int) -> Process:
        return self.processes[index]


@dataclass(frozen=True)
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: int
    start_time: int
    duration: int

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration

    @property
    def label(self) -> str:
        return f"P{self.pid}"


@dataclass(frozen=True)
class SchedulingResult:
    algorithm: Algorithm
    quantum: Optional[int]
    process_set: ProcessSet
    waiting_times: Tuple[int, ...]
    turnaround_times: Tuple[int, ...]
    avg_waiting: float
    avg_turnaround: float
    timeline: Tuple[ScheduledSlice, ...]

    def rows(self) -> Iterator[Tuple[Process, int, int]]:
        """Yield (process, waiting, turnaround) in process-set order."""
        return zip(self.process_set, self.waiting_times, self.turnaround_times)
