"""
schedsim package.

Computes waiting time, turnaround time and a Gantt timeline for a fixed set
of processes under FCFS, SJF and Round Robin scheduling.
"""

from .algorithms import ALGORITHMS, run_algorithm
from .errors import ConfigurationError, SchedulerError, ValidationError
from .models import Algorithm, Process, ProcessSet, ScheduledSlice, SchedulingResult
from .report import format_report

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "ConfigurationError",
    "Process",
    "ProcessSet",
    "ScheduledSlice",
    "SchedulerError",
    "SchedulingResult",
    "ValidationError",
    "format_report",
    "run_algorithm",
    "cli",
]
