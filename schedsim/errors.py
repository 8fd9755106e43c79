from __future__ import annotations


class SchedulerError(ValueError):
    """
    Base class for every error the simulator reports to its caller.
    """


class ValidationError(SchedulerError):
    """
    Bad input: burst count mismatch, empty or negative bursts, bad quantum.
    """


class ConfigurationError(SchedulerError):
    """
    Unknown algorithm selection or unsupported workload format.
    """
