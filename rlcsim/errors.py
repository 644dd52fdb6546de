"""
Error taxonomy for the transient solver.

All errors are input-validation failures raised before any computation starts.
"""


class TransientError(ValueError):
    """Base class for every error raised by rlcsim."""


class InvalidParameters(TransientError):
    """Circuit values (or initial conditions) for which q(t) is undefined."""


class DegenerateSampling(TransientError):
    """Time grid configuration that cannot produce a sample sequence."""
