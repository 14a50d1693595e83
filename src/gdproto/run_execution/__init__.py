"""Run execution domain exports."""

from .resolution_run_use_case import RunExecutionError, execute_resolution_run, load_and_resolve
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_resolution_run",
    "load_and_resolve",
]
