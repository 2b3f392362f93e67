"""Run execution domain exports."""

from .jobs_pipeline import RunExecutionError, execute_jobs_pipeline
from .run_contracts import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_WRITE_ERROR, RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "execute_jobs_pipeline",
    "EXIT_OK",
    "EXIT_CONFIG_ERROR",
    "EXIT_WRITE_ERROR",
]
