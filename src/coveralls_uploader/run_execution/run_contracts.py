"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from coveralls_uploader.configuration.config_scaffold_builder import DEFAULT_CONFIG_FILENAME
from coveralls_uploader.configuration.runtime_settings import DEFAULT_ENV
from coveralls_uploader.jobs_submission.submission_outcomes import SubmissionResult

EXIT_OK = 0
EXIT_CONFIG_ERROR = 3
EXIT_WRITE_ERROR = 4


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one jobs run."""

    config_path: str = DEFAULT_CONFIG_FILENAME
    root_dir: str = "."
    dry_run: bool = False
    verbose: bool = False
    env: str = DEFAULT_ENV


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed jobs run."""

    result: SubmissionResult
    json_path: Path
    dry_run: bool
