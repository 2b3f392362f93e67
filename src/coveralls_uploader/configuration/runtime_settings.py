"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_ENDPOINT_URL = "https://coveralls.io/api/v1/jobs"
DEFAULT_ENV = "prod"
SUPPORTED_ENVS = ("test", "dev", "prod")


class ConfigErrorKind(str, Enum):
    """Reason a configuration could not be loaded."""

    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class Configuration:  # pylint: disable=too-many-instance-attributes
    """Validated settings for one jobs run."""

    path: Path
    root_dir: Path
    coverage_clover: tuple[str, ...]
    src_dir: Path
    json_path: Path
    endpoint_url: str
    timeout_seconds: int
    repo_token: str | None
    service_name: str | None
    dry_run: bool = False
    verbose: bool = False
    env: str = DEFAULT_ENV

    @property
    def is_test_env(self) -> bool:
        return self.env == "test"
