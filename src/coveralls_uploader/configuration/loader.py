"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .config_scaffold_builder import DEFAULT_CONFIG_FILENAME
from .runtime_settings import (
    DEFAULT_ENDPOINT_URL,
    DEFAULT_ENV,
    SUPPORTED_ENVS,
    ConfigErrorKind,
    Configuration,
)

DEFAULT_COVERAGE_CLOVER = "build/logs/clover.xml"
DEFAULT_SRC_DIR = "src"
DEFAULT_JSON_PATH = "build/logs/coveralls-upload.json"
DEFAULT_TIMEOUT_SECONDS = 30


class ConfigurationError(Exception):
    """Raised when the configuration file is missing or invalid."""

    def __init__(self, message: str, kind: ConfigErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


def load_configuration(
    config_path: Path | str = DEFAULT_CONFIG_FILENAME,
    root_dir: Path | str = ".",
    *,
    dry_run: bool = False,
    verbose: bool = False,
    env: str = DEFAULT_ENV,
) -> Configuration:
    """Load and validate the configuration file.

    Args:
      config_path: Configuration file path, resolved against ``root_dir`` when relative.
      root_dir: Project root directory that relative paths in the file refer to.
      dry_run: Skip the network submission.
      verbose: Emit progress lines while running.
      env: Runtime environment name, one of ``test``, ``dev`` or ``prod``.

    Returns:
      The validated configuration.

    Raises:
      ConfigurationError: If the file is absent, unreadable, malformed or holds
        a value outside its allowed domain.
    """
    root = Path(root_dir).resolve()
    path = _resolve_path(root, str(config_path))
    if not path.is_file():
        raise ConfigurationError(
            f"Configuration file not found: {path}", ConfigErrorKind.NOT_FOUND
        )

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(
            f"Failed to read configuration file: {exc}", ConfigErrorKind.PARSE_ERROR
        ) from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Failed to parse configuration file: {exc}", ConfigErrorKind.PARSE_ERROR
        ) from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError(
            "Configuration root must be a mapping.", ConfigErrorKind.PARSE_ERROR
        )

    return Configuration(
        path=path,
        root_dir=root,
        coverage_clover=_normalize_clover_patterns(
            parsed.get("coverage_clover", DEFAULT_COVERAGE_CLOVER)
        ),
        src_dir=_resolve_path(
            root, _require_non_empty_string(parsed.get("src_dir", DEFAULT_SRC_DIR), "src_dir")
        ),
        json_path=_resolve_path(
            root,
            _require_non_empty_string(parsed.get("json_path", DEFAULT_JSON_PATH), "json_path"),
        ),
        endpoint_url=_require_http_url(
            parsed.get("entry_point", DEFAULT_ENDPOINT_URL), "entry_point"
        ),
        timeout_seconds=_require_positive_int(
            parsed.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "timeout_seconds"
        ),
        repo_token=_optional_string(parsed.get("repo_token"), "repo_token"),
        service_name=_optional_string(parsed.get("service_name"), "service_name"),
        dry_run=bool(dry_run),
        verbose=bool(verbose),
        env=_require_supported_env(env),
    )


def _normalize_clover_patterns(value: Any) -> tuple[str, ...]:
    patterns: list[str] = []
    if isinstance(value, str):
        patterns = [value.strip()] if value.strip() else []
    elif isinstance(value, Sequence):
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(
                    "coverage_clover entries must be strings.", ConfigErrorKind.INVALID_VALUE
                )
            stripped = item.strip()
            if stripped:
                patterns.append(stripped)
    else:
        raise ConfigurationError(
            "coverage_clover must be a string or list of strings.",
            ConfigErrorKind.INVALID_VALUE,
        )
    if not patterns:
        raise ConfigurationError(
            "coverage_clover must contain at least one path.", ConfigErrorKind.INVALID_VALUE
        )
    return tuple(patterns)


def _require_supported_env(value: Any) -> str:
    env = _require_non_empty_string(value, "env").lower()
    if env not in SUPPORTED_ENVS:
        supported = ", ".join(SUPPORTED_ENVS)
        raise ConfigurationError(
            f"env '{env}' is not supported (expected one of: {supported}).",
            ConfigErrorKind.INVALID_VALUE,
        )
    return env


def _require_http_url(value: Any, field_name: str) -> str:
    url = _require_non_empty_string(value, field_name)
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"{field_name} must be an http(s) URL.", ConfigErrorKind.INVALID_VALUE
        )
    return url


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.", ConfigErrorKind.INVALID_VALUE)
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(
            f"{field_name} must not be empty.", ConfigErrorKind.INVALID_VALUE
        )
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.", ConfigErrorKind.INVALID_VALUE)
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"{field_name} must be an integer.", ConfigErrorKind.INVALID_VALUE
        )
    if value <= 0:
        raise ConfigurationError(
            f"{field_name} must be greater than zero.", ConfigErrorKind.INVALID_VALUE
        )
    return value
