"""Configuration loader tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from coveralls_uploader.configuration.loader import ConfigurationError, load_configuration
from coveralls_uploader.configuration.runtime_settings import ConfigErrorKind


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_empty_configuration_with_defaults(tmp_path: Path) -> None:
    _write_file(tmp_path / ".coveralls.yml", "")

    configuration = load_configuration(".coveralls.yml", tmp_path)

    root = tmp_path.resolve()
    assert configuration.path == root / ".coveralls.yml"
    assert configuration.root_dir == root
    assert configuration.coverage_clover == ("build/logs/clover.xml",)
    assert configuration.src_dir == root / "src"
    assert configuration.json_path == root / "build" / "logs" / "coveralls-upload.json"
    assert configuration.endpoint_url == "https://coveralls.io/api/v1/jobs"
    assert configuration.timeout_seconds == 30
    assert configuration.repo_token is None
    assert configuration.dry_run is False
    assert configuration.verbose is False
    assert configuration.env == "prod"
    assert configuration.is_test_env is False


def test_loads_configured_values_and_run_flags(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "coveralls.yml",
        """
repo_token: "  secret-token  "
coverage_clover:
  - build/logs/clover.xml
  - build/logs/clover-*.xml
src_dir: lib
json_path: out/upload.json
entry_point: https://mock/jobs
timeout_seconds: 5
service_name: my-ci
""",
    )

    configuration = load_configuration(
        config_path, tmp_path, dry_run=True, verbose=True, env="TEST"
    )

    root = tmp_path.resolve()
    assert configuration.repo_token == "secret-token"
    assert configuration.coverage_clover == ("build/logs/clover.xml", "build/logs/clover-*.xml")
    assert configuration.src_dir == root / "lib"
    assert configuration.json_path == root / "out" / "upload.json"
    assert configuration.endpoint_url == "https://mock/jobs"
    assert configuration.timeout_seconds == 5
    assert configuration.service_name == "my-ci"
    assert configuration.dry_run is True
    assert configuration.verbose is True
    assert configuration.env == "test"
    assert configuration.is_test_env is True


def test_errors_with_not_found_when_configuration_file_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found") as exc_info:
        load_configuration(".coveralls.yml", tmp_path)

    assert exc_info.value.kind == ConfigErrorKind.NOT_FOUND


def test_errors_with_parse_error_when_yaml_is_malformed(tmp_path: Path) -> None:
    _write_file(tmp_path / ".coveralls.yml", "coverage_clover: [unterminated\n")

    with pytest.raises(ConfigurationError, match="Failed to parse") as exc_info:
        load_configuration(".coveralls.yml", tmp_path)

    assert exc_info.value.kind == ConfigErrorKind.PARSE_ERROR


def test_errors_when_configuration_root_is_not_mapping(tmp_path: Path) -> None:
    _write_file(tmp_path / ".coveralls.yml", "- a\n- b\n")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping") as exc:
        load_configuration(".coveralls.yml", tmp_path)

    assert exc.value.kind == ConfigErrorKind.PARSE_ERROR


@pytest.mark.parametrize(
    "contents",
    [
        "coverage_clover: []\n",
        "coverage_clover: [1, 2]\n",
        "coverage_clover: {a: b}\n",
        "src_dir: ''\n",
        "json_path: 12\n",
        "entry_point: ftp://example.com/jobs\n",
        "timeout_seconds: 0\n",
        "timeout_seconds: true\n",
        "repo_token: [token]\n",
    ],
)
def test_errors_with_invalid_value_for_out_of_domain_values(
    tmp_path: Path, contents: str
) -> None:
    _write_file(tmp_path / ".coveralls.yml", contents)

    with pytest.raises(ConfigurationError) as exc_info:
        load_configuration(".coveralls.yml", tmp_path)

    assert exc_info.value.kind == ConfigErrorKind.INVALID_VALUE


def test_errors_with_invalid_value_for_unsupported_env(tmp_path: Path) -> None:
    _write_file(tmp_path / ".coveralls.yml", "")

    with pytest.raises(ConfigurationError, match="env 'staging' is not supported") as exc_info:
        load_configuration(".coveralls.yml", tmp_path, env="staging")

    assert exc_info.value.kind == ConfigErrorKind.INVALID_VALUE


def test_absolute_config_path_ignores_root_dir(tmp_path: Path) -> None:
    config_dir = tmp_path / "elsewhere"
    config_dir.mkdir()
    config_path = _write_file(config_dir / "custom.yml", "src_dir: app\n")

    configuration = load_configuration(config_path.resolve(), tmp_path / "project")

    assert configuration.path == config_path.resolve()
    assert configuration.src_dir == (tmp_path / "project" / "app").resolve()
