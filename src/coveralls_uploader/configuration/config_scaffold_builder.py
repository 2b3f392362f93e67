"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = ".coveralls.yml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Jobs API configuration for coveralls-uploader.
# Paths are resolved relative to the project root directory (--root-dir).

# Repository token. Leave unset on public CI services that identify the job,
# or export COVERALLS_REPO_TOKEN instead.
# repo_token: "<OPTIONAL>"

# Clover XML coverage reports; a single path or a list. Glob patterns are allowed.
coverage_clover: build/logs/clover.xml

# Only source files below this directory are reported.
src_dir: src

# Where the uploaded json_file is written before submitting.
json_path: build/logs/coveralls-upload.json

# Override the Jobs API endpoint.
# entry_point: https://coveralls.io/api/v1/jobs

# Request timeout for the submission.
# timeout_seconds: 30
"""


def build_placeholder_configuration() -> str:
    """Build a commented configuration template with the documented defaults."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
