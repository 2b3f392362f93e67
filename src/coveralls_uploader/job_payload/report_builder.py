"""Job payload assembly service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from coveralls_uploader.configuration.runtime_settings import Configuration
from coveralls_uploader.coverage_collection.clover_reader import (
    collect_source_files,
    expand_clover_paths,
)

from .payload_models import GitInfo, JobPayload

ENVIRONMENT_PREFIXES = ("CI_", "TRAVIS", "CIRCLE", "JENKINS_URL", "BUILD_NUMBER", "COVERALLS_")
LOCAL_SERVICE_NAME = "coveralls-uploader"


class GitReader(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for repository metadata readers."""

    def read(self) -> GitInfo | None: ...


class ReportBuilder:
    """Populates a job payload from coverage reports, git metadata and CI variables."""

    def __init__(self, configuration: Configuration, *, git_reader: GitReader) -> None:
        self._configuration = configuration
        self._git_reader = git_reader
        self._payload = JobPayload(
            repo_token=configuration.repo_token,
            service_name=configuration.service_name,
        )
        self._clover_paths: tuple[Path, ...] = ()

    @property
    def collected_clover_paths(self) -> tuple[Path, ...]:
        return self._clover_paths

    def collect_coverage(self) -> None:
        """Replace the payload's source files with those found in the clover reports."""
        self._clover_paths = expand_clover_paths(
            self._configuration.coverage_clover, self._configuration.root_dir
        )
        self._payload.source_files = collect_source_files(
            self._clover_paths,
            root_dir=self._configuration.root_dir,
            src_dir=self._configuration.src_dir,
        )

    def collect_git_info(self) -> None:
        self._payload.git = self._git_reader.read()

    def collect_environment(self, environ: Mapping[str, str]) -> None:
        """Copy CI-related variables and derive the CI service identity."""
        self._payload.environment = {
            name: value
            for name, value in environ.items()
            if name.startswith(ENVIRONMENT_PREFIXES)
        }
        service_name, service_job_id = _detect_service(environ)
        if self._configuration.service_name is None:
            self._payload.service_name = service_name
        self._payload.service_job_id = service_job_id
        if self._configuration.repo_token is None:
            self._payload.repo_token = environ.get("COVERALLS_REPO_TOKEN") or None

    def get_payload(self) -> JobPayload:
        return self._payload


def _detect_service(environ: Mapping[str, str]) -> tuple[str | None, str | None]:
    if environ.get("TRAVIS") and environ.get("TRAVIS_JOB_ID"):
        return "travis-ci", environ["TRAVIS_JOB_ID"]
    if environ.get("CIRCLECI") and environ.get("CIRCLE_BUILD_NUM"):
        return "circleci", environ["CIRCLE_BUILD_NUM"]
    if environ.get("JENKINS_URL") and environ.get("BUILD_NUMBER"):
        return "jenkins", environ["BUILD_NUMBER"]
    if environ.get("CI_NAME"):
        return environ["CI_NAME"], environ.get("CI_BUILD_NUMBER") or None
    if environ.get("COVERALLS_RUN_LOCALLY"):
        return LOCAL_SERVICE_NAME, None
    return None, None
