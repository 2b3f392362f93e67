"""Jobs run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextlib import AbstractContextManager
from pathlib import Path

import requests

from coveralls_uploader.configuration import ConfigurationError, load_configuration
from coveralls_uploader.configuration.runtime_settings import Configuration
from coveralls_uploader.git_metadata import GitInfoReader
from coveralls_uploader.job_payload import PayloadWriteError, PayloadWriter
from coveralls_uploader.job_payload.report_builder import GitReader, ReportBuilder
from coveralls_uploader.jobs_submission import HTTPSession, JobsSubmitter, SubmissionResult

from .run_contracts import EXIT_CONFIG_ERROR, EXIT_WRITE_ERROR, RunOutcome, RunRequest
from .run_logging import build_run_logger

SessionFactory = Callable[[], AbstractContextManager[HTTPSession]]
GitReaderFactory = Callable[[Path], GitReader]
LoggerFactory = Callable[[Configuration], logging.Logger]


class RunExecutionError(Exception):
    """Raised when a fatal step aborts the run."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def execute_jobs_pipeline(
    request: RunRequest,
    *,
    environ: Mapping[str, str],
    session_factory: SessionFactory | None = None,
    git_reader_factory: GitReaderFactory | None = None,
    logger_factory: LoggerFactory | None = None,
) -> RunOutcome:
    """Collect coverage, git and CI data, write the json_file and submit it.

    Configuration and artifact-write failures abort the run with
    :class:`RunExecutionError`; submission failures are logged and returned in
    the outcome.
    """
    resolved_session_factory = session_factory or requests.Session
    resolved_git_reader_factory = git_reader_factory or GitInfoReader
    resolved_logger_factory = logger_factory or build_run_logger

    configuration = _load_run_configuration(request)
    logger = resolved_logger_factory(configuration)

    builder = ReportBuilder(
        configuration, git_reader=resolved_git_reader_factory(configuration.root_dir)
    )
    writer = PayloadWriter()

    _collect_coverage(builder, logger)
    logger.info("Collect git info")
    builder.collect_git_info()
    logger.info("Read environment variables")
    builder.collect_environment(environ)
    _write_payload(writer, builder, configuration, logger)

    logger.info("Submitting to %s", configuration.endpoint_url)
    with resolved_session_factory() as session:
        submitter = JobsSubmitter(
            session,
            endpoint_url=configuration.endpoint_url,
            timeout_seconds=configuration.timeout_seconds,
        )
        result = submitter.send(configuration, builder.get_payload())

    _log_result(logger, result)
    return RunOutcome(
        result=result,
        json_path=configuration.json_path,
        dry_run=configuration.dry_run,
    )


def _load_run_configuration(request: RunRequest) -> Configuration:
    try:
        return load_configuration(
            request.config_path,
            request.root_dir,
            dry_run=request.dry_run,
            verbose=request.verbose,
            env=request.env,
        )
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc), EXIT_CONFIG_ERROR) from exc


def _collect_coverage(builder: ReportBuilder, logger: logging.Logger) -> None:
    builder.collect_coverage()

    logger.info("Load coverage clover log:")
    for path in builder.collected_clover_paths:
        logger.info("  - %s", path)

    payload = builder.get_payload()
    if payload.has_source_files:
        logger.info("Found source file:")
        for name in sorted(payload.source_files):
            logger.info("  - %s", name)


def _write_payload(
    writer: PayloadWriter,
    builder: ReportBuilder,
    configuration: Configuration,
    logger: logging.Logger,
) -> None:
    logger.info("Dump uploading json file: %s", configuration.json_path)
    try:
        writer.write(builder.get_payload(), configuration.json_path)
    except PayloadWriteError as exc:
        raise RunExecutionError(str(exc), EXIT_WRITE_ERROR) from exc


def _log_result(logger: logging.Logger, result: SubmissionResult) -> None:
    if result.failed:
        logger.error("%s", result.describe())
    else:
        logger.info("%s", result.describe())
