"""Console logging for jobs runs."""

from __future__ import annotations

import logging

import click

from coveralls_uploader.configuration.runtime_settings import Configuration

RUN_LOGGER_NAME = "coveralls_uploader.run"


class ClickEchoHandler(logging.Handler):
    """Writes plain message lines to stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-exception-caught
            self.handleError(record)


def build_run_logger(configuration: Configuration) -> logging.Logger:
    """Return the run logger, silenced unless verbose outside the test environment."""
    logger = logging.getLogger(RUN_LOGGER_NAME)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if configuration.verbose and not configuration.is_test_env:
        handler: logging.Handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())
        # Suppress output even if a caller attaches handlers later.
        logger.setLevel(logging.CRITICAL + 1)
    return logger
