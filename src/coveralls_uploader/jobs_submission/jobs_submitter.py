"""Jobs API submission service."""

from __future__ import annotations

import traceback
from typing import Any, Protocol

import requests

from coveralls_uploader.configuration.runtime_settings import Configuration
from coveralls_uploader.job_payload.payload_models import JobPayload

from .submission_outcomes import SubmissionErrorKind, SubmissionResult


class HTTPSession(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for the HTTP session used by the submitter."""

    def post(self, url: str, **kwargs: Any) -> Any: ...


class JobsSubmitter:  # pylint: disable=too-few-public-methods
    """Uploads the json_file artifact and classifies the response."""

    def __init__(self, session: HTTPSession, *, endpoint_url: str, timeout_seconds: int) -> None:
        self._session = session
        self._endpoint_url = endpoint_url
        self._timeout_seconds = timeout_seconds

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def send(self, configuration: Configuration, payload: JobPayload) -> SubmissionResult:
        """Submit the artifact unless this is a dry run; never raises.

        ``payload`` is the in-memory counterpart of the artifact written to
        ``configuration.json_path``; the artifact is what gets uploaded.
        """
        if configuration.dry_run:
            return SubmissionResult.dry_run()

        try:
            with configuration.json_path.open("rb") as json_file:
                upload = (configuration.json_path.name, json_file, "application/json")
                response = self._session.post(
                    self._endpoint_url,
                    files={"json_file": upload},
                    timeout=self._timeout_seconds,
                )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as exc:
            return SubmissionResult.exception(
                SubmissionErrorKind.CONNECTION_ERROR, exc, traceback.format_exc()
            )
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return SubmissionResult.exception(
                SubmissionErrorKind.UNKNOWN_ERROR, exc, traceback.format_exc()
            )
        return classify_response(response.status_code, response.reason or "")


def classify_response(status_code: int, reason: str) -> SubmissionResult:
    """Map an HTTP status to a submission result by status class."""
    if 400 <= status_code < 500:
        return SubmissionResult.http_error(SubmissionErrorKind.CLIENT_ERROR, status_code, reason)
    if 500 <= status_code < 600:
        return SubmissionResult.http_error(SubmissionErrorKind.SERVER_ERROR, status_code, reason)
    return SubmissionResult.succeeded(status_code, reason)
