"""Jobs API submission outcome entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SubmissionStatus(str, Enum):
    """Terminal state of one submission."""

    SUCCEEDED = "succeeded"
    DRY_RUN = "dry_run"
    FAILED = "failed"


class SubmissionErrorKind(str, Enum):
    """Classification of a failed submission."""

    CONNECTION_ERROR = "connection_error"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNKNOWN_ERROR = "unknown_error"


@dataclass(frozen=True)
class SubmissionResult:  # pylint: disable=too-many-instance-attributes
    """Outcome of submitting the json_file to the Jobs API."""

    status: SubmissionStatus
    error_kind: SubmissionErrorKind | None = None
    status_code: int | None = None
    reason: str | None = None
    error_message: str | None = None
    trace: str | None = None

    @property
    def failed(self) -> bool:
        return self.status == SubmissionStatus.FAILED

    @staticmethod
    def succeeded(status_code: int, reason: str) -> SubmissionResult:
        return SubmissionResult(
            status=SubmissionStatus.SUCCEEDED, status_code=status_code, reason=reason
        )

    @staticmethod
    def dry_run() -> SubmissionResult:
        return SubmissionResult(status=SubmissionStatus.DRY_RUN)

    @staticmethod
    def http_error(
        error_kind: SubmissionErrorKind, status_code: int, reason: str
    ) -> SubmissionResult:
        return SubmissionResult(
            status=SubmissionStatus.FAILED,
            error_kind=error_kind,
            status_code=status_code,
            reason=reason,
        )

    @staticmethod
    def exception(
        error_kind: SubmissionErrorKind, error: BaseException, trace: str
    ) -> SubmissionResult:
        return SubmissionResult(
            status=SubmissionStatus.FAILED,
            error_kind=error_kind,
            error_message=str(error),
            trace=trace,
        )

    def describe(self) -> str:
        """Render the single log line reported for this outcome."""
        if self.status == SubmissionStatus.DRY_RUN:
            return "Finish dry run"
        if self.status == SubmissionStatus.SUCCEEDED:
            return f"Finish submitting. status: {self.status_code} {self.reason}"
        if self.error_kind == SubmissionErrorKind.CLIENT_ERROR:
            return f"Client error occurred. status: {self.status_code} {self.reason}"
        if self.error_kind == SubmissionErrorKind.SERVER_ERROR:
            return f"Server error occurred. status: {self.status_code} {self.reason}"
        if self.error_kind == SubmissionErrorKind.CONNECTION_ERROR:
            return f"Connection error occurred. {self.error_message}\n\n{self.trace}"
        return f"{self.error_message}\n\n{self.trace}"
