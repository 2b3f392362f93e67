"""Jobs API submission exports."""

from .jobs_submitter import HTTPSession, JobsSubmitter, classify_response
from .submission_outcomes import SubmissionErrorKind, SubmissionResult, SubmissionStatus

__all__ = [
    "HTTPSession",
    "JobsSubmitter",
    "classify_response",
    "SubmissionErrorKind",
    "SubmissionResult",
    "SubmissionStatus",
]
