"""Job payload exports.

``ReportBuilder`` lives in :mod:`coveralls_uploader.job_payload.report_builder`; it
depends on the coverage and git readers, which themselves import these models.
"""

from .payload_models import GitCommit, GitInfo, GitRemote, JobPayload, SourceFile
from .payload_writer import PayloadWriteError, PayloadWriter

__all__ = [
    "GitCommit",
    "GitInfo",
    "GitRemote",
    "JobPayload",
    "SourceFile",
    "PayloadWriteError",
    "PayloadWriter",
]
