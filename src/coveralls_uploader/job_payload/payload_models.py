"""Job payload domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class SourceFile:
    """Line coverage of one source file, keyed by its root-relative name."""

    name: str
    source: str
    coverage: tuple[int | None, ...]

    def to_document(self) -> dict[str, Any]:
        return {"name": self.name, "source": self.source, "coverage": list(self.coverage)}


@dataclass(frozen=True)
class GitCommit:
    """HEAD commit details."""

    id: str
    author_name: str
    author_email: str
    committer_name: str
    committer_email: str
    message: str


@dataclass(frozen=True)
class GitRemote:
    """One configured fetch remote."""

    name: str
    url: str


@dataclass(frozen=True)
class GitInfo:
    """Repository metadata attached to a job."""

    head: GitCommit
    branch: str
    remotes: tuple[GitRemote, ...]

    def to_document(self) -> dict[str, Any]:
        return {
            "head": {
                "id": self.head.id,
                "author_name": self.head.author_name,
                "author_email": self.head.author_email,
                "committer_name": self.head.committer_name,
                "committer_email": self.head.committer_email,
                "message": self.head.message,
            },
            "branch": self.branch,
            "remotes": [{"name": remote.name, "url": remote.url} for remote in self.remotes],
        }


@dataclass
class JobPayload:  # pylint: disable=too-many-instance-attributes
    """Mutable accumulator of everything submitted as the json_file."""

    source_files: dict[str, SourceFile] = field(default_factory=dict)
    git: GitInfo | None = None
    environment: dict[str, str] = field(default_factory=dict)
    repo_token: str | None = None
    service_name: str | None = None
    service_job_id: str | None = None
    run_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def has_source_files(self) -> bool:
        return bool(self.source_files)

    def to_document(self) -> dict[str, Any]:
        """Render the Jobs API json_file structure."""
        document: dict[str, Any] = {}
        if self.repo_token:
            document["repo_token"] = self.repo_token
        if self.service_name:
            document["service_name"] = self.service_name
        if self.service_job_id:
            document["service_job_id"] = self.service_job_id
        document["source_files"] = [
            self.source_files[name].to_document() for name in sorted(self.source_files)
        ]
        if self.git is not None:
            document["git"] = self.git.to_document()
        document["environment"] = dict(sorted(self.environment.items()))
        document["run_at"] = self.run_at.strftime("%Y-%m-%d %H:%M:%S %z")
        return document
