"""Git repository metadata reader backed by the git binary."""

from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

from coveralls_uploader.job_payload.payload_models import GitCommit, GitInfo, GitRemote

CommandRunner = Callable[[tuple[str, ...], Path], str]

_HEAD_FORMAT = "%H%n%aN%n%ae%n%cN%n%ce%n%s"


class GitCommandError(Exception):
    """Raised when a git command cannot be run or exits non-zero."""


class GitInfoReader:  # pylint: disable=too-few-public-methods
    """Reads HEAD, branch and remotes of the repository containing ``repo_dir``."""

    def __init__(self, repo_dir: Path, *, run_command: CommandRunner | None = None) -> None:
        self._repo_dir = repo_dir
        self._run_command = run_command or _run_checked_command

    def read(self) -> GitInfo | None:
        """Return repository metadata, or ``None`` when it cannot be collected."""
        try:
            head_output = self._git("log", "-1", f"--pretty=format:{_HEAD_FORMAT}")
            branch = self._git("rev-parse", "--abbrev-ref", "HEAD").strip()
            remotes_output = self._git("remote", "-v")
        except GitCommandError:
            return None

        head = _parse_head(head_output)
        if head is None:
            return None
        return GitInfo(head=head, branch=branch, remotes=_parse_remotes(remotes_output))

    def _git(self, *args: str) -> str:
        return self._run_command(("git", *args), self._repo_dir)


def _run_checked_command(command: tuple[str, ...], cwd: Path) -> str:
    try:
        completed = subprocess.run(
            list(command),
            cwd=cwd,
            check=True,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise GitCommandError(f"git command not available: {' '.join(command)}") from exc
    except subprocess.CalledProcessError as exc:
        raise GitCommandError(
            f"git command failed with exit code {exc.returncode}: {' '.join(command)}"
        ) from exc
    return completed.stdout


def _parse_head(output: str) -> GitCommit | None:
    lines = output.splitlines()
    if len(lines) < 5:
        return None
    message = lines[5] if len(lines) > 5 else ""
    return GitCommit(
        id=lines[0],
        author_name=lines[1],
        author_email=lines[2],
        committer_name=lines[3],
        committer_email=lines[4],
        message=message,
    )


def _parse_remotes(output: str) -> tuple[GitRemote, ...]:
    # `git remote -v` prints one fetch and one push line per remote.
    remotes: dict[str, GitRemote] = {}
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2 or parts[0] in remotes:
            continue
        remotes[parts[0]] = GitRemote(name=parts[0], url=parts[1])
    return tuple(remotes.values())
