"""Git metadata exports."""

from .git_reader import CommandRunner, GitCommandError, GitInfoReader

__all__ = [
    "CommandRunner",
    "GitCommandError",
    "GitInfoReader",
]
