"""Coverage collection exports."""

from .clover_reader import (
    CloverReadError,
    collect_source_files,
    expand_clover_paths,
    read_clover_report,
)

__all__ = [
    "CloverReadError",
    "collect_source_files",
    "expand_clover_paths",
    "read_clover_report",
]
