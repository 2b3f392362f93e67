"""Clover XML coverage report reader."""

from __future__ import annotations

import glob
import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from coveralls_uploader.job_payload.payload_models import SourceFile

_LOGGER = logging.getLogger(__name__)


class CloverReadError(Exception):
    """Raised when a clover report cannot be read or parsed."""


def expand_clover_paths(patterns: Sequence[str], root_dir: Path) -> tuple[Path, ...]:
    """Resolve clover path patterns against the root directory.

    Patterns may be plain paths or glob patterns. Paths that match nothing are
    dropped, so a run without any report yields an empty tuple.
    """
    resolved: list[Path] = []
    for pattern in patterns:
        if Path(pattern).is_absolute():
            matches = glob.glob(pattern, recursive=True)
        else:
            # root_dir itself is never interpreted as a pattern.
            matches = glob.glob(pattern, root_dir=root_dir, recursive=True)
        for match in sorted(matches):
            path = (root_dir / match).resolve()
            if path.is_file() and path not in resolved:
                resolved.append(path)
    return tuple(resolved)


def read_clover_report(
    clover_path: Path, *, root_dir: Path, src_dir: Path
) -> dict[str, SourceFile]:
    """Read one clover report into source files keyed by root-relative name.

    Raises:
      CloverReadError: If the report is unreadable or not well-formed XML.
    """
    try:
        tree = ET.parse(clover_path)
    except (OSError, ET.ParseError) as exc:
        raise CloverReadError(f"Failed to read clover report {clover_path}: {exc}") from exc

    source_files: dict[str, SourceFile] = {}
    for file_element in tree.getroot().iter("file"):
        source_file = _read_source_file(file_element, root_dir=root_dir, src_dir=src_dir)
        if source_file is not None:
            source_files[source_file.name] = source_file
    return source_files


def collect_source_files(
    clover_paths: Iterable[Path], *, root_dir: Path, src_dir: Path
) -> dict[str, SourceFile]:
    """Read and merge every clover report, skipping reports that fail to parse."""
    merged: dict[str, SourceFile] = {}
    for clover_path in clover_paths:
        try:
            report = read_clover_report(clover_path, root_dir=root_dir, src_dir=src_dir)
        except CloverReadError as exc:
            _LOGGER.warning("%s", exc)
            continue
        for name, source_file in report.items():
            existing = merged.get(name)
            merged[name] = source_file if existing is None else _merge(existing, source_file)
    return merged


def _read_source_file(
    file_element: ET.Element, *, root_dir: Path, src_dir: Path
) -> SourceFile | None:
    raw_name = file_element.get("path") or file_element.get("name")
    if not raw_name:
        return None
    candidate = Path(raw_name)
    path = (candidate if candidate.is_absolute() else root_dir / candidate).resolve()
    if not path.is_file() or not path.is_relative_to(src_dir):
        return None
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None

    coverage: list[int | None] = [None] * len(source.splitlines())
    for line_number, count in _statement_counts(file_element).items():
        if 1 <= line_number <= len(coverage):
            coverage[line_number - 1] = count
    return SourceFile(
        name=_relative_name(path, root_dir),
        source=source,
        coverage=tuple(coverage),
    )


def _statement_counts(file_element: ET.Element) -> Mapping[int, int]:
    counts: dict[int, int] = {}
    for line_element in file_element.findall("line"):
        if line_element.get("type") != "stmt":
            continue
        try:
            line_number = int(line_element.get("num", ""))
            count = int(line_element.get("count", "0"))
        except ValueError:
            continue
        counts[line_number] = counts.get(line_number, 0) + count
    return counts


def _relative_name(path: Path, root_dir: Path) -> str:
    if path.is_relative_to(root_dir):
        return path.relative_to(root_dir).as_posix()
    return path.as_posix()


def _merge(left: SourceFile, right: SourceFile) -> SourceFile:
    merged: list[int | None] = []
    for index in range(max(len(left.coverage), len(right.coverage))):
        counts = [
            count
            for count in (_count_at(left, index), _count_at(right, index))
            if count is not None
        ]
        merged.append(sum(counts) if counts else None)
    return SourceFile(name=left.name, source=left.source, coverage=tuple(merged))


def _count_at(source_file: SourceFile, index: int) -> int | None:
    if index < len(source_file.coverage):
        return source_file.coverage[index]
    return None
