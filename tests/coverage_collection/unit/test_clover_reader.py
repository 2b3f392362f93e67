"""Clover report reader tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from coveralls_uploader.coverage_collection.clover_reader import (
    CloverReadError,
    collect_source_files,
    expand_clover_paths,
    read_clover_report,
)

_CLOVER_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<coverage generated="1700000000">
  <project timestamp="1700000000">
    {body}
  </project>
</coverage>
"""


def _write_source(root: Path, relative: str, line_count: int) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"line {index}\n" for index in range(line_count)), encoding="utf-8")
    return path


def _write_clover(path: Path, body: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_CLOVER_TEMPLATE.format(body=body), encoding="utf-8")
    return path


def test_reads_statement_counts_from_project_and_package_files(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    first = _write_source(root, "src/first.py", 4)
    _write_source(root, "src/pkg/second.py", 2)
    clover_path = _write_clover(
        root / "clover.xml",
        f"""
    <file name="{first}">
      <line num="1" type="method" count="1"/>
      <line num="2" type="stmt" count="3"/>
      <line num="3" type="stmt" count="0"/>
      <line num="99" type="stmt" count="1"/>
    </file>
    <package name="pkg">
      <file name="src/pkg/second.py">
        <line num="2" type="stmt" count="1"/>
      </file>
    </package>
""",
    )

    source_files = read_clover_report(clover_path, root_dir=root, src_dir=root / "src")

    assert sorted(source_files) == ["src/first.py", "src/pkg/second.py"]
    assert source_files["src/first.py"].coverage == (None, 3, 0, None)
    assert source_files["src/first.py"].source.startswith("line 0\n")
    assert source_files["src/pkg/second.py"].coverage == (None, 1)


def test_skips_missing_sources_and_sources_outside_src_dir(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    _write_source(root, "tests/test_first.py", 1)
    clover_path = _write_clover(
        root / "clover.xml",
        """
    <file name="tests/test_first.py"><line num="1" type="stmt" count="1"/></file>
    <file name="src/deleted.py"><line num="1" type="stmt" count="1"/></file>
""",
    )

    source_files = read_clover_report(clover_path, root_dir=root, src_dir=root / "src")

    assert source_files == {}


def test_raises_read_error_for_malformed_report(tmp_path: Path) -> None:
    clover_path = tmp_path / "clover.xml"
    clover_path.write_text("<coverage><project>", encoding="utf-8")

    with pytest.raises(CloverReadError, match="Failed to read clover report"):
        read_clover_report(clover_path, root_dir=tmp_path, src_dir=tmp_path / "src")


def test_collect_merges_counts_and_skips_malformed_reports(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    root = tmp_path.resolve()
    _write_source(root, "src/app.py", 3)
    unit = _write_clover(
        root / "build/unit.xml",
        """
    <file name="src/app.py">
      <line num="1" type="stmt" count="1"/>
      <line num="2" type="stmt" count="0"/>
    </file>
""",
    )
    integration = _write_clover(
        root / "build/integration.xml",
        """
    <file name="src/app.py">
      <line num="2" type="stmt" count="2"/>
      <line num="3" type="stmt" count="0"/>
    </file>
""",
    )
    broken = root / "build/broken.xml"
    broken.write_text("not xml", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        source_files = collect_source_files(
            (unit, broken, integration), root_dir=root, src_dir=root / "src"
        )

    assert source_files["src/app.py"].coverage == (1, 2, 0)
    assert "broken.xml" in caplog.text


def test_expand_clover_paths_resolves_globs_and_drops_missing(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    first = _write_clover(root / "build/logs/clover-a.xml", "")
    second = _write_clover(root / "build/logs/clover-b.xml", "")

    paths = expand_clover_paths(
        ("build/logs/clover-*.xml", "build/logs/clover-a.xml", "missing.xml"), root
    )

    assert paths == (first, second)


def test_expand_clover_paths_returns_empty_tuple_without_matches(tmp_path: Path) -> None:
    assert expand_clover_paths(("build/logs/*.xml",), tmp_path.resolve()) == ()


def test_expand_clover_paths_treats_root_dir_literally(tmp_path: Path) -> None:
    root = (tmp_path / "proj[1]").resolve()
    report = _write_clover(root / "coverage.xml", "")
    nested = _write_clover(root / "build" / "clover-unit.xml", "")

    paths = expand_clover_paths(("coverage.xml", "build/clover-*.xml"), root)

    assert paths == (report, nested)


def test_prefers_full_path_attribute_over_short_name(tmp_path: Path) -> None:
    root = tmp_path.resolve()
    source = _write_source(root, "src/com/example/Foo.kt", 2)
    clover_path = _write_clover(
        root / "clover.xml",
        f"""
    <package name="com.example">
      <file name="Foo.kt" path="{source}">
        <line num="2" type="stmt" count="4"/>
      </file>
    </package>
""",
    )

    source_files = read_clover_report(clover_path, root_dir=root, src_dir=root / "src")

    assert source_files["src/com/example/Foo.kt"].coverage == (None, 4)
