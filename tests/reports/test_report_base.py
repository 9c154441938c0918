"""Tests for the shared report context and write behaviour."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path, PurePosixPath

import pytest

from locc.cache import CountsCache
from locc.models import Counts, Language
from locc.reports import (
    ConsoleReport,
    CsvReport,
    HtmlReport,
    JsonReport,
    ReportContext,
    ReportError,
    TextReport,
    XmlReport,
    YamlReport,
)
from locc.runner import run_reports
from tests._fixtures.sample_counts import ROOT, TIMESTAMP

FILE_REPORTS = [XmlReport, HtmlReport, YamlReport, JsonReport, CsvReport, TextReport]


def test_timestamp_uses_iso_format_with_offset(context: ReportContext) -> None:
    assert context.timestamp() == TIMESTAMP


def test_timestamp_of_naive_datetime_gets_local_offset() -> None:
    context = ReportContext("demo", "1", ROOT, generated_at=datetime(2024, 5, 1, 10, 11, 12, 999))
    stamp = context.timestamp()

    assert stamp.startswith("2024-05-01T10:11:12")
    assert stamp[19] in "+-"
    assert len(stamp) == len(TIMESTAMP)


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        (ROOT / "src" / "main.cpp", "src/main.cpp"),
        (PurePosixPath("relative/main.cpp"), "relative/main.cpp"),
        (PurePosixPath("/elsewhere/main.cpp"), "/elsewhere/main.cpp"),
    ],
)
def test_pathname_rendering(context: ReportContext, path, expected: str) -> None:
    assert context.pathname(path) == expected


@pytest.mark.parametrize("report_type", FILE_REPORTS)
def test_rendering_is_deterministic(
    report_type, cache: CountsCache, context: ReportContext, tmp_path: Path
) -> None:
    report = report_type(context, tmp_path)
    assert report.render(cache) == report.render(cache)


@pytest.mark.parametrize("report_type", FILE_REPORTS)
def test_output_file_named_after_extension(
    report_type, context: ReportContext, tmp_path: Path
) -> None:
    report = report_type(context, tmp_path)
    assert report.output_path == tmp_path / f"locc.{report.extension}"


def test_generate_report_replaces_previous_output(
    cache: CountsCache, context: ReportContext, tmp_path: Path
) -> None:
    destination = tmp_path / "locc.txt"
    destination.write_text("stale", encoding="utf-8")

    TextReport(context, tmp_path).generate_report(cache)

    assert destination.read_text(encoding="utf-8").startswith("Line Count Report For demo")
    assert sorted(entry.name for entry in tmp_path.iterdir()) == ["locc.txt"]


def test_unwritable_destination_raises_report_error(
    cache: CountsCache, context: ReportContext, tmp_path: Path
) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")
    report = JsonReport(context, blocker)

    with pytest.raises(ReportError) as excinfo:
        report.generate_report(cache)

    assert excinfo.value.report == "json"
    assert excinfo.value.destination == blocker / "locc.json"
    assert isinstance(excinfo.value.__cause__, OSError)
    assert blocker.read_text(encoding="utf-8") == ""


def test_undecodable_pathname_does_not_abort_the_run(
    cpp: Language, context: ReportContext, tmp_path: Path
) -> None:
    cache = CountsCache({Path("src/bad\udc80.cpp"): {cpp: Counts(1, 0, 0)}})
    reports = [report_type(context, tmp_path, enabled=True) for report_type in FILE_REPORTS]

    summary = run_reports(cache, reports)

    assert summary.generated == [report.name for report in reports]
    assert sorted(entry.name for entry in tmp_path.iterdir()) == sorted(
        report.output_path.name for report in reports
    )
    text = (tmp_path / "locc.txt").read_text(encoding="utf-8")
    assert "src/bad\\udc80.cpp" in text


class _AsciiStream:
    name = "<ascii>"

    def write(self, text: str) -> int:
        return len(text.encode("ascii"))

    def flush(self) -> None:
        pass


def test_console_encoding_failure_raises_report_error(
    context: ReportContext, tmp_path: Path
) -> None:
    accented = Language(name="Cafe", display_name="Caf\u00e9")
    cache = CountsCache({Path("a.cafe"): {accented: Counts(1, 0, 0)}})
    report = ConsoleReport(context, tmp_path, stream=_AsciiStream())

    with pytest.raises(ReportError) as excinfo:
        report.generate_report(cache)

    assert excinfo.value.destination == "<ascii>"
    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
