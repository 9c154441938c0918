"""Report renderers and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Callable, Iterable, List, Mapping, Set, Type

from .base import FORMAT_VERSION, REPORT_BASE_NAME, LoccReport, ReportContext, ReportError
from .console_report import ConsoleReport
from .csv_report import CsvReport
from .html_report import HtmlReport
from .json_report import JsonReport
from .text_report import TextReport
from .xml_report import XmlReport
from .yaml_report import YamlReport

_ENTRY_POINT_GROUP = "locc.reports"

_BUILTIN_REPORTS: dict[str, Type[LoccReport]] = {
    "xml": XmlReport,
    "html": HtmlReport,
    "yaml": YamlReport,
    "json": JsonReport,
    "csv": CsvReport,
    "text": TextReport,
    "console": ConsoleReport,
}


class UnknownReportError(ValueError):
    """Raised when a report name does not match any known renderer."""


def builtin_report_names() -> List[str]:
    return list(_BUILTIN_REPORTS)


def discover_reports(
    context: ReportContext,
    reports_dir: Path,
    enabled: Mapping[str, bool] | None = None,
) -> List[LoccReport]:
    """Return report instances, applying optional per-report enable flags.

    Names missing from ``enabled`` keep the report's default flag.
    """
    overrides = {name.lower(): flag for name, flag in (enabled or {}).items()}
    pending: Set[str] = set(overrides)

    reports: List[LoccReport] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[..., LoccReport]) -> None:
        key = name.lower()
        if key in seen:
            return
        instance = factory(context, reports_dir, enabled=overrides.get(key))
        if not isinstance(instance, LoccReport):
            raise TypeError(f"Report factory for '{name}' did not return a LoccReport instance")
        reports.append(instance)
        seen.add(key)
        pending.discard(key)

    for name, factory in _BUILTIN_REPORTS.items():
        _add(name, factory)

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover
            raise RuntimeError(f"Failed to load report entry point '{entry.name}': {exc}") from exc
        if not (isinstance(loaded, type) and issubclass(loaded, LoccReport)):
            raise TypeError(f"Report entry point '{entry.name}' must be a LoccReport subclass")
        _add(entry.name, loaded)

    if pending:
        missing = ", ".join(sorted(pending))
        raise UnknownReportError(f"Unknown reports requested: {missing}")

    return reports


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points(group=_ENTRY_POINT_GROUP)


__all__ = [
    "ConsoleReport",
    "CsvReport",
    "FORMAT_VERSION",
    "HtmlReport",
    "JsonReport",
    "LoccReport",
    "REPORT_BASE_NAME",
    "ReportContext",
    "ReportError",
    "TextReport",
    "UnknownReportError",
    "XmlReport",
    "YamlReport",
    "builtin_report_names",
    "discover_reports",
]
