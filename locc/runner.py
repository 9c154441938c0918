"""Pipeline running the counting engine and the enabled reports."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .cache import CountsCache
from .config import LoccConfig
from .counter import CountOptions, LineCounter, count_files
from .languages import LanguageRegistry
from .logging import get_logger
from .reports import LoccReport, ReportContext, ReportError, discover_reports

logger = get_logger("runner")


class ReportGenerationError(RuntimeError):
    """Raised after a run in which one or more reports failed."""

    def __init__(self, failures: Sequence[ReportError]) -> None:
        details = "; ".join(str(failure) for failure in failures)
        super().__init__(f"{len(failures)} report(s) failed: {details}")
        self.failures = list(failures)


@dataclass
class ReportRunSummary:
    """Outcome of generating the enabled reports for one cache."""

    generated: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[ReportError] = field(default_factory=list)


def run_reports(
    cache: CountsCache,
    reports: Iterable[LoccReport],
    *,
    parallel: bool = False,
) -> ReportRunSummary:
    """Generate every enabled report, then raise if any of them failed.

    A failing report does not stop the others; reports only read the cache
    and write their own destinations, so they may run on separate threads.
    """
    summary = ReportRunSummary()
    selected: List[LoccReport] = []
    for report in reports:
        if report.enabled:
            selected.append(report)
        else:
            summary.skipped.append(report.name)

    if parallel and len(selected) > 1:
        with ThreadPoolExecutor(max_workers=len(selected)) as executor:
            outcomes = list(executor.map(lambda report: _generate(report, cache), selected))
    else:
        outcomes = [_generate(report, cache) for report in selected]

    for report, failure in zip(selected, outcomes):
        if failure is None:
            summary.generated.append(report.name)
        else:
            summary.failed.append(failure)

    if summary.failed:
        raise ReportGenerationError(summary.failed)
    return summary


def _generate(report: LoccReport, cache: CountsCache) -> Optional[ReportError]:
    logger.debug("Generating %s report", report.name)
    try:
        report.generate_report(cache)
    except ReportError as exc:
        logger.error("%s", exc)
        return exc
    logger.info("Generated %s report", report.name)
    return None


def run(
    counter: LineCounter,
    files: Sequence[Path],
    config: LoccConfig,
    registry: LanguageRegistry | None = None,
    *,
    context: ReportContext | None = None,
) -> ReportRunSummary:
    """Count ``files`` and write every report enabled by ``config``."""
    registry = registry or LanguageRegistry.default()
    config.extensions.apply(registry)

    options = CountOptions(count_doc_strings=config.count_doc_strings)
    path_counts = count_files(counter, files, options, registry)
    cache = CountsCache(path_counts)

    if context is None:
        context = ReportContext(
            project_name=config.effective_project_name,
            project_version=config.effective_project_version,
            root=config.root,
        )
    reports = discover_reports(context, config.effective_reports_dir, config.reports)
    return run_reports(cache, reports, parallel=config.parallel)


__all__ = [
    "ReportGenerationError",
    "ReportRunSummary",
    "run",
    "run_reports",
]
