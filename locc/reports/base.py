"""Base classes shared by the report renderers."""

from __future__ import annotations

import contextlib
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path, PurePath

from ..cache import CountsCache
from ..logging import get_logger

REPORT_BASE_NAME = "locc"
FORMAT_VERSION = 1


class ReportError(RuntimeError):
    """Raised when a report cannot be written to its destination."""

    def __init__(self, report: str, destination: Path | str, message: str) -> None:
        super().__init__(f"Unable to write {report} report to {destination}: {message}")
        self.report = report
        self.destination = destination


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class ReportContext:
    """Project metadata shared by every report in a run."""

    project_name: str
    project_version: str
    root: Path
    generated_at: datetime = field(default_factory=_now)

    def timestamp(self) -> str:
        """Generation time as an ISO-8601 string with the local UTC offset."""
        generated = self.generated_at
        if generated.tzinfo is None:
            generated = generated.astimezone()
        return generated.isoformat(timespec="seconds")

    def pathname(self, path: PurePath) -> str:
        """Render a counted file's path for a report.

        Absolute paths under the root are shown relative to it; relative paths
        and paths outside the root pass through unchanged.
        """
        if path.is_absolute():
            try:
                return path.relative_to(self.root).as_posix()
            except ValueError:
                return path.as_posix()
        return path.as_posix()


class LoccReport(ABC):
    """Contract for renderers producing one line count report format."""

    name: str = ""
    display_name: str = ""
    extension: str = ""
    default_enabled: bool = False

    def __init__(
        self,
        context: ReportContext,
        reports_dir: Path,
        *,
        enabled: bool | None = None,
    ) -> None:
        self.context = context
        self.output_path = reports_dir / f"{REPORT_BASE_NAME}.{self.extension}"
        self.enabled = self.default_enabled if enabled is None else enabled
        self.logger = get_logger(f"reports.{self.name}")

    @abstractmethod
    def render(self, cache: CountsCache) -> str:
        """Return the complete report for the counts in ``cache``."""

    def generate_report(self, cache: CountsCache) -> None:
        """Write the report, replacing any previous copy."""
        content = self.render(cache)
        destination = self.output_path
        partial = destination.with_name(f".{destination.name}.tmp")
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            # Undecodable filename bytes arrive as lone surrogates.
            with partial.open(
                "w", encoding="utf-8", errors="backslashreplace", newline=""
            ) as handle:
                handle.write(content)
            os.replace(partial, destination)
        except (OSError, UnicodeError) as exc:
            with contextlib.suppress(OSError):
                partial.unlink(missing_ok=True)
            message = getattr(exc, "strerror", None) or str(exc)
            raise ReportError(self.name, destination, message) from exc
        self.logger.debug("Wrote %s report to %s", self.name, destination)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(output_path={str(self.output_path)!r}, enabled={self.enabled})"


__all__ = [
    "FORMAT_VERSION",
    "LoccReport",
    "REPORT_BASE_NAME",
    "ReportContext",
    "ReportError",
]
