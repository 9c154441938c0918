"""Line count summary table written to the console."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, TextIO

from ..cache import CountsCache
from .base import LoccReport, ReportContext, ReportError

_COL_SEPARATOR = 4
_COL_PADDING = " " * _COL_SEPARATOR
_HEADERS = ("Language", "Files", "Blank", "Comment", "Code")


class ConsoleReport(LoccReport):
    """Prints per-language totals as a fixed-width table."""

    name = "console"
    display_name = "Report to console"
    extension = "console"
    default_enabled = False

    def __init__(
        self,
        context: ReportContext,
        reports_dir: Path,
        *,
        enabled: bool | None = None,
        stream: TextIO | None = None,
    ) -> None:
        super().__init__(context, reports_dir, enabled=enabled)
        self._stream = stream

    def render(self, cache: CountsCache) -> str:
        languages = cache.sorted_languages()
        total = cache.total_counts

        rows: List[tuple[str, str, str, str, str]] = []
        for language in languages:
            counts = cache.language_counts[language]
            rows.append(
                (
                    language.display_name,
                    str(len(cache.language_paths[language])),
                    str(counts.blank),
                    str(counts.comment),
                    str(counts.code),
                )
            )
        total_row = ("Total", "", str(total.blank), str(total.comment), str(total.code))

        widths = [len(header) for header in _HEADERS]
        for row in rows + [total_row]:
            widths = [max(width, len(value)) for width, value in zip(widths, row)]
        divider = "-" * (sum(widths) + _COL_SEPARATOR * (len(widths) - 1))

        header = _COL_PADDING.join(
            label.ljust(width) for label, width in zip(_HEADERS[:-1], widths)
        )
        lines = [divider, f"{header}{_COL_PADDING}{_HEADERS[-1]}", divider]
        lines.extend(_format_row(row, widths) for row in rows)
        lines.append(divider)
        lines.append(_format_row(total_row, widths))
        lines.append(divider)
        return "\n".join(lines) + "\n"

    def generate_report(self, cache: CountsCache) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        content = self.render(cache)
        try:
            stream.write(content)
            stream.flush()
        except (OSError, UnicodeError) as exc:
            raise ReportError(self.name, getattr(stream, "name", "<console>"), str(exc)) from exc


def _format_row(row: tuple[str, str, str, str, str], widths: List[int]) -> str:
    name, *numbers = row
    cells = [name.ljust(widths[0])]
    cells.extend(value.rjust(width) for value, width in zip(numbers, widths[1:]))
    return _COL_PADDING.join(cells)


__all__ = ["ConsoleReport"]
