"""Line count report in comma-separated values format."""

from __future__ import annotations

from ..cache import CountsCache
from ..models import Counts
from .base import LoccReport
from .escaping import escape_csv

_LINE_END = "\r\n"
_HEADER = "ID,Name,Description,Total Lines,Code Lines,Comment Lines,Blank Lines"


class CsvReport(LoccReport):
    """One row for all languages combined followed by a row per language."""

    name = "csv"
    display_name = "Report in CSV format"
    extension = "csv"
    default_enabled = False

    def render(self, cache: CountsCache) -> str:
        rows = [_HEADER, "ALL,All,All languages," + _format_counts(cache.total_counts)]
        for language in cache.sorted_languages():
            fields = ",".join(
                escape_csv(value)
                for value in (language.name, language.display_name, language.description)
            )
            rows.append(f"{fields},{_format_counts(cache.language_counts[language])}")
        return _LINE_END.join(rows) + _LINE_END


def _format_counts(counts: Counts) -> str:
    return f"{counts.total},{counts.code},{counts.comment},{counts.blank}"


__all__ = ["CsvReport"]
