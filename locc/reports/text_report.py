"""Plain text line count report."""

from __future__ import annotations

from typing import List

from ..cache import CountsCache
from ..models import Counts
from .base import LoccReport


class TextReport(LoccReport):
    """Writes the summary, languages and files as readable text."""

    name = "text"
    display_name = "Report in text format"
    extension = "txt"
    default_enabled = False

    def render(self, cache: CountsCache) -> str:
        total = cache.total_counts
        lines: List[str] = [
            f"Line Count Report For {self.context.project_name}",
            "-" * 80,
            f"Date: {self.context.timestamp()}",
            f"Project version: {self.context.project_version}",
            f"Number of files: {len(cache.path_counts)}",
            f"Number unrecognized files: {len(cache.unrecognized)}",
            f"Number of languages: {len(cache.languages)}",
            f"Total lines: {total.total}",
            f"Code lines: {total.code}",
            f"Comment lines: {total.comment}",
            f"Blank lines: {total.blank}",
            "",
            "Languages",
            "-" * 9,
        ]

        for language in cache.sorted_languages():
            if language.description is None:
                lines.append(language.display_name)
            else:
                lines.append(f"{language.display_name}: {language.description}")
            lines.append(_format_counts(cache.language_counts[language]))
            lines.append("")

        lines.extend(["Files", "-" * 5])
        for index, path in enumerate(cache.sorted_paths()):
            if index:
                lines.append("")
            lines.append(self.context.pathname(path))
            lines.append(_format_counts(cache.counts_for(path)))
            if path in cache.unrecognized:
                lines.append("    Languages: (unrecognized)")
            else:
                names = ", ".join(language.display_name for language in cache.languages_for(path))
                lines.append(f"    Languages: {names}")

        return "\n".join(lines) + "\n"


def _format_counts(counts: Counts) -> str:
    return (
        f"    Lines: {counts.total} total, {counts.code} code, "
        f"{counts.comment} comment, {counts.blank} blank"
    )


__all__ = ["TextReport"]
