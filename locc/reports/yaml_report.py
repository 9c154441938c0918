"""Line count report in YAML format."""

from __future__ import annotations

from typing import List, Optional

from ..cache import CountsCache
from ..models import Counts
from .base import FORMAT_VERSION, LoccReport
from .escaping import quote_yaml

_INDENT_4 = "    "
_INDENT_8 = "        "


class _YamlEmitter:
    """Collects ``key: value`` lines, quoting string scalars as they are added."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def line(self, text: str) -> None:
        self.lines.append(text)

    def string(self, prefix: str, value: Optional[str]) -> None:
        """Emit a string member; ``None`` omits the line entirely."""
        if value is not None:
            self.lines.append(f"{prefix}{quote_yaml(value)}")

    def number(self, prefix: str, value: int) -> None:
        self.lines.append(f"{prefix}{value}")

    def counts(self, indent: str, counts: Counts) -> None:
        self.number(f"{indent}totalLines: ", counts.total)
        self.number(f"{indent}codeLines: ", counts.code)
        self.number(f"{indent}commentLines: ", counts.comment)
        self.number(f"{indent}blankLines: ", counts.blank)

    def text(self) -> str:
        return "\n".join(self.lines) + "\n"


class YamlReport(LoccReport):
    """Writes the summary, languages and files as a single YAML document."""

    name = "yaml"
    display_name = "Report in YAML format"
    extension = "yaml"
    default_enabled = False

    def render(self, cache: CountsCache) -> str:
        out = _YamlEmitter()
        out.line("---")
        out.number("formatVersion: ", FORMAT_VERSION)
        out.string("date: ", self.context.timestamp())
        out.string("projectName: ", self.context.project_name)
        out.string("projectVersion: ", self.context.project_version)
        out.number("numFiles: ", len(cache.path_counts))
        out.number("numUnrecognized: ", len(cache.unrecognized))
        out.number("numLanguages: ", len(cache.languages))
        out.counts("", cache.total_counts)

        languages = cache.sorted_languages()
        out.line("languages:" if languages else "languages: []")
        for language in languages:
            out.string("  - name: ", language.name)
            out.string("    displayName: ", language.display_name)
            out.string("    description: ", language.description)
            out.string("    website: ", language.website)
            out.counts(_INDENT_4, cache.language_counts[language])

        paths = cache.sorted_paths()
        out.line("files:" if paths else "files: []")
        for path in paths:
            language_counts = cache.path_counts[path]
            out.string("  - pathname: ", self.context.pathname(path))
            out.number("    numLanguages: ", len(language_counts))
            if path in cache.unrecognized:
                out.line("    unrecognized: true")
            out.counts(_INDENT_4, cache.counts_for(path))
            if not language_counts:
                out.line("    languages: []")
                continue
            out.line("    languages:")
            for language in cache.languages_for(path):
                out.string("      - name: ", language.name)
                out.counts(_INDENT_8, language_counts[language])

        out.line("...")
        return out.text()


__all__ = ["YamlReport"]
