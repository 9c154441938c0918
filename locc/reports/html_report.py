"""Line count report as a standalone HTML document."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup

from ..cache import CountsCache
from ..models import Counts
from .base import LoccReport
from .escaping import escape_html, escape_html_attribute

_TEMPLATES_DIR = Path(__file__).with_name("templates")
_TEMPLATE_NAME = "report.html.j2"


def _finalize(value: Any) -> str:
    # Every {{ expression }} in the template passes through here.
    if value is None:
        return ""
    if isinstance(value, Markup):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    return escape_html(str(value))


def _attribute(value: Any) -> Markup:
    """Template filter for values placed inside a double-quoted attribute."""
    return Markup(escape_html_attribute(None if value is None else str(value)))


def _create_env(templates_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        autoescape=False,
        finalize=_finalize,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["attribute"] = _attribute
    return env


class HtmlReport(LoccReport):
    """Renders summary, language and file tables with an embedded stylesheet."""

    name = "html"
    display_name = "Report in HTML format"
    extension = "html"
    default_enabled = True

    _env = _create_env(_TEMPLATES_DIR)

    def render(self, cache: CountsCache) -> str:
        template = self._env.get_template(_TEMPLATE_NAME)
        total = cache.total_counts
        return template.render(
            project_name=self.context.project_name,
            project_version=self.context.project_version,
            date=self.context.timestamp(),
            num_files=len(cache.path_counts),
            num_languages=len(cache.languages),
            num_unrecognized=len(cache.unrecognized),
            total=_counts_row(total),
            languages=self._language_rows(cache),
            files=self._file_rows(cache),
        )

    def _language_rows(self, cache: CountsCache) -> List[Dict[str, Any]]:
        rows = []
        for language in cache.sorted_languages():
            rows.append(
                {
                    "display_name": language.display_name,
                    "description": language.description,
                    "website": language.website,
                    "counts": _counts_row(cache.language_counts[language]),
                }
            )
        return rows

    def _file_rows(self, cache: CountsCache) -> List[Dict[str, Any]]:
        rows = []
        for path in cache.sorted_paths():
            rows.append(
                {
                    "pathname": self.context.pathname(path),
                    "unrecognized": path in cache.unrecognized,
                    "languages": ", ".join(
                        language.display_name for language in cache.languages_for(path)
                    ),
                    "counts": _counts_row(cache.counts_for(path)),
                }
            )
        return rows


def _counts_row(counts: Counts) -> Dict[str, int]:
    return {
        "total": counts.total,
        "code": counts.code,
        "comment": counts.comment,
        "blank": counts.blank,
    }


__all__ = ["HtmlReport"]
