"""Line count report in JSON format."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from ..cache import CountsCache
from ..models import Counts
from .base import FORMAT_VERSION, LoccReport


class JsonReport(LoccReport):
    """Serialises the summary, languages and files as one JSON object."""

    name = "json"
    display_name = "Report in JSON format"
    extension = "json"
    default_enabled = False

    def render(self, cache: CountsCache) -> str:
        document: Dict[str, Any] = {
            "formatVersion": FORMAT_VERSION,
            "date": self.context.timestamp(),
            "projectName": self.context.project_name,
            "projectVersion": self.context.project_version,
            "numFiles": len(cache.path_counts),
            "numUnrecognized": len(cache.unrecognized),
            "numLanguages": len(cache.languages),
            **_counts_members(cache.total_counts),
            "languages": self._languages(cache),
            "files": self._files(cache),
        }
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    def _languages(self, cache: CountsCache) -> List[Dict[str, Any]]:
        return [
            {
                "name": language.name,
                "displayName": language.display_name,
                "description": language.description,
                "website": language.website,
                **_counts_members(cache.language_counts[language]),
            }
            for language in cache.sorted_languages()
        ]

    def _files(self, cache: CountsCache) -> List[Dict[str, Any]]:
        files: List[Dict[str, Any]] = []
        for path in cache.sorted_paths():
            language_counts = cache.path_counts[path]
            entry: Dict[str, Any] = {
                "pathname": self.context.pathname(path),
                "numLanguages": len(language_counts),
            }
            unrecognized = path in cache.unrecognized
            if unrecognized:
                entry["unrecognized"] = True
            entry.update(_counts_members(cache.counts_for(path)))
            if not unrecognized:
                entry["languages"] = [
                    {"name": language.name, **_counts_members(language_counts[language])}
                    for language in cache.languages_for(path)
                ]
            files.append(entry)
        return files


def _counts_members(counts: Counts) -> Dict[str, int]:
    return {
        "totalLines": counts.total,
        "codeLines": counts.code,
        "commentLines": counts.comment,
        "blankLines": counts.blank,
    }


__all__ = ["JsonReport"]
