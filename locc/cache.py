"""Aggregated views over the raw per-file, per-language counts."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Set

from .models import Counts, Language, PathCounts


class CountsCache:
    """Derives every view the reports need from one counts snapshot.

    All views are computed once at construction and never change, so a cache
    can be shared by reports running on different threads. Every report needs
    at least the totals, and computing them per report would repeat the same
    pass over the files.
    """

    def __init__(self, path_counts: PathCounts) -> None:
        snapshot: Dict[Path, Mapping[Language, Counts]] = {
            path: MappingProxyType(dict(languages)) for path, languages in path_counts.items()
        }

        language_counts: Dict[Language, Counts] = {}
        language_paths: Dict[Language, Set[Path]] = {}
        file_counts: Dict[Path, Counts] = {}
        unrecognized: Set[Path] = set()
        total = Counts.ZERO

        for path, languages in snapshot.items():
            if not languages:
                unrecognized.add(path)
                continue
            file_total = Counts.ZERO
            for language, counts in languages.items():
                file_total = file_total + counts
                language_counts[language] = language_counts.get(language, Counts.ZERO) + counts
                language_paths.setdefault(language, set()).add(path)
            file_counts[path] = file_total
            total = total + file_total

        self._path_counts: Mapping[Path, Mapping[Language, Counts]] = MappingProxyType(snapshot)
        self._languages = frozenset(language_counts)
        self._total_counts = total
        self._language_counts: Mapping[Language, Counts] = MappingProxyType(language_counts)
        self._language_paths: Mapping[Language, frozenset[Path]] = MappingProxyType(
            {language: frozenset(paths) for language, paths in language_paths.items()}
        )
        self._file_counts: Mapping[Path, Counts] = MappingProxyType(file_counts)
        self._unrecognized = frozenset(unrecognized)

    @property
    def path_counts(self) -> Mapping[Path, Mapping[Language, Counts]]:
        """Counts for the languages in each file."""
        return self._path_counts

    @property
    def languages(self) -> frozenset[Language]:
        """Languages found in any counted file."""
        return self._languages

    @property
    def total_counts(self) -> Counts:
        """Line counts summed over all files and languages."""
        return self._total_counts

    @property
    def language_counts(self) -> Mapping[Language, Counts]:
        """Line counts for each language across all files."""
        return self._language_counts

    @property
    def language_paths(self) -> Mapping[Language, frozenset[Path]]:
        """Files containing each language."""
        return self._language_paths

    @property
    def file_counts(self) -> Mapping[Path, Counts]:
        """Line counts for each file regardless of language.

        Unrecognized files have no entry; use :meth:`counts_for` to get
        ``Counts.ZERO`` for them.
        """
        return self._file_counts

    @property
    def unrecognized(self) -> frozenset[Path]:
        """Files for which the counting engine found no language."""
        return self._unrecognized

    def counts_for(self, path: Path) -> Counts:
        return self._file_counts.get(path, Counts.ZERO)

    def sorted_languages(self) -> List[Language]:
        """Counted languages ordered by display name."""
        return sorted(self._language_counts, key=lambda language: language.sort_key)

    def sorted_paths(self) -> List[Path]:
        """All counted files ordered by their POSIX path string."""
        return sorted(self._path_counts, key=lambda path: path.as_posix())

    def languages_for(self, path: Path) -> List[Language]:
        """Languages found in one file, ordered by display name."""
        return sorted(self._path_counts.get(path, {}), key=lambda language: language.sort_key)


__all__ = ["CountsCache"]
