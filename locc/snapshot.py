"""Recorded counting-engine output used as a line counter."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import yaml

from .counter import CountOptions
from .languages import LanguageRegistry
from .logging import get_logger
from .models import Counts, Language, PathCounts

logger = get_logger("snapshot")

RawCounts = Dict[Path, Dict[str, Counts]]

_COUNT_FIELDS = ("code", "comment", "blank")


class SnapshotError(RuntimeError):
    """Raised when a counts snapshot cannot be read or is malformed."""


def load_snapshot(path: Path) -> RawCounts:
    """Read a snapshot of raw counts from a JSON or YAML file.

    The document maps ``files`` to ``{pathname: {language: {code, comment, blank}}}``.
    Relative pathnames are kept relative; an empty language mapping marks an
    unrecognized file.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotError(f"Unable to read snapshot {path}: {exc}") from exc

    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SnapshotError(f"Failed to parse {path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise SnapshotError(f"{path.name} must contain a mapping at the root")
    files = data.get("files")
    if files is None:
        return {}
    if not isinstance(files, dict):
        raise SnapshotError(f"'files' in {path.name} must be a mapping")

    snapshot: RawCounts = {}
    for pathname, languages in files.items():
        if not isinstance(pathname, str):
            raise SnapshotError(f"Invalid pathname in {path.name}: {pathname!r}")
        snapshot[Path(pathname)] = _parse_languages(pathname, languages)
    logger.debug("Loaded %d files from snapshot %s", len(snapshot), path)
    return snapshot


def _parse_languages(pathname: str, languages: Any) -> Dict[str, Counts]:
    if languages is None:
        return {}
    if not isinstance(languages, dict):
        raise SnapshotError(f"Languages for {pathname} must be a mapping")
    parsed: Dict[str, Counts] = {}
    for name, counts in languages.items():
        parsed[str(name)] = _parse_counts(pathname, str(name), counts)
    return parsed


def _parse_counts(pathname: str, language: str, counts: Any) -> Counts:
    if not isinstance(counts, dict):
        raise SnapshotError(f"Counts for {language} in {pathname} must be a mapping")
    values: Dict[str, int] = {}
    for field_name in _COUNT_FIELDS:
        value = counts.get(field_name, 0)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise SnapshotError(
                f"'{field_name}' for {language} in {pathname} must be a non-negative integer"
            )
        values[field_name] = value
    return Counts(**values)


class SnapshotCounter:
    """Line counter answering from a previously recorded snapshot."""

    def __init__(self, snapshot: Mapping[Path, Mapping[str, Counts]]) -> None:
        self._snapshot = snapshot

    @classmethod
    def from_file(cls, path: Path) -> "SnapshotCounter":
        return cls(load_snapshot(path))

    @property
    def files(self) -> List[Path]:
        return list(self._snapshot)

    def count(
        self,
        files: Sequence[Path],
        options: CountOptions,
        registry: LanguageRegistry,
    ) -> PathCounts:
        result: Dict[Path, Dict[Language, Counts]] = {}
        for file in files:
            recorded = self._snapshot.get(file)
            if recorded is None:
                logger.warning("No recorded counts for %s; treating it as unrecognized", file)
                recorded = {}
            languages: Dict[Language, Counts] = {}
            for name, counts in recorded.items():
                language = _resolve_language(registry, name)
                languages[language] = languages.get(language, Counts.ZERO) + counts
            result[file] = languages
        return result


def _resolve_language(registry: LanguageRegistry, name: str) -> Language:
    language = registry.find(name)
    if language is None:
        logger.warning("Language '%s' is not registered; adding it", name)
        language = registry.register(Language(name=name, display_name=name))
    return language


__all__ = ["SnapshotCounter", "SnapshotError", "load_snapshot"]
