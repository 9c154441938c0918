"""Interface to the external line counting engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from .languages import LanguageRegistry
from .logging import get_logger
from .models import PathCounts

logger = get_logger("counter")


@dataclass(frozen=True)
class CountOptions:
    """Settings passed through to the counting engine."""

    # Count documentation strings as comments rather than ignoring them.
    count_doc_strings: bool = True


class LineCounter(Protocol):
    """Engine that classifies each line of a file as code, comment or blank."""

    def count(
        self,
        files: Sequence[Path],
        options: CountOptions,
        registry: LanguageRegistry,
    ) -> PathCounts:
        """Return the counts per language for every file.

        A file the engine cannot classify maps to an empty mapping.
        """
        ...


def count_files(
    counter: LineCounter,
    files: Sequence[Path],
    options: CountOptions,
    registry: LanguageRegistry,
) -> PathCounts:
    """Run the counting engine over ``files`` and log what it found."""
    logger.debug(
        "Counting %d files (count_doc_strings=%s)", len(files), options.count_doc_strings
    )
    path_counts = counter.count(files, options, registry)
    unrecognized = sum(1 for languages in path_counts.values() if not languages)
    logger.info("Counted %d files (%d unrecognized)", len(path_counts), unrecognized)
    return path_counts


__all__ = ["CountOptions", "LineCounter", "count_files"]
