"""Core data models shared across locc components."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Iterable, Mapping, Optional


@dataclass(frozen=True)
class Counts:
    """Line tally for a file, a language or a whole run."""

    code: int = 0
    comment: int = 0
    blank: int = 0

    ZERO: ClassVar["Counts"]

    @property
    def total(self) -> int:
        return self.code + self.comment + self.blank

    def __add__(self, other: object) -> "Counts":
        if not isinstance(other, Counts):
            return NotImplemented
        return Counts(
            code=self.code + other.code,
            comment=self.comment + other.comment,
            blank=self.blank + other.blank,
        )

    @classmethod
    def sum(cls, counts: Iterable["Counts"]) -> "Counts":
        """Fold the given counts together, starting from ``Counts.ZERO``."""
        result = cls.ZERO
        for item in counts:
            result = result + item
        return result


Counts.ZERO = Counts()


@dataclass(frozen=True)
class Language:
    """Registry entry describing a source or markup language."""

    name: str
    display_name: str
    description: Optional[str] = None
    website: Optional[str] = None

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.display_name, self.name)


PathCounts = Mapping[Path, Mapping[Language, Counts]]


__all__ = ["Counts", "Language", "PathCounts"]
