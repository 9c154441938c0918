"""Tests for locc.models."""

from __future__ import annotations

import pytest

from locc.models import Counts, Language


def test_counts_total_sums_all_kinds() -> None:
    assert Counts(code=12, comment=5, blank=3).total == 20


def test_counts_addition_is_pointwise() -> None:
    result = Counts(code=1, comment=2, blank=3) + Counts(code=10, comment=20, blank=30)
    assert result == Counts(code=11, comment=22, blank=33)


def test_counts_zero_is_identity() -> None:
    counts = Counts(code=4, comment=1, blank=2)
    assert counts + Counts.ZERO == counts
    assert Counts.ZERO + counts == counts
    assert Counts.ZERO.total == 0


def test_counts_addition_is_order_independent() -> None:
    a = Counts(1, 2, 3)
    b = Counts(4, 5, 6)
    c = Counts(7, 8, 9)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)
    assert Counts.sum([a, b, c]) == Counts.sum([c, a, b]) == Counts(12, 15, 18)


def test_counts_sum_of_nothing_is_zero() -> None:
    assert Counts.sum([]) is Counts.ZERO


def test_counts_are_immutable() -> None:
    counts = Counts(1, 1, 1)
    with pytest.raises(AttributeError):
        counts.code = 5  # type: ignore[misc]


def test_counts_reject_other_operands() -> None:
    with pytest.raises(TypeError):
        Counts(1, 1, 1) + 1  # type: ignore[operator]


def test_language_sort_key_uses_display_name_first() -> None:
    languages = [
        Language(name="Cpp", display_name="C++"),
        Language(name="C", display_name="C"),
        Language(name="Asm", display_name="Assembly"),
    ]
    ordered = sorted(languages, key=lambda language: language.sort_key)
    assert [language.name for language in ordered] == ["Asm", "C", "Cpp"]
