from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping

import pytest

from locc.cache import CountsCache
from locc.languages import LanguageRegistry
from locc.models import Counts, Language
from locc.reports import ReportContext
from tests._fixtures.sample_counts import CPP_PATH, GENERATED_AT, JAVA_PATH, ROOT, UNRECOGNIZED_PATH


@pytest.fixture
def registry() -> LanguageRegistry:
    """Provide a fresh registry of the built-in languages."""
    return LanguageRegistry.default()


@pytest.fixture
def cpp(registry: LanguageRegistry) -> Language:
    return registry.get("Cpp")


@pytest.fixture
def java(registry: LanguageRegistry) -> Language:
    return registry.get("Java")


@pytest.fixture
def path_counts(cpp: Language, java: Language) -> Dict[Path, Mapping[Language, Counts]]:
    """One C++ file, one Java file and one file no language was found in."""
    return {
        CPP_PATH: {cpp: Counts(code=12, comment=5, blank=3)},
        JAVA_PATH: {java: Counts(code=8, comment=0, blank=0)},
        UNRECOGNIZED_PATH: {},
    }


@pytest.fixture
def cache(path_counts: Dict[Path, Mapping[Language, Counts]]) -> CountsCache:
    return CountsCache(path_counts)


@pytest.fixture
def context() -> ReportContext:
    return ReportContext(
        project_name="demo",
        project_version="1.2.3",
        root=ROOT,
        generated_at=GENERATED_AT,
    )
