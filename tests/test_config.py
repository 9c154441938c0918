"""Tests for locc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from locc.config import (
    CONFIG_FILENAME,
    ConfigError,
    ExtensionConfig,
    LoccConfig,
    load_config,
)
from locc.languages import LanguageRegistry


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, LoccConfig)
    assert config.root == tmp_path.resolve()
    assert config.project_name is None
    assert config.effective_project_name == tmp_path.resolve().name
    assert config.effective_project_version == "unspecified"
    assert config.effective_reports_dir == tmp_path.resolve() / "build" / "reports" / "locc"
    assert config.count_doc_strings is True
    assert config.parallel is False
    assert config.reports == {}
    assert config.extensions == ExtensionConfig()


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / CONFIG_FILENAME
    config_file.write_text(
        """
project:
  name: demo
  version: 1.2.3
reports_dir: out/reports
count_doc_strings: false
parallel: true
reports:
  XML: false
  console: yes
extensions:
  add:
    foo: Java
    tpp: C++
  remove: [h]
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.effective_project_name == "demo"
    assert config.effective_project_version == "1.2.3"
    assert config.effective_reports_dir == tmp_path.resolve() / "out" / "reports"
    assert config.count_doc_strings is False
    assert config.parallel is True
    assert config.reports == {"xml": False, "console": True}
    assert config.extensions.add == {"foo": "Java", "tpp": "C++"}
    assert config.extensions.remove == ["h"]


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.reports == {}
    assert config.effective_project_version == "unspecified"


def test_load_config_relative_root(tmp_path: Path) -> None:
    (tmp_path / "project").mkdir()
    (tmp_path / CONFIG_FILENAME).write_text("root: project\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.root == (tmp_path / "project").resolve()
    assert config.effective_project_name == "project"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("project: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match=CONFIG_FILENAME):
        load_config(tmp_path)


def test_load_config_rejects_non_boolean_report_flag(tmp_path: Path) -> None:
    (tmp_path / CONFIG_FILENAME).write_text("reports:\n  xml: sometimes\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="reports.xml"):
        load_config(tmp_path)


def test_extension_config_applies_to_registry(registry: LanguageRegistry) -> None:
    ExtensionConfig(add={"foo": "Java", "tpp": "C++"}, remove=["h"]).apply(registry)

    assert registry.detect(Path("a.foo")).name == "Java"
    assert registry.detect(Path("a.tpp")).name == "Cpp"
    assert registry.detect(Path("a.h")) is None


def test_extension_config_rejects_unknown_language(registry: LanguageRegistry) -> None:
    with pytest.raises(ConfigError, match="Klingon"):
        ExtensionConfig(add={"kl": "Klingon"}).apply(registry)
