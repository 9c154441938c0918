"""Configuration loading for locc (.locc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .languages import LanguageRegistry

CONFIG_FILENAME = ".locc.yml"
DEFAULT_REPORTS_DIR = Path("build") / "reports" / "locc"
DEFAULT_VERSION = "unspecified"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExtensionConfig:
    """File-extension mapping changes applied to the language registry.

    The mappings steer the counting engine's language detection. Recorded
    snapshots already name each file's languages, so they are unaffected; use
    ``locc languages --config`` to inspect the resulting registry.
    """

    add: Dict[str, str] = field(default_factory=dict)
    remove: List[str] = field(default_factory=list)

    def apply(self, registry: LanguageRegistry) -> None:
        for extension in self.remove:
            registry.remove_extension(extension)
        for extension, language in self.add.items():
            target = registry.find(language)
            if target is None:
                raise ConfigError(f"Unknown language '{language}' for extension '{extension}'")
            registry.add_extension(extension, target)


@dataclass
class LoccConfig:
    """Represents the settings defined in .locc.yml."""

    root: Path
    project_name: Optional[str] = None
    project_version: Optional[str] = None
    reports_dir: Optional[Path] = None
    count_doc_strings: bool = True
    parallel: bool = False
    reports: Dict[str, bool] = field(default_factory=dict)
    extensions: ExtensionConfig = field(default_factory=ExtensionConfig)

    @property
    def effective_project_name(self) -> str:
        return self.project_name or self.root.name or "project"

    @property
    def effective_project_version(self) -> str:
        return self.project_version or DEFAULT_VERSION

    @property
    def effective_reports_dir(self) -> Path:
        return self.reports_dir or (self.root / DEFAULT_REPORTS_DIR)


def load_config(config_path: Path) -> LoccConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return LoccConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    project_data = _as_dict(data.get("project"))
    root_str = _as_str(data.get("root"))
    if root_str:
        root = (root / root_str).resolve()

    reports_dir_str = _as_str(data.get("reports_dir"))
    reports_dir = root / reports_dir_str if reports_dir_str else None

    reports: Dict[str, bool] = {}
    for name, value in _as_dict(data.get("reports")).items():
        flag = _as_bool(value)
        if flag is None:
            raise ConfigError(f"reports.{name} must be true or false")
        reports[str(name).lower()] = flag

    extensions_data = _as_dict(data.get("extensions"))
    extensions = ExtensionConfig(
        add={
            str(extension): str(language)
            for extension, language in _as_dict(extensions_data.get("add")).items()
        },
        remove=_as_str_list(extensions_data.get("remove")),
    )

    count_doc_strings = _as_bool(data.get("count_doc_strings"))
    parallel = _as_bool(data.get("parallel"))

    return LoccConfig(
        root=root,
        project_name=_as_str(project_data.get("name")),
        project_version=_as_str(project_data.get("version")),
        reports_dir=reports_dir,
        count_doc_strings=True if count_doc_strings is None else count_doc_strings,
        parallel=bool(parallel),
        reports=reports,
        extensions=extensions,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "ExtensionConfig",
    "LoccConfig",
    "load_config",
]
