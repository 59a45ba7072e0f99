"""Configuration loading for packgen (.packgen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .models import PackageFields

CONFIG_FILENAME = ".packgen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class FileNames:
    """Names of the three artifacts inside the package directory."""

    manifest: str = "package.json"
    readme: str = "README.md"
    changelog: str = "CHANGELOG.md"


@dataclass
class ManifestConfig:
    """Serialisation settings for the manifest."""

    platform_key: str = "unity"
    indent: int = 2


@dataclass
class ChangelogConfig:
    """Text used when a changelog is first created."""

    title: str = "Changelog"
    initial_note: str = "Initial release"


@dataclass
class PackGenConfig:
    """Represents the settings defined in .packgen.yml."""

    root: Path
    package_path: str = "Assets/MyPackage"
    defaults: PackageFields = field(default_factory=PackageFields.defaults)
    files: FileNames = field(default_factory=FileNames)
    manifest: ManifestConfig = field(default_factory=ManifestConfig)
    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)


def load_config(config_path: Path) -> PackGenConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PackGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = PackGenConfig(root=root)

    package_path = _as_str(data.get("package_path"))
    if package_path:
        config.package_path = package_path

    defaults_data = _as_dict(data.get("defaults"))
    if defaults_data:
        for key, value in defaults_data.items():
            # 1.10 would load as the float 1.1
            if isinstance(value, float):
                raise ConfigError(
                    f"defaults.{key} must be a quoted string, got the number {value!r}"
                )
        config.defaults = config.defaults.merged(
            {key: _as_str(value) for key, value in defaults_data.items()}
        )

    files_data = _as_dict(data.get("files"))
    if files_data:
        config.files = FileNames(
            manifest=_as_str(files_data.get("manifest")) or config.files.manifest,
            readme=_as_str(files_data.get("readme")) or config.files.readme,
            changelog=_as_str(files_data.get("changelog")) or config.files.changelog,
        )

    manifest_data = _as_dict(data.get("manifest"))
    if manifest_data:
        indent = _as_int(manifest_data.get("indent"))
        if indent is not None and indent < 0:
            raise ConfigError("manifest.indent must not be negative")
        config.manifest = ManifestConfig(
            platform_key=_as_str(manifest_data.get("platform_key"))
            or config.manifest.platform_key,
            indent=config.manifest.indent if indent is None else indent,
        )

    changelog_data = _as_dict(data.get("changelog"))
    if changelog_data:
        config.changelog = ChangelogConfig(
            title=_as_str(changelog_data.get("title")) or config.changelog.title,
            initial_note=_as_str(changelog_data.get("initial_note"))
            or config.changelog.initial_note,
        )

    return config


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
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    # YAML booleans are never field values
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ChangelogConfig",
    "ConfigError",
    "FileNames",
    "ManifestConfig",
    "PackGenConfig",
    "load_config",
]
