"""Create, update and read the package manifest (package.json)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..config import ManifestConfig
from ..errors import MalformedManifest
from ..logging import get_logger
from ..models import Outcome, PackageFields
from ..stores import TEXT_ENCODING, read_bytes_if_exists, write_text_atomic

logger = get_logger("manifest")

# manifest key -> PackageFields attribute, in the order keys are first written
_COPIED_KEYS = (
    ("version", "version"),
    ("author", "author"),
    ("description", "description"),
)


def managed_values(fields: PackageFields, *, platform_key: str = "unity") -> Dict[str, str]:
    """Return the six keys packgen owns in a manifest."""
    values = {
        "name": fields.manifest_name,
        "displayName": fields.display_name,
    }
    for key, attribute in _COPIED_KEYS:
        values[key] = getattr(fields, attribute)
    values[platform_key] = fields.platform_version
    return values


def build_manifest(
    fields: PackageFields,
    existing: Optional[Mapping[str, Any]] = None,
    *,
    platform_key: str = "unity",
) -> Dict[str, Any]:
    """Merge the managed keys into ``existing`` without touching anything else.

    Keys already present keep their position in the document; managed keys
    that are missing are appended.
    """
    document: Dict[str, Any] = dict(existing) if existing else {}
    document.update(managed_values(fields, platform_key=platform_key))
    return document


def render_manifest(document: Mapping[str, Any], *, indent: int = 2) -> str:
    return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"


def load_manifest_if_exists(path: Path) -> Optional[Dict[str, Any]]:
    """Return the parsed manifest, or None when the file does not exist."""
    raw = read_bytes_if_exists(path)
    if raw is None:
        return None
    try:
        text = raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise MalformedManifest(
            f"not valid UTF-8 ({exc.reason} at byte {exc.start})", path=path
        ) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedManifest(f"invalid JSON ({exc})", path=path) from exc
    if not isinstance(data, dict):
        raise MalformedManifest("top-level value must be a JSON object", path=path)
    return data


def write_manifest(
    path: Path,
    fields: PackageFields,
    existing: Optional[Mapping[str, Any]] = None,
    *,
    settings: ManifestConfig | None = None,
) -> None:
    settings = settings or ManifestConfig()
    document = build_manifest(fields, existing, platform_key=settings.platform_key)
    write_text_atomic(path, render_manifest(document, indent=settings.indent))


def ensure_manifest(
    path: Path,
    fields: PackageFields,
    *,
    settings: ManifestConfig | None = None,
) -> Outcome:
    """Create the manifest, or rewrite it with updated managed keys."""
    existing = load_manifest_if_exists(path)
    if existing is None:
        logger.debug("No manifest at %s; creating", path)
        outcome = Outcome.CREATED
    else:
        logger.debug("Merging %d existing manifest keys from %s", len(existing), path)
        outcome = Outcome.UPDATED
    write_manifest(path, fields, existing, settings=settings)
    logger.info("Manifest %s: %s", outcome.value, path)
    return outcome


def fields_from_manifest(
    document: Mapping[str, Any],
    base: PackageFields,
    *,
    platform_key: str = "unity",
    path: Path | None = None,
) -> PackageFields:
    """Seed form fields from a parsed manifest.

    ``name`` is read as ``com.<company>.<framework>.<package>``. The name
    only stores lower-case parts, so framework and package casing is taken
    from ``displayName`` when that matches ``<framework>.<package>``
    ignoring case. A name with fewer than four parts leaves the three
    identifier fields at their ``base`` values. Other keys missing from the
    document also keep their value from ``base``.
    """
    name = document.get("name")
    if not isinstance(name, str):
        raise MalformedManifest("'name' must be a string", path=path)

    overrides: Dict[str, Any] = {}
    parts = name.split(".", 3)
    if len(parts) == 4 and all(parts[1:]):
        framework, package_name = _restore_casing(
            parts[2], parts[3], document.get("displayName")
        )
        overrides.update(
            company=parts[1], framework=framework, package_name=package_name
        )
    else:
        logger.debug(
            "Manifest name %r is not com.<company>.<framework>.<package>; "
            "keeping current identifier fields",
            name,
        )

    for key, attribute in _COPIED_KEYS + ((platform_key, "platform_version"),):
        value = document.get(key)
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            overrides[attribute] = value
    return base.merged(overrides)


def _restore_casing(framework: str, package_name: str, display_name: Any) -> tuple[str, str]:
    if not isinstance(display_name, str):
        return framework, package_name
    split_at = len(framework)
    if (
        len(display_name) == split_at + 1 + len(package_name)
        and display_name[split_at] == "."
        and display_name.lower() == f"{framework}.{package_name}".lower()
    ):
        return display_name[:split_at], display_name[split_at + 1:]
    return framework, package_name


__all__ = [
    "build_manifest",
    "ensure_manifest",
    "fields_from_manifest",
    "load_manifest_if_exists",
    "managed_values",
    "render_manifest",
    "write_manifest",
]
