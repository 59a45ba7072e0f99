"""Tests for manifest creation, merging and reading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from packgen.artifacts.manifest import (
    build_manifest,
    ensure_manifest,
    fields_from_manifest,
    load_manifest_if_exists,
    render_manifest,
    write_manifest,
)
from packgen.config import ManifestConfig
from packgen.errors import MalformedManifest
from packgen.models import Outcome, PackageFields


def test_build_manifest_creates_managed_keys_in_order(fields: PackageFields) -> None:
    document = build_manifest(fields)

    assert list(document) == ["name", "displayName", "version", "author", "description", "unity"]
    assert document["name"] == "com.acme.core.widgets"
    assert document["displayName"] == "Core.Widgets"
    assert document["version"] == "1.2.0"
    assert document["author"] == "J. Doe"
    assert document["description"] == "Widget toolkit"
    assert document["unity"] == "2023.1"


def test_build_manifest_preserves_unknown_keys_and_positions(fields: PackageFields) -> None:
    existing = {
        "name": "com.old.old.old",
        "custom": "value",
        "dependencies": {"com.acme.core.base": "1.0.0"},
        "version": "0.0.1",
    }

    document = build_manifest(fields, existing)

    assert document["custom"] == "value"
    assert document["dependencies"] == {"com.acme.core.base": "1.0.0"}
    assert list(document)[:4] == ["name", "custom", "dependencies", "version"]
    assert document["name"] == "com.acme.core.widgets"
    assert existing["name"] == "com.old.old.old"


def test_build_manifest_honours_platform_key(fields: PackageFields) -> None:
    document = build_manifest(fields, platform_key="engine")

    assert document["engine"] == "2023.1"
    assert "unity" not in document


def test_render_manifest_is_indented_with_trailing_newline(fields: PackageFields) -> None:
    text = render_manifest(build_manifest(fields))

    assert text.startswith('{\n  "name": "com.acme.core.widgets",\n')
    assert text.endswith("}\n")


def test_load_manifest_returns_none_when_missing(tmp_path: Path) -> None:
    assert load_manifest_if_exists(tmp_path / "package.json") is None


@pytest.mark.parametrize("content", ["{not json", "", '["a", "b"]'])
def test_load_manifest_rejects_malformed_content(tmp_path: Path, content: str) -> None:
    path = tmp_path / "package.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(MalformedManifest) as excinfo:
        load_manifest_if_exists(path)

    assert excinfo.value.path == path
    assert "package.json" in str(excinfo.value)


def test_ensure_manifest_creates_then_updates(tmp_path: Path, fields: PackageFields) -> None:
    path = tmp_path / "package.json"

    assert ensure_manifest(path, fields) is Outcome.CREATED
    first = path.read_text(encoding="utf-8")
    assert ensure_manifest(path, fields) is Outcome.UPDATED
    second = path.read_text(encoding="utf-8")

    assert first == second


def test_ensure_manifest_keeps_custom_field(tmp_path: Path, fields: PackageFields) -> None:
    path = tmp_path / "package.json"
    path.write_text(
        json.dumps({"name": "com.a.b.c", "custom": "value", "unity": "2019.4"}),
        encoding="utf-8",
    )

    ensure_manifest(path, fields)
    data = json.loads(path.read_text(encoding="utf-8"))

    assert data["custom"] == "value"
    assert data["unity"] == "2023.1"
    assert data["name"] == "com.acme.core.widgets"


def test_write_manifest_uses_configured_indent(tmp_path: Path, fields: PackageFields) -> None:
    path = tmp_path / "package.json"

    write_manifest(path, fields, settings=ManifestConfig(indent=4))

    assert '\n    "name"' in path.read_text(encoding="utf-8")


def test_fields_from_manifest_splits_name(fields: PackageFields) -> None:
    document = build_manifest(fields)

    loaded = fields_from_manifest(document, PackageFields.defaults())

    assert loaded.company == "acme"
    assert loaded.framework == "Core"
    assert loaded.package_name == "Widgets"
    assert loaded.author == "J. Doe"
    assert loaded.version == "1.2.0"
    assert loaded.description == "Widget toolkit"
    assert loaded.platform_version == "2023.1"


def test_fields_from_manifest_keeps_base_for_missing_keys() -> None:
    base = PackageFields.defaults()

    loaded = fields_from_manifest({"name": "com.acme.core.widgets"}, base)

    assert loaded.package_name == "widgets"
    assert loaded.author == base.author
    assert loaded.platform_version == base.platform_version


def test_fields_from_manifest_keeps_extra_name_segments() -> None:
    loaded = fields_from_manifest({"name": "com.acme.core.widgets.extra"}, PackageFields.defaults())

    assert loaded.package_name == "widgets.extra"


@pytest.mark.parametrize("name", [None, 42, ["com", "acme"]])
def test_fields_from_manifest_rejects_non_string_names(name: object) -> None:
    with pytest.raises(MalformedManifest):
        fields_from_manifest({"name": name}, PackageFields.defaults())


@pytest.mark.parametrize("name", ["com.unity.textmeshpro", "com.acme", "com..core.widgets"])
def test_fields_from_manifest_keeps_base_identifiers_for_short_names(name: str) -> None:
    base = PackageFields.defaults()

    loaded = fields_from_manifest({"name": name, "author": "Someone"}, base)

    assert loaded.company == base.company
    assert loaded.framework == base.framework
    assert loaded.package_name == base.package_name
    assert loaded.author == "Someone"


def test_fields_from_manifest_restores_casing_from_display_name(fields: PackageFields) -> None:
    loaded = fields_from_manifest(build_manifest(fields), PackageFields.defaults())

    assert loaded.framework == "Core"
    assert loaded.package_name == "Widgets"
    assert loaded.display_name == "Core.Widgets"
    assert loaded.manifest_name == "com.acme.core.widgets"


def test_fields_from_manifest_ignores_unrelated_display_name() -> None:
    document = {"name": "com.acme.core.widgets", "displayName": "Widget Toolkit"}

    loaded = fields_from_manifest(document, PackageFields.defaults())

    assert loaded.framework == "core"
    assert loaded.package_name == "widgets"


def test_load_manifest_accepts_byte_order_mark(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(b"\xef\xbb\xbf" + b'{"name": "com.a.b.c", "custom": 1}')

    assert load_manifest_if_exists(path) == {"name": "com.a.b.c", "custom": 1}


def test_load_manifest_rejects_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_bytes(b'{"name": "com.a.b.c", "author": "Jos\xe9"}')

    with pytest.raises(MalformedManifest) as excinfo:
        load_manifest_if_exists(path)

    assert excinfo.value.path == path
    assert "UTF-8" in str(excinfo.value)
