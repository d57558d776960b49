"""Tests for translation source loading."""

from pathlib import Path

import pytest

from nodebuild.core.errors import TranslationSourceError
from nodebuild.core.translations.sources import load_translation_source

EXPECTED = {"NodeA": {"header": {"displayName": "Knoten A", "description": "Beschreibung"}}}


def test_loads_json(tmp_path: Path) -> None:
    path = tmp_path / "de.json"
    path.write_text(
        '{"NodeA": {"header": {"displayName": "Knoten A", "description": "Beschreibung"}}}',
        encoding="utf-8",
    )

    assert load_translation_source(path) == EXPECTED


def test_loads_yaml(tmp_path: Path) -> None:
    path = tmp_path / "de.yaml"
    path.write_text(
        "NodeA:\n  header:\n    displayName: Knoten A\n    description: Beschreibung\n",
        encoding="utf-8",
    )

    assert load_translation_source(path) == EXPECTED


def test_loads_toml(tmp_path: Path) -> None:
    path = tmp_path / "de.toml"
    path.write_text(
        '[NodeA.header]\ndisplayName = "Knoten A"\ndescription = "Beschreibung"\n',
        encoding="utf-8",
    )

    assert load_translation_source(path) == EXPECTED


def test_preserves_key_order(tmp_path: Path) -> None:
    path = tmp_path / "de.json"
    path.write_text('{"NodeA": {"zeta": 1, "alpha": 2, "mid": 3}}', encoding="utf-8")

    assert list(load_translation_source(path)["NodeA"]) == ["zeta", "alpha", "mid"]


def test_parse_error_raises(tmp_path: Path) -> None:
    path = tmp_path / "de.json"
    path.write_text("{broken", encoding="utf-8")

    with pytest.raises(TranslationSourceError, match="parse error"):
        load_translation_source(path)


def test_non_mapping_top_level_raises(tmp_path: Path) -> None:
    path = tmp_path / "de.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(TranslationSourceError, match="must be a mapping"):
        load_translation_source(path)


def test_unsupported_extension_raises(tmp_path: Path) -> None:
    path = tmp_path / "de.ts"
    path.write_text("export default {}", encoding="utf-8")

    with pytest.raises(TranslationSourceError, match="unsupported extension"):
        load_translation_source(path)


def test_invalid_utf8_raises_with_path(tmp_path: Path) -> None:
    path = tmp_path / "de.json"
    path.write_bytes(b'{"NodeA": {"x": "\xff\xfe"}}')

    with pytest.raises(TranslationSourceError, match="parse error") as exc_info:
        load_translation_source(path)
    assert exc_info.value.source_path == path


# ============================================================================
# Data that JSON cannot represent
# ============================================================================


def test_yaml_date_value_raises(tmp_path: Path) -> None:
    path = tmp_path / "de.yaml"
    path.write_text(
        "NodeA:\n  header:\n    displayName: A\n  updated: 2024-01-01\n", encoding="utf-8"
    )

    with pytest.raises(TranslationSourceError, match=r"type date at \$\.NodeA\.updated"):
        load_translation_source(path)


def test_toml_date_value_raises(tmp_path: Path) -> None:
    path = tmp_path / "de.toml"
    path.write_text(
        '[NodeA]\nupdated = 2024-01-01\n[NodeA.header]\ndisplayName = "A"\n',
        encoding="utf-8",
    )

    with pytest.raises(TranslationSourceError, match="type date"):
        load_translation_source(path)


def test_yaml_int_key_raises(tmp_path: Path) -> None:
    path = tmp_path / "de.yaml"
    path.write_text("NodeA:\n  options:\n    1: one\n", encoding="utf-8")

    with pytest.raises(TranslationSourceError, match="non-string key 1"):
        load_translation_source(path)


def test_nested_list_values_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "de.yaml"
    path.write_text(
        "NodeA:\n  options:\n    - name: x\n      value: 1.5\n    - null\n    - true\n",
        encoding="utf-8",
    )

    assert load_translation_source(path) == {
        "NodeA": {"options": [{"name": "x", "value": 1.5}, None, True]}
    }
