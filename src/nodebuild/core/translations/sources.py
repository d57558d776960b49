"""Translation source loading.

The file extension selects the parser. Key order is preserved as encountered.
"""

import json
import tomllib
from pathlib import Path
from typing import Any

import yaml

from nodebuild.core.errors import TranslationSourceError

SUPPORTED_SOURCE_EXTENSIONS = (".json", ".yaml", ".yml", ".toml")


def _parse(path: Path, text: str) -> Any:
    suffix = path.suffix.lower()
    if suffix == ".json":
        return json.loads(text)
    if suffix in (".yaml", ".yml"):
        return yaml.safe_load(text)
    if suffix == ".toml":
        return tomllib.loads(text)
    raise TranslationSourceError(
        path,
        f"unsupported extension '{path.suffix}' "
        f"(expected one of {', '.join(SUPPORTED_SOURCE_EXTENSIONS)})",
    )


def _check_json_compatible(path: Path, value: Any, location: str) -> None:
    """Reject values that would not survive a JSON round trip unchanged."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TranslationSourceError(
                    path, f"non-string key {key!r} at {location} (keys must be strings)"
                )
            _check_json_compatible(path, item, f"{location}.{key}")
    elif isinstance(value, list):
        for index, item in enumerate(value):
            _check_json_compatible(path, item, f"{location}[{index}]")
    elif value is not None and not isinstance(value, (str, int, float, bool)):
        raise TranslationSourceError(
            path, f"unsupported value of type {type(value).__name__} at {location}"
        )


def load_translation_source(path: Path) -> dict[str, Any]:
    """Load one translation source file as a mapping.

    Only JSON-representable data is accepted: string keys, and dict, list,
    str, int, float, bool or null values. YAML or TOML dates and non-string
    YAML keys are rejected.

    Args:
        path: Translation source file (.json, .yaml, .yml or .toml)

    Returns:
        The parsed top-level mapping

    Raises:
        TranslationSourceError: If the file is not valid UTF-8, cannot be
            parsed, has a non-mapping top level, or holds data JSON cannot
            represent
    """
    try:
        data = _parse(path, path.read_text(encoding="utf-8"))
    except (
        UnicodeDecodeError,
        json.JSONDecodeError,
        yaml.YAMLError,
        tomllib.TOMLDecodeError,
    ) as e:
        raise TranslationSourceError(path, f"parse error ({e})") from e

    if not isinstance(data, dict):
        raise TranslationSourceError(path, "top level must be a mapping")
    _check_json_compatible(path, data, "$")
    return data
