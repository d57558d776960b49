"""Header and translation aggregation.

Each translation source holds a single node type mapped to that node's full
translation. The ``header`` of each node is collected into one map when it
passes the allow-list check; the full source is always queued for emission.
"""

import logging
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from nodebuild.core.config import ALLOWED_HEADER_KEYS
from nodebuild.core.errors import TranslationSourceError
from nodebuild.core.translations.paths import TranslationPaths
from nodebuild.core.translations.sources import load_translation_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslationBundle:
    """Full translation of one node and the file it is written to."""

    destination_path: Path
    content: dict[str, Any]


@dataclass(frozen=True)
class AggregationResult:
    """Headers keyed by node type plus every bundle to emit, in source order."""

    headers: dict[str, dict[str, Any]] = field(default_factory=dict)
    translations: list[TranslationBundle] = field(default_factory=list)


def is_valid_header(header: object, allowed_keys: Collection[str] = ALLOWED_HEADER_KEYS) -> bool:
    """Check whether a header may be published in the aggregated header map.

    A valid header is a non-empty mapping whose keys all belong to
    allowed_keys. One unexpected key disqualifies the whole header.
    """
    if not isinstance(header, Mapping) or not header:
        return False
    return all(key in allowed_keys for key in header)


def extract_node_type(source_path: Path, translation: Mapping[str, Any]) -> str:
    """Return the single node type key of a translation source.

    Raises:
        TranslationSourceError: If the source does not have exactly one top-level key
    """
    keys = list(translation)
    if len(keys) != 1:
        raise TranslationSourceError(
            source_path,
            f"expected exactly one top-level node type, found {len(keys)}"
            + (f" ({', '.join(map(str, keys))})" if keys else ""),
        )
    return keys[0]


def aggregate_headers_and_translations(
    paths: list[TranslationPaths],
    allowed_header_keys: Collection[str] = ALLOWED_HEADER_KEYS,
) -> AggregationResult:
    """Load each translation source and collect headers and bundles.

    Args:
        paths: Resolved translation paths, in processing order
        allowed_header_keys: Keys a header may contain

    Returns:
        AggregationResult with valid headers and one bundle per source

    Raises:
        TranslationSourceError: If a source is unparsable or not single-keyed
    """
    result = AggregationResult()
    for entry in paths:
        translation = load_translation_source(entry.source)
        node_type = extract_node_type(entry.source, translation)

        node_translation = translation[node_type]
        header = node_translation.get("header") if isinstance(node_translation, Mapping) else None

        if is_valid_header(header, allowed_header_keys):
            result.headers[node_type] = dict(header)
        else:
            logger.debug("Excluding header of %s from %s", node_type, entry.source)

        result.translations.append(
            TranslationBundle(destination_path=entry.destination, content=translation)
        )

    return result
