"""Package manifest loading.

The manifest is the package descriptor (package.json) whose
``<namespace>.nodes`` field lists each node's primary file.
"""

import json
import logging
from pathlib import Path

from nodebuild.core.errors import ManifestError

logger = logging.getLogger(__name__)


def load_node_registry(manifest_path: Path, namespace: str) -> list[str]:
    """Read the ordered node registry from the package descriptor.

    Args:
        manifest_path: Path to the JSON package descriptor
        namespace: Top-level field holding the ``nodes`` list (e.g. "n8n")

    Returns:
        Registry entries in manifest order, as POSIX-style relative paths

    Raises:
        ManifestError: If the descriptor is missing, unparsable, or has no
            ``<namespace>.nodes`` list of strings
    """
    if not manifest_path.exists():
        raise ManifestError(manifest_path, "file not found")

    try:
        descriptor = json.loads(manifest_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ManifestError(manifest_path, f"not valid UTF-8 ({e})") from e
    except json.JSONDecodeError as e:
        raise ManifestError(manifest_path, f"invalid JSON ({e})") from e

    if not isinstance(descriptor, dict):
        raise ManifestError(manifest_path, "top level must be an object")

    section = descriptor.get(namespace)
    if not isinstance(section, dict):
        raise ManifestError(manifest_path, f"missing '{namespace}' section")

    nodes = section.get("nodes")
    if not isinstance(nodes, list):
        raise ManifestError(manifest_path, f"missing '{namespace}.nodes' list")

    for entry in nodes:
        if not isinstance(entry, str):
            raise ManifestError(
                manifest_path, f"'{namespace}.nodes' entries must be strings, got {entry!r}"
            )

    logger.debug("Loaded %d registry entries from %s", len(nodes), manifest_path)
    return list(nodes)
