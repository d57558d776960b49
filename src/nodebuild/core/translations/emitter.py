"""Generated translation file rendering and emission.

Generated files are a single CommonJS export of a 2-space indented JSON literal.
"""

import json
from pathlib import Path
from typing import Any

from nodebuild.core.output import OutputWriter

EXPORT_PREFIX = "module.exports = "


def render_module(data: Any) -> str:
    """Render data as a ``module.exports`` assignment.

    Keys keep their insertion order and non-ASCII text is written as-is.
    """
    return EXPORT_PREFIX + json.dumps(data, indent=2, ensure_ascii=False)


def write_destination_file(writer: OutputWriter, destination_path: Path, data: Any) -> None:
    """Render data and write it to destination_path.

    The write has completed when this returns; failures propagate.
    """
    writer.write_text(destination_path, render_module(data))


def parse_module(content: str) -> Any:
    """Parse the data back out of rendered module text.

    Raises:
        ValueError: If content is not a rendered ``module.exports`` assignment
    """
    if not content.startswith(EXPORT_PREFIX):
        raise ValueError(f"Generated file must start with {EXPORT_PREFIX.strip()!r}")
    return json.loads(content[len(EXPORT_PREFIX) :])


def read_destination_file(path: Path) -> Any:
    """Read a generated file back into the data it was rendered from."""
    return parse_module(path.read_text(encoding="utf-8"))
