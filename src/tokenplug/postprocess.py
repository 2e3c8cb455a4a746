"""
Stylesheet post-processing.

The Sass output of the token pipeline contains the raw base palette as a
map entry (``"colorbase...": (...)``). Consumers should only see the
semantic tokens, so after a build the entry is cut out of the generated
file. An entry starts on a line whose stripped text begins with the quoted
group name and ends on the line where its parentheses balance.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .core.errors import BuildError

logger = logging.getLogger(__name__)

DEFAULT_GROUP = "colorbase"


def strip_token_group(text: str, group: str = DEFAULT_GROUP) -> str:
    """Remove every block whose declaration starts with ``"<group>``.

    All other lines, blank lines included, are kept unchanged.
    """
    marker = f'"{group}'
    kept: list[str] = []
    in_block = False
    depth = 0

    for line in text.split("\n"):
        if not in_block and line.strip().startswith(marker):
            in_block = True
            depth = 0

        if in_block:
            depth += line.count("(") - line.count(")")
            if depth <= 0:
                in_block = False
            continue

        kept.append(line)

    return "\n".join(kept)


def strip_stylesheet(path: Path, group: str = DEFAULT_GROUP) -> bool:
    """Strip ``group`` blocks from a stylesheet in place.

    Returns:
        True if the file changed.

    Raises:
        BuildError: If the file cannot be read or written.
    """
    try:
        original = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Cannot read stylesheet {path}: {e}") from e

    stripped = strip_token_group(original, group)
    if stripped == original:
        logger.info("No '%s' blocks in %s", group, path)
        return False

    try:
        path.write_text(stripped, encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Cannot write stylesheet {path}: {e}") from e
    logger.info("Removed '%s' blocks from %s", group, path)
    return True
