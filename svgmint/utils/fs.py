"""File-system helpers for the batch driver and blueprints."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def walk_files(directory: str) -> list[str]:
    """Every regular file below ``directory``, recursively."""
    found: list[str] = []
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            found.append(os.path.join(root, name))
    return found


def write_text(path: str, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories as needed."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.debug("Wrote %s", path)
