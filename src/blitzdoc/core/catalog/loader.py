"""Reading the command catalog from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from blitzdoc.core.catalog.model import Command
from blitzdoc.core.parsers.line import parse_catalog

logger = logging.getLogger(__name__)

def read_catalog(path: Path) -> str:
    """Return the full UTF-8 text of the catalog at *path*.

    Raises:
        OSError: If the file is missing or cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    return path.read_text(encoding="utf-8")

def load_catalog(path: Path) -> list[Command]:
    """Read and parse the catalog at *path*.

    Errors propagate; :class:`~blitzdoc.core.catalog.index.CommandIndex`
    is the boundary where they are swallowed.
    """
    logger.info("Caching BlitzMax commands from %s", path)
    return parse_catalog(read_catalog(path))
