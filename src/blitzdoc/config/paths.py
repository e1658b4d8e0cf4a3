"""Location of the BlitzMax installation, its command catalog and doc builder."""

from __future__ import annotations

import os
from pathlib import Path

BLITZMAX_PATH_ENV = "BLITZMAX_PATH"

CATALOG_RELATIVE_PATH = Path("docs") / "html" / "Modules" / "commands.txt"
MAKEDOCS_RELATIVE_PATH = Path("bin") / "makedocs"

def get_blitzmax_root(value: str | Path | None = None) -> Path | None:
    """Resolve the BlitzMax root directory.

    An explicit *value* wins; otherwise the ``BLITZMAX_PATH`` environment
    variable is used.  Returns ``None`` when neither is set.  The directory
    is not required to exist.
    """
    if value:
        return Path(value).expanduser()

    env_value = os.environ.get(BLITZMAX_PATH_ENV, "").strip()
    if env_value:
        return Path(env_value).expanduser()
    return None

def catalog_path(root: Path) -> Path:
    """Return the path of ``commands.txt`` under the BlitzMax *root*."""
    return root / CATALOG_RELATIVE_PATH

def makedocs_path(root: Path) -> Path:
    """Return the path of the ``makedocs`` executable under *root*."""
    return root / MAKEDOCS_RELATIVE_PATH
