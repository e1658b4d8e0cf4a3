"""blitzdoc configuration — BlitzMax paths and parameter type sigils."""

from blitzdoc.config.paths import (
    BLITZMAX_PATH_ENV,
    CATALOG_RELATIVE_PATH,
    MAKEDOCS_RELATIVE_PATH,
    catalog_path,
    get_blitzmax_root,
    makedocs_path,
)
from blitzdoc.config.types import DEFAULT_PARAM_TYPE, SIGIL_TYPES, is_sigil, type_for_sigil

__all__ = [
    "BLITZMAX_PATH_ENV",
    "CATALOG_RELATIVE_PATH",
    "DEFAULT_PARAM_TYPE",
    "MAKEDOCS_RELATIVE_PATH",
    "SIGIL_TYPES",
    "catalog_path",
    "get_blitzmax_root",
    "is_sigil",
    "makedocs_path",
    "type_for_sigil",
]
