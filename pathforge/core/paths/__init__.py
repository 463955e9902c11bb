"""
Path Value Type and Resolution Package.

This package centralizes all path-related logic of pathforge.
It provides a layered approach:
1. Value: the normalized FilePath type and its flavors via 'file_path'/'normalizer'.
2. Creation: single-level and recursive directory creation via 'operations'.
3. Resolution: special folders and assets discovery via 'PathResolver'.
"""

# Public Interface
from .constants import (
    ASSETS_ENV_VAR,
    DEFAULT_APP_NAME,
    DEFAULT_ASSETS_DIR_NAME,
    END,
    LOGGER_NAME,
)
from .file_path import FilePath, PathSource
from .normalizer import (
    NATIVE_FLAVOR,
    POSIX,
    WINDOWS,
    PathFlavor,
    is_valid,
    normalize,
    to_generic,
    to_native,
)
from .operations import mkdir, mkpath
from .resolver import PathResolver

# Export Schema
__all__ = [
    "LOGGER_NAME",
    "DEFAULT_APP_NAME",
    "DEFAULT_ASSETS_DIR_NAME",
    "ASSETS_ENV_VAR",
    "END",
    "FilePath",
    "PathSource",
    "PathFlavor",
    "POSIX",
    "WINDOWS",
    "NATIVE_FLAVOR",
    "normalize",
    "is_valid",
    "to_generic",
    "to_native",
    "mkdir",
    "mkpath",
    "PathResolver",
]
