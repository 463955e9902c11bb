"""
Directory Creation Operations.

``mkdir`` creates a single level and treats an existing directory as success;
``mkpath`` walks the path from root to leaf like ``mkdir -p``. Neither raises:
failures are reported as False and partially created chains are left in place.
"""

# Standard Imports
import logging
from typing import Optional

# Internal Imports
from ..environment import FilesystemProtocol, LocalFilesystem
from .constants import LOGGER_NAME
from .file_path import FilePath, PathSource

logger = logging.getLogger(LOGGER_NAME)


def mkdir(path: PathSource, filesystem: Optional[FilesystemProtocol] = None) -> bool:
    """
    Creates exactly one directory level.

    Args:
        path: Directory to create.
        filesystem: OS collaborator (default: LocalFilesystem).

    Returns:
        True if the directory was created or already existed, False otherwise.
    """
    fs = filesystem or LocalFilesystem()
    target = FilePath(path)
    if target.empty():
        return False

    native = target.native_path()
    if fs.make_dir(native):
        logger.debug(f" » Directory created: {target}")
        return True
    return fs.is_dir(native)


def mkpath(path: PathSource, filesystem: Optional[FilesystemProtocol] = None) -> bool:
    """
    Creates every missing directory level along ``path``.

    Each prefix ending at a path element is passed to :func:`mkdir`, from the
    root towards the leaf. The walk stops at the first level that cannot be
    created.

    Returns:
        True when the whole chain exists afterwards, False on the first failure.
    """
    fs = filesystem or LocalFilesystem()
    target = FilePath(path)
    if target.empty():
        return False

    elements = target.elements()
    for depth in range(1, len(elements) + 1):
        if not elements[depth - 1]:
            # Root marker or doubled/trailing separator: nothing to create
            continue
        level = target.subpath(0, depth)
        if not mkdir(level, fs):
            logger.warning(f" » Could not create directory level: {level}")
            return False
    return True
