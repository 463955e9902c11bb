"""
Filesystem Collaborator.

Thin synchronous layer over the OS used by FilePath and PathResolver for
existence checks and single-level directory creation. All paths arrive
already encoded by ``to_native`` (bytes on POSIX, str on Windows).
"""

# Standard Imports
import logging
import os
from typing import Protocol

# Internal Imports
from ..paths.constants import LOGGER_NAME
from ..paths.normalizer import NativePath, from_native

logger = logging.getLogger(LOGGER_NAME)


class FilesystemProtocol(Protocol):
    """
    Structural contract for existence predicates and directory creation.

    Decouples path logic from the real OS so tests can inject fakes.
    """

    def is_dir(self, native: NativePath) -> bool: ...

    def is_file(self, native: NativePath) -> bool: ...

    def make_dir(self, native: NativePath) -> bool: ...


class LocalFilesystem:
    """Filesystem collaborator backed by the ``os`` module."""

    def is_dir(self, native: NativePath) -> bool:
        return os.path.isdir(native)

    def is_file(self, native: NativePath) -> bool:
        return os.path.isfile(native)

    def make_dir(self, native: NativePath) -> bool:
        """
        Creates exactly one directory level.

        Returns:
            True if the directory was created, False on any OS error
            (including an already existing entry).
        """
        try:
            os.mkdir(native)
        except OSError as e:
            logger.debug(f" » mkdir failed for {from_native(native)}: {e}")
            return False
        return True
