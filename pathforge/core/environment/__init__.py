"""
Environment & OS Abstraction Layer.

This package holds the collaborators the path core consults at the OS
boundary: filesystem predicates and directory creation, and the per-user
special folders together with the running program's location.
"""

# Filesystem predicates & creation (from .filesystem)
from .filesystem import FilesystemProtocol, LocalFilesystem

# Special folders & program path (from .folders)
from .folders import LocalPlatform, PlatformProtocol

__all__ = [
    "FilesystemProtocol",
    "LocalFilesystem",
    "PlatformProtocol",
    "LocalPlatform",
]
