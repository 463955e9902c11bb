"""
Core Utilities Package

This package exposes the essential components of pathforge: the FilePath
value type, the PathResolver with its OS collaborators, configuration,
YAML persistence, logging and the command-line interface.
"""

# Constants, Path Value & Resolution
# (imported first: every other subpackage depends on paths.constants)
from .paths import (
    END,
    LOGGER_NAME,
    NATIVE_FLAVOR,
    POSIX,
    WINDOWS,
    FilePath,
    PathFlavor,
    PathResolver,
    mkdir,
    mkpath,
)

# Command Line Interface
from .cli import parse_args

# Configuration
from .config import ResolverConfig

# Environment & OS Collaborators
from .environment import FilesystemProtocol, LocalFilesystem, LocalPlatform, PlatformProtocol

# Input/Output Utilities
from .io import load_config_from_yaml, save_config_as_yaml

# Logging
from .logger import Logger

# Public Interface
__all__ = [
    # Configuration
    "ResolverConfig",
    # Constants & Paths
    "LOGGER_NAME",
    "END",
    "FilePath",
    "PathFlavor",
    "POSIX",
    "WINDOWS",
    "NATIVE_FLAVOR",
    "PathResolver",
    "mkdir",
    "mkpath",
    # Environment
    "FilesystemProtocol",
    "LocalFilesystem",
    "PlatformProtocol",
    "LocalPlatform",
    # Logging
    "Logger",
    # I/O
    "save_config_as_yaml",
    "load_config_from_yaml",
    # CLI
    "parse_args",
]
