"""
Input/Output & Persistence Utilities.

This module manages the package's YAML interaction with the filesystem:
loading resolver configuration and writing resolution reports.
"""

# =========================================================================== #
#                                Exposed Interface                            #
# =========================================================================== #

# Configuration & Serialization (from .serialization)
from .serialization import load_config_from_yaml, save_config_as_yaml

# =========================================================================== #
#                                     Exports                                 #
# =========================================================================== #

__all__ = [
    "save_config_as_yaml",
    "load_config_from_yaml",
]
