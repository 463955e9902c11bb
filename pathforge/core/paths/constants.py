"""
Project-wide Path Constants.

Single source of truth for the names and defaults shared by the path value
type, the resolver and the ambient logging/configuration layers.
"""

# Standard Imports
from typing import Final, Optional, Tuple

# GLOBAL CONSTANTS

# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "pathforge"

# Default application folder name under the per-user special folders
DEFAULT_APP_NAME: Final[str] = "pathforge"

# Name of the bundled resources directory searched by the assets probe
DEFAULT_ASSETS_DIR_NAME: Final[str] = "assets"

# Environment override for the assets base (e.g. packaged or Docker layouts)
ASSETS_ENV_VAR: Final[str] = "PATHFORGE_ASSETS"

# Sentinel for "through the last element" in FilePath.subpath()
END: Final[Optional[int]] = None

# Characters rejected by FilePath.is_valid() on drive-letter flavors
WINDOWS_RESERVED_CHARS: Final[Tuple[str, ...]] = ("<", ">", '"', "|", "?", "*")
