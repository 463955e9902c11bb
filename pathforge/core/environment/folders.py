"""
Special Folder & Program Location Discovery.

Platform collaborator answering the per-user settings, data and cache folder
queries and the location of the running program.

Usually these paths are:
    settings  *nix : ~/.config/APP/          ($XDG_CONFIG_HOME)
              OSX  : ~/Library/Application Support/APP/
              WIN  : %APPDATA%\\APP\\
    data      *nix : ~/.local/share/APP/     ($XDG_DATA_HOME)
              OSX  : ~/Library/Application Support/APP/data/
              WIN  : %APPDATA%\\APP\\data\\
    cache     *nix : ~/.cache/APP/           ($XDG_CACHE_HOME)
              OSX  : ~/Library/Application Support/APP/cache/
              WIN  : %LOCALAPPDATA%\\APP\\
"""

# Standard Imports
import logging
import os
import platform
import sys
from pathlib import Path
from typing import Optional, Protocol

# Third-Party Imports
import psutil

# Internal Imports
from ..paths.constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class PlatformProtocol(Protocol):
    """
    Structural contract for special-folder providers.

    Every query returns the OS path as text, or None when it cannot be
    determined.
    """

    def user_settings_dir(self, app_name: str) -> Optional[str]: ...

    def user_data_dir(self, app_name: str) -> Optional[str]: ...

    def user_cache_dir(self, app_name: str) -> Optional[str]: ...

    def program_path(self) -> Optional[str]: ...


class LocalPlatform:
    """
    Special folders of the machine the interpreter runs on.

    Args:
        system: Platform family override ("Linux", "Darwin", "Windows").
            Defaults to ``platform.system()``.
    """

    def __init__(self, system: Optional[str] = None):
        self.system = system or platform.system()

    # ------------------------------------------------------------------ #

    def user_settings_dir(self, app_name: str) -> Optional[str]:
        if self.system == "Windows":
            return self._under_env("APPDATA", app_name)
        if self.system == "Darwin":
            return self._under_app_support(app_name)
        return self._under_xdg("XDG_CONFIG_HOME", (".config",), app_name)

    def user_data_dir(self, app_name: str) -> Optional[str]:
        if self.system == "Windows":
            return self._under_env("APPDATA", app_name, "data")
        if self.system == "Darwin":
            return self._under_app_support(app_name, "data")
        return self._under_xdg("XDG_DATA_HOME", (".local", "share"), app_name)

    def user_cache_dir(self, app_name: str) -> Optional[str]:
        if self.system == "Windows":
            return self._under_env("LOCALAPPDATA", app_name)
        if self.system == "Darwin":
            return self._under_app_support(app_name, "cache")
        return self._under_xdg("XDG_CACHE_HOME", (".cache",), app_name)

    def program_path(self) -> Optional[str]:
        """
        Full path to the running program.

        Frozen bundles report their executable; scripts report the ``__main__``
        file; everything else falls back to the interpreter binary.
        """
        if getattr(sys, "frozen", False):
            return sys.executable or None

        main_file = getattr(sys.modules.get("__main__"), "__file__", None)
        if main_file and os.path.isfile(main_file):
            return os.path.abspath(main_file)

        try:
            return psutil.Process().exe() or None
        except psutil.Error as e:
            logger.debug(f" » Program path query failed: {e}")
            return None

    # ------------------------------------------------------------------ #
    #                          Internal Helpers                          #
    # ------------------------------------------------------------------ #

    @staticmethod
    def _home() -> Optional[Path]:
        try:
            return Path.home()
        except (KeyError, RuntimeError) as e:
            logger.debug(f" » Home directory lookup failed: {e}")
            return None

    def _under_env(self, var: str, *parts: str) -> Optional[str]:
        root = os.environ.get(var)
        if not root:
            return None
        return str(Path(root).joinpath(*parts))

    def _under_app_support(self, *parts: str) -> Optional[str]:
        home = self._home()
        if home is None:
            return None
        return str(home.joinpath("Library", "Application Support", *parts))

    def _under_xdg(self, var: str, fallback: tuple, app_name: str) -> Optional[str]:
        root = os.environ.get(var)
        if root and os.path.isabs(root):
            return str(Path(root) / app_name)
        home = self._home()
        if home is None:
            return None
        return str(home.joinpath(*fallback, app_name))
