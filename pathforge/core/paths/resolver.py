"""
Special-Path Resolution and Assets Discovery.

The PathResolver owns the resolve-once cache for the per-user special folders,
the running program's path and the assets base directory. It is meant to be
built once at startup and handed to whoever needs those locations; tests build
fresh instances with fake collaborators.

Every slot is consulted at most once per resolver. Failures are cached too (as
an empty FilePath), so a missing assets tree is not searched for again even if
it appears later on disk.

Slots are written without locking: concurrent first lookups may both run the
(idempotent) query and the last write wins. Warm the resolver during startup
when it is shared between threads.
"""

# Standard Imports
import logging
from typing import Callable, Dict, List, Optional

# Internal Imports
from ..config import ResolverConfig
from ..environment import FilesystemProtocol, LocalFilesystem, LocalPlatform, PlatformProtocol
from .constants import LOGGER_NAME
from .file_path import FilePath, PathSource
from .normalizer import NATIVE_FLAVOR, PathFlavor
from .operations import mkdir, mkpath

logger = logging.getLogger(LOGGER_NAME)


class PathResolver:
    """
    Memoizing resolver for special folders and assets.

    Args:
        config: Application naming and assets settings (default: ResolverConfig()).
        platform: Special-folder provider (default: LocalPlatform()).
        filesystem: Existence/creation collaborator (default: LocalFilesystem()).
        flavor: Separator convention of the produced paths (default: native).

    Example:
        >>> resolver = PathResolver(ResolverConfig(app_name="mygame"))
        >>> shader = resolver.asset_path("shaders/basic.vert")
        >>> settings = resolver.user_settings_path() / "settings.yaml"
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        platform: Optional[PlatformProtocol] = None,
        filesystem: Optional[FilesystemProtocol] = None,
        flavor: Optional[PathFlavor] = None,
    ):
        self.config = config or ResolverConfig()
        self.platform = platform or LocalPlatform()
        self.filesystem = filesystem or LocalFilesystem()
        self.flavor = flavor or NATIVE_FLAVOR

        # Resolve-once slots: None = not queried yet, empty FilePath = failed
        self._settings: Optional[FilePath] = None
        self._user_data: Optional[FilePath] = None
        self._cache: Optional[FilePath] = None
        self._program: Optional[FilePath] = None
        self._assets_base: Optional[FilePath] = None

        if self.config.assets_base:
            self.set_assets_base_path(self.config.assets_base)

    # ------------------------------------------------------------------ #
    #                         Special Folders                            #
    # ------------------------------------------------------------------ #

    def user_settings_path(self) -> FilePath:
        """Per-user settings folder (trailing separator). Empty if unknown."""
        return self._resolve_slot("_settings", "user settings", self.platform.user_settings_dir)

    def user_data_path(self) -> FilePath:
        """Per-user persistent data folder (trailing separator). Empty if unknown."""
        return self._resolve_slot("_user_data", "user data", self.platform.user_data_dir)

    def user_cache_path(self) -> FilePath:
        """Per-user cache folder (trailing separator). Empty if unknown."""
        return self._resolve_slot("_cache", "user cache", self.platform.user_cache_dir)

    def program_path(self) -> FilePath:
        """Full path of the running program. Empty if it cannot be determined."""
        if self._program is None:
            raw = self._query("program path", self.platform.program_path)
            self._program = FilePath(raw or "", flavor=self.flavor)
            self._log_slot("program path", self._program)
        return self._program.copy()

    def _resolve_slot(
        self, slot: str, label: str, query: Callable[[str], Optional[str]]
    ) -> FilePath:
        cached = getattr(self, slot)
        if cached is None:
            raw = self._query(label, query, self.config.app_name)
            cached = self._as_directory(raw or "")
            setattr(self, slot, cached)
            self._log_slot(label, cached)
        return cached.copy()

    @staticmethod
    def _query(label: str, query: Callable[..., Optional[str]], *args: str) -> Optional[str]:
        try:
            return query(*args)
        except OSError as e:
            logger.debug(f" » {label} query failed: {e}")
            return None

    @staticmethod
    def _log_slot(label: str, value: FilePath) -> None:
        if value.empty():
            logger.warning(f" » Could not resolve {label} path.")
        else:
            logger.info(f" » Resolved {label} path: {value}")

    def _as_directory(self, source: PathSource) -> FilePath:
        path = FilePath(source, flavor=self.flavor)
        if path and not path.to_string().endswith(self.flavor.separator):
            path.join_in_place("")
        return path

    # ------------------------------------------------------------------ #
    #                         Assets Discovery                           #
    # ------------------------------------------------------------------ #

    def asset_candidates(self) -> List[FilePath]:
        """
        Ordered list of directories probed for the assets base.

        - ./assets/
        - PROGRAM_DIR/assets/
        - PROGRAM_DIR/../assets/
        - PROGRAM_DIR/../share/assets/

        PROGRAM_DIR is the directory of :meth:`program_path`; its candidates
        are omitted when the program path is unknown.
        """
        name = self.config.assets_dir_name
        candidates = [FilePath(".", flavor=self.flavor) / name / ""]

        program_dir = self.program_path().base_path()
        if program_dir:
            candidates.extend(
                [
                    program_dir / name / "",
                    program_dir / ".." / name / "",
                    program_dir / ".." / "share" / name / "",
                ]
            )
        return candidates

    def assets_base_path(self) -> FilePath:
        """
        Base directory of the bundled assets.

        Returns the explicit or previously resolved value; otherwise probes
        :meth:`asset_candidates` in order and keeps the first existing one.
        An unsuccessful probe is cached as an empty path.
        """
        if self._assets_base is None:
            self._assets_base = self._probe_assets()
        return self._assets_base.copy()

    def _probe_assets(self) -> FilePath:
        for candidate in self.asset_candidates():
            logger.debug(f" » Probing assets directory: {candidate}")
            if candidate.dir_exists(self.filesystem):
                logger.info(f" » Assets base resolved: {candidate}")
                return candidate

        logger.warning(" » No assets directory found; asset paths will be unrooted.")
        return FilePath(flavor=self.flavor)

    def set_assets_base_path(self, path: PathSource) -> None:
        """Sets the assets base explicitly, bypassing (and ending) probing."""
        self._assets_base = self._as_directory(path)
        logger.debug(f" » Assets base set explicitly: {self._assets_base}")

    def asset_path(self, asset: PathSource) -> FilePath:
        """
        Full path to an asset, e.g. ``asset_path("shaders/foo.vert")``.

        The identifier is directory-joined onto :meth:`assets_base_path`,
        which is resolved first if needed.
        """
        return self.assets_base_path().join_in_place(asset)

    # ------------------------------------------------------------------ #
    #                     Creation & Introspection                       #
    # ------------------------------------------------------------------ #

    def mkdir(self, path: PathSource) -> bool:
        """Single-level creation through this resolver's filesystem."""
        return mkdir(FilePath(path, flavor=self.flavor), self.filesystem)

    def mkpath(self, path: PathSource) -> bool:
        """Recursive creation through this resolver's filesystem."""
        return mkpath(FilePath(path, flavor=self.flavor), self.filesystem)

    def setup_user_directories(self) -> Dict[str, bool]:
        """
        Ensures the per-user settings, data and cache folders exist.

        Folders that could not be resolved are reported as False.
        """
        status: Dict[str, bool] = {}
        for key, path in (
            ("settings", self.user_settings_path()),
            ("data", self.user_data_path()),
            ("cache", self.user_cache_path()),
        ):
            status[key] = bool(path) and self.mkpath(path)
        return status

    def report(self) -> Dict[str, str]:
        """Snapshot of every slot as text (resolving the ones still pending)."""
        return {
            "app_name": self.config.app_name,
            "settings": self.user_settings_path().to_string(),
            "data": self.user_data_path().to_string(),
            "cache": self.user_cache_path().to_string(),
            "program": self.program_path().to_string(),
            "assets": self.assets_base_path().to_string(),
        }

    def __repr__(self) -> str:
        return f"PathResolver(app_name='{self.config.app_name}', flavor={self.flavor!r})"
