"""
Logging Management Module

Configures the shared ``pathforge`` logger: console output on stdout, plus a
rotating log file once a log directory is known. The CLI passes either the
``--log_dir`` option or ``<user cache folder>/logs`` as resolved by the
PathResolver, so log files live with the rest of the per-user state.

The log directory is a FilePath and is created with ``mkpath`` through a
filesystem collaborator. When it cannot be created or opened, logging stays
console-only and a warning says so; logging setup never aborts a command.
"""

# Standard Imports
import logging
import os
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Dict, Final, List, Optional

# Internal Imports
from ..environment import FilesystemProtocol
from ..paths import LOGGER_NAME, FilePath, PathSource, mkpath

_FORMAT: Final[str] = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


# LOGGER CLASS
class Logger:
    """
    Console and rotating-file setup for a named logger.

    A name is (re)configured when it is new, when its level changes, or when a
    log directory is supplied; otherwise the existing handlers are kept so
    repeated construction never duplicates output.

    Args:
        name: Logger identifier (default: LOGGER_NAME).
        level: Numeric logging level.
        log_dir: Directory receiving ``<name>_<UTC timestamp>.log``.
        filesystem: Collaborator used to create ``log_dir`` (default: local).
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files kept next to the active one.

    Example:
        >>> resolver = PathResolver(ResolverConfig(app_name="mygame"))
        >>> log = Logger.setup(log_dir=resolver.user_cache_path() / "logs")
        >>> Logger.get_log_file()
        FilePath('/home/me/.cache/mygame/logs/pathforge_20260101_120000.log')
    """

    # name -> level it was last configured with
    _configured: Final[Dict[str, int]] = {}
    _active_log_file: Optional[FilePath] = None

    def __init__(
        self,
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        log_dir: Optional[PathSource] = None,
        filesystem: Optional[FilesystemProtocol] = None,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 5,
    ):
        self.name = name
        self.level = level
        self.log_dir = FilePath(log_dir) if log_dir else None
        self.filesystem = filesystem
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.logger = logging.getLogger(name)

        if Logger._configured.get(name) != level or self.log_dir is not None:
            self._configure()
            Logger._configured[name] = level

    def _configure(self) -> None:
        self.logger.setLevel(self.level)
        self.logger.propagate = False

        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)

        formatter = logging.Formatter(_FORMAT, _DATE_FORMAT)
        handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        file_handler = self._file_handler() if self.log_dir is not None else None
        if file_handler is not None:
            handlers.append(file_handler)

        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        if self.log_dir is not None and file_handler is None:
            self.logger.warning(f" » Log directory unusable, console only: {self.log_dir}")

    def _file_handler(self) -> Optional[RotatingFileHandler]:
        """Opens the session log file, or returns None if the directory is unusable."""
        Logger._active_log_file = None
        if not mkpath(self.log_dir, self.filesystem):
            return None

        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        log_file = self.log_dir.join(f"{self.name}_{timestamp}.log")
        try:
            handler = RotatingFileHandler(
                os.fspath(log_file),
                maxBytes=self.max_bytes,
                backupCount=self.backup_count,
                encoding="utf-8",
            )
        except OSError:
            return None

        Logger._active_log_file = log_file
        return handler

    def get_logger(self) -> logging.Logger:
        return self.logger

    @classmethod
    def get_log_file(cls) -> Optional[FilePath]:
        """Active log file, or None while logging is console-only."""
        return cls._active_log_file.copy() if cls._active_log_file else None

    @classmethod
    def setup(
        cls,
        name: str = LOGGER_NAME,
        level: str = "INFO",
        log_dir: Optional[PathSource] = None,
        **kwargs,
    ) -> logging.Logger:
        """
        Entry point used by the CLI; bridges level names to logging constants.

        Environment Variables:
            DEBUG: "1" forces the DEBUG level regardless of ``level``.
        """
        if os.getenv("DEBUG") == "1":
            numeric_level = logging.DEBUG
        else:
            numeric_level = getattr(logging, level.upper(), logging.INFO)

        return cls(name=name, level=numeric_level, log_dir=log_dir, **kwargs).get_logger()
