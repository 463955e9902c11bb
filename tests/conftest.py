"""
Pytest Configuration and Shared Fixtures for the pathforge Test Suite.

This module provides reusable fakes for the OS collaborators so path
resolution can be tested without touching the real machine:
- FakeFilesystem: in-memory directory/file sets with optional denials
- FakePlatform: canned special-folder answers with call counting
- resolver: PathResolver wired to both fakes

Fixtures are automatically discovered by pytest across all test modules.
"""

# Standard Imports
import os
from typing import Dict, Iterable, List, Optional

# Third-Party Imports
import pytest

# Internal Imports
from pathforge.core import POSIX, PathResolver, ResolverConfig


def _key(native) -> str:
    """Flavor-independent lookup key: '/' separators, no trailing separator."""
    text = os.fsdecode(native) if isinstance(native, bytes) else native
    text = text.replace("\\", "/")
    return text.rstrip("/") or "/"


class FakeFilesystem:
    """In-memory FilesystemProtocol implementation."""

    def __init__(
        self,
        dirs: Iterable[str] = (),
        files: Iterable[str] = (),
        deny: Iterable[str] = (),
    ):
        self.dirs = {_key(d) for d in dirs}
        self.files = {_key(f) for f in files}
        self.deny = {_key(d) for d in deny}
        self.created: List[str] = []
        self.queries: List[str] = []

    def is_dir(self, native) -> bool:
        self.queries.append(_key(native))
        return _key(native) in self.dirs

    def is_file(self, native) -> bool:
        return _key(native) in self.files

    def make_dir(self, native) -> bool:
        key = _key(native)
        if key in self.deny or key in self.dirs or key in self.files:
            return False
        self.dirs.add(key)
        self.created.append(key)
        return True


class FakePlatform:
    """PlatformProtocol implementation returning fixed answers."""

    def __init__(
        self,
        settings: Optional[str] = "/home/user/.config",
        data: Optional[str] = "/home/user/.local/share",
        cache: Optional[str] = "/home/user/.cache",
        program: Optional[str] = "/opt/game/bin/game",
    ):
        self.roots = {"settings": settings, "data": data, "cache": cache}
        self.program = program
        self.calls: Dict[str, int] = {"settings": 0, "data": 0, "cache": 0, "program": 0}

    def _under(self, kind: str, app_name: str) -> Optional[str]:
        self.calls[kind] += 1
        root = self.roots[kind]
        return None if root is None else f"{root}/{app_name}"

    def user_settings_dir(self, app_name: str) -> Optional[str]:
        return self._under("settings", app_name)

    def user_data_dir(self, app_name: str) -> Optional[str]:
        return self._under("data", app_name)

    def user_cache_dir(self, app_name: str) -> Optional[str]:
        return self._under("cache", app_name)

    def program_path(self) -> Optional[str]:
        self.calls["program"] += 1
        return self.program


@pytest.fixture(autouse=True)
def _no_assets_env(monkeypatch):
    """Keep a developer's PATHFORGE_ASSETS from leaking into config defaults."""
    monkeypatch.delenv("PATHFORGE_ASSETS", raising=False)


@pytest.fixture
def fake_fs():
    """Empty in-memory filesystem."""
    return FakeFilesystem()


@pytest.fixture
def fake_platform():
    """Platform answering Linux-style folders for every query."""
    return FakePlatform()


@pytest.fixture
def resolver_config():
    """Resolver settings for a fictional 'testgame' application."""
    return ResolverConfig(app_name="testgame")


@pytest.fixture
def resolver(resolver_config, fake_platform, fake_fs):
    """PathResolver wired to the fakes with POSIX separators."""
    return PathResolver(
        config=resolver_config,
        platform=fake_platform,
        filesystem=fake_fs,
        flavor=POSIX,
    )


@pytest.fixture
def fs_factory():
    """FakeFilesystem class, for tests that need pre-populated trees."""
    return FakeFilesystem


@pytest.fixture
def platform_factory():
    """FakePlatform class, for tests that need custom answers."""
    return FakePlatform
