"""
Configuration Package Initialization.

Provides the validated settings consumed by the path resolver.
"""

from .resolver_config import ResolverConfig

__all__ = ["ResolverConfig"]
