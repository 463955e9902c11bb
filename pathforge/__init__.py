"""
pathforge: Cross-platform path values and special-directory resolution.

Exposes the FilePath value type together with the PathResolver used to
locate per-user directories, the running program and the assets tree.
"""

from .core import FilePath, PathResolver, ResolverConfig

__version__ = "0.1.0"

__all__ = ["FilePath", "PathResolver", "ResolverConfig", "__version__"]
