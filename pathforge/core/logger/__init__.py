"""
Logging Package.

Centralizes logger initialization for the path core and its CLI.

Available Components:
    - Logger: Console and rotating-file logging initialization.
"""

from .logger import Logger

__all__ = ["Logger"]
