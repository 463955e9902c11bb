"""
Path Flavors and Textual Normalization.

Describes the separator conventions of the supported platform families and
implements the rewriting rules every FilePath runs through after it is built
from text:

1. Non-native separators are rewritten to the native one.
2. Drive-letter prefixes (``C:``) are stripped on flavors without drives.
3. Everything else (``.`` and ``..`` segments included) is left untouched.

``to_native`` is the single conversion point towards the OS layer.
"""

# Standard Imports
import os
import re
from dataclasses import dataclass
from typing import Final, Union

# Internal Imports
from .constants import WINDOWS_RESERVED_CHARS

NativePath = Union[str, bytes]

_DRIVE_PREFIX: Final = re.compile(r"^(?:[A-Za-z]:)+")
_CONTROL_CHARS: Final = re.compile(r"[\x00-\x1f]")


# FLAVORS
@dataclass(frozen=True)
class PathFlavor:
    """
    Separator convention of a platform family.

    Attributes:
        name: Human-readable identifier ("posix" or "windows").
        separator: Native path element delimiter.
        alt_separator: Delimiter rewritten to ``separator`` during normalization.
        drive_letters: Whether the platform understands ``X:`` drive prefixes.
    """

    name: str
    separator: str
    alt_separator: str
    drive_letters: bool

    def __repr__(self) -> str:
        return f"PathFlavor({self.name!r})"


POSIX: Final[PathFlavor] = PathFlavor(
    name="posix", separator="/", alt_separator="\\", drive_letters=False
)
WINDOWS: Final[PathFlavor] = PathFlavor(
    name="windows", separator="\\", alt_separator="/", drive_letters=True
)

NATIVE_FLAVOR: Final[PathFlavor] = WINDOWS if os.sep == "\\" else POSIX


# NORMALIZATION
def normalize(text: str, flavor: PathFlavor = NATIVE_FLAVOR) -> str:
    """
    Rewrites ``text`` into the normalized form of ``flavor``.

    Idempotent: ``normalize(normalize(t)) == normalize(t)``. Stacked drive
    prefixes such as ``C:D:`` are removed in one pass for that reason.

    Args:
        text: Raw path text.
        flavor: Target platform convention.

    Returns:
        The normalized path text.
    """
    text = text.replace(flavor.alt_separator, flavor.separator)
    if not flavor.drive_letters:
        text = _DRIVE_PREFIX.sub("", text, count=1)
    return text


def is_valid(text: str, flavor: PathFlavor = NATIVE_FLAVOR) -> bool:
    """
    Syntactic plausibility check; never touches the filesystem.

    A path is valid when it is non-empty and free of control characters.
    Drive-letter flavors additionally reject reserved characters and any
    colon outside the drive designator.
    """
    if not text or _CONTROL_CHARS.search(text):
        return False

    if flavor.drive_letters:
        if any(ch in text for ch in WINDOWS_RESERVED_CHARS):
            return False
        body = text[2:] if has_drive(text) else text
        if ":" in body:
            return False

    return True


def has_drive(text: str) -> bool:
    """True when ``text`` starts with a single ``X:`` drive designator."""
    return len(text) >= 2 and text[1] == ":" and text[0].isascii() and text[0].isalpha()


def to_generic(text: str) -> str:
    """Returns ``text`` with ``/`` as the only separator."""
    return text.replace("\\", "/")


# OS BOUNDARY
def to_native(text: str, flavor: PathFlavor = NATIVE_FLAVOR) -> NativePath:
    """
    Encodes a path for the OS collaborators.

    The text is normalized first. POSIX APIs receive UTF-8 bytes (undecodable
    input bytes survive via ``surrogateescape``); Windows APIs receive ``str``.
    """
    text = normalize(text, flavor)
    if flavor.drive_letters:
        return text
    return text.encode("utf-8", "surrogateescape")


def from_native(native: NativePath) -> str:
    """Decodes a value coming back from the OS layer into path text."""
    if isinstance(native, bytes):
        return native.decode("utf-8", "surrogateescape")
    return native
