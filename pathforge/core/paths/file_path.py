"""
FilePath Value Type.

OS-agnostic path stored as normalized text. Construction from any text-like
source runs the normalizer; copying from another FilePath does not, since the
source is already normalized.

Two combination operations are provided and deliberately kept apart:

    * concat / ``+``  -> raw text append (suffixes, extensions)
    * join / ``/``    -> new path element, exactly one separator in between

Example:
    >>> p = FilePath("./assets") / "foo" / "bar" / "mesh.obj"
    >>> p.subpath(2)
    FilePath('/foo/bar/mesh.obj')
    >>> (p.base_path() + "mesh.mtl").file_extension()
    'mtl'
"""

# Standard Imports
import os
from typing import IO, List, Optional, Union

# Internal Imports
from ..environment import FilesystemProtocol, LocalFilesystem
from .constants import END
from .normalizer import (
    NATIVE_FLAVOR,
    NativePath,
    PathFlavor,
    has_drive,
    is_valid,
    normalize,
    to_generic,
    to_native,
)

PathSource = Union["FilePath", str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def _coerce_text(source: PathSource, pos: int, count: Optional[int]) -> str:
    """Extracts the ``[pos, pos+count)`` slice of a text-like source as ``str``."""
    if isinstance(source, os.PathLike):
        source = os.fspath(source)

    if isinstance(source, (bytes, bytearray)):
        raw = bytes(source)
        chunk = raw[pos:] if count is None else raw[pos:pos + count]
        return chunk.decode("utf-8", "surrogateescape")

    if isinstance(source, str):
        return source[pos:] if count is None else source[pos:pos + count]

    raise TypeError(f"Cannot build a FilePath from {type(source).__name__}")


# FILEPATH CLASS
class FilePath:
    """
    Normalized, mutable path value.

    Attributes:
        flavor (PathFlavor): Separator convention the text is normalized to.

    Equality compares the stored text only. Instances are mutable through the
    ``*_in_place`` methods and the augmented operators, so they are not hashable.
    """

    __slots__ = ("_text", "flavor")
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        source: PathSource = "",
        pos: int = 0,
        count: Optional[int] = None,
        *,
        flavor: Optional[PathFlavor] = None,
    ):
        """
        Builds a path from text, bytes, an ``os.PathLike`` or another FilePath.

        Args:
            source: Path source. Defaults to the empty path.
            pos: Start of the slice taken from ``source``.
            count: Length of the slice (None = to the end).
            flavor: Separator convention (default: source flavor or native).
        """
        self.flavor = flavor or NATIVE_FLAVOR
        self._text = ""
        self.assign(source, pos, count, flavor=flavor)

    # ------------------------------------------------------------------ #
    #                          Construction                              #
    # ------------------------------------------------------------------ #

    def assign(
        self,
        source: PathSource,
        pos: int = 0,
        count: Optional[int] = None,
        *,
        flavor: Optional[PathFlavor] = None,
    ) -> "FilePath":
        """
        Replaces the stored path in place.

        Assigning a full FilePath of the same flavor copies its text as is;
        every other source is normalized.
        """
        if isinstance(source, FilePath):
            self.flavor = flavor or source.flavor
            if pos == 0 and count is None and self.flavor == source.flavor:
                self._text = source._text
                return self
            source = source._text
        elif flavor is not None:
            self.flavor = flavor

        self._text = normalize(_coerce_text(source, pos, count), self.flavor)
        return self

    def _operand(self, other: PathSource) -> "FilePath":
        if isinstance(other, FilePath) and other.flavor == self.flavor:
            return other
        return FilePath(other, flavor=self.flavor)

    def copy(self) -> "FilePath":
        """Returns an independent copy (no re-normalization)."""
        return FilePath(self)

    def normalize(self) -> "FilePath":
        """Re-runs the normalizer over the stored text."""
        self._text = normalize(self._text, self.flavor)
        return self

    # ------------------------------------------------------------------ #
    #                     Concatenation & Joining                        #
    # ------------------------------------------------------------------ #

    def concat_in_place(self, other: PathSource) -> "FilePath":
        """Appends ``other`` verbatim; the caller owns separator adjacency."""
        self._text = normalize(self._text + self._operand(other)._text, self.flavor)
        return self

    def join_in_place(self, other: PathSource) -> "FilePath":
        """
        Appends ``other`` as a new path element.

        Exactly one separator ends up between both parts: one is inserted when
        neither side supplies it, and leading separators of ``other`` are
        dropped when the left side already ends with one. An empty left side
        yields ``separator + other`` unless ``other`` is empty or already
        starts with a separator.
        """
        sep = self.flavor.separator
        rhs = self._operand(other)._text

        if not self._text:
            self._text = rhs if (not rhs or rhs.startswith(sep)) else sep + rhs
        elif self._text.endswith(sep):
            self._text = self._text + rhs.lstrip(sep)
        else:
            self._text = self._text + sep + rhs.lstrip(sep)

        self._text = normalize(self._text, self.flavor)
        return self

    def concat(self, other: PathSource) -> "FilePath":
        """Non-mutating :meth:`concat_in_place`."""
        return self.copy().concat_in_place(other)

    def join(self, other: PathSource) -> "FilePath":
        """Non-mutating :meth:`join_in_place`."""
        return self.copy().join_in_place(other)

    def __add__(self, other: PathSource) -> "FilePath":
        try:
            return self.concat(other)
        except TypeError:
            return NotImplemented

    def __radd__(self, other: PathSource) -> "FilePath":
        try:
            return FilePath(other, flavor=self.flavor).concat_in_place(self)
        except TypeError:
            return NotImplemented

    def __iadd__(self, other: PathSource) -> "FilePath":
        return self.concat_in_place(other)

    def __truediv__(self, other: PathSource) -> "FilePath":
        try:
            return self.join(other)
        except TypeError:
            return NotImplemented

    def __rtruediv__(self, other: PathSource) -> "FilePath":
        try:
            return FilePath(other, flavor=self.flavor).join_in_place(self)
        except TypeError:
            return NotImplemented

    def __itruediv__(self, other: PathSource) -> "FilePath":
        return self.join_in_place(other)

    # ------------------------------------------------------------------ #
    #                    Decomposition & Queries                         #
    # ------------------------------------------------------------------ #

    def elements(self) -> List[str]:
        """Separator-delimited elements (``"/a/b/"`` -> ``["", "a", "b", ""]``)."""
        if not self._text:
            return []
        return self._text.split(self.flavor.separator)

    def file_name(self) -> str:
        """Text after the last separator; empty for directories and empty paths."""
        return self._text[self._text.rfind(self.flavor.separator) + 1:]

    def file_extension(self) -> str:
        """Text after the last dot of the filename; empty when there is none."""
        name = self.file_name()
        dot = name.rfind(".")
        if dot < 0:
            return ""
        return name[dot + 1:]

    def base_path(self) -> "FilePath":
        """
        Directory containing the last path element, with trailing separator.

        For a file this is its directory; for a directory (trailing separator)
        it is the parent, like ``cd ..``. The root maps to itself (a bare drive
        ``C:`` gives ``C:\\``). Empty or invalid paths, and paths without any
        separator, give an empty path.
        """
        if not self.is_valid():
            return FilePath(flavor=self.flavor)

        sep = self.flavor.separator
        stripped = self._text.rstrip(sep)
        if not stripped or (self.flavor.drive_letters and len(stripped) == 2
                            and has_drive(stripped)):
            # Root ("/", "C:" or "C:\") maps to the root with its separator
            return FilePath(stripped + sep, flavor=self.flavor)

        cut = stripped.rfind(sep)
        if cut < 0:
            return FilePath(flavor=self.flavor)
        return FilePath(self._text, 0, cut + 1, flavor=self.flavor)

    def is_absolute(self) -> bool:
        """True when the native absolute marker is present."""
        sep = self.flavor.separator
        if self.flavor.drive_letters:
            if has_drive(self._text) and self._text[2:3] == sep:
                return True
            return self._text.startswith(sep * 2)
        return self._text.startswith(sep)

    def subpath(self, begin: int, end: Optional[int] = END) -> "FilePath":
        """
        Slice of path elements ``[begin, end)``.

        The separator in front of ``begin`` is kept when the slice starts
        mid-path, and the one after ``end - 1`` is kept when it stops early.

        Example:
            >>> f = FilePath("./assets/foo/bar/mesh.obj")
            >>> f.subpath(2).to_string()
            '/foo/bar/mesh.obj'
            >>> f.subpath(0, 2).to_string()
            './assets/'
        """
        sep = self.flavor.separator
        seps = [i for i, ch in enumerate(self._text) if ch == sep]
        n_elements = len(seps) + 1 if self._text else 0

        if begin < 0 or begin >= n_elements:
            return FilePath(flavor=self.flavor)
        if end is not None and end <= begin:
            return FilePath(flavor=self.flavor)

        start = 0 if begin == 0 else seps[begin - 1]
        if end is None or end - 1 >= len(seps):
            stop = len(self._text)
        else:
            stop = seps[end - 1] + 1

        return FilePath(self._text, start, stop - start, flavor=self.flavor)

    def subpath_from(self, needle: str, include: bool = False) -> "FilePath":
        """
        Everything after the first element equal to ``needle``.

        With ``include`` the matching element is part of the result. Empty when
        ``needle`` does not appear as a whole element.
        """
        try:
            index = self.elements().index(needle)
        except ValueError:
            return FilePath(flavor=self.flavor)
        return self.subpath(index if include else index + 1)

    def is_valid(self) -> bool:
        """Whether the text is a plausible path for the flavor (no FS access)."""
        return is_valid(self._text, self.flavor)

    def empty(self) -> bool:
        return not self._text

    # ------------------------------------------------------------------ #
    #                      Filesystem Delegation                         #
    # ------------------------------------------------------------------ #

    def native_path(self) -> NativePath:
        """Re-normalized path in the encoding the OS layer expects."""
        return to_native(self._text, self.flavor)

    def dir_exists(self, filesystem: Optional[FilesystemProtocol] = None) -> bool:
        fs = filesystem or LocalFilesystem()
        return bool(self._text) and fs.is_dir(self.native_path())

    def file_exists(self, filesystem: Optional[FilesystemProtocol] = None) -> bool:
        fs = filesystem or LocalFilesystem()
        return bool(self._text) and fs.is_file(self.native_path())

    # ------------------------------------------------------------------ #
    #                          Representation                            #
    # ------------------------------------------------------------------ #

    def to_string(self) -> str:
        """Stored text, verbatim."""
        return self._text

    def to_generic_string(self) -> str:
        """Stored text with ``/`` separators regardless of flavor."""
        return to_generic(self._text)

    def write_to(self, stream: IO[str]) -> None:
        """Writes :meth:`to_string` to a text stream."""
        stream.write(self._text)

    @classmethod
    def read_from(cls, stream: IO[str], *, flavor: Optional[PathFlavor] = None) -> "FilePath":
        """
        Reads one whitespace-delimited token from a text stream.

        Leading whitespace is skipped; reading stops at the first whitespace
        after the token or at end of stream. On seekable streams the delimiter
        is left unread; other streams cannot push it back, so there it is
        consumed. No quoting is supported.
        """
        seekable = stream.seekable()
        chars: List[str] = []
        while True:
            mark = stream.tell() if seekable and chars else None
            ch = stream.read(1)
            if not ch:
                break
            if ch.isspace():
                if chars:
                    if mark is not None:
                        stream.seek(mark)
                    break
                continue
            chars.append(ch)
        return cls("".join(chars), flavor=flavor)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FilePath({self._text!r})"

    def __fspath__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilePath):
            return self._text == other._text
        if isinstance(other, (str, bytes, os.PathLike)):
            try:
                return self._text == FilePath(other, flavor=self.flavor)._text
            except TypeError:
                return NotImplemented
        return NotImplemented
