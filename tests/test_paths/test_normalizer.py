"""
Test Suite for Path Flavors and Normalization.

Tests separator rewriting, drive-letter stripping, idempotence,
validity checks and the native encoding boundary.
"""

# Standard Imports
import os

# Third-Party Imports
import pytest

# Internal Imports
from pathforge.core.paths import NATIVE_FLAVOR, POSIX, WINDOWS, is_valid, normalize, to_generic
from pathforge.core.paths.normalizer import from_native, has_drive, to_native

SAMPLE_INPUTS = [
    "",
    "/",
    "\\",
    "a/b\\c",
    "./assets/foo/bar/mesh.obj",
    ".\\assets\\foo",
    "C:\\Users\\bob\\file.txt",
    "c:/games/data/",
    "C:D:odd",
    "../../up/and\\over",
    "//server/share",
    "\\\\server\\share",
    "no_separator",
    "Z:",
    "trailing/",
    "a//b\\\\c",
]


# FLAVORS
@pytest.mark.unit
def test_flavor_separators():
    """Test POSIX and WINDOWS flavors describe their conventions."""
    assert POSIX.separator == "/"
    assert POSIX.alt_separator == "\\"
    assert POSIX.drive_letters is False
    assert WINDOWS.separator == "\\"
    assert WINDOWS.alt_separator == "/"
    assert WINDOWS.drive_letters is True


@pytest.mark.unit
def test_native_flavor_matches_os():
    """Test NATIVE_FLAVOR follows os.sep."""
    assert NATIVE_FLAVOR.separator == os.sep


# NORMALIZE: SEPARATORS
@pytest.mark.unit
def test_normalize_posix_rewrites_backslashes():
    """Test backslashes become forward slashes on POSIX."""
    assert normalize("a\\b\\c.txt", POSIX) == "a/b/c.txt"


@pytest.mark.unit
def test_normalize_windows_rewrites_slashes():
    """Test forward slashes become backslashes on WINDOWS."""
    assert normalize("a/b/c.txt", WINDOWS) == "a\\b\\c.txt"


@pytest.mark.unit
@pytest.mark.parametrize("text", SAMPLE_INPUTS)
@pytest.mark.parametrize("flavor", [POSIX, WINDOWS])
def test_normalize_leaves_no_alt_separator(text, flavor):
    """Test no non-native separator survives normalization."""
    assert flavor.alt_separator not in normalize(text, flavor)


@pytest.mark.unit
@pytest.mark.parametrize("text", SAMPLE_INPUTS)
@pytest.mark.parametrize("flavor", [POSIX, WINDOWS])
def test_normalize_is_idempotent(text, flavor):
    """Test normalize(normalize(p)) == normalize(p)."""
    once = normalize(text, flavor)
    assert normalize(once, flavor) == once


# NORMALIZE: DRIVE LETTERS
@pytest.mark.unit
def test_normalize_posix_strips_drive():
    """Test drive prefixes are removed where drives do not exist."""
    assert normalize("C:\\Users\\bob", POSIX) == "/Users/bob"
    assert normalize("d:relative", POSIX) == "relative"


@pytest.mark.unit
def test_normalize_posix_strips_stacked_drives():
    """Test repeated drive prefixes are all removed in one pass."""
    assert normalize("C:D:odd", POSIX) == "odd"


@pytest.mark.unit
def test_normalize_windows_keeps_drive():
    """Test drive prefixes are kept on WINDOWS."""
    assert normalize("C:/Users/bob", WINDOWS) == "C:\\Users\\bob"


@pytest.mark.unit
def test_normalize_keeps_dot_segments():
    """Test '.' and '..' segments are not collapsed."""
    assert normalize("./a/../b/./c", POSIX) == "./a/../b/./c"


@pytest.mark.unit
def test_normalize_keeps_colon_inside_path():
    """Test only a leading drive prefix is stripped."""
    assert normalize("/srv/a:b", POSIX) == "/srv/a:b"


@pytest.mark.unit
def test_has_drive():
    """Test has_drive detects a leading drive designator."""
    assert has_drive("C:\\x")
    assert has_drive("z:")
    assert not has_drive("1:")
    assert not has_drive("/C:")
    assert not has_drive("C")


# VALIDITY
@pytest.mark.unit
def test_is_valid_rejects_empty_and_control_chars():
    """Test empty text and control bytes are invalid."""
    assert not is_valid("", POSIX)
    assert not is_valid("a\x00b", POSIX)
    assert not is_valid("a\nb", POSIX)
    assert is_valid("./a b/c", POSIX)


@pytest.mark.unit
def test_is_valid_windows_reserved_chars():
    """Test reserved characters and stray colons are invalid on WINDOWS."""
    assert is_valid("C:\\games\\save.dat", WINDOWS)
    assert not is_valid("C:\\what?.txt", WINDOWS)
    assert not is_valid("a<b", WINDOWS)
    assert not is_valid("C:\\a:b", WINDOWS)
    assert is_valid("what?.txt", POSIX)


# GENERIC & NATIVE
@pytest.mark.unit
def test_to_generic_uses_forward_slashes():
    """Test generic form always uses '/'."""
    assert to_generic("C:\\a\\b") == "C:/a/b"
    assert to_generic("a/b") == "a/b"


@pytest.mark.unit
def test_to_native_posix_returns_bytes():
    """Test POSIX native paths are UTF-8 bytes of the normalized text."""
    assert to_native("a\\b/é", POSIX) == "a/b/é".encode("utf-8")


@pytest.mark.unit
def test_to_native_windows_returns_str():
    """Test WINDOWS native paths are normalized str."""
    assert to_native("C:/a/b", WINDOWS) == "C:\\a\\b"


@pytest.mark.unit
def test_from_native_round_trips_undecodable_bytes():
    """Test arbitrary bytes survive decode/encode through surrogateescape."""
    raw = b"/tmp/\xff\xfe"
    assert to_native(from_native(raw), POSIX) == raw
