"""
Test Suite for FilePath Decomposition & Queries.

Tests filename/extension extraction, base path computation, absolute
detection, element slicing and needle-based sub-paths.
"""

# Third-Party Imports
import pytest

# Internal Imports
from pathforge.core.paths import END, POSIX, WINDOWS, FilePath

MESH = "./assets/foo/bar/mesh.obj"


def _p(text: str) -> FilePath:
    return FilePath(text, flavor=POSIX)


# FILE NAME
@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        (MESH, "mesh.obj"),
        ("mesh.obj", "mesh.obj"),
        ("/abs/dir/", ""),
        ("", ""),
        ("/", ""),
        ("dir/.hidden", ".hidden"),
    ],
)
def test_file_name(text, expected):
    """Test file_name() returns the text after the last separator."""
    assert _p(text).file_name() == expected


@pytest.mark.unit
def test_file_name_windows():
    """Test file_name() uses the flavor separator."""
    assert FilePath("C:\\games\\save.dat", flavor=WINDOWS).file_name() == "save.dat"


# FILE EXTENSION
@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        (MESH, "obj"),
        ("archive.tar.gz", "gz"),
        ("dir/README", ""),
        ("dir.d/README", ""),
        ("dir/", ""),
        ("", ""),
        ("trailing.", ""),
        ("dir/.bashrc", "bashrc"),
    ],
)
def test_file_extension(text, expected):
    """Test the last dot of the filename wins; directories have no extension."""
    assert _p(text).file_extension() == expected


@pytest.mark.unit
def test_file_extension_round_trip_with_concat():
    """Test appending '.ext' by raw concatenation is read back by file_extension()."""
    path = _p("backup/archive.tar") + ".gz"

    assert path.file_name() == "archive.tar.gz"
    assert path.file_extension() == "gz"


# BASE PATH
@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        (MESH, "./assets/foo/bar/"),
        ("./assets/foo/bar/", "./assets/foo/"),
        ("/usr/share/game", "/usr/share/"),
        ("/usr", "/"),
        ("/", "/"),
        ("file.txt", ""),
        ("dir/", ""),
        ("", ""),
    ],
)
def test_base_path(text, expected):
    """Test base_path() goes up one element and keeps the trailing separator."""
    assert _p(text).base_path().to_string() == expected


@pytest.mark.unit
def test_base_path_of_invalid_path_is_empty():
    """Test invalid paths have no base path."""
    assert _p("dir/bad\x01name").base_path().empty()


@pytest.mark.unit
def test_base_path_windows_root():
    """Test a Windows drive root stays the root."""
    assert FilePath("C:\\games", flavor=WINDOWS).base_path().to_string() == "C:\\"
    assert FilePath("C:\\", flavor=WINDOWS).base_path().to_string() == "C:\\"


@pytest.mark.unit
def test_base_path_bare_drive_gets_separator():
    """Test a bare drive maps to its root with a trailing separator."""
    assert FilePath("C:", flavor=WINDOWS).base_path().to_string() == "C:\\"
    assert FilePath("C:\\\\", flavor=WINDOWS).base_path().to_string() == "C:\\"
    assert FilePath("///", flavor=POSIX).base_path().to_string() == "/"


# ABSOLUTE PATHS
@pytest.mark.unit
def test_is_absolute_posix():
    """Test a leading separator marks an absolute POSIX path."""
    assert _p("/usr/bin").is_absolute()
    assert not _p("usr/bin").is_absolute()
    assert not _p("./usr").is_absolute()
    assert not _p("").is_absolute()


@pytest.mark.unit
def test_is_absolute_windows():
    """Test drive+separator and UNC prefixes mark absolute Windows paths."""
    assert FilePath("C:\\Windows", flavor=WINDOWS).is_absolute()
    assert FilePath("c:/Windows", flavor=WINDOWS).is_absolute()
    assert FilePath("\\\\server\\share", flavor=WINDOWS).is_absolute()
    assert not FilePath("C:relative", flavor=WINDOWS).is_absolute()
    assert not FilePath("\\rooted", flavor=WINDOWS).is_absolute()


@pytest.mark.unit
def test_is_absolute_after_drive_strip():
    """Test a Windows-style input becomes a POSIX absolute path."""
    assert _p("C:\\Users").is_absolute()


# SUBPATH
@pytest.mark.unit
def test_subpath_from_middle_to_end():
    """Test Subpath(2, END) keeps the leading separator."""
    assert _p(MESH).subpath(2, END).to_string() == "/foo/bar/mesh.obj"
    assert _p(MESH).subpath(2).to_string() == "/foo/bar/mesh.obj"


@pytest.mark.unit
def test_subpath_from_start():
    """Test Subpath(0, 2) keeps the trailing separator."""
    assert _p(MESH).subpath(0, 2).to_string() == "./assets/"


@pytest.mark.unit
def test_subpath_middle_slice():
    """Test a slice in the middle keeps both separators."""
    assert _p(MESH).subpath(2, 4).to_string() == "/foo/bar/"


@pytest.mark.unit
def test_subpath_whole_path():
    """Test Subpath(0) is the whole path."""
    assert _p(MESH).subpath(0).to_string() == MESH


@pytest.mark.unit
def test_subpath_last_element():
    """Test the last element alone, with its separator."""
    assert _p(MESH).subpath(4).to_string() == "/mesh.obj"


@pytest.mark.unit
def test_subpath_absolute_path():
    """Test element 0 of an absolute path is the empty root element."""
    path = _p("/usr/share/game")

    assert path.subpath(0, 1).to_string() == "/"
    assert path.subpath(1, 2).to_string() == "/usr/"


@pytest.mark.unit
@pytest.mark.parametrize("begin, end", [(5, END), (9, 10), (3, 3), (3, 1), (-1, END)])
def test_subpath_out_of_range_is_empty(begin, end):
    """Test out-of-range or inverted slices give an empty path."""
    assert _p(MESH).subpath(begin, end).empty()


@pytest.mark.unit
def test_subpath_end_past_last_element():
    """Test an end beyond the element count runs to the end."""
    assert _p(MESH).subpath(3, 99).to_string() == "/bar/mesh.obj"


@pytest.mark.unit
def test_subpath_empty_path():
    """Test slicing an empty path is empty."""
    assert _p("").subpath(0).empty()


# SUBPATH FROM
@pytest.mark.unit
def test_subpath_from_excludes_needle():
    """Test SubpathFrom('assets') starts after the needle."""
    assert _p(MESH).subpath_from("assets").to_string() == "/foo/bar/mesh.obj"


@pytest.mark.unit
def test_subpath_from_includes_needle():
    """Test SubpathFrom('assets', True) starts at the needle."""
    assert _p(MESH).subpath_from("assets", True).to_string() == "/assets/foo/bar/mesh.obj"


@pytest.mark.unit
def test_subpath_from_missing_needle():
    """Test a needle that is not a whole element gives an empty path."""
    assert _p(MESH).subpath_from("asset").empty()
    assert _p(MESH).subpath_from("missing").empty()


@pytest.mark.unit
def test_subpath_from_first_match_wins():
    """Test the first matching element is used."""
    assert _p("a/x/b/x/c").subpath_from("x").to_string() == "/b/x/c"


# ELEMENTS
@pytest.mark.unit
def test_elements():
    """Test elements() splits on the flavor separator."""
    assert _p(MESH).elements() == [".", "assets", "foo", "bar", "mesh.obj"]
    assert _p("/a/").elements() == ["", "a", ""]
    assert _p("").elements() == []


# VALIDITY
@pytest.mark.unit
def test_is_valid():
    """Test is_valid() is a syntactic check only."""
    assert _p(MESH).is_valid()
    assert _p("/does/not/exist/anywhere").is_valid()
    assert not _p("").is_valid()
    assert not _p("bad\x00path").is_valid()
