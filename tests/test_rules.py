from __future__ import annotations

import os
import posixpath
from pathlib import PurePosixPath

import pytest

from crosspath.rules import HOST_RULES, POSIX_RULES, WIN32_RULES, PathRules
from crosspath.schema import ParsedPath

posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX host behaviour")


def test_flavour_constants() -> None:
    assert (POSIX_RULES.sep, POSIX_RULES.delimiter) == ("/", ":")
    assert (WIN32_RULES.sep, WIN32_RULES.delimiter) == ("\\", ";")
    assert HOST_RULES.sep == os.sep
    assert repr(WIN32_RULES) == "PathRules('win32')"


@pytest.mark.parametrize(
    ("segments", "expected"),
    [
        (("a", "b", "../c"), "a/c"),
        (("/a", "/b"), "/a/b"),
        (("a/", "b/"), "a/b/"),
        (("", "a", ""), "a"),
        ((), "."),
        (("/", "usr", "bin"), "/usr/bin"),
        (("/", "/a"), "/a"),
        (("//", "a"), "/a"),
        (("", ""), "."),
    ],
)
def test_posix_join(segments: tuple, expected: str) -> None:
    assert POSIX_RULES.join(*segments) == expected


def test_join_rejects_non_string_segment() -> None:
    with pytest.raises(TypeError, match=r"paths\[1\]"):
        POSIX_RULES.join("a", 5)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("/foo/bar//baz/asdf/quux/..", "/foo/bar/baz/asdf"),
        ("a/b/", "a/b/"),
        ("a/../", "./"),
        ("", "."),
        ("./foo", "foo"),
        ("//a/b", "/a/b"),
        ("//", "/"),
    ],
)
def test_posix_normalize(raw: str, expected: str) -> None:
    assert POSIX_RULES.normalize(raw) == expected


def test_win32_normalize_uses_backslashes() -> None:
    assert WIN32_RULES.normalize("C:/a/../b") == "C:\\b"
    assert WIN32_RULES.normalize("C:\\a\\b\\") == "C:\\a\\b\\"


def test_win32_join_does_not_build_unc_prefix_from_root_segment() -> None:
    assert WIN32_RULES.join("\\", "a") == "\\a"
    assert WIN32_RULES.join("/", "\\a", "b") == "\\a\\b"
    assert WIN32_RULES.join("C:\\", "\\a") == "C:\\a"
    assert WIN32_RULES.join("\\\\server\\share", "x") == "\\\\server\\share\\x"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("/a/b/", "/a"), ("/a/b", "/a"), ("a", "."), ("/", "/"), ("", "."), ("./a", ".")],
)
def test_posix_dirname(raw: str, expected: str) -> None:
    assert POSIX_RULES.dirname(raw) == expected


def test_win32_dirname() -> None:
    assert WIN32_RULES.dirname("C:\\a\\b") == "C:\\a"
    assert WIN32_RULES.dirname("C:\\") == "C:\\"


def test_basename_ignores_trailing_separator_and_strips_suffix() -> None:
    assert POSIX_RULES.basename("/a/b/") == "b"
    assert POSIX_RULES.basename("/a/b.html", ".html") == "b"
    assert POSIX_RULES.basename("/a/.html", ".html") == ".html"
    assert POSIX_RULES.basename("a.js", "a.js") == "a.js"
    assert POSIX_RULES.basename("/") == ""
    assert WIN32_RULES.basename("C:\\dir\\file.txt") == "file.txt"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("index.html", ".html"), ("index.coffee.md", ".md"), ("index.", "."), ("index", ""), (".index", ""), ("a/b.c/", ".c")],
)
def test_extname(raw: str, expected: str) -> None:
    assert POSIX_RULES.extname(raw) == expected


def test_posix_parse() -> None:
    assert POSIX_RULES.parse("/home/user/dir/file.txt") == ParsedPath(
        root="/", dir="/home/user/dir", base="file.txt", ext=".txt", name="file"
    )
    assert POSIX_RULES.parse("/") == ParsedPath(root="/", dir="/")
    assert POSIX_RULES.parse("file") == ParsedPath(base="file", name="file")
    assert POSIX_RULES.parse("") == ParsedPath()


def test_win32_parse() -> None:
    assert WIN32_RULES.parse("C:\\path\\dir\\file.txt") == ParsedPath(
        root="C:\\", dir="C:\\path\\dir", base="file.txt", ext=".txt", name="file"
    )


def test_format_accepts_mappings_and_models() -> None:
    assert POSIX_RULES.format({"root": "/", "dir": "/home/user/dir", "base": "file.txt"}) == "/home/user/dir/file.txt"
    assert POSIX_RULES.format({"root": "/", "base": "file.txt"}) == "/file.txt"
    assert POSIX_RULES.format(ParsedPath(name="file", ext=".txt")) == "file.txt"
    assert WIN32_RULES.format({"dir": "C:\\path", "base": "file.txt"}) == "C:\\path\\file.txt"


@pytest.mark.parametrize(
    ("rules", "raw", "expected"),
    [
        (POSIX_RULES, "/a", True),
        (POSIX_RULES, "a", False),
        (POSIX_RULES, "", False),
        (POSIX_RULES, "C:/a", False),
        (WIN32_RULES, "C:\\a", True),
        (WIN32_RULES, "C:/a", True),
        (WIN32_RULES, "C:a", False),
        (WIN32_RULES, "\\\\server\\share", True),
        (WIN32_RULES, "/a", True),
        (WIN32_RULES, "a\\b", False),
    ],
)
def test_is_absolute(rules: PathRules, raw: str, expected: bool) -> None:
    assert rules.is_absolute(raw) is expected


def test_to_namespaced_path() -> None:
    assert POSIX_RULES.to_namespaced_path("/a/b") == "/a/b"
    assert WIN32_RULES.to_namespaced_path("C:\\a\\b") == "\\\\?\\C:\\a\\b"
    assert WIN32_RULES.to_namespaced_path("\\\\server\\share\\x") == "\\\\?\\UNC\\server\\share\\x"
    assert WIN32_RULES.to_namespaced_path("a\\b") == "a\\b"
    assert WIN32_RULES.to_namespaced_path("") == ""


@posix_only
def test_resolve_and_relative_on_posix(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert POSIX_RULES.resolve("/a", "b", "../c") == "/a/c"
    assert POSIX_RULES.resolve("/a/b/") == "/a/b"
    assert POSIX_RULES.resolve("x") == posixpath.join(os.getcwd(), "x")
    assert POSIX_RULES.resolve() == os.getcwd()
    assert POSIX_RULES.relative("/data/orandea/test/aaa", "/data/orandea/impl/bbb") == "../../impl/bbb"
    assert POSIX_RULES.relative("/a", "/a/") == ""


def test_path_like_arguments() -> None:
    assert POSIX_RULES.normalize(PurePosixPath("a/./b")) == "a/b"
    with pytest.raises(TypeError):
        POSIX_RULES.normalize(b"a/b")  # type: ignore[arg-type]
