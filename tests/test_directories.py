"""Tests for directory specification handling."""

import os
from pathlib import Path

import pytest

from dazzlefind._common.directories import (
    normalize_directories,
    normalize_directories_async,
    resolve_absolute,
    split_arguments,
)

BASE = os.path.abspath(os.sep + "base")


def predicate(path):
    return True


def _no_working_directory():
    raise FileNotFoundError("working directory was removed")


class TestResolveAbsolute:

    def test_relative_path(self):
        assert resolve_absolute("files", BASE) == os.path.join(BASE, "files")

    def test_dot_path(self):
        assert resolve_absolute("./", BASE) == BASE

    def test_parent_path(self):
        assert resolve_absolute("../other", BASE) == os.path.abspath(os.sep + "other")

    def test_absolute_path_ignores_cwd(self):
        target = os.path.abspath(os.sep + "elsewhere")
        assert resolve_absolute(target, BASE) == target

    def test_pathlike(self):
        assert resolve_absolute(Path("files"), BASE) == os.path.join(BASE, "files")

    def test_defaults_to_process_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_absolute("x") == os.path.join(os.getcwd(), "x")

    def test_absolute_path_skips_process_cwd(self, monkeypatch):
        monkeypatch.setattr(os, "getcwd", _no_working_directory)
        target = os.path.abspath(os.sep + "elsewhere")
        assert resolve_absolute(target) == target

    def test_rejects_bytes(self):
        with pytest.raises(TypeError):
            resolve_absolute(b"files", BASE)

    def test_rejects_non_path(self):
        with pytest.raises(TypeError):
            resolve_absolute(42, BASE)


class TestNormalizeDirectories:

    def test_none_is_cwd(self):
        assert normalize_directories(None, BASE) == [BASE]

    def test_single_string(self):
        assert normalize_directories("files", BASE) == [os.path.join(BASE, "files")]

    def test_single_pathlike(self):
        assert normalize_directories(Path("files"), BASE) == [os.path.join(BASE, "files")]

    def test_iterable_keeps_order(self):
        result = normalize_directories(["b", "a", "c"], BASE)
        assert result == [os.path.join(BASE, name) for name in ("b", "a", "c")]

    def test_duplicates_are_kept(self):
        result = normalize_directories(["a", "./a"], BASE)
        assert result == [os.path.join(BASE, "a")] * 2

    def test_empty_iterable(self):
        assert normalize_directories([], BASE) == []

    def test_generator(self):
        result = normalize_directories((name for name in ("a", "b")), BASE)
        assert result == [os.path.join(BASE, "a"), os.path.join(BASE, "b")]

    def test_custom_resolver(self):
        result = normalize_directories(["a"], BASE, lambda path, cwd: f"{cwd}|{path}")
        assert result == [f"{BASE}|a"]

    def test_absolute_paths_skip_process_cwd(self, monkeypatch):
        monkeypatch.setattr(os, "getcwd", _no_working_directory)
        assert normalize_directories([BASE, BASE]) == [BASE, BASE]
        assert normalize_directories([]) == []

    def test_none_uses_process_cwd(self, monkeypatch):
        monkeypatch.setattr(os, "getcwd", _no_working_directory)
        with pytest.raises(FileNotFoundError):
            normalize_directories(None)

    def test_rejects_non_iterable(self):
        with pytest.raises(TypeError):
            normalize_directories(42, BASE)

    def test_rejects_bad_element(self):
        with pytest.raises(TypeError):
            normalize_directories(["a", 3], BASE)


class TestNormalizeDirectoriesAsync:

    @pytest.mark.asyncio
    async def test_async_iterable(self):
        async def roots():
            yield "b"
            yield "a"

        result = await normalize_directories_async(roots(), BASE)
        assert result == [os.path.join(BASE, "b"), os.path.join(BASE, "a")]

    @pytest.mark.asyncio
    async def test_plain_spec(self):
        assert await normalize_directories_async(None, BASE) == [BASE]


class TestSplitArguments:

    def test_nothing(self):
        assert split_arguments(()) == (None, ())

    def test_only_predicates(self):
        assert split_arguments((predicate, predicate)) == (None, (predicate, predicate))

    def test_directory_first(self):
        assert split_arguments(("./", predicate)) == ("./", (predicate,))

    def test_directory_alone(self):
        assert split_arguments(("./",)) == ("./", ())

    def test_explicit_none(self):
        assert split_arguments((None, predicate)) == (None, (predicate,))

    def test_empty_list_is_directories(self):
        assert split_arguments(([],)) == ([], ())
