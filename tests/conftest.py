"""Shared fixtures for DazzleFind tests."""

import os
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


def _can_symlink(base: Path) -> bool:
    target = base / ".symlink-probe-target"
    link = base / ".symlink-probe-link"
    target.write_text("")
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError):
        return False
    finally:
        target.unlink()
    link.unlink()
    return True


@pytest.fixture
def user_tree(tmp_path, monkeypatch):
    """Build a small tree with symlinks and make ``work`` the cwd.

    Structure:
        home/user/
        ├── files/
        │   ├── _a, _b, _c
        │   ├── file.html
        │   └── file.md
        ├── other-folder/
        │   └── files -> home/user/files
        ├── symbolic-files/
        │   ├── file.html -> home/user/files/file.html
        │   └── file.json
        └── symbolic-folder -> home/user/files
        work/                       (current working directory)
        ├── file.csv
        ├── file.html -> home/user/files/file.html
        ├── file.yml
        └── files -> home/user/files
    """
    if not _can_symlink(tmp_path):
        pytest.skip("symbolic links are not available on this platform")

    user = tmp_path / "home" / "user"
    files = user / "files"
    files.mkdir(parents=True)
    for name in ("file.md", "file.html", "_a", "_b", "_c"):
        (files / name).write_text("")

    (user / "other-folder").mkdir()
    os.symlink(files, user / "other-folder" / "files", target_is_directory=True)

    (user / "symbolic-files").mkdir()
    (user / "symbolic-files" / "file.json").write_text("")
    os.symlink(files / "file.html", user / "symbolic-files" / "file.html")

    os.symlink(files, user / "symbolic-folder", target_is_directory=True)

    work = tmp_path / "work"
    work.mkdir()
    os.symlink(files / "file.html", work / "file.html")
    (work / "file.csv").write_text("")
    (work / "file.yml").write_text("")
    os.symlink(files, work / "files", target_is_directory=True)

    monkeypatch.chdir(work)

    return SimpleNamespace(
        root=tmp_path,
        user=str(user),
        files=str(files),
        work=str(work),
        path=lambda *parts: os.path.join(str(tmp_path), *parts),
        cwd=lambda *parts: os.path.join(str(work), *parts),
    )


@pytest.fixture
def plain_tree(tmp_path, monkeypatch):
    """Symlink-free tree used where links are not the point of the test.

    Structure:
        files/
        ├── file.html
        └── file.md
        empty/
        readme.txt
    """
    files = tmp_path / "files"
    files.mkdir()
    (files / "file.html").write_text("")
    (files / "file.md").write_text("")
    (tmp_path / "empty").mkdir()
    (tmp_path / "readme.txt").write_text("")

    monkeypatch.chdir(tmp_path)

    return SimpleNamespace(
        root=str(tmp_path),
        files=str(files),
        path=lambda *parts: os.path.join(str(tmp_path), *parts),
    )


@pytest.fixture
def deleted_cwd(tmp_path, monkeypatch):
    """Make a directory that has since been removed the working directory.

    Returns a SimpleNamespace whose ``target`` is an intact directory,
    reachable by absolute path only, holding a single file ``a.txt``.
    """
    target = tmp_path / "target"
    target.mkdir()
    (target / "a.txt").write_text("")

    gone = tmp_path / "gone"
    gone.mkdir()
    monkeypatch.chdir(gone)
    try:
        gone.rmdir()
    except OSError:
        pytest.skip("the working directory cannot be removed on this platform")

    return SimpleNamespace(target=str(target), match=str(target / "a.txt"))
