"""Shared test fixtures for locscan tests."""

import errno
import os
from pathlib import Path

import pytest

from locscan.scanning import CommentMarkers


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep ~/.locscan.toml and LOCSCAN_* variables out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(Path, "home", staticmethod(lambda: home))
    for key in list(os.environ):
        if key.startswith("LOCSCAN_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def ruby_markers():
    """Ruby markers: # lines, =begin/=end blocks."""
    return CommentMarkers(line_markers=("#",), block_start="=begin", block_end="=end")


@pytest.fixture
def c_markers():
    """C-style markers: // lines, /* */ blocks."""
    return CommentMarkers(line_markers=("//",), block_start="/*", block_end="*/")


@pytest.fixture
def hash_markers():
    """Line comments only."""
    return CommentMarkers(line_markers=("#",))


@pytest.fixture
def write_tree(tmp_path):
    """Write {relative path: content} under tmp_path and return the root."""

    def _write(files):
        for name, content in files.items():
            p = tmp_path / name
            p.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                p.write_bytes(content)
            else:
                p.write_text(content, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def ruby_project(write_tree):
    """A small Ruby tree with a spec/ directory and a non-Ruby file."""
    return write_tree(
        {
            "lib/app.rb": "# App\nclass App\n\n  def run; end\nend\n",
            "lib/util.rb": "=begin\ndocs\n=end\nputs 1\n",
            "main.rb": "require 'app'\n",
            "spec/app_spec.rb": "describe App do\nend\n",
            "README.md": "# readme\n",
        }
    )


@pytest.fixture
def deny_listing(monkeypatch):
    """Make os.scandir fail with EACCES for the directories passed in."""
    blocked = set()
    real_scandir = os.scandir

    def scandir(path="."):
        if Path(os.fspath(path)) in blocked:
            raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)

    def _deny(*paths):
        blocked.update(Path(p) for p in paths)

    return _deny
