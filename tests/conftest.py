"""Shared fixtures for cmake-file-api tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests._support.reply_tree import ReplyTree, build_full_reply


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    """Return an empty build directory."""
    path = tmp_path / "build"
    path.mkdir()
    return path


@pytest.fixture
def reply_tree(build_dir: Path) -> ReplyTree:
    """Return a reply tree builder rooted at ``build_dir``."""
    return ReplyTree(build_dir)


@pytest.fixture
def full_reply(build_dir: Path) -> ReplyTree:
    """Return a written reply tree serving every supported object kind."""
    return build_full_reply(build_dir)
