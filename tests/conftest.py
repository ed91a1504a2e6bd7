"""Shared pytest fixtures for sweep tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import FakeMediaInfo


@pytest.fixture
def fake_media_info() -> FakeMediaInfo:
    """Provide an empty fake collaborator."""

    return FakeMediaInfo()


@pytest.fixture
def music_root(tmp_path: Path) -> Path:
    """Create ``<tmp>/Foo`` holding empty ``a.mp3`` and ``b.flac`` files."""

    root = tmp_path / "Foo"
    root.mkdir()
    _ = (root / "a.mp3").write_bytes(b"")
    _ = (root / "b.flac").write_bytes(b"")
    return root.resolve()
