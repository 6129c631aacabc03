"""Shared fixtures for Shredder tests."""

import io

import pytest

from shredder.debug import debug


@pytest.fixture(autouse=True)
def reset_debug():
    """Debug mode is global; make sure one test cannot leak it into another."""
    yield
    debug.enable(False)


@pytest.fixture
def make_file(tmp_path):
    """Factory for files with known content."""

    def _make(name: str = "target.bin", data: bytes = b"secret data"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make


@pytest.fixture
def stdin(monkeypatch):
    """Replace stdin with canned lines."""

    def _feed(text: str):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _feed
