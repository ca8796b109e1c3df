"""Pytest configuration for whichcmd tests."""

import sys

import pytest


def pytest_collection_modifyitems(config, items):
    if sys.platform == "win32":
        skip = pytest.mark.skip(reason="relies on POSIX permission bits")
        for item in items:
            if "posix" in item.keywords:
                item.add_marker(skip)


def pytest_configure(config):
    config.addinivalue_line("markers", "posix: test relies on POSIX permission bits")


@pytest.fixture
def make_file(tmp_path):
    """Create a file under tmp_path with the given mode; return its path as str."""

    def _make(relpath: str, mode: int = 0o755) -> str:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("#!/bin/sh\n")
        path.chmod(mode)
        return str(path)

    return _make


@pytest.fixture
def no_pathext(monkeypatch):
    """Remove PATHEXT so the built-in Windows extension list applies."""
    monkeypatch.delenv("PATHEXT", raising=False)
