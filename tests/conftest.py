# File: tests/conftest.py

import os
import sys

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Import Settings
from jarpack.core.config.settings import settings


@pytest.fixture(scope="function", autouse=True)
def fast_settings(monkeypatch):
    """
    Runs before EVERY test.
    No sleeping in the simulated registry, sequential validation by default.
    """
    monkeypatch.setattr(settings, "SIMULATED_DELAY", 0.0)
    monkeypatch.setattr(settings, "WORKERS", 1)
    monkeypatch.setattr(settings, "SRC_DIR", "src")
    monkeypatch.setattr(settings, "CONFIG_FILE", "jarpack.json")
    yield


@pytest.fixture
def make_tree(tmp_path):
    """
    Builds a source tree under tmp_path/<root_name> from {relative_path: content}.
    Bytes are written raw (useful for undecodable files).
    """
    def _make(files, root_name="src"):
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make
