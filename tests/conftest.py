import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'listops'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from helpers.cache_utils import reset_listops_caches


@pytest.fixture(autouse=True)
def _isolated_listops_env(monkeypatch):
    """Fresh caches and no LISTOPS_* overrides leaking in from the developer shell."""
    for key in list(os.environ):
        if key.startswith("LISTOPS_"):
            monkeypatch.delenv(key, raising=False)
    reset_listops_caches()
    yield
    reset_listops_caches()


@pytest.fixture
def ops():
    """ListOps bound to the bundled defaults."""
    from listops import ListOps

    return ListOps()


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""
    def _write(content: str, name: str = "listops.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
