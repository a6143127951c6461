"""Tests that every package imports cleanly in a fresh interpreter."""

import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

MODULES = [
    "database",
    "database.decoding",
    "database.loaders",
    "database.loaders.batch",
    "database.loaders.hydration",
    "database.services",
    "database.query",
    "src.cache",
    "src.services",
    "src.main",
]


@pytest.mark.parametrize("module", MODULES)
def test_module_imports_first(module):
    # A fresh process so an earlier import cannot mask a cycle
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        cwd=ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
