"""Test setup for scenetree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample scenes and golden outputs."""
    return FIXTURES


@pytest.fixture
def sample_scene() -> str:
    """A Godot 4 scene with resources, nesting to depth 3 and connections."""
    return (FIXTURES / "sample.tscn").read_text(encoding="utf-8")


@pytest.fixture
def sample_golden() -> str:
    """Expected default rendering of ``sample.tscn``."""
    return (FIXTURES / "sample.golden.txt").read_text(encoding="utf-8")
