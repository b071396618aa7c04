"""Test setup for generate_summary."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


TreeFactory = Callable[[dict[str, str | None]], Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Create files under ``tmp_path / "src"`` from a ``{relative path: content}`` map.

    A ``None`` value creates an empty directory instead of a file.
    """

    def _make(files: dict[str, str | None]) -> Path:
        root = tmp_path / "src"
        root.mkdir(exist_ok=True)
        for relative, content in files.items():
            path = root / relative
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
                continue
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def guide_tree(make_tree: TreeFactory) -> Path:
    """Root README plus a ``guide/`` chapter with one page."""
    return make_tree(
        {
            "README.md": "# Intro\n",
            "guide/README.md": "# Guide\n",
            "guide/install.md": "# Install\n",
        }
    )
