"""Shared fixtures for alloyicons tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from alloyicons.glyphs import GlyphRecord
from alloyicons.manifest import CategoryRecord


SQUARE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><rect x="4" y="4" width="16" height="16"/></svg>'
CIRCLE_SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><circle cx="12" cy="12" r="8"/></svg>'
PATH_SVG = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">'
    '<path d="M2 2 L22 2 L12 20 Z"/><path d="M4 22 C8 18 16 18 20 22 Z"/></svg>'
)


@pytest.fixture
def glyphs():
    return [
        GlyphRecord("home", "\ue900"),
        GlyphRecord("settings", "\ue901"),
        GlyphRecord("arrow-left", "\ue902"),
    ]


@pytest.fixture
def categories():
    return [
        CategoryRecord("nav", ("home", "arrow-left")),
        CategoryRecord("system", ("settings", "home")),
    ]


@pytest.fixture
def svg_dir(tmp_path: Path) -> Path:
    root = tmp_path / "svgs"
    root.mkdir()
    (root / "home.svg").write_text(SQUARE_SVG, encoding="utf-8")
    (root / "settings.svg").write_text(CIRCLE_SVG, encoding="utf-8")
    nested = root / "arrows"
    nested.mkdir()
    (nested / "arrow-left.svg").write_text(PATH_SVG, encoding="utf-8")
    return root


@pytest.fixture
def write_json(tmp_path: Path):
    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
