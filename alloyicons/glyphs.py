from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List


@dataclass(frozen=True)
class GlyphRecord:
    name: str
    unicode: str


def glyph_from_metadata(item: dict) -> GlyphRecord:
    metadata = item.get("metadata") if isinstance(item, dict) else None
    if not isinstance(metadata, dict):
        raise ValueError(f"Glyph record without metadata: {item!r}")
    name = metadata.get("name")
    unicode = metadata.get("unicode")
    if not isinstance(name, str) or not name:
        raise ValueError(f"Glyph record without a name: {item!r}")
    if not isinstance(unicode, list) or not unicode or not isinstance(unicode[0], str) or not unicode[0]:
        raise ValueError(f"Glyph '{name}' has no unicode value")
    return GlyphRecord(name, unicode[0])


def glyphs_from_metadata(items: Iterable[dict]) -> List[GlyphRecord]:
    return [glyph_from_metadata(item) for item in items]


def load_glyphs(path: Path) -> List[GlyphRecord]:
    if not path.exists():
        raise FileNotFoundError(f"Glyph metadata not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path}: glyph metadata must be a JSON array")
    return glyphs_from_metadata(data)


def dump_glyph_metadata(glyphs: Iterable[GlyphRecord]) -> List[dict]:
    return [{"metadata": {"name": g.name, "unicode": [g.unicode]}} for g in glyphs]
