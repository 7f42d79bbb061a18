"""Static HTML page listing every rendered glyph with its class name and code point."""

from __future__ import annotations

import html
from typing import Sequence

from .catalog import Catalog, class_name
from .glyphs import GlyphRecord


STYLE = """
    * {
      border: 0;
      margin: 0;
      padding: 0;
    }
    .icon {
      display: inline-block;
      width: 200px;
      height: 150px;
      text-align: center;
      padding: 20px;
      box-sizing: border-box;
    }
    .icon span {
      display: block;
      font-size: 50px;
      line-height: 50px;
      width: 50px;
      height: 50px;
      margin: 0 auto;
    }
    h1 {
      font-family: arial, sans-serif;
      font-size: 30px;
      font-weight: 700;
      margin: 20px;
      text-align: center;
    }
    h2 {
      font-family: arial, sans-serif;
      font-size: 12px;
      font-weight: 700;
      line-height: 16px;
    }
    p {
      font-family: arial, sans-serif;
      font-size: 12px;
      font-weight: 400;
      line-height: 16px;
    }
    .categories {
      color: #6b7280;
    }"""


def page_title(font_name: str) -> str:
    return " ".join(part.capitalize() for part in font_name.replace("-", " ").split()) or font_name


def code_point(unicode: str) -> str:
    """Decimal code point of the first character, or an empty string."""
    return f"#{ord(unicode[0])}" if unicode else ""


def render_block(glyph: GlyphRecord, categories: Sequence[str]) -> str:
    name = class_name(glyph.name)
    lines = [
        "<div class='icon'>",
        f"  <span class='{html.escape(name)}'></span>",
        f"  <h2>{html.escape(name)}</h2>",
        f"  <p><code>{html.escape(glyph.name)}.svg</code></p>",
        f"  <p>unicode: <code>{code_point(glyph.unicode)}</code></p>",
    ]
    if categories:
        lines.append(f"  <p class='categories'>{html.escape(', '.join(categories))}</p>")
    lines.append("</div>")
    return "\n".join(lines)


def emit_preview(catalog: Catalog, glyphs: Sequence[GlyphRecord], font_name: str) -> str:
    blocks = []
    for glyph in glyphs:
        entry = catalog.icons.get(glyph.name)
        blocks.append(render_block(glyph, entry.category_keys if entry else ()))

    title = html.escape(page_title(font_name))
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>{title}</title>
  <link rel="stylesheet" type="text/css" href="./{html.escape(font_name)}.css" />
  <style>{STYLE}
  </style>
</head>
<body>
  <h1>{title}</h1>
  <div class='icons'>
{chr(10).join(blocks)}
  </div>
</body>
</html>
"""
