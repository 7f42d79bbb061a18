"""
Render a folder of SVG icons into a web font.

Each icon becomes one glyph at a sequential Private Use Area code point,
scaled from its SVG view box into the em square, converted to quadratic
curves and assembled with fontTools. The result carries the TTF, WOFF and
WOFF2 payloads, a matching stylesheet and the glyph metadata records the
catalog builder consumes.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.transformPen import TransformPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont
from svgpathtools import Arc, CubicBezier, Line, QuadraticBezier, parse_path

from .svg_paths import SvgIcon, load_svg


START_CODEPOINT = 0xEA01
UNITS_PER_EM = 1000
ASCENT = 850
DESCENT = 150
CLASS_PREFIX = "icon-"


@dataclass(frozen=True)
class WebfontResult:
    glyphs_data: List[dict]
    ttf: bytes
    woff: bytes
    woff2: bytes
    css: str


def _point(z: complex) -> Tuple[float, float]:
    return z.real, z.imag


def _draw_path_to_pen(path_data: str, pen: TransformPen) -> None:
    """Draws SVG path segments into ``pen``, one contour per sub-path."""
    subpath_start = None
    current = None

    for segment in parse_path(path_data):
        if isinstance(segment, Line) and segment.start == segment.end:
            continue
        start = _point(segment.start)
        end = _point(segment.end)

        if current is None or start != current:
            if subpath_start is not None:
                pen.endPath()
            pen.moveTo(start)
            subpath_start = start

        if isinstance(segment, Line):
            pen.lineTo(end)
        elif isinstance(segment, QuadraticBezier):
            pen.qCurveTo(_point(segment.control), end)
        elif isinstance(segment, CubicBezier):
            pen.curveTo(_point(segment.control1), _point(segment.control2), end)
        elif isinstance(segment, Arc):
            for cubic in segment.as_cubic_curves():
                pen.curveTo(_point(cubic.control1), _point(cubic.control2), _point(cubic.end))
        else:
            raise ValueError(f"Unsupported path segment: {type(segment).__name__}")

        current = end
        if end == subpath_start:
            pen.closePath()
            subpath_start = None
            current = None

    if subpath_start is not None:
        pen.endPath()


def build_glyph(icon: SvgIcon):
    """TrueType glyph and advance width for one icon."""
    min_x, min_y, width, height = icon.view_box
    scale = UNITS_PER_EM / height
    tt_pen = TTGlyphPen(None)
    cu2qu_pen = Cu2QuPen(tt_pen, max_err=1.0, reverse_direction=True)
    # SVG y grows downwards; the view box top lands on the ascender.
    transform_pen = TransformPen(
        cu2qu_pen,
        (scale, 0, 0, -scale, -min_x * scale, ASCENT + min_y * scale),
    )
    for path_data in icon.paths:
        _draw_path_to_pen(path_data, transform_pen)
    return tt_pen.glyph(), round(width * scale)


def _flavored(ttf: bytes, flavor: str) -> bytes:
    font = TTFont(io.BytesIO(ttf))
    font.flavor = flavor
    buffer = io.BytesIO()
    font.save(buffer)
    return buffer.getvalue()


def build_font(font_name: str, entries: Sequence[Tuple[str, int, SvgIcon]]) -> bytes:
    glyph_order = [".notdef"]
    glyphs = {".notdef": TTGlyphPen(None).glyph()}
    h_metrics: Dict[str, Tuple[int, int]] = {".notdef": (UNITS_PER_EM, 0)}
    cmap: Dict[int, str] = {}

    for name, codepoint, icon in entries:
        glyph, advance = build_glyph(icon)
        glyph_order.append(name)
        glyphs[name] = glyph
        h_metrics[name] = (advance, 0)
        cmap[codepoint] = name

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(cmap)
    fb.setupGlyf(glyphs)
    fb.setupHorizontalMetrics(h_metrics)
    fb.setupHorizontalHeader(ascent=ASCENT, descent=-DESCENT)
    fb.setupOS2(
        sTypoAscender=ASCENT,
        sTypoDescender=-DESCENT,
        sTypoLineGap=0,
        usWinAscent=ASCENT,
        usWinDescent=DESCENT,
    )
    ps_name = "".join(ch for ch in font_name if ch.isalnum() or ch == "-") or "icons"
    fb.setupNameTable({
        "familyName": font_name,
        "styleName": "Regular",
        "uniqueFontIdentifier": f"{ps_name}-Regular",
        "fullName": f"{font_name} Regular",
        "psName": f"{ps_name}-Regular",
        "version": "1.0",
    })
    fb.setupPost()
    fb.setupMaxp()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


def css_escape(char: str) -> str:
    return "\\" + format(ord(char), "x")


def render_css(font_name: str, glyphs: Sequence[Tuple[str, int]]) -> str:
    lines = [
        "@font-face {",
        f'  font-family: "{font_name}";',
        f'  src: url("./{font_name}.woff2") format("woff2"),',
        f'    url("./{font_name}.woff") format("woff"),',
        f'    url("./{font_name}.ttf") format("truetype");',
        "  font-weight: normal;",
        "  font-style: normal;",
        "}",
        "",
        f'[class^="{CLASS_PREFIX}"]::before,',
        f'[class*=" {CLASS_PREFIX}"]::before {{',
        f'  font-family: "{font_name}" !important;',
        "  font-style: normal;",
        "  font-weight: normal;",
        "  font-variant: normal;",
        "  text-transform: none;",
        "  line-height: 1;",
        "  -webkit-font-smoothing: antialiased;",
        "  -moz-osx-font-smoothing: grayscale;",
        "}",
        "",
    ]
    for name, codepoint in glyphs:
        lines.append(f'.{CLASS_PREFIX}{name}::before {{')
        lines.append(f'  content: "{css_escape(chr(codepoint))}";')
        lines.append("}")
    lines.append("")
    return "\n".join(lines)


def render_webfont(
    svg_files: Sequence[Path],
    font_name: str,
    start_codepoint: int = START_CODEPOINT,
) -> WebfontResult:
    if not svg_files:
        raise ValueError("No SVG files to render")
    last = start_codepoint + len(svg_files) - 1
    if start_codepoint < 0 or last > 0x10FFFF or (start_codepoint <= 0xDFFF and last >= 0xD800):
        raise ValueError(f"Code points {start_codepoint:#x}..{last:#x} leave the usable Unicode range")

    entries: List[Tuple[str, int, SvgIcon]] = []
    seen: Dict[str, Path] = {}
    for offset, svg_file in enumerate(svg_files):
        icon = load_svg(svg_file)
        if icon.name in seen:
            raise ValueError(f"Duplicate icon name '{icon.name}' from {svg_file} and {seen[icon.name]}")
        seen[icon.name] = svg_file
        entries.append((icon.name, start_codepoint + offset, icon))

    ttf = build_font(font_name, entries)
    glyphs_data = [
        {"metadata": {"name": name, "unicode": [chr(codepoint)], "path": str(seen[name])}}
        for name, codepoint, _ in entries
    ]
    return WebfontResult(
        glyphs_data=glyphs_data,
        ttf=ttf,
        woff=_flavored(ttf, "woff"),
        woff2=_flavored(ttf, "woff2"),
        css=render_css(font_name, [(name, codepoint) for name, codepoint, _ in entries]),
    )
