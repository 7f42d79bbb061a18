"""
Read icon SVG files as path data.

Basic shapes are rewritten as path ``d`` strings so that the font renderer only
has to deal with one kind of outline.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple


DEFAULT_VIEW_BOX = (0.0, 0.0, 24.0, 24.0)


@dataclass(frozen=True)
class SvgIcon:
    name: str
    view_box: Tuple[float, float, float, float]
    paths: Tuple[str, ...]


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _num(value: str | None, default: float = 0.0) -> float:
    if value is None or not value.strip():
        return default
    # "24px" and similar
    match = re.match(r"^\s*(-?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)", value)
    if not match:
        raise ValueError(f"Invalid number: '{value}'")
    return float(match.group(1))


def _points_to_path(points: str, close: bool) -> str | None:
    coords = points.strip().replace(",", " ").split()
    if len(coords) < 4:
        return None
    path_data = f"M {coords[0]},{coords[1]}"
    for i in range(2, len(coords) - 1, 2):
        path_data += f" L {coords[i]},{coords[i + 1]}"
    if close:
        path_data += " Z"
    return path_data


def _circle_path(cx: float, cy: float, rx: float, ry: float) -> str:
    return (
        f"M {cx - rx},{cy} A {rx},{ry} 0 1,1 {cx + rx},{cy} "
        f"A {rx},{ry} 0 1,1 {cx - rx},{cy} Z"
    )


def _rect_path(el: ET.Element) -> str | None:
    x = _num(el.get("x"))
    y = _num(el.get("y"))
    w = _num(el.get("width"))
    h = _num(el.get("height"))
    if w <= 0 or h <= 0:
        return None
    rx = _num(el.get("rx"), _num(el.get("ry")))
    ry = _num(el.get("ry"), rx)
    rx = min(rx, w / 2)
    ry = min(ry, h / 2)
    if rx == 0 and ry == 0:
        return f"M {x},{y} L {x + w},{y} L {x + w},{y + h} L {x},{y + h} Z"
    return (
        f"M {x + rx},{y} L {x + w - rx},{y} A {rx},{ry} 0 0,1 {x + w},{y + ry} "
        f"L {x + w},{y + h - ry} A {rx},{ry} 0 0,1 {x + w - rx},{y + h} "
        f"L {x + rx},{y + h} A {rx},{ry} 0 0,1 {x},{y + h - ry} "
        f"L {x},{y + ry} A {rx},{ry} 0 0,1 {x + rx},{y} Z"
    )


def extract_svg_paths(root: ET.Element) -> List[str]:
    """Path data for every drawable element, in document order."""
    paths: List[str] = []
    for el in root.iter():
        tag = _local(el.tag)
        path_data: str | None = None
        if tag == "path":
            path_data = el.get("d") or None
        elif tag in ("polyline", "polygon"):
            points = el.get("points")
            if points:
                path_data = _points_to_path(points, close=tag == "polygon")
        elif tag == "circle":
            r = _num(el.get("r"))
            if r > 0:
                path_data = _circle_path(_num(el.get("cx")), _num(el.get("cy")), r, r)
        elif tag == "ellipse":
            rx = _num(el.get("rx"))
            ry = _num(el.get("ry"))
            if rx > 0 and ry > 0:
                path_data = _circle_path(_num(el.get("cx")), _num(el.get("cy")), rx, ry)
        elif tag == "rect":
            path_data = _rect_path(el)
        elif tag == "line":
            path_data = (
                f"M {el.get('x1', '0')},{el.get('y1', '0')} "
                f"L {el.get('x2', '0')},{el.get('y2', '0')}"
            )
        if path_data:
            paths.append(path_data)
    return paths


def parse_view_box(root: ET.Element) -> Tuple[float, float, float, float]:
    raw = root.get("viewBox")
    if raw:
        parts = raw.replace(",", " ").split()
        if len(parts) != 4:
            raise ValueError(f"Invalid viewBox: '{raw}'")
        min_x, min_y, width, height = (float(p) for p in parts)
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid viewBox: '{raw}'")
        return min_x, min_y, width, height
    width = _num(root.get("width"))
    height = _num(root.get("height"))
    if width > 0 and height > 0:
        return 0.0, 0.0, width, height
    return DEFAULT_VIEW_BOX


def parse_svg(content: str, name: str) -> SvgIcon:
    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise ValueError(f"Failed to parse SVG '{name}': {exc}") from exc
    if _local(root.tag) != "svg":
        raise ValueError(f"'{name}' is not an SVG document (root is <{_local(root.tag)}>)")
    paths = extract_svg_paths(root)
    if not paths:
        raise ValueError(f"No path data found in '{name}'")
    return SvgIcon(name, parse_view_box(root), tuple(paths))


def load_svg(path: Path) -> SvgIcon:
    if not path.exists():
        raise FileNotFoundError(f"SVG file not found: {path}")
    return parse_svg(path.read_text(encoding="utf-8"), path.stem)
