#!/usr/bin/env python3
"""
Rebuild the Alloy Icons font and its companion files.

Reads the SVG sources and the category manifest, renders the web font,
compiles the icon catalog and writes:

    <build-dir>/        fonts, stylesheet, index.html, icons.json, bindings
    <output-dir>/       fonts, stylesheet, index.html
    <output-dir>/mobile/icons.json
    <output-dir>/typescript/IconUtils.ts, index.ts
    <output-dir>/python/icon_utils.py

Every artifact is generated in memory first, so a manifest error leaves both
directories untouched. Exits with 0 on success and 101 on any failure.
"""

from __future__ import annotations

import argparse
import json
import shutil
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from .bindings import emit_bindings
from .catalog import build_catalog
from .glyphs import GlyphRecord, dump_glyph_metadata, glyphs_from_metadata, load_glyphs
from .lookup import emit_lookup, render_lookup
from .manifest import CategoryRecord, load_manifest
from .preview import emit_preview
from .webfont import START_CODEPOINT, WebfontResult, render_webfont


SVG_DIR = Path("src/svgs")
CATEGORIES_JSON = Path("src/categories.json")
BUILD_DIR = Path(".build")
OUTPUT_DIR = Path("dist")
FONT_NAME = "alloyicons"
EXIT_FAILURE = 101

# build file -> output sub directory ("" is the output root)
MOBILE_FILES = {"icons.json": "mobile"}
TYPESCRIPT_FILES = {"IconUtils.ts": "typescript", "index.ts": "typescript"}
PYTHON_FILES = {"icon_utils.py": "python"}

Artifacts = Dict[str, Union[str, bytes]]


def collect_svg_files(svg_dir: Path) -> List[Path]:
    return sorted(p for p in svg_dir.rglob("*.svg") if p.is_file())


def generate_artifacts(
    glyphs: Sequence[GlyphRecord],
    categories: Sequence[CategoryRecord],
    font_name: str,
    webfont: Optional[WebfontResult] = None,
) -> Artifacts:
    """All build files keyed by file name. Raises ValidationError on a bad manifest."""
    catalog = build_catalog(glyphs, categories)

    artifacts: Artifacts = {}
    if webfont is not None:
        artifacts[f"{font_name}.ttf"] = webfont.ttf
        artifacts[f"{font_name}.woff"] = webfont.woff
        artifacts[f"{font_name}.woff2"] = webfont.woff2
        artifacts[f"{font_name}.css"] = webfont.css

    print("creating index.html...")
    artifacts["index.html"] = emit_preview(catalog, glyphs, font_name)
    print("creating icons.json...")
    artifacts["icons.json"] = render_lookup(emit_lookup(catalog))
    print("creating IconUtils.ts...")
    artifacts.update(emit_bindings(catalog, "typescript"))
    print("creating icon_utils.py...")
    artifacts.update(emit_bindings(catalog, "python"))
    artifacts["glyphs.json"] = json.dumps(dump_glyph_metadata(glyphs), ensure_ascii=True, indent=2) + "\n"
    return artifacts


def output_location(file_name: str) -> Optional[str]:
    """Output sub directory for a build file, or None if it stays in the build directory."""
    for layout in (MOBILE_FILES, TYPESCRIPT_FILES, PYTHON_FILES):
        if file_name in layout:
            return layout[file_name]
    if file_name == "glyphs.json":
        return None
    return ""


def reset_directory(path: Path) -> None:
    if path.exists():
        print(f"cleaning {path}...")
        shutil.rmtree(path)
    path.mkdir(parents=True)


def write_artifacts(build_dir: Path, artifacts: Artifacts) -> None:
    reset_directory(build_dir)
    for file_name, content in artifacts.items():
        target = build_dir / file_name
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")


def publish(build_dir: Path, output_dir: Path, file_names: Sequence[str]) -> None:
    reset_directory(output_dir)
    for file_name in file_names:
        location = output_location(file_name)
        if location is None:
            continue
        dest_dir = output_dir / location
        dest_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(build_dir / file_name, dest_dir / file_name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rebuild the icon font, catalog and bindings")
    parser.add_argument("--svg-dir", type=Path, default=SVG_DIR, help="Directory of SVG icon sources")
    parser.add_argument("--categories", type=Path, default=CATEGORIES_JSON, help="Category manifest JSON")
    parser.add_argument("--build-dir", type=Path, default=BUILD_DIR, help="Scratch directory for build files")
    parser.add_argument("--output-dir", type=Path, default=OUTPUT_DIR, help="Published output directory")
    parser.add_argument("--font-name", default=FONT_NAME, help="Font family and file name")
    parser.add_argument(
        "--start-codepoint",
        type=lambda s: int(s, 0),
        default=START_CODEPOINT,
        help="First code point to assign (default 0xEA01, Private Use Area)",
    )
    parser.add_argument(
        "--glyphs",
        type=Path,
        help="Use glyph metadata from this JSON file instead of rendering the SVG sources",
    )
    parser.add_argument("--check", action="store_true", help="Validate the manifest only, write nothing")
    return parser


def check_directories(build_dir: Path, output_dir: Path) -> None:
    """Each directory is wiped on rebuild, so neither may contain the other."""
    build_path = build_dir.resolve()
    output_path = output_dir.resolve()
    if build_path == output_path or output_path in build_path.parents or build_path in output_path.parents:
        raise ValueError(
            f"build directory {build_dir} and output directory {output_dir} must not contain each other"
        )


def run(args: argparse.Namespace) -> None:
    if not args.check:
        check_directories(args.build_dir, args.output_dir)
    categories = load_manifest(args.categories)

    webfont: Optional[WebfontResult] = None
    if args.glyphs is not None:
        glyphs = load_glyphs(args.glyphs)
    else:
        if not args.svg_dir.is_dir():
            raise FileNotFoundError(f"svg directory does not exist: {args.svg_dir}")
        svg_files = collect_svg_files(args.svg_dir)
        print("starting webfont processing...")
        webfont = render_webfont(svg_files, args.font_name, args.start_codepoint)
        print("webfonts processed!")
        glyphs = glyphs_from_metadata(webfont.glyphs_data)

    if args.check:
        build_catalog(glyphs, categories)
        print(f"{len(categories)} categories and {len(glyphs)} icons are consistent.")
        return

    artifacts = generate_artifacts(glyphs, categories, args.font_name, webfont)

    print("saving build files...")
    write_artifacts(args.build_dir, artifacts)
    print("copying build dir to output dir...")
    publish(args.build_dir, args.output_dir, list(artifacts))
    print(f"{args.font_name} generated!")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except Exception as exc:  # noqa: BLE001
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
