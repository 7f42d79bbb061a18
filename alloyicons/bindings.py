"""
Intermediate representation of the generated icon bindings.

``build_bindings`` turns a catalog into a ``BindingModule``: a flat list of
named declarations that a per-language formatter renders to source text.
Category constants always come first so that icon constants may refer to them
in targets without forward references.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .catalog import Catalog, class_name


@dataclass(frozen=True)
class CategoryConstant:
    name: str
    key: str


@dataclass(frozen=True)
class IconConstant:
    name: str
    class_name: str
    unicode: str
    categories: Tuple[str, ...]  # names of CategoryConstant declarations


@dataclass(frozen=True)
class MapEntry:
    key: str
    refs: Tuple[str, ...]


@dataclass(frozen=True)
class LookupFunction:
    """Lookup by class name that falls back to an empty placeholder."""

    name: str
    map_name: str
    warning: str  # format string, receives the requested key as {key}


@dataclass(frozen=True)
class BindingModule:
    categories: Tuple[CategoryConstant, ...]
    icons: Tuple[IconConstant, ...]
    icon_map: Tuple[MapEntry, ...]  # class name -> single icon constant
    category_map: Tuple[MapEntry, ...]  # category key -> icon constants
    lookup: LookupFunction


ICONS_MAP = "ICONS"
CATEGORIES_MAP = "CATEGORIES"
PARSE_WARNING = 'icon with key "{key}" requested but no definition found'


def build_bindings(catalog: Catalog) -> BindingModule:
    categories = tuple(
        CategoryConstant(entry.property_name, key) for key, entry in catalog.categories.items()
    )
    category_refs = {key: entry.property_name for key, entry in catalog.categories.items()}

    icons = tuple(
        IconConstant(
            entry.property_name,
            class_name(name),
            entry.unicode,
            tuple(category_refs[key] for key in entry.category_keys),
        )
        for name, entry in catalog.icons.items()
    )
    icon_map = tuple(MapEntry(icon.class_name, (icon.name,)) for icon in icons)
    category_map = tuple(
        MapEntry(key, tuple(catalog.icons[icon].property_name for icon in entry.icon_names))
        for key, entry in catalog.categories.items()
    )
    return BindingModule(
        categories,
        icons,
        icon_map,
        category_map,
        LookupFunction("parse", ICONS_MAP, PARSE_WARNING),
    )


def _formatters() -> Dict[str, Callable[[BindingModule], Dict[str, str]]]:
    from . import py_format, ts_format

    return {
        "typescript": ts_format.format_files,
        "python": py_format.format_files,
    }


def emit_bindings(catalog: Catalog, language: str) -> Dict[str, str]:
    """Render the bindings for ``language``; returns file name -> source text."""
    formatters = _formatters()
    if language not in formatters:
        raise ValueError(f"Unknown binding language '{language}' (expected one of {sorted(formatters)})")
    return formatters[language](build_bindings(catalog))
