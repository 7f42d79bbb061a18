"""
Reconcile rendered glyphs with the hand-written category manifest.

The builder validates the manifest against the glyph set, derives the constant
names used by the generated bindings and returns an immutable ``Catalog`` that
every emitter reads from. Any broken invariant raises ``ValidationError`` before
a single artifact is produced.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .glyphs import GlyphRecord
from .manifest import CategoryRecord


ICON_NAMESPACE = "ICON"
CATEGORY_NAMESPACE = "CATEGORY"
CLASS_PREFIX = "icon-"

IDENTIFIER_PATTERN = re.compile(r"[A-Z][A-Z0-9_]*")

DUPLICATE_CATEGORY = "duplicate-category"
DUPLICATE_ICON = "duplicate-icon"
UNKNOWN_ICON = "unknown-icon"
DUPLICATE_GLYPH = "duplicate-glyph"
INVALID_IDENTIFIER = "invalid-identifier"
IDENTIFIER_COLLISION = "identifier-collision"


class ValidationError(ValueError):
    """A manifest or glyph set that cannot be compiled into a catalog."""

    def __init__(
        self,
        message: str,
        invariant: str,
        key: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.invariant = invariant
        self.key = key
        self.icon = icon


@dataclass(frozen=True)
class IconEntry:
    property_name: str
    unicode: str
    category_keys: Tuple[str, ...]


@dataclass(frozen=True)
class CategoryEntry:
    property_name: str
    icon_names: Tuple[str, ...]


@dataclass(frozen=True)
class Catalog:
    icons: Mapping[str, IconEntry]
    categories: Mapping[str, CategoryEntry]


def property_name(namespace: str, key: str) -> str:
    return f"{namespace}_{key.upper().replace('-', '_')}"


def class_name(icon_name: str) -> str:
    return CLASS_PREFIX + icon_name


def _check_identifier(
    identifier: str,
    owners: Dict[str, str],
    owner: str,
    kind: str,
    key: Optional[str] = None,
    icon: Optional[str] = None,
) -> None:
    if not IDENTIFIER_PATTERN.fullmatch(identifier):
        raise ValidationError(
            f'{kind} "{owner}" does not produce a valid identifier ("{identifier}")',
            INVALID_IDENTIFIER,
            key=key,
            icon=icon,
        )
    if identifier in owners:
        raise ValidationError(
            f'{kind} "{owner}" and {kind} "{owners[identifier]}" both map to identifier "{identifier}"',
            IDENTIFIER_COLLISION,
            key=key,
            icon=icon,
        )
    owners[identifier] = owner


def build_catalog(glyphs: Sequence[GlyphRecord], categories: Sequence[CategoryRecord]) -> Catalog:
    glyph_names = {g.name for g in glyphs}

    category_entries: Dict[str, CategoryEntry] = {}
    category_identifiers: Dict[str, str] = {}
    # reverse index, filled alongside the forward one
    memberships: Dict[str, List[str]] = {}

    for category in categories:
        if category.key in category_entries:
            raise ValidationError(
                f'duplicate category key "{category.key}" found',
                DUPLICATE_CATEGORY,
                key=category.key,
            )
        category_property = property_name(CATEGORY_NAMESPACE, category.key)
        _check_identifier(category_property, category_identifiers, category.key, "category key", key=category.key)

        counts = Counter(category.icons)
        for icon, count in counts.items():
            if count > 1:
                raise ValidationError(
                    f'duplicate icon key "{icon}" found in category "{category.key}"',
                    DUPLICATE_ICON,
                    key=category.key,
                    icon=icon,
                )

        for icon in category.icons:
            if icon not in glyph_names:
                raise ValidationError(
                    f'icon key "{icon}" not found in processed icons but specified in category key "{category.key}"',
                    UNKNOWN_ICON,
                    key=category.key,
                    icon=icon,
                )
            memberships.setdefault(icon, []).append(category.key)

        category_entries[category.key] = CategoryEntry(category_property, tuple(category.icons))

    icon_entries: Dict[str, IconEntry] = {}
    icon_identifiers: Dict[str, str] = {}
    for glyph in glyphs:
        if glyph.name in icon_entries:
            raise ValidationError(
                f'duplicate glyph name "{glyph.name}" in processed icons',
                DUPLICATE_GLYPH,
                icon=glyph.name,
            )
        icon_property = property_name(ICON_NAMESPACE, glyph.name)
        _check_identifier(icon_property, icon_identifiers, glyph.name, "icon key", icon=glyph.name)
        icon_entries[glyph.name] = IconEntry(
            icon_property,
            glyph.unicode,
            tuple(memberships.get(glyph.name, ())),
        )

    return Catalog(MappingProxyType(icon_entries), MappingProxyType(category_entries))
