from __future__ import annotations

import pytest

from alloyicons.catalog import (
    DUPLICATE_CATEGORY,
    DUPLICATE_GLYPH,
    DUPLICATE_ICON,
    IDENTIFIER_COLLISION,
    INVALID_IDENTIFIER,
    UNKNOWN_ICON,
    CategoryEntry,
    IconEntry,
    ValidationError,
    build_catalog,
    property_name,
)
from alloyicons.glyphs import GlyphRecord
from alloyicons.manifest import CategoryRecord


def test_property_name():
    assert property_name("ICON", "arrow-left") == "ICON_ARROW_LEFT"
    assert property_name("CATEGORY", "nav") == "CATEGORY_NAV"


def test_single_icon_single_category():
    catalog = build_catalog(
        [GlyphRecord("home", "\ue900")],
        [CategoryRecord("nav", ("home",))],
    )
    assert dict(catalog.icons) == {"home": IconEntry("ICON_HOME", "\ue900", ("nav",))}
    assert dict(catalog.categories) == {"nav": CategoryEntry("CATEGORY_NAV", ("home",))}


def test_unreferenced_glyph_gets_empty_categories():
    catalog = build_catalog(
        [GlyphRecord("home", "\ue900"), GlyphRecord("settings", "\ue901")],
        [CategoryRecord("nav", ("home",))],
    )
    assert catalog.icons["settings"] == IconEntry("ICON_SETTINGS", "\ue901", ())


def test_every_glyph_has_an_entry(glyphs):
    catalog = build_catalog(glyphs, [])
    assert list(catalog.icons) == [g.name for g in glyphs]
    assert all(entry.category_keys == () for entry in catalog.icons.values())


def test_orders_follow_inputs(glyphs, categories):
    catalog = build_catalog(glyphs, categories)
    assert list(catalog.icons) == ["home", "settings", "arrow-left"]
    assert list(catalog.categories) == ["nav", "system"]
    assert catalog.icons["home"].category_keys == ("nav", "system")
    assert catalog.categories["system"].icon_names == ("settings", "home")


def test_indexes_agree_in_both_directions(glyphs, categories):
    catalog = build_catalog(glyphs, categories)
    for icon, entry in catalog.icons.items():
        for key in entry.category_keys:
            assert icon in catalog.categories[key].icon_names
    for key, entry in catalog.categories.items():
        for icon in entry.icon_names:
            assert key in catalog.icons[icon].category_keys


def test_derived_names_are_unique(glyphs, categories):
    catalog = build_catalog(glyphs, categories)
    icon_names = [entry.property_name for entry in catalog.icons.values()]
    category_names = [entry.property_name for entry in catalog.categories.values()]
    assert len(set(icon_names)) == len(icon_names)
    assert len(set(category_names)) == len(category_names)


def test_idempotent(glyphs, categories):
    first = build_catalog(glyphs, categories)
    second = build_catalog(glyphs, categories)
    assert list(first.icons.items()) == list(second.icons.items())
    assert list(first.categories.items()) == list(second.categories.items())


def test_catalog_is_read_only(glyphs, categories):
    catalog = build_catalog(glyphs, categories)
    with pytest.raises(TypeError):
        catalog.icons["ghost"] = IconEntry("ICON_GHOST", "", ())


def test_duplicate_category_key(glyphs):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog(glyphs, [CategoryRecord("nav", ("home",)), CategoryRecord("nav", ("settings",))])
    assert excinfo.value.invariant == DUPLICATE_CATEGORY
    assert excinfo.value.key == "nav"
    assert '"nav"' in str(excinfo.value)


def test_duplicate_icon_in_category(glyphs):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog(glyphs, [CategoryRecord("nav", ("home", "home"))])
    error = excinfo.value
    assert error.invariant == DUPLICATE_ICON
    assert (error.key, error.icon) == ("nav", "home")
    assert str(error) == 'duplicate icon key "home" found in category "nav"'


def test_unknown_icon(glyphs):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog(glyphs, [CategoryRecord("nav", ("home", "ghost"))])
    error = excinfo.value
    assert error.invariant == UNKNOWN_ICON
    assert (error.key, error.icon) == ("nav", "ghost")
    assert '"ghost"' in str(error) and '"nav"' in str(error)


def test_duplicate_reported_before_unknown(glyphs):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog(glyphs, [CategoryRecord("nav", ("ghost", "home", "home"))])
    assert excinfo.value.invariant == DUPLICATE_ICON


def test_first_failing_category_wins(glyphs):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog(
            glyphs,
            [
                CategoryRecord("nav", ("ghost",)),
                CategoryRecord("nav", ("home",)),
            ],
        )
    assert excinfo.value.invariant == UNKNOWN_ICON


def test_category_identifier_collision(glyphs):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog(glyphs, [CategoryRecord("foo-bar", ()), CategoryRecord("foo_bar", ())])
    error = excinfo.value
    assert error.invariant == IDENTIFIER_COLLISION
    assert error.key == "foo_bar"
    assert "CATEGORY_FOO_BAR" in str(error)


def test_icon_identifier_collision():
    with pytest.raises(ValidationError) as excinfo:
        build_catalog([GlyphRecord("foo-bar", "\ue900"), GlyphRecord("foo_bar", "\ue901")], [])
    assert excinfo.value.invariant == IDENTIFIER_COLLISION
    assert excinfo.value.icon == "foo_bar"


def test_icon_and_category_namespaces_are_separate():
    catalog = build_catalog([GlyphRecord("nav", "\ue900")], [CategoryRecord("nav", ("nav",))])
    assert catalog.icons["nav"].property_name == "ICON_NAV"
    assert catalog.categories["nav"].property_name == "CATEGORY_NAV"


@pytest.mark.parametrize("name", ["arrow.left", "flèche", "two words", "home\n"])
def test_invalid_icon_identifier(name):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog([GlyphRecord(name, "\ue900")], [])
    assert excinfo.value.invariant == INVALID_IDENTIFIER


@pytest.mark.parametrize("key", ["media/audio", "nav\n"])
def test_invalid_category_identifier(glyphs, key):
    with pytest.raises(ValidationError) as excinfo:
        build_catalog(glyphs, [CategoryRecord(key, ())])
    assert excinfo.value.invariant == INVALID_IDENTIFIER
    assert excinfo.value.key == key


def test_duplicate_glyph_name():
    with pytest.raises(ValidationError) as excinfo:
        build_catalog([GlyphRecord("home", "\ue900"), GlyphRecord("home", "\ue901")], [])
    assert excinfo.value.invariant == DUPLICATE_GLYPH


def test_validation_error_is_a_value_error():
    assert issubclass(ValidationError, ValueError)
