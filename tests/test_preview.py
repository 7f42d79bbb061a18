from __future__ import annotations

from alloyicons.catalog import build_catalog
from alloyicons.glyphs import GlyphRecord
from alloyicons.preview import emit_preview, page_title


def test_one_block_per_glyph_in_glyph_order(glyphs, categories):
    page = emit_preview(build_catalog(glyphs, categories), glyphs, "alloyicons")
    assert page.count("<div class='icon'>") == 3
    assert page.index("icon-home") < page.index("icon-settings") < page.index("icon-arrow-left")


def test_block_contents(glyphs, categories):
    page = emit_preview(build_catalog(glyphs, categories), glyphs, "alloyicons")
    assert "<span class='icon-arrow-left'></span>" in page
    assert "<h2>icon-arrow-left</h2>" in page
    assert "<p><code>arrow-left.svg</code></p>" in page
    assert "<p>unicode: <code>#59650</code></p>" in page
    assert "<p class='categories'>nav, system</p>" in page


def test_links_stylesheet(glyphs):
    page = emit_preview(build_catalog(glyphs, []), glyphs, "alloyicons")
    assert 'href="./alloyicons.css"' in page
    assert "<title>Alloyicons</title>" in page
    assert "class='categories'" not in page


def test_escapes_names():
    glyphs = [GlyphRecord("a<b", "\ue900")]
    catalog = build_catalog([GlyphRecord("ok", "\ue901")], [])
    page = emit_preview(catalog, glyphs, "alloy-icons")
    assert "a&lt;b.svg" in page
    assert "a<b" not in page


def test_page_title():
    assert page_title("alloy-icons") == "Alloy Icons"


def test_glyph_without_code_point_renders_empty():
    glyphs = [GlyphRecord("blank", "")]
    page = emit_preview(build_catalog(glyphs, []), glyphs, "alloyicons")
    assert "<p>unicode: <code></code></p>" in page
