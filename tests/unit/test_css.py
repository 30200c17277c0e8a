"""Unit tests for CSS generation."""

from iconpath.io.css import base_class_rule, font_face_rule, glyph_rule, stylesheet


def test_glyph_rule():
    rule = glyph_rule("icon", "home", 0xE001, "neptune")
    assert rule == '.icon-home::before { content: "\\e001"; font-family: "neptune"; }'


def test_font_face_lists_sources_in_order():
    rule = font_face_rule("neptune", "n.woff2", "n.woff", "n.ttf")
    assert 'font-family: "neptune";' in rule
    woff2 = rule.index('url("n.woff2") format("woff2")')
    woff = rule.index('url("n.woff") format("woff")')
    ttf = rule.index('url("n.ttf") format("truetype")')
    assert woff2 < woff < ttf


def test_font_face_skips_missing_sources():
    rule = font_face_rule("neptune", woff_path="n.woff")
    assert "n.woff" in rule
    assert "woff2" not in rule
    assert "truetype" not in rule


def test_font_face_without_sources():
    assert "src:" not in font_face_rule("neptune")


def test_base_class_rule():
    rule = base_class_rule("ico", "neptune")
    assert rule.startswith(".ico {")
    assert 'font-family: "neptune";' in rule


def test_stylesheet():
    css = stylesheet("neptune", "icon", [("home", 0xE001), ("star", 0xE002)], ttf_path="n.ttf")
    face, base, rules = css.split("\n\n")
    assert face.startswith("@font-face")
    assert base.startswith(".icon {")
    assert rules.splitlines() == [
        glyph_rule("icon", "home", 0xE001, "neptune"),
        glyph_rule("icon", "star", 0xE002, "neptune"),
    ]
