"""Tests for width/height/viewBox inference."""

from tests.conftest import CIRCLE_SVG, FILL_SVG, NO_GEOMETRY_SVG, RADIUS_SVG

from svgmint.svg.geometry import PERCENT, infer_geometry, parse_length, parse_viewbox, root_tag


def test_literal_dimensions_with_viewbox():
    meta = infer_geometry(CIRCLE_SVG)
    assert meta.width == 24
    assert meta.height == 24
    assert meta.view_box.width == 24
    assert meta.view_box.height == 24


def test_literal_dimensions_without_viewbox():
    meta = infer_geometry(FILL_SVG)
    assert (meta.width, meta.height) == (24, 24)
    assert meta.view_box is None


def test_literal_dimensions_win_over_viewbox():
    meta = infer_geometry('<svg width="10" height="30" viewBox="0 0 100 50"></svg>')
    assert (meta.width, meta.height) == (10, 30)


def test_width_only_derives_height():
    meta = infer_geometry('<svg width="30" viewBox="0 0 100 50"></svg>')
    assert meta.width == 30
    assert meta.height == 15


def test_height_only_derives_width():
    meta = infer_geometry('<svg height="7" viewBox="0 0 100 50"></svg>')
    assert meta.width == 14
    assert meta.height == 7


def test_derived_side_is_floored():
    meta = infer_geometry('<svg width="10" viewBox="0 0 3 2"></svg>')
    assert meta.height == 6


def test_viewbox_only_falls_back_to_percent():
    meta = infer_geometry(RADIUS_SVG)
    assert meta.width == PERCENT
    assert meta.height == PERCENT
    assert meta.view_box.model_dump() == {"minx": 0, "miny": 0, "width": 100, "height": 50}


def test_viewbox_only_without_percent_fallback():
    meta = infer_geometry(RADIUS_SVG, percent_fallback=False)
    assert meta.width is None
    assert meta.height is None
    assert meta.view_box.width == 100


def test_percentage_dimensions_are_not_literal():
    meta = infer_geometry('<svg width="100%" height="50%" viewBox="0 0 10 20"></svg>')
    assert meta.width == PERCENT
    assert meta.view_box.height == 20


def test_nothing_resolvable():
    assert infer_geometry(NO_GEOMETRY_SVG) is None
    assert infer_geometry('<svg width="100%" height="100%"></svg>') is None
    assert infer_geometry("<html></html>") is None


def test_zero_sized_viewbox_is_unresolvable():
    assert infer_geometry('<svg viewBox="0 0 0 10"></svg>') is None


def test_stroke_width_is_not_width():
    meta = infer_geometry('<svg stroke-width="2" viewBox="0 0 10 10"></svg>')
    assert meta.width == PERCENT


def test_nested_svg_is_not_root():
    meta = infer_geometry('<svg viewBox="0 0 10 10"><svg width="5" height="5"></svg></svg>')
    assert meta.width == PERCENT
    assert root_tag('<svg viewBox="0 0 10 10"><svg width="5">') == '<svg viewBox="0 0 10 10">'


def test_parse_length():
    assert parse_length("24") == 24
    assert parse_length("24px") == 24
    assert parse_length("1.5") == 1.5
    assert parse_length("100%") is None
    assert parse_length("1em") is None
    assert parse_length(None) is None


def test_parse_viewbox_separators():
    vb = parse_viewbox("0,0, 24 12")
    assert (vb.minx, vb.miny, vb.width, vb.height) == (0, 0, 24, 12)
    assert parse_viewbox("0 0 24") is None
    assert parse_viewbox("a b c d") is None
