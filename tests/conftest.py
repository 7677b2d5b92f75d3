"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgmint.config import Settings
from svgmint.models.record import OutputRecord, ViewBox


# Sample SVGs

FILL_SVG = '<svg width="24" height="24"><rect id="a" fill="{{red|fillColor}}"/></svg>'

RADIUS_SVG = '<svg viewBox="0 0 100 50"><circle r="{{5|radius}}"/></svg>'

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48">
  <style>
    #dot { fill: {{#f00|colors.dot}}; }
    .ring { stroke: url(#grad); stroke-width: {{2|stroke}}; }
  </style>
  <defs><linearGradient id="grad"/></defs>
  <circle id="dot" class="ring" r="4"/>
  <script>alert(1)</script>
</svg>'''

GRADIENT_SVG = '''<svg width="10" height="10">
  <defs>
    <linearGradient id="a"/>
    <linearGradient id="a2"/>
  </defs>
  <rect fill="url(#a)"/>
  <rect fill="url(#a2)"/>
  <use href="#a2"/>
  <use xlink:href="#a"/>
</svg>'''

BAD_CSS_SVG = '<svg width="10" height="10"><style>.a{fill:red;{}</style><rect class="a"/></svg>'

NO_GEOMETRY_SVG = '<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0L10 10"/></svg>'

NOT_SVG = "<html><body>not an image</body></html>"

MALFORMED_SVG = '<svg width="10" height="10"><rect></svg>'

UUID_ONLY_SVG = '<svg width="8" height="8"><rect id="r" data-instance="{{0|uuid}}"/></svg>'


# Records as the assembler hands them to blueprints

DYNAMIC_RECORD = OutputRecord(
    name="icon",
    path="svg/icon.svg",
    svg_hash="abc123",
    svg='<rect fill="{{fillColor}}"/>',
    width=24,
    height=24,
    context_interface="{uuid:number;fillColor:string}",
    context_defaults={"fillColor": "red", "uuid": 0},
)

STATIC_RECORD = OutputRecord(
    name="static-star",
    path="svg/static-star.svg",
    svg_hash="def456",
    svg="<path d='M0 0'/>",
    width=10,
    height=10,
    view_box=ViewBox(width=10, height=10),
)


def write_svg_tree(root, files: dict[str, str]) -> None:
    """Write ``{relative path: content}`` below ``root``."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def fill_svg() -> str:
    return FILL_SVG


@pytest.fixture
def radius_svg() -> str:
    return RADIUS_SVG


@pytest.fixture
def styled_svg() -> str:
    return STYLED_SVG


@pytest.fixture
def svg_dir(tmp_path):
    """Input tree with valid, duplicate-named and rejected files."""
    root = tmp_path / "svg"
    write_svg_tree(
        root,
        {
            "fill.svg": FILL_SVG,
            "radius.svg": RADIUS_SVG,
            "styled.svg": STYLED_SVG,
            "a/icon.svg": CIRCLE_SVG,
            "b/icon.svg": CIRCLE_SVG,
            "bad.svg": BAD_CSS_SVG,
            "nogeo.svg": NO_GEOMETRY_SVG,
            "fake.svg": NOT_SVG,
            "notes.txt": "not an svg",
        },
    )
    return root


@pytest.fixture
def settings(tmp_path, svg_dir) -> Settings:
    return Settings(input=str(svg_dir), output=str(tmp_path / "out"))
