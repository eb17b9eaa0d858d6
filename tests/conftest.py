"""Shared pytest fixtures."""

from io import BytesIO

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from webfont_family.core.records import FontMetadata


def build_font_bytes(
    family_name: str,
    style_name: str,
    full_name: str,
    code_points,
) -> bytes:
    """Build a minimal TrueType font mapping code_points to box glyphs."""
    names = {cp: f"uni{cp:04X}" for cp in sorted(code_points)}
    glyph_order = [".notdef", *names.values()]

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    glyph = pen.glyph()

    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap(names)
    fb.setupGlyf({name: glyph for name in glyph_order})
    fb.setupHorizontalMetrics({name: (600, 100) for name in glyph_order})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {
            "copyright": "Copyright 2020 Test Authors",
            "familyName": family_name,
            "styleName": style_name,
            "uniqueFontIdentifier": f"1.000;TEST;{full_name.replace(' ', '')}",
            "fullName": full_name,
            "psName": full_name.replace(" ", "-"),
            "version": "Version 1.000",
        }
    )
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
        sxHeight=500,
        sCapHeight=700,
    )
    fb.setupPost(underlinePosition=-100, underlineThickness=50)

    buffer = BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def temp_font_dir(tmp_path):
    """Create a temporary directory for font testing."""
    path = tmp_path / "fonts"
    path.mkdir()
    return path


@pytest.fixture
def font_factory(temp_font_dir):
    """Write synthetic fonts into temp_font_dir and return their paths."""

    def make(filename, family_name, style_name, full_name, code_points=range(0x41, 0x5B)):
        path = temp_font_dir / filename
        path.write_bytes(build_font_bytes(family_name, style_name, full_name, code_points))
        return path

    return make


@pytest.fixture
def noto_family(font_factory):
    """A three-font family in the Noto static naming scheme."""
    return [
        font_factory("NotoSans-Regular.ttf", "Noto Sans", "Regular", "Noto Sans"),
        font_factory("NotoSans-Bold.ttf", "Noto Sans", "Bold", "Noto Sans Bold"),
        font_factory(
            "NotoSans-CondensedSemiBold.ttf",
            "Noto Sans Condensed SemiBold",
            "Regular",
            "Noto Sans Condensed SemiBold",
        ),
    ]


@pytest.fixture
def make_metadata():
    """Build FontMetadata with sensible defaults."""

    def make(full_name, family_name="Noto Sans", code_points=(0x41, 0x42, 0x43), **fields):
        values = {
            "postscript_name": full_name.replace(" ", "-"),
            "full_name": full_name,
            "family_name": family_name,
            "subfamily_name": "Regular",
            "copyright": "Copyright 2020 Test Authors",
            "version": 1.0,
            "units_per_em": 1000,
            "ascent": 800,
            "descent": -200,
            "line_gap": 0,
            "underline_position": -100,
            "underline_thickness": 50,
            "italic_angle": 0.0,
            "cap_height": 700,
            "x_height": 500,
            "num_glyphs": len(code_points) + 1,
            "code_points": frozenset(code_points),
        }
        values.update(fields)
        return FontMetadata(**values)

    return make


@pytest.fixture
def font_bytes():
    """Expose build_font_bytes to tests."""
    return build_font_bytes
