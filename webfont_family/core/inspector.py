"""
Font inspector: metadata and Unicode coverage of a font binary.
"""

from fontTools.ttLib import TTFont

from webfont_family.core.errors import UnreadableFontError
from webfont_family.core.font_io import load_font
from webfont_family.core.records import FontMetadata

# Name table IDs
NAME_ID_COPYRIGHT = 0
NAME_ID_FAMILY = 1
NAME_ID_SUBFAMILY = 2
NAME_ID_FULL_NAME = 4
NAME_ID_POSTSCRIPT = 6


def get_name(font: TTFont, name_id: int) -> str:
    """Best available string for a name ID, empty if missing."""
    if "name" not in font:
        return ""
    return font["name"].getDebugName(name_id) or ""


def get_code_points(font: TTFont) -> frozenset[int]:
    """Code points mapped by the font's best Unicode cmap."""
    cmap = font.getBestCmap()
    return frozenset(cmap) if cmap else frozenset()


def describe_font(font: TTFont) -> FontMetadata:
    """Collect inspector metadata from an open font."""
    head = font["head"]
    hhea = font["hhea"]
    post = font["post"]
    os2 = font["OS/2"] if "OS/2" in font else None

    return FontMetadata(
        postscript_name=get_name(font, NAME_ID_POSTSCRIPT),
        full_name=get_name(font, NAME_ID_FULL_NAME),
        family_name=get_name(font, NAME_ID_FAMILY),
        subfamily_name=get_name(font, NAME_ID_SUBFAMILY),
        copyright=get_name(font, NAME_ID_COPYRIGHT),
        version=round(float(head.fontRevision), 5),
        units_per_em=head.unitsPerEm,
        ascent=hhea.ascent,
        descent=hhea.descent,
        line_gap=hhea.lineGap,
        underline_position=post.underlinePosition,
        underline_thickness=post.underlineThickness,
        italic_angle=float(post.italicAngle),
        # sCapHeight and sxHeight only exist from OS/2 version 2
        cap_height=getattr(os2, "sCapHeight", 0),
        x_height=getattr(os2, "sxHeight", 0),
        num_glyphs=font["maxp"].numGlyphs,
        code_points=get_code_points(font),
    )


def inspect_font(data: bytes) -> FontMetadata:
    """Inspect a TrueType or OpenType font binary."""
    with load_font(data) as font:
        try:
            return describe_font(font)
        except KeyError as e:
            # TTFont reports a missing table as a KeyError
            raise UnreadableFontError(f"Missing table {e}") from e
