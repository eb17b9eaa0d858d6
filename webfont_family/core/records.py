"""
Value types passed between the inspector, the classifier and the renderers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from webfont_family.config.faces import (
    FaceAttributes,
    FontStretch,
    FontStyle,
    FontWeight,
)
from webfont_family.core.ranges import CodePointRange


class FontFormat(str, Enum):
    """Values accepted by format() in a @font-face src."""

    WOFF = "woff"
    WOFF2 = "woff2"
    TRUETYPE = "truetype"
    OPENTYPE = "opentype"
    EMBEDDED_OPENTYPE = "embedded-opentype"
    SVG = "svg"


@dataclass(frozen=True)
class FontMetadata:
    """Everything the inspector reports about one font binary."""

    postscript_name: str
    full_name: str
    family_name: str
    subfamily_name: str
    copyright: str
    version: float
    units_per_em: int
    ascent: int
    descent: int
    line_gap: int
    underline_position: int
    underline_thickness: int
    italic_angle: float
    cap_height: int
    x_height: int
    num_glyphs: int
    code_points: frozenset[int] = field(default_factory=frozenset, repr=False)

    def to_dict(self) -> dict[str, Any]:
        """Manifest fields, without the code point set."""
        return {
            "postscriptName": self.postscript_name,
            "fullName": self.full_name,
            "familyName": self.family_name,
            "subfamilyName": self.subfamily_name,
            "copyright": self.copyright,
            "version": self.version,
            "unitsPerEm": self.units_per_em,
            "ascent": self.ascent,
            "descent": self.descent,
            "lineGap": self.line_gap,
            "underlinePosition": self.underline_position,
            "underlineThickness": self.underline_thickness,
            "italicAngle": self.italic_angle,
            "capHeight": self.cap_height,
            "xHeight": self.x_height,
            "numGlyphs": self.num_glyphs,
        }


@dataclass(frozen=True)
class CSSFontFile:
    """One entry of a @font-face src list."""

    source: str
    format: FontFormat = FontFormat.WOFF2

    def to_dict(self) -> dict[str, str]:
        return {"source": self.source, "format": self.format.value}


@dataclass(frozen=True)
class CSSFontFace:
    """The descriptors of one @font-face rule."""

    font_family: str
    unicode_range: str
    sources: tuple[CSSFontFile, ...] = ()
    attributes: FaceAttributes = FaceAttributes()

    @property
    def font_style(self) -> FontStyle:
        return self.attributes.style

    @property
    def font_weight(self) -> FontWeight:
        return self.attributes.weight

    @property
    def font_stretch(self) -> FontStretch:
        return self.attributes.stretch

    def to_dict(self) -> dict[str, Any]:
        return {
            "fontFamily": self.font_family,
            "fontStyle": self.font_style.value,
            "fontWeight": int(self.font_weight),
            "fontStretch": self.font_stretch.value,
            "unicodeRange": self.unicode_range,
            "source": [src.to_dict() for src in self.sources],
        }


@dataclass(frozen=True)
class FontFaceRecord:
    """A classified font: its metadata, coverage and CSS face."""

    metadata: FontMetadata
    ranges: tuple[CodePointRange, ...]
    css: CSSFontFace

    @property
    def attributes(self) -> FaceAttributes:
        return self.css.attributes

    def to_dict(self) -> dict[str, Any]:
        """Manifest entry for this face."""
        entry = self.metadata.to_dict()
        entry["ranges"] = [r.to_dict() for r in self.ranges]
        entry["css"] = self.css.to_dict()
        return entry
