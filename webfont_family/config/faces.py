"""
CSS font-face axis definitions and the name-token vocabulary.

Maps the style words found in a font's full name (e.g. "Condensed SemiBold
Italic") to the CSS descriptor they select.
"""

from dataclasses import dataclass, replace
from enum import Enum, IntEnum


class FontStyle(str, Enum):
    """CSS font-style values."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class FontWeight(IntEnum):
    """CSS font-weight values matching OpenType usWeightClass."""

    THIN = 100
    EXTRALIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700
    EXTRABOLD = 800
    BLACK = 900


class FontStretch(str, Enum):
    """CSS font-stretch keywords."""

    ULTRA_CONDENSED = "ultra-condensed"
    EXTRA_CONDENSED = "extra-condensed"
    CONDENSED = "condensed"
    SEMI_CONDENSED = "semi-condensed"
    NORMAL = "normal"
    SEMI_EXPANDED = "semi-expanded"
    EXPANDED = "expanded"
    EXTRA_EXPANDED = "extra-expanded"
    ULTRA_EXPANDED = "ultra-expanded"


class FaceAxis(str, Enum):
    """The three descriptors a name token can set."""

    STYLE = "style"
    WEIGHT = "weight"
    STRETCH = "stretch"


AXIS_TYPES = {
    FaceAxis.STYLE: FontStyle,
    FaceAxis.WEIGHT: FontWeight,
    FaceAxis.STRETCH: FontStretch,
}


@dataclass(frozen=True)
class FaceAttributes:
    """Style, weight and stretch of one face."""

    style: FontStyle = FontStyle.NORMAL
    weight: FontWeight = FontWeight.REGULAR
    stretch: FontStretch = FontStretch.NORMAL


DEFAULT_ATTRIBUTES = FaceAttributes()


@dataclass(frozen=True)
class Discriminator:
    """
    A name token's effect: one value on one axis.

    The value must belong to the enum of its axis, so a token can never
    touch more than one descriptor.
    """

    axis: FaceAxis
    value: FontStyle | FontWeight | FontStretch

    def __post_init__(self):
        expected = AXIS_TYPES[self.axis]
        if not isinstance(self.value, expected):
            raise TypeError(
                f"{self.axis.value} discriminator needs a {expected.__name__}, "
                f"got {self.value!r}"
            )

    def apply(self, attributes: FaceAttributes) -> FaceAttributes:
        """Return attributes with this discriminator's axis replaced."""
        return replace(attributes, **{self.axis.value: self.value})


def _style(value: FontStyle) -> Discriminator:
    return Discriminator(FaceAxis.STYLE, value)


def _weight(value: FontWeight) -> Discriminator:
    return Discriminator(FaceAxis.WEIGHT, value)


def _stretch(value: FontStretch) -> Discriminator:
    return Discriminator(FaceAxis.STRETCH, value)


# Expanded widths have no token yet
DISCRIMINATORS: dict[str, Discriminator] = {
    "Italic": _style(FontStyle.ITALIC),
    "Thin": _weight(FontWeight.THIN),
    "ExtraLight": _weight(FontWeight.EXTRALIGHT),
    "Light": _weight(FontWeight.LIGHT),
    "Regular": _weight(FontWeight.REGULAR),
    "Medium": _weight(FontWeight.MEDIUM),
    "SemiBold": _weight(FontWeight.SEMIBOLD),
    "Bold": _weight(FontWeight.BOLD),
    "ExtraBold": _weight(FontWeight.EXTRABOLD),
    "Black": _weight(FontWeight.BLACK),
    "SemiCondensed": _stretch(FontStretch.SEMI_CONDENSED),
    "Condensed": _stretch(FontStretch.CONDENSED),
    "ExtraCondensed": _stretch(FontStretch.EXTRA_CONDENSED),
}
