"""Tests for face axis definitions and the discriminator table."""

import pytest

from webfont_family.config.faces import (
    DEFAULT_ATTRIBUTES,
    DISCRIMINATORS,
    Discriminator,
    FaceAttributes,
    FaceAxis,
    FontStretch,
    FontStyle,
    FontWeight,
)


def test_weight_enum_values():
    """Test FontWeight covers 100..900 in steps of 100."""
    assert [int(w) for w in FontWeight] == list(range(100, 1000, 100))


def test_default_attributes():
    """Defaults are the CSS initial values."""
    assert DEFAULT_ATTRIBUTES == FaceAttributes(
        FontStyle.NORMAL, FontWeight.REGULAR, FontStretch.NORMAL
    )


def test_discriminator_rejects_wrong_axis_value():
    """A weight token cannot carry a stretch value."""
    with pytest.raises(TypeError):
        Discriminator(FaceAxis.WEIGHT, FontStretch.CONDENSED)


def test_discriminator_apply_touches_one_axis():
    """Applying a token only changes its own axis."""
    start = FaceAttributes(style=FontStyle.ITALIC, stretch=FontStretch.CONDENSED)
    result = DISCRIMINATORS["Bold"].apply(start)
    assert result == FaceAttributes(FontStyle.ITALIC, FontWeight.BOLD, FontStretch.CONDENSED)
    assert start.weight == FontWeight.REGULAR


def test_discriminator_table():
    """Test the fixed name vocabulary."""
    assert DISCRIMINATORS["Italic"] == Discriminator(FaceAxis.STYLE, FontStyle.ITALIC)
    assert DISCRIMINATORS["Thin"].value == 100
    assert DISCRIMINATORS["ExtraLight"].value == 200
    assert DISCRIMINATORS["Light"].value == 300
    assert DISCRIMINATORS["Regular"].value == 400
    assert DISCRIMINATORS["Medium"].value == 500
    assert DISCRIMINATORS["SemiBold"].value == 600
    assert DISCRIMINATORS["Bold"].value == 700
    assert DISCRIMINATORS["ExtraBold"].value == 800
    assert DISCRIMINATORS["Black"].value == 900
    assert DISCRIMINATORS["SemiCondensed"].value == FontStretch.SEMI_CONDENSED
    assert DISCRIMINATORS["Condensed"].value == FontStretch.CONDENSED
    assert DISCRIMINATORS["ExtraCondensed"].value == FontStretch.EXTRA_CONDENSED
    assert len(DISCRIMINATORS) == 13


def test_expanded_widths_have_no_token():
    """Expanded stretches exist but no name word selects them."""
    stretches = {d.value for d in DISCRIMINATORS.values() if d.axis == FaceAxis.STRETCH}
    assert FontStretch.EXPANDED not in stretches
    assert FontStretch.EXPANDED.value == "expanded"
