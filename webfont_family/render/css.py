"""
@font-face rule and @import rendering.
"""

from collections.abc import Iterable

from webfont_family.config.faces import DEFAULT_ATTRIBUTES
from webfont_family.core.records import CSSFontFace

SOURCE_SEPARATOR = ",\n      "


def render_sources(face: CSSFontFace) -> str:
    """Render the src descriptor value."""
    return SOURCE_SEPARATOR.join(
        f'url({src.source}) format("{src.format.value}")' for src in face.sources
    )


def render_face(face: CSSFontFace) -> str:
    """
    Render one @font-face rule.

    font-style, font-weight and font-stretch are only written when they
    differ from the CSS initial value.
    """
    lines = [
        "@font-face {",
        "  font-display: swap;",
        f"  font-family: '{face.font_family}';",
        f"  unicode-range: {face.unicode_range};",
        f"  src: {render_sources(face)};",
    ]

    if face.font_style != DEFAULT_ATTRIBUTES.style:
        lines.append(f"  font-style: {face.font_style.value};")
    if face.font_weight != DEFAULT_ATTRIBUTES.weight:
        lines.append(f"  font-weight: {int(face.font_weight)};")
    if face.font_stretch != DEFAULT_ATTRIBUTES.stretch:
        lines.append(f"  font-stretch: {face.font_stretch.value};")

    lines.append("}")
    return "\n".join(lines) + "\n"


def render_faces(faces: Iterable[CSSFontFace]) -> str:
    """Render several rules separated by a blank line."""
    return "\n".join(render_face(face) for face in faces)


def render_imports(filenames: Iterable[str]) -> str:
    """One @import line per stylesheet."""
    return "".join(f"@import '{name}';\n" for name in filenames)
