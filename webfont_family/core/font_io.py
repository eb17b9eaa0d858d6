"""
Font I/O utilities for locating font files and opening font bytes.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from io import BytesIO
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from webfont_family.config.paths import FONT_PATTERNS
from webfont_family.core.errors import UnreadableFontError


def iter_fonts(directory: Path, pattern: str = "*.ttf") -> Iterator[Path]:
    """
    Iterate over font files matching pattern, sorted by name.

    Args:
        directory: Directory to search
        pattern: Glob pattern to match

    Yields:
        Paths to matching font files
    """
    return iter(sorted(directory.glob(pattern)))


def collect_fonts(
    paths: Iterable[Path],
    patterns: Iterable[str] = FONT_PATTERNS,
) -> list[Path]:
    """
    Expand files and directories into a stable, de-duplicated font list.

    Files are kept in the order given; directories contribute every match
    of every pattern, sorted by name.
    """
    patterns = list(patterns)
    fonts: list[Path] = []
    for path in paths:
        if path.is_dir():
            found = {font for pattern in patterns for font in iter_fonts(path, pattern)}
            candidates = sorted(found)
        else:
            candidates = [path]
        for font in candidates:
            if font not in fonts:
                fonts.append(font)
    return fonts


@contextmanager
def load_font(data: bytes) -> Iterator[TTFont]:
    """
    Context manager opening a font from raw bytes.

    Args:
        data: TrueType or OpenType font binary

    Yields:
        TTFont instance

    Raises:
        UnreadableFontError: If data is not a font fontTools can open
    """
    try:
        font = TTFont(BytesIO(data))
    except TTLibError as e:
        raise UnreadableFontError(str(e)) from e
    try:
        yield font
    finally:
        font.close()
