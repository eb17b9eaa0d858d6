"""
WOFF2 compression of font binaries.
"""

import hashlib
import re
from io import BytesIO

from webfont_family.config.paths import WEB_FONT_EXTENSION
from webfont_family.core.font_io import load_font

_WHITESPACE = re.compile(r"\s+")


def compress_woff2(data: bytes) -> bytes:
    """
    Convert a TrueType or OpenType binary to WOFF2.

    Requires the brotli module (fonttools[woff]).
    """
    with load_font(data) as font:
        font.flavor = "woff2"
        buffer = BytesIO()
        font.save(buffer)
        return buffer.getvalue()


def web_font_filename(full_name: str, data: bytes) -> str:
    """
    Content-addressed file name, e.g. "NotoSansBold.<sha256>.woff2".

    Args:
        full_name: The font's full display name
        data: Compressed font bytes to hash
    """
    digest = hashlib.sha256(data).hexdigest()
    stem = _WHITESPACE.sub("", full_name)
    return f"{stem}.{digest}.{WEB_FONT_EXTENSION}"
