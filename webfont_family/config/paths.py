"""
Filesystem defaults for the build commands.
"""

from pathlib import Path

DIST_DIR = Path("dist")

# Font files picked up when a directory is given instead of a file
FONT_PATTERNS = ["*.ttf", "*.otf"]

# Compressed output
WEB_FONT_EXTENSION = "woff2"
MANIFEST_EXTENSION = "json"
