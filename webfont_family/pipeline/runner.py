"""
Family build orchestration.

Reads local font files, compresses them, renders the stylesheet tree and
writes one output directory per family.
"""

import shutil
import sys
import uuid
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from webfont_family.config.paths import DIST_DIR, FONT_PATTERNS
from webfont_family.core.errors import UnreadableFontError
from webfont_family.core.font_io import collect_fonts
from webfont_family.core.inspector import inspect_font
from webfont_family.core.records import CSSFontFile, FontFormat, FontMetadata
from webfont_family.core.webfont import compress_woff2, web_font_filename
from webfont_family.pipeline.hierarchy import (
    StylesheetBundle,
    build_face_records,
    build_stylesheets,
)
from webfont_family.utils.logging import logger


@dataclass(frozen=True)
class WebFont:
    """A compressed font ready to be written next to its stylesheets."""

    metadata: FontMetadata
    filename: str
    data: bytes

    @property
    def source(self) -> CSSFontFile:
        return CSSFontFile(self.filename, FontFormat.WOFF2)


def prepare_font(font_path: Path) -> WebFont:
    """Inspect and compress one font file."""
    raw = font_path.read_bytes()
    try:
        metadata = inspect_font(raw)
        data = compress_woff2(raw)
    except UnreadableFontError as e:
        raise UnreadableFontError(e.reason, font_path) from e
    filename = web_font_filename(metadata.full_name, data)
    logger.info(f"{font_path.name} -> {filename}")
    return WebFont(metadata, filename, data)


def family_directory(bundle: StylesheetBundle, out_dir: Path) -> Path:
    """
    The family's output directory, which must be a direct child of out_dir.

    Raises:
        ValueError: If the base name would resolve elsewhere
    """
    target = out_dir / bundle.base_name
    unsafe = bundle.base_name in ("", "..")
    if unsafe or target.parent != out_dir or target.name != bundle.base_name:
        raise ValueError(f"Refusing to write family {bundle.family!r} outside {out_dir}")
    return target


def write_family(bundle: StylesheetBundle, fonts: Sequence[WebFont], out_dir: Path) -> Path:
    """
    Write a family into out_dir/<base name>/.

    Files go to a staging sibling directory that replaces the target
    only once everything is written.

    Returns:
        The family's output directory
    """
    target = family_directory(bundle, out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    staging = out_dir / f".{bundle.base_name}-{uuid.uuid4().hex}"
    staging.mkdir()

    try:
        for font in fonts:
            (staging / font.filename).write_bytes(font.data)
        for name, text in bundle.files().items():
            (staging / name).write_text(text, encoding="utf-8")
            logger.info(f"Created {name}")

        if target.exists():
            shutil.rmtree(target)
        staging.rename(target)
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise

    return target


def build_family(
    paths: Iterable[Path],
    out_dir: Path = DIST_DIR,
    patterns: Iterable[str] = FONT_PATTERNS,
) -> Path | None:
    """
    Build the web font distribution for one family.

    Args:
        paths: Font files, or directories to scan with patterns
        out_dir: Parent of the family's output directory
        patterns: Glob patterns used for directories

    Returns:
        The family's output directory, or None if no fonts were found
    """
    font_paths = collect_fonts(paths, patterns)
    if not font_paths:
        logger.warning("No font files found")
        return None

    logger.info(f"Processing {len(font_paths)} fonts")
    fonts = [prepare_font(path) for path in font_paths]

    family, records = build_face_records([(f.metadata, [f.source]) for f in fonts])
    logger.info(f"Family: {family}")
    for record in records:
        attributes = record.attributes
        logger.info(
            f"  {record.metadata.full_name}: {attributes.style.value} "
            f"{int(attributes.weight)} {attributes.stretch.value}"
        )

    bundle = build_stylesheets(family, records)
    target = write_family(bundle, fonts, out_dir)
    logger.info(f"Created {target}, entry point {bundle.root_stylesheet}")
    return target


def run_all(directories: Sequence[Path], out_dir: Path = DIST_DIR) -> None:
    """
    Build one family per directory, stopping at the first failure.

    Args:
        directories: One directory of font files per family
        out_dir: Parent of the family output directories
    """
    logger.info(f"Building {len(directories)} families")

    for i, directory in enumerate(directories, 1):
        logger.info(f"[{i}/{len(directories)}] Building {directory}")
        try:
            target = build_family([directory], out_dir)
        except Exception as e:
            logger.error(f"{directory} failed: {e}")
            sys.exit(1)

        if target is None:
            logger.error(f"{directory} failed: no font files")
            sys.exit(1)
        logger.info(f"{directory} completed")

    logger.info("All families built successfully")
