"""
Main CLI entry point for webfont-family.
"""

import json
import sys
from pathlib import Path

import click

from webfont_family import __version__
from webfont_family.config.paths import DIST_DIR, FONT_PATTERNS


@click.group()
@click.version_option(version=__version__)
def cli():
    """Web font distribution builder."""
    pass


@cli.command()
@click.argument(
    "paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option(
    "--out",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DIST_DIR,
    show_default=True,
    help="Directory receiving the family's output directory.",
)
@click.option(
    "--pattern",
    "patterns",
    multiple=True,
    default=FONT_PATTERNS,
    show_default=True,
    help="Glob pattern for fonts inside directories. Repeatable.",
)
def build(paths, out_dir, patterns):
    """Build stylesheets, manifest and WOFF2 files for one family."""
    from webfont_family.core.errors import FontFamilyError
    from webfont_family.pipeline.runner import build_family
    from webfont_family.utils.logging import logger

    try:
        target = build_family(paths, out_dir, patterns)
    except (FontFamilyError, OSError, ValueError) as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)

    if target is None:
        sys.exit(1)


@cli.command("build-all")
@click.argument(
    "directories",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--out",
    "out_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DIST_DIR,
    show_default=True,
    help="Directory receiving one output directory per family.",
)
def build_all(directories, out_dir):
    """Build one family per directory."""
    from webfont_family.pipeline.runner import run_all

    run_all(list(directories), out_dir)


@cli.command()
@click.argument("font", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(font):
    """Print a font's metadata and coverage as JSON."""
    from webfont_family.core.errors import FontFamilyError
    from webfont_family.core.inspector import inspect_font
    from webfont_family.core.ranges import compress, render_list
    from webfont_family.utils.logging import logger

    try:
        metadata = inspect_font(font.read_bytes())
        unicode_range = render_list(compress(metadata.code_points))
    except FontFamilyError as e:
        logger.error(f"{font.name}: {e}")
        sys.exit(1)

    info = metadata.to_dict()
    info["unicodeRange"] = unicode_range
    click.echo(json.dumps(info, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
