"""
Stylesheet hierarchy for one font family.

Faces are grouped by stretch, then weight:

    noto-sans.css                      imports every stretch stylesheet
      noto-sans-normal.css             imports every weight stylesheet
        noto-sans-normal-400.css       @font-face rules
        noto-sans-normal-700.css
      noto-sans-condensed.css
        noto-sans-condensed-600.css

plus noto-sans.json, the manifest describing every face.
"""

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from webfont_family.config.faces import FontStretch, FontWeight
from webfont_family.config.paths import MANIFEST_EXTENSION
from webfont_family.core.classify import base_name, classify, infer_family_name
from webfont_family.core.errors import EmptyCoverageError
from webfont_family.core.ranges import compress, render_list
from webfont_family.core.records import (
    CSSFontFace,
    CSSFontFile,
    FontFaceRecord,
    FontMetadata,
)
from webfont_family.render.css import render_faces, render_imports


@dataclass
class WeightBucket:
    weight: FontWeight
    faces: list[FontFaceRecord] = field(default_factory=list)


@dataclass
class StretchBucket:
    stretch: FontStretch
    weights: list[WeightBucket] = field(default_factory=list)

    def bucket(self, weight: FontWeight) -> WeightBucket:
        for bucket in self.weights:
            if bucket.weight == weight:
                return bucket
        bucket = WeightBucket(weight)
        self.weights.append(bucket)
        return bucket

    def ordered_weights(self) -> list[WeightBucket]:
        """Weight buckets from lightest to heaviest."""
        return sorted(self.weights, key=lambda b: b.weight)


@dataclass
class VariantTree:
    """Faces grouped by stretch (first seen order) and weight."""

    stretches: list[StretchBucket] = field(default_factory=list)

    @classmethod
    def from_records(cls, records: Iterable[FontFaceRecord]) -> "VariantTree":
        tree = cls()
        for record in records:
            tree.add(record)
        return tree

    def add(self, record: FontFaceRecord) -> None:
        attributes = record.attributes
        self.stretch(attributes.stretch).bucket(attributes.weight).faces.append(record)

    def stretch(self, stretch: FontStretch) -> StretchBucket:
        for bucket in self.stretches:
            if bucket.stretch == stretch:
                return bucket
        bucket = StretchBucket(stretch)
        self.stretches.append(bucket)
        return bucket


@dataclass(frozen=True)
class StylesheetBundle:
    """Rendered output for one family, keyed by file name."""

    family: str
    base_name: str
    stylesheets: dict[str, str]
    manifest: str

    @property
    def root_stylesheet(self) -> str:
        return root_stylesheet_name(self.base_name)

    @property
    def manifest_name(self) -> str:
        return f"{self.base_name}.{MANIFEST_EXTENSION}"

    def files(self) -> dict[str, str]:
        """Every text file of the bundle, stylesheets first."""
        return {**self.stylesheets, self.manifest_name: self.manifest}


def root_stylesheet_name(base: str) -> str:
    return f"{base}.css"


def weight_stylesheet_name(base: str, stretch: FontStretch, weight: FontWeight) -> str:
    return f"{base}-{stretch.value}-{int(weight)}.css"


def stretch_stylesheet_name(base: str, stretch: FontStretch) -> str:
    return f"{base}-{stretch.value}.css"


def build_face_records(
    fonts: Sequence[tuple[FontMetadata, Sequence[CSSFontFile]]],
) -> tuple[str, list[FontFaceRecord]]:
    """
    Classify a batch of fonts belonging to one family.

    Args:
        fonts: Inspector metadata and src entries for each font, in a
            stable order

    Returns:
        The inferred family name and one record per font, in input order
    """
    family = infer_family_name(metadata.family_name for metadata, _ in fonts)

    records = []
    for metadata, sources in fonts:
        if not metadata.code_points:
            raise EmptyCoverageError(metadata.full_name)
        ranges = tuple(compress(metadata.code_points))
        css = CSSFontFace(
            font_family=family,
            unicode_range=render_list(ranges),
            sources=tuple(sources),
            attributes=classify(family, metadata.full_name),
        )
        records.append(FontFaceRecord(metadata, ranges, css))
    return family, records


def render_manifest(records: Iterable[FontFaceRecord]) -> str:
    """JSON array with one entry per face, two-space indented."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)


def build_stylesheets(family: str, records: Sequence[FontFaceRecord]) -> StylesheetBundle:
    """
    Render the stylesheet tree and manifest for a classified family.

    Output is identical for identical input order.
    """
    base = base_name(family)
    tree = VariantTree.from_records(records)

    stylesheets: dict[str, str] = {}
    stretch_files = []
    for stretch_bucket in tree.stretches:
        weight_files = []
        for weight_bucket in stretch_bucket.ordered_weights():
            name = weight_stylesheet_name(base, stretch_bucket.stretch, weight_bucket.weight)
            stylesheets[name] = render_faces(r.css for r in weight_bucket.faces)
            weight_files.append(name)

        name = stretch_stylesheet_name(base, stretch_bucket.stretch)
        stylesheets[name] = render_imports(weight_files)
        stretch_files.append(name)

    stylesheets[root_stylesheet_name(base)] = render_imports(stretch_files)

    return StylesheetBundle(
        family=family,
        base_name=base,
        stylesheets=stylesheets,
        manifest=render_manifest(records),
    )
