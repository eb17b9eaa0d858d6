"""
Face classification from font names.
"""

import re
from collections.abc import Iterable

from webfont_family.config.faces import DEFAULT_ATTRIBUTES, DISCRIMINATORS, FaceAttributes
from webfont_family.core.errors import (
    MissingFamilyNameError,
    NamingMismatchError,
    UnrecognizedDiscriminatorError,
)

_WHITESPACE = re.compile(r"\s+")


def name_tokens(family: str, full_name: str) -> list[str]:
    """
    Split the style part of a full name into words.

    "Noto Sans Condensed SemiBold" with family "Noto Sans" gives
    ["Condensed", "SemiBold"].

    Raises:
        NamingMismatchError: If full_name does not start with family
    """
    if not full_name.startswith(family):
        raise NamingMismatchError(family, full_name)

    remainder = full_name[len(family) :].strip()
    if not remainder:
        return []
    return _WHITESPACE.split(remainder)


def classify(family: str, full_name: str) -> FaceAttributes:
    """
    Derive style, weight and stretch from a font's full name.

    Words are applied left to right; a later word on the same axis
    replaces an earlier one.

    Args:
        family: Family name shared by the whole batch
        full_name: The font's full display name

    Returns:
        Face attributes, defaults for the plain family name

    Raises:
        NamingMismatchError: If full_name does not start with family
        UnrecognizedDiscriminatorError: If a word is not in DISCRIMINATORS
    """
    attributes = DEFAULT_ATTRIBUTES
    for token in name_tokens(family, full_name):
        discriminator = DISCRIMINATORS.get(token)
        if discriminator is None:
            raise UnrecognizedDiscriminatorError(token, full_name)
        attributes = discriminator.apply(attributes)
    return attributes


def infer_family_name(family_names: Iterable[str]) -> str:
    """
    Pick the batch's family name: the shortest one, first seen on ties.

    Assumes the base family's own name carries no modifier suffix while
    its variants do (e.g. "Noto Sans" vs "Noto Sans Condensed").
    """
    shortest = None
    for name in family_names:
        if shortest is None or len(name) < len(shortest):
            shortest = name
    if shortest is None:
        raise ValueError("Cannot infer a family name from an empty batch")

    family = shortest.strip()
    if not family:
        raise MissingFamilyNameError()
    return family


def base_name(family: str) -> str:
    """File name stem for a family, e.g. "Noto Sans" -> "noto-sans"."""
    return _WHITESPACE.sub("-", family).lower()
