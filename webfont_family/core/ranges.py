"""
Unicode coverage as CSS unicode-range values.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from webfont_family.core.errors import CodePointOverflowError, EmptyCoverageError

# unicode-range values are written as at most six hex digits
MAX_HEX_DIGITS = 6


@dataclass(frozen=True)
class CodePointRange:
    """Inclusive run of consecutive code points."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid code point range {self.start}-{self.end}")

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}


def compress(points: Iterable[int]) -> list[CodePointRange]:
    """
    Collapse code points into the shortest list of ascending ranges.

    Args:
        points: Code points in any order, duplicates allowed

    Returns:
        Ranges where no two are overlapping or adjacent

    Raises:
        EmptyCoverageError: If no points are given
    """
    ordered = sorted(set(points))
    if not ordered:
        raise EmptyCoverageError()
    if ordered[0] < 0:
        raise ValueError(f"Negative code point {ordered[0]}")

    ranges = []
    start = end = ordered[0]
    for point in ordered[1:]:
        if point == end + 1:
            end = point
        else:
            ranges.append(CodePointRange(start, end))
            start = end = point
    ranges.append(CodePointRange(start, end))
    return ranges


def format_code_point(point: int) -> str:
    """Lowercase hex without leading zeros, e.g. 0x41 -> "41"."""
    digits = f"{point:06x}"
    if len(digits) > MAX_HEX_DIGITS:
        raise CodePointOverflowError(point)
    return digits.lstrip("0") or "0"


def render_token(code_range: CodePointRange) -> str:
    """Render a range as U+HEX or U+HEX-HEX."""
    start = format_code_point(code_range.start)
    if code_range.start == code_range.end:
        return f"U+{start}"
    return f"U+{start}-{format_code_point(code_range.end)}"


def render_list(ranges: Sequence[CodePointRange]) -> str:
    """Render ranges as one unicode-range declaration value."""
    return ", ".join(render_token(r) for r in ranges)
