"""
Errors raised while turning a font family into web font stylesheets.

Each one is fatal to the family being built.
"""


class FontFamilyError(Exception):
    """Base class for family build failures."""


class NamingMismatchError(FontFamilyError):
    """A font's full name does not start with the family name."""

    def __init__(self, family: str, full_name: str):
        self.family = family
        self.full_name = full_name
        super().__init__(
            f"Unrecognized font name {full_name!r}, does not start with {family!r}"
        )


class UnrecognizedDiscriminatorError(FontFamilyError):
    """A style word in a font's full name has no known meaning."""

    def __init__(self, token: str, full_name: str):
        self.token = token
        self.full_name = full_name
        super().__init__(f"Unrecognized font discriminator {token!r} in {full_name!r}")


class CodePointOverflowError(FontFamilyError):
    """A code point does not fit in six hex digits."""

    def __init__(self, code_point: int):
        self.code_point = code_point
        super().__init__(f"Unsupported code point {code_point:x}")


class EmptyCoverageError(FontFamilyError):
    """A font maps no code points at all."""

    def __init__(self, full_name: str | None = None):
        self.full_name = full_name
        where = f" in {full_name!r}" if full_name else ""
        super().__init__(f"No code points covered{where}")


class MissingFamilyNameError(FontFamilyError):
    """No usable family name in the batch."""

    def __init__(self):
        super().__init__("Fonts have no family name")


class UnreadableFontError(FontFamilyError):
    """Bytes that are not a TrueType or OpenType font."""

    def __init__(self, reason: str, path=None):
        self.reason = reason
        self.path = path
        where = f"{path}: " if path else ""
        super().__init__(f"{where}{reason}")
