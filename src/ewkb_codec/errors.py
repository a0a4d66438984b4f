"""Exception types raised by the EWKB codec."""


class EWKBError(Exception):
    """Base class for all codec errors"""


class FormatError(EWKBError, ValueError):
    """
    The byte stream does not describe a valid geometry.

    Raised for truncated input, unknown type codes, bad byte-order markers,
    counts inconsistent with the remaining data and trailing garbage.

    Attributes:
        offset: Byte offset at which the problem was detected
        expected: What the decoder expected to find (optional)
        found: What it actually found (optional)
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        expected: object = None,
        found: object = None,
    ):
        self.offset = offset
        self.expected = expected
        self.found = found

        details: list[str] = []
        if offset is not None:
            details.append(f"offset {offset}")
        if expected is not None:
            details.append(f"expected {expected}")
        if found is not None:
            details.append(f"found {found}")
        if details:
            message = f"{message} ({', '.join(details)})"
        super().__init__(message)


class GeometryError(EWKBError, ValueError):
    """The geometry tree handed to the encoder cannot be represented"""
