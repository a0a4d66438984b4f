"""
Type code resolution for EWKB geometry headers.

The same logical type space is written two ways depending on SRID presence:

    - SRID != 0 (extended form): kind | Z_FLAG | M_FLAG | SRID_FLAG, followed
      by a 4-byte SRID word
    - SRID == 0 (ISO form): kind + 1000 (Z), 2000 (M) or 3000 (ZM), with no
      SRID word

Decoding accepts both forms regardless of which one the writer picked.
"""

from typing import NamedTuple

from .errors import FormatError
from .geometry import Dimensionality, GeometryKind, Header

Z_FLAG = 0x80000000
M_FLAG = 0x40000000
SRID_FLAG = 0x20000000
FLAG_MASK = Z_FLAG | M_FLAG | SRID_FLAG

ISO_OFFSET_STEP = 1000


class TypeCode(NamedTuple):
    """A decoded type code word"""

    kind: GeometryKind
    dimensionality: Dimensionality
    has_srid: bool


def encode_type_code(kind: GeometryKind, header: Header) -> tuple[int, int | None]:
    """
    Compute the type code word for a geometry header.

    Args:
        kind: Geometry kind number
        header: The geometry's header

    Returns:
        Tuple of (type code, SRID to write or None when no SRID word follows)

    Example:
        >>> encode_type_code(GeometryKind.POINT, Header(Dimensionality.XYZM, 27700))
        (3758096385, 27700)
        >>> encode_type_code(GeometryKind.POINT, Header(Dimensionality.XYZ, 0))
        (1001, None)
    """
    dims = header.dimensionality
    if header.srid != 0:
        code = int(kind) | SRID_FLAG
        if dims.has_z:
            code |= Z_FLAG
        if dims.has_m:
            code |= M_FLAG
        return code, header.srid
    return int(kind) + int(dims), None


def decode_type_code(code: int, offset: int | None = None) -> TypeCode:
    """
    Interpret a type code word read from the stream.

    Args:
        code: The unsigned 32-bit type code
        offset: Byte offset of the word, used for error reporting

    Returns:
        TypeCode with kind, dimensionality and whether an SRID word follows

    Raises:
        FormatError: If no geometry kind can be recovered from the code
    """
    has_z = bool(code & Z_FLAG)
    has_m = bool(code & M_FLAG)
    has_srid = bool(code & SRID_FLAG)

    # Some writers combine the extended flags with an ISO offset
    base = code & ~FLAG_MASK
    iso_offset, kind_number = divmod(base, ISO_OFFSET_STEP)
    if iso_offset > 3 or not 1 <= kind_number <= 7:
        raise FormatError(
            "Unrecognized geometry type code",
            offset=offset,
            expected="kind 1..7",
            found=f"0x{code:08x}",
        )

    iso_dims = Dimensionality(iso_offset * ISO_OFFSET_STEP)
    dims = Dimensionality.from_flags(
        has_z or iso_dims.has_z, has_m or iso_dims.has_m
    )
    return TypeCode(GeometryKind(kind_number), dims, has_srid)
