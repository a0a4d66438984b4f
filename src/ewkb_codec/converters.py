"""
Interop helpers for EWKB geometries.

This module provides:
- Hex EWKB (the text form PostGIS returns for geometry columns)
- Conversion to and from Shapely geometries
"""

import shapely
from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from .decoder import decode
from .encoder import encode
from .errors import FormatError, GeometryError
from .geometry import Geometry
from .scalars import ByteOrder


def encode_hex(geom: Geometry, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN) -> str:
    """
    Encode a geometry to lowercase hex EWKB.

    Example:
        >>> from ewkb_codec import Point
        >>> encode_hex(Point((1, 1)))
        '00000000013ff00000000000003ff0000000000000'
    """
    return encode(geom, byte_order).hex()


def decode_hex(text: str) -> Geometry:
    """
    Decode a hex EWKB string (either case, surrounding whitespace ignored).

    Raises:
        FormatError: If the text is not valid hex or the bytes are not EWKB
    """
    try:
        data = bytes.fromhex(text.strip())
    except ValueError as e:
        raise FormatError(f"Invalid hex EWKB: {e}") from e
    return decode(data)


def to_shapely(geom: Geometry) -> BaseGeometry:
    """
    Convert a geometry to a Shapely geometry.

    The conversion goes through EWKB, so the SRID of the top-level geometry is
    preserved (see `shapely.get_srid`).

    Args:
        geom: Geometry object from this library

    Returns:
        Corresponding Shapely geometry object

    Raises:
        GeometryError: If GEOS rejects the geometry (e.g. a one-point line)
    """
    try:
        return shapely.from_wkb(encode(geom))
    except GEOSException as e:
        raise GeometryError(f"GEOS rejected {type(geom).__name__}: {e}") from e


def from_shapely(shape: BaseGeometry, srid: int | None = None) -> Geometry:
    """
    Convert a Shapely geometry to a geometry object.

    Args:
        shape: Shapely geometry
        srid: SRID to attach to the top-level geometry. If None, the SRID
            stored on the Shapely geometry is used (0 when unset).

    Returns:
        Decoded geometry object
    """
    if srid is not None:
        shape = shapely.set_srid(shape, srid)
    data = shapely.to_wkb(shape, include_srid=True)
    return decode(data)
