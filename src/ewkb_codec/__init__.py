"""
EWKB Codec

Encode and decode geometries in the Extended Well-Known Binary (EWKB) format
used by PostGIS and other spatial databases.

This library provides a pure Python implementation of both directions of the
format, including the SRID-dependent choice between flag-based and ISO type
codes and per-object byte order markers.

Example:
    >>> from ewkb_codec import Dimensionality, Header, Point, decode, encode
    >>>
    >>> pt = Point((1.0, 1.0), Header(Dimensionality.XY, 27700))
    >>> data = encode(pt)
    >>> data.hex()
    '002000000100006c343ff00000000000003ff0000000000000'
    >>> decode(data) == pt
    True
"""

__version__ = "0.1.0"

from .geometry import (
    Coordinate,
    Dimensionality,
    Geometry,
    GeometryCollection,
    GeometryKind,
    Header,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    geometry_type_name,
)

from .errors import (
    EWKBError,
    FormatError,
    GeometryError,
)

from .scalars import ByteOrder

from .config import (
    DecoderOptions,
    EncoderOptions,
)

from .encoder import (
    EWKBEncoder,
    encode,
)

from .decoder import (
    EWKBDecoder,
    decode,
)

from .converters import (
    decode_hex,
    encode_hex,
    from_shapely,
    to_shapely,
)

__all__ = [
    # Version
    "__version__",
    # Geometry types
    "Coordinate",
    "Dimensionality",
    "Geometry",
    "GeometryCollection",
    "GeometryKind",
    "Header",
    "LinearRing",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "geometry_type_name",
    # Errors
    "EWKBError",
    "FormatError",
    "GeometryError",
    # Configuration
    "ByteOrder",
    "DecoderOptions",
    "EncoderOptions",
    # Codec
    "EWKBEncoder",
    "encode",
    "EWKBDecoder",
    "decode",
    # Converters
    "encode_hex",
    "decode_hex",
    "to_shapely",
    "from_shapely",
]
