"""
EWKB decoder.

Decodes the Extended Well-Known Binary format written by PostGIS and GEOS
(and by `ewkb_codec.encoder`) back into geometry objects.

Key Technical Facts:
    - Byte Order: Each object, nested or not, starts with its own marker
      (0x00 big-endian, 0x01 little-endian); it is never inherited
    - Type Code: Either extended (Z/M/SRID flags in the high bits) or ISO
      (kind + 1000/2000/3000); see `ewkb_codec.typecode`
    - SRID: Present only when the SRID flag is set; otherwise 0
    - Counts: Every count is checked against the remaining input before it
      drives a loop, so a forged count cannot force a large allocation
"""

import logging
from typing import BinaryIO

from .config import DecoderOptions
from .errors import FormatError
from .geometry import (
    Coordinate,
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
)
from .scalars import DOUBLE_SIZE, UINT32_SIZE, ByteReader
from .typecode import decode_type_code

logger = logging.getLogger(__name__)

# Marker + type code + count: the smallest possible nested object
MIN_GEOMETRY_SIZE = 1 + UINT32_SIZE + UINT32_SIZE


class EWKBDecoder:
    """
    Decoder for EWKB blobs.

    Blob Structure (per geometry object, recursively):
        - Byte 0: Byte order marker
        - Bytes 1-4: Type code (uint32)
        - Bytes 5-8: SRID (int32), only if the SRID flag is set
        - Remaining: Kind-specific body

    Example:
        >>> from ewkb_codec import EWKBDecoder
        >>> decoder = EWKBDecoder()
        >>> geom = decoder.decode(bytes.fromhex("00000000013ff00000000000003ff0000000000000"))
        >>> geom.coordinate
        (1.0, 1.0)
    """

    def __init__(self, options: DecoderOptions | None = None):
        """
        Initialize the decoder.

        Args:
            options: Decoder settings. If None, uses the default depth limit.
        """
        self.options = options or DecoderOptions()

    def decode(self, data: bytes | bytearray | memoryview) -> Geometry:
        """
        Decode an EWKB blob to a geometry object.

        Args:
            data: The raw EWKB bytes

        Returns:
            A Point, LineString, Polygon, MultiPoint, MultiLineString,
            MultiPolygon or GeometryCollection

        Raises:
            FormatError: If the blob is malformed, truncated, has trailing
                bytes or contains an unrecognized type code
        """
        try:
            with ByteReader(data) as reader:
                geom = self._read_geometry(reader, depth=0)
                if reader.remaining:
                    raise FormatError(
                        "Trailing bytes after geometry",
                        offset=reader.offset,
                        expected="end of input",
                        found=f"{reader.remaining} bytes",
                    )
        except FormatError as e:
            logger.debug("Rejected EWKB input: %s", e)
            raise

        logger.debug(
            "Decoded %s (srid=%d) from %d bytes",
            type(geom).__name__,
            geom.header.srid,
            reader.offset,
        )
        return geom

    def decode_from(self, stream: BinaryIO) -> Geometry:
        """
        Read a binary stream to the end and decode its contents.

        Raises:
            FormatError: As for `decode`
            OSError: If reading the stream fails
        """
        return self.decode(stream.read())

    def _read_header(self, reader: ByteReader) -> tuple[GeometryKind, Header]:
        reader.read_byte_order()
        code_offset = reader.offset
        code = reader.read_uint32("type code")
        type_code = decode_type_code(code, offset=code_offset)
        srid = reader.read_int32("SRID") if type_code.has_srid else 0
        return type_code.kind, Header(type_code.dimensionality, srid)

    def _read_count(self, reader: ByteReader, item_size: int, what: str) -> int:
        count = reader.read_uint32(f"{what} count")
        reader.ensure(count, item_size, what)
        return count

    def _read_coordinates(self, reader: ByteReader, ordinates: int) -> list[Coordinate]:
        count = self._read_count(reader, ordinates * DOUBLE_SIZE, "coordinates")
        return [reader.read_coordinate(ordinates) for _ in range(count)]

    def _read_geometry(self, reader: ByteReader, depth: int) -> Geometry:
        if depth > self.options.max_depth:
            raise FormatError(
                "Geometry nesting too deep",
                offset=reader.offset,
                expected=f"depth <= {self.options.max_depth}",
            )

        kind, header = self._read_header(reader)
        ordinates = header.dimensionality.ordinate_count

        if kind == GeometryKind.POINT:
            return Point(reader.read_coordinate(ordinates), header)

        if kind == GeometryKind.LINESTRING:
            return LineString(self._read_coordinates(reader, ordinates), header)

        if kind == GeometryKind.POLYGON:
            ring_count = self._read_count(reader, UINT32_SIZE, "rings")
            rings = [
                LinearRing(self._read_coordinates(reader, ordinates))
                for _ in range(ring_count)
            ]
            return Polygon(rings, header)

        members = self._read_members(reader, depth)

        if kind == GeometryKind.MULTIPOINT:
            return MultiPoint(self._check_members(members, Point), header)

        if kind == GeometryKind.MULTILINESTRING:
            return MultiLineString(self._check_members(members, LineString), header)

        if kind == GeometryKind.MULTIPOLYGON:
            return MultiPolygon(self._check_members(members, Polygon), header)

        # GeometryCollection is the only remaining case
        return GeometryCollection([member for _, member in members], header)

    def _read_members(self, reader: ByteReader, depth: int) -> list[tuple[int, Geometry]]:
        count = self._read_count(reader, MIN_GEOMETRY_SIZE, "geometries")
        members: list[tuple[int, Geometry]] = []
        for _ in range(count):
            start = reader.offset
            members.append((start, self._read_geometry(reader, depth + 1)))
        return members

    def _check_members(self, members: list[tuple[int, Geometry]], member_type: type) -> list:
        checked = []
        for offset, member in members:
            if not isinstance(member, member_type):
                raise FormatError(
                    "Unexpected collection member",
                    offset=offset,
                    expected=member_type.__name__,
                    found=type(member).__name__,
                )
            checked.append(member)
        return checked


def decode(data: bytes | bytearray | memoryview) -> Geometry:
    """
    Convenience function to decode an EWKB blob.

    Args:
        data: Raw EWKB bytes

    Returns:
        Decoded geometry object

    Example:
        >>> geom = decode(bytes.fromhex("002000000100006c343ff00000000000003ff0000000000000"))
        >>> geom.srid
        27700
    """
    return EWKBDecoder().decode(data)
