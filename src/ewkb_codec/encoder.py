"""
EWKB encoder.

Walks a geometry tree top-down. Every node writes its own byte order marker,
type code, optional SRID and kind-specific body; collection members are
written as complete geometries with their own headers.
"""

import io
import logging
from collections.abc import Sequence
from typing import BinaryIO

from .config import EncoderOptions
from .errors import GeometryError
from .geometry import (
    Coordinate,
    Dimensionality,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .scalars import ByteOrder, ByteWriter
from .typecode import encode_type_code

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class EWKBEncoder:
    """
    Encoder for geometry trees to EWKB.

    Example:
        >>> from ewkb_codec import EWKBEncoder, Point
        >>> encoder = EWKBEncoder()
        >>> encoder.encode(Point((1.0, 1.0))).hex()
        '00000000013ff00000000000003ff0000000000000'
    """

    def __init__(self, options: EncoderOptions | None = None):
        """
        Initialize the encoder.

        Args:
            options: Encoder settings. If None, writes big-endian.
        """
        self.options = options or EncoderOptions()

    def encode(self, geom: Geometry) -> bytes:
        """
        Encode a geometry to EWKB bytes.

        Raises:
            GeometryError: If the tree cannot be represented
        """
        buf = io.BytesIO()
        self.encode_to(geom, buf)
        data = buf.getvalue()
        logger.debug(
            "Encoded %s (srid=%d) to %d bytes",
            type(geom).__name__,
            geom.header.srid,
            len(data),
        )
        return data

    def encode_to(self, geom: Geometry, stream: BinaryIO) -> None:
        """
        Encode a geometry, writing the bytes to `stream`.

        Raises:
            GeometryError: If the tree cannot be represented
            OSError: If the stream refuses the write
        """
        writer = ByteWriter(stream, self.options.byte_order)
        self._write_geometry(writer, geom)

    def _write_header(self, writer: ByteWriter, geom: Geometry) -> None:
        srid = geom.header.srid
        if not INT32_MIN <= srid <= INT32_MAX:
            raise GeometryError(f"SRID out of 32-bit range: {srid}")

        code, srid_word = encode_type_code(geom.kind, geom.header)
        writer.write_byte_order()
        writer.write_uint32(code)
        if srid_word is not None:
            writer.write_int32(srid_word)

    def _write_coordinates(
        self, writer: ByteWriter, coords: Sequence[Coordinate], dims: Dimensionality
    ) -> None:
        writer.write_uint32(len(coords))
        for coord in coords:
            self._write_coordinate(writer, coord, dims)

    def _write_coordinate(
        self, writer: ByteWriter, coord: Coordinate, dims: Dimensionality
    ) -> None:
        if len(coord) != dims.ordinate_count:
            raise GeometryError(
                f"Coordinate {coord!r} has {len(coord)} ordinates, "
                f"{dims.name} requires {dims.ordinate_count}"
            )
        writer.write_coordinate(coord)

    def _write_geometry(self, writer: ByteWriter, geom: Geometry) -> None:
        if isinstance(geom, Point):
            self._write_header(writer, geom)
            self._write_coordinate(writer, geom.coordinate, geom.dimensionality)

        elif isinstance(geom, LineString):
            self._write_header(writer, geom)
            self._write_coordinates(writer, geom.points, geom.dimensionality)

        elif isinstance(geom, Polygon):
            self._write_header(writer, geom)
            writer.write_uint32(len(geom.rings))
            for ring in geom.rings:
                self._write_coordinates(writer, ring.points, geom.dimensionality)

        elif isinstance(geom, MultiPoint):
            self._write_members(writer, geom, geom.points, Point)

        elif isinstance(geom, MultiLineString):
            self._write_members(writer, geom, geom.lines, LineString)

        elif isinstance(geom, MultiPolygon):
            self._write_members(writer, geom, geom.polygons, Polygon)

        elif isinstance(geom, GeometryCollection):
            self._write_members(writer, geom, geom.geometries, None)

        else:
            raise GeometryError(f"Cannot encode object of type {type(geom).__name__}")

    def _write_members(
        self,
        writer: ByteWriter,
        geom: Geometry,
        members: Sequence[Geometry],
        member_type: type | None,
    ) -> None:
        self._write_header(writer, geom)
        writer.write_uint32(len(members))
        for member in members:
            if member_type is not None and not isinstance(member, member_type):
                raise GeometryError(
                    f"{type(geom).__name__} cannot contain "
                    f"{type(member).__name__}"
                )
            self._write_geometry(writer, member)


def encode(geom: Geometry, byte_order: ByteOrder = ByteOrder.BIG_ENDIAN) -> bytes:
    """
    Convenience function to encode a geometry to EWKB.

    Args:
        geom: Geometry to encode
        byte_order: Byte order for every object in the output (default: big-endian)

    Returns:
        EWKB bytes

    Example:
        >>> from ewkb_codec import Dimensionality, Header, Point
        >>> encode(Point((1, 1), Header(Dimensionality.XY, 27700))).hex()
        '002000000100006c343ff00000000000003ff0000000000000'
    """
    return EWKBEncoder(EncoderOptions(byte_order=byte_order)).encode(geom)
