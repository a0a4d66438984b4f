"""Tests for hex and Shapely converters."""

import pytest
import shapely
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import MultiPoint as ShapelyMultiPoint
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from ewkb_codec import (
    ByteOrder,
    Dimensionality,
    FormatError,
    GeometryCollection,
    GeometryError,
    Header,
    LinearRing,
    LineString,
    MultiPoint,
    Point,
    Polygon,
    decode_hex,
    encode,
    encode_hex,
    from_shapely,
    to_shapely,
)


class TestHex:
    def test_encode_hex(self):
        pt = Point((1, 1), Header(srid=27700))
        assert encode_hex(pt) == "002000000100006c343ff00000000000003ff0000000000000"

    def test_encode_hex_little_endian(self):
        assert encode_hex(Point((1, 1)), ByteOrder.LITTLE_ENDIAN) == (
            "0101000000000000000000f03f000000000000f03f"
        )

    def test_decode_hex_uppercase_with_whitespace(self):
        geom = decode_hex("  0101000020E6100000000000000000F03F0000000000000040\n")
        assert geom == Point((1, 2), Header(srid=4326))

    def test_decode_hex_invalid(self):
        with pytest.raises(FormatError, match="Invalid hex EWKB"):
            decode_hex("00zz")


class TestToShapely:
    def test_point_keeps_srid(self):
        shp = to_shapely(Point((1, 2), Header(srid=4326)))
        assert isinstance(shp, ShapelyPoint)
        assert (shp.x, shp.y) == (1.0, 2.0)
        assert shapely.get_srid(shp) == 4326

    def test_linestring_z(self):
        line = LineString([(0, 0, 1), (1, 1, 2)], Header(Dimensionality.XYZ))
        shp = to_shapely(line)
        assert isinstance(shp, ShapelyLineString)
        assert shp.has_z
        assert list(shp.coords) == [(0.0, 0.0, 1.0), (1.0, 1.0, 2.0)]

    def test_polygon_with_hole(self):
        poly = Polygon(
            [
                LinearRing([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]),
                LinearRing([(2, 2), (8, 2), (8, 8), (2, 8), (2, 2)]),
            ]
        )
        shp = to_shapely(poly)
        assert isinstance(shp, ShapelyPolygon)
        assert len(shp.interiors) == 1
        assert shp.area == 100 - 36

    def test_geometry_collection(self):
        gc = GeometryCollection([Point((4, 6)), LineString([(4, 6), (7, 10)])])
        shp = to_shapely(gc)
        assert shp.geom_type == "GeometryCollection"
        assert len(shp.geoms) == 2

    def test_geos_rejection_is_geometry_error(self):
        with pytest.raises(GeometryError, match="GEOS rejected LineString"):
            to_shapely(LineString([(0, 0)]))


class TestFromShapely:
    def test_point(self):
        geom = from_shapely(ShapelyPoint(1, 2))
        assert geom == Point((1, 2))

    def test_point_with_srid_argument(self):
        geom = from_shapely(ShapelyPoint(1, 2), srid=27700)
        assert geom == Point((1, 2), Header(srid=27700))

    def test_linestring_z(self):
        geom = from_shapely(ShapelyLineString([(0, 0, 1), (1, 1, 2)]))
        assert geom == LineString([(0, 0, 1), (1, 1, 2)], Header(Dimensionality.XYZ))

    def test_multipoint(self):
        geom = from_shapely(ShapelyMultiPoint([(10, 40), (40, 30)]))
        assert geom == MultiPoint([Point((10, 40)), Point((40, 30))])

    def test_round_trip_through_shapely(self):
        poly = Polygon(
            [LinearRing([(30, 10), (40, 40), (20, 40), (10, 20), (30, 10)])],
            Header(srid=27700),
        )
        assert from_shapely(to_shapely(poly)) == poly

    def test_matches_geos_ewkb(self):
        shp = shapely.set_srid(ShapelyPoint(1, 1), 27700)
        expected = shapely.to_wkb(shp, byte_order=0, include_srid=True)
        assert encode(Point((1, 1), Header(srid=27700))) == expected
