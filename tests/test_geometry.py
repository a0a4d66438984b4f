"""Tests for geometry classes."""

from ewkb_codec import (
    Dimensionality,
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


class TestDimensionality:
    def test_iso_offsets(self):
        assert Dimensionality.XY == 0
        assert Dimensionality.XYZ == 1000
        assert Dimensionality.XYM == 2000
        assert Dimensionality.XYZM == 3000

    def test_flags(self):
        assert not Dimensionality.XY.has_z
        assert not Dimensionality.XY.has_m
        assert Dimensionality.XYZ.has_z
        assert not Dimensionality.XYZ.has_m
        assert Dimensionality.XYM.has_m
        assert not Dimensionality.XYM.has_z
        assert Dimensionality.XYZM.has_z
        assert Dimensionality.XYZM.has_m

    def test_ordinate_count(self):
        assert Dimensionality.XY.ordinate_count == 2
        assert Dimensionality.XYZ.ordinate_count == 3
        assert Dimensionality.XYM.ordinate_count == 3
        assert Dimensionality.XYZM.ordinate_count == 4

    def test_from_flags(self):
        assert Dimensionality.from_flags(False, False) is Dimensionality.XY
        assert Dimensionality.from_flags(True, False) is Dimensionality.XYZ
        assert Dimensionality.from_flags(False, True) is Dimensionality.XYM
        assert Dimensionality.from_flags(True, True) is Dimensionality.XYZM


class TestHeader:
    def test_defaults(self):
        header = Header()
        assert header.dimensionality is Dimensionality.XY
        assert header.srid == 0

    def test_equality(self):
        assert Header(Dimensionality.XYZ, 4326) == Header(Dimensionality.XYZ, 4326)
        assert Header(Dimensionality.XYZ, 4326) != Header(Dimensionality.XYZ, 0)


class TestPoint:
    def test_point_2d(self):
        pt = Point((-122.0, 47.0))
        assert pt.x == -122.0
        assert pt.y == 47.0
        assert pt.srid == 0
        assert not pt.has_z
        assert pt.kind is GeometryKind.POINT

    def test_point_zm(self):
        pt = Point((1.0, 2.0, 3.0, 4.0), Header(Dimensionality.XYZM, 27700))
        assert pt.has_z
        assert pt.has_m
        assert pt.srid == 27700
        assert pt.dimensionality is Dimensionality.XYZM
        assert pt.coordinates == (1.0, 2.0, 3.0, 4.0)


class TestLineString:
    def test_linestring_basic(self):
        line = LineString([(30, 10), (10, 30), (40, 40)])
        assert len(line) == 3
        assert list(line) == [(30, 10), (10, 30), (40, 40)]
        assert line.coordinates == [(30, 10), (10, 30), (40, 40)]

    def test_linestring_empty(self):
        line = LineString([])
        assert len(line) == 0


class TestPolygon:
    def test_polygon_with_hole(self):
        exterior = LinearRing([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])
        hole = LinearRing([(2, 2), (8, 2), (8, 8), (2, 8), (2, 2)])
        poly = Polygon([exterior, hole])
        assert poly.exterior == exterior
        assert poly.interiors == [hole]
        assert poly.coordinates[1][0] == (2, 2)

    def test_polygon_without_rings(self):
        poly = Polygon([])
        assert poly.exterior is None
        assert poly.interiors == []


class TestCollections:
    def test_multipoint_iteration(self):
        mp = MultiPoint([Point((0, 0)), Point((1, 1))])
        assert len(mp) == 2
        assert mp.coordinates == [(0, 0), (1, 1)]

    def test_multilinestring(self):
        mls = MultiLineString(
            [LineString([(0, 0), (1, 1)]), LineString([(2, 2), (3, 3)])]
        )
        assert len(list(mls)) == 2
        assert mls.coordinates == [[(0, 0), (1, 1)], [(2, 2), (3, 3)]]

    def test_multipolygon(self):
        poly = Polygon([LinearRing([(0, 0), (1, 0), (1, 1), (0, 0)])])
        mpoly = MultiPolygon([poly, poly])
        assert len(mpoly) == 2

    def test_collection_members_keep_own_header(self):
        child = Point((1, 2, 3), Header(Dimensionality.XYZ, 4326))
        gc = GeometryCollection([child], Header(Dimensionality.XY, 27700))
        assert gc.srid == 27700
        assert gc.geometries[0].srid == 4326
        assert gc.geometries[0].has_z

    def test_geometry_type_name(self):
        assert geometry_type_name(Point((0, 0))) == "Point"
        assert geometry_type_name(GeometryCollection([])) == "GeometryCollection"
