"""
Geometry classes consumed and produced by the EWKB codec.

These classes are simple containers: a Header (dimensionality and SRID) plus
the kind-specific payload. Coordinates are plain tuples whose length is
governed by the owning geometry's dimensionality.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

# (x, y), (x, y, z), (x, y, m) or (x, y, z, m)
Coordinate = tuple[float, ...]


class GeometryKind(IntEnum):
    """Base geometry type numbers shared by WKB and EWKB"""

    POINT = 1
    LINESTRING = 2
    POLYGON = 3
    MULTIPOINT = 4
    MULTILINESTRING = 5
    MULTIPOLYGON = 6
    GEOMETRYCOLLECTION = 7


class Dimensionality(IntEnum):
    """
    Which optional ordinates accompany X and Y.

    The value of each member is the ISO type code offset used when no SRID
    is written (POINT Z = 1001, POINT M = 2001, POINT ZM = 3001).
    """

    XY = 0
    XYZ = 1000
    XYM = 2000
    XYZM = 3000

    @property
    def has_z(self) -> bool:
        return self in (Dimensionality.XYZ, Dimensionality.XYZM)

    @property
    def has_m(self) -> bool:
        return self in (Dimensionality.XYM, Dimensionality.XYZM)

    @property
    def ordinate_count(self) -> int:
        return 2 + self.has_z + self.has_m

    @classmethod
    def from_flags(cls, has_z: bool, has_m: bool) -> "Dimensionality":
        if has_z and has_m:
            return cls.XYZM
        if has_z:
            return cls.XYZ
        if has_m:
            return cls.XYM
        return cls.XY


@dataclass(frozen=True)
class Header:
    """
    Per-geometry header.

    Attributes:
        dimensionality: Ordinates carried by the geometry's coordinates
        srid: Spatial reference ID (signed 32-bit), 0 when unspecified
    """

    dimensionality: Dimensionality = Dimensionality.XY
    srid: int = 0


class _HeaderMixin:
    header: Header

    @property
    def srid(self) -> int:
        return self.header.srid

    @property
    def dimensionality(self) -> Dimensionality:
        return self.header.dimensionality

    @property
    def has_z(self) -> bool:
        return self.header.dimensionality.has_z

    @property
    def has_m(self) -> bool:
        return self.header.dimensionality.has_m


@dataclass
class Point(_HeaderMixin):
    """A single position"""

    kind: ClassVar[GeometryKind] = GeometryKind.POINT

    coordinate: Coordinate
    header: Header = field(default_factory=Header)

    @property
    def x(self) -> float:
        return self.coordinate[0]

    @property
    def y(self) -> float:
        return self.coordinate[1]

    @property
    def coordinates(self) -> Coordinate:
        return self.coordinate


@dataclass
class LineString(_HeaderMixin):
    """A line string (polyline)"""

    kind: ClassVar[GeometryKind] = GeometryKind.LINESTRING

    points: list[Coordinate]
    header: Header = field(default_factory=Header)

    @property
    def coordinates(self) -> list[Coordinate]:
        return list(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)


@dataclass
class LinearRing:
    """
    A closed ring of a polygon.

    Rings have no header of their own; they are always read and written with
    the dimensionality of the polygon that owns them.
    """

    points: list[Coordinate]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.points)


@dataclass
class Polygon(_HeaderMixin):
    """A polygon with optional holes"""

    kind: ClassVar[GeometryKind] = GeometryKind.POLYGON

    rings: list[LinearRing]
    header: Header = field(default_factory=Header)

    @property
    def exterior(self) -> LinearRing | None:
        """The exterior ring (first ring)"""
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> list[LinearRing]:
        """Interior rings (holes)"""
        return self.rings[1:]

    @property
    def coordinates(self) -> list[list[Coordinate]]:
        return [list(ring.points) for ring in self.rings]


@dataclass
class MultiPoint(_HeaderMixin):
    """Multiple points"""

    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOINT

    points: list[Point]
    header: Header = field(default_factory=Header)

    @property
    def coordinates(self) -> list[Coordinate]:
        return [p.coordinates for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)


@dataclass
class MultiLineString(_HeaderMixin):
    """Multiple line strings"""

    kind: ClassVar[GeometryKind] = GeometryKind.MULTILINESTRING

    lines: list[LineString]
    header: Header = field(default_factory=Header)

    @property
    def coordinates(self) -> list[list[Coordinate]]:
        return [line.coordinates for line in self.lines]

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[LineString]:
        return iter(self.lines)


@dataclass
class MultiPolygon(_HeaderMixin):
    """Multiple polygons"""

    kind: ClassVar[GeometryKind] = GeometryKind.MULTIPOLYGON

    polygons: list[Polygon]
    header: Header = field(default_factory=Header)

    @property
    def coordinates(self) -> list[list[list[Coordinate]]]:
        return [poly.coordinates for poly in self.polygons]

    def __len__(self) -> int:
        return len(self.polygons)

    def __iter__(self) -> Iterator[Polygon]:
        return iter(self.polygons)


@dataclass
class GeometryCollection(_HeaderMixin):
    """Heterogeneous collection of geometries of any kind"""

    kind: ClassVar[GeometryKind] = GeometryKind.GEOMETRYCOLLECTION

    geometries: list["Geometry"]
    header: Header = field(default_factory=Header)

    def __len__(self) -> int:
        return len(self.geometries)

    def __iter__(self) -> Iterator["Geometry"]:
        return iter(self.geometries)


# Type alias for any geometry
Geometry = (
    Point
    | LineString
    | Polygon
    | MultiPoint
    | MultiLineString
    | MultiPolygon
    | GeometryCollection
)


def geometry_type_name(geom: Geometry) -> str:
    """Get the geometry type name"""
    return type(geom).__name__
