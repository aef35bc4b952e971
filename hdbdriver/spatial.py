"""Geo spatial types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any


def nan() -> float:
    """Return a 'not a number' value, e.g. for an unset M coordinate."""
    return math.nan


class GeoType(IntEnum):
    """Base geometry kinds and their numeric codes."""

    POINT = 1
    LINE_STRING = 2
    POLYGON = 3
    MULTI_POINT = 4
    MULTI_LINE_STRING = 5
    MULTI_POLYGON = 6
    GEOMETRY_COLLECTION = 7
    CIRCULAR_STRING = 8


_GEO_TYPES = {
    "Point": GeoType.POINT,
    "LineString": GeoType.LINE_STRING,
    "Polygon": GeoType.POLYGON,
    "MultiPoint": GeoType.MULTI_POINT,
    "MultiLineString": GeoType.MULTI_LINE_STRING,
    "MultiPolygon": GeoType.MULTI_POLYGON,
    "GeometryCollection": GeoType.GEOMETRY_COLLECTION,
    "CircularString": GeoType.CIRCULAR_STRING,
}


class Geometry:
    """Base of every spatial type."""

    __slots__ = ()


@dataclass(frozen=True)
class Coord:
    """A two dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class CoordZ:
    """A three dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class CoordM:
    """An annotated two dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0
    m: float = 0.0


@dataclass(frozen=True)
class CoordZM:
    """An annotated three dimensional coordinate."""

    x: float = 0.0
    y: float = 0.0
    m: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Point(Coord, Geometry):
    """A two dimensional point."""


@dataclass(frozen=True)
class PointZ(CoordZ, Geometry):
    """A three dimensional point."""


@dataclass(frozen=True)
class PointM(CoordM, Geometry):
    """An annotated two dimensional point."""


@dataclass(frozen=True)
class PointZM(CoordZM, Geometry):
    """An annotated three dimensional point."""


class _GeometryList(list, Geometry):
    """A geometry made of a sequence of parts."""

    __slots__ = ()

    def __eq__(self, other: Any) -> bool:
        return type(self) is type(other) and list.__eq__(self, other)

    def __ne__(self, other: Any) -> bool:
        return not self == other

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list.__repr__(self)})"


class LineString(_GeometryList):
    """A two dimensional line string: a list of Coord."""

    __slots__ = ()


class LineStringZ(_GeometryList):
    """A three dimensional line string: a list of CoordZ."""

    __slots__ = ()


class LineStringM(_GeometryList):
    """An annotated two dimensional line string: a list of CoordM."""

    __slots__ = ()


class LineStringZM(_GeometryList):
    """An annotated three dimensional line string: a list of CoordZM."""

    __slots__ = ()


class CircularString(_GeometryList):
    """A two dimensional circular string: a list of Coord."""

    __slots__ = ()


class CircularStringZ(_GeometryList):
    """A three dimensional circular string: a list of CoordZ."""

    __slots__ = ()


class CircularStringM(_GeometryList):
    """An annotated two dimensional circular string: a list of CoordM."""

    __slots__ = ()


class CircularStringZM(_GeometryList):
    """An annotated three dimensional circular string: a list of CoordZM."""

    __slots__ = ()


class Polygon(_GeometryList):
    """A two dimensional polygon: a list of rings of Coord."""

    __slots__ = ()


class PolygonZ(_GeometryList):
    """A three dimensional polygon: a list of rings of CoordZ."""

    __slots__ = ()


class PolygonM(_GeometryList):
    """An annotated two dimensional polygon: a list of rings of CoordM."""

    __slots__ = ()


class PolygonZM(_GeometryList):
    """An annotated three dimensional polygon: a list of rings of CoordZM."""

    __slots__ = ()


class MultiPoint(_GeometryList):
    """A two dimensional multi point: a list of Point."""

    __slots__ = ()


class MultiPointZ(_GeometryList):
    """A three dimensional multi point: a list of PointZ."""

    __slots__ = ()


class MultiPointM(_GeometryList):
    """An annotated two dimensional multi point: a list of PointM."""

    __slots__ = ()


class MultiPointZM(_GeometryList):
    """An annotated three dimensional multi point: a list of PointZM."""

    __slots__ = ()


class MultiLineString(_GeometryList):
    """A two dimensional multi line string: a list of LineString."""

    __slots__ = ()


class MultiLineStringZ(_GeometryList):
    """A three dimensional multi line string: a list of LineStringZ."""

    __slots__ = ()


class MultiLineStringM(_GeometryList):
    """An annotated two dimensional multi line string: a list of LineStringM."""

    __slots__ = ()


class MultiLineStringZM(_GeometryList):
    """An annotated three dimensional multi line string: a list of LineStringZM."""

    __slots__ = ()


class MultiPolygon(_GeometryList):
    """A two dimensional multi polygon: a list of Polygon."""

    __slots__ = ()


class MultiPolygonZ(_GeometryList):
    """A three dimensional multi polygon: a list of PolygonZ."""

    __slots__ = ()


class MultiPolygonM(_GeometryList):
    """An annotated two dimensional multi polygon: a list of PolygonM."""

    __slots__ = ()


class MultiPolygonZM(_GeometryList):
    """An annotated three dimensional multi polygon: a list of PolygonZM."""

    __slots__ = ()


class GeometryCollection(_GeometryList):
    """A two dimensional geometry collection."""

    __slots__ = ()


class GeometryCollectionZ(_GeometryList):
    """A three dimensional geometry collection."""

    __slots__ = ()


class GeometryCollectionM(_GeometryList):
    """An annotated two dimensional geometry collection."""

    __slots__ = ()


class GeometryCollectionZM(_GeometryList):
    """An annotated three dimensional geometry collection."""

    __slots__ = ()


def geo_type_name(g: Geometry) -> str:
    """Return the type name of a geometry without its dimension suffix."""
    if not isinstance(g, Geometry):
        raise TypeError(f"invalid geometry type {type(g).__name__}")
    name = type(g).__name__
    if name.endswith("ZM"):
        return name[:-2]
    if name[-1:] in ("M", "Z"):
        return name[:-1]
    return name


def geo_type(g: Geometry) -> GeoType:
    """Return the base geometry kind of a geometry."""
    try:
        return _GEO_TYPES[geo_type_name(g)]
    except KeyError:
        raise ValueError(f"invalid geometry type name {type(g).__name__}") from None