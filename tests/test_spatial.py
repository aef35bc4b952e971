import dataclasses

import pytest

from hdbdriver import spatial
from hdbdriver.spatial import (
    Coord,
    CircularString,
    GeoType,
    GeometryCollection,
    LineString,
    Point,
    PointZM,
    geo_type,
    geo_type_name,
    nan,
)

BASE_NAMES = [
    "Point",
    "LineString",
    "CircularString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
]

ALL_CLASSES = [
    (getattr(spatial, base + suffix), base)
    for base in BASE_NAMES
    for suffix in ("", "Z", "M", "ZM")
]


@pytest.mark.parametrize("cls,base", ALL_CLASSES)
def test_geo_type_name_strips_dimension(cls, base):
    assert geo_type_name(cls()) == base


@pytest.mark.parametrize(
    "cls,expected",
    [
        (spatial.Point, 1),
        (spatial.LineString, 2),
        (spatial.Polygon, 3),
        (spatial.MultiPoint, 4),
        (spatial.MultiLineString, 5),
        (spatial.MultiPolygon, 6),
        (spatial.GeometryCollection, 7),
        (spatial.CircularString, 8),
    ],
)
def test_geo_type_codes(cls, expected):
    assert geo_type(cls()) == expected


@pytest.mark.parametrize("cls,base", ALL_CLASSES)
def test_geo_type_independent_of_dimension(cls, base):
    assert geo_type(cls()) is geo_type(getattr(spatial, base)())


def test_nan_is_nan():
    value = nan()
    assert str(value) == "nan"


def test_point_defaults_to_origin():
    p = Point()
    assert (p.x, p.y) == (0.0, 0.0)


def test_point_differs_from_coord_with_same_values():
    assert Point(x=1.0, y=2.0) == Point(x=1.0, y=2.0)
    assert Point(x=1.0, y=2.0) != Coord(x=1.0, y=2.0)


def test_point_is_frozen():
    p = PointZM(x=1.0, y=2.0, z=3.0, m=4.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0  # type: ignore[misc]
    assert (p.x, p.y, p.z, p.m) == (1.0, 2.0, 3.0, 4.0)


def test_lists_of_different_geometries_are_not_equal():
    coords = [Coord(x=3.0, y=3.0), Coord(x=5.0, y=4.0)]
    assert LineString(coords) == LineString(coords)
    assert LineString(coords) != CircularString(coords)


def test_repr_names_type():
    g = GeometryCollection([Point(x=1, y=1)])
    assert repr(g).startswith("GeometryCollection([")


def test_geo_type_name_rejects_non_geometry():
    with pytest.raises(TypeError):
        geo_type_name(Coord(x=1.0, y=1.0))


def test_geo_type_rejects_unknown_geometry_name():
    class Triangle(spatial.Geometry):
        pass

    with pytest.raises(ValueError):
        geo_type(Triangle())


def test_geo_type_is_enum_member():
    assert geo_type(Point()) is GeoType.POINT