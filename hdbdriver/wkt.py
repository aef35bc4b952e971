"""Encoding of geometries to the (extended) well known text format."""

from __future__ import annotations

import math
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable

from hdbdriver.spatial import (
    Coord,
    CoordM,
    CoordZ,
    CoordZM,
    GeoType,
    Geometry,
    geo_type,
    geo_type_name,
)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class _TypeFlag(Enum):
    FULL = "full"
    SHORT = "short"
    NONE = "none"


def _type_name(g: Geometry) -> str:
    name = type(g).__name__
    if name.endswith("ZM"):
        return name[:-2].upper() + " ZM"
    if name.endswith("M"):
        return name[:-1].upper() + " M"
    if name.endswith("Z"):
        return name[:-1].upper() + " Z"
    return name.upper()


def _format_float(f: float) -> str:
    f = float(f)
    if math.isnan(f):
        return "NULL"
    if math.isinf(f):
        return "+Inf" if f > 0 else "-Inf"
    text = format(Decimal(repr(f)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _coord(c: object) -> str:
    if isinstance(c, CoordZM):
        values: tuple[float, ...] = (c.x, c.y, c.z, c.m)
    elif isinstance(c, CoordZ):
        values = (c.x, c.y, c.z)
    elif isinstance(c, CoordM):
        values = (c.x, c.y, c.m)
    elif isinstance(c, Coord):
        values = (c.x, c.y)
    else:
        raise TypeError(f"invalid coordinate type {type(c).__name__}")
    return " ".join(_format_float(v) for v in values)


def _list(items: Iterable, render: Callable[[object], str]) -> str:
    parts = [render(item) for item in items]
    if not parts:
        return "EMPTY"
    return "(" + ",".join(parts) + ")"


def _encode(g: Geometry, flag: _TypeFlag) -> str:
    if flag is _TypeFlag.FULL:
        prefix = _type_name(g) + " "
    elif flag is _TypeFlag.SHORT:
        prefix = geo_type_name(g).upper() + " "
    else:
        prefix = ""

    kind = geo_type(g)
    if kind is GeoType.POINT:
        body = "(" + _coord(g) + ")"
    elif kind in (GeoType.LINE_STRING, GeoType.CIRCULAR_STRING):
        body = _list(g, _coord)
    elif kind is GeoType.POLYGON:
        body = _list(g, lambda ring: _list(ring, _coord))
    elif kind is GeoType.GEOMETRY_COLLECTION:
        body = _list(g, lambda part: _encode(part, _TypeFlag.SHORT))
    else:
        body = _list(g, lambda part: _encode(part, _TypeFlag.NONE))
    return prefix + body


def encode_wkt(g: Geometry) -> bytes:
    """Encode a geometry to the well known text format."""
    return _encode(g, _TypeFlag.FULL).encode("utf-8")


def encode_ewkt(g: Geometry, srid: int) -> bytes:
    """Encode a geometry to the extended well known text format."""
    if not _INT32_MIN <= srid <= _INT32_MAX:
        raise ValueError(f"srid {srid} out of int32 range")
    return f"SRID={srid};{_encode(g, _TypeFlag.FULL)}".encode("utf-8")