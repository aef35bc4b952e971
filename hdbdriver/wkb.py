"""Encoding of geometries to the (extended) well known binary format."""

from __future__ import annotations

import struct

from hdbdriver.spatial import Coord, CoordM, CoordZ, CoordZM, GeoType, Geometry, geo_type

XDR = 0x00  # big endian
NDR = 0x01  # little endian

SRID_FLAG = 0x20000000

_DIM_Z = 1000
_DIM_M = 2000
_DIM_ZM = 3000

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def wkb_type(g: Geometry) -> int:
    """Return the well known binary type code of a geometry."""
    base = int(geo_type(g))
    name = type(g).__name__
    if name.endswith("ZM"):
        return base + _DIM_ZM
    if name.endswith("Z"):
        return base + _DIM_Z
    if name.endswith("M"):
        return base + _DIM_M
    return base


def _coord_values(c: object) -> tuple[float, ...]:
    if isinstance(c, CoordZM):
        return (c.x, c.y, c.z, c.m)
    if isinstance(c, CoordZ):
        return (c.x, c.y, c.z)
    if isinstance(c, CoordM):
        return (c.x, c.y, c.m)
    if isinstance(c, Coord):
        return (c.x, c.y)
    raise TypeError(f"invalid coordinate type {type(c).__name__}")


class _WKBWriter:
    def __init__(self, is_xdr: bool, srid: int | None = None) -> None:
        self._order = ">" if is_xdr else "<"
        self._order_byte = XDR if is_xdr else NDR
        self._srid = srid
        self._buf = bytearray()

    def _pack(self, fmt: str, *values: float) -> None:
        self._buf += struct.pack(self._order + fmt, *values)

    def _coord(self, c: object) -> None:
        values = _coord_values(c)
        self._pack(f"{len(values)}d", *values)

    def _size(self, size: int) -> None:
        self._pack("I", size)

    def _type(self, g: Geometry) -> None:
        self._buf.append(self._order_byte)
        if self._srid is not None:
            # Only the outermost geometry carries the srid.
            self._pack("Ii", wkb_type(g) | SRID_FLAG, self._srid)
            self._srid = None
        else:
            self._pack("I", wkb_type(g))

    def encode(self, g: Geometry) -> None:
        self._type(g)
        kind = geo_type(g)
        if kind is GeoType.POINT:
            self._coord(g)
        elif kind in (GeoType.LINE_STRING, GeoType.CIRCULAR_STRING):
            self._size(len(g))
            for c in g:
                self._coord(c)
        elif kind is GeoType.POLYGON:
            self._size(len(g))
            for ring in g:
                self._size(len(ring))
                for c in ring:
                    self._coord(c)
        else:
            self._size(len(g))
            for part in g:
                self.encode(part)

    def hex(self) -> bytes:
        return self._buf.hex().encode("ascii")


def encode_wkb(g: Geometry, is_xdr: bool) -> bytes:
    """Encode a geometry to hex encoded well known binary."""
    writer = _WKBWriter(is_xdr)
    writer.encode(g)
    return writer.hex()


def encode_ewkb(g: Geometry, is_xdr: bool, srid: int) -> bytes:
    """Encode a geometry to hex encoded extended well known binary."""
    if not _INT32_MIN <= srid <= _INT32_MAX:
        raise ValueError(f"srid {srid} out of int32 range")
    writer = _WKBWriter(is_xdr, srid)
    writer.encode(g)
    return writer.hex()