"""Encoding of geometries to the GeoJSON format."""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any

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


def _coord(c: object) -> list[float | None]:
    if isinstance(c, CoordZM):
        values: tuple[float, ...] = (c.x, c.y, c.z, c.m)
    elif isinstance(c, CoordZ):
        values = (c.x, c.y, c.z)
    elif isinstance(c, CoordM):
        values = (c.x, c.y, 0.0, c.m)
    elif isinstance(c, Coord):
        values = (c.x, c.y)
    else:
        raise TypeError(f"invalid coordinate type {type(c).__name__}")
    return [None if math.isnan(float(v)) else float(v) for v in values]


def _convert(v: Any) -> Any:
    if isinstance(v, list):
        return [_convert(item) for item in v]
    return _coord(v)


def _format_float(f: float) -> str:
    if math.isnan(f) or math.isinf(f):
        raise ValueError(f"json: unsupported value: {f}")
    magnitude = abs(f)
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        sign, digits, exponent = Decimal(repr(f)).as_tuple()
        text = "".join(str(d) for d in digits).rstrip("0") or "0"
        exp = exponent + len(digits) - 1
        mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
        exp_text = f"{exp:+03d}"
        if exp_text.startswith("-0") and len(exp_text) == 3:
            exp_text = "-" + exp_text[2]
        return ("-" if sign else "") + mantissa + "e" + exp_text
    text = format(Decimal(repr(f)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _dump(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, list):
        return "[" + ",".join(_dump(item) for item in value) + "]"
    if isinstance(value, dict):
        return "{" + ",".join(f"{_dump(k)}:{_dump(v)}" for k, v in value.items()) + "}"
    raise TypeError(f"json: unsupported type {type(value).__name__}")


def encode_geojson(g: Geometry) -> bytes:
    """Encode a geometry to the GeoJSON format."""
    if geo_type(g) is GeoType.GEOMETRY_COLLECTION:
        document: dict[str, Any] = {
            "type": geo_type_name(g),
            "geometries": [
                {"type": geo_type_name(part), "coordinates": _convert(part)}
                for part in g
            ],
        }
    else:
        document = {"type": geo_type_name(g), "coordinates": _convert(g)}
    return _dump(document).encode("utf-8")