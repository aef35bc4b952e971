# hdbdriver

Building blocks for a SAP HANA database client in Python. It needs nothing
outside the standard library and runs on Python 3.10 and later.

## Modules

- `hdbdriver.hdbversion`: `parse_hdb_version_number` and `parse_hdb_version`
  read a version string such as `2.00.045.00.1575639312`
  (major.minor.revision.patch.build id). Missing or non-numeric fields count
  as 0. `HDBVersionNumber` has `major`, `minor`, `revision`, `patch`,
  `build_id`, an `sps` property, `is_zero()` and `compare(other)`, which
  returns -1, 0 or 1 and ignores the build id. `parse_hdb_version` treats an
  all-zero version as `1.00.120` and returns an `HDBVersion`, whose
  `has_feature(flag)` tells whether `HDBF_SERVER_VERSION` (from 2.00.000) or
  `HDBF_CONNECT_CLIENT_INFO` (from 2.00.042) applies. `ServerInfo` holds a
  `version`.
- `hdbdriver.identifier`: `Identifier` is a `str` whose `str()` is the name
  itself when it matches `[_A-Z][_#$A-Z0-9]*` and a double-quoted, escaped
  name otherwise. `random_identifier(prefix)` appends 16 random letters and
  digits to the prefix.
- `hdbdriver.vermap`: `VerMap`, a thread-safe `str -> str` map. `store(m)`
  replaces the content and raises `version` by one; `load()` returns a copy;
  `compare(m)` returns the updates (a dict) and the deleted keys (a set) of
  the map compared to `m`. Inside `with vm.read_locked():` the variants
  `load_with_rlock()` and `compare_with_rlock(m)` may be used; outside that
  block they raise `RuntimeError`.
- `hdbdriver.sqltrace`: `set_on(flag)` and `is_on()` switch SQL tracing;
  `trace`, `tracef` (printf-style) and `traceln` write lines prefixed with
  `hdb`, a timestamp and the caller's file and line to standard output.
- `hdbdriver.dial`: `Dialer` is the abstract base with `dial(address,
  options)`; `DefaultDialer` (instance `DEFAULT_DIALER`) opens a TCP socket to
  a `host:port` address. `DialerOptions(timeout, tcp_keep_alive)` are in
  seconds: a timeout of 0 means none, a keep-alive of 0 uses 15 seconds and a
  negative one switches keep-alive off.
- `hdbdriver.values`: scan targets and argument values with `scan(src)` and
  `value()`: `Decimal` (an exact `fractions.Fraction`), `NullDecimal`,
  `NullBytes`, `Lob` (a reader as content source, a writer as content
  destination; `set_reader` and `set_writer` return the lob) and `NullLob`.
  Null variants return `None` from `value()` when not valid.
- `hdbdriver.spatial`: `Coord`, `CoordZ`, `CoordM`, `CoordZM`, the point
  types, and list-based geometries (`LineString`, `CircularString`,
  `Polygon`, `MultiPoint`, `MultiLineString`, `MultiPolygon`,
  `GeometryCollection`, each with `Z`, `M` and `ZM` variants). `nan()` gives
  an unset coordinate; `geo_type_name` and `geo_type` return a geometry's base
  name and `GeoType`.
- `hdbdriver.wkb`: `encode_wkb(g, is_xdr)` and `encode_ewkb(g, is_xdr, srid)`
  return well known binary as hex-encoded ASCII bytes, big endian if
  `is_xdr`, little endian otherwise. `wkb_type(g)` gives the type code.
- `hdbdriver.wkt`: `encode_wkt(g)` and `encode_ewkt(g, srid)` return well
  known text as bytes; NaN coordinates are written as `NULL`.
- `hdbdriver.geojson`: `encode_geojson(g)` returns a GeoJSON document as
  bytes; NaN coordinates become `null`, and M coordinates get a Z of 0.

## Examples

```python
from hdbdriver.hdbversion import HDBF_CONNECT_CLIENT_INFO, parse_hdb_version

v = parse_hdb_version("2.00.045.00.1575639312")
str(v)                                          # '2.00.045.00.1575639312'
v.compare(parse_hdb_version("2.00.048.00"))     # -1
v.has_feature(HDBF_CONNECT_CLIENT_INFO)         # True
```

```python
from hdbdriver.identifier import Identifier

str(Identifier("A#$_"))             # 'A#$_'
str(Identifier("testTransaction"))  # '"testTransaction"'
```

```python
from hdbdriver.vermap import VerMap

vm = VerMap()
vm.store({"k1": "v1", "k2": "v2"})
vm.version                           # 1
vm.compare({"k1": "v1", "k3": "x"})  # ({'k2': 'v2'}, {'k3'})
with vm.read_locked():
    vm.load_with_rlock()             # {'k1': 'v1', 'k2': 'v2'}
```

```python
from hdbdriver.spatial import Coord, GeometryCollection, LineString, Point
from hdbdriver.wkb import encode_ewkb, encode_wkb
from hdbdriver.wkt import encode_ewkt, encode_wkt
from hdbdriver.geojson import encode_geojson

g = GeometryCollection([Point(1, 1), LineString([Coord(1, 1), Coord(2, 2)])])

encode_wkb(g, False)         # b'0107000000020000000101000000...'
encode_ewkb(g, False, 4711)  # b'01070000206712000002000000...'
encode_wkt(g)                # b'GEOMETRYCOLLECTION (POINT (1 1),LINESTRING (1 1,2 2))'
encode_ewkt(g, 4711)         # b'SRID=4711;GEOMETRYCOLLECTION (POINT (1 1),LINESTRING (1 1,2 2))'
encode_geojson(g)            # b'{"type":"GeometryCollection","geometries":[...]}'
```

## What this package does not do

It does not speak the HANA network protocol: it cannot log on to a server,
run statements, manage transactions or fetch result sets. `DefaultDialer`
only opens the TCP socket. There is no command-line program.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```