import io
from fractions import Fraction

import pytest

from hdbdriver.values import Decimal, Lob, NullBytes, NullDecimal, NullLob


class _WriterSetter:
    def __init__(self):
        self.writer = None

    def set_writer(self, writer):
        self.writer = writer


def test_decimal_scan_roundtrip():
    d = Decimal()
    rat = Fraction(34, 10)
    d.scan(rat)
    assert d.value() == rat


def test_decimal_scan_invalid_type():
    with pytest.raises(TypeError, match="decimal: invalid data type"):
        Decimal().scan(3.4)


def test_null_decimal_scan_null():
    n = NullDecimal(Decimal(Fraction(1, 1)), valid=True)
    n.scan(None)
    assert n.valid is False
    assert n.value() is None


def test_null_decimal_scan_value():
    n = NullDecimal(Decimal())
    n.scan(Fraction(-1, 10))
    assert n.valid is True
    assert n.value() == Fraction(-1, 10)


def test_null_decimal_without_decimal():
    with pytest.raises(ValueError, match="invalid decimal value"):
        NullDecimal().scan(Fraction(1, 1))
    with pytest.raises(ValueError, match="invalid decimal value"):
        NullDecimal(valid=True).value()


def test_null_decimal_invalid_type():
    with pytest.raises(TypeError):
        NullDecimal(Decimal()).scan("1")


def test_null_bytes_scan_bytes():
    n = NullBytes()
    n.scan(b"Hello HDB")
    assert n.valid is True
    assert n.value() == b"Hello HDB"


def test_null_bytes_scan_other_is_null():
    n = NullBytes(b"Hello HDB", valid=True)
    n.scan(42)
    assert n.valid is False
    assert n.data is None
    assert n.value() is None


def test_lob_chaining_and_value():
    reader = io.BytesIO(b"content")
    writer = io.BytesIO()
    lob = Lob()
    assert lob.set_reader(reader) is lob
    assert lob.set_writer(writer) is lob
    assert lob.value() is reader
    assert lob.writer is writer


def test_lob_scan_without_writer():
    with pytest.raises(ValueError, match="lob error"):
        Lob().scan(_WriterSetter())


def test_lob_scan_invalid_source():
    with pytest.raises(TypeError, match="lob: invalid scan type"):
        Lob(writer=io.BytesIO()).scan(b"raw")


def test_lob_scan_hands_over_writer():
    writer = io.BytesIO()
    source = _WriterSetter()
    Lob(writer=writer).scan(source)
    assert source.writer is writer


def test_null_lob_scan_null():
    n = NullLob(Lob(reader=io.BytesIO()), valid=True)
    n.scan(None)
    assert n.valid is False
    assert n.value() is None


def test_null_lob_scan_and_value():
    reader = io.BytesIO(b"data")
    writer = io.BytesIO()
    source = _WriterSetter()
    n = NullLob(Lob(reader=reader, writer=writer))
    n.scan(source)
    assert n.valid is True
    assert source.writer is writer
    assert n.value() is reader


def test_null_lob_scan_error_keeps_invalid():
    n = NullLob(Lob())
    with pytest.raises(ValueError):
        n.scan(_WriterSetter())
    assert n.valid is False