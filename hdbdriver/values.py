"""Nullable and streaming value types used as query arguments and scan targets."""

from __future__ import annotations

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any


@dataclass
class Decimal:
    """A database decimal value held as an exact fraction."""

    rat: Fraction = field(default_factory=Fraction)

    def scan(self, src: Any) -> None:
        """Take the value from a scanned fraction."""
        if not isinstance(src, Fraction):
            raise TypeError(f"decimal: invalid data type {type(src).__name__}")
        self.rat = src

    def value(self) -> Fraction:
        """Return the value as a fraction."""
        return self.rat


@dataclass
class NullDecimal:
    """A Decimal that may be NULL."""

    decimal: Decimal | None = None
    valid: bool = False

    def scan(self, src: Any) -> None:
        """Take the value from a scanned fraction or NULL."""
        if src is None:
            self.valid = False
            return
        if not isinstance(src, Fraction):
            raise TypeError(f"decimal: invalid data type {type(src).__name__}")
        if self.decimal is None:
            raise ValueError(f"invalid decimal value {self.decimal}")
        self.valid = True
        self.decimal.rat = src

    def value(self) -> Fraction | None:
        """Return the fraction, or None if NULL."""
        if not self.valid:
            return None
        if self.decimal is None:
            raise ValueError(f"invalid decimal value {self.decimal}")
        return self.decimal.rat


@dataclass
class NullBytes:
    """A bytes value that may be NULL."""

    data: bytes | None = None
    valid: bool = False

    def scan(self, src: Any) -> None:
        """Take bytes from src; anything else counts as NULL."""
        if isinstance(src, (bytes, bytearray, memoryview)):
            self.data, self.valid = bytes(src), True
        else:
            self.data, self.valid = None, False

    def value(self) -> bytes | None:
        """Return the bytes, or None if NULL."""
        if not self.valid:
            return None
        return self.data


@dataclass
class Lob:
    """A large object field.

    The reader is the source of content written to the database, the writer
    the destination of content read from it.
    """

    reader: Any = None
    writer: Any = None

    def set_reader(self, reader: Any) -> Lob:
        """Set the content source and return the lob for chaining."""
        self.reader = reader
        return self

    def set_writer(self, writer: Any) -> Lob:
        """Set the content destination and return the lob for chaining."""
        self.writer = writer
        return self

    def scan(self, src: Any) -> None:
        """Hand the writer to a scanned lob source that accepts one."""
        if self.writer is None:
            raise ValueError(f"lob error: initial writer {self!r}")
        set_writer = getattr(src, "set_writer", None)
        if not callable(set_writer):
            raise TypeError(f"lob: invalid scan type {type(src).__name__}")
        set_writer(self.writer)

    def value(self) -> Any:
        """Return the content source."""
        return self.reader


@dataclass
class NullLob:
    """A Lob that may be NULL."""

    lob: Lob | None = None
    valid: bool = False

    def scan(self, src: Any) -> None:
        """Scan into the lob, or mark NULL when src is None."""
        if src is None:
            self.valid = False
            return
        if self.lob is None:
            raise ValueError(f"invalid lob value {self.lob}")
        self.lob.scan(src)
        self.valid = True

    def value(self) -> Any:
        """Return the lob's content source, or None if NULL."""
        if not self.valid:
            return None
        if self.lob is None:
            raise ValueError(f"invalid lob value {self.lob}")
        return self.lob.reader