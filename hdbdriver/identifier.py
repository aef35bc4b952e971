"""Identifiers (schema, table names, ...) in hdb SQL statements."""

from __future__ import annotations

import re
import secrets
import string

_SIMPLE = re.compile(r"[_A-Z][_#$A-Z0-9]*")
_RANDOM_ALPHABET = string.ascii_letters + string.digits
_RANDOM_LENGTH = 16

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote_char(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ch == " " or ch.isprintable():
        return ch
    code = ord(ch)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _quote(s: str) -> str:
    return '"' + "".join(_quote_char(ch) for ch in s) + '"'


class Identifier(str):
    """An SQL identifier, quoted when rendered unless it is a simple name."""

    def __str__(self) -> str:
        raw = str.__str__(self)
        if _SIMPLE.fullmatch(raw):
            return raw
        return _quote(raw)

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


def random_identifier(prefix: str) -> Identifier:
    """Return an identifier made of prefix and 16 random characters."""
    suffix = "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(_RANDOM_LENGTH))
    return Identifier(prefix + suffix)