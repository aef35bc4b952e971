"""HANA server version numbers, feature detection and server information."""

from __future__ import annotations

import re
from dataclasses import dataclass

_MAX_UINT64 = 2**64 - 1
_NUM_FIELDS = 5
_DIGITS = re.compile(r"[0-9]+")

# Feature flags.
HDBF_NONE = 1 << 0
HDBF_SERVER_VERSION = 1 << 1  # server reports its version in connect options
HDBF_CONNECT_CLIENT_INFO = 1 << 2  # server accepts client info while connecting


def _parse_uint(part: str) -> int:
    if not _DIGITS.fullmatch(part):
        return 0
    return min(int(part), _MAX_UINT64)


def _format_uint(value: int, digits: int) -> str:
    return ("0" * digits + str(value))[-digits:]


@dataclass(frozen=True)
class HDBVersionNumber:
    """A semantic hdb version: u.vv.wwx.yy.zzzzzzzzzz.

    u.vv is the hdb version (major.minor), wwx the revision (ww being the
    SPS number), yy the patch number and zzzzzzzzzz the build id.
    """

    major: int = 0
    minor: int = 0
    revision: int = 0
    patch: int = 0
    build_id: int = 0

    @property
    def sps(self) -> int:
        """The support package stack number."""
        return self.revision // 10

    def _ordered_fields(self) -> tuple[int, int, int, int]:
        # The build id is left out: it might not be ordered.
        return (self.major, self.minor, self.revision, self.patch)

    def compare(self, other: HDBVersionNumber) -> int:
        """Return 0 if equal, -1 if lower than other, 1 if higher."""
        mine, theirs = self._ordered_fields(), other._ordered_fields()
        if mine == theirs:
            return 0
        return 1 if mine > theirs else -1

    def is_zero(self) -> bool:
        """True if every field is zero."""
        return not any(
            (self.major, self.minor, self.revision, self.patch, self.build_id)
        )

    def __str__(self) -> str:
        text = (
            f"{self.major}.{_format_uint(self.minor, 2)}."
            f"{_format_uint(self.revision, 3)}.{_format_uint(self.patch, 2)}"
        )
        if self.build_id:
            return f"{text}.{self.build_id}"
        return text


def parse_hdb_version_number(s: str) -> HDBVersionNumber:
    """Parse a version string; fields that are missing or not numeric are 0."""
    values = [_parse_uint(part) for part in s.split(".", _NUM_FIELDS - 1)]
    values += [0] * (_NUM_FIELDS - len(values))
    return HDBVersionNumber(*values)


# A server that reports no version is assumed to be HANA 1.00 SPS 12.
_HDB_VERSION_NUMBER_ONE = parse_hdb_version_number("1.00.120")

HDB_FEATURE_AVAILABILITY: dict[int, HDBVersionNumber] = {
    HDBF_SERVER_VERSION: parse_hdb_version_number("2.00.000"),
    HDBF_CONNECT_CLIENT_INFO: parse_hdb_version_number("2.00.042"),
}


@dataclass(frozen=True)
class HDBVersion(HDBVersionNumber):
    """A hdb version together with the features it supports."""

    feature: int = 0

    def compare(self, other: HDBVersionNumber) -> int:
        """Return 0 if equal, -1 if lower than other, 1 if higher."""
        return super().compare(other)

    def has_feature(self, feature: int) -> bool:
        """True if the version supports the feature."""
        return bool(self.feature & feature)


def parse_hdb_version(s: str) -> HDBVersion:
    """Parse a version string and detect the features of that version."""
    number = parse_hdb_version_number(s)
    if number.is_zero():  # hdb 1.00 does not report a version
        number = _HDB_VERSION_NUMBER_ONE
    feature = 0
    for flag, required in HDB_FEATURE_AVAILABILITY.items():
        if number.compare(required) >= 0:
            feature |= flag
    return HDBVersion(
        number.major,
        number.minor,
        number.revision,
        number.patch,
        number.build_id,
        feature,
    )


@dataclass
class ServerInfo:
    """Information reported by the hdb server."""

    version: HDBVersion | None = None