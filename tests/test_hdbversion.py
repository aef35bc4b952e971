import pytest

from hdbdriver.hdbversion import (
    HDB_FEATURE_AVAILABILITY,
    HDBF_CONNECT_CLIENT_INFO,
    HDBF_SERVER_VERSION,
    HDBVersionNumber,
    ServerInfo,
    parse_hdb_version,
    parse_hdb_version_number,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("2.00.048.00", HDBVersionNumber(2, 0, 48, 0, 0)),
        ("2.00.045.00.15756393121", HDBVersionNumber(2, 0, 45, 0, 15756393121)),
    ],
)
def test_parse(text, expected):
    number = parse_hdb_version_number(text)
    assert number == expected
    assert str(number) == text


@pytest.mark.parametrize(
    "s1, s2, result",
    [
        ("2.00.045.00.15756393121", "2.00.048.00", -1),
        ("2.00.045.00.15756393121", "2.00.045.00.15756393122", 0),
    ],
)
def test_compare(s1, s2, result):
    v1 = parse_hdb_version_number(s1)
    v2 = parse_hdb_version_number(s2)
    assert v1.compare(v2) == result
    assert v2.compare(v1) == -result


def test_feature():
    for flag, cv1 in HDB_FEATURE_AVAILABILITY.items():
        for cv2 in HDB_FEATURE_AVAILABILITY.values():
            v1 = parse_hdb_version(str(cv1))
            v2 = parse_hdb_version(str(cv2))
            has_feature = v2.compare(v1) >= 0
            assert v2.has_feature(flag) == has_feature


def test_unreported_version_is_hana_one():
    version = parse_hdb_version("")
    assert str(version) == "1.00.120.00"
    assert not version.has_feature(HDBF_SERVER_VERSION)
    assert not version.has_feature(HDBF_CONNECT_CLIENT_INFO)


def test_sps_and_fields():
    number = parse_hdb_version_number("2.00.045.00.1575639312")
    assert number.major == 2
    assert number.revision == 45
    assert number.sps == 4
    assert number.build_id == 1575639312


def test_non_numeric_fields_are_zero():
    number = parse_hdb_version_number("x.y")
    assert number.is_zero()


def test_version_compare_ignores_features():
    v1 = parse_hdb_version("2.00.042")
    v2 = parse_hdb_version("2.00.042.00.99")
    assert v1.compare(v2) == 0
    assert v1.has_feature(HDBF_CONNECT_CLIENT_INFO)


def test_server_info_holds_version():
    version = parse_hdb_version("2.00.048.00")
    info = ServerInfo(version=version)
    assert info.version.compare(parse_hdb_version_number("2.00.048.00")) == 0