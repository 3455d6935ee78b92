"""Tests for lenient release version parsing."""

import pytest

from versioning.semver import is_greater, parse_version


@pytest.mark.parametrize("raw,expected", [
    ("3.1.5", "3.1.5"),
    ("v3.1.5", "3.1.5"),
    ("3.1", "3.1.0"),
    ("3", "3.0.0"),
    ("3.2.0-SNAPSHOT", "3.2.0-SNAPSHOT"),
    ("3.2.0-M1+build.7", "3.2.0-M1+build.7"),
])
def test_parse_version(raw, expected):
    assert str(parse_version(raw)) == expected


@pytest.mark.parametrize("raw", ["", "abc", "2.3.0.RELEASE", "1.2.3-", "01.2.3", "1.2.3-beta..1", "1.2.3-01"])
def test_parse_version_rejects(raw):
    with pytest.raises(ValueError):
        parse_version(raw)


def test_is_greater():
    assert is_greater(parse_version("1.0.0"), None)
    assert is_greater(parse_version("1.0.1"), parse_version("1.0.0"))
    assert not is_greater(parse_version("1.0.0"), parse_version("1.0.0"))
    assert not is_greater(parse_version("1.0.0-RC1"), parse_version("1.0.0"))
