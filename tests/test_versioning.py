"""Tests for version ordering."""

from types import SimpleNamespace

import pytest

from resource_hub.versioning import (
    MalformedVersionError,
    latest,
    sort_versions,
    version_key,
)


def test_version_key_parses_integer_components():
    assert version_key("1.10.2") == (1, 10, 2)
    assert version_key("0") == (0,)


def test_numeric_not_lexicographic_order():
    """1.9 < 1.10 < 2.0, unlike plain string comparison."""
    assert version_key("1.9") < version_key("1.10") < version_key("2.0")
    assert version_key("1.2") == version_key("1.2")
    assert "1.10" < "1.9"  # plain strings get it wrong


def test_shorter_prefix_sorts_first():
    assert version_key("1.0") < version_key("1.0.1")
    assert version_key("1") < version_key("1.0")


@pytest.mark.parametrize("bad", ["1.a", "1..2", "", "v1.0", "1.-1", "1.0 "])
def test_malformed_versions_raise(bad):
    with pytest.raises(MalformedVersionError):
        version_key(bad)


def test_malformed_version_is_value_error():
    with pytest.raises(ValueError):
        sort_versions(["1.0", "1.x"], key=lambda v: v)


def test_sort_versions_ascending():
    rows = [SimpleNamespace(version=v) for v in ["1.10", "1.0", "2.0", "1.2", "1.9"]]
    assert [r.version for r in sort_versions(rows)] == ["1.0", "1.2", "1.9", "1.10", "2.0"]


def test_sort_versions_is_stable_for_duplicates():
    first = SimpleNamespace(version="0.1", id=1)
    second = SimpleNamespace(version="0.1", id=2)
    assert sort_versions([first, second]) == [first, second]


def test_sort_versions_with_custom_key():
    assert sort_versions(["0.10", "0.9"], key=lambda v: v) == ["0.9", "0.10"]


def test_latest_returns_highest_version():
    rows = [SimpleNamespace(version=v) for v in ["1.0", "1.10", "1.2"]]
    assert latest(rows).version == "1.10"


def test_latest_of_nothing_raises():
    with pytest.raises(ValueError):
        latest([])
