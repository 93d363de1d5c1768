"""Tests for MBID validation."""

from __future__ import annotations

import pytest

from mbapi.platform.musicbrainz.errors import InvalidMbidError
from mbapi.platform.musicbrainz.mbid import assert_mbid, is_mbid


@pytest.mark.parametrize(
    "value",
    [
        "94ed318a-fd7d-4abc-8491-a35e39f51dca",
        "94ED318A-FD7D-4ABC-8491-A35E39F51DCA",
    ],
)
def test_valid_mbids(value: str) -> None:
    assert is_mbid(value)
    assert_mbid(value)


@pytest.mark.parametrize(
    "value",
    [
        "not-a-uuid",
        "",
        "94ed318a-fd7d-4abc-8491-a35e39f51dc",
        "94ed318afd7d4abc8491a35e39f51dca",
        " 94ed318a-fd7d-4abc-8491-a35e39f51dca",
        "94ed318a-fd7d-4abc-8491-a35e39f51dcz",
    ],
)
def test_invalid_mbids(value: str) -> None:
    assert not is_mbid(value)
    with pytest.raises(InvalidMbidError) as excinfo:
        assert_mbid(value)
    assert excinfo.value.mbid == value


def test_non_strings_are_not_mbids() -> None:
    assert not is_mbid(None)
    assert not is_mbid(123)
