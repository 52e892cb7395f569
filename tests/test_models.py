"""Tests for ObjectLocation."""

from __future__ import annotations

import dataclasses

import pytest

from bucketpath._models import ObjectLocation


class TestObjectLocation:
    def test_fields(self) -> None:
        loc = ObjectLocation(bucket="b", key="x/y")
        assert loc.bucket == "b"
        assert loc.key == "x/y"
        assert not loc.is_bucket_root

    def test_default_key_is_bucket_root(self) -> None:
        assert ObjectLocation(bucket="b").is_bucket_root

    def test_frozen(self) -> None:
        loc = ObjectLocation(bucket="b")
        with pytest.raises(dataclasses.FrozenInstanceError):
            loc.key = "x"  # type: ignore[misc]

    def test_directory_marker(self) -> None:
        assert ObjectLocation(bucket="b", key="x/y").directory_marker == "x/y/"

    def test_directory_marker_at_bucket_root(self) -> None:
        assert ObjectLocation(bucket="b").directory_marker == ""

    def test_equality_and_hash(self) -> None:
        a = ObjectLocation(bucket="b", key="k")
        b = ObjectLocation(bucket="b", key="k")
        assert a == b
        assert hash(a) == hash(b)
