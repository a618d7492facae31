"""
Unit tests for the collections_utils module.
"""

import pytest

from bigippg.collections_utils import (
    list_to_string_slice,
    make_string_list,
    make_string_set,
    set_to_string_slice,
)
from bigippg.errors import TypeMismatch


class TestListAdapters:
    """Tests for list conversions."""

    def test_make_string_list_preserves_order(self):
        """Test that wrapping keeps element order."""
        assert make_string_list(["b", "a", "c"]) == ["b", "a", "c"]

    def test_make_string_list_none(self):
        """Test that None gives an empty list."""
        assert make_string_list(None) == []

    def test_list_to_string_slice(self):
        """Test converting a list of strings."""
        assert list_to_string_slice(["x", "y"]) == ["x", "y"]

    def test_list_to_string_slice_rejects_non_string(self):
        """Test that a non-string element raises TypeMismatch."""
        with pytest.raises(TypeMismatch) as exc_info:
            list_to_string_slice(["x", 3], key="tags")
        assert exc_info.value.key == "tags[1]"
        assert exc_info.value.actual == "int"


class TestSetAdapters:
    """Tests for set conversions."""

    def test_set_round_trip_collapses_duplicates(self):
        """Test that duplicates collapse and both values survive."""
        result = set_to_string_slice(make_string_set(["a", "b", "a"]))
        assert len(result) == 2
        assert sorted(result) == ["a", "b"]

    def test_make_string_set_none(self):
        """Test that None gives an empty set."""
        assert make_string_set(None) == set()

    def test_set_to_string_slice_rejects_non_string(self):
        """Test that a non-string member raises TypeMismatch."""
        with pytest.raises(TypeMismatch):
            set_to_string_slice({"a", 1})
