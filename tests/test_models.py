"""Tests for models module."""

import pytest

from gc_retention_bench.models import (
    INT32_MAX,
    INT32_MIN,
    Element,
    IntegerCollection,
    MemorySnapshot,
)


def test_element_hash_code_is_value():
    """Test that the hash code of an Element is its integer value."""
    assert Element(42).hash_code() == 42
    assert Element(-7).hash_code() == -7
    assert hash(Element(42)) == hash(42)


def test_equal_elements_are_distinct_objects():
    """Test that small values are not shared between Elements."""
    first = Element(1)
    second = Element(1)

    assert first == second
    assert first is not second


def test_element_compares_with_int():
    """Test equality against plain ints."""
    assert Element(3) == 3
    assert Element(3) != 4
    assert Element(1) != True  # noqa: E712
    assert int(Element(9)) == 9
    assert [10, 20, 30][Element(1)] == 20


def test_element_range_limits():
    """Test that values outside the signed 32-bit range are rejected."""
    assert Element(INT32_MAX).value == INT32_MAX
    assert Element(INT32_MIN).value == INT32_MIN

    with pytest.raises(ValueError, match="32-bit"):
        Element(INT32_MAX + 1)
    with pytest.raises(ValueError, match="32-bit"):
        Element(INT32_MIN - 1)


def test_element_rejects_non_int():
    """Test that non-integer values are rejected."""
    with pytest.raises(TypeError):
        Element(1.5)
    with pytest.raises(TypeError):
        Element(True)


def test_integer_collection_values():
    """Test that a collection keeps insertion order."""
    collection = IntegerCollection([Element(2), Element(0), Element(1)])

    assert collection.values() == [2, 0, 1]
    assert collection[0] == 2


def test_snapshot_total_bytes():
    """Test summing a snapshot's regions."""
    snapshot = MemorySnapshot(label="x", regions={"young": 100, "old": 250})

    assert snapshot.total_bytes == 350
    assert MemorySnapshot(label="empty", regions={}).total_bytes == 0
