"""Tests for DefaultKeyBuilder."""

import fnmatch

import pytest

from atlasclient.infrastructure.key_builders.default import DefaultKeyBuilder


class TestDefaultKeyBuilder:
    """Tests for DefaultKeyBuilder."""

    @pytest.fixture
    def key_builder(self) -> DefaultKeyBuilder:
        """Create a key builder for testing."""
        return DefaultKeyBuilder()

    def test_build_basic_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test the key layout."""
        key = key_builder.build("list", {"a": 1, "b": 2})
        assert key == 'list:{"a":1,"b":2}'

    def test_same_params_same_key(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that repeat calls produce the same key."""
        key1 = key_builder.build("list", {"a": 1, "b": 2})
        key2 = key_builder.build("list", {"a": 1, "b": 2})

        assert key1 == key2

    def test_key_order_ignored(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that parameter order does not change the key."""
        key1 = key_builder.build("list", {"a": 1, "b": {"y": 2, "x": 1}})
        key2 = key_builder.build("list", {"b": {"x": 1, "y": 2}, "a": 1})

        assert key1 == key2

    def test_insertion_order_when_unsorted(self) -> None:
        """Test that sort_keys=False keeps insertion order."""
        key_builder = DefaultKeyBuilder(sort_keys=False)

        key1 = key_builder.build("list", {"a": 1, "b": 2})
        key2 = key_builder.build("list", {"b": 2, "a": 1})

        assert key1 != key2

    def test_different_params_different_key(
        self, key_builder: DefaultKeyBuilder
    ) -> None:
        """Test that different parameters produce different keys."""
        key1 = key_builder.build("content", {"page": 1})
        key2 = key_builder.build("content", {"page": 2})

        assert key1 != key2

    def test_different_operations_different_key(
        self, key_builder: DefaultKeyBuilder
    ) -> None:
        """Test that the operation name is part of the key."""
        assert key_builder.build("content", {"id": "1"}) != key_builder.build(
            "content-id", {"id": "1"}
        )

    def test_empty_and_missing_params(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that no bag and an empty bag share a key."""
        assert key_builder.build("content") == "content:{}"
        assert key_builder.build("content", {}) == "content:{}"

    def test_none_values_dropped(self, key_builder: DefaultKeyBuilder) -> None:
        """Test that an explicit None matches an omitted option."""
        assert key_builder.build("content", {"page": 1, "search": None}) == (
            key_builder.build("content", {"page": 1})
        )

    def test_nested_values(self, key_builder: DefaultKeyBuilder) -> None:
        """Test lists and sets are serialized structurally."""
        key = key_builder.build("content", {"tags": ["b", "a"], "ids": {3, 1, 2}})
        assert key == 'content:{"ids":[1,2,3],"tags":["b","a"]}'

    def test_prefix(self) -> None:
        """Test that a prefix namespaces every key."""
        key_builder = DefaultKeyBuilder(prefix="atlas")
        assert key_builder.build("content", {"id": "1"}) == 'atlas:content:{"id":"1"}'

    def test_hash_params(self) -> None:
        """Test hashed keys stay deterministic and short."""
        key_builder = DefaultKeyBuilder(hash_params=True)
        key1 = key_builder.build("content", {"search": "x" * 500})
        key2 = key_builder.build("content", {"search": "x" * 500})

        assert key1 == key2
        assert key1.startswith("content:h:")
        assert len(key1) < 40

    def test_family_pattern(self, key_builder: DefaultKeyBuilder) -> None:
        """Test the family pattern matches only its own operation."""
        pattern = key_builder.family_pattern("content")

        assert fnmatch.fnmatchcase(key_builder.build("content", {"page": 3}), pattern)
        assert fnmatch.fnmatchcase(key_builder.build("content"), pattern)
        assert not fnmatch.fnmatchcase(
            key_builder.build("content-id", {"id": "1"}), pattern
        )
