"""Tests for parent-forest primitives."""

from __future__ import annotations

import pytest

from disjoint_set.core import forest


class TestChain:
    def test_absent_element_is_its_own_chain(self) -> None:
        assert forest.chain({}, "x") == ["x"]

    def test_chain_ends_at_root(self) -> None:
        parent = {"a": "a", "b": "a", "c": "b"}

        assert forest.chain(parent, "c") == ["c", "b", "a"]
        assert forest.chain(parent, "a") == ["a"]

    def test_resolve(self) -> None:
        parent = {"a": "a", "b": "a", "c": "b"}

        assert forest.resolve(parent, "c") == "a"
        assert forest.resolve(parent, "z") is None


class TestLink:
    def test_link_compresses_both_chains(self) -> None:
        parent = {"a": "a", "b": "a", "c": "b", "x": "x", "y": "x"}

        root = forest.link(parent, "c", "y")

        assert root == "a"
        assert parent == {"a": "a", "b": "a", "c": "a", "x": "a", "y": "a"}

    def test_link_appends_new_keys_x_first(self) -> None:
        parent: dict[str, str] = {}

        forest.link(parent, "p", "q")

        assert list(parent) == ["p", "q"]


class TestValidate:
    def test_valid_forest(self) -> None:
        forest.validate({"a": "a", "b": "a", "c": "b", "d": "d"})

    def test_empty_forest(self) -> None:
        forest.validate({})

    def test_dangling_parent(self) -> None:
        with pytest.raises(ValueError, match="'z' of 'b'"):
            forest.validate({"a": "a", "b": "z"})

    def test_cycle(self) -> None:
        with pytest.raises(ValueError, match="does not reach a root"):
            forest.validate({"a": "b", "b": "c", "c": "a"})

    def test_group(self) -> None:
        parent = {"a": "a", "b": "a", "c": "b", "d": "d"}

        assert forest.group(parent) == {"a": ("a", "b", "c"), "d": ("d",)}
