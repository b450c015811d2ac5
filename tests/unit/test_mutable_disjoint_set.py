"""Tests for the in-place MutableDisjointSet."""

from __future__ import annotations

from disjoint_set.core.disjoint_set import DisjointSet
from disjoint_set.core.mutable import MutableDisjointSet


class TestMutableDisjointSet:
    """Tests for MutableDisjointSet."""

    def test_union_returns_surviving_root(self) -> None:
        """Test union reports the first argument's root."""
        uf: MutableDisjointSet[str] = MutableDisjointSet()

        assert uf.union("a", "b") == "a"
        assert uf.union("x", "y") == "x"
        assert uf.union("y", "b") == "x"
        assert uf.find("a") == "x"

    def test_initial_elements_are_singletons(self) -> None:
        """Test constructor elements start in their own classes."""
        uf = MutableDisjointSet([1, 2, 3])

        assert len(uf) == 3
        assert uf.groups() == {1: (1,), 2: (2,), 3: (3,)}

    def test_find_missing(self) -> None:
        """Test unknown elements resolve to None."""
        uf: MutableDisjointSet[int] = MutableDisjointSet()

        assert uf.find(7) is None
        assert 7 not in uf

    def test_freeze_matches_persistent_unions(self) -> None:
        """Test a frozen snapshot equals the same unions done persistently."""
        pairs = [("a", "b"), ("c", "a"), ("d", "e"), ("e", "b"), ("f", "f")]
        uf: MutableDisjointSet[str] = MutableDisjointSet()
        persistent: DisjointSet[str] = DisjointSet.empty()
        for x, y in pairs:
            uf.union(x, y)
            persistent = persistent.union(x, y)

        assert uf.freeze() == persistent
        assert uf.freeze().to_list() == persistent.to_list()

    def test_freeze_is_a_copy(self) -> None:
        """Test later mutation does not leak into a snapshot."""
        uf = MutableDisjointSet(["a"])
        snapshot = uf.freeze()

        uf.union("b", "a")

        assert snapshot.to_dict() == {"a": "a"}
        assert uf.find("a") == "b"

    def test_iteration_in_insertion_order(self) -> None:
        """Test iteration yields elements in insertion order."""
        uf: MutableDisjointSet[str] = MutableDisjointSet()
        uf.union("c", "a")
        uf.add(["b", "a"])

        assert list(uf) == ["c", "a", "b"]
