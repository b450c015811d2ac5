"""Tests for backend configuration and the disjoint set factory."""

from __future__ import annotations

import pytest

from disjoint_set.config import Backend, DisjointSetConfig, backend_class, create_disjoint_set
from disjoint_set.core.assoc import AssocDisjointSet
from disjoint_set.core.disjoint_set import DisjointSet


class TestDisjointSetConfig:
    def test_defaults(self) -> None:
        cfg = DisjointSetConfig()
        assert cfg.backend == Backend.HASH
        assert cfg.backend == "hash"

    def test_validation_unknown_backend(self) -> None:
        with pytest.raises(ValueError, match="backend must be one of"):
            DisjointSetConfig(backend="btree")

    def test_to_dict_roundtrip(self) -> None:
        cfg = DisjointSetConfig(backend="assoc")
        d = cfg.to_dict()
        assert d == {"backend": "assoc"}
        assert DisjointSetConfig.from_dict(d) == cfg

    def test_from_dict_defaults(self) -> None:
        assert DisjointSetConfig.from_dict({}).backend == "hash"

    def test_from_dict_falls_back_on_bad_input(self) -> None:
        assert DisjointSetConfig.from_dict({"backend": "btree"}) == DisjointSetConfig()

    def test_frozen(self) -> None:
        cfg = DisjointSetConfig()
        with pytest.raises(AttributeError):
            cfg.backend = "assoc"  # type: ignore[misc]


class TestFactory:
    def test_backend_class(self) -> None:
        assert backend_class("hash") is DisjointSet
        assert backend_class(Backend.ASSOC) is AssocDisjointSet

    def test_backend_class_unknown(self) -> None:
        with pytest.raises(ValueError):
            backend_class("btree")

    def test_create_default(self) -> None:
        dset = create_disjoint_set([("a", "b")])

        assert isinstance(dset, DisjointSet)
        assert dset.to_dict() == {"a": "a", "b": "a"}

    def test_create_assoc(self) -> None:
        dset = create_disjoint_set([("a", "b")], config=DisjointSetConfig(backend="assoc"))

        assert isinstance(dset, AssocDisjointSet)
        assert dset.to_list() == [("a", "a"), ("b", "a")]

    def test_create_empty(self) -> None:
        assert len(create_disjoint_set()) == 0  # type: ignore[arg-type]
