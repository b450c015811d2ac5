"""Structural contract shared by the immutable disjoint set backends."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DisjointSetLike(Protocol):
    """Protocol satisfied by ``DisjointSet`` and ``AssocDisjointSet``."""

    def union(self, x: Any, y: Any) -> DisjointSetLike: ...

    def find(self, x: Any) -> Any | None: ...

    def has(self, x: Any) -> bool: ...

    def same(self, x: Any, y: Any) -> bool: ...

    def items(self) -> tuple[Any, ...]: ...

    def add(self, elements: Iterable[Any]) -> DisjointSetLike: ...

    def to_list(self) -> list[tuple[Any, Any]]: ...

    def to_dict(self) -> dict[Any, Any]: ...
