"""Core disjoint set data structures."""

from disjoint_set.core.assoc import AssocDisjointSet
from disjoint_set.core.base import DisjointSetLike
from disjoint_set.core.disjoint_set import DisjointSet
from disjoint_set.core.mutable import MutableDisjointSet

__all__ = [
    # Persistent backends
    "DisjointSet",
    "AssocDisjointSet",
    "DisjointSetLike",
    # In-place variant
    "MutableDisjointSet",
]
