"""Persistent disjoint set (union-find) with a deterministic root policy."""

from disjoint_set.config import Backend, DisjointSetConfig, create_disjoint_set
from disjoint_set.core import (
    AssocDisjointSet,
    DisjointSet,
    DisjointSetLike,
    MutableDisjointSet,
)
from disjoint_set.ops import (
    add,
    empty,
    find,
    from_dict,
    from_list,
    groups,
    has,
    items,
    to_dict,
    to_list,
    union,
)

__version__ = "0.1.0"

__all__ = [
    # Structures
    "DisjointSet",
    "AssocDisjointSet",
    "MutableDisjointSet",
    "DisjointSetLike",
    # Configuration
    "Backend",
    "DisjointSetConfig",
    "create_disjoint_set",
    # Functional API
    "add",
    "empty",
    "find",
    "from_dict",
    "from_list",
    "groups",
    "has",
    "items",
    "to_dict",
    "to_list",
    "union",
]
