"""Backend selection for disjoint sets."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from disjoint_set.core.assoc import AssocDisjointSet
from disjoint_set.core.base import DisjointSetLike
from disjoint_set.core.disjoint_set import DisjointSet

logger = logging.getLogger(__name__)


class Backend(StrEnum):
    """Available disjoint set representations."""

    HASH = "hash"  # Mapping-backed, elements must be hashable
    ASSOC = "assoc"  # Association list, elements only need ==


_BACKENDS: dict[Backend, Any] = {
    Backend.HASH: DisjointSet,
    Backend.ASSOC: AssocDisjointSet,
}


@dataclass(frozen=True)
class DisjointSetConfig:
    """Configuration for building disjoint sets.

    Attributes:
        backend: Representation to build ("hash" | "assoc").
    """

    backend: str = Backend.HASH

    def __post_init__(self) -> None:
        try:
            Backend(self.backend)
        except ValueError:
            raise ValueError(
                f"backend must be one of {tuple(b.value for b in Backend)}, got '{self.backend}'"
            ) from None

    def to_dict(self) -> dict[str, Any]:
        return {"backend": str(self.backend)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DisjointSetConfig:
        try:
            return cls(backend=str(data.get("backend", Backend.HASH)))
        except (ValueError, TypeError):
            return cls()  # Fall back to safe defaults


def backend_class(backend: str | Backend = Backend.HASH) -> Any:
    """Return the class implementing ``backend``.

    Raises:
        ValueError: If the backend name is unknown
    """
    return _BACKENDS[Backend(DisjointSetConfig(backend=backend).backend)]


def create_disjoint_set(
    pairs: Iterable[tuple[Any, Any]] = (),
    config: DisjointSetConfig | None = None,
) -> DisjointSetLike:
    """
    Create a disjoint set with the configured backend.

    Args:
        pairs: Optional ``(element, equivalent)`` pairs, unioned in order
        config: Backend configuration (defaults to the hash backend)

    Returns:
        A new immutable disjoint set
    """
    config = config or DisjointSetConfig()
    logger.debug("Creating disjoint set with %s backend", config.backend)
    result: DisjointSetLike = backend_class(config.backend).from_list(pairs)
    return result
