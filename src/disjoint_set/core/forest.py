"""Parent-pointer forest primitives shared by the hash-backed structures.

Both ``DisjointSet`` and ``MutableDisjointSet`` keep a plain ``dict`` mapping
every element to its immediate parent. The functions here walk and rewrite
that dict; callers decide whether the dict is a private copy or live state.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def same_node(a: object, b: object) -> bool:
    """Element equality that also holds for objects unequal to themselves, like NaN."""
    return a is b or a == b


def chain(parent: Mapping[T, T], x: T) -> list[T]:
    """Return the path from ``x`` to its root, both inclusive.

    An element that was never inserted is its own root, so its chain is ``[x]``.
    """
    path = [x]
    if x not in parent:
        return path
    node = x
    while not same_node(parent[node], node):
        node = parent[node]
        path.append(node)
    return path


def resolve(parent: Mapping[T, T], x: T) -> T | None:
    """Return the root of ``x`` without compressing, or None if absent."""
    if x not in parent:
        return None
    node = x
    while not same_node(parent[node], node):
        node = parent[node]
    return node


def link(parent: dict[T, T], x: T, y: T) -> T:
    """Merge the classes of ``x`` and ``y`` in place and return the root.

    The root of ``x`` always survives. Every node on both chains is pointed
    straight at it. New keys are appended in chain order, ``x`` side first.
    """
    path_x = chain(parent, x)
    path_y = chain(parent, y)
    root = path_x[-1]
    for node in path_x:
        parent[node] = root
    for node in path_y:
        parent[node] = root
    return root


def group(parent: Mapping[T, T]) -> dict[T, tuple[T, ...]]:
    """Group all elements by root. Members keep insertion order."""
    members: dict[T, list[T]] = {}
    for node in parent:
        root = resolve(parent, node)
        members.setdefault(root, []).append(node)  # type: ignore[arg-type]
    return {root: tuple(nodes) for root, nodes in members.items()}


def validate(parent: Mapping[T, T]) -> None:
    """Check total coverage and acyclicity of a raw parent mapping.

    Raises:
        ValueError: naming the first element whose parent is missing or
            whose chain loops without reaching a root.
    """
    for node, up in parent.items():
        if up not in parent:
            raise ValueError(f"parent {up!r} of {node!r} is not an element of the set")

    settled: set[T] = set()
    for start in parent:
        if start in settled:
            continue
        seen: list[T] = []
        on_path: set[T] = set()
        node = start
        while node not in settled and not same_node(parent[node], node):
            if node in on_path:
                raise ValueError(f"parent chain of {start!r} does not reach a root")
            seen.append(node)
            on_path.add(node)
            node = parent[node]
        settled.add(node)
        settled.update(seen)
