from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

N = TypeVar("N")


@dataclass(frozen=True)
class TreeVisit(Generic[N]):
    node: N
    level: int
    parent: Optional[N]


def walk_depth_first(
        root: N,
        children: Callable[[N], Iterable[N]],
        max_depth: Optional[int] = None,
) -> Iterator[TreeVisit[N]]:
    """
    Pre-order depth-first walk starting at root (level 0, parent None).
    Uses an explicit stack of pending (node, level, parent) entries instead of
    recursion, so very deep trees do not hit the interpreter recursion limit.
    max_depth: do not descend below this level (None = unlimited).
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0 or None, got {max_depth}")
    return _walk(root, children, max_depth)


def _walk(root, children, max_depth):
    stack: List[Tuple[N, int, Optional[N]]] = [(root, 0, None)]
    while stack:
        node, level, parent = stack.pop()
        yield TreeVisit(node, level, parent)

        if max_depth is not None and level >= max_depth:
            continue
        kids = list(children(node))
        # reversed so the first child is popped first
        for child in reversed(kids):
            stack.append((child, level + 1, node))
