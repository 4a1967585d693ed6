from __future__ import annotations
from copy import deepcopy
import operator
from typing import Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from src.lazy_buffer import LazyBuffer
from src.lazy_combinations_conf import CombinationsConfig

T = TypeVar("T")
R = TypeVar("R")


class LazyCombinations(Generic[T]):
    """
    k-element combinations of `data` in lexicographic index order.

    `data` may be any iterable, also an infinite one: elements are pulled
    into a LazyBuffer only when the enumeration first reaches their position.
    The object can be iterated more than once; every new traversal starts
    again at (0, 1, ..., k-1) and reuses the already buffered elements.
    """

    def __init__(self, data: Iterable[T], k: int, cfg: Optional[CombinationsConfig] = None):
        if isinstance(k, bool):
            raise TypeError("k must be an int, got bool")
        try:
            k = operator.index(k)
        except TypeError:
            raise TypeError(f"k must be an int, got {type(k).__name__}") from None
        if k < 0:
            raise ValueError(f"k must be >= 0, got {k}")

        self.cfg = cfg if cfg is not None else CombinationsConfig()
        self.cfg.validate()

        self._k = k
        self._indices: List[int] = list(range(k))
        self._started = False
        self.pool: LazyBuffer[T] = LazyBuffer(data, verbose=self.cfg.verbose)
        self.pool.prefill(k)

    @property
    def k(self) -> int:
        return self._k

    @property
    def n(self) -> int:
        return self.pool.length

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        return self._traverse(self._elements)

    def iter_indices(self) -> Iterator[Tuple[int, ...]]:
        return self._traverse(tuple)

    def _elements(self, indices: List[int]) -> Tuple[T, ...]:
        if self.cfg.snapshot:
            return tuple(deepcopy(self.pool.get(i)) for i in indices)
        return tuple(self.pool.get(i) for i in indices)

    def _traverse(self, emit: Callable[[List[int]], R]) -> Iterator[R]:
        if self._started:
            self._reset()
        self._started = True
        return self._advance(self._indices, emit)

    def _reset(self) -> None:
        if self.cfg.verbose:
            print(f"[Combos] restart k={self._k} (buffered={self.pool.length})")
        self._indices = list(range(self._k))
        self.pool.prefill(self._k)

    def _advance(self, indices: List[int], emit: Callable[[List[int]], R]) -> Iterator[R]:
        # each traversal owns its indices list, a restart binds a new one
        k = self._k
        pool = self.pool

        if k > pool.length:
            if self.cfg.verbose:
                print(f"[Combos] k={k} > available={pool.length} -> nothing to emit")
            return

        yield emit(indices)
        if k == 0:
            return

        while True:
            n = pool.length
            if indices[k - 1] == n - 1 and pool.fetch():
                n += 1

            # rightmost position not yet at its maximum i + n - k
            i = k - 1
            while indices[i] == i + n - k:
                if i == 0:
                    if self.cfg.verbose:
                        print(f"[Combos] done: k={k} n={n}")
                    return
                i -= 1

            indices[i] += 1
            for j in range(i + 1, k):
                indices[j] = indices[j - 1] + 1

            yield emit(indices)
