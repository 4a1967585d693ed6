from __future__ import annotations
from itertools import islice
from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class LazyBuffer(Generic[T]):
    """
    Random-access cache in front of a lazy iterable.
    Elements are pulled from the source only when asked for (fetch/prefill)
    and are kept for the whole lifetime of the buffer.
    """

    def __init__(self, iterable: Iterable[T], verbose: bool = False):
        self.iterator: Iterator[T] = iter(iterable)
        self.verbose = verbose
        self._buffer: List[T] = []
        self._done = False

    @property
    def length(self) -> int:
        return len(self._buffer)

    @property
    def exhausted(self) -> bool:
        return self._done

    def __len__(self) -> int:
        return len(self._buffer)

    def get(self, idx: int) -> T:
        # only already fetched positions are valid, negative ones included
        if idx < 0 or idx >= len(self._buffer):
            raise IndexError(f"buffer index {idx} out of range (length={len(self._buffer)})")
        return self._buffer[idx]

    __getitem__ = get

    def fetch(self) -> bool:
        if self._done:
            return False

        try:
            item = next(self.iterator)
        except StopIteration:
            self._mark_done()
            return False

        self._buffer.append(item)
        return True

    def prefill(self, k: int) -> None:
        have = len(self._buffer)
        if self._done or k <= have:
            return

        self._buffer.extend(islice(self.iterator, k - have))
        if len(self._buffer) < k:
            self._mark_done()

    def _mark_done(self) -> None:
        self._done = True
        if self.verbose:
            print(f"[LazyBuffer] source exhausted after {len(self._buffer)} elements")
