from __future__ import annotations
from itertools import count, islice
from typing import Iterable, Iterator, List, Optional, TypeVar
import numpy as np

T = TypeVar("T")


def naturals(start: int = 0) -> Iterator[int]:
    return count(start)


def lazy_range(start: int, stop: Optional[int] = None, step: int = 1) -> Iterator[int]:
    """
    Like range(), but lazy all the way and stop=None means "never stop".
    """
    if step == 0:
        raise ValueError("step must not be 0")
    if stop is None:
        return count(start, step)
    return _bounded_range(start, stop, step)


def _bounded_range(start: int, stop: int, step: int) -> Iterator[int]:
    i = start
    while (step > 0 and i < stop) or (step < 0 and i > stop):
        yield i
        i += step


def take(iterable: Iterable[T], num: int) -> Iterator[T]:
    # pulls at most num elements from the source, never one more
    if num < 0:
        raise ValueError(f"num must be >= 0, got {num}")
    return islice(iterable, num)


def collect(iterable: Iterable[T]) -> List[T]:
    return list(iterable)


def collect_array(iterable: Iterable, dtype=None, width: Optional[int] = None) -> np.ndarray:
    """
    Materialize into a numpy array. Tuples of equal length become rows,
    e.g. index tuples of k-combinations -> int array of shape (C, k).
    width: row length; with it an empty input gives shape (0, width)
    instead of (0,), and rows are always 2-D (also for width=0).
    dtype defaults to int64 when there is nothing to infer it from.
    """
    items = list(iterable)
    if width is not None:
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")
        if width == 0 or not items:
            return np.empty((len(items), width), dtype=dtype if dtype is not None else np.int64)
        arr = np.asarray(items, dtype=dtype)
        if arr.ndim != 2 or arr.shape[1] != width:
            raise ValueError(f"expected rows of length {width}, got array of shape {arr.shape}")
        return arr
    if not items:
        return np.empty((0,), dtype=dtype if dtype is not None else np.int64)
    return np.asarray(items, dtype=dtype)
