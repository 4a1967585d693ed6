from typing import Iterable, List


class CountingSource:
    """Iterator double that records how many elements were pulled."""

    def __init__(self, data: Iterable):
        self._it = iter(data)
        self.pulls = 0
        self.stop_signals = 0

    def __iter__(self):
        return self

    def __next__(self):
        try:
            item = next(self._it)
        except StopIteration:
            self.stop_signals += 1
            raise
        self.pulls += 1
        return item


class FailingSource:
    def __init__(self, good: List, exc: Exception):
        self._good = list(good)
        self._exc = exc

    def __iter__(self):
        return self

    def __next__(self):
        if self._good:
            return self._good.pop(0)
        raise self._exc
