from __future__ import annotations
from dataclasses import dataclass
from itertools import islice
from typing import Any, Dict, Iterator, List, Optional, Tuple
import math
import time
import numpy as np
from tqdm.auto import tqdm

from src.lazy_combinations import LazyCombinations
from src.lazy_combinations_conf import CombinationsConfig
from src.seq.sequences import naturals, take, collect_array
from src.seq.tree_walk import walk_depth_first

# Enumeration
K = 3
INPUT_SIZE: Optional[int] = 12  # None -> infinite input (0, 1, 2, ...)
LIMIT: Optional[int] = None  # max combinations to emit, required for infinite input
PROGRESS = True
VERBOSE = True


@dataclass
class EnumerationRunConfig:
    k: int = K
    input_size: Optional[int] = INPUT_SIZE
    limit: Optional[int] = LIMIT
    progress: bool = PROGRESS
    verbose: bool = VERBOSE

    def validate(self) -> None:
        if self.k < 0:
            raise ValueError("k must be >= 0.")
        if self.input_size is not None and self.input_size < 0:
            raise ValueError("input_size must be >= 0 or None.")
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must be >= 0 or None.")
        if self.input_size is None and self.limit is None:
            raise ValueError("limit is required when input_size is None (infinite input).")


class _CountingSource:
    def __init__(self, it: Iterator[int]):
        self._it = it
        self.pulled = 0

    def __iter__(self):
        return self

    def __next__(self) -> int:
        item = next(self._it)
        self.pulled += 1
        return item


def _pbar(iterable, **kwargs):
    return tqdm(iterable, **kwargs)


def run(cfg: EnumerationRunConfig) -> Dict[str, Any]:
    cfg.validate()

    src = naturals() if cfg.input_size is None else take(naturals(), cfg.input_size)
    source = _CountingSource(src)
    combos = LazyCombinations(source, cfg.k, CombinationsConfig(snapshot=False, verbose=cfg.verbose))

    expected = None
    if cfg.input_size is not None:
        expected = math.comb(cfg.input_size, cfg.k) if cfg.k <= cfg.input_size else 0
    total = expected if cfg.limit is None else (cfg.limit if expected is None else min(expected, cfg.limit))

    it = combos.iter_indices()
    if cfg.limit is not None:
        it = islice(it, cfg.limit)
    if cfg.progress:
        it = _pbar(it, total=total, desc=f"Combinations k={cfg.k}", unit="comb")

    t0 = time.perf_counter()
    indices = collect_array(it, dtype=np.int64, width=cfg.k)
    t1 = time.perf_counter()

    summary = {
        "k": cfg.k,
        "emitted": int(indices.shape[0]),
        "expected": expected,
        "pulled": source.pulled,
        "buffered": combos.n,
        "exhausted": combos.pool.exhausted,
        "seconds": t1 - t0,
        "indices": indices,
    }
    if cfg.verbose:
        print(f"[Run] k={cfg.k} emitted={summary['emitted']} expected={expected} "
              f"pulled={source.pulled} time={summary['seconds']:.3f}s")
    return summary


def format_prefix_tree(rows: np.ndarray, max_rows: Optional[int] = None) -> List[str]:
    """
    Index rows as a prefix tree, one line per node, indented by depth.
    Rows must be in lexicographic order (as emitted by LazyCombinations).
    """
    children: Dict[Tuple[int, ...], List[Tuple[int, ...]]] = {}
    for row in rows[:max_rows]:
        tup = tuple(int(v) for v in row)
        for depth in range(1, len(tup) + 1):
            kids = children.setdefault(tup[:depth - 1], [])
            if not kids or kids[-1] != tup[:depth]:
                kids.append(tup[:depth])

    lines = []
    for visit in walk_depth_first((), lambda prefix: children.get(prefix, [])):
        if visit.level == 0:
            continue
        lines.append("  " * visit.level + str(visit.node[-1]))
    return lines


if __name__ == "__main__":
    result = run(EnumerationRunConfig())
    print("\n===== Combinations =====")
    shown = min(10, result["emitted"])
    for line in format_prefix_tree(result["indices"], max_rows=shown):
        print(line)
    if result["emitted"] > shown:
        print(f"  ... ({result['emitted'] - shown} more)")
