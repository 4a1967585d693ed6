from __future__ import annotations
from dataclasses import dataclass


@dataclass
class CombinationsConfig:
    snapshot: bool = True  # deepcopy buffered values into every emitted tuple
    verbose: bool = False

    def validate(self) -> None:
        if not isinstance(self.snapshot, bool):
            raise ValueError(f"snapshot must be a bool, got {self.snapshot!r}")
        if not isinstance(self.verbose, bool):
            raise ValueError(f"verbose must be a bool, got {self.verbose!r}")
