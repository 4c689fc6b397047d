from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# timeconductor/core/time.py
MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60_000


@dataclass(frozen=True)
class ReplayClock:
    """
    Deterministic replay clock.

    - Defines how historical time advances (epoch milliseconds)
    - Tick sources consume it, never mutate it
    """
    start_ms: int
    end_ms: int
    step_ms: int = MS_PER_SECOND

    def __post_init__(self):
        if self.step_ms <= 0:
            raise ValueError(f"step_ms must be positive, got {self.step_ms}")

    def __iter__(self) -> Iterator[int]:
        t = self.start_ms
        while t <= self.end_ms:
            yield t
            t += self.step_ms

    def __len__(self) -> int:
        if self.end_ms < self.start_ms:
            return 0
        return (self.end_ms - self.start_ms) // self.step_ms + 1
