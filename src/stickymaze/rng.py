# src/stickymaze/rng.py
# Park–Miller "minimal standard" generator, owned by each maze so runs can
# be replayed from a seed.

import os
from dataclasses import dataclass
from typing import List, TypeVar

A = 16807
M = 0x7FFFFFFF  # 2^31-1

T = TypeVar("T")

def pm_next(state: int) -> int:
    return (state * A) % M

def normalize_seed(seed: int) -> int:
    """Map any integer onto a valid generator state (1..M-1)."""
    return (seed % (M - 1)) + 1

@dataclass
class PMRandom:
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(normalize_seed(seed))

    @classmethod
    def from_entropy(cls) -> "PMRandom":
        return cls.from_seed(int.from_bytes(os.urandom(4), "little"))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Uniform draw in 1..n (rejection sampling, no modulo bias)."""
        if n <= 0:
            raise ValueError("bounded() needs n > 0")
        span = M - 1                  # next32 yields 1..M-1
        limit = span - (span % n)
        while True:
            w = self.next32() - 1     # 0..M-2
            if w < limit:
                return (w % n) + 1

    def randint(self, lo: int, hi: int) -> int:
        # Same contract as random.Random.randint: lo..hi inclusive.
        if hi < lo:
            raise ValueError(f"empty range {lo}..{hi}")
        return lo + self.bounded(hi - lo + 1) - 1

    def shuffle(self, items: List[T]) -> None:
        # Fisher–Yates, in place.
        for i in range(len(items) - 1, 0, -1):
            j = self.bounded(i + 1) - 1
            items[i], items[j] = items[j], items[i]
