"""
Uniform random source with deterministic seed derivation.
"""

import hashlib

import numpy as np


# Seed namespace convention:
# - Use one base seed per run and derive sub-streams with
#   RNG.derive_seed(seed, "<namespace>", ...).
# - Reserved namespaces: sample, benchmark.
class RNG:
    def __init__(self, seed=None):
        self.seed = None if seed is None else int(seed)
        self.rng = np.random.default_rng(self.seed)

    @staticmethod
    def derive_seed(base_seed, *parts):
        h = hashlib.sha256()
        h.update(str(base_seed).encode())
        for part in parts:
            h.update(b":")
            h.update(str(part).encode())
        return int(h.hexdigest(), 16) % (2**32)

    def uniform_bool(self) -> bool:
        return bool(self.rng.integers(0, 2))

    def uniform_int(self) -> int:
        return int(self.rng.integers(0, 2**32))

    def uniform_float(self) -> float:
        return float(self.rng.random())

    def uniform_index(self, bound) -> int:
        bound = int(bound)
        if bound <= 0:
            raise ValueError(f"uniform_index bound must be positive, got {bound}")
        return int(self.rng.integers(0, bound))

    def uniform_int_inclusive(self, low, high) -> int:
        low, high = int(low), int(high)
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return int(self.rng.integers(low, high, endpoint=True))

    def uniform_float_in_range(self, low, high) -> float:
        return float(self.rng.uniform(low, high))

    def shuffle(self, seq):
        """Shuffle a mutable sequence in place."""
        self.rng.shuffle(seq)


_default_rng = RNG()


def seed(value):
    """Reseed the process-wide random source."""
    global _default_rng
    _default_rng = RNG(value)
    return _default_rng


def get_rng(rng=None):
    """Return ``rng`` when given, else the process-wide source."""
    if rng is not None:
        return rng
    return _default_rng
