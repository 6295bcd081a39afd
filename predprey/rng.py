"""
Deterministic RNG utilities for the predator-prey simulation.

Uses SHA256 hashing to derive stable seeds from hierarchical components
(world_seed, purpose). All randomness uses numpy.random.Generator(PCG64)
for reproducible cross-session results.

A single shared Randomizer serves the whole process by default. Every
consumer also accepts an explicit Randomizer so tests can inject their own.
"""

import hashlib
import numpy as np
from typing import Any, List, Optional

from .constants import DEFAULT_SEED


def make_seed(*components: Any) -> int:
    """
    Generate deterministic 64-bit seed from hierarchical components.

    Uses SHA256 to hash components into stable seed value.

    Args:
        *components: Seed components (world_seed, purpose label, etc.)

    Returns:
        64-bit integer seed for numpy RNG

    Example:
        populate_seed = make_seed(world_seed, "populate")
    """
    # Join all components with colon separator
    hash_input = ":".join(str(c) for c in components)

    # SHA256 hash and extract 64-bit integer
    hash_bytes = hashlib.sha256(hash_input.encode('utf-8')).digest()
    seed = int.from_bytes(hash_bytes[:8], byteorder='big')

    return seed


class Randomizer:
    """
    Uniform random source backed by a PCG64 generator.

    Attributes:
        seed: Seed the generator was created with (used by reset())
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self.seed = seed
        self._rng = np.random.Generator(np.random.PCG64(seed))

    def next_int(self, bound: int) -> int:
        """
        Draw a uniform integer in [0, bound).

        Raises:
            ValueError: If bound is not positive
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return int(self._rng.integers(0, bound))

    def next_double(self) -> float:
        """Draw a uniform float in [0.0, 1.0)"""
        return float(self._rng.random())

    def shuffle(self, items: List[Any]):
        """Shuffle a list in place"""
        # Index permutation keeps list element types intact (no numpy coercion)
        order = self._rng.permutation(len(items))
        items[:] = [items[i] for i in order]

    def reset(self, seed: Optional[int] = None):
        """
        Re-create the generator so the sequence starts over.

        Args:
            seed: New seed (default: the seed this Randomizer was built with)
        """
        if seed is not None:
            self.seed = seed
        self._rng = np.random.Generator(np.random.PCG64(self.seed))


_shared: Optional[Randomizer] = None


def get_random() -> Randomizer:
    """Return the process-wide Randomizer, creating it on first use"""
    global _shared
    if _shared is None:
        _shared = Randomizer(DEFAULT_SEED)
    return _shared


def reset_random(seed: Optional[int] = None) -> Randomizer:
    """
    Reseed the process-wide Randomizer.

    Args:
        seed: New seed (default: keep the current seed)

    Returns:
        The shared Randomizer
    """
    rng = get_random()
    rng.reset(seed)
    return rng
