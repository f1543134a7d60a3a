"""Deterministic 64-bit pseudorandom bit generators.

SplitMix64 keeps a single 64-bit word of state. xoshiro256** keeps four
and is seeded by expanding one 64-bit seed through SplitMix64. Neither
is suitable for cryptographic use.

Usage:
    rng = Xoshiro256StarStar(seed) → rng() / rng.next() / next(rng)
    derive_seed(seed, task_index) → independent per-task seed
"""

from bitgen.generators.prng import (
    MASK64,
    SplitMix64,
    UniformRandomBitGenerator,
    Xoshiro256StarStar,
    derive_seed,
    rotate_left,
)

__all__ = [
    "MASK64",
    "UniformRandomBitGenerator",
    "SplitMix64",
    "Xoshiro256StarStar",
    "derive_seed",
    "rotate_left",
]
