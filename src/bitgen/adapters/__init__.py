"""Bridges from bit generators to distribution sampling.

Usage:
    BitGeneratorRandom(rng).randint(a, b) → stdlib distributions
    fill_block(rng, n) → numpy uint64 array
    jax_key(rng) → jax.random key
"""

from bitgen.adapters.distributions import (
    BitGeneratorRandom,
    fill_block,
    jax_key,
)

__all__ = [
    "BitGeneratorRandom",
    "fill_block",
    "jax_key",
]
