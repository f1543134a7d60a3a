"""Adapters from bit generators to distribution samplers.

The generators in ``bitgen.generators`` only emit uniform 64-bit
integers. These adapters hand that stream to code that already knows
how to sample distributions: the standard library's ``random.Random``,
NumPy word arrays and JAX PRNG keys. Every adapter is written against
``UniformRandomBitGenerator``, so any conforming generator works.

References:
    - random.Random subclassing: https://docs.python.org/3/library/random.html
    - JAX random: https://jax.readthedocs.io/en/latest/random-numbers.html

"""

from __future__ import annotations

import random

import jax
import numpy as np
from jax import Array

from bitgen.generators.prng import UniformRandomBitGenerator

_RECIP_BPF = 2.0**-53


class BitGeneratorRandom(random.Random):
    """A ``random.Random`` that draws every bit from a bit generator.

    Overriding ``random()`` and ``getrandbits()`` is enough for the
    standard library to route ``randint``, ``uniform``, ``choice``,
    ``shuffle``, ``gauss`` and friends through the wrapped generator.
    The generator owns the state, so ``seed()`` does nothing and
    ``getstate``/``setstate`` are unsupported.

    Args:
        rng: Generator to draw from. Shared, not copied.

    Examples:
        >>> from bitgen.generators import Xoshiro256StarStar
        >>> r = BitGeneratorRandom(Xoshiro256StarStar(123))
        >>> -10 <= r.randint(-10, 20) <= 20
        True
        >>> 0.0 <= r.random() < 1.0
        True

    """

    def __new__(cls, rng: UniformRandomBitGenerator):
        # The C base would try to seed itself from ``rng``.
        return super().__new__(cls)

    def __init__(self, rng: UniformRandomBitGenerator) -> None:
        self.rng = rng
        super().__init__()

    def seed(self, a=None, version=2) -> None:
        self.gauss_next = None

    def random(self) -> float:
        """Return a float in ``[0, 1)`` from the top 53 bits of one draw."""
        return (self.rng() >> 11) * _RECIP_BPF

    def getrandbits(self, k: int) -> int:
        """Return a non-negative int with ``k`` random bits."""
        if k < 0:
            raise ValueError("number of bits must be non-negative")
        words, rem = divmod(k, 64)
        x = 0
        for _ in range(words):
            x = (x << 64) | self.rng()
        if rem:
            x = (x << rem) | (self.rng() >> (64 - rem))
        return x

    def getstate(self):
        raise NotImplementedError("state is owned by the wrapped bit generator")

    def setstate(self, state) -> None:
        raise NotImplementedError("state is owned by the wrapped bit generator")


def fill_block(rng: UniformRandomBitGenerator, size: int) -> np.ndarray:
    """Draw ``size`` consecutive words into a ``uint64`` array.

    Args:
        rng: Generator to draw from.
        size: Number of words.

    Returns:
        1-D array of dtype ``uint64``, in draw order.

    Examples:
        >>> from bitgen.generators import SplitMix64
        >>> block = fill_block(SplitMix64(0), 4)
        >>> block.dtype
        dtype('uint64')
        >>> hex(int(block[0]))
        '0xe220a8397b1dcdaf'

    """
    if size < 0:
        raise ValueError(f"block size must be non-negative, got {size}")
    return np.fromiter((rng() for _ in range(size)), dtype=np.uint64, count=size)


def jax_key(rng: UniformRandomBitGenerator) -> Array:
    """Create a JAX PRNG key seeded from one draw of ``rng``.

    Only the top 31 bits of the draw are used so the seed fits JAX's
    default 32-bit integer mode.

    Args:
        rng: Generator to draw from (advanced by one step).

    Returns:
        Typed JAX PRNG key.

    Examples:
        >>> from bitgen.generators import Xoshiro256StarStar
        >>> key = jax_key(Xoshiro256StarStar(42))
        >>> key.shape
        ()

    """
    return jax.random.key(rng() >> 33)
