"""SplitMix64 and xoshiro256** bit generators.

Both generators produce uniformly distributed unsigned 64-bit integers
and nothing else. Mapping draws to ranges or floats is left to
distribution adapters (see ``bitgen.adapters``), written against the
``UniformRandomBitGenerator`` protocol defined here.

Python integers never overflow, so every add, multiply and left shift
is masked back to 64 bits explicitly. Right shifts on non-negative
ints are already logical.

Instances are single-owner: they are not safe for concurrent mutation
from several threads. Give each thread or task its own generator,
seeded with ``derive_seed``.

References:
    - SplitMix64: https://prng.di.unimi.it/splitmix64.c
    - xoshiro256**: https://prng.di.unimi.it/xoshiro256starstar.c
    - Steele, Lea, Flood. Fast splittable pseudorandom number
      generators. OOPSLA 2014. doi:10.1145/2714064.2660195

"""

from __future__ import annotations

import operator
from typing import Protocol, runtime_checkable

MASK64 = 0xFFFFFFFFFFFFFFFF

GOLDEN_GAMMA = 0x9E3779B97F4A7C15


@runtime_checkable
class UniformRandomBitGenerator(Protocol):
    """Anything that yields uniform integers in ``[MIN, MAX]``.

    Distribution adapters only rely on these four members.
    """

    MIN: int
    MAX: int

    def next(self) -> int: ...

    def __call__(self) -> int: ...


def _as_seed(seed: int) -> int:
    # Wraps like a C unsigned conversion, so -1 becomes 2**64 - 1.
    return operator.index(seed) & MASK64


def rotate_left(x: int, k: int) -> int:
    """Rotate a 64-bit word left by ``k`` bits (``0 < k < 64``).

    Examples:
        >>> hex(rotate_left(0x8000000000000001, 1))
        '0x3'
        >>> rotate_left(1, 63) == 1 << 63
        True

    """
    return ((x << k) & MASK64) | (x >> (64 - k))


class SplitMix64:
    """Fixed-increment 64-bit avalanche mixer.

    Any seed is valid, zero included. The state advances by a constant
    odd increment and each output is the state pushed through a
    xor-shift/multiply finalizer.

    Args:
        seed: Initial state. Reduced modulo 2**64.

    Examples:
        >>> rng = SplitMix64(0)
        >>> hex(rng())
        '0xe220a8397b1dcdaf'
        >>> hex(rng.next())
        '0x6e789e6aa1b965f4'

    """

    __slots__ = ("state",)

    MIN = 0
    MAX = MASK64

    def __init__(self, seed: int) -> None:
        self.state = _as_seed(seed)

    def next(self) -> int:
        """Advance the state and return the next 64-bit output."""
        self.state = z = (self.state + GOLDEN_GAMMA) & MASK64
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
        return z ^ (z >> 31)

    __call__ = next

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.state == other.state

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self.state:#018x})"


class Xoshiro256StarStar:
    """xoshiro256** generator with 256 bits of state.

    The only way to build one is from a single 64-bit seed: the seed
    initializes a SplitMix64 whose first four outputs become the state
    words ``s0..s3`` in order. An all-zero state would make the
    generator emit zeros forever; the expansion avoids it with
    overwhelming probability and a debug assertion checks it.

    Args:
        seed: 64-bit seed. Reduced modulo 2**64.

    Examples:
        >>> rng = Xoshiro256StarStar(123)
        >>> rng.state[0] == SplitMix64(123).next()
        True
        >>> hex(rng())
        '0x325a8fa1d1a069f9'

    """

    __slots__ = ("s0", "s1", "s2", "s3")

    MIN = 0
    MAX = MASK64

    def __init__(self, seed: int) -> None:
        seq = SplitMix64(seed)
        self.s0 = seq.next()
        self.s1 = seq.next()
        self.s2 = seq.next()
        self.s3 = seq.next()
        assert self.s0 | self.s1 | self.s2 | self.s3, "xoshiro256** state must not be all zero"

    @property
    def state(self) -> tuple[int, int, int, int]:
        """The four state words ``(s0, s1, s2, s3)``."""
        return (self.s0, self.s1, self.s2, self.s3)

    def next(self) -> int:
        """Advance the state and return the next 64-bit output."""
        s0, s1, s2, s3 = self.s0, self.s1, self.s2, self.s3
        result = (rotate_left((s1 * 5) & MASK64, 7) * 9) & MASK64
        t = (s1 << 17) & MASK64

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotate_left(s3, 45)

        self.s0, self.s1, self.s2, self.s3 = s0, s1, s2, s3
        return result

    __call__ = next

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self.next()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.state == other.state

    __hash__ = None

    def __repr__(self) -> str:
        words = ", ".join(f"{w:#018x}" for w in self.state)
        return f"{type(self).__name__}(state=({words}))"


def derive_seed(seed: int, index: int) -> int:
    """Derive an independent seed for the ``index``-th task.

    Mixes ``seed + index`` through one SplitMix64 step, so neighbouring
    indices give unrelated seeds. Use it to hand each concurrent unit
    of work its own generator; there is no jump or split operation.

    Args:
        seed: Base seed shared by all tasks.
        index: Task index.

    Returns:
        A 64-bit seed.

    Examples:
        >>> derive_seed(123, 0) == SplitMix64(123).next()
        True
        >>> derive_seed(7, 1) == derive_seed(8, 0)
        True

    """
    return SplitMix64(_as_seed(seed) + _as_seed(index)).next()
