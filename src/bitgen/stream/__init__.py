"""Raw byte streaming of generator output.

Feeds external statistical test suites (dieharder, PractRand, TestU01)
through a pipe.

Usage:
    bitgen-dump NAME MEBIBYTES [SEED]
    write_random_bytes(rng, nbytes, out) → bytes written
"""

from bitgen.stream.dump import (
    BLOCK_SIZE,
    DEFAULT_SEED,
    GENERATORS,
    UnknownGeneratorError,
    get_generator,
    main,
    write_random_bytes,
)

__all__ = [
    "BLOCK_SIZE",
    "DEFAULT_SEED",
    "GENERATORS",
    "UnknownGeneratorError",
    "get_generator",
    "write_random_bytes",
    "main",
]
