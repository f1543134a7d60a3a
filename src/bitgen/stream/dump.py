"""Stream raw generator output for external statistical testing.

Writes the output of a named bit generator to a binary stream, block
by block, with no framing. The consumer has to know the byte count out
of band. Typical use feeds dieharder::

    bitgen-dump 'xoshiro256**' 1024 123 | dieharder -g 200 -d 201

Progress information goes to the log (stderr under the CLI), never to
the data stream.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence
from typing import BinaryIO

from bitgen.adapters.distributions import fill_block
from bitgen.generators.prng import MASK64, SplitMix64, UniformRandomBitGenerator, Xoshiro256StarStar

logger = logging.getLogger(__name__)

BLOCK_SIZE = 1024
DEFAULT_SEED = 1234567890
MEBIBYTE = 1024 * 1024

GENERATORS: dict[str, Callable[[int], UniformRandomBitGenerator]] = {
    "splitmix64": SplitMix64,
    "xoshiro256**": Xoshiro256StarStar,
}


class UnknownGeneratorError(KeyError):
    """Raised when a generator name is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown rng '{self.name}'"


def get_generator(name: str) -> Callable[[int], UniformRandomBitGenerator]:
    """Look up a generator factory by its registry name.

    Examples:
        >>> get_generator("splitmix64").__name__
        'SplitMix64'

    """
    try:
        return GENERATORS[name]
    except KeyError:
        raise UnknownGeneratorError(name) from None


def write_random_bytes(
    rng: UniformRandomBitGenerator,
    nbytes: int,
    out: BinaryIO,
    block_size: int = BLOCK_SIZE,
) -> int:
    """Write whole blocks of generator output until ``nbytes`` are covered.

    Each block holds ``block_size`` 64-bit words in native byte order.
    Output is rounded up to a whole number of blocks.

    Args:
        rng: Generator to draw from.
        nbytes: Minimum number of bytes to write.
        out: Binary stream.
        block_size: Words per block.

    Returns:
        Number of bytes actually written.

    """
    if block_size < 1:
        raise ValueError(f"block size must be positive, got {block_size}")
    written = 0
    while written < nbytes:
        block = fill_block(rng, block_size)
        out.write(block.tobytes())
        written += block.nbytes
    return written


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None


def _parse_size(text: str) -> int:
    value = _parse_int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"size must be non-negative: {text!r}")
    return value


def _parse_seed(text: str) -> int:
    value = _parse_int(text)
    if not 0 <= value <= MASK64:
        raise argparse.ArgumentTypeError(f"seed must be in [0, 2**64): {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    names = "\n".join(f"  {name}" for name in GENERATORS)
    parser = argparse.ArgumentParser(
        prog="bitgen-dump",
        description="Write raw pseudorandom bytes to stdout.",
        epilog=f"available rngs:\n{names}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("name", help="generator name")
    parser.add_argument("mebibytes", type=_parse_size, help="amount of output in MiB")
    parser.add_argument("seed", type=_parse_seed, nargs="?", default=DEFAULT_SEED, help="64-bit seed")
    return parser


def main(argv: Sequence[str] | None = None, out: BinaryIO | None = None) -> int:
    """Command-line entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)

    try:
        factory = get_generator(args.name)
    except UnknownGeneratorError as exc:
        logger.error("%s", exc)
        return 1

    nbytes = MEBIBYTE * args.mebibytes
    logger.info("rng: %s", args.name)
    logger.info("seed: %d", args.seed)
    logger.info("bytes: %d", nbytes)

    if out is None:
        out = sys.stdout.buffer
    try:
        write_random_bytes(factory(args.seed), nbytes, out)
        out.flush()
    except BrokenPipeError:
        logger.debug("output closed by consumer")
        if out is sys.stdout.buffer:
            # Keep the interpreter from flushing into the closed pipe at exit.
            os.dup2(os.open(os.devnull, os.O_WRONLY), sys.stdout.fileno())
    return 0


if __name__ == "__main__":
    sys.exit(main())
