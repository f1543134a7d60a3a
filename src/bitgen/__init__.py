"""bitgen — deterministic 64-bit pseudorandom bit generators.

Modules:
    generators: SplitMix64 and xoshiro256** plus the bit generator protocol
    adapters: Bridges to random.Random, NumPy blocks and JAX keys
    stream: Raw byte output for external statistical test suites
"""

__version__ = "0.1.0"
