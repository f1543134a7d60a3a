"""Tests for bitgen.generators module."""

from __future__ import annotations

import copy
import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from bitgen.generators import (
    MASK64,
    SplitMix64,
    UniformRandomBitGenerator,
    Xoshiro256StarStar,
    derive_seed,
    rotate_left,
)

GENERATORS = [SplitMix64, Xoshiro256StarStar]
NUM_TESTS = 1 << 15
DEFAULT_SEED = 1234567890

seeds = st.integers(min_value=0, max_value=MASK64)


class TestRotateLeft:
    """Tests for rotate_left."""

    def test_wraps_high_bit(self):
        assert rotate_left(1 << 63, 1) == 1

    def test_stays_in_64_bits(self):
        assert rotate_left(MASK64, 45) == MASK64

    @given(seeds, st.integers(min_value=1, max_value=63))
    @settings(max_examples=50)
    def test_inverse_rotation(self, x, k):
        assert rotate_left(rotate_left(x, k), 64 - k) == x


class TestSplitMix64:
    """Tests for SplitMix64."""

    def test_known_sequence_seed_zero(self):
        rng = SplitMix64(0)
        assert [rng() for _ in range(4)] == [
            0xE220A8397B1DCDAF,
            0x6E789E6AA1B965F4,
            0x06C45D188009454F,
            0xF88BB8A8724C81EC,
        ]

    def test_known_first_output_seed_123(self):
        assert SplitMix64(123).next() == 0xB4DC9BD462DE412B

    def test_state_advances_by_golden_gamma(self):
        rng = SplitMix64(0)
        rng.next()
        assert rng.state == 0x9E3779B97F4A7C15

    def test_state_wraps(self):
        rng = SplitMix64(MASK64)
        rng.next()
        assert rng.state == 0x9E3779B97F4A7C14

    def test_negative_seed_wraps(self):
        assert SplitMix64(-1).state == MASK64

    def test_rejects_float_seed(self):
        with pytest.raises(TypeError):
            SplitMix64(1.5)

    def test_call_and_next_agree(self):
        a, b, c = SplitMix64(9), SplitMix64(9), SplitMix64(9)
        assert a() == b.next() == next(c)


class TestXoshiro256StarStar:
    """Tests for Xoshiro256StarStar."""

    def test_known_sequence_seed_123(self):
        rng = Xoshiro256StarStar(123)
        assert [rng() for _ in range(3)] == [
            0x325A8FA1D1A069F9,
            0xF835E3C7656D4D5E,
            0x77AA2B46C3F2A62F,
        ]

    def test_known_first_output_seed_zero(self):
        assert Xoshiro256StarStar(0).next() == 0x99EC5F36CB75F2B4

    def test_zero_seed_gives_nonzero_state(self):
        assert any(Xoshiro256StarStar(0).state)

    def test_state_is_four_words(self):
        state = Xoshiro256StarStar(5).state
        assert len(state) == 4
        assert all(0 <= w <= MASK64 for w in state)

    def test_output_uses_pre_update_s1(self):
        rng = Xoshiro256StarStar(77)
        s1 = rng.state[1]
        expected = (rotate_left((s1 * 5) & MASK64, 7) * 9) & MASK64
        assert rng.next() == expected


class TestSeedExpansion:
    """Tests for seeding xoshiro256** through SplitMix64."""

    @given(seeds)
    @settings(max_examples=100)
    def test_state_is_first_four_splitmix_outputs(self, seed):
        seq = SplitMix64(seed)
        assert Xoshiro256StarStar(seed).state == tuple(seq() for _ in range(4))

    def test_seed_123(self):
        assert Xoshiro256StarStar(123).state == (
            0xB4DC9BD462DE412B,
            0xFA023CE9F06FB77C,
            0xDC12D311D371CBE8,
            0xAFD2040C909881FF,
        )


@pytest.mark.parametrize("generator", GENERATORS)
class TestBitGeneratorContract:
    """Properties shared by every generator."""

    def test_satisfies_protocol(self, generator):
        assert isinstance(generator(1), UniformRandomBitGenerator)

    def test_declared_range(self, generator):
        assert generator.MIN == 0
        assert generator.MAX == 2**64 - 1

    @given(seed=seeds)
    @settings(max_examples=20)
    def test_deterministic(self, generator, seed):
        a, b = generator(seed), generator(seed)
        assert [a() for _ in range(64)] == [b() for _ in range(64)]

    @pytest.mark.parametrize("seed", [0, 1, 123, DEFAULT_SEED, MASK64])
    def test_sequence_neighbors_differ(self, generator, seed):
        rng = generator(seed)
        prev = rng()
        for _ in range(NUM_TESTS):
            curr = rng()
            assert curr != prev
            prev = curr

    def test_outputs_in_range(self, generator):
        rng = generator(2024)
        assert all(generator.MIN <= x <= generator.MAX for x in itertools.islice(rng, 1000))

    def test_full_width_coverage(self, generator):
        rng = generator(31337)
        draws = list(itertools.islice(rng, 4096))
        ored = 0
        anded = MASK64
        for x in draws:
            ored |= x
            anded &= x
        assert ored == MASK64
        assert anded == 0

    def test_copy_is_independent(self, generator):
        rng = generator(42)
        rng()
        clone = copy.copy(rng)
        assert clone == rng
        expected = rng()
        assert clone() == expected
        rng()
        assert clone != rng

    def test_different_seeds_differ(self, generator):
        assert generator(0)() != generator(1)()

    def test_unhashable(self, generator):
        with pytest.raises(TypeError):
            hash(generator(0))


class TestDeriveSeed:
    """Tests for derive_seed."""

    def test_matches_splitmix_step(self):
        assert derive_seed(123, 0) == 0xB4DC9BD462DE412B

    def test_indices_give_distinct_seeds(self):
        derived = {derive_seed(1234567890, i) for i in range(256)}
        assert len(derived) == 256

    def test_wraps(self):
        assert derive_seed(MASK64, 1) == derive_seed(0, 0)

    def test_task_streams_differ(self):
        streams = [Xoshiro256StarStar(derive_seed(7, i)) for i in range(4)]
        firsts = [rng() for rng in streams]
        assert len(set(firsts)) == 4
