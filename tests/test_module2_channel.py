# file: tests/test_module2_channel.py

"""
Unit tests for Module 2: Channel simulation.

Statistical checks use seeded sources and 20,000 draws; tolerances are
several standard deviations wide.
"""

import threading

import numpy as np
import pytest

from src.module1_hamming import HammingCodec
from src.module2_channel import (
    RandomSource,
    NoisyChannel,
    inject_errors,
    is_message_lost,
    roll,
    validate_probability,
    ChannelConfigurationError,
)


N_DRAWS = 20000


class TestRandomSource:
    """Test the injected random source."""

    def test_same_seed_same_draws(self):
        a = RandomSource(seed=42)
        b = RandomSource(seed=42)

        assert [a.percent_draw() for _ in range(10)] == [b.percent_draw() for _ in range(10)]

    def test_percent_draw_range(self):
        source = RandomSource(seed=1)
        draws = [source.percent_draw() for _ in range(1000)]

        assert all(0.0 <= d < 100.0 for d in draws)

    def test_choice_index_range(self):
        source = RandomSource(seed=1)
        picks = {source.choice_index(15) for _ in range(2000)}

        assert picks == set(range(15))

    def test_choice_index_invalid(self):
        with pytest.raises(ValueError):
            RandomSource(seed=1).choice_index(0)

    def test_spawn_is_deterministic_and_independent(self):
        child_a = RandomSource(seed=9).spawn()
        child_b = RandomSource(seed=9).spawn()

        assert child_a.seed == child_b.seed
        assert child_a.percent_draw() == child_b.percent_draw()
        assert child_a._generator is not child_b._generator

    def test_concurrent_draws(self):
        """Draws from many threads all complete and stay in range."""
        source = RandomSource(seed=5)
        results = []
        lock = threading.Lock()

        def worker():
            local = [source.percent_draw() for _ in range(500)]
            with lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 4000
        assert all(0.0 <= r < 100.0 for r in results)


class TestProbabilities:
    """Validation and one-draw decisions."""

    @pytest.mark.parametrize("value", [-0.1, 100.5, "abc", None])
    def test_invalid_probability(self, value):
        with pytest.raises(ChannelConfigurationError):
            validate_probability(value)

    def test_valid_probability_is_float(self):
        assert validate_probability(10) == 10.0

    def test_zero_never_fires(self):
        source = RandomSource(seed=3)
        assert not any(roll(0, source) for _ in range(2000))

    def test_hundred_always_fires(self):
        source = RandomSource(seed=3)
        assert all(roll(100, source) for _ in range(2000))

    def test_loss_rate_converges(self):
        """Observed drop rate is close to the configured probability."""
        source = RandomSource(seed=2024)
        lost = sum(is_message_lost(2, source) for _ in range(N_DRAWS))

        assert abs(lost / N_DRAWS - 0.02) < 0.006


class TestInjectErrors:
    """Per-frame single bit error injection."""

    def test_zero_probability_passes_frames_through(self):
        frames = HammingCodec().encode(b'payload bytes')
        noisy, flipped = inject_errors(frames, 0, RandomSource(seed=1))

        np.testing.assert_array_equal(noisy, frames)
        assert not flipped.any()

    def test_hundred_flips_exactly_one_bit_per_frame(self):
        frames = HammingCodec().encode(b'payload bytes')
        noisy, flipped = inject_errors(frames, 100, RandomSource(seed=1))

        assert flipped.all()
        assert (noisy != frames).sum(axis=1).tolist() == [1] * frames.shape[0]

    def test_input_not_mutated(self):
        frames = np.zeros((50, 15), dtype=np.uint8)
        inject_errors(frames, 100, RandomSource(seed=1))

        assert not frames.any()

    def test_frame_error_rate_converges(self):
        """Fraction of disturbed frames is close to q, never more than one flip."""
        frames = np.zeros((N_DRAWS, 15), dtype=np.uint8)
        noisy, flipped = inject_errors(frames, 10, RandomSource(seed=77))

        flips_per_frame = noisy.sum(axis=1)
        assert flips_per_frame.max() == 1
        np.testing.assert_array_equal(flips_per_frame.astype(bool), flipped)
        assert abs(flipped.mean() - 0.10) < 0.01

    def test_flip_position_is_uniform(self):
        frames = np.zeros((15000, 15), dtype=np.uint8)
        noisy, _ = inject_errors(frames, 100, RandomSource(seed=11))

        per_position = noisy.sum(axis=0).astype(np.int64)
        assert np.all(np.abs(per_position - 1000) < 150)

    def test_seeded_injection_is_reproducible(self):
        frames = np.zeros((200, 15), dtype=np.uint8)
        a, _ = inject_errors(frames, 30, RandomSource(seed=8))
        b, _ = inject_errors(frames, 30, RandomSource(seed=8))

        np.testing.assert_array_equal(a, b)

    def test_rejects_one_dimensional_input(self):
        with pytest.raises(ValueError, match="2-D"):
            inject_errors(np.zeros(15, dtype=np.uint8), 10, RandomSource(seed=1))

    def test_rejects_bad_probability(self):
        with pytest.raises(ChannelConfigurationError):
            inject_errors(np.zeros((1, 15), dtype=np.uint8), 150, RandomSource(seed=1))


class TestNoisyChannel:
    """Channel object built from configuration."""

    def test_from_config(self, config):
        channel = NoisyChannel.from_config(config)

        assert channel.message_loss_probability == 2.0
        assert channel.frame_error_probability == 10.0
        assert channel.source.seed == 1234

    def test_from_config_uses_given_source(self, config):
        source = RandomSource(seed=3)
        channel = NoisyChannel.from_config(config, source=source)

        assert channel.source is source

    def test_missing_section(self):
        with pytest.raises(ChannelConfigurationError, match="Missing required config key"):
            NoisyChannel.from_config({})

    def test_invalid_probability_rejected(self):
        with pytest.raises(ChannelConfigurationError):
            NoisyChannel(message_loss_probability=101)

    def test_lose_message_and_transmit(self):
        channel = NoisyChannel(100, 100, RandomSource(seed=4))
        frames = np.zeros((3, 15), dtype=np.uint8)

        assert channel.lose_message()
        noisy, flipped = channel.transmit(frames)
        assert flipped.all()
        assert noisy.sum() == 3
