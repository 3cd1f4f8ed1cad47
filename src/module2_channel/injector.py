# file: src/module2_channel/injector.py

"""
Error injection for Hamming frame blocks.

Models the noisy hop: every frame independently receives at most one bit
flip, and a whole message can be lost before it is encoded.
"""

from typing import Tuple

import numpy as np

from .errors import ChannelConfigurationError
from .random_source import RandomSource


def validate_probability(probability: float, name: str = "probability") -> float:
    """
    Check that a percentage lies in [0, 100].

    Raises:
        ChannelConfigurationError: If it does not
    """
    try:
        value = float(probability)
    except (TypeError, ValueError) as e:
        raise ChannelConfigurationError(f"{name} must be a number, got {probability!r}") from e

    if not 0.0 <= value <= 100.0:
        raise ChannelConfigurationError(f"{name} must be in [0, 100], got {probability}")

    return value


def roll(probability: float, source: RandomSource) -> bool:
    """
    Draw once and report whether an event of the given percentage fires.

    0 never fires, 100 always fires.
    """
    probability = validate_probability(probability)
    return source.percent_draw() < probability


def is_message_lost(message_loss_probability: float, source: RandomSource) -> bool:
    """Decide whether a whole message disappears on this hop."""
    return roll(message_loss_probability, source)


def inject_errors(
    frames: np.ndarray,
    frame_error_probability: float,
    source: RandomSource,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Flip at most one bit per frame.

    For each frame one draw decides whether it is disturbed; a disturbed
    frame gets a second draw for the bit position, uniform over its width.

    Args:
        frames: Frame block of shape (N, W) with 0/1 values
        frame_error_probability: Per-frame flip probability in [0, 100]
        source: Random source to draw from

    Returns:
        noisy: New frame block (input is not modified)
        flipped: Boolean mask of shape (N,), True where a bit was flipped

    Raises:
        ChannelConfigurationError: If the probability is out of range
        ValueError: If frames is not a 2-D array

    Example:
        >>> noisy, flipped = inject_errors(frames, 100, RandomSource(seed=1))
        >>> assert flipped.all()
    """
    frame_error_probability = validate_probability(
        frame_error_probability, "frame_error_probability"
    )

    frames = np.asarray(frames)
    if frames.ndim != 2:
        raise ValueError(f"Expected a 2-D frame block, got {frames.ndim} dimension(s)")

    noisy = frames.copy()
    flipped = np.zeros(frames.shape[0], dtype=bool)
    width = frames.shape[1]

    for index in range(frames.shape[0]):
        if source.percent_draw() < frame_error_probability:
            position = source.choice_index(width)
            noisy[index, position] ^= 1
            flipped[index] = True

    return noisy, flipped
