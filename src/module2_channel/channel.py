# file: src/module2_channel/channel.py

"""
Noisy channel model.

Binds the two policy knobs (message loss and frame error probability) to a
random source so the pipeline can use one object for both decisions.
"""

from typing import Any, Dict, Optional, Tuple

import numpy as np

from .errors import ChannelConfigurationError
from .injector import validate_probability, is_message_lost, inject_errors
from .random_source import RandomSource


DEFAULT_MESSAGE_LOSS_PROBABILITY = 2.0
DEFAULT_FRAME_ERROR_PROBABILITY = 10.0


class NoisyChannel:
    """
    One noisy hop.

    Parameters:
        message_loss_probability (float): Chance in percent that a whole
            message is dropped
        frame_error_probability (float): Chance in percent that a frame
            receives one bit flip
        source (RandomSource): Shared random source
    """

    def __init__(
        self,
        message_loss_probability: float = DEFAULT_MESSAGE_LOSS_PROBABILITY,
        frame_error_probability: float = DEFAULT_FRAME_ERROR_PROBABILITY,
        source: Optional[RandomSource] = None,
    ):
        self.message_loss_probability = validate_probability(
            message_loss_probability, "message_loss_probability"
        )
        self.frame_error_probability = validate_probability(
            frame_error_probability, "frame_error_probability"
        )
        self.source = source if source is not None else RandomSource()

    @classmethod
    def from_config(cls, config: Dict[str, Any], source: Optional[RandomSource] = None) -> "NoisyChannel":
        """
        Build a channel from the 'channel' configuration section.

        If no source is given, one is created from channel.seed.
        """
        try:
            channel_config = config['channel']
        except KeyError as e:
            raise ChannelConfigurationError(f"Missing required config key: {e}") from e

        if source is None:
            source = RandomSource(seed=channel_config.get('seed'))

        return cls(
            message_loss_probability=channel_config.get(
                'message_loss_probability', DEFAULT_MESSAGE_LOSS_PROBABILITY
            ),
            frame_error_probability=channel_config.get(
                'frame_error_probability', DEFAULT_FRAME_ERROR_PROBABILITY
            ),
            source=source,
        )

    def with_source(self, source: RandomSource) -> "NoisyChannel":
        """Same policy, different random source."""
        return NoisyChannel(
            self.message_loss_probability, self.frame_error_probability, source
        )

    def lose_message(self) -> bool:
        """Draw once against message_loss_probability."""
        return is_message_lost(self.message_loss_probability, self.source)

    def transmit(self, frames: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Pass frames through the channel, see inject_errors()."""
        return inject_errors(frames, self.frame_error_probability, self.source)
