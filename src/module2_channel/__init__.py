# file: src/module2_channel/__init__.py
"""
Module 2: Channel Simulation

Probabilistic single-bit error injection per frame and whole-message loss,
driven by an explicitly passed random source.
"""

from .random_source import RandomSource
from .injector import inject_errors, is_message_lost, roll, validate_probability
from .channel import NoisyChannel
from .errors import ChannelError, ChannelConfigurationError


__all__ = [
    'RandomSource',
    'inject_errors',
    'is_message_lost',
    'roll',
    'validate_probability',
    'NoisyChannel',
    'ChannelError',
    'ChannelConfigurationError',
]


__version__ = '1.0.0'
