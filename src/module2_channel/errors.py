# file: src/module2_channel/errors.py

"""
Channel simulation error types for Module 2.
"""


class ChannelError(Exception):
    """Base exception for channel simulation."""
    pass


class ChannelConfigurationError(ChannelError):
    """Raised when a probability or channel setting is out of range."""
    pass
