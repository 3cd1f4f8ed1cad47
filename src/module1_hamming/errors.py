# file: src/module1_hamming/errors.py

"""
Hamming codec exception hierarchy.

All exceptions inherit from HammingError for unified handling.
"""


class HammingError(Exception):
    """Base exception for all Hamming codec errors."""
    pass


class HammingEncodingError(HammingError):
    """Raised when a payload cannot be encoded."""
    pass


class HammingDecodingError(HammingError):
    """Raised when a frame block is structurally malformed."""

    def __init__(self, message: str, num_frames: int = None, frame_width: int = None):
        super().__init__(message)
        self.num_frames = num_frames
        self.frame_width = frame_width


class HammingConfigurationError(HammingError):
    """Raised when codec configuration is invalid."""
    pass
