# file: src/module1_hamming/decoder.py

"""
Hamming decoding entry point.

Provides hamming_decode() with syndrome-based single-error correction.
"""

from typing import Any, Dict

import numpy as np

from .hamming_codec import HammingCodec


def hamming_decode(frames: np.ndarray, payload_length: int, config: Dict[str, Any]) -> bytes:
    """
    Correct and decode Hamming(15,11) frames.

    Each frame is corrected independently. Frames with more than one flipped
    bit are not detected as such and may decode to wrong data bits; callers
    compare against the original payload to notice that.

    Args:
        frames: Frame block of shape (N, 15)
        payload_length: Byte length of the original payload
        config: Configuration dictionary with 'codec' section

    Returns:
        Decoded payload of exactly payload_length bytes

    Raises:
        HammingDecodingError: If frames are structurally malformed
        HammingConfigurationError: If configuration is invalid
    """
    codec = HammingCodec.from_config(config)
    return codec.correct_and_decode(frames, payload_length)
