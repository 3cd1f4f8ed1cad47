# file: src/module1_hamming/encoder.py

"""
Hamming encoding entry point.

Provides hamming_encode() which reads codec limits from configuration.
"""

from typing import Any, Dict

import numpy as np

from .hamming_codec import HammingCodec
from .errors import HammingEncodingError


def hamming_encode(payload: bytes, config: Dict[str, Any]) -> np.ndarray:
    """
    Encode a payload into Hamming(15,11) frames.

    Args:
        payload: Segment payload bytes
        config: Configuration dictionary with 'codec' section

    Returns:
        Frame block of shape (N, 15), dtype uint8

    Raises:
        HammingEncodingError: If the payload is empty, not bytes or too large
        HammingConfigurationError: If configuration is invalid

    Configuration Schema:
        config['codec']['max_payload_bytes']: Largest accepted payload (default: 65536)

    Example:
        >>> frames = hamming_encode(b'hi', {'codec': {'max_payload_bytes': 1024}})
        >>> frames.shape
        (2, 15)
    """
    if not isinstance(payload, (bytes, bytearray)):
        raise HammingEncodingError(f"Input must be bytes, got {type(payload)}")

    codec = HammingCodec.from_config(config)
    return codec.encode(payload)
