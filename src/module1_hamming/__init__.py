# file: src/module1_hamming/__init__.py

"""
Module 1: Hamming(15,11) Codec

Bit-level forward error correction for segment payloads. Pure functions of
their inputs: no I/O, no randomness.

Public API:
    - HammingCodec: encode / correct / correct_and_decode
    - hamming_encode(payload: bytes, config) -> np.ndarray
    - hamming_decode(frames: np.ndarray, payload_length: int, config) -> bytes
    - first_mismatch(original: bytes, decoded: bytes) -> Optional[int]
    - compute_ber(original: bytes, received: bytes) -> float
"""

from .hamming_codec import (
    HammingCodec,
    DecodeReport,
    CODEWORD_BITS,
    DATA_BITS,
    PARITY_POSITIONS,
    DATA_POSITIONS,
)
from .encoder import hamming_encode
from .decoder import hamming_decode
from .metrics import first_mismatch, count_byte_errors, compute_ber, compute_redundancy_overhead
from .errors import (
    HammingError,
    HammingEncodingError,
    HammingDecodingError,
    HammingConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "HammingCodec",
    "DecodeReport",
    "CODEWORD_BITS",
    "DATA_BITS",
    "PARITY_POSITIONS",
    "DATA_POSITIONS",
    "hamming_encode",
    "hamming_decode",
    "first_mismatch",
    "count_byte_errors",
    "compute_ber",
    "compute_redundancy_overhead",
    "HammingError",
    "HammingEncodingError",
    "HammingDecodingError",
    "HammingConfigurationError",
]
