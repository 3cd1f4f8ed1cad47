# file: src/module1_hamming/metrics.py

"""
Transfer quality metrics.

Utilities to compare a decoded payload against the original: first
mismatching byte, byte error count, Bit Error Rate (BER) and the
redundancy overhead of the code.
"""

from typing import Optional

import numpy as np

from .hamming_codec import CODEWORD_BITS, DATA_BITS


def first_mismatch(original: bytes, decoded: bytes) -> Optional[int]:
    """
    Find the index of the first byte where two payloads differ.

    Stops at the first difference. A length difference counts as a mismatch
    at the end of the shorter payload.

    Args:
        original: Payload as received on ingress
        decoded: Payload after correction and decoding

    Returns:
        Index of the first differing byte, or None if payloads are equal

    Example:
        >>> first_mismatch(b'abc', b'abd')
        2
        >>> first_mismatch(b'abc', b'abc') is None
        True
    """
    for index, (b1, b2) in enumerate(zip(original, decoded)):
        if b1 != b2:
            return index

    if len(original) != len(decoded):
        return min(len(original), len(decoded))

    return None


def count_byte_errors(original: bytes, decoded: bytes) -> int:
    """
    Count positions where the two payloads differ.

    Raises:
        ValueError: If inputs have different lengths
    """
    if len(original) != len(decoded):
        raise ValueError(
            f"Length mismatch: original={len(original)}, decoded={len(decoded)}"
        )

    return sum(1 for b1, b2 in zip(original, decoded) if b1 != b2)


def compute_ber(original: bytes, received: bytes) -> float:
    """
    Compute Bit Error Rate (BER) between two byte sequences.

    BER = (number of bit errors) / (total number of bits)

    Args:
        original: Original transmitted data
        received: Received (possibly corrupted) data

    Returns:
        BER as a float in [0.0, 1.0]

    Raises:
        ValueError: If inputs have different lengths

    Example:
        >>> compute_ber(b'\\x00\\x00', b'\\x01\\x00')
        0.0625
    """
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )

    if len(original) == 0:
        return 0.0

    diff = np.bitwise_xor(
        np.frombuffer(bytes(original), dtype=np.uint8),
        np.frombuffer(bytes(received), dtype=np.uint8),
    )
    return int(np.unpackbits(diff).sum()) / (diff.size * 8)


def compute_redundancy_overhead() -> float:
    """
    Redundancy overhead of Hamming(15,11) as a percentage.

    Overhead = (parity bits / data bits) * 100
    """
    return (CODEWORD_BITS - DATA_BITS) / DATA_BITS * 100.0
