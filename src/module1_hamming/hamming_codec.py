# file: src/module1_hamming/hamming_codec.py

"""
Hamming(15,11) codec implementation.

Bit-level single-error-correcting code operating on numpy bit arrays.
A frame block is a uint8 array of shape (n_frames, 15); column i holds
codeword position i + 1. Parity bits sit at positions 1, 2, 4 and 8, data
bits fill the remaining positions in ascending order.

Bit order:
    - Payload bytes are unpacked MSB-first
    - The bit stream is split into 11-bit groups, last group zero-padded
    - Decoded data bits are truncated to the original byte length and
      packed MSB-first
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

import numpy as np

from .errors import HammingEncodingError, HammingDecodingError, HammingConfigurationError


CODEWORD_BITS = 15
DATA_BITS = 11
PARITY_BITS = 4

PARITY_POSITIONS = tuple(1 << j for j in range(PARITY_BITS))  # (1, 2, 4, 8)
DATA_POSITIONS = tuple(
    pos for pos in range(1, CODEWORD_BITS + 1) if pos & (pos - 1)
)  # (3, 5, 6, 7, 9, ..., 15)
DATA_COLUMNS = np.array(DATA_POSITIONS) - 1

# Row j covers every codeword position whose index has bit j set
PARITY_CHECK_MATRIX = np.array(
    [[(pos >> j) & 1 for pos in range(1, CODEWORD_BITS + 1)] for j in range(PARITY_BITS)],
    dtype=np.uint8,
)
SYNDROME_WEIGHTS = np.array([1 << j for j in range(PARITY_BITS)], dtype=np.int64)

DEFAULT_MAX_PAYLOAD_BYTES = 65536


@dataclass(frozen=True)
class DecodeReport:
    """Per-call decode statistics."""
    frames_total: int
    frames_corrected: int
    frames_uncorrectable: int = 0


class HammingCodec:
    """
    Stateless Hamming(15,11) encoder/decoder.

    Parameters:
        max_payload_bytes (int): Largest payload accepted by encode()

    Invariants:
        - decode(encode(p)) == p when no frame is disturbed
        - Any single bit flip within a frame is corrected exactly
        - Two or more flips in one frame may be silently miscorrected
    """

    def __init__(self, max_payload_bytes: int = DEFAULT_MAX_PAYLOAD_BYTES):
        if not isinstance(max_payload_bytes, int) or max_payload_bytes < 1:
            raise HammingConfigurationError(
                f"max_payload_bytes must be a positive integer, got {max_payload_bytes!r}"
            )
        self.max_payload_bytes = max_payload_bytes

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "HammingCodec":
        """
        Build a codec from the 'codec' configuration section.

        Raises:
            HammingConfigurationError: If the section is missing or invalid
        """
        try:
            codec_config = config['codec']
        except KeyError as e:
            raise HammingConfigurationError(f"Missing required config key: {e}") from e

        return cls(max_payload_bytes=codec_config.get('max_payload_bytes', DEFAULT_MAX_PAYLOAD_BYTES))

    def encode(self, payload: bytes) -> np.ndarray:
        """
        Encode a payload into Hamming(15,11) frames.

        Args:
            payload: Non-empty byte string

        Returns:
            Frame block of shape (ceil(8 * len(payload) / 11), 15), dtype uint8

        Raises:
            HammingEncodingError: If payload is not bytes, empty, or too large

        Example:
            >>> codec = HammingCodec()
            >>> codec.encode(b'\\x00').shape
            (1, 15)
        """
        if not isinstance(payload, (bytes, bytearray)):
            raise HammingEncodingError(f"Expected bytes, got {type(payload)}")

        if len(payload) == 0:
            raise HammingEncodingError("Cannot encode empty payload")

        if len(payload) > self.max_payload_bytes:
            raise HammingEncodingError(
                f"Payload of {len(payload)} bytes exceeds maximum of {self.max_payload_bytes}"
            )

        bits = np.unpackbits(np.frombuffer(bytes(payload), dtype=np.uint8), bitorder='big')

        # Zero-pad the last data group on the right
        remainder = len(bits) % DATA_BITS
        if remainder != 0:
            bits = np.concatenate([bits, np.zeros(DATA_BITS - remainder, dtype=np.uint8)])

        groups = bits.reshape(-1, DATA_BITS)

        frames = np.zeros((groups.shape[0], CODEWORD_BITS), dtype=np.uint8)
        frames[:, DATA_COLUMNS] = groups

        # Parity positions never cover each other, so each can be filled in turn
        for j, parity_pos in enumerate(PARITY_POSITIONS):
            covered = PARITY_CHECK_MATRIX[j].astype(bool)
            frames[:, parity_pos - 1] = frames[:, covered].sum(axis=1) % 2

        return frames

    def compute_syndromes(self, frames: np.ndarray) -> np.ndarray:
        """
        Compute the 4-bit syndrome of every frame.

        Args:
            frames: Frame block of shape (N, 15)

        Returns:
            Syndrome values of shape (N,), each in [0, 15]
        """
        frames = self._validate_frames(frames)
        check_bits = (frames.astype(np.int64) @ PARITY_CHECK_MATRIX.T.astype(np.int64)) % 2
        return check_bits @ SYNDROME_WEIGHTS

    def correct(self, frames: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Correct single-bit errors.

        A zero syndrome leaves the frame untouched. A syndrome in [1, 15]
        names the erroneous position, which is flipped. Any other value is
        left uncorrected.

        Args:
            frames: Frame block of shape (N, 15)

        Returns:
            corrected: New frame block (input is not modified)
            syndromes: Syndrome per frame, computed before correction
        """
        frames = self._validate_frames(frames)
        syndromes = self.compute_syndromes(frames)

        corrected = frames.copy()
        correctable = (syndromes >= 1) & (syndromes <= CODEWORD_BITS)
        rows = np.nonzero(correctable)[0]
        corrected[rows, syndromes[rows] - 1] ^= 1

        return corrected, syndromes

    def extract_data_bits(self, frames: np.ndarray) -> np.ndarray:
        """
        Concatenate the 11 data bits of each frame in frame order.

        Returns:
            Bit array of shape (N * 11,)
        """
        frames = self._validate_frames(frames)
        return frames[:, DATA_COLUMNS].reshape(-1)

    def correct_and_decode(self, frames: np.ndarray, payload_length: int) -> bytes:
        """
        Correct every frame and decode back to bytes.

        Args:
            frames: Frame block of shape (N, 15), possibly disturbed
            payload_length: Byte length of the original payload

        Returns:
            Decoded payload of exactly payload_length bytes

        Raises:
            HammingDecodingError: If frames are malformed or too short for
                payload_length
        """
        decoded, _ = self.decode_with_report(frames, payload_length)
        return decoded

    def decode_with_report(self, frames: np.ndarray, payload_length: int) -> Tuple[bytes, DecodeReport]:
        """
        Same as correct_and_decode() but also returns decode statistics.
        """
        frames = self._validate_frames(frames)

        if not isinstance(payload_length, (int, np.integer)) or payload_length < 1:
            raise HammingDecodingError(f"payload_length must be >= 1, got {payload_length!r}")

        available_bits = frames.shape[0] * DATA_BITS
        needed_bits = payload_length * 8
        if needed_bits > available_bits:
            raise HammingDecodingError(
                f"{frames.shape[0]} frames carry {available_bits} data bits, "
                f"{needed_bits} needed for {payload_length} bytes",
                num_frames=frames.shape[0],
                frame_width=frames.shape[1],
            )

        corrected, syndromes = self.correct(frames)
        data_bits = self.extract_data_bits(corrected)[:needed_bits]
        decoded = bytes(np.packbits(data_bits, bitorder='big'))

        uncorrectable = int(np.count_nonzero(syndromes > CODEWORD_BITS))
        report = DecodeReport(
            frames_total=int(frames.shape[0]),
            frames_corrected=int(np.count_nonzero(syndromes)) - uncorrectable,
            frames_uncorrectable=uncorrectable,
        )
        return decoded, report

    def get_code_rate(self) -> float:
        """
        Calculate code rate.

        Returns:
            Code rate: 11 / 15
        """
        return DATA_BITS / CODEWORD_BITS

    def _validate_frames(self, frames) -> np.ndarray:
        """
        Coerce frames to a (N, 15) uint8 array of 0/1 values.

        Raises:
            HammingDecodingError: On any structural problem
        """
        try:
            array = np.asarray(frames)
        except (TypeError, ValueError) as e:
            raise HammingDecodingError(f"Frames are not array-like: {e}") from e

        if array.ndim != 2:
            raise HammingDecodingError(
                f"Expected a 2-D frame block, got {array.ndim} dimension(s)"
            )

        if array.shape[0] == 0:
            raise HammingDecodingError("Cannot decode zero frames", num_frames=0)

        if array.shape[1] != CODEWORD_BITS:
            raise HammingDecodingError(
                f"Frame width {array.shape[1]} != {CODEWORD_BITS}",
                num_frames=array.shape[0],
                frame_width=array.shape[1],
            )

        if not np.issubdtype(array.dtype, np.integer) and array.dtype != np.bool_:
            raise HammingDecodingError(f"Frames must hold integer bits, got dtype {array.dtype}")

        if np.any((array != 0) & (array != 1)):
            raise HammingDecodingError("Frames must contain only 0/1 values")

        return array.astype(np.uint8, copy=False)
