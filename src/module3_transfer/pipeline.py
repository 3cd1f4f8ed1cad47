# file: src/module3_transfer/pipeline.py
"""
Transfer Pipeline

Runs one segment through the simulated hop and forwards the result.

Pipeline:
    Segment
    → Message loss draw (drop ends the run silently)
    → Hamming(15,11) encode
    → Per-frame single bit error injection
    → Syndrome correction + decode
    → Byte comparison against the original payload (has_error)
    → Forward to the transfer endpoint
"""

import logging
from typing import Any, Dict, Optional, Tuple

from src.module1_hamming import HammingCodec, HammingError, first_mismatch
from src.module2_channel import NoisyChannel, RandomSource

from .errors import TransportError, UnexpectedStatusError
from .forwarder import TransferForwarder, DEFAULT_TRANSFER_ENDPOINT, DEFAULT_TIMEOUT_SECONDS
from .segment import Segment, TransferOutcome


logger = logging.getLogger(__name__)


class TransferPipeline:
    """
    One hop of the noisy link.

    Holds no per-run state, so a single instance can serve many concurrent
    runs. The only shared mutable object is the channel's random source.
    """

    def __init__(
        self,
        codec: HammingCodec,
        channel: NoisyChannel,
        forwarder: TransferForwarder,
    ):
        self.codec = codec
        self.channel = channel
        self.forwarder = forwarder

    def run(self, segment: Segment, source: Optional[RandomSource] = None) -> Optional[TransferOutcome]:
        """
        Process and forward one segment.

        Never raises for codec or forwarding failures: they are logged and
        the run ends.

        Args:
            segment: Segment accepted on ingress
            source: Random stream for this run only; the channel's shared
                source if None

        Returns:
            The forwarded outcome, or None if the message was lost, could not
            be encoded/decoded, or the forwarding call failed at transport level
        """
        label = _describe(segment)
        channel = self.channel if source is None else self.channel.with_source(source)

        if channel.lose_message():
            logger.info(f"Message lost: {label}")
            return None

        try:
            decoded, has_error, stats = self.process_payload(segment.payload, channel)
        except HammingError as e:
            logger.error(f"Error while processing message {label}: {e}")
            return None

        outcome = TransferOutcome(
            segment=segment,
            payload=decoded,
            has_error=has_error,
            frames_total=stats['frames_total'],
            frames_corrupted=stats['frames_corrupted'],
            frames_corrected=stats['frames_corrected'],
        )

        try:
            self.forwarder.forward(outcome)
        except TransportError as e:
            logger.error(f"Transfer request issue for {label}: {e}")
            return None
        except UnexpectedStatusError as e:
            logger.warning(f"{e} ({label})")

        return outcome

    def process_payload(
        self, payload: bytes, channel: Optional[NoisyChannel] = None
    ) -> Tuple[bytes, bool, Dict[str, Any]]:
        """
        Encode, disturb, correct and decode a payload.

        Args:
            payload: Original segment payload
            channel: Channel to transmit through (default: self.channel)

        Returns:
            decoded: Payload after correction, same length as the input
            has_error: True if any byte differs from the original
            stats: Dictionary containing:
                - frames_total: Number of frames the payload was encoded into
                - frames_corrupted: Frames that received an injected flip
                - frames_corrected: Frames with a non-zero syndrome

        Raises:
            HammingEncodingError: If the payload cannot be encoded
            HammingDecodingError: If the disturbed frames are malformed
        """
        if channel is None:
            channel = self.channel

        frames = self.codec.encode(payload)
        noisy, flipped = channel.transmit(frames)
        decoded, report = self.codec.decode_with_report(noisy, len(payload))

        mismatch = first_mismatch(payload, decoded)
        if mismatch is not None:
            logger.warning(f"Frames inequality: first mismatching byte at {mismatch}")

        stats = {
            'frames_total': report.frames_total,
            'frames_corrupted': int(flipped.sum()),
            'frames_corrected': report.frames_corrected,
        }
        logger.debug(f"Decode stats: {stats}")

        return decoded, mismatch is not None, stats


def build_pipeline(
    config: Dict[str, Any],
    source: Optional[RandomSource] = None,
    forwarder: Optional[TransferForwarder] = None,
) -> TransferPipeline:
    """
    Assemble a pipeline from configuration.

    Args:
        config: Full configuration dictionary ('codec', 'channel', 'forwarding')
        source: Random source override, e.g. a seeded one in tests
        forwarder: Forwarder override

    Returns:
        Ready-to-use TransferPipeline
    """
    codec = HammingCodec.from_config(config)
    channel = NoisyChannel.from_config(config, source=source)

    if forwarder is None:
        forwarding_config = config.get('forwarding', {})
        forwarder = TransferForwarder(
            endpoint=forwarding_config.get('endpoint', DEFAULT_TRANSFER_ENDPOINT),
            timeout_seconds=forwarding_config.get('timeout_seconds', DEFAULT_TIMEOUT_SECONDS),
        )

    return TransferPipeline(codec=codec, channel=channel, forwarder=forwarder)


def _describe(segment: Segment) -> str:
    return f"sender={segment.sender} time={segment.time} seg={segment.seg_num}/{segment.seg_count}"
