# file: src/module3_transfer/segment.py
"""
Data types passed between ingress, pipeline and forwarder.
"""

import base64
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Segment:
    """
    One unit of ingress work.

    Identity is (sender, time, seg_num); uniqueness is not enforced.
    """
    sender: str
    time: str
    seg_count: int
    seg_num: int
    payload: bytes


@dataclass(frozen=True)
class TransferOutcome:
    """Result of one pipeline run, ready for forwarding."""
    segment: Segment
    payload: bytes
    has_error: bool
    frames_total: int = 0
    frames_corrupted: int = 0
    frames_corrected: int = 0

    def to_transfer_request(self) -> Dict[str, Any]:
        """
        Build the JSON body for the forwarding endpoint.

        Raw bytes travel as a standard base64 string.
        """
        return {
            'sender': self.segment.sender,
            'time': self.segment.time,
            'seg_count': self.segment.seg_count,
            'seg_num': self.segment.seg_num,
            'payload': base64.b64encode(self.payload).decode('ascii'),
            'has_error': self.has_error,
        }
