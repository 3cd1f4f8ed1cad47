# file: src/module3_transfer/__init__.py
"""
Module 3: Transfer Pipeline

Orchestrates loss, encoding, noise, correction and forwarding for one
segment, and dispatches runs onto a worker pool without waiting for them.
"""

from .segment import Segment, TransferOutcome
from .pipeline import TransferPipeline, build_pipeline
from .forwarder import TransferForwarder
from .dispatcher import TransferDispatcher
from .errors import TransferError, TransportError, UnexpectedStatusError


__all__ = [
    'Segment',
    'TransferOutcome',
    'TransferPipeline',
    'build_pipeline',
    'TransferForwarder',
    'TransferDispatcher',
    'TransferError',
    'TransportError',
    'UnexpectedStatusError',
]


__version__ = '1.0.0'
