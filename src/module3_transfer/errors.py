# file: src/module3_transfer/errors.py
"""
Transfer and forwarding error types for Module 3.
"""


class TransferError(Exception):
    """Base exception for transfer pipeline operations."""
    pass


class TransportError(TransferError):
    """Raised when the forwarding call cannot connect or times out."""
    pass


class UnexpectedStatusError(TransferError):
    """Raised when the forwarding endpoint answers with a non-success status."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
