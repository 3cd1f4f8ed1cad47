# file: src/module3_transfer/forwarder.py
"""
Client for the downstream transfer endpoint.

One POST per outcome. No retry: a failure only affects the run that made
the call.
"""

from typing import Optional

import requests

from .errors import TransportError, UnexpectedStatusError
from .segment import TransferOutcome


DEFAULT_TRANSFER_ENDPOINT = "http://localhost:8080/encoded-message/transfer"
DEFAULT_TIMEOUT_SECONDS = 5.0


class TransferForwarder:
    """
    Forwards transfer outcomes to the next service.

    Parameters:
        endpoint (str): Full URL of the transfer endpoint
        timeout_seconds (float): Connect and read timeout
        session (requests.Session, optional): Session to reuse connections;
            module-level requests functions are used if None
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_TRANSFER_ENDPOINT,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout_seconds = timeout_seconds
        self.session = session

    def forward(self, outcome: TransferOutcome) -> int:
        """
        POST one outcome as JSON.

        Args:
            outcome: Completed transfer outcome

        Returns:
            HTTP status code (always 200 when no exception is raised)

        Raises:
            TransportError: Connection failure or timeout
            UnexpectedStatusError: Endpoint answered with a status other than 200
        """
        body = outcome.to_transfer_request()
        post = self.session.post if self.session is not None else requests.post

        try:
            response = post(self.endpoint, json=body, timeout=self.timeout_seconds)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Transfer request to {self.endpoint} failed: {e}") from e

        if response.status_code != 200:
            raise UnexpectedStatusError(
                f"Unexpected status code while transferring: {response.status_code}",
                status_code=response.status_code,
            )

        return response.status_code
