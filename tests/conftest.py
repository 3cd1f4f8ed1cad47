"""
Shared fixtures for the Hamming link hop test suite.
"""

import os
import sys
import threading

import pytest

# Add the project root to the Python path to allow imports from `src`
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from src.module0_config import get_default_config
from src.module3_transfer import UnexpectedStatusError


class RecordingForwarder:
    """Forwarder stand-in that records outcomes instead of POSTing them."""

    def __init__(self, endpoint: str = "http://transfer.test/encoded-message/transfer", error=None):
        self.endpoint = endpoint
        self.error = error
        self.outcomes = []
        self._lock = threading.Lock()

    def forward(self, outcome):
        with self._lock:
            self.outcomes.append(outcome)
        if self.error is not None:
            raise self.error
        return 200


@pytest.fixture
def forwarder():
    return RecordingForwarder()


@pytest.fixture
def failing_status_forwarder():
    return RecordingForwarder(error=UnexpectedStatusError("Unexpected status code while transferring: 500", status_code=500))


@pytest.fixture
def config():
    """Packaged defaults with a fixed seed."""
    cfg = get_default_config()
    cfg['channel']['seed'] = 1234
    return cfg


@pytest.fixture
def noiseless_config(config):
    config['channel']['message_loss_probability'] = 0
    config['channel']['frame_error_probability'] = 0
    return config


@pytest.fixture
def make_forwarder():
    """Factory for RecordingForwarder instances with custom errors."""
    return RecordingForwarder
