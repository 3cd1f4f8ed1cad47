# file: src/module3_transfer/dispatcher.py
"""
Fire-and-forget dispatch of pipeline runs onto a bounded worker pool.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor

from .pipeline import TransferPipeline
from .segment import Segment


logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 16


class TransferDispatcher:
    """
    Schedules one pipeline run per accepted segment.

    submit() returns as soon as the run is queued. Each run gets its own
    child of the channel's random source, spawned in submission order, so a
    seeded source yields the same draws per segment whatever the thread
    scheduling. Runs are never retried or cancelled, and nothing about their
    result flows back to the submitter.

    Parameters:
        pipeline (TransferPipeline): Pipeline executed by every run
        max_workers (int): Upper bound on concurrently executing runs
    """

    def __init__(self, pipeline: TransferPipeline, max_workers: int = DEFAULT_MAX_WORKERS):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        self.pipeline = pipeline
        self.max_workers = max_workers
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="transfer"
        )

    def submit(self, segment: Segment) -> Future:
        """
        Queue a pipeline run for the segment.

        The returned future is only useful to tests; production callers
        ignore it.
        """
        source = self.pipeline.channel.source.spawn()
        future = self._executor.submit(self.pipeline.run, segment, source)
        future.add_done_callback(_log_unexpected_failure)
        return future

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting runs; optionally wait for queued ones to finish."""
        self._executor.shutdown(wait=wait)


def _log_unexpected_failure(future: Future) -> None:
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error(f"Transfer run crashed: {error!r}")
