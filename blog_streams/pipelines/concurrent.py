"""
Ordered map with a bounded number of concurrent calls.

Work is dispatched to a fixed ThreadPoolExecutor. Submitted futures are kept
in a FIFO no longer than the concurrency ceiling and drained head first, so
results come back in input order no matter which call finishes first, and
no more than ``max_concurrency`` results are ever buffered ahead of the
consumer.

Cancellation is cooperative: callers share a ``threading.Event`` with their
mapping function. Once it is set (by the caller, or by the map itself on
interrupt) no new work is submitted, queued calls are cancelled, running
calls are waited for, and MapCancelledError is raised.
"""

from __future__ import annotations

from collections import deque
from concurrent import futures
from concurrent.futures import Future, ThreadPoolExecutor
from contextvars import copy_context
import logging
import threading
from typing import Callable, Iterable, Iterator, TypeVar

from ..logging_utils import log_event

T = TypeVar("T")
R = TypeVar("R")

# How often a blocked consumer re-checks the cancel event.
_POLL_SECONDS = 0.05

_END = object()


class MapCancelledError(RuntimeError):
    """Raised when a concurrent map stops before consuming all input.

    Attributes:
        completed: Number of results already yielded to the consumer
    """

    def __init__(self, completed: int):
        super().__init__(f"Concurrent map cancelled after {completed} result(s)")
        self.completed = completed


def map_concurrent(
    source: Iterable[T],
    fn: Callable[[T], R],
    max_concurrency: int,
    cancel_event: threading.Event | None = None,
    logger: logging.Logger | None = None,
) -> Iterator[R]:
    """Apply ``fn`` to every element with at most ``max_concurrency`` in flight.

    Args:
        source: Elements to map; consumed lazily as slots free up
        fn: Mapping function, called from worker threads
        max_concurrency: Maximum number of simultaneous ``fn`` calls
        cancel_event: Optional event shared with ``fn`` for cooperative stop
        logger: Optional logger for cancellation events

    Returns:
        An iterator of ``fn(element)`` values in input order

    Raises:
        ValueError: If max_concurrency is less than 1
        MapCancelledError: While iterating, if the map is cancelled or interrupted
    """
    if max_concurrency < 1:
        raise ValueError(f"max_concurrency must be >= 1, got {max_concurrency}")
    if cancel_event is None:
        cancel_event = threading.Event()
    return _map_ordered(source, fn, max_concurrency, cancel_event, logger)


def _map_ordered(
    source: Iterable[T],
    fn: Callable[[T], R],
    max_concurrency: int,
    cancel_event: threading.Event,
    logger: logging.Logger | None,
) -> Iterator[R]:
    pending: deque[Future] = deque()
    emitted = 0
    finished = False
    exhausted = False
    items = iter(source)
    executor = ThreadPoolExecutor(max_workers=max_concurrency, thread_name_prefix="map_concurrent")
    try:
        while True:
            if cancel_event.is_set() and not exhausted:
                # Cancelling only stops something while input is left.
                exhausted = next(items, _END) is _END
                if not exhausted:
                    _raise_if_cancelled(cancel_event, emitted, logger)
            while not exhausted and len(pending) < max_concurrency and not cancel_event.is_set():
                try:
                    item = next(items)
                except StopIteration:
                    exhausted = True
                    break
                # Copy current context (including logging/tracing vars) into worker thread.
                ctx = copy_context()
                pending.append(executor.submit(ctx.run, fn, item))
            if not pending:
                if exhausted:
                    finished = True
                    return
                continue

            head = pending[0]
            while True:
                try:
                    result = head.result(timeout=_POLL_SECONDS)
                    break
                except futures.TimeoutError:
                    _raise_if_cancelled(cancel_event, emitted, logger)
            pending.popleft()
            yield result
            emitted += 1
    except KeyboardInterrupt as exc:
        log_event(
            logger,
            "Concurrent map interrupted",
            event="map_concurrent_interrupted",
            completed=emitted,
            in_flight=len(pending),
        )
        raise MapCancelledError(emitted) from exc
    finally:
        if not finished:
            # Signal cooperative workers, drop queued calls, wait for running ones.
            cancel_event.set()
            for future in pending:
                future.cancel()
        executor.shutdown(wait=True, cancel_futures=True)


def _raise_if_cancelled(
    cancel_event: threading.Event, emitted: int, logger: logging.Logger | None
) -> None:
    if not cancel_event.is_set():
        return
    log_event(
        logger,
        "Concurrent map cancelled",
        event="map_concurrent_cancelled",
        completed=emitted,
    )
    raise MapCancelledError(emitted)
