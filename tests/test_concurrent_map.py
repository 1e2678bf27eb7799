"""Tests for the bounded-concurrency ordered map."""

import contextvars
import threading
import time

import pytest

from blog_streams.pipelines.concurrent import MapCancelledError, map_concurrent


def test_output_follows_input_order_not_completion_order():
    items = list(range(8))

    def slow_first(x: int) -> int:
        # earlier items take longer, so completion order is reversed
        time.sleep((len(items) - x) * 0.01)
        return x * x

    assert list(map_concurrent(items, slow_first, 4)) == [x * x for x in items]


def test_concurrency_never_exceeds_ceiling():
    lock = threading.Lock()
    active = 0
    peak = 0

    def track(x: int) -> int:
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)
        time.sleep(0.02)
        with lock:
            active -= 1
        return x

    assert list(map_concurrent(range(12), track, 3)) == list(range(12))
    assert 1 <= peak <= 3


def test_input_is_pulled_only_as_slots_free_up():
    pulled = 0

    def source():
        nonlocal pulled
        for i in range(10):
            pulled += 1
            yield i

    results = map_concurrent(source(), lambda x: x, 2)
    assert pulled == 0
    assert next(results) == 0
    assert pulled == 2
    assert next(results) == 1
    assert pulled == 3
    results.close()


def test_invalid_ceiling_is_rejected_eagerly():
    with pytest.raises(ValueError, match="max_concurrency"):
        map_concurrent([1, 2], lambda x: x, 0)


def test_empty_input():
    assert list(map_concurrent([], lambda x: x, 2)) == []


def test_preset_cancel_event_stops_before_any_work():
    event = threading.Event()
    event.set()
    calls = []
    with pytest.raises(MapCancelledError) as info:
        list(map_concurrent(range(5), calls.append, 2, cancel_event=event))
    assert info.value.completed == 0
    assert calls == []


def test_cancel_mid_run_reports_completed_count():
    event = threading.Event()

    def cancel_on_one(x: int) -> int:
        if x == 1:
            event.set()
        return x

    results = []
    with pytest.raises(MapCancelledError) as info:
        for value in map_concurrent(range(10), cancel_on_one, 1, cancel_event=event):
            results.append(value)
    assert results == [0, 1]
    assert info.value.completed == 2


def test_cooperative_workers_observe_cancellation():
    event = threading.Event()
    started = threading.Event()

    def wait_for_cancel(x: int) -> int:
        started.set()
        event.wait(5)
        return x

    def cancel_soon():
        started.wait(5)
        event.set()

    canceller = threading.Thread(target=cancel_soon)
    canceller.start()
    begin = time.monotonic()
    with pytest.raises(MapCancelledError):
        list(map_concurrent(range(4), wait_for_cancel, 2, cancel_event=event))
    canceller.join()
    assert time.monotonic() - begin < 4


def test_interrupt_is_surfaced_not_swallowed():
    event = threading.Event()

    def interrupted(x: int) -> int:
        if x == 2:
            raise KeyboardInterrupt
        return x

    results = []
    with pytest.raises(MapCancelledError) as info:
        for value in map_concurrent(range(5), interrupted, 2, cancel_event=event):
            results.append(value)
    assert results == [0, 1]
    assert info.value.completed == 2
    assert isinstance(info.value.__cause__, KeyboardInterrupt)
    assert event.is_set()


def test_worker_error_propagates_and_stops_work():
    event = threading.Event()

    def fail_on_two(x: int) -> int:
        if x == 2:
            raise ValueError("boom")
        return x

    results = []
    with pytest.raises(ValueError, match="boom"):
        for value in map_concurrent(range(6), fail_on_two, 2, cancel_event=event):
            results.append(value)
    assert results == [0, 1]
    assert event.is_set()


def test_closing_early_signals_workers():
    event = threading.Event()
    results = map_concurrent(range(10), lambda x: x, 3, cancel_event=event)
    assert next(results) == 0
    results.close()
    assert event.is_set()


def test_full_run_leaves_event_unset():
    event = threading.Event()
    assert list(map_concurrent(range(3), lambda x: x, 2, cancel_event=event)) == [0, 1, 2]
    assert not event.is_set()


def test_workers_see_caller_context():
    request_id = contextvars.ContextVar("request_id", default=None)
    request_id.set("abc")
    assert list(map_concurrent(range(3), lambda _: request_id.get(), 2)) == ["abc"] * 3


def test_cancel_during_last_element_completes_normally():
    event = threading.Event()

    def cancel_on_last(x: int) -> int:
        if x == 1:
            event.set()
        return x

    assert list(map_concurrent(range(2), cancel_on_last, 1, cancel_event=event)) == [0, 1]


def test_cancel_with_remaining_input_does_not_map_it():
    event = threading.Event()
    calls = []

    def cancel_on_first(x: int) -> int:
        calls.append(x)
        event.set()
        return x

    with pytest.raises(MapCancelledError) as info:
        list(map_concurrent(range(3), cancel_on_first, 1, cancel_event=event))
    assert info.value.completed == 1
    assert calls == [0]
