"""Fixed and sliding windows over a sequence.

Windows are produced lazily as tuples. Each call to ``iter()`` walks the
source again, so a window view over a list can be iterated repeatedly while
a view over a one-shot iterator can be consumed once.
"""

from __future__ import annotations

from collections import deque
from itertools import islice
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class _Windows(Generic[T]):
    def __init__(self, source: Iterable[T], size: int):
        if size < 1:
            raise ValueError(f"window size must be >= 1, got {size}")
        self._source = source
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        raise NotImplementedError


class FixedWindows(_Windows[T]):
    """Consecutive non-overlapping chunks; the final chunk may be short."""

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        it = iter(self._source)
        while True:
            chunk = tuple(islice(it, self._size))
            if not chunk:
                return
            yield chunk


class SlidingWindows(_Windows[T]):
    """Every contiguous run of exactly ``size`` elements, step one."""

    def __iter__(self) -> Iterator[tuple[T, ...]]:
        it = iter(self._source)
        window: deque[T] = deque(islice(it, self._size), maxlen=self._size)
        if len(window) < self._size:
            return
        yield tuple(window)
        for item in it:
            window.append(item)
            yield tuple(window)


def window_fixed(source: Iterable[T], size: int) -> FixedWindows[T]:
    """Partition ``source`` into batches of ``size``.

    Raises:
        ValueError: If size is less than 1
    """
    return FixedWindows(source, size)


def window_sliding(source: Iterable[T], size: int) -> SlidingWindows[T]:
    """Slide a window of ``size`` across ``source``.

    Input shorter than ``size`` yields no windows at all.

    Raises:
        ValueError: If size is less than 1
    """
    return SlidingWindows(source, size)
