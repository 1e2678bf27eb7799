"""Estimated reading time per post."""

from __future__ import annotations

from datetime import timedelta
import math
from typing import Iterable

from ..core.types import BlogPost
from .base import Aggregator, aggregate

# Average adult reading speed
WORDS_PER_MINUTE = 200


def word_count(content: str) -> int:
    return len(content.split())


def estimate_reading_time(content: str, words_per_minute: int = WORDS_PER_MINUTE) -> timedelta:
    """Reading time rounded to whole seconds, halves rounding up."""
    seconds = word_count(content) * 60 / words_per_minute
    return timedelta(seconds=math.floor(seconds + 0.5))


class ReadingTimeAggregator(Aggregator[BlogPost, dict[int, timedelta]]):
    def __init__(self, words_per_minute: int = WORDS_PER_MINUTE):
        if words_per_minute < 1:
            raise ValueError(f"words_per_minute must be >= 1, got {words_per_minute}")
        self._words_per_minute = words_per_minute
        self._times: dict[int, timedelta] = {}

    def add(self, item: BlogPost) -> None:
        self._times[item.id] = estimate_reading_time(item.content, self._words_per_minute)

    def finish(self) -> dict[int, timedelta]:
        return dict(self._times)


def reading_times(posts: Iterable[BlogPost], words_per_minute: int = WORDS_PER_MINUTE) -> dict[int, timedelta]:
    """Map each post id to its estimated reading time."""
    return aggregate(posts, ReadingTimeAggregator(words_per_minute))
