"""Hashtag frequency extraction from post content."""

from __future__ import annotations

import re
from typing import Iterable

from ..core.types import BlogPost
from .base import Aggregator, aggregate

_HASHTAG_RE = re.compile(r"#(\w+)")


class HashtagAggregator(Aggregator[BlogPost, dict[str, int]]):
    """Count ``#tag`` occurrences across posts, case-insensitively.

    Tags are reported without the leading ``#`` in the order first seen.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def add(self, item: BlogPost) -> None:
        for tag in _HASHTAG_RE.findall(item.content.lower()):
            self._counts[tag] = self._counts.get(tag, 0) + 1

    def merge(self, other: HashtagAggregator) -> HashtagAggregator:
        for tag, count in other._counts.items():
            self._counts[tag] = self._counts.get(tag, 0) + count
        return self

    def finish(self) -> dict[str, int]:
        return dict(self._counts)


def extract_hashtags(posts: Iterable[BlogPost]) -> dict[str, int]:
    return aggregate(posts, HashtagAggregator())
