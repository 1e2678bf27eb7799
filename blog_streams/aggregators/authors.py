"""Author popularity ranking by post count."""

from __future__ import annotations

from typing import Iterable

from ..core.types import BlogPost
from .base import Aggregator, aggregate


class PopularAuthorsAggregator(Aggregator[BlogPost, list[tuple[str, int]]]):
    """Count posts per author and rank authors by that count.

    Authors with equal counts keep the order they were first encountered.
    """

    def __init__(self, limit: int):
        self._limit = limit
        self._counts: dict[str, int] = {}

    def add(self, item: BlogPost) -> None:
        self._counts[item.author] = self._counts.get(item.author, 0) + 1

    def merge(self, other: PopularAuthorsAggregator) -> PopularAuthorsAggregator:
        for author, count in other._counts.items():
            self._counts[author] = self._counts.get(author, 0) + count
        return self

    def finish(self) -> list[tuple[str, int]]:
        ranked = sorted(self._counts.items(), key=lambda entry: entry[1], reverse=True)
        return ranked[: max(self._limit, 0)]


def popular_authors(posts: Iterable[BlogPost], limit: int = 3) -> list[tuple[str, int]]:
    return aggregate(posts, PopularAuthorsAggregator(limit))
