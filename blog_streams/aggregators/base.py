"""
Two-phase aggregation over a post sequence.

An aggregator accumulates elements one at a time with ``add`` and produces
its result once with ``finish``. Aggregators that can combine partial state
built from separate partitions also implement ``merge``.

Aggregators hold mutable state and are meant for a single sequential pass;
create a new instance per run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Hashable, Iterable, TypeVar

from ..core.types import BlogPost, published_date_key
from ..pipelines.grouping import top_n

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)


class Aggregator(ABC, Generic[T, R]):
    """Abstract accumulate-then-finish aggregation.

    Concrete implementations must implement ``add`` and ``finish``;
    ``merge`` is optional.
    """

    @abstractmethod
    def add(self, item: T) -> None:
        """Fold a single element into the accumulated state."""
        raise NotImplementedError

    @abstractmethod
    def finish(self) -> R:
        """Produce the result from the accumulated state."""
        raise NotImplementedError

    def merge(self, other: Aggregator[T, R]) -> Aggregator[T, R]:
        """Absorb the state of ``other`` (built over a later partition).

        Returns:
            self, for chaining

        Raises:
            NotImplementedError: If the aggregator cannot combine partitions
        """
        raise NotImplementedError(f"{type(self).__name__} does not support merge")


def aggregate(items: Iterable[T], aggregator: Aggregator[T, R]) -> R:
    """Run ``aggregator`` over ``items`` and return its finished result."""
    for item in items:
        aggregator.add(item)
    return aggregator.finish()


class GroupLimitAggregator(Aggregator[BlogPost, list[tuple[K, list[BlogPost]]]], Generic[K]):
    """Group posts by key and keep the top ``limit`` of each group.

    Finishing emits one ``(key, posts)`` pair per key, in the order keys were
    first seen, with each list sorted by ``sort_key`` and truncated.
    """

    def __init__(
        self,
        key: Callable[[BlogPost], K],
        limit: int,
        sort_key: Callable[[BlogPost], Any] = published_date_key,
        reverse: bool = True,
    ):
        self._key = key
        self._limit = limit
        self._sort_key = sort_key
        self._reverse = reverse
        self._groups: dict[K, list[BlogPost]] = {}

    def add(self, item: BlogPost) -> None:
        self._groups.setdefault(self._key(item), []).append(item)

    def merge(self, other: GroupLimitAggregator[K]) -> GroupLimitAggregator[K]:
        # Key-wise union: lists from both sides are kept, never replaced.
        for key, posts in other._groups.items():
            self._groups.setdefault(key, []).extend(posts)
        return self

    def finish(self) -> list[tuple[K, list[BlogPost]]]:
        return [
            (key, top_n(posts, self._limit, self._sort_key, self._reverse))
            for key, posts in self._groups.items()
        ]


def recent_posts_by_category_aggregator(limit: int) -> GroupLimitAggregator[str]:
    """Aggregator keeping the ``limit`` newest posts of each category."""
    return GroupLimitAggregator(lambda post: post.category, limit)
