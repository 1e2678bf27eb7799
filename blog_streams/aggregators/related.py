"""
Related-post lookup by title similarity.

Candidates are the posts sharing the target's category (the target itself
is excluded by id). Each candidate is scored by word overlap between titles:
the number of shared words divided by the number of distinct words in both.
"""

from __future__ import annotations

import re
from typing import Iterable

from ..core.types import BlogPost
from .base import Aggregator, aggregate

_WORD_RE = re.compile(r"\w+")


def title_words(title: str) -> frozenset[str]:
    """Lowercase word tokens of a title; punctuation and whitespace split."""
    return frozenset(_WORD_RE.findall(title.lower()))


def title_similarity(first: BlogPost, second: BlogPost) -> float:
    """Jaccard index of the two titles' word sets, in the range [0, 1].

    Two titles without any word tokens score 0.0.
    """
    words_a = title_words(first.title)
    words_b = title_words(second.title)
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


class RelatedPostsAggregator(Aggregator[BlogPost, list[BlogPost]]):
    """Collect same-category posts and rank them against a target post."""

    def __init__(self, target: BlogPost, limit: int):
        self._target = target
        self._limit = limit
        self._by_category: dict[str, list[BlogPost]] = {}

    def add(self, item: BlogPost) -> None:
        if item.id == self._target.id:
            return
        self._by_category.setdefault(item.category, []).append(item)

    def finish(self) -> list[BlogPost]:
        candidates = self._by_category.get(self._target.category, [])
        scored = [(post, title_similarity(self._target, post)) for post in candidates]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return [post for post, _ in scored[: max(self._limit, 0)]]


def related_posts(posts: Iterable[BlogPost], target: BlogPost, limit: int = 3) -> list[BlogPost]:
    """Return up to ``limit`` posts most similar to ``target``.

    Args:
        posts: Posts to search, may include the target
        target: The post to find relatives for
        limit: Maximum number of posts to return

    Returns:
        Same-category posts ordered by descending similarity; ties keep
        their input order
    """
    return aggregate(posts, RelatedPostsAggregator(target, limit))
