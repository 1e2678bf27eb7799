"""
Top-N grouping of posts by key.

Two interchangeable strategies are provided and must agree for any input:
- group_top_n_single_pass: collect each group, then finish it in place
- group_top_n_group_then_map: group first, then map every (key, posts) pair

Both rely on the stable built-in sort, so posts with equal sort keys keep
their input order. Keys appear in first-occurrence order.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Hashable, Iterable, TypeVar

from ..core.types import BlogPost, published_date_key

K = TypeVar("K", bound=Hashable)

SortKey = Callable[[BlogPost], Any]


def top_n(
    posts: Iterable[BlogPost],
    limit: int,
    sort_key: SortKey = published_date_key,
    reverse: bool = True,
) -> list[BlogPost]:
    """Sort posts and keep the first ``limit`` of them.

    A non-positive limit yields an empty list.
    """
    return sorted(posts, key=sort_key, reverse=reverse)[: max(limit, 0)]


def group_top_n_single_pass(
    posts: Iterable[BlogPost],
    key: Callable[[BlogPost], K],
    limit: int,
    sort_key: SortKey = published_date_key,
    reverse: bool = True,
) -> dict[K, list[BlogPost]]:
    groups: dict[K, list[BlogPost]] = {}
    for post in posts:
        groups.setdefault(key(post), []).append(post)
    # finisher runs once per collected group
    for group_key, group in groups.items():
        groups[group_key] = top_n(group, limit, sort_key, reverse)
    return groups


def group_top_n_group_then_map(
    posts: Iterable[BlogPost],
    key: Callable[[BlogPost], K],
    limit: int,
    sort_key: SortKey = published_date_key,
    reverse: bool = True,
) -> dict[K, list[BlogPost]]:
    grouped = group_by(posts, key)
    return dict(
        map(
            lambda entry: (entry[0], top_n(entry[1], limit, sort_key, reverse)),
            grouped.items(),
        )
    )


def group_by(posts: Iterable[BlogPost], key: Callable[[BlogPost], K]) -> dict[K, list[BlogPost]]:
    """Group posts into unlimited lists keyed by ``key(post)``."""
    grouped: defaultdict[K, list[BlogPost]] = defaultdict(list)
    for post in posts:
        grouped[key(post)].append(post)
    return dict(grouped)


# Default strategy
group_top_n = group_top_n_single_pass


def recent_posts_by_category(posts: Iterable[BlogPost], limit: int = 3) -> dict[str, list[BlogPost]]:
    """Return the ``limit`` most recent posts of every category."""
    return group_top_n(posts, lambda post: post.category, limit)


def posts_by_category(posts: Iterable[BlogPost], category: str, limit: int = 3) -> list[BlogPost]:
    """Return the most recent posts whose category equals ``category`` exactly.

    Args:
        posts: Posts to search
        category: Category label, matched case-sensitively
        limit: Maximum number of posts to return

    Returns:
        Up to ``limit`` posts, newest first; empty when nothing matches
    """
    return top_n((post for post in posts if post.category == category), limit)
