"""Tests for top-N grouping and the single-category filter."""

from datetime import datetime

import pytest

from blog_streams.core.types import BlogPost
from blog_streams.input import create_sample_posts
from blog_streams.pipelines.grouping import (
    group_by,
    group_top_n_group_then_map,
    group_top_n_single_pass,
    posts_by_category,
    recent_posts_by_category,
)


def _post(post_id: int, category: str, published: datetime, title: str | None = None) -> BlogPost:
    return BlogPost(
        id=post_id,
        title=title or f"Post {post_id}",
        author="Author",
        category=category,
        content="",
        published_date=published,
    )


STRATEGIES = [group_top_n_single_pass, group_top_n_group_then_map]


def test_strategies_agree_on_sample_posts():
    posts = create_sample_posts()
    for limit in (0, 1, 3, 10):
        single = group_top_n_single_pass(posts, lambda p: p.category, limit)
        mapped = group_top_n_group_then_map(posts, lambda p: p.category, limit)
        assert single == mapped
        assert list(single) == list(mapped)


def test_strategies_agree_with_custom_key_and_order():
    posts = create_sample_posts()
    kwargs = dict(key=lambda p: p.author, limit=2, sort_key=lambda p: p.title, reverse=False)
    assert group_top_n_single_pass(posts, **kwargs) == group_top_n_group_then_map(posts, **kwargs)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_groups_respect_limit_and_key(strategy):
    posts = create_sample_posts()
    grouped = strategy(posts, lambda p: p.category, 3)
    for category, group in grouped.items():
        assert len(group) <= 3
        assert all(post.category == category for post in group)
        dates = [post.published_date for post in group]
        assert dates == sorted(dates, reverse=True)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_small_groups_and_absent_keys(strategy):
    posts = [
        _post(1, "Java", datetime(2024, 1, 1)),
        _post(2, "Spring", datetime(2024, 1, 2)),
        _post(3, "Java", datetime(2024, 1, 3)),
    ]
    grouped = strategy(posts, lambda p: p.category, 5)
    assert [p.id for p in grouped["Java"]] == [3, 1]
    assert [p.id for p in grouped["Spring"]] == [2]
    assert "AI" not in grouped
    # insertion order of first occurrence, not sorted by key
    assert list(grouped) == ["Java", "Spring"]


@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("limit", [0, -2])
def test_non_positive_limit_yields_empty_lists(strategy, limit):
    posts = create_sample_posts()
    grouped = strategy(posts, lambda p: p.category, limit)
    assert set(grouped) == {p.category for p in posts}
    assert all(group == [] for group in grouped.values())


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_equal_dates_keep_input_order(strategy):
    same = datetime(2024, 5, 1, 12, 0)
    posts = [_post(i, "Java", same) for i in (7, 3, 9, 1)]
    grouped = strategy(posts, lambda p: p.category, 3)
    assert [p.id for p in grouped["Java"]] == [7, 3, 9]


def test_group_by_keeps_every_post():
    posts = create_sample_posts()
    grouped = group_by(posts, lambda p: p.category)
    assert sum(len(group) for group in grouped.values()) == len(posts)


def test_recent_posts_by_category_uses_newest_three():
    grouped = recent_posts_by_category(create_sample_posts())
    assert [p.title for p in grouped["Java"]] == [
        "Stream Gatherers Explained",
        "Records and Pattern Matching",
        "Virtual Threads in Practice",
    ]


def test_posts_by_category_exact_match_only():
    posts = create_sample_posts()
    assert [p.id for p in posts_by_category(posts, "Java")] == [5, 4, 3]
    assert posts_by_category(posts, "java") == []
    assert posts_by_category(posts, "Unknown") == []
    assert [p.id for p in posts_by_category(posts, "Career")] == [15]
