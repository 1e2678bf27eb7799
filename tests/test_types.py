"""Tests for core blog post types."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from blog_streams.core.types import BlogPost, YearMonth


def _post(**overrides) -> BlogPost:
    fields = {
        "id": 1,
        "title": "Java Streams Guide",
        "author": "Alice Moreno",
        "category": "Java",
        "content": "Loving #java",
        "published_date": datetime(2024, 3, 12, 8, 45),
    }
    fields.update(overrides)
    return BlogPost(**fields)


def test_blog_post_is_immutable():
    post = _post()
    with pytest.raises(FrozenInstanceError):
        post.title = "Changed"  # type: ignore[misc]


def test_missing_field_fails_fast():
    with pytest.raises(TypeError, match="title"):
        _post(title=None)


def test_wrong_field_types_are_rejected():
    with pytest.raises(TypeError, match="id"):
        _post(id="1")
    with pytest.raises(TypeError, match="id"):
        _post(id=True)
    with pytest.raises(TypeError, match="published_date"):
        _post(published_date="2024-03-12")


def test_year_month_key_and_ordering():
    post = _post(published_date=datetime(2024, 3, 31, 23, 59))
    assert post.year_month == YearMonth(2024, 3)
    assert str(post.year_month) == "2024-03"
    assert YearMonth(2023, 12) < YearMonth(2024, 1) < YearMonth(2024, 2)


def test_equal_posts_compare_equal_and_hash():
    assert _post() == _post()
    assert len({_post(), _post()}) == 1
