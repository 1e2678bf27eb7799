"""Tests for JSON post export parsing."""

import json
import logging
from datetime import datetime
from pathlib import Path

import pytest

from blog_streams.input import create_sample_posts, load_posts, parse_posts_json


def _item(**overrides) -> dict:
    item = {
        "id": 1,
        "title": "Java Streams Guide",
        "author": "Alice Moreno",
        "category": "Java",
        "content": "Loving #java",
        "publishedDate": "2024-01-15T09:30:00",
    }
    item.update(overrides)
    return item


def test_parse_posts_json_builds_posts_in_order():
    posts = parse_posts_json({"posts": [_item(), _item(id=2, publishedDate="2024-02-01T10:00:00Z")]})
    assert [p.id for p in posts] == [1, 2]
    assert posts[0].published_date == datetime(2024, 1, 15, 9, 30)
    assert posts[1].published_date == datetime(2024, 2, 1, 10, 0)
    assert posts[1].published_date.tzinfo is None


def test_parse_posts_json_requires_posts_key():
    with pytest.raises(ValueError, match="posts"):
        parse_posts_json({"articles": []})


def test_items_missing_fields_are_skipped(caplog, monkeypatch):
    # setup_logging detaches the package logger from root; reattach for caplog
    monkeypatch.setattr(logging.getLogger("blog_streams"), "propagate", True)
    broken = _item(id=7)
    del broken["author"]
    with caplog.at_level(logging.WARNING):
        posts = parse_posts_json({"posts": [broken, _item(id=8)]})
    assert [p.id for p in posts] == [8]
    assert "Skipping post 7" in caplog.text


def test_invalid_date_is_an_error():
    with pytest.raises(ValueError):
        parse_posts_json({"posts": [_item(publishedDate="yesterday")]})


def test_wrong_field_type_fails_fast():
    with pytest.raises(TypeError, match="id"):
        parse_posts_json({"posts": [_item(id="one")]})


def test_load_posts_reads_file(tmp_path: Path):
    path = tmp_path / "posts.json"
    path.write_text(json.dumps({"posts": [_item(), _item(id=2)]}), encoding="utf-8")
    assert [p.id for p in load_posts(path)] == [1, 2]


def test_sample_posts_are_well_formed():
    posts = create_sample_posts()
    assert len(posts) == 15
    assert len({p.id for p in posts}) == len(posts)
    assert create_sample_posts() == posts
