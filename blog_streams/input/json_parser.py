"""JSON parser for blog post exports.

This module parses post exports in JSON format into BlogPost objects.
The format uses a top-level ``posts`` array with id, title, author,
category, content and publishedDate fields.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.types import BlogPost

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("id", "title", "author", "category", "content", "publishedDate")


def parse_posts_json(data: dict[str, Any]) -> list[BlogPost]:
    """Parse a JSON post export into a list of BlogPost objects.

    The export structure:
        {
            "posts": [
                {
                    "id": 1,
                    "title": "Java Streams Guide",
                    "author": "Alice Moreno",
                    "category": "Java",
                    "content": "A walk through #java streams",
                    "publishedDate": "2024-01-15T09:30:00"
                }
            ]
        }

    Args:
        data: The parsed JSON content as a dictionary

    Returns:
        A list of BlogPost objects in export order. Items missing any
        required field are skipped with a warning.

    Raises:
        ValueError: If the JSON is missing the 'posts' key or a
            publishedDate is not an ISO 8601 timestamp
    """
    if "posts" not in data:
        raise ValueError("Invalid JSON format: missing 'posts' key")

    posts: list[BlogPost] = []

    for item in data["posts"]:
        missing = [name for name in _REQUIRED_FIELDS if item.get(name) is None]
        if missing:
            post_id = item.get("id", "unknown")
            logger.warning(f"Skipping post {post_id}: missing required fields ({', '.join(missing)})")
            continue

        posts.append(
            BlogPost(
                id=item["id"],
                title=item["title"],
                author=item["author"],
                category=item["category"],
                content=item["content"],
                published_date=parse_published_date(item["publishedDate"]),
            )
        )

    return posts


def parse_published_date(value: str) -> datetime:
    """Parse an ISO 8601 timestamp into a naive local datetime.

    A trailing offset is dropped; posts carry wall-clock time only.
    """
    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1]
    parsed = datetime.fromisoformat(raw)
    return parsed.replace(tzinfo=None)


def load_posts(path: Path) -> list[BlogPost]:
    """Load and parse a JSON post export from disk."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return parse_posts_json(data)
