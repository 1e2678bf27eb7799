"""
Core data types for the blog stream pipelines.

This module defines the fundamental data structures used throughout:
- BlogPost: Immutable blog post record consumed by every pipeline
- YearMonth: Calendar month key used by the monthly archive
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import NamedTuple


@dataclass(frozen=True)
class BlogPost:
    """Represents a single published blog post.

    Instances are immutable; pipelines only ever read them and build new
    collections around them.

    Attributes:
        id: Unique integer identifier
        title: The post headline
        author: Author display name
        category: Category label used for grouping (case-sensitive)
        content: Full body text, may contain #hashtags
        published_date: Local publication timestamp (no timezone)
    """
    id: int
    title: str
    author: str
    category: str
    content: str
    published_date: datetime

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                raise TypeError(f"BlogPost.{f.name} is required")
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError(f"BlogPost.id must be int, got {type(self.id).__name__}")
        for name in ("title", "author", "category", "content"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"BlogPost.{name} must be str, got {type(value).__name__}")
        if not isinstance(self.published_date, datetime):
            raise TypeError(
                "BlogPost.published_date must be datetime, "
                f"got {type(self.published_date).__name__}"
            )

    @property
    def year_month(self) -> YearMonth:
        return YearMonth(self.published_date.year, self.published_date.month)


class YearMonth(NamedTuple):
    """Calendar month key; tuples order chronologically."""

    year: int
    month: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


def published_date_key(post: BlogPost) -> datetime:
    """Sort key for ordering posts by publication time."""
    return post.published_date
