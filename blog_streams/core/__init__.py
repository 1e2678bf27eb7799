"""
Core domain models.

This package contains data types that are independent of any
specific pipeline.
"""

from .types import BlogPost, YearMonth, published_date_key

__all__ = [
    "BlogPost",
    "YearMonth",
    "published_date_key",
]
