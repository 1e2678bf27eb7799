"""
Reusable two-phase aggregators and the blog-specific aggregations built on them.
"""

from .archive import MonthlyArchiveAggregator, monthly_archive
from .authors import PopularAuthorsAggregator, popular_authors
from .base import Aggregator, GroupLimitAggregator, aggregate, recent_posts_by_category_aggregator
from .hashtags import HashtagAggregator, extract_hashtags
from .reading_time import ReadingTimeAggregator, estimate_reading_time, reading_times
from .related import RelatedPostsAggregator, related_posts, title_similarity

__all__ = [
    "Aggregator",
    "GroupLimitAggregator",
    "HashtagAggregator",
    "MonthlyArchiveAggregator",
    "PopularAuthorsAggregator",
    "ReadingTimeAggregator",
    "RelatedPostsAggregator",
    "aggregate",
    "estimate_reading_time",
    "extract_hashtags",
    "monthly_archive",
    "popular_authors",
    "reading_times",
    "recent_posts_by_category_aggregator",
    "related_posts",
    "title_similarity",
]
