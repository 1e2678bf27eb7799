"""Monthly archive view of posts."""

from __future__ import annotations

from typing import Iterable

from ..core.types import BlogPost, YearMonth, published_date_key
from .base import Aggregator, aggregate


class MonthlyArchiveAggregator(Aggregator[BlogPost, dict[YearMonth, list[BlogPost]]]):
    """Group posts by publication month.

    The finished mapping iterates months newest first, and each month's
    posts are ordered newest first.
    """

    def __init__(self) -> None:
        self._months: dict[YearMonth, list[BlogPost]] = {}

    def add(self, item: BlogPost) -> None:
        self._months.setdefault(item.year_month, []).append(item)

    def merge(self, other: MonthlyArchiveAggregator) -> MonthlyArchiveAggregator:
        for month, posts in other._months.items():
            self._months.setdefault(month, []).extend(posts)
        return self

    def finish(self) -> dict[YearMonth, list[BlogPost]]:
        return {
            month: sorted(self._months[month], key=published_date_key, reverse=True)
            for month in sorted(self._months, reverse=True)
        }


def monthly_archive(posts: Iterable[BlogPost]) -> dict[YearMonth, list[BlogPost]]:
    return aggregate(posts, MonthlyArchiveAggregator())
