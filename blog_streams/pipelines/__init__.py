"""
Read-only pipelines over a post sequence.
"""

from .concurrent import MapCancelledError, map_concurrent
from .folding import concat_titles, fold, scan
from .grouping import (
    group_by,
    group_top_n,
    group_top_n_group_then_map,
    group_top_n_single_pass,
    posts_by_category,
    recent_posts_by_category,
    top_n,
)
from .windowing import FixedWindows, SlidingWindows, window_fixed, window_sliding

__all__ = [
    "FixedWindows",
    "MapCancelledError",
    "SlidingWindows",
    "concat_titles",
    "fold",
    "group_by",
    "group_top_n",
    "group_top_n_group_then_map",
    "group_top_n_single_pass",
    "map_concurrent",
    "posts_by_category",
    "recent_posts_by_category",
    "scan",
    "top_n",
    "window_fixed",
    "window_sliding",
]
