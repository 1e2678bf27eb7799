"""
Input sources for blog posts.
"""

from .json_parser import load_posts, parse_posts_json
from .sample_data import create_sample_posts

__all__ = ["create_sample_posts", "load_posts", "parse_posts_json"]
