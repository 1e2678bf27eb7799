"""
Blog Streams - stream-processing idioms over blog posts.

This package groups, windows, folds, concurrently maps and aggregates an
in-memory collection of blog posts, rendering each result to the console.

Main entry point is the CLI via `blog-streams run` command.

Example:
    $ blog-streams run --category Spring --concurrency 2
"""

__all__ = ["__version__", "BlogPost", "create_sample_posts", "parse_posts_json", "run_pipelines"]
__version__ = "0.1.0"

from .core.types import BlogPost
from .input import create_sample_posts, parse_posts_json
from .runner import run_pipelines
