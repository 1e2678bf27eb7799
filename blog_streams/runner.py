"""
Pipeline orchestration for the blog stream demonstrations.

This module runs every pipeline over the same post list, in order:
1. Single-category filter
2. Top-N grouping by category (both strategies, plus the aggregator)
3. Fixed and sliding windows
4. Fold and scan of titles
5. Bounded-concurrency title mapping
6. Domain aggregations (related posts, hashtags, reading time,
   popular authors, monthly archive)

Each step renders its result to the console immediately and contributes a
section to the optional markdown report. Steps are independent read-only
consumers of the post list.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from rich.console import Console

from .aggregators import (
    aggregate,
    extract_hashtags,
    monthly_archive,
    popular_authors,
    reading_times,
    recent_posts_by_category_aggregator,
    related_posts,
)
from .config import AppConfig
from .core.types import BlogPost
from .logging_utils import log_event, setup_logging
from .pipelines import (
    MapCancelledError,
    concat_titles,
    fold,
    group_top_n_group_then_map,
    group_top_n_single_pass,
    map_concurrent,
    posts_by_category,
    scan,
    window_fixed,
    window_sliding,
)
from .renderer import (
    format_duration,
    render_counts,
    render_grouped,
    render_lines,
    render_markdown,
    render_posts,
    render_reading_times,
    render_section,
    render_windows,
)

Section = tuple[str, list[str]]
Step = Callable[[list[BlogPost], AppConfig, Console, threading.Event], list[str]]


@dataclass
class RunSummary:
    """Outcome of a full run.

    Attributes:
        sections: Markdown sections as (heading, lines), in run order
        report_path: Path of the written markdown report, if any
    """
    sections: list[Section] = field(default_factory=list)
    report_path: Path | None = None


def _category_filter(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    category = cfg.pipeline.category
    found = posts_by_category(posts, category, cfg.pipeline.top_n)
    render_posts(console, f"Posts by category: {category}", found)
    return [_md_post(post) for post in found] or [f"_No posts in {category}_"]


def _group_by_category(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    limit = cfg.pipeline.top_n
    by_category = lambda post: post.category  # noqa: E731
    single_pass = group_top_n_single_pass(posts, by_category, limit)
    group_then_map = group_top_n_group_then_map(posts, by_category, limit)
    if single_pass != group_then_map:
        raise RuntimeError("Grouping strategies disagree")
    aggregated = dict(aggregate(posts, recent_posts_by_category_aggregator(limit)))
    if aggregated != single_pass:
        raise RuntimeError("Group/limit aggregator disagrees with grouping pipeline")

    console.print("[bold]Recent posts by category:[/bold]")
    render_grouped(console, single_pass, "Category")
    lines: list[str] = []
    for category, group in single_pass.items():
        lines.append(f"### {category}")
        lines.extend(_md_post(post) for post in group)
    return lines


def _fixed_windows(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    p = cfg.pipeline
    windows = list(window_fixed(posts[: p.fixed_window_limit], p.fixed_window))
    console.print(f"Posts in batches of {p.fixed_window}:")
    render_windows(console, windows, "Batch")
    return [f"- Batch {i}: " + ", ".join(post.title for post in window) for i, window in enumerate(windows, 1)]


def _sliding_windows(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    p = cfg.pipeline
    windows = list(window_sliding(posts[: p.sliding_window_limit], p.sliding_window))
    console.print(f"Posts in sliding windows of size {p.sliding_window}:")
    render_windows(console, windows, "Window")
    return [f"- Window {i}: " + ", ".join(post.title for post in window) for i, window in enumerate(windows, 1)]


def _fold_titles(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    head = posts[: cfg.pipeline.fold_limit]
    folded = fold(head, "All titles: ", concat_titles())
    render_lines(console, [folded])
    return [folded]


def _scan_titles(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    head = posts[: cfg.pipeline.fold_limit]
    progressive = list(scan(head, "Titles so far: ", concat_titles()))
    console.print("Progressive title concatenation:")
    render_lines(console, progressive)
    return [f"- {line}" for line in progressive]


def _concurrent_title_lengths(
    posts: list[BlogPost], cfg: AppConfig, console: Console, cancel_event: threading.Event
) -> list[str]:
    p = cfg.pipeline
    delay = p.concurrency_delay_seconds

    def title_length(post: BlogPost) -> tuple[str, int]:
        # Simulated slow work; returns early once cancelled.
        cancel_event.wait(delay)
        return post.title, len(post.title)

    logger = logging.getLogger("blog_streams")
    console.print("Title lengths (processed concurrently):")
    lines: list[str] = []
    for title, length in map_concurrent(
        posts[: p.concurrency_limit], title_length, p.concurrency, cancel_event, logger
    ):
        console.print(f"{title}: {length} chars", markup=False)
        lines.append(f"- {title}: {length} chars")
    return lines


def _related(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    if not posts:
        return ["_No posts_"]
    target = posts[0]
    related = related_posts(posts, target, cfg.pipeline.related_limit)
    render_posts(console, f"Related to: {target.title}", related)
    return [f"Target: **{target.title}**", ""] + [_md_post(post) for post in related]


def _hashtags(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    tags = extract_hashtags(posts)
    ranked = sorted(tags.items(), key=lambda entry: entry[1], reverse=True)
    render_counts(console, "Hashtags", [(f"#{tag}", count) for tag, count in ranked], "Tag")
    return [f"- #{tag}: {count}" for tag, count in ranked]


def _reading_times(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    times = reading_times(posts)
    render_reading_times(console, posts, times)
    return [f"- {post.title}: {format_duration(times[post.id])}" for post in posts]


def _popular_authors(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    ranked = popular_authors(posts, cfg.pipeline.author_limit)
    render_counts(console, "Most prolific authors", ranked, "Author")
    return [f"- {author}: {count} posts" for author, count in ranked]


def _archive(posts: list[BlogPost], cfg: AppConfig, console: Console, _cancel) -> list[str]:
    archive = monthly_archive(posts)
    render_grouped(console, archive, "Month")
    lines: list[str] = []
    for month, group in archive.items():
        lines.append(f"### {month}")
        lines.extend(_md_post(post) for post in group)
    return lines


STEPS: tuple[tuple[str, str, Step], ...] = (
    ("category_filter", "Posts by category", _category_filter),
    ("group_by_category", "Recent posts by category", _group_by_category),
    ("window_fixed", "Fixed windows", _fixed_windows),
    ("window_sliding", "Sliding windows", _sliding_windows),
    ("fold", "Fold", _fold_titles),
    ("scan", "Scan", _scan_titles),
    ("map_concurrent", "Concurrent map", _concurrent_title_lengths),
    ("related_posts", "Related posts", _related),
    ("hashtags", "Hashtags", _hashtags),
    ("reading_time", "Reading time", _reading_times),
    ("popular_authors", "Popular authors", _popular_authors),
    ("monthly_archive", "Monthly archive", _archive),
)


def run_pipelines(
    posts: list[BlogPost],
    cfg: AppConfig,
    output_dir: Path | None = None,
    console: Console | None = None,
    cancel_event: threading.Event | None = None,
) -> RunSummary:
    """Run every pipeline over ``posts`` and render the results.

    Args:
        posts: The post list shared by all pipelines
        cfg: Application configuration
        output_dir: Directory for the log file and markdown report
        console: Rich console for output (creates default if None)
        cancel_event: Event that stops the concurrent map when set

    Returns:
        RunSummary with the rendered sections and report path

    Raises:
        MapCancelledError: If the concurrent map was cancelled or interrupted
    """
    console = console or Console()
    cancel_event = cancel_event or threading.Event()
    logger = setup_logging(cfg.logging, output_dir, console)
    summary = RunSummary()

    log_event(logger, "Run start", event="run_start", posts=len(posts))

    for name, heading, step in STEPS:
        render_section(console, heading)
        log_event(logger, "Pipeline start", event="pipeline_start", pipeline=name)
        try:
            lines = step(posts, cfg, console, cancel_event)
        except MapCancelledError as exc:
            logger.warning(
                f"Pipeline {name} cancelled after {exc.completed} result(s)",
                extra={"event": "pipeline_cancelled", "pipeline": name, "completed": exc.completed},
            )
            raise
        summary.sections.append((heading, lines))
        log_event(logger, "Pipeline complete", event="pipeline_complete", pipeline=name, lines=len(lines))

    if cfg.output.markdown and output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        summary.report_path = output_dir / cfg.output.filename
        render_markdown(summary.sections, summary.report_path, "Blog Stream Report")
        log_event(logger, "Report written", event="report_written", output=str(summary.report_path))

    log_event(logger, "Run complete", event="run_complete", sections=len(summary.sections))
    return summary


def _md_post(post: BlogPost) -> str:
    return f"- {post.title} ({post.author}, {post.published_date.isoformat(timespec='minutes')})"
