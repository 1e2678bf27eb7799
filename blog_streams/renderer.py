from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core.types import BlogPost


def render_section(console: Console, title: str) -> None:
    console.rule(f"[bold]{escape(title)}")


def render_posts(console: Console, title: str, posts: Sequence[BlogPost]) -> None:
    table = Table(title=escape(title), show_lines=False)
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Author")
    table.add_column("Category")
    table.add_column("Published")
    for post in posts:
        table.add_row(
            str(post.id),
            escape(post.title),
            escape(post.author),
            escape(post.category),
            post.published_date.isoformat(sep=" ", timespec="minutes"),
        )
    console.print(table)


def render_grouped(console: Console, groups: Mapping[Any, Sequence[BlogPost]], label: str) -> None:
    for key, posts in groups.items():
        console.print(f"\n[bold]{escape(label)}: {escape(str(key))}[/bold]")
        for post in posts:
            console.print(f"  - {post.title} (Published: {_format_date(post)})", markup=False)


def render_windows(console: Console, windows: Iterable[Sequence[BlogPost]], label: str) -> None:
    for window in windows:
        console.print(f"\n[bold]{escape(label)}:[/bold]")
        for post in window:
            console.print(f"  - {post.title}", markup=False)


def render_lines(console: Console, lines: Iterable[str]) -> None:
    for line in lines:
        console.print(line, markup=False)


def render_counts(console: Console, title: str, counts: Iterable[tuple[str, int]], key_header: str) -> None:
    table = Table(title=escape(title))
    table.add_column(escape(key_header))
    table.add_column("Count", justify="right")
    for key, count in counts:
        table.add_row(escape(key), str(count))
    console.print(table)


def render_reading_times(
    console: Console, posts: Sequence[BlogPost], times: Mapping[int, timedelta]
) -> None:
    table = Table(title="Estimated reading time")
    table.add_column("Title")
    table.add_column("Time", justify="right")
    for post in posts:
        if post.id in times:
            table.add_row(escape(post.title), format_duration(times[post.id]))
    console.print(table)


def format_duration(value: timedelta) -> str:
    total = int(value.total_seconds())
    minutes, seconds = divmod(total, 60)
    return f"{minutes}m {seconds:02d}s"


def render_markdown(sections: list[tuple[str, list[str]]], output_path: Path, title: str) -> None:
    lines = [f"# {title}", ""]
    for heading, body in sections:
        lines.append(f"## {heading}")
        lines.append("")
        lines.extend(body)
        lines.append("")
    output_path.write_text("\n".join(lines), encoding="utf-8")


def _format_date(post: BlogPost) -> str:
    return post.published_date.isoformat(timespec="minutes")
