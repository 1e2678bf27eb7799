"""
Command-line interface for the blog stream pipelines.

Uses Typer to provide a CLI with options for the main configuration
settings. Supports loading .env files for local overrides.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import load_config, validate_config
from .input import create_sample_posts, load_posts
from .pipelines import MapCancelledError
from .runner import run_pipelines

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Stream-processing idioms over a collection of blog posts."""
    # Load .env before subcommand options read their environment variables
    load_dotenv()


@app.command()
def run(
    input: Path | None = typer.Option(
        None, "--input", "-i", exists=True, readable=True, help="JSON post export; sample posts if omitted."
    ),
    output: Path = typer.Option(Path("out"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, envvar="BLOG_STREAMS_CONFIG"),
    category: str | None = typer.Option(
        None, "--category", envvar="BLOG_STREAMS_CATEGORY", help="Category for the single-category filter."
    ),
    concurrency: int | None = typer.Option(
        None, "--concurrency", help="Maximum simultaneous calls in the concurrent map."
    ),
    markdown: bool | None = typer.Option(
        None, "--markdown/--no-markdown", help="Also write a markdown report."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", envvar="BLOG_STREAMS_LOG_LEVEL", help="Logging level."
    ),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Run every pipeline over the posts and print the results.

    Args:
        input: Path to a JSON post export
        output: Directory for the log file and markdown report
        config: Optional path to YAML config file
        category: Category used by the single-category filter
        concurrency: Concurrency ceiling for the concurrent map
        markdown: Enable/disable the markdown report
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    cfg = load_config(str(config) if config else None)

    # Override with CLI options
    if category:
        cfg.pipeline.category = category
    if concurrency is not None:
        cfg.pipeline.concurrency = concurrency
    if markdown is not None:
        cfg.output.markdown = markdown
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file
    try:
        validate_config(cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    posts = load_posts(input) if input else create_sample_posts()

    try:
        summary = run_pipelines(posts, cfg, output_dir=output, console=console)
    except MapCancelledError as exc:
        console.print(f"[yellow]Interrupted:[/yellow] {exc}")
        raise typer.Exit(code=130) from exc

    if summary.report_path is not None:
        console.print(f"Report generated: {summary.report_path}", markup=False)


if __name__ == "__main__":
    app()
