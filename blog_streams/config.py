"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- PipelineConfig: Sizes and limits used by the pipeline demonstrations
- OutputConfig: Report output settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

import yaml


@dataclass
class PipelineConfig:
    """Configuration for the pipeline runs.

    Attributes:
        category: Category used by the single-category filter
        top_n: Posts kept per category by the grouping pipelines
        fixed_window: Batch size for fixed windowing
        fixed_window_limit: Number of leading posts fed to fixed windowing
        sliding_window: Window size for sliding windowing
        sliding_window_limit: Number of leading posts fed to sliding windowing
        fold_limit: Number of leading posts fed to fold and scan
        concurrency: Maximum simultaneous calls in the concurrent map
        concurrency_limit: Number of leading posts fed to the concurrent map
        concurrency_delay_seconds: Simulated work time per concurrent call
        related_limit: Maximum related posts returned
        author_limit: Maximum authors in the popularity ranking
    """

    category: str = "Java"
    top_n: int = 3
    fixed_window: int = 3
    fixed_window_limit: int = 9
    sliding_window: int = 2
    sliding_window_limit: int = 5
    fold_limit: int = 5
    concurrency: int = 4
    concurrency_limit: int = 10
    concurrency_delay_seconds: float = 0.1
    related_limit: int = 3
    author_limit: int = 3


@dataclass
class OutputConfig:
    """Configuration for report output.

    Attributes:
        markdown: Whether to also write a markdown report
        filename: Name of the markdown report inside the output directory
    """

    markdown: bool = False
    filename: str = "report.md"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the main log file
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "run.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults.

    A fresh AppConfig is returned on every call, so callers may
    override fields without affecting later loads.
    """
    if not path:
        return validate_config(AppConfig())

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return validate_config(_merge_config(AppConfig(), raw))


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig, ignoring unknown keys."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update({k: v for k, v in value.items() if k in data[key]})
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        pipeline=PipelineConfig(**data["pipeline"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def validate_config(cfg: AppConfig) -> AppConfig:
    """Reject sizes the pipelines cannot work with.

    Raises:
        ValueError: If a window size or concurrency is below 1, or a
            limit or delay is negative
    """
    p = cfg.pipeline
    for name in ("fixed_window", "sliding_window", "concurrency"):
        if getattr(p, name) < 1:
            raise ValueError(f"pipeline.{name} must be >= 1, got {getattr(p, name)}")
    for name in (
        "top_n",
        "fixed_window_limit",
        "sliding_window_limit",
        "fold_limit",
        "concurrency_limit",
        "concurrency_delay_seconds",
        "related_limit",
        "author_limit",
    ):
        if getattr(p, name) < 0:
            raise ValueError(f"pipeline.{name} must be >= 0, got {getattr(p, name)}")
    if cfg.logging.format not in ("jsonl", "plain"):
        raise ValueError(f"logging.format must be 'jsonl' or 'plain', got {cfg.logging.format!r}")
    return cfg
