"""Built-in sample posts used when no input export is supplied."""

from __future__ import annotations

from datetime import datetime

from ..core.types import BlogPost

# (title, author, category, content, published)
_SAMPLE_ROWS: tuple[tuple[str, str, str, str, datetime], ...] = (
    (
        "Java Streams Guide",
        "Alice Moreno",
        "Java",
        "A practical walk through #java streams, collectors and #streams pipelines.",
        datetime(2024, 1, 15, 9, 30),
    ),
    (
        "Java Streams Tutorial",
        "Ben Carter",
        "Java",
        "Step by step #java tutorial covering map, filter and reduce on #streams.",
        datetime(2024, 2, 3, 14, 0),
    ),
    (
        "Virtual Threads in Practice",
        "Alice Moreno",
        "Java",
        "Loom brings virtual threads to the JDK. #java #concurrency in the real world.",
        datetime(2024, 3, 12, 8, 45),
    ),
    (
        "Records and Pattern Matching",
        "Chloe Park",
        "Java",
        "Modelling data with records and sealed types. #java #records",
        datetime(2024, 3, 28, 17, 10),
    ),
    (
        "Stream Gatherers Explained",
        "Alice Moreno",
        "Java",
        "Custom intermediate operations with gatherers. #java #streams #gatherers",
        datetime(2024, 4, 2, 11, 0),
    ),
    (
        "Getting Started with Spring Boot",
        "Ben Carter",
        "Spring",
        "Bootstrapping a REST service with #spring boot in minutes.",
        datetime(2024, 1, 20, 10, 15),
    ),
    (
        "Spring Boot Testing Guide",
        "Dev Patel",
        "Spring",
        "Slices, mocks and testcontainers for #spring applications. #testing",
        datetime(2024, 2, 18, 16, 40),
    ),
    (
        "Spring Security Basics",
        "Chloe Park",
        "Spring",
        "Authentication and authorization with #spring security. #security",
        datetime(2024, 3, 5, 9, 0),
    ),
    (
        "Spring Boot Observability",
        "Dev Patel",
        "Spring",
        "Metrics, traces and logs with micrometer in #spring boot. #observability",
        datetime(2024, 4, 9, 13, 25),
    ),
    (
        "Building a Chat Bot with Spring AI",
        "Alice Moreno",
        "AI",
        "Wiring an LLM into a #spring application with #ai prompt templates.",
        datetime(2024, 2, 25, 19, 5),
    ),
    (
        "Prompt Engineering for Developers",
        "Ben Carter",
        "AI",
        "Patterns that make #ai prompts predictable and testable.",
        datetime(2024, 3, 18, 7, 50),
    ),
    (
        "Retrieval Augmented Generation Guide",
        "Chloe Park",
        "AI",
        "Vector stores, embeddings and #rag pipelines for #ai assistants.",
        datetime(2024, 4, 14, 12, 0),
    ),
    (
        "Debugging Like a Pro",
        "Dev Patel",
        "Tools",
        "Breakpoints, watches and hot swap tricks every developer should know. #debugging",
        datetime(2024, 1, 8, 15, 30),
    ),
    (
        "Git Workflows for Teams",
        "Alice Moreno",
        "Tools",
        "Trunk based development versus feature branches. #git",
        datetime(2024, 2, 10, 8, 20),
    ),
    (
        "Writing Your First Conference Talk",
        "Ben Carter",
        "Career",
        "From abstract to stage: how to pitch and deliver a talk. #career #speaking",
        datetime(2024, 3, 22, 18, 45),
    ),
)


def create_sample_posts() -> list[BlogPost]:
    """Build the fixed sample post list.

    Returns:
        A new list of BlogPost objects with ids starting at 1
    """
    return [
        BlogPost(
            id=index,
            title=title,
            author=author,
            category=category,
            content=content,
            published_date=published,
        )
        for index, (title, author, category, content, published) in enumerate(_SAMPLE_ROWS, start=1)
    ]
