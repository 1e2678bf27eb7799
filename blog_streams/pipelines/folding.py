"""Left fold and running scan."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

from ..core.types import BlogPost

T = TypeVar("T")
A = TypeVar("A")


def fold(source: Iterable[T], seed: A, combiner: Callable[[A, T], A]) -> A:
    """Combine every element into ``seed`` strictly left to right.

    Empty input returns the seed unchanged.
    """
    acc = seed
    for item in source:
        acc = combiner(acc, item)
    return acc


def scan(source: Iterable[T], seed: A, combiner: Callable[[A, T], A]) -> Iterator[A]:
    """Yield the accumulated value after each element is folded in.

    The seed itself is not emitted, so the output has one value per input.
    """
    acc = seed
    for item in source:
        acc = combiner(acc, item)
        yield acc


def concat_titles(separator: str = ", ") -> Callable[[str, BlogPost], str]:
    """Build a combiner appending ``post.title`` and ``separator``."""

    def _combine(acc: str, post: BlogPost) -> str:
        return acc + post.title + separator

    return _combine
