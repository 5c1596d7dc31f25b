"""Small string and sequence helpers used when reading text input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

# The characters the C locale treats as whitespace.
_ASCII_WHITESPACE = " \t\n\v\f\r"


def head(items: Sequence[T], top: int) -> Sequence[T]:
    """Return the first ``top`` items; a negative ``top`` yields nothing."""
    count = min(max(top, 0), len(items))
    return items[:count]


def join(sep: str, items: Iterable[Any]) -> str:
    """Join the string forms of ``items`` with ``sep``.

    Raises ValueError when there is nothing to join.
    """
    parts = [str(item) for item in items]
    if not parts:
        raise ValueError("cannot join an empty collection")
    return sep.join(parts)


def strip(s: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return s.strip(_ASCII_WHITESPACE)


def split_by(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``.

    Empty fields between separators are kept, but a single trailing
    separator does not produce a final empty field, and an empty string
    yields an empty list.
    """
    if not sep:
        raise ValueError("separator must not be empty")
    if not s:
        return []
    parts = s.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts