"""Failure message rendering.

A failure message has the layout::

    [file:line:column]: Test failed: a != b: optional annotation
    a: 5
    b: 19

The location prefix is only present when the call site is known and line
info is enabled in :mod:`verdict.config`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from verdict.config import Settings, get_settings

INDENT = "   "


@dataclass(frozen=True, slots=True)
class Location:
    """Source position of an assertion call site (1-based line and column)."""

    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"[{self.file}:{self.line}:{self.column}]"


def _truncate(text: str, max_len: int | None) -> str:
    if max_len is None or len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def format_value(value: Any, settings: Settings | None = None) -> str:
    """Debug representation of an operand value."""
    settings = settings or get_settings()
    return _truncate(repr(value), settings.repr_limit)


def render_header(body: str, location: Location | None = None, settings: Settings | None = None) -> str:
    """Build the ``Test failed: ...`` header line."""
    settings = settings or get_settings()
    if location is not None and settings.line_info:
        return f"{location}: Test failed: {body}"
    return f"Test failed: {body}"


def with_annotation(header: str, annotation: str | None) -> str:
    if annotation is None:
        return header
    return f"{header}: {annotation}"


def render_failure(
    header: str,
    details: Iterable[tuple[str, Any]] = (),
    annotation: str | None = None,
    settings: Settings | None = None,
) -> str:
    """Join header, annotation and one ``name: value`` line per detail."""
    settings = settings or get_settings()
    lines = [with_annotation(header, annotation)]
    lines.extend(f"{name}: {format_value(value, settings)}" for name, value in details)
    return "\n".join(lines)


def indent(text: str) -> str:
    """Shift every continuation line of ``text`` right by one nesting level."""
    return text.replace("\n", "\n" + INDENT)
