"""Comparison and containment predicates.

Every predicate takes two already evaluated operands, optionally the source
text of each one, and returns an :class:`~verdict.assertions._base.Outcome`.
An operand without a name is treated like a literal: its repr appears inline
in the header and it gets no detail line of its own.

    >>> a, b = 5, 19
    >>> print(equal(a, b, "a", "b").message)
    Test failed: a != b
    a: 5
    b: 19
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from verdict.assertions._base import AssertionFailure, Outcome
from verdict.assertions.render import Location, format_value, render_failure, render_header
from verdict.config import Settings, get_settings
from verdict.types import Relation


@dataclass(frozen=True, slots=True)
class Operand:
    """An evaluated operand and, when known, its source text."""

    value: Any
    name: str | None = None

    @property
    def is_named(self) -> bool:
        return bool(self.name)

    def text(self, settings: Settings) -> str:
        """How the operand reads inside the failure header."""
        if self.name:
            return self.name
        return format_value(self.value, settings)


def evaluate(
    relation: Relation,
    left: Operand,
    right: Operand,
    annotation: str | None = None,
    location: Location | None = None,
    settings: Settings | None = None,
) -> Outcome:
    """Check ``left <relation> right`` and render a failure if it does not hold."""
    if relation.holds(left.value, right.value):
        return Outcome.ok()

    settings = settings or get_settings()
    header = render_header(relation.describe(left.text(settings), right.text(settings)), location, settings)
    details = [(operand.name, operand.value) for operand in (left, right) if operand.is_named]
    message = render_failure(header, details, annotation, settings)
    return Outcome.fail(AssertionFailure(message=message))


def equal(
    left: Any,
    right: Any,
    left_name: str | None = None,
    right_name: str | None = None,
    annotation: str | None = None,
    *,
    location: Location | None = None,
) -> Outcome:
    """Pass when ``left == right``."""
    return evaluate(Relation.EQUAL, Operand(left, left_name), Operand(right, right_name), annotation, location)


def not_equal(
    left: Any,
    right: Any,
    left_name: str | None = None,
    right_name: str | None = None,
    annotation: str | None = None,
    *,
    location: Location | None = None,
) -> Outcome:
    """Pass when ``left != right``."""
    return evaluate(Relation.NOT_EQUAL, Operand(left, left_name), Operand(right, right_name), annotation, location)


def any_of(
    left: Any,
    right: Any,
    left_name: str | None = None,
    right_name: str | None = None,
    annotation: str | None = None,
    *,
    location: Location | None = None,
) -> Outcome:
    """Pass when ``left`` is contained in ``right``."""
    return evaluate(Relation.ANY, Operand(left, left_name), Operand(right, right_name), annotation, location)


def not_any_of(
    left: Any,
    right: Any,
    left_name: str | None = None,
    right_name: str | None = None,
    annotation: str | None = None,
    *,
    location: Location | None = None,
) -> Outcome:
    """Pass when ``left`` is not contained in ``right``."""
    return evaluate(Relation.NOT_ANY, Operand(left, left_name), Operand(right, right_name), annotation, location)


def less_or_equal(
    left: Any,
    right: Any,
    left_name: str | None = None,
    right_name: str | None = None,
    annotation: str | None = None,
    *,
    location: Location | None = None,
) -> Outcome:
    """Pass when ``left <= right``."""
    return evaluate(
        Relation.LESS_OR_EQUAL, Operand(left, left_name), Operand(right, right_name), annotation, location
    )


def greater_or_equal(
    left: Any,
    right: Any,
    left_name: str | None = None,
    right_name: str | None = None,
    annotation: str | None = None,
    *,
    location: Location | None = None,
) -> Outcome:
    """Pass when ``left >= right``."""
    return evaluate(
        Relation.GREATER_OR_EQUAL, Operand(left, left_name), Operand(right, right_name), annotation, location
    )


PREDICATES = {
    fn.__name__: fn for fn in (equal, not_equal, any_of, not_any_of, less_or_equal, greater_or_equal)
}
