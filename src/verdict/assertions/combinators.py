"""Logical AND/OR over two outcomes."""

from __future__ import annotations

from verdict.assertions._base import AssertionFailure, Outcome
from verdict.assertions.render import INDENT, indent, with_annotation


def merge_one(failure: AssertionFailure, annotation: str | None = None) -> AssertionFailure:
    """Wrap a single nested failure one level deeper."""
    header = with_annotation("One of the tests failed", annotation)
    return AssertionFailure(message=f"{header}\n{INDENT}{indent(failure.message)}")


def merge_both(first: AssertionFailure, second: AssertionFailure, annotation: str | None = None) -> AssertionFailure:
    """Wrap two nested failures one level deeper, labelled ``1:`` and ``2:``."""
    header = with_annotation("Both tests failed", annotation)
    return AssertionFailure(message=f"{header}\n1: {indent(first.message)}\n2: {indent(second.message)}")


def _check_outcomes(*outcomes: object) -> None:
    for outcome in outcomes:
        if not isinstance(outcome, Outcome):
            raise TypeError(f"expected an Outcome, got {type(outcome).__name__}")


def and_(first: Outcome, second: Outcome, annotation: str | None = None) -> Outcome:
    """Pass only when both outcomes passed."""
    _check_outcomes(first, second)
    if first.failure is not None and second.failure is not None:
        return Outcome.fail(merge_both(first.failure, second.failure, annotation))
    failure = first.failure if first.failure is not None else second.failure
    if failure is None:
        return Outcome.ok()
    return Outcome.fail(merge_one(failure, annotation))


def or_(first: Outcome, second: Outcome, annotation: str | None = None) -> Outcome:
    """Pass when at least one outcome passed; the other one's failure is dropped."""
    _check_outcomes(first, second)
    if first.failure is not None and second.failure is not None:
        return Outcome.fail(merge_both(first.failure, second.failure, annotation))
    return Outcome.ok()
