"""Assertion engine: predicates, combinators and failure rendering."""

from ._base import AssertionFailedError, AssertionFailure, Outcome
from .basic import (
    Operand,
    any_of,
    equal,
    evaluate,
    greater_or_equal,
    less_or_equal,
    not_any_of,
    not_equal,
)
from .combinators import and_, or_
from .render import Location
from .transformers import compile_with_capture, load_module

__all__ = [
    "AssertionFailedError",
    "AssertionFailure",
    "Outcome",
    "Operand",
    "Location",
    "evaluate",
    "equal",
    "not_equal",
    "any_of",
    "not_any_of",
    "less_or_equal",
    "greater_or_equal",
    "and_",
    "or_",
    "compile_with_capture",
    "load_module",
]
