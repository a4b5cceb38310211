"""verdict - assertions that return outcomes instead of raising."""

from .assertions import (
    AssertionFailedError,
    AssertionFailure,
    Location,
    Operand,
    Outcome,
    and_,
    any_of,
    compile_with_capture,
    equal,
    evaluate,
    greater_or_equal,
    less_or_equal,
    load_module,
    not_any_of,
    not_equal,
    or_,
)
from .config import Settings, get_settings
from .types import Relation

__version__ = "0.1.0"


__all__ = [
    # Outcomes
    "Outcome",
    "AssertionFailure",
    "AssertionFailedError",
    # Predicates
    "Relation",
    "Operand",
    "Location",
    "evaluate",
    "equal",
    "not_equal",
    "any_of",
    "not_any_of",
    "less_or_equal",
    "greater_or_equal",
    # Combinators
    "and_",
    "or_",
    # Call-site capture
    "compile_with_capture",
    "load_module",
    # Settings
    "Settings",
    "get_settings",
]
