"""Shared types for the verdict assertion engine."""

import operator
from collections.abc import Callable
from enum import Enum
from typing import Any


class Relation(Enum):
    """Comparison or containment relation checked by a predicate."""

    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    ANY = "any"  # left is one of the items in right
    NOT_ANY = "not_any"
    LESS_OR_EQUAL = "less_or_equal"
    GREATER_OR_EQUAL = "greater_or_equal"

    def holds(self, left: Any, right: Any) -> bool:
        """Return whether ``left <relation> right`` is true."""
        return bool(_CHECKS[self](left, right))

    def describe(self, left_text: str, right_text: str) -> str:
        """Render the comparison that failed, e.g. ``a != b``."""
        return _FAILED_TEMPLATES[self].format(left=left_text, right=right_text)


_CHECKS: dict[Relation, Callable[[Any, Any], Any]] = {
    Relation.EQUAL: operator.eq,
    Relation.NOT_EQUAL: operator.ne,
    Relation.ANY: lambda left, right: left in right,
    Relation.NOT_ANY: lambda left, right: left not in right,
    Relation.LESS_OR_EQUAL: operator.le,
    Relation.GREATER_OR_EQUAL: operator.ge,
}

# Shows the relation that held instead of the expected one.
_FAILED_TEMPLATES: dict[Relation, str] = {
    Relation.EQUAL: "{left} != {right}",
    Relation.NOT_EQUAL: "{left} == {right}",
    Relation.ANY: "!{right}.contains({left})",
    Relation.NOT_ANY: "{right}.contains({left})",
    Relation.LESS_OR_EQUAL: "{left} > {right}",
    Relation.GREATER_OR_EQUAL: "{left} < {right}",
}
