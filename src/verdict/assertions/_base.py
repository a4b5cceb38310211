"""Outcome and failure types returned by every assertion."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AssertionFailure(BaseModel):
    """Rendered diagnostic of a failed assertion.

    Attributes:
    ----------
    message: str
        Fully rendered failure text, ready for display or logging.
    """

    model_config = ConfigDict(frozen=True)

    message: str

    def __str__(self) -> str:
        return self.message


class AssertionFailedError(AssertionError):
    """AssertionError with attached AssertionFailure."""

    def __init__(self, failure: AssertionFailure):
        self.failure = failure
        super().__init__(failure.message)


class Outcome(BaseModel):
    """Result of one assertion: a pass, or a fail carrying its diagnostic.

    Outcomes are plain values. Nothing is raised until the caller asks for it
    with :meth:`raise_for_failure`.
    """

    model_config = ConfigDict(frozen=True)

    failure: AssertionFailure | None = None

    @classmethod
    def ok(cls) -> Outcome:
        return cls()

    @classmethod
    def fail(cls, failure: AssertionFailure | str) -> Outcome:
        if isinstance(failure, str):
            failure = AssertionFailure(message=failure)
        return cls(failure=failure)

    @property
    def passed(self) -> bool:
        return self.failure is None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    @property
    def message(self) -> str | None:
        """Rendered failure text, or ``None`` for a pass."""
        return self.failure.message if self.failure is not None else None

    def error(self) -> AssertionFailedError | None:
        """Return the failure as an exception without raising it."""
        if self.failure is None:
            return None
        return AssertionFailedError(self.failure)

    def raise_for_failure(self) -> None:
        """Raise AssertionFailedError if this outcome is a fail."""
        if self.failure is not None:
            raise AssertionFailedError(self.failure)

    def __bool__(self) -> bool:
        return self.passed

    def __and__(self, other: Outcome) -> Outcome:
        if not isinstance(other, Outcome):
            return NotImplemented
        from verdict.assertions.combinators import and_

        return and_(self, other)

    def __or__(self, other: Outcome) -> Outcome:
        if not isinstance(other, Outcome):
            return NotImplemented
        from verdict.assertions.combinators import or_

        return or_(self, other)

    def __repr__(self) -> str:
        if self.failure is None:
            return "Outcome(passed)"
        return f"Outcome(failed: {self.failure.message!r})"
