import pytest
from pydantic import ValidationError

from verdict import AssertionFailedError, AssertionFailure, Outcome, equal


class TestOutcome:
    def test_ok_is_a_pass(self):
        outcome = Outcome.ok()

        assert outcome.passed is True
        assert outcome.failed is False
        assert outcome.message is None
        assert outcome.error() is None
        assert bool(outcome) is True

    def test_fail_carries_message(self):
        outcome = Outcome.fail(AssertionFailure(message="Test failed: a != b"))

        assert outcome.passed is False
        assert outcome.failed is True
        assert outcome.message == "Test failed: a != b"
        assert not outcome

    def test_fail_accepts_plain_text(self):
        outcome = Outcome.fail("boom")

        assert outcome.failure == AssertionFailure(message="boom")

    def test_raise_for_failure_on_pass_returns_none(self):
        assert Outcome.ok().raise_for_failure() is None

    def test_raise_for_failure_raises_assertion_error(self):
        outcome = equal(5, 19, "a", "b")

        with pytest.raises(AssertionError) as exc_info:
            outcome.raise_for_failure()

        assert isinstance(exc_info.value, AssertionFailedError)
        assert exc_info.value.failure is outcome.failure
        assert str(exc_info.value) == "Test failed: a != b\na: 5\nb: 19"

    def test_error_can_be_handled_as_generic_exception(self):
        error = Outcome.fail("nope").error()

        try:
            raise error
        except Exception as exc:
            assert str(exc) == "nope"

    def test_failure_is_immutable(self):
        failure = AssertionFailure(message="original")

        with pytest.raises(ValidationError):
            failure.message = "edited"

        assert str(failure) == "original"

    def test_outcome_is_immutable(self):
        outcome = Outcome.ok()

        with pytest.raises(ValidationError):
            outcome.failure = AssertionFailure(message="late")

    def test_operators_combine_outcomes(self):
        failed = Outcome.fail("x")

        assert (Outcome.ok() & Outcome.ok()).passed
        assert (failed & Outcome.ok()).message == "One of the tests failed\n   x"
        assert (failed | Outcome.ok()).passed
        assert (failed | failed).message == "Both tests failed\n1: x\n2: x"

    def test_operators_reject_non_outcomes(self):
        assert Outcome.ok().__and__("x") is NotImplemented
        assert Outcome.ok().__or__("x") is NotImplemented

        with pytest.raises(TypeError):
            Outcome.ok() & "x"
        with pytest.raises(TypeError):
            Outcome.ok() | "x"

    def test_repr(self):
        assert repr(Outcome.ok()) == "Outcome(passed)"
        assert repr(Outcome.fail("x")) == "Outcome(failed: 'x')"
