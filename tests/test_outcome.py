"""Tests for the outcome model and trace frames."""

from __future__ import annotations

import pytest

from commitparse.syntax.outcome import (
    ALTERNATIVE,
    END_OF_INPUT,
    GUARD,
    ORIGIN,
    RECOVERABLE,
    Failure,
    Reason,
    ReasonKind,
    Severity,
    Success,
    format_trace,
    is_recoverable,
    is_success,
    is_unrecoverable,
)


class TestReason:
    """Trace frame rendering and identity."""

    @pytest.mark.parametrize(
        ("reason", "rendered"),
        [
            (ALTERNATIVE, "Alternative"),
            (GUARD, "Guard"),
            (END_OF_INPUT, "End"),
            (ORIGIN, "Origin"),
            (Reason.rule("value"), "Rule: value"),
        ],
    )
    def test_str(self, reason: Reason, rendered: str) -> None:
        """Each frame kind renders a stable label."""
        assert str(reason) == rendered

    def test_rule_frames_compare_by_name(self) -> None:
        """Frames are values: equal kind and name means equal frame."""
        assert Reason.rule("a") == Reason(ReasonKind.RULE, "a")
        assert Reason.rule("a") != Reason.rule("b")

    def test_frames_are_immutable(self) -> None:
        """Frames cannot be modified once created."""
        with pytest.raises(AttributeError):
            GUARD.name = "x"  # type: ignore[misc]


class TestFailure:
    """Failure severity and trace accumulation."""

    def test_recoverable_has_no_trace(self) -> None:
        """The shared recoverable failure carries nothing."""
        assert RECOVERABLE.severity is Severity.RECOVERABLE
        assert RECOVERABLE.trace == ()
        assert RECOVERABLE.is_recoverable

    def test_unrecoverable_seeds_trace(self) -> None:
        """unrecoverable() starts a one-frame trace at a position."""
        failure = Failure.unrecoverable(GUARD, 3)

        assert failure.severity is Severity.UNRECOVERABLE
        assert failure.trace == (GUARD,)
        assert failure.position == 3
        assert not failure.is_recoverable

    def test_with_frame_appends_without_mutating(self) -> None:
        """with_frame() returns a new failure; the original keeps its trace."""
        inner = Failure.unrecoverable(GUARD, 0)
        outer = inner.with_frame(Reason.rule("a")).with_frame(ALTERNATIVE)

        assert inner.trace == (GUARD,)
        assert outer.trace == (GUARD, Reason.rule("a"), ALTERNATIVE)
        assert outer.position == 0

    def test_str(self) -> None:
        """Failures render their severity and frames."""
        failure = Failure.unrecoverable(GUARD).with_frame(Reason.rule("a"))

        assert str(RECOVERABLE) == "Recoverable"
        assert str(failure) == "Unrecoverable: Guard\nRule: a"


class TestPredicates:
    """Outcome classification helpers."""

    def test_success(self) -> None:
        """Success is neither kind of failure."""
        outcome = Success(1)

        assert is_success(outcome)
        assert not is_recoverable(outcome)
        assert not is_unrecoverable(outcome)

    def test_failures(self) -> None:
        """Severity decides which predicate holds."""
        fatal = Failure.unrecoverable(ORIGIN)

        assert is_recoverable(RECOVERABLE)
        assert not is_unrecoverable(RECOVERABLE)
        assert is_unrecoverable(fatal)
        assert not is_success(fatal)

    def test_format_trace_separator(self) -> None:
        """format_trace() joins frames innermost-first."""
        trace = (END_OF_INPUT, Reason.rule("b"), Reason.rule("a"))

        assert format_trace(trace, " <- ") == "End <- Rule: b <- Rule: a"
