"""Parse outcomes and diagnostic trace frames.

Every parser returns an Outcome: a Success carrying the parsed value, or a
Failure whose severity says whether the caller may backtrack.

    Success(value)                         matched; cursor advanced
    Failure(RECOVERABLE)                   no match; try something else
    Failure(UNRECOVERABLE, trace, pos)     committed and failed; stop

Severity is a field, not a subclass: an unrecoverable failure flows back
through ordinary returns and each enclosing named step appends a Reason to
its trace. Read in order, the trace walks from the failing primitive out to
the top-level rule.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .cursor import Cursor

__all__ = [
    "ALTERNATIVE",
    "END_OF_INPUT",
    "GUARD",
    "ORIGIN",
    "RECOVERABLE",
    "Failure",
    "Outcome",
    "Parser",
    "Reason",
    "ReasonKind",
    "Severity",
    "Success",
    "format_trace",
    "is_recoverable",
    "is_success",
    "is_unrecoverable",
]


class ReasonKind(StrEnum):
    """Kinds of trace frame."""

    ALTERNATIVE = "alternative"  # choice abandoned after a committed branch failed
    GUARD = "guard"  # fatal guard condition was false
    END_OF_INPUT = "end_of_input"  # fatal end-of-input check found an item
    ORIGIN = "origin"  # standalone commit or fatal primitive
    RULE = "rule"  # named sequence binding


_LABELS: dict[ReasonKind, str] = {
    ReasonKind.ALTERNATIVE: "Alternative",
    ReasonKind.GUARD: "Guard",
    ReasonKind.END_OF_INPUT: "End",
    ReasonKind.ORIGIN: "Origin",
}


@dataclass(frozen=True, slots=True)
class Reason:
    """One frame of an unrecoverable failure's trace.

    Attributes:
        kind: What produced the frame
        name: Binding name, for RULE frames only
    """

    kind: ReasonKind
    name: str | None = None

    @classmethod
    def rule(cls, name: str) -> Reason:
        """Frame for a named sequence binding."""
        return cls(ReasonKind.RULE, name)

    def __str__(self) -> str:
        if self.kind is ReasonKind.RULE:
            return f"Rule: {self.name}"
        return _LABELS[self.kind]


ALTERNATIVE = Reason(ReasonKind.ALTERNATIVE)
GUARD = Reason(ReasonKind.GUARD)
END_OF_INPUT = Reason(ReasonKind.END_OF_INPUT)
ORIGIN = Reason(ReasonKind.ORIGIN)


class Severity(StrEnum):
    """Whether a failure permits backtracking."""

    RECOVERABLE = "recoverable"
    UNRECOVERABLE = "unrecoverable"


@dataclass(frozen=True, slots=True)
class Success[R]:
    """Parser matched.

    Attributes:
        value: The parsed result
    """

    value: R


@dataclass(frozen=True, slots=True)
class Failure:
    """Parser did not match.

    Attributes:
        severity: RECOVERABLE lets callers try alternatives; UNRECOVERABLE does not
        trace: Frames appended innermost-first while unwinding (unrecoverable only)
        position: Cursor offset where the unrecoverable failure originated
    """

    severity: Severity
    trace: tuple[Reason, ...] = ()
    position: int | None = None

    @classmethod
    def unrecoverable(cls, reason: Reason, position: int | None = None) -> Failure:
        """Start a new unrecoverable failure whose trace holds only reason."""
        return cls(Severity.UNRECOVERABLE, (reason,), position)

    @property
    def is_recoverable(self) -> bool:
        return self.severity is Severity.RECOVERABLE

    def with_frame(self, reason: Reason) -> Failure:
        """Return this failure with reason appended to its trace."""
        return Failure(self.severity, (*self.trace, reason), self.position)

    def __str__(self) -> str:
        if self.is_recoverable:
            return "Recoverable"
        return f"Unrecoverable: {format_trace(self.trace)}"


RECOVERABLE = Failure(Severity.RECOVERABLE)

type Outcome[R] = Success[R] | Failure

# Any callable taking a cursor over T items and returning an outcome of R.
type Parser[T, R] = Callable[[Cursor[T]], Outcome[R]]


def format_trace(trace: tuple[Reason, ...], separator: str = "\n") -> str:
    """Render trace frames innermost-first, one per line by default."""
    return separator.join(str(reason) for reason in trace)


def is_success(outcome: Outcome[object]) -> bool:
    return isinstance(outcome, Success)


def is_recoverable(outcome: Outcome[object]) -> bool:
    return isinstance(outcome, Failure) and outcome.is_recoverable


def is_unrecoverable(outcome: Outcome[object]) -> bool:
    return isinstance(outcome, Failure) and not outcome.is_recoverable
