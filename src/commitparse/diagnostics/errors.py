"""Exception hierarchy with structured diagnostics.

Parse outcomes are ordinary return values; these exceptions are raised only
at the edges: by GrammarParser.parse() when a caller asks for a value, and
by the engine when a grammar is defective or a resource limit is crossed.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from commitparse.syntax.outcome import Failure

__all__ = [
    "CombinatorError",
    "DepthLimitExceededError",
    "GrammarError",
    "NoMatchError",
    "ParseFailureError",
    "RepetitionStalledError",
    "TrailingInputError",
    "UnrecoverableParseError",
]


class CombinatorError(Exception):
    """Base exception for all commitparse errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombinatorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailureError(CombinatorError):
    """A top-level parse did not produce a value.

    Attributes:
        failure: The failure outcome returned by the rule, if any
        position: Cursor offset when the parse ended
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        failure: Failure | None = None,
        position: int = 0,
    ) -> None:
        """Initialize ParseFailureError.

        Args:
            message: Error message string OR Diagnostic object
            failure: The failure outcome returned by the rule, if any
            position: Cursor offset when the parse ended
        """
        super().__init__(message)
        self.failure = failure
        self.position = position


class NoMatchError(ParseFailureError):
    """The rule failed recoverably: the input is not in its language."""


class UnrecoverableParseError(ParseFailureError):
    """The rule crossed a commit point and then failed.

    The trace reads innermost-first, from the failing primitive out to the
    top-level rule.
    """

    @property
    def trace(self) -> tuple[str, ...]:
        """Rendered trace frames, innermost first."""
        if self.failure is None:
            return ()
        return tuple(str(reason) for reason in self.failure.trace)


class TrailingInputError(ParseFailureError):
    """The rule succeeded but did not consume the whole input."""


class GrammarError(CombinatorError):
    """The grammar itself is defective (not the input)."""


class RepetitionStalledError(GrammarError):
    """A repeated parser succeeded without consuming input.

    Repeating such a parser would never terminate.
    """


class DepthLimitExceededError(CombinatorError):
    """Maximum rule nesting depth exceeded.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - A left-recursive grammar that never consumes before recursing
    - Legitimately deep nesting beyond the configured limit
    """
