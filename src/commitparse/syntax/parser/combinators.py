"""Higher-order combinators: choice, commitment, optionality and repetition.

Each combinator takes parsers and returns a parser. Cursor contracts:

- alt: every failed branch is rewound before the next is tried; if all
  branches fail recoverably the cursor is back where the choice started.
- commit: leaves the cursor wherever the committed parser left it.
- optional / zero_or_more: a recoverable failure rewinds to just before
  the failed attempt and ends the combinator successfully.

Unrecoverable failures always propagate. The combinators here add no RULE
frames; naming a step is the job of RuleBuilder bindings.
"""

from collections.abc import Callable

from commitparse.diagnostics import ErrorTemplate, RepetitionStalledError
from commitparse.syntax.cursor import Cursor
from commitparse.syntax.outcome import (
    ALTERNATIVE,
    ORIGIN,
    RECOVERABLE,
    Failure,
    Outcome,
    Parser,
    Success,
)

__all__ = [
    "alt",
    "commit",
    "lazy",
    "optional",
    "transform",
    "zero_or_more",
]


def alt[T, R](*parsers: Parser[T, R]) -> Parser[T, R]:
    """Ordered choice: the first branch to succeed wins.

    A branch that fails unrecoverably ends the choice immediately with an
    ALTERNATIVE frame appended; later branches are never tried.
    """

    def parse_alt(cursor: Cursor[T]) -> Outcome[R]:
        for parser in parsers:
            mark = cursor.snapshot()
            outcome = parser(cursor)
            if isinstance(outcome, Success):
                return outcome
            if not outcome.is_recoverable:
                return outcome.with_frame(ALTERNATIVE)
            cursor.restore(mark)
        return RECOVERABLE

    return parse_alt


def commit[T, R](parser: Parser[T, R]) -> Parser[T, R]:
    """Escalate a recoverable failure of parser to an unrecoverable one.

    The new trace starts with an ORIGIN frame. Inside a rule prefer
    RuleBuilder.commit(), which names the frame after the binding instead.
    """

    def parse_commit(cursor: Cursor[T]) -> Outcome[R]:
        outcome = parser(cursor)
        if isinstance(outcome, Failure) and outcome.is_recoverable:
            return Failure.unrecoverable(ORIGIN, cursor.pos)
        return outcome

    return parse_commit


def optional[T, R](parser: Parser[T, R]) -> Parser[T, R | None]:
    """Try parser; a recoverable failure becomes Success(None)."""

    def parse_optional(cursor: Cursor[T]) -> Outcome[R | None]:
        mark = cursor.snapshot()
        outcome = parser(cursor)
        if isinstance(outcome, Failure) and outcome.is_recoverable:
            cursor.restore(mark)
            return Success(None)
        return outcome

    return parse_optional


def zero_or_more[T, R](parser: Parser[T, R]) -> Parser[T, list[R]]:
    """Apply parser greedily until it fails, collecting the results.

    Zero matches is a success with an empty list. An unrecoverable failure
    discards the partial results and propagates with the cursor where the
    failing attempt left it.

    Raises:
        RepetitionStalledError: If parser succeeds without consuming input
    """

    def parse_zero_or_more(cursor: Cursor[T]) -> Outcome[list[R]]:
        results: list[R] = []
        while True:
            mark = cursor.snapshot()
            outcome = parser(cursor)
            if isinstance(outcome, Success):
                if cursor.pos == mark.pos:
                    raise RepetitionStalledError(ErrorTemplate.repetition_stalled(cursor.pos))
                results.append(outcome.value)
                continue
            if not outcome.is_recoverable:
                return outcome
            cursor.restore(mark)
            return Success(results)

    return parse_zero_or_more


def transform[T, R, S](parser: Parser[T, R], function: Callable[[R], S]) -> Parser[T, S]:
    """Project a successful result through function."""

    def parse_transform(cursor: Cursor[T]) -> Outcome[S]:
        outcome = parser(cursor)
        if isinstance(outcome, Success):
            return Success(function(outcome.value))
        return outcome

    return parse_transform


def lazy[T, R](factory: Callable[[], Parser[T, R]]) -> Parser[T, R]:
    """Defer building a parser until it is first used.

    Lets a rule refer to itself or to rules defined later in the module:

        expr = lazy(lambda: alt(parenthesized, number))

    Each entry counts against the cursor's depth guard.

    Raises:
        DepthLimitExceededError: If nesting exceeds the cursor's max_depth
    """
    resolved: list[Parser[T, R]] = []

    def parse_lazy(cursor: Cursor[T]) -> Outcome[R]:
        if not resolved:
            resolved.append(factory())
        with cursor.depth_guard:
            return resolved[0](cursor)

    return parse_lazy
