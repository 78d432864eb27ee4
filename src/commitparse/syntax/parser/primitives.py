"""Primitive parsers: the base cases of every grammar.

Token primitives consume exactly one item. On mismatch or exhaustion they
rewind to where they started and fail recoverably, so a failed primitive
never consumes input. None of them can fail unrecoverably.

The remaining primitives never consume: end-of-input checks, guards,
constant successes and unconditional failures.
"""

from collections.abc import Callable, Container
from typing import Final

from commitparse.syntax.cursor import Cursor
from commitparse.syntax.outcome import (
    END_OF_INPUT,
    GUARD,
    ORIGIN,
    RECOVERABLE,
    Failure,
    Outcome,
    Parser,
    Success,
)

__all__ = [
    "NO_MATCH",
    "any_item",
    "end_of_input",
    "fail",
    "guard",
    "item",
    "one_of",
    "pure",
    "satisfy",
    "token",
]


class _NoMatch:
    """Sentinel type returned by token transforms to reject an item."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH: Final = _NoMatch()


def token[T, R](transform: Callable[[T], R | _NoMatch]) -> Parser[T, R]:
    """Consume one item and convert it, or reject it.

    The transform sees the item and returns either the parsed value or
    NO_MATCH. A ``match`` statement makes a compact transform:

        def digit(ch: str) -> object:
            match ch:
                case "0" | "1" | "2" | "3" | "4" | "5" | "6" | "7" | "8" | "9":
                    return int(ch)
                case _:
                    return NO_MATCH

        parse_digit = token(digit)

    Args:
        transform: Item -> value, or NO_MATCH to reject

    Returns:
        Parser that succeeds with the transformed item
    """

    def parse_token(cursor: Cursor[T]) -> Outcome[R]:
        if cursor.is_eof:
            return RECOVERABLE
        result = transform(cursor.current)
        if result is NO_MATCH:
            return RECOVERABLE
        cursor.advance()
        return Success(result)  # type: ignore[arg-type]

    return parse_token


def satisfy[T](predicate: Callable[[T], bool]) -> Parser[T, T]:
    """Consume one item for which predicate holds."""

    def parse_satisfy(cursor: Cursor[T]) -> Outcome[T]:
        if cursor.is_eof or not predicate(cursor.current):
            return RECOVERABLE
        value = cursor.current
        cursor.advance()
        return Success(value)

    return parse_satisfy


def item[T](expected: T) -> Parser[T, T]:
    """Consume one item equal to expected."""
    return satisfy(lambda candidate: candidate == expected)


def one_of[T](options: Container[T]) -> Parser[T, T]:
    """Consume one item contained in options."""
    return satisfy(lambda candidate: candidate in options)


def any_item[T]() -> Parser[T, T]:
    """Consume any single item; fails only at end of input."""
    return satisfy(lambda _candidate: True)


def end_of_input[T](*, fatal: bool = False) -> Parser[T, None]:
    """Succeed only when no items remain.

    Soft form fails recoverably. Fatal form fails with an END_OF_INPUT frame.
    Neither consumes the item it found.
    """

    def parse_end(cursor: Cursor[T]) -> Outcome[None]:
        if cursor.is_eof:
            return Success(None)
        if fatal:
            return Failure.unrecoverable(END_OF_INPUT, cursor.pos)
        return RECOVERABLE

    return parse_end


def guard[T](condition: Callable[[], bool], *, fatal: bool = False) -> Parser[T, None]:
    """Succeed without consuming when condition() is true.

    Inside a rule, use RuleBuilder.where()/require() instead: they see the
    bindings and restore the cursor to the start of the sequence.
    """

    def parse_guard(cursor: Cursor[T]) -> Outcome[None]:
        if condition():
            return Success(None)
        if fatal:
            return Failure.unrecoverable(GUARD, cursor.pos)
        return RECOVERABLE

    return parse_guard


def pure[T, R](value: R) -> Parser[T, R]:
    """Succeed with value without consuming."""

    def parse_pure(_cursor: Cursor[T]) -> Outcome[R]:
        return Success(value)

    return parse_pure


def fail[T](*, fatal: bool = False) -> Parser[T, None]:
    """Always fail; the fatal form seeds an ORIGIN frame."""

    def parse_fail(cursor: Cursor[T]) -> Outcome[None]:
        if fatal:
            return Failure.unrecoverable(ORIGIN, cursor.pos)
        return RECOVERABLE

    return parse_fail
