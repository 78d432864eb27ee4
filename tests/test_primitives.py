"""Tests for primitive parsers."""

from __future__ import annotations

from hypothesis import event, given
from hypothesis import strategies as st

from commitparse import (
    NO_MATCH,
    RECOVERABLE,
    Cursor,
    Failure,
    Success,
    any_item,
    end_of_input,
    fail,
    guard,
    item,
    one_of,
    pure,
    satisfy,
    token,
)
from commitparse.syntax.outcome import END_OF_INPUT, GUARD, ORIGIN

# ============================================================================
# TOKEN PRIMITIVES
# ============================================================================


def _digit(ch: str) -> int | object:
    match ch:
        case "0" | "1" | "2" | "3" | "4" | "5" | "6" | "7" | "8" | "9":
            return int(ch)
        case _:
            return NO_MATCH


class TestToken:
    """token(): consume one item and transform it."""

    def test_transform_applies(self) -> None:
        """Matching item is consumed and converted."""
        cursor = Cursor("7x")

        assert token(_digit)(cursor) == Success(7)
        assert cursor.pos == 1

    def test_no_match_does_not_consume(self) -> None:
        """Rejected item stays in the input."""
        cursor = Cursor("x7")

        assert token(_digit)(cursor) is RECOVERABLE
        assert cursor.pos == 0

    def test_exhausted_input(self) -> None:
        """End of input is a recoverable failure."""
        cursor = Cursor("")

        assert token(_digit)(cursor) is RECOVERABLE

    def test_transform_may_return_none(self) -> None:
        """None is a legitimate value; only NO_MATCH rejects."""
        cursor = Cursor([4, None])
        parse_none = token(lambda value: None if value == 4 else NO_MATCH)

        assert parse_none(cursor) == Success(None)
        assert cursor.pos == 1

    def test_pattern_over_structured_items(self) -> None:
        """Transforms can destructure non-text items."""

        def plus_one(value: object) -> object:
            match value:
                case ("some", int(x)):
                    return x + 1
                case _:
                    return NO_MATCH

        cursor = Cursor([("some", 4)])

        assert token(plus_one)(cursor) == Success(5)


class TestSatisfy:
    """satisfy() and its specializations."""

    def test_item_matches_equal(self) -> None:
        """item() consumes an equal item."""
        cursor = Cursor("yz")

        assert item("y")(cursor) == Success("y")
        assert cursor.pos == 1

    def test_item_mismatch(self) -> None:
        """item() leaves a different item in place."""
        cursor = Cursor("zy")

        assert item("y")(cursor) is RECOVERABLE
        assert cursor.pos == 0

    def test_one_of(self) -> None:
        """one_of() accepts any listed item."""
        parser = one_of("yz")

        assert parser(Cursor("z")) == Success("z")
        assert parser(Cursor("_")) is RECOVERABLE

    def test_any_item(self) -> None:
        """any_item() fails only at end of input."""
        assert any_item()(Cursor("_")) == Success("_")
        assert any_item()(Cursor("")) is RECOVERABLE

    def test_satisfy_predicate(self) -> None:
        """satisfy() tests the item with a predicate."""
        parser = satisfy(str.isdigit)

        assert parser(Cursor("5")) == Success("5")
        assert parser(Cursor("a")) is RECOVERABLE

    @given(st.text(max_size=10), st.characters())
    def test_token_primitives_never_consume_on_failure(self, source: str, expected: str) -> None:
        """Property: a failed token primitive leaves the cursor where it was."""
        cursor = Cursor(source)
        outcome = item(expected)(cursor)
        event(f"outcome={type(outcome).__name__}")

        if isinstance(outcome, Failure):
            assert outcome.is_recoverable
            assert cursor.pos == 0
        else:
            assert cursor.pos == 1


# ============================================================================
# NON-CONSUMING PRIMITIVES
# ============================================================================


class TestEndOfInput:
    """end_of_input(): soft and fatal forms."""

    def test_succeeds_at_end(self) -> None:
        """Empty remainder matches."""
        assert end_of_input()(Cursor("y", 1)) == Success(None)

    def test_soft_failure(self) -> None:
        """Remaining item fails recoverably without consuming it."""
        cursor = Cursor("ye", 1)

        assert end_of_input()(cursor) is RECOVERABLE
        assert cursor.pos == 1

    def test_fatal_failure(self) -> None:
        """Fatal form reports END_OF_INPUT and leaves the item unconsumed."""
        cursor = Cursor("ye", 1)
        outcome = end_of_input(fatal=True)(cursor)

        assert outcome == Failure.unrecoverable(END_OF_INPUT, 1)
        assert cursor.next() == "e"


class TestGuard:
    """guard(): zero-argument conditions."""

    def test_true(self) -> None:
        """True condition succeeds."""
        assert guard(lambda: True)(Cursor("")) == Success(None)

    def test_soft_false(self) -> None:
        """False condition fails recoverably."""
        assert guard(lambda: False)(Cursor("")) is RECOVERABLE

    def test_fatal_false(self) -> None:
        """Fatal guard seeds a GUARD frame."""
        outcome = guard(lambda: False, fatal=True)(Cursor("ab", 1))

        assert outcome == Failure.unrecoverable(GUARD, 1)


class TestPureAndFail:
    """pure() and fail()."""

    def test_pure(self) -> None:
        """pure() succeeds with its value and consumes nothing."""
        cursor = Cursor("y")

        assert pure(42)(cursor) == Success(42)
        assert cursor.pos == 0

    def test_fail_soft(self) -> None:
        """fail() is always recoverable."""
        assert fail()(Cursor("y")) is RECOVERABLE

    def test_fail_fatal(self) -> None:
        """fail(fatal=True) seeds an ORIGIN frame."""
        assert fail(fatal=True)(Cursor("y")) == Failure.unrecoverable(ORIGIN, 0)
