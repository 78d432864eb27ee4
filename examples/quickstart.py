"""Quickstart - Building Grammars with commitparse.

Demonstrates:
1. A character-level arithmetic grammar with recursion and commit points
2. Reading the trace of an unrecoverable failure
3. Parsing a stream of lexer tokens instead of characters

Python 3.13+.
"""

from __future__ import annotations

from commitparse import (
    NO_MATCH,
    GrammarParser,
    Parser,
    UnrecoverableParseError,
    alt,
    item,
    lazy,
    one_of,
    sequence,
    token,
    transform,
    zero_or_more,
)
from commitparse.diagnostics import DiagnosticFormatter, OutputFormat

DIGITS = "0123456789"

digit = one_of(DIGITS)

number = (
    sequence("number")
    .bind("first", digit)
    .many("rest", digit)
    .select(lambda b: int(b.first + "".join(b.rest)))
)

# expr   = term (("+" | "-") term)*
# term   = factor (("*" | "/") factor)*
# factor = number | "(" expr ")"
expr = lazy(lambda: _expr)

parenthesized = (
    sequence("parenthesized")
    .bind("open", item("("))
    .commit("inner", expr)
    .commit("close", item(")"))
    .select(lambda b: b.inner)
)

factor = alt(number, parenthesized)


def _fold(first: int, rest: list[tuple[str, int]]) -> int:
    total = first
    for op, value in rest:
        match op:
            case "+":
                total += value
            case "-":
                total -= value
            case "*":
                total *= value
            case "/":
                total //= value
    return total


def _operation(ops: str, operand: Parser[str, int]) -> Parser[str, tuple[str, int]]:
    return (
        sequence()
        .bind("op", one_of(ops))
        .commit("operand", operand)
        .select(lambda b: (b.op, b.operand))
    )


term = (
    sequence("term")
    .bind("first", factor)
    .many("rest", _operation("*/", factor))
    .select(lambda b: _fold(b.first, b.rest))
)

_expr = (
    sequence("expr")
    .bind("first", term)
    .many("rest", _operation("+-", term))
    .select(lambda b: _fold(b.first, b.rest))
)

calculator = GrammarParser(
    sequence("calculation").bind("value", expr).require_end().select(lambda b: b.value)
)


def example_1_arithmetic() -> None:
    """Evaluate expressions while parsing."""
    print("=" * 60)
    print("Example 1: Arithmetic")
    print("=" * 60)

    for source in ("1+2*3", "(1+2)*3", "100/(2+3)-1"):
        print(f"{source} = {calculator.parse(source)}")


def example_2_traces() -> None:
    """Show where a committed parse failed."""
    print("\n" + "=" * 60)
    print("Example 2: Failure traces")
    print("=" * 60)

    formatter = DiagnosticFormatter(output_format=OutputFormat.RUST)
    for source in ("(1+2", "1+", "12)"):
        try:
            calculator.parse(source)
        except UnrecoverableParseError as e:
            print(f"\n{source!r}:")
            if e.diagnostic is not None:
                print(formatter.format(e.diagnostic))


def example_3_tokens() -> None:
    """Parse (kind, text) tokens produced by some external lexer."""
    print("\n" + "=" * 60)
    print("Example 3: Token streams")
    print("=" * 60)

    def kind(expected: str) -> Parser[tuple[str, str], str]:
        return token(lambda tok: tok[1] if tok[0] == expected else NO_MATCH)

    assignment = (
        sequence("assignment")
        .bind("name", kind("NAME"))
        .bind("_eq", kind("EQUALS"))
        .commit("value", transform(kind("NUMBER"), int))
        .select(lambda b: (b.name, b.value))
    )
    program = GrammarParser(zero_or_more(assignment), require_end=True)

    tokens = [
        ("NAME", "x"), ("EQUALS", "="), ("NUMBER", "1"),
        ("NAME", "y"), ("EQUALS", "="), ("NUMBER", "2"),
    ]
    print(dict(program.parse(tokens)))


def main() -> None:
    """Run all quickstart examples."""
    example_1_arithmetic()
    example_2_traces()
    example_3_tokens()

    print("\n" + "=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
