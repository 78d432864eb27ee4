"""Top-level parse invocation.

This module provides GrammarParser, which owns everything that happens once
per parse rather than once per combinator: building the cursor, enforcing
input and nesting limits, and turning a final Outcome into either a value or
an exception carrying a structured diagnostic.

Architecture:
    Rules and combinators (:mod:`~commitparse.syntax.parser.sequence`,
    :mod:`~commitparse.syntax.parser.combinators`,
    :mod:`~commitparse.syntax.parser.primitives`) are plain callables from
    :class:`~commitparse.syntax.cursor.Cursor` to
    :data:`~commitparse.syntax.outcome.Outcome`. They hold no state between
    calls, so one GrammarParser may be reused for any number of inputs.

Security:
    Includes configurable input size limit and nesting depth limit to keep
    adversarial input from exhausting memory or the interpreter stack.
"""

import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import islice

from commitparse.constants import MAX_DEPTH, MAX_INPUT_SIZE
from commitparse.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    ErrorTemplate,
    NoMatchError,
    SourceSpan,
    TrailingInputError,
    UnrecoverableParseError,
)
from commitparse.syntax.cursor import Cursor
from commitparse.syntax.outcome import Failure, Outcome, Parser, Success, format_trace

__all__ = ["GrammarParser", "ParseReport", "parse"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParseReport[T, R]:
    """Result of one GrammarParser.run() call.

    Attributes:
        outcome: What the rule returned
        cursor: The cursor after the rule returned (its position is final)
    """

    outcome: Outcome[R]
    cursor: Cursor[T]

    @property
    def ok(self) -> bool:
        """True if the rule succeeded."""
        return isinstance(self.outcome, Success)

    def span(self) -> SourceSpan:
        """Location of the failure origin, or of the final cursor position."""
        position = self.cursor.pos
        if isinstance(self.outcome, Failure) and self.outcome.position is not None:
            position = self.outcome.position
        located = Cursor(self.cursor.source, position, self.cursor.depth_guard)
        line, column = located.compute_line_col()
        end = min(position + 1, len(self.cursor.source))
        return SourceSpan(start=position, end=max(end, position), line=line, column=column)

    def diagnostic(self) -> Diagnostic | None:
        """Structured description of the failure, or None on success."""
        match self.outcome:
            case Success():
                return None
            case Failure() as failure if failure.is_recoverable:
                return ErrorTemplate.no_match(self.span())
            case Failure() as failure:
                return ErrorTemplate.unrecoverable_failure(failure.trace, self.span())


class GrammarParser[T, R]:
    """Runs a rule over complete inputs.

    Design:
    - One cursor per run(); nothing survives between runs
    - run() never raises for bad input; parse() raises on any failure
    - Error messages include line:column for text inputs

    Security:
    - Configurable max_input_size rejects oversized inputs before parsing
    - Configurable max_nesting_depth bounds lazy (recursive) rule nesting

    Attributes:
        rule: Top-level parser
        max_input_size: Maximum number of input items (default: 10 million)
        max_nesting_depth: Maximum lazy rule nesting depth (default: 100)
        require_end: parse() rejects input left over after a success
    """

    __slots__ = ("_max_input_size", "_max_nesting_depth", "_require_end", "_rule")

    def __init__(
        self,
        rule: Parser[T, R],
        *,
        max_input_size: int | None = None,
        max_nesting_depth: int | None = None,
        require_end: bool = False,
    ) -> None:
        """Initialize parser with optional size and nesting depth limits.

        Args:
            rule: Top-level parser
            max_input_size: Maximum input items (default: MAX_INPUT_SIZE).
                            Set to 0 to disable the limit (not recommended).
            max_nesting_depth: Maximum lazy rule nesting (default: MAX_DEPTH).
            require_end: Make parse() raise TrailingInputError on leftover input
        """
        self._rule = rule
        self._max_input_size = (
            max_input_size if max_input_size is not None else MAX_INPUT_SIZE
        )
        self._max_nesting_depth = (
            max_nesting_depth if max_nesting_depth is not None else MAX_DEPTH
        )
        self._require_end = require_end

    @property
    def rule(self) -> Parser[T, R]:
        """Top-level parser."""
        return self._rule

    @property
    def max_input_size(self) -> int:
        """Maximum allowed input size in items."""
        return self._max_input_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum allowed lazy rule nesting depth."""
        return self._max_nesting_depth

    @property
    def require_end(self) -> bool:
        """Whether parse() rejects leftover input."""
        return self._require_end

    def run(self, source: Iterable[T]) -> ParseReport[T, R]:
        """Apply the rule to source and report what happened.

        Args:
            source: Input items; non-sequence iterables are drained once, and
                never beyond max_input_size + 1 items

        Returns:
            ParseReport with the outcome and the final cursor

        Raises:
            ValueError: If source exceeds max_input_size
            DepthLimitExceededError: If nesting exceeds max_nesting_depth or
                the interpreter stack
            RepetitionStalledError: If the grammar repeats a parser that
                matches without consuming input
        """
        if self._max_input_size > 0 and not isinstance(source, Sequence):
            # Streams are read no further than one item past the limit.
            source = tuple(islice(source, self._max_input_size + 1))
            if len(source) > self._max_input_size:
                raise ValueError(ErrorTemplate.stream_too_large(self._max_input_size).message)

        cursor = Cursor.from_iterable(source, max_depth=self._max_nesting_depth)
        size = len(cursor.source)
        if self._max_input_size > 0 and size > self._max_input_size:
            raise ValueError(ErrorTemplate.input_too_large(size, self._max_input_size).message)

        logger.debug("Parsing %d item(s) with %r", size, self._rule)
        try:
            outcome = self._rule(cursor)
        except RecursionError as e:
            raise DepthLimitExceededError(
                ErrorTemplate.recursion_limit_exceeded(sys.getrecursionlimit())
            ) from e

        if isinstance(outcome, Failure) and not outcome.is_recoverable:
            logger.debug(
                "Unrecoverable failure at position %s: %s",
                outcome.position,
                format_trace(outcome.trace, " <- "),
            )
        else:
            logger.debug("Parse finished at position %d: %s", cursor.pos, type(outcome).__name__)
        return ParseReport(outcome, cursor)

    def parse(self, source: Iterable[T]) -> R:
        """Apply the rule to source and return its value.

        Args:
            source: Input items

        Returns:
            The rule's result

        Raises:
            NoMatchError: The rule failed recoverably
            UnrecoverableParseError: The rule failed past a commit point
            TrailingInputError: require_end is set and items remain
            ValueError: If source exceeds max_input_size

        Example:
            >>> parser = GrammarParser(item("y"), require_end=True)
            >>> parser.parse("y")
            'y'
        """
        report = self.run(source)
        match report.outcome:
            case Success(value=value):
                if self._require_end and not report.cursor.is_eof:
                    diagnostic = ErrorTemplate.trailing_input(
                        report.cursor.remaining(), report.span()
                    )
                    raise TrailingInputError(diagnostic, position=report.cursor.pos)
                return value
            case Failure() as failure if failure.is_recoverable:
                raise NoMatchError(
                    ErrorTemplate.no_match(report.span()),
                    failure=failure,
                    position=report.cursor.pos,
                )
            case Failure() as failure:
                raise UnrecoverableParseError(
                    ErrorTemplate.unrecoverable_failure(failure.trace, report.span()),
                    failure=failure,
                    position=report.cursor.pos,
                )


def parse[T, R](
    rule: Parser[T, R],
    source: Iterable[T],
    *,
    max_input_size: int | None = None,
    max_nesting_depth: int | None = None,
    require_end: bool = False,
) -> R:
    """Parse source with rule using a one-off GrammarParser.

    See GrammarParser.parse() for the exceptions raised.
    """
    parser = GrammarParser(
        rule,
        max_input_size=max_input_size,
        max_nesting_depth=max_nesting_depth,
        require_end=require_end,
    )
    return parser.parse(source)
