"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse failures (outcomes surfaced by GrammarParser.parse)
        2000-2999: Input errors (cursor and input limits)
        3000-3999: Grammar defects and resource limits
    """

    # Parse failures (1000-1999)
    NO_MATCH = 1001
    UNRECOVERABLE_FAILURE = 1002
    TRAILING_INPUT = 1003

    # Input errors (2000-2999)
    UNEXPECTED_EOF = 2001
    INPUT_TOO_LARGE = 2002
    FOREIGN_SNAPSHOT = 2003

    # Grammar defects and resource limits (3000-3999)
    REPETITION_STALLED = 3001
    MAX_DEPTH_EXCEEDED = 3002
    RECURSION_LIMIT_EXCEEDED = 3003


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Input location for error reporting.

    Positions are item offsets into the input sequence. Line and column are
    only meaningful for text inputs; for other item types they describe a
    single logical line (line 1, column = offset + 1).

    Attributes:
        start: Starting item offset (0-indexed)
        end: Ending item offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries everything a caller needs
    to render a parse failure: what went wrong, where, and the chain of rule
    frames the failure crossed on its way out.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Input location (None when no position applies)
        hint: Suggestion for fixing the error
        severity: Error severity level
        resolution_path: Trace frames, innermost first (unrecoverable failures)
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"
    resolution_path: tuple[str, ...] | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[UNRECOVERABLE_FAILURE]: Committed parse failed at Guard
              --> line 1, column 2
              = trace: Guard <- Rule: two <- Rule: one
              = help: The input matched a committed rule but is malformed here

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
