"""Parsing engine package.

Provides the backtracking cursor, the outcome model and the combinators.

Python 3.13+.
"""

from .cursor import Cursor
from .outcome import (
    RECOVERABLE,
    Failure,
    Outcome,
    Parser,
    Reason,
    ReasonKind,
    Severity,
    Success,
    format_trace,
    is_recoverable,
    is_success,
    is_unrecoverable,
)
from .parser import GrammarParser, ParseReport, parse

__all__ = [
    "RECOVERABLE",
    "Cursor",
    "Failure",
    "GrammarParser",
    "Outcome",
    "ParseReport",
    "Parser",
    "Reason",
    "ReasonKind",
    "Severity",
    "Success",
    "format_trace",
    "is_recoverable",
    "is_success",
    "is_unrecoverable",
    "parse",
]
