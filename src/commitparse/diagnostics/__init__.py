"""Diagnostic system for parse failures.

Provides structured error diagnostics with codes, spans, hints and traces.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    CombinatorError,
    DepthLimitExceededError,
    GrammarError,
    NoMatchError,
    ParseFailureError,
    RepetitionStalledError,
    TrailingInputError,
    UnrecoverableParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CombinatorError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "GrammarError",
    "NoMatchError",
    "OutputFormat",
    "ParseFailureError",
    "RepetitionStalledError",
    "SourceSpan",
    "TrailingInputError",
    "UnrecoverableParseError",
]
