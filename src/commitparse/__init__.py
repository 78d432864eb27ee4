"""commitparse - recursive-descent parser combinators with commit points.

Parsers are plain callables from a Cursor to an Outcome. Combinators build
larger parsers from smaller ones; commit points turn "no match" into "this
is the right rule and the input is broken here", and the resulting failure
carries a trace of every named rule it passed through.

Public API:
    Cursor - Backtracking position over any item sequence
    Success, Failure, Reason - Outcome model and trace frames
    sequence - Build a rule from named binding steps
    alt, commit, optional, zero_or_more, transform, lazy - Combinators
    token, satisfy, item, one_of, any_item - Single-item primitives
    end_of_input, guard, pure, fail - Non-consuming primitives
    GrammarParser, parse - Top-level invocation with limits

Exceptions:
    CombinatorError - Base exception class
    NoMatchError - Input not in the grammar's language
    UnrecoverableParseError - Committed parse failed (carries the trace)
    TrailingInputError - Input left over after a successful parse
    RepetitionStalledError - Grammar repeats a non-consuming parser
    DepthLimitExceededError - Rule nesting too deep

Submodules:
    commitparse.syntax.parser - Combinators, sequences and the runner
    commitparse.diagnostics - Diagnostics, templates and formatter
"""

from .diagnostics import (
    CombinatorError,
    DepthLimitExceededError,
    NoMatchError,
    RepetitionStalledError,
    TrailingInputError,
    UnrecoverableParseError,
)
from .syntax import (
    RECOVERABLE,
    Cursor,
    Failure,
    Outcome,
    Parser,
    Reason,
    ReasonKind,
    Severity,
    Success,
)
from .syntax.parser import (
    NO_MATCH,
    Bindings,
    GrammarParser,
    alt,
    any_item,
    commit,
    end_of_input,
    fail,
    guard,
    item,
    lazy,
    one_of,
    optional,
    parse,
    pure,
    satisfy,
    sequence,
    token,
    transform,
    zero_or_more,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("commitparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "NO_MATCH",
    "RECOVERABLE",
    "Bindings",
    "CombinatorError",
    "Cursor",
    "DepthLimitExceededError",
    "Failure",
    "GrammarParser",
    "NoMatchError",
    "Outcome",
    "Parser",
    "Reason",
    "ReasonKind",
    "RepetitionStalledError",
    "Severity",
    "Success",
    "TrailingInputError",
    "UnrecoverableParseError",
    "__version__",
    "alt",
    "any_item",
    "commit",
    "end_of_input",
    "fail",
    "guard",
    "item",
    "lazy",
    "one_of",
    "optional",
    "parse",
    "pure",
    "satisfy",
    "sequence",
    "token",
    "transform",
    "zero_or_more",
]
