"""Parser combinators.

Module Organization:
- primitives.py: Single-item parsers, end-of-input, guards, pure/fail
- combinators.py: alt, commit, optional, zero_or_more, transform, lazy
- sequence.py: Named-binding sequences (RuleBuilder / Rule / Bindings)
- core.py: GrammarParser and the parse() entry point

Public API:
    GrammarParser: Top-level runner with input and depth limits
    sequence: Start a rule built from named steps
"""

from commitparse.syntax.parser.combinators import (
    alt,
    commit,
    lazy,
    optional,
    transform,
    zero_or_more,
)
from commitparse.syntax.parser.core import GrammarParser, ParseReport, parse
from commitparse.syntax.parser.primitives import (
    NO_MATCH,
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
from commitparse.syntax.parser.sequence import Bindings, Rule, RuleBuilder, sequence

__all__ = [
    "NO_MATCH",
    "Bindings",
    "GrammarParser",
    "ParseReport",
    "Rule",
    "RuleBuilder",
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
