"""Shared constants for commitparse.

Centralized configuration defaults used by the cursor, the combinators and
the top-level parser. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for recursive grammars
- Input limits: Size constraints on materialized input buffers

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "DEPTH_RESERVE_FRAMES",
    # Input limits
    "MAX_INPUT_SIZE",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of lazy (recursive) rule entries within one parse.
# Each nesting level costs several interpreter frames (rule, step, combinator),
# so the limit stays well below the default recursion limit of 1000.
MAX_DEPTH: int = 100

# Frames kept free below sys.getrecursionlimit() when clamping MAX_DEPTH.
DEPTH_RESERVE_FRAMES: int = 50

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum number of items accepted by GrammarParser before parsing starts.
# 10 million items (characters, tokens or bytes). Set to 0 to disable.
MAX_INPUT_SIZE: int = 10_000_000
