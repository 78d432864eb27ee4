"""Backtracking cursor over an item sequence.

A Cursor is the only mutable object a parse touches. It is a position over a
shared, never-copied buffer; combinators take snapshots before speculative
work and restore them to backtrack.

Design Philosophy:
    - The buffer is shared between a cursor and all of its snapshots
    - snapshot() and restore() are O(1): they copy an integer, not the input
    - Exhaustion is a normal state (is_eof / next() -> None), never an error
    - Items may be of any type: characters, lexer tokens, bytes

Line Ending Support (text inputs only):
    compute_line_col() uses \\n as the line delimiter, so LF and CRLF inputs
    report correct lines. CR-only inputs are reported as a single line.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from commitparse.core import DepthGuard
from commitparse.diagnostics import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(slots=True, eq=False)
class Cursor[T]:
    """Resettable position over a sequence of items.

    Key Design Decisions:
        1. Mutable position - combinators pass one cursor down the call chain
        2. Shared buffer - snapshots never copy the input
        3. Slots - cursors are created for every backtracking point
        4. Depth guard rides along - recursion limits are per parse, not global

    Example:
        >>> cursor = Cursor("yes")
        >>> mark = cursor.snapshot()
        >>> cursor.next()
        'y'
        >>> cursor.pos
        1
        >>> cursor.restore(mark)
        >>> cursor.next()
        'y'
        >>> Cursor("").next() is None
        True
    """

    source: Sequence[T]
    pos: int = 0
    depth_guard: DepthGuard = field(default_factory=DepthGuard)

    @classmethod
    def from_iterable(cls, items: Iterable[T], *, max_depth: int | None = None) -> Cursor[T]:
        """Create a cursor over any iterable.

        Sequences are used as-is; other iterables (generators, lexer token
        streams) are drained once into a tuple so that they can be revisited
        after a restore.

        Args:
            items: Input items
            max_depth: Nesting limit for lazy rules (default: MAX_DEPTH)

        Returns:
            Cursor at position 0
        """
        source = items if isinstance(items, Sequence) else tuple(items)
        guard = DepthGuard() if max_depth is None else DepthGuard(max_depth=max_depth)
        return cls(source, 0, guard)

    @property
    def is_eof(self) -> bool:
        """True once every item has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> T:
        """Get current item without consuming it.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def next(self) -> T | None:
        """Consume and return the next item, or None when exhausted.

        Use is_eof to tell exhaustion apart from a literal None item.
        """
        if self.is_eof:
            return None
        item = self.source[self.pos]
        self.pos += 1
        return item

    def peek(self, offset: int = 0) -> T | None:
        """Look at the item offset positions ahead without consuming it.

        Returns:
            The item, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> None:
        """Move forward by count items, stopping at EOF."""
        self.pos = min(self.pos + count, len(self.source))

    def remaining(self) -> int:
        """Number of unconsumed items."""
        return max(len(self.source) - self.pos, 0)

    def snapshot(self) -> Cursor[T]:
        """Duplicate this cursor.

        The snapshot shares the buffer and the depth guard; only the position
        is independent.
        """
        return Cursor(self.source, self.pos, self.depth_guard)

    def restore(self, snapshot: Cursor[T]) -> None:
        """Rewind (or fast-forward) to a snapshot's position.

        Raises:
            ValueError: If the snapshot belongs to a different input
        """
        if snapshot.source is not self.source:
            raise ValueError(ErrorTemplate.foreign_snapshot().message)
        self.pos = snapshot.pos

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors). Non-text
            inputs are treated as a single line.

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        if not isinstance(self.source, str):
            return (1, self.pos + 1)
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)
