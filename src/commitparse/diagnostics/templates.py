"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def no_match(span: SourceSpan | None = None) -> Diagnostic:
        """Top-level rule failed recoverably.

        Args:
            span: Location where the rule was attempted

        Returns:
            Diagnostic for NO_MATCH
        """
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH,
            message="Input does not match the grammar",
            span=span,
            hint="No alternative matched; check the input against the top-level rule",
        )

    @staticmethod
    def unrecoverable_failure(
        trace: Iterable[object], span: SourceSpan | None = None
    ) -> Diagnostic:
        """A committed parse failed.

        Args:
            trace: Trace frames, innermost first
            span: Location where the failure originated

        Returns:
            Diagnostic for UNRECOVERABLE_FAILURE
        """
        frames = tuple(str(frame) for frame in trace)
        innermost = frames[0] if frames else "Origin"
        msg = f"Committed parse failed at {innermost}"
        return Diagnostic(
            code=DiagnosticCode.UNRECOVERABLE_FAILURE,
            message=msg,
            span=span,
            hint="The input matched a committed rule but is malformed here",
            resolution_path=frames,
        )

    @staticmethod
    def trailing_input(remaining: int, span: SourceSpan | None = None) -> Diagnostic:
        """Rule succeeded but input remains.

        Args:
            remaining: Number of unconsumed items
            span: Location of the first unconsumed item

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        msg = f"Parse finished with {remaining} unconsumed item(s)"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=msg,
            span=span,
            hint="End the rule with an end-of-input step, or parse the remainder",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of the input.

        Args:
            position: Item offset where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading current, or use next()/peek()",
        )

    @staticmethod
    def input_too_large(size: int, limit: int) -> Diagnostic:
        """Input exceeds the configured size limit.

        Args:
            size: Number of items in the input
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input size ({size:,} items) exceeds maximum ({limit:,} items)"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_input_size in the GrammarParser constructor to increase the limit",
        )

    @staticmethod
    def foreign_snapshot() -> Diagnostic:
        """Snapshot restored into a cursor over a different input.

        Returns:
            Diagnostic for FOREIGN_SNAPSHOT
        """
        return Diagnostic(
            code=DiagnosticCode.FOREIGN_SNAPSHOT,
            message="Cannot restore a snapshot taken from a different input",
            span=None,
            hint="Only restore snapshots taken from the same cursor during the same parse",
        )

    @staticmethod
    def repetition_stalled(position: int) -> Diagnostic:
        """Repeated parser succeeded without consuming input.

        Args:
            position: Item offset where the repetition stalled

        Returns:
            Diagnostic for REPETITION_STALLED
        """
        msg = f"Repeated parser matched without consuming input at position {position}"
        return Diagnostic(
            code=DiagnosticCode.REPETITION_STALLED,
            message=msg,
            span=None,
            hint="A parser under zero_or_more() must consume at least one item on success",
        )

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Maximum rule nesting depth exceeded.

        Args:
            max_depth: Maximum allowed depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum rule nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            span=None,
            hint="Check for left recursion, or raise max_nesting_depth",
        )

    @staticmethod
    def recursion_limit_exceeded(limit: int) -> Diagnostic:
        """Interpreter stack exhausted before any lazy rule limit was reached.

        Args:
            limit: sys.getrecursionlimit() at the time of the failure

        Returns:
            Diagnostic for RECURSION_LIMIT_EXCEEDED
        """
        msg = f"Python recursion limit ({limit}) exceeded while parsing"
        return Diagnostic(
            code=DiagnosticCode.RECURSION_LIMIT_EXCEEDED,
            message=msg,
            span=None,
            hint="Route recursive rules through lazy() so max_nesting_depth applies",
        )

    @staticmethod
    def stream_too_large(limit: int) -> Diagnostic:
        """Streamed input yielded more items than the configured limit.

        Args:
            limit: Configured maximum

        Returns:
            Diagnostic for INPUT_TOO_LARGE
        """
        msg = f"Input stream exceeds maximum ({limit:,} items)"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_input_size in the GrammarParser constructor to increase the limit",
        )
