"""Tests for DepthGuard and depth_clamp."""

from __future__ import annotations

import logging
import sys

import pytest

from commitparse.constants import DEPTH_RESERVE_FRAMES, MAX_DEPTH
from commitparse.core import DepthGuard, depth_clamp
from commitparse.diagnostics import DepthLimitExceededError, DiagnosticCode


class TestDepthGuard:
    """Context manager depth accounting."""

    def test_default_limit(self) -> None:
        """Defaults to MAX_DEPTH."""
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.current_depth == 0

    def test_enter_exit(self) -> None:
        """Nested entries increment and exits decrement."""
        guard = DepthGuard(max_depth=3)

        with guard:
            assert guard.current_depth == 1
            with guard:
                assert guard.current_depth == 2
        assert guard.current_depth == 0

    def test_limit_raises(self) -> None:
        """Entering beyond max_depth raises with a diagnostic."""
        guard = DepthGuard(max_depth=2)

        with guard, guard, pytest.raises(DepthLimitExceededError) as exc_info:
            guard.__enter__()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.MAX_DEPTH_EXCEEDED

    def test_failed_entry_does_not_leak_depth(self) -> None:
        """A rejected entry leaves the depth unchanged."""
        guard = DepthGuard(max_depth=1)

        with guard:
            with pytest.raises(DepthLimitExceededError):
                guard.__enter__()
            assert guard.current_depth == 1
        assert guard.current_depth == 0

    def test_exit_on_exception(self) -> None:
        """Depth is released when the body raises."""
        guard = DepthGuard(max_depth=5)

        with pytest.raises(KeyError), guard:
            raise KeyError("x")

        assert guard.current_depth == 0

    def test_reentry_after_release(self) -> None:
        """A released level can be entered again."""
        guard = DepthGuard(max_depth=1)

        with guard:
            pass
        with guard:
            assert guard.current_depth == 1


class TestDepthClamp:
    """Clamping against the interpreter recursion limit."""

    def test_within_limit(self) -> None:
        """Small depths are returned unchanged."""
        assert depth_clamp(10) == 10

    def test_clamps_and_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Depths beyond the recursion limit are clamped with a warning."""
        monkeypatch.setattr(sys, "getrecursionlimit", lambda: 200)

        with caplog.at_level(logging.WARNING, logger="commitparse.core.depth_guard"):
            result = depth_clamp(500)

        assert result == 200 - DEPTH_RESERVE_FRAMES
        assert "Clamping to 150" in caplog.text

    def test_guard_clamps_on_construction(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """DepthGuard applies the clamp to its max_depth."""
        monkeypatch.setattr(sys, "getrecursionlimit", lambda: 120)

        assert DepthGuard(max_depth=1000).max_depth == 120 - DEPTH_RESERVE_FRAMES
