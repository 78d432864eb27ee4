"""Smoke test for the bundled quickstart example."""

from __future__ import annotations

import runpy
from pathlib import Path

import pytest

QUICKSTART = Path(__file__).resolve().parents[1] / "examples" / "quickstart.py"


class TestQuickstart:
    """examples/quickstart.py runs end to end."""

    def test_runs(self, capsys: pytest.CaptureFixture[str]) -> None:
        """All three examples print their results."""
        runpy.run_path(str(QUICKSTART), run_name="__main__")

        output = capsys.readouterr().out
        assert "1+2*3 = 7" in output
        assert "(1+2)*3 = 9" in output
        assert "100/(2+3)-1 = 19" in output
        assert "= trace: Rule: close <- Alternative <- Rule: first" in output
        assert "{'x': 1, 'y': 2}" in output
