"""Tests for the command-line entry point."""

from __future__ import annotations

import io

import pytest

from bayes_calculator.cli import create_parser, main, run_session
from bayes_calculator.config import (
    DESCRIPTION_PROMPT,
    EVIDENCE_PROMPT,
    EXIT_INPUT_CLOSED,
    EXIT_OK,
    LIKELIHOOD_PROMPT,
    PRIOR_PROMPT,
)
from bayes_calculator.prompt import scripted_lines
from bayes_calculator.report import render_intro, render_pipeline_diagram

COIN_SESSION = ["coin\n", "50\n", "50\n", "50\n"]


def _feed_stdin(monkeypatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


# ---------------------------------------------------------------------------
# run_session
# ---------------------------------------------------------------------------


class TestRunSession:
    """Tests for the prompt-compute-report sequence."""

    def test_prompts_in_order(self):
        """Description, prior, likelihood, then evidence."""
        output = []
        run_session(scripted_lines(COIN_SESSION), output.append, show_intro=False)

        prompts = [DESCRIPTION_PROMPT, PRIOR_PROMPT, LIKELIHOOD_PROMPT, EVIDENCE_PROMPT]
        positions = [output.index(p) for p in prompts]
        assert positions == sorted(positions)

    def test_intro_shown_by_default(self):
        """The welcome text and diagram come first."""
        output = []
        run_session(scripted_lines(COIN_SESSION), output.append)
        assert output[0] == render_intro()
        assert render_pipeline_diagram() in output

    def test_intro_can_be_skipped(self):
        """With show_intro=False the first output is the first prompt."""
        output = []
        run_session(scripted_lines(COIN_SESSION), output.append, show_intro=False)
        assert output[0] == DESCRIPTION_PROMPT
        assert render_intro() not in output

    def test_returns_result(self):
        """The session returns the computed result."""
        result = run_session(
            scripted_lines(["coin\n", "50\n", "80\n", "60\n"]),
            lambda text: None,
        )
        assert result.description == "coin"
        assert result.posterior == pytest.approx(0.5 * 0.8 / 0.6)


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------


class TestMain:
    """Tests for main() exit statuses and output."""

    def test_successful_run(self, monkeypatch, capsys):
        """A full session prints the table and summary and exits 0."""
        _feed_stdin(monkeypatch, "rain\n50%\n80%\n60%\n")

        assert main(["--no-intro"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "| Posterior   | 66.67%" in out
        assert out.rstrip().endswith("the probability for 'rain' is 66.67%")

    def test_retry_then_success(self, monkeypatch, capsys):
        """Bad answers are re-prompted without failing the run."""
        _feed_stdin(monkeypatch, "rain\nabc\n50\n80\n60\n")

        assert main(["--no-intro"]) == EXIT_OK
        assert "Invalid input" in capsys.readouterr().out

    def test_zero_evidence_succeeds(self, monkeypatch, capsys):
        """Zero evidence is not an error."""
        _feed_stdin(monkeypatch, "odd\n50\n70\n0\n")

        assert main(["--no-intro"]) == EXIT_OK
        assert "is nan%" in capsys.readouterr().out

    def test_end_of_input_is_fatal(self, monkeypatch, capsys):
        """Input ending early exits 1 with a diagnostic and no summary."""
        _feed_stdin(monkeypatch, "rain\n50\n")

        assert main(["--no-intro"]) == EXIT_INPUT_CLOSED

        captured = capsys.readouterr()
        assert "ERROR" in captured.err
        assert "end of input" in captured.err
        assert "Based on the information provided" not in captured.out

    def test_empty_input_is_fatal(self, monkeypatch):
        """No input at all exits 1."""
        _feed_stdin(monkeypatch, "")
        assert main([]) == EXIT_INPUT_CLOSED

    def test_undecodable_input_is_fatal(self, monkeypatch, capsys):
        """Invalid UTF-8 on stdin exits 1 instead of raising."""
        stdin = io.TextIOWrapper(io.BytesIO(b"\xff\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)

        assert main(["--no-intro"]) == EXIT_INPUT_CLOSED
        assert "ERROR" in capsys.readouterr().err


class TestParser:
    """Tests for command-line options."""

    def test_defaults(self):
        """Intro on, WARNING logging."""
        args = create_parser().parse_args([])
        assert args.no_intro is False
        assert args.log_level == "WARNING"

    def test_log_level_choice(self):
        """--log-level accepts a named level."""
        args = create_parser().parse_args(["--log-level", "DEBUG"])
        assert args.log_level == "DEBUG"

    def test_invalid_log_level_exits(self):
        """Unknown levels are rejected by argparse with status 2."""
        with pytest.raises(SystemExit) as excinfo:
            create_parser().parse_args(["--log-level", "LOUD"])
        assert excinfo.value.code == 2

    def test_version(self, capsys):
        """--version prints the program name and exits 0."""
        with pytest.raises(SystemExit) as excinfo:
            create_parser().parse_args(["--version"])
        assert excinfo.value.code == 0
        assert "bayes-calculator" in capsys.readouterr().out
