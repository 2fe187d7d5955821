# test_main.py

import math
import os

import pytest

from exprcalc import main
from exprcalc.config import DEFAULT_PROMPT, Settings, load_settings
from exprcalc.diagnostics import ErrorKind
from exprcalc.errors import CalculatorError, EmptyExpressionError, InvalidExpressionError
from exprcalc.main import (
    HELP_TEXT,
    REPL,
    check_expression,
    describe_expression,
    evaluate_expression,
    format_result,
)


class FakeSession:
    """Stands in for PromptSession: returns scripted lines, raising exception items."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        if not self.lines:
            raise EOFError()
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


@pytest.fixture
def settings(tmp_path):
    return Settings(log_level="WARNING", history_file=str(tmp_path / "history"), prompt=DEFAULT_PROMPT)


# ---------------------------
# Core boundary
# ---------------------------

def test_evaluate_expression_returns_value():
    assert evaluate_expression("2+3*4") == 14


def test_evaluate_expression_rejects_empty():
    with pytest.raises(EmptyExpressionError):
        evaluate_expression("")


def test_evaluate_expression_rejects_invalid_with_diagnostics():
    with pytest.raises(InvalidExpressionError) as e:
        evaluate_expression("2+3)")
    assert isinstance(e.value, CalculatorError)
    assert [(d.kind, d.position) for d in e.value.diagnostics] == [
        (ErrorKind.OPEN_PARENTHESIS_REQUIRED, 4)
    ]
    assert str(e.value) == "Open parenthesis for [4] required!"


@pytest.mark.parametrize("value, text", [
    (14, "14"),
    (1.0, "1"),
    (3.5, "3.5"),
    (-0.25, "-0.25"),
    (math.inf, "inf"),
    (-math.inf, "-inf"),
    (math.nan, "nan"),
])
def test_format_result(value, text):
    assert format_result(value) == text


def test_check_expression():
    assert check_expression("2+3") == (True, "OK")
    ok, out = check_expression("2+")
    assert not ok
    assert out == "Invalid expression:\n  - Operand required at position [3]!"


def test_check_and_describe_reject_empty_expression():
    assert check_expression("") == (False, "Error: Expression is empty")
    assert describe_expression("") == (False, "Error: Expression is empty")


def test_describe_expression():
    assert describe_expression("2+3*4") == (True, "[2, +, [3, *, 4]]")
    assert describe_expression("-(2-3)") == (True, "[[-2, +, 3]]")
    ok, out = describe_expression("()")
    assert not ok and "Operand required at position [3]!" in out


# ---------------------------
# REPL
# ---------------------------

def test_evaluate_line_results(settings):
    repl = REPL(settings)
    assert repl.evaluate_line("2+3*4") == (True, "14")
    assert repl.evaluate_line("7/2") == (True, "3.5")
    assert repl.evaluate_line("8/4/2") == (True, "1")
    assert repl.evaluate_line("1/0") == (True, "inf")


def test_evaluate_line_reports_all_diagnostics(settings):
    repl = REPL(settings)
    ok, out = repl.evaluate_line("2#3)")
    assert not ok
    assert out.splitlines() == [
        "Invalid expression:",
        "  - Unresolved symbol detected at [2]",
        "  - Open parenthesis for [4] required!",
    ]


def test_evaluate_line_empty(settings):
    ok, out = REPL(settings).evaluate_line("")
    assert not ok and out == "Error: Expression is empty"


def test_evaluate_line_reports_surrounding_whitespace(settings):
    ok, out = REPL(settings).evaluate_line(" 2+3")
    assert not ok
    assert out.splitlines() == ["Invalid expression:", "  - Unresolved symbol detected at [1]"]
    assert REPL(settings).evaluate_line(" 2+3") == check_expression(" 2+3")


def test_evaluate_line_help(settings):
    ok, out = REPL(settings).evaluate_line("HELP")
    assert ok
    assert out == HELP_TEXT.strip()
    assert "Expression Calculator Help" in out


def test_repl_does_not_open_a_session_until_run(settings):
    repl = REPL(settings)
    assert repl.session is None


def test_repl_run_loop(settings, capsys):
    session = FakeSession(["2+2", "", KeyboardInterrupt(), "(2+", "help", "quit", "3*3"])
    REPL(settings, session=session).run()
    out = capsys.readouterr().out
    assert "4\n" in out
    assert "^C" in out
    assert "Closing parenthesis for [1] required!" in out
    assert "Expression Calculator Help" in out
    assert out.rstrip().endswith("Goodbye!")
    assert "9" not in out
    assert session.prompts == [DEFAULT_PROMPT] * 6


def test_repl_run_stops_on_eof(settings, capsys):
    REPL(settings, session=FakeSession(["1+1"])).run()
    out = capsys.readouterr().out
    assert "2\n" in out
    assert "Goodbye!" in out


# ---------------------------
# Entry point
# ---------------------------

@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("EXPRCALC_HISTORY_FILE", str(tmp_path / "history"))
    monkeypatch.delenv("EXPRCALC_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EXPRCALC_PROMPT", raising=False)
    monkeypatch.setattr(main, "configure_logging", lambda level: None)


def test_main_evaluates_expression(isolated_env, capsys):
    assert main.main(["2+3*4"]) == 0
    assert capsys.readouterr().out == "14\n"


def test_main_invalid_expression_exit_code(isolated_env, capsys):
    assert main.main(["2+"]) == 1
    assert "Operand required at position [3]!" in capsys.readouterr().out


def test_main_check_mode(isolated_env, capsys):
    assert main.main(["--check", "(2+3)*4"]) == 0
    assert capsys.readouterr().out == "OK\n"
    assert main.main(["--check", "(2+3"]) == 1
    assert "Closing parenthesis for [1] required!" in capsys.readouterr().out


def test_main_tree_mode(isolated_env, capsys):
    assert main.main(["--tree", "2+3*4"]) == 0
    assert capsys.readouterr().out == "[2, +, [3, *, 4]]\n"


def test_main_empty_expression_fails_in_every_mode(isolated_env, capsys):
    for argv in ([""], ["--check", ""], ["--tree", ""]):
        assert main.main(argv) == 1
        assert capsys.readouterr().out == "Error: Expression is empty\n"


def test_main_does_not_strip_one_shot_expression(isolated_env, capsys):
    assert main.main([" 2+3"]) == 1
    evaluated = capsys.readouterr().out
    assert main.main(["--check", " 2+3"]) == 1
    assert capsys.readouterr().out == evaluated
    assert "Unresolved symbol detected at [1]" in evaluated


def test_main_mode_without_expression(isolated_env, capsys):
    assert main.main(["--check"]) == 2
    assert "required" in capsys.readouterr().err


def test_main_without_expression_starts_repl(isolated_env, monkeypatch):
    calls = []
    monkeypatch.setattr(REPL, "run", lambda self: calls.append(self.settings))
    assert main.main([]) == 0
    assert len(calls) == 1


def test_main_rejects_conflicting_modes(isolated_env):
    with pytest.raises(SystemExit):
        main.main(["--check", "--tree", "1"])


# ---------------------------
# Configuration
# ---------------------------

def test_load_settings_defaults(isolated_env, monkeypatch):
    monkeypatch.delenv("EXPRCALC_HISTORY_FILE")
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.history_file == os.path.expanduser("~/.exprcalc_history")


def test_load_settings_from_environment(isolated_env, monkeypatch):
    monkeypatch.setenv("EXPRCALC_LOG_LEVEL", "debug")
    monkeypatch.setenv("EXPRCALC_PROMPT", "calc> ")
    monkeypatch.setenv("EXPRCALC_HISTORY_FILE", "~/calc_history")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.prompt == "calc> "
    assert settings.history_file == os.path.expanduser("~/calc_history")


def test_load_settings_reads_dotenv(isolated_env, monkeypatch, tmp_path):
    # load_dotenv writes to os.environ; let monkeypatch restore it.
    monkeypatch.setenv("EXPRCALC_PROMPT", "placeholder")
    monkeypatch.delenv("EXPRCALC_PROMPT")
    (tmp_path / ".env").write_text("EXPRCALC_PROMPT=dotenv> \n")
    settings = load_settings()
    assert settings.prompt == "dotenv>"
