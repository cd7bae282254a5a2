"""
Tests for the CLI flow and its terminal output.

Run with:
    pytest tests/test_display.py -v
    pytest tests/test_display.py -v -s   # see actual terminal output
"""

import re

import pytest

from gemini_commit.cli import main as cli_main
from gemini_commit.cli.args import parse_args
from gemini_commit.config import Config
from gemini_commit.generator import build_prompt
from gemini_commit.llm import MalformedResponseError, ServiceError, TransportError
from gemini_commit.output import print_error, print_message

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def strip_ansi():
    """Return a function that removes ANSI escape codes."""
    def _strip(text: str) -> str:
        return ANSI_RE.sub('', text)
    return _strip


@pytest.fixture
def cli(monkeypatch, fake_client):
    """Patch config, key lookup and client creation; return a runner.

    The runner returns (exit_code, client, get_client kwargs).
    """
    def _run(argv, reply="feat: add thing", error=None, api_key="test-key", config=None):
        client = fake_client(reply, error=error)
        calls = {}

        def _get_client(key, **kwargs):
            calls.update(kwargs, api_key=key)
            return client

        monkeypatch.setattr(cli_main, "load_config", lambda: config or Config())
        monkeypatch.setattr(cli_main, "load_api_key", lambda: api_key)
        monkeypatch.setattr(cli_main, "get_client", _get_client)
        return cli_main.main(argv), client, calls
    return _run


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParseArgs:

    def test_description_and_style(self):
        args = parse_args(["fix the login bug", "-s", "simple"])
        assert args.description == "fix the login bug"
        assert args.style == "simple"

    def test_description_required(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args([])
        assert exc_info.value.code == 2
        assert "DESCRIPTION is required" in capsys.readouterr().err

    def test_subcommands_do_not_need_description(self):
        assert parse_args(["--display-config"]).display_config is True
        assert parse_args(["--setup"]).setup is True

    def test_timeout_must_be_positive(self):
        with pytest.raises(SystemExit):
            parse_args(["x", "--timeout", "0"])


# ---------------------------------------------------------------------------
# Generation flow
# ---------------------------------------------------------------------------

class TestMainFlow:

    def test_success_prints_message(self, cli, capsys, strip_ansi):
        code, client, _ = cli(["add pagination"], reply="feat(api): add pagination")
        out = strip_ansi(capsys.readouterr().out)
        assert code == 0
        assert "\nfeat(api): add pagination\n\n" in out

    def test_prompt_built_from_description_and_style(self, cli):
        _, client, _ = cli(["drop old endpoint", "--style", "gitmoji"])
        assert client.prompts == [build_prompt("drop old endpoint", "gitmoji")]

    def test_style_defaults_to_config(self, cli, monkeypatch):
        monkeypatch.delenv("GCM_STYLE", raising=False)
        _, client, _ = cli(["x"], config=Config(style="simple"))
        assert "in the 'simple' style" in client.prompts[0]

    def test_env_overrides_config(self, cli, monkeypatch):
        monkeypatch.setenv("GCM_STYLE", "detailed")
        monkeypatch.setenv("GCM_MODEL", "gemini-2.5-pro")
        _, client, calls = cli(["x"], config=Config(style="simple"))
        assert "in the 'detailed' style" in client.prompts[0]
        assert calls["model"] == "gemini-2.5-pro"

    def test_cli_flags_win(self, cli, monkeypatch):
        monkeypatch.setenv("GCM_MODEL", "gemini-2.5-pro")
        _, _, calls = cli(["x", "-m", "gemini-2.0-flash", "--timeout", "9"])
        assert calls == {"api_key": "test-key", "model": "gemini-2.0-flash", "timeout": 9.0}

    def test_missing_api_key(self, cli, capsys, strip_ansi):
        code, client, _ = cli(["x"], api_key=None)
        err = strip_ansi(capsys.readouterr().err)
        assert code == 1
        assert "Error: GEMINI_API_KEY must be set" in err
        assert client.prompts == []

    @pytest.mark.parametrize("error, expected", [
        (ServiceError(500, "internal error"), "API returned HTTP 500:\ninternal error"),
        (TransportError("Connection refused"), "Connection refused"),
        (MalformedResponseError({"candidates": []}), '{"candidates": []}'),
    ])
    def test_errors_exit_nonzero(self, cli, capsys, strip_ansi, error, expected):
        code, _, _ = cli(["x"], error=error)
        captured = capsys.readouterr()
        err = strip_ansi(captured.err)
        assert code == 1
        assert "Error:" in err
        assert expected in err
        assert captured.out == ""

    def test_verbose_stats(self, cli, capsys, strip_ansi):
        cli(["x", "--verbose"])
        out = strip_ansi(capsys.readouterr().out)
        assert "Model: Fake" in out
        assert "chars)" in out
        assert "generate=" in out

    def test_api_key_never_printed(self, cli, capsys):
        cli(["x", "--verbose"], api_key="sk-very-secret")
        captured = capsys.readouterr()
        assert "sk-very-secret" not in captured.out + captured.err


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

class TestOutput:

    def test_print_message_blank_lines(self, capsys, strip_ansi):
        print_message("fix: handle None")
        assert strip_ansi(capsys.readouterr().out) == "\nfix: handle None\n\n"

    def test_print_error_to_stderr(self, capsys, strip_ansi):
        print_error("boom")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert strip_ansi(captured.err) == "\nError: boom\n"


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------

class TestConfigCommands:

    @pytest.fixture
    def isolated(self, tmp_path, monkeypatch):
        from gemini_commit.cli import commands
        from gemini_commit.config import ConfigManager
        manager = ConfigManager()
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
        monkeypatch.setattr(commands, "load_config", manager.load)
        monkeypatch.setattr(commands, "get_config_path", manager.get_config_path)
        monkeypatch.setattr(commands, "save_config", manager.save)
        monkeypatch.setattr(commands, "load_api_key", lambda: "secret-key")
        return tmp_path

    def test_display_config(self, isolated, capsys, strip_ansi):
        assert cli_main.main(["--display-config"]) == 0
        out = strip_ansi(capsys.readouterr().out)
        assert "defaults (no .gcmrc found)" in out
        assert "gemini-2.5-flash" in out
        assert "GEMINI_API_KEY: set" in out
        assert "secret-key" not in out

    def test_setup_saves_answers(self, isolated, monkeypatch, capsys):
        answers = iter(["simple", "gemini-2.5-pro", "30"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        assert cli_main.main(["--setup"]) == 0

        saved = (isolated / ".gcmrc").read_text()
        assert '"style": "simple"' in saved
        assert '"model": "gemini-2.5-pro"' in saved
        assert '"timeout": 30.0' in saved

    def test_setup_keeps_defaults_on_enter(self, isolated, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda prompt="": "")
        assert cli_main.main(["--setup"]) == 0
        saved = (isolated / ".gcmrc").read_text()
        assert '"style": "conventional commit"' in saved

    def test_setup_cancelled(self, isolated, monkeypatch, capsys):
        def _eof(prompt=""):
            raise EOFError
        monkeypatch.setattr("builtins.input", _eof)
        assert cli_main.main(["--setup"]) == 1
        assert not (isolated / ".gcmrc").exists()
