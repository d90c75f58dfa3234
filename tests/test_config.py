"""Tests for configuration and the command line entry point."""

import os

import pytest

from tinysh.config import HISTORY_FILE, MAX_HISTORY, PROMPT, load_config
from tinysh.main import main


class TestLoadConfig:

    def test_defaults(self):
        config = load_config({})
        assert config.prompt == PROMPT
        assert config.history_file == HISTORY_FILE
        assert config.max_history == MAX_HISTORY
        assert config.history
        assert not config.interactive

    def test_environment_overrides(self):
        config = load_config({
            "TINYSH_PROMPT": "$ ",
            "TINYSH_HISTFILE": "/tmp/hist",
            "TINYSH_HISTSIZE": "20",
        })
        assert config.prompt == "$ "
        assert config.history_file == "/tmp/hist"
        assert config.max_history == 20

    def test_bad_integer_falls_back(self, capsys):
        config = load_config({"TINYSH_HISTSIZE": "lots"})
        assert config.max_history == MAX_HISTORY
        assert "TINYSH_HISTSIZE" in capsys.readouterr().err


class TestMain:

    @pytest.fixture(autouse=True)
    def restore_cwd(self, monkeypatch):
        monkeypatch.chdir(os.getcwd())

    def test_runs_script(self, tmp_path):
        target = tmp_path / "sub"
        target.mkdir()
        script = tmp_path / "commands.sh"
        script.write_text(f"cd {target}\nexit\ncd /\n")
        assert main([str(script)]) == 0
        assert os.path.samefile(os.getcwd(), target)

    def test_script_with_undecodable_bytes(self, tmp_path, capfdbinary):
        script = tmp_path / "commands.sh"
        script.write_bytes(b"echo \xff\nexit\n")
        assert main([str(script)]) == 0
        assert capfdbinary.readouterr().out == b"\xff\n"

    def test_missing_script(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.sh")]) == 1
        assert "nope.sh" in capsys.readouterr().err
