"""Tests for the unum command line."""

import os

import pytest

from unum import launcher
from unum.cli.main import main


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestUsage:
    """Help and no-argument invocations."""

    @pytest.mark.parametrize("argv", [[], ["-h"], ["--help"], ["help"]])
    def test_usage_exits_1(self, argv, capsys):
        assert _run(argv) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Usage:" in captured.err
        assert "unum <persona> init" in captured.err

    def test_usage_shows_config_root(self, config_home, capsys):
        _run([])
        assert str(config_home) in capsys.readouterr().err


class TestInitVerb:

    def test_creates_template(self, config_home, capsys):
        assert _run(["dev", "init"]) == 0
        path = config_home / "dev.yaml"
        assert path.is_file()
        assert capsys.readouterr().out == f"Created {path}\n"

    def test_existing_config(self, write_persona, capsys):
        path = write_persona("dev", "prompt: mine\n")
        assert _run(["dev", "init"]) == 1
        err = capsys.readouterr().err
        assert err == f"Error: config already exists: {path}\n"
        assert path.read_text() == "prompt: mine\n"

    def test_trailing_arguments_ignored(self, config_home):
        assert _run(["dev", "init", "--force"]) == 0
        assert (config_home / "dev.yaml").is_file()


class TestLaunchVerb:

    def test_missing_config(self, config_home, capsys):
        assert _run(["ghost", "--continue"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error: config not found: ")
        assert str(config_home / "ghost.yaml") in err

    def test_invalid_persona(self, capsys):
        assert _run(["--continue"]) == 1
        assert "invalid persona name" in capsys.readouterr().err

    @pytest.mark.skipif(os.name == "nt", reason="POSIX exec semantics")
    def test_exec_failure_reported(self, tmp_path, write_persona, monkeypatch, capsys):
        write_persona("dev", "prompt: hi\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(launcher.shutil, "which", lambda name: "/bin/claude")

        def _fail(path, argv, env):
            raise OSError(8, "Exec format error")

        monkeypatch.setattr(launcher.os, "execve", _fail)
        assert _run(["dev"]) == 1
        assert "Error: failed to exec /bin/claude" in capsys.readouterr().err

    @pytest.mark.skipif(os.name == "nt", reason="POSIX exec semantics")
    def test_pass_through_arguments(self, tmp_path, write_persona, monkeypatch):
        """Everything after the persona reaches the tool verbatim."""
        write_persona("dev", "prompt: hi\nargs: [--model, sonnet]\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(launcher.shutil, "which", lambda name: "/bin/claude")
        seen = {}

        def _exec(path, argv, env):
            seen["argv"] = argv
            raise OSError(1, "stop")

        monkeypatch.setattr(launcher.os, "execve", _exec)
        _run(["dev", "--resume", "-p", "do the thing", "help"])
        assert seen["argv"][-6:] == [
            "--model", "sonnet", "--resume", "-p", "do the thing", "help",
        ]


class TestSettings:

    def test_bad_debug_value(self, monkeypatch, capsys):
        monkeypatch.setenv("UNUM_DEBUG", "not-a-bool")
        assert _run(["dev"]) == 1
        assert "invalid UNUM_* environment" in capsys.readouterr().err

    def test_debug_logging_to_stderr(self, write_persona, monkeypatch, capsys):
        monkeypatch.setenv("UNUM_DEBUG", "1")
        write_persona("dev", "prompt: hi\n")
        monkeypatch.setattr(launcher.shutil, "which", lambda name: None)
        assert _run(["dev"]) == 1
        err = capsys.readouterr().err
        assert "[DEBUG] unum.config" in err
        assert err.rstrip().endswith("Error: claude not found in PATH")

    def test_log_file_written(self, cache_home, write_persona, monkeypatch):
        write_persona("dev", "prompt: hi\n")
        monkeypatch.setattr(launcher.shutil, "which", lambda name: None)
        _run(["dev"])
        log_file = cache_home / ".logs" / "unum.log"
        assert "Loaded persona 'dev'" in log_file.read_text()
