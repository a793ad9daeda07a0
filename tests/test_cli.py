"""End-to-end tests for the dsesh command line."""

from unittest.mock import MagicMock, patch

import pytest

from dsesh.cli import main


CONFIG = """
import = ["extra.toml"]

[[session]]
name = "Work"
startup_command = "echo work"

[[session]]
name = "Home"
startup_command = "echo home"

[[session]]
name = "db "
startup_command = "echo db"
"""

EXTRA = """
[[session]]
name = "Workshop"
startup_command = "echo workshop"
"""


@pytest.fixture
def configured(sesh_toml, write):
    write(sesh_toml, CONFIG)
    write(sesh_toml.parent / "extra.toml", EXTRA)
    return sesh_toml


class TestHelp:
    def test_no_arguments_prints_banner(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "dsesh v1.1" in out
        assert "06/02/2026  SBDJ" in out
        assert "USAGE:" in out
        assert "connect" in out and "list" in out


class TestList:
    def test_lists_imports_first(self, configured, capsys):
        assert main(["list"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Workshop", "Work", "Home", "db "]

    def test_filter(self, configured, capsys):
        assert main(["list", "WORK"]) == 0
        assert capsys.readouterr().out.splitlines() == ["Workshop", "Work"]

    def test_zero_matches_is_success(self, configured, capsys):
        assert main(["list", "nothing-matches"]) == 0
        assert capsys.readouterr().out == ""

    def test_missing_config_fails(self, capsys):
        assert main(["list"]) != 0
        assert "error:" in capsys.readouterr().err

    def test_malformed_config_fails(self, sesh_toml, write, capsys):
        write(sesh_toml, "[[session]]\nname = \n")
        assert main(["list"]) != 0
        assert "Invalid TOML" in capsys.readouterr().err


class TestConnect:
    def test_connects_to_trimmed_name(self, configured, capsys):
        with patch("dsesh.launcher.subprocess.run") as run:
            run.return_value = MagicMock(returncode=0)
            assert main(["connect", " db "]) == 0

        assert run.call_args.args[0] == "echo db"
        assert "→ db" in capsys.readouterr().err

    def test_command_exit_status_is_ignored(self, configured):
        with patch("dsesh.launcher.subprocess.run") as run:
            run.return_value = MagicMock(returncode=42)
            assert main(["connect", "Home"]) == 0

    def test_unknown_session(self, configured, capsys):
        assert main(["connect", "nonexistent"]) != 0
        assert "nonexistent" in capsys.readouterr().err

    def test_empty_name_is_silent_noop(self, capsys):
        with patch("dsesh.launcher.subprocess.run") as run:
            assert main(["connect", ""]) == 0
        run.assert_not_called()
        captured = capsys.readouterr()
        assert captured.out == "" and captured.err == ""

    def test_missing_name(self, configured, capsys):
        assert main(["connect"]) != 0
        assert "session name" in capsys.readouterr().err


class TestDashPrefixedArguments:
    @pytest.fixture
    def dashed(self, sesh_toml, write):
        write(
            sesh_toml,
            '[[session]]\nname = "-scratch"\nstartup_command = "true"\n'
            '[[session]]\nname = "--help"\nstartup_command = "echo help"\n'
            '[[session]]\nname = "web-dev"\nstartup_command = "true"\n',
        )

    def test_filter_starting_with_dash(self, dashed, capsys):
        assert main(["list", "-dev"]) == 0
        assert capsys.readouterr().out.splitlines() == ["web-dev"]

    def test_connect_to_dash_name(self, dashed, capsys):
        with patch("dsesh.launcher.subprocess.run") as run:
            run.return_value = MagicMock(returncode=0)
            assert main(["connect", "-scratch"]) == 0
        assert "→ -scratch" in capsys.readouterr().err

    def test_help_after_command_is_a_session_name(self, dashed):
        with patch("dsesh.launcher.subprocess.run") as run:
            run.return_value = MagicMock(returncode=0)
            assert main(["connect", "--help"]) == 0
        assert run.call_args.args[0] == "echo help"


class TestVerbose:
    def test_verbose_logs_config_loading(self, configured, caplog, capsys):
        assert main(["-v", "list"]) == 0
        assert any("Loading config" in r.getMessage() for r in caplog.records)
        assert "Workshop" in capsys.readouterr().out

    def test_quiet_by_default(self, configured, caplog):
        assert main(["list"]) == 0
        assert not any(r.levelname == "DEBUG" for r in caplog.records)

    def test_verbose_alone_shows_banner(self, capsys):
        assert main(["--verbose"]) == 0
        assert "USAGE:" in capsys.readouterr().out


class TestUnknownCommand:
    def test_rejected_with_message(self, capsys):
        assert main(["frobnicate"]) != 0
        assert "Unknown command: `frobnicate`" in capsys.readouterr().err
