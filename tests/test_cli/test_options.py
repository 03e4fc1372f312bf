"""Tests for global option parsing."""

from pathlib import Path

import pytest

from warpdir.cli.options import OptionsError, parse_invocation


class TestParseInvocation:
    def test_no_arguments(self):
        invocation = parse_invocation([])
        assert invocation.command is None
        assert invocation.argument == ""
        assert invocation.quiet is False
        assert invocation.version is False
        assert invocation.config is None

    def test_command_and_argument(self):
        invocation = parse_invocation(["add", "proj"])
        assert invocation.command == "add"
        assert invocation.argument == "proj"

    def test_dash_commands_pass_through(self):
        invocation = parse_invocation(["-a", "proj"])
        assert invocation.args == ["-a", "proj"]

    def test_long_dash_commands_pass_through(self):
        assert parse_invocation(["--ls"]).args == ["--ls"]
        assert parse_invocation(["-a!", "x"]).args == ["-a!", "x"]

    def test_config_before_command(self, tmp_path):
        invocation = parse_invocation(["-c", str(tmp_path / "rc"), "ls"])
        assert invocation.config == tmp_path / "rc"
        assert invocation.args == ["ls"]

    def test_config_after_command(self):
        invocation = parse_invocation(["rm", "proj", "--config", "/tmp/rc"])
        assert invocation.config == Path("/tmp/rc")
        assert invocation.args == ["rm", "proj"]

    def test_config_expands_user(self):
        invocation = parse_invocation(["--config", "~/rc"])
        assert invocation.config == Path.home() / "rc"

    def test_quiet_and_version(self):
        invocation = parse_invocation(["-q", "-v", "proj"])
        assert invocation.quiet is True
        assert invocation.version is True
        assert invocation.command == "proj"

    def test_long_flags(self):
        invocation = parse_invocation(["--quiet", "--version"])
        assert invocation.quiet is True
        assert invocation.version is True
        assert invocation.args == []

    def test_config_without_path_fails(self):
        with pytest.raises(OptionsError):
            parse_invocation(["ls", "-c"])
