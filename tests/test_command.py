"""Tests for the Command descriptor."""

from __future__ import annotations

import os

import pytest

from dockercmd.command import Command
from dockercmd.launcher import Launcher


class TestCommand:
    def test_base_command_line(self):
        assert Launcher().command().command_line_lossy() == "docker"
        assert Launcher.from_program("docker", sudo=True).command().command_line_lossy() == "sudo docker"
        assert Launcher.from_program("myCommand", sudo=True).command().command_line_lossy() == "sudo myCommand"

    def test_with_args(self):
        cmd = Command.with_args("sudo", ["docker"])
        assert cmd.program == "sudo"
        assert cmd.argv == ["sudo", "docker"]

    def test_chaining(self):
        cmd = Command("docker").add_arg("network").add_arg_pair("rm", "net").add_args(["x", 1])
        assert cmd.argv == ["docker", "network", "rm", "net", "x", "1"]

    def test_copy_is_independent(self):
        cmd = Command("docker")
        other = cmd.copy()
        other.add_arg("ps")
        assert cmd.argv == ["docker"]
        assert other.argv == ["docker", "ps"]

    def test_str(self):
        assert str(Command.with_args("podman", ["ps", "--all"])) == "podman ps --all"

    def test_no_shell_quoting(self):
        cmd = Command.with_args("docker", ["run", "img", "sh", "-c", "echo a b"])
        assert cmd.argv[-1] == "echo a b"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX filesystem encoding")
    def test_undecodable_bytes(self):
        cmd = Command.with_args("docker", [b"bad\xff"])
        assert cmd.argv_bytes() == [b"docker", b"bad\xff"]
        assert cmd.command_line_lossy() == "docker bad�"
