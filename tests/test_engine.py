"""Tests for engine presets and host auto-detection.

The decision table is exercised with injected probes and fake search paths
under ``tmp_path``; no real ``groups`` or engine binary is needed.
"""

from __future__ import annotations

import os
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from dockercmd.engine import (
    BaseCommand,
    detect_base_command,
    find_in_path,
    groups_probe,
    in_docker_group,
)
from dockercmd.errors import EngineNotFoundError
from dockercmd.launcher import Launcher


# ------------------------------------------------------------------ #
# BaseCommand
# ------------------------------------------------------------------ #


class TestBaseCommand:
    def test_commands(self):
        assert BaseCommand.DOCKER.command().argv == ["docker"]
        assert BaseCommand.SUDO_DOCKER.command().argv == ["sudo", "docker"]
        assert BaseCommand.PODMAN.command().argv == ["podman"]

    def test_values(self):
        assert BaseCommand("sudo_docker") is BaseCommand.SUDO_DOCKER

    def test_fresh_command_each_call(self):
        BaseCommand.DOCKER.command().add_arg("ps")
        assert BaseCommand.DOCKER.command().argv == ["docker"]


# ------------------------------------------------------------------ #
# Search path
# ------------------------------------------------------------------ #


class TestFindInPath:
    def test_found(self, make_path):
        path_env = make_path([], ["docker"])
        found = find_in_path("docker", path_env)
        assert found == os.path.join(path_env.split(os.pathsep)[1], "docker")

    def test_first_match_wins(self, make_path):
        path_env = make_path(["docker"], ["docker"])
        found = find_in_path("docker", path_env)
        assert found == os.path.join(path_env.split(os.pathsep)[0], "docker")

    def test_exact_name_only(self, make_path):
        assert find_in_path("docker", make_path(["docker.exe", "docker-compose"])) is None

    def test_empty_entries_skipped(self, make_path):
        path_env = os.pathsep + make_path(["podman"]) + os.pathsep
        assert find_in_path("podman", path_env) is not None

    def test_empty_or_missing_path(self):
        assert find_in_path("docker", "") is None
        assert find_in_path("docker", None) is None

    def test_injected_exists(self):
        seen = []

        def exists(candidate: str) -> bool:
            seen.append(candidate)
            return candidate == os.path.join("/b", "docker")

        assert find_in_path("docker", os.pathsep.join(["/a", "/b", "/c"]), exists=exists) == os.path.join("/b", "docker")
        assert seen == [os.path.join("/a", "docker"), os.path.join("/b", "docker")]


# ------------------------------------------------------------------ #
# Group probe
# ------------------------------------------------------------------ #


class TestGroupsProbe:
    @patch("dockercmd.engine.subprocess.run")
    def test_success(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout=b"alice docker\n", stderr=b"")
        assert groups_probe() == "alice docker\n"
        mock_run.assert_called_once_with(["groups"], capture_output=True, check=False)

    @patch("dockercmd.engine.subprocess.run")
    def test_nonzero_exit(self, mock_run):
        mock_run.return_value = MagicMock(returncode=1, stdout=b"docker\n", stderr=b"oops \xff")
        assert groups_probe() is None

    @patch("dockercmd.engine.subprocess.run")
    def test_non_utf8_group_names(self, mock_run):
        mock_run.return_value = MagicMock(returncode=0, stdout=b"alice caf\xe9 docker\n", stderr=b"")
        output = groups_probe()
        assert output is not None
        assert "docker" in output.split()

    @pytest.mark.skipif(os.name == "nt", reason="POSIX shell script")
    def test_non_utf8_groups_detect_docker(self, make_path, tmp_path, monkeypatch):
        fake_bin = tmp_path / "fakebin"
        fake_bin.mkdir()
        script = fake_bin / "groups"
        script.write_bytes(b"#!/bin/sh\nprintf 'alice caf\\351 docker\\n'\n")
        script.chmod(0o755)
        monkeypatch.setenv("PATH", str(fake_bin) + os.pathsep + os.environ.get("PATH", ""))
        assert detect_base_command(make_path(["docker"])) is BaseCommand.DOCKER

    @patch("dockercmd.engine.subprocess.run", side_effect=FileNotFoundError("groups"))
    def test_missing_binary(self, mock_run):
        assert groups_probe() is None

    @patch("dockercmd.engine.subprocess.run", side_effect=subprocess.SubprocessError("boom"))
    def test_subprocess_error(self, mock_run):
        assert groups_probe() is None


class TestInDockerGroup:
    def test_member(self, in_group_probe):
        assert in_docker_group(in_group_probe) is True

    def test_not_member(self, not_in_group_probe):
        assert in_docker_group(not_in_group_probe) is False

    def test_similar_names_do_not_count(self):
        assert in_docker_group(lambda: "dockerroot docker-users mydocker") is False

    def test_failed_probe(self, failed_probe):
        assert in_docker_group(failed_probe) is False


# ------------------------------------------------------------------ #
# Detection decision table
# ------------------------------------------------------------------ #


class TestDetectBaseCommand:
    def test_podman_wins(self, make_path, forbidden_probe):
        path_env = make_path(["docker"], ["podman"])
        assert detect_base_command(path_env, probe=forbidden_probe) is BaseCommand.PODMAN

    def test_docker_in_group(self, make_path, in_group_probe):
        assert detect_base_command(make_path(["docker"]), probe=in_group_probe) is BaseCommand.DOCKER

    def test_docker_not_in_group(self, make_path, not_in_group_probe):
        assert detect_base_command(make_path(["docker"]), probe=not_in_group_probe) is BaseCommand.SUDO_DOCKER

    def test_docker_probe_failed(self, make_path, failed_probe):
        assert detect_base_command(make_path(["docker"]), probe=failed_probe) is BaseCommand.SUDO_DOCKER

    def test_nothing_found(self, make_path, forbidden_probe):
        assert detect_base_command(make_path(["nerdctl"]), probe=forbidden_probe) is None


class TestLauncherAuto:
    def test_auto_podman(self, make_path, forbidden_probe):
        launcher = Launcher.auto(make_path(["podman"]), probe=forbidden_probe)
        assert launcher is not None
        assert str(launcher) == "podman"

    def test_auto_sudo_docker(self, make_path, not_in_group_probe):
        launcher = Launcher.auto(make_path(["docker"]), probe=not_in_group_probe)
        assert launcher == Launcher.from_base_command(BaseCommand.SUDO_DOCKER)

    def test_auto_none(self, make_path):
        assert Launcher.auto(make_path([])) is None

    def test_auto_reads_process_path(self, make_path, monkeypatch, in_group_probe):
        monkeypatch.setenv("PATH", make_path(["docker"]))
        assert str(Launcher.auto(probe=in_group_probe)) == "docker"

    def test_require_auto_raises(self, make_path):
        with pytest.raises(EngineNotFoundError, match="container command not found"):
            Launcher.require_auto(make_path([]))
