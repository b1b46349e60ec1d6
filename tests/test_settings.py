"""Tests for DockerCmdSettings and Launcher.from_settings."""

from __future__ import annotations

import pytest

from dockercmd.launcher import Launcher
from dockercmd.settings import DockerCmdSettings, EngineChoice


class TestDockerCmdSettings:
    def test_defaults(self, monkeypatch):
        for var in ("DOCKERCMD_ENGINE", "DOCKERCMD_PROGRAM", "DOCKERCMD_SUDO"):
            monkeypatch.delenv(var, raising=False)
        settings = DockerCmdSettings(_env_file=None)
        assert settings.engine is EngineChoice.AUTO
        assert settings.program is None
        assert settings.sudo is False
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("DOCKERCMD_ENGINE", "podman")
        monkeypatch.setenv("DOCKERCMD_PROGRAM", "/opt/bin/docker")
        monkeypatch.setenv("DOCKERCMD_SUDO", "true")
        settings = DockerCmdSettings(_env_file=None)
        assert settings.engine is EngineChoice.PODMAN
        assert settings.program == "/opt/bin/docker"
        assert settings.sudo is True

    def test_invalid_engine(self, monkeypatch):
        monkeypatch.setenv("DOCKERCMD_ENGINE", "kubectl")
        with pytest.raises(ValueError):
            DockerCmdSettings(_env_file=None)


class TestLauncherFromSettings:
    @pytest.mark.parametrize(
        ("engine", "expected"),
        [
            (EngineChoice.DOCKER, "docker"),
            (EngineChoice.SUDO_DOCKER, "sudo docker"),
            (EngineChoice.PODMAN, "podman"),
        ],
    )
    def test_presets(self, engine, expected, forbidden_probe):
        settings = DockerCmdSettings(_env_file=None, engine=engine, program=None)
        launcher = Launcher.from_settings(settings, path_env="", probe=forbidden_probe)
        assert str(launcher) == expected

    def test_program_overrides_engine(self, forbidden_probe):
        settings = DockerCmdSettings(_env_file=None, engine=EngineChoice.PODMAN, program="nerdctl", sudo=True)
        launcher = Launcher.from_settings(settings, probe=forbidden_probe)
        assert str(launcher) == "sudo nerdctl"

    def test_auto(self, make_path, in_group_probe):
        settings = DockerCmdSettings(_env_file=None, engine=EngineChoice.AUTO, program=None)
        launcher = Launcher.from_settings(settings, path_env=make_path(["docker"]), probe=in_group_probe)
        assert str(launcher) == "docker"

    def test_auto_nothing_found(self, make_path):
        settings = DockerCmdSettings(_env_file=None, engine=EngineChoice.AUTO, program=None)
        assert Launcher.from_settings(settings, path_env=make_path([])) is None
