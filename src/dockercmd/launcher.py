"""Launcher: compose full engine command lines from option schemas.

Why This Matters:
    Scripts that shell out to ``docker`` tend to build argument lists by
    hand, one ``cmd.extend([...])`` at a time, and drift apart in flag
    order and value formatting. The launcher owns that mapping: one method
    per subcommand, one fixed emission order per method, so equal options
    always yield byte-identical command lines.

Key Concepts:
    Launcher: Frozen holder of the base command (``docker``,
        ``sudo docker``, ``podman`` or any compatible program).
    Command: The produced descriptor (program + argv). Execution is left to
        the caller or :func:`dockercmd.runner.run_command`.

Architecture Decisions:
    - Methods never mutate the launcher; each call copies the base command.
    - Detection is opt-in (:meth:`Launcher.auto`). The plain constructor
      defaults to ``docker`` without touching the host.

Example::

    launcher = Launcher.auto()
    if launcher is None:
        raise SystemExit("container command not found")
    cmd = launcher.run(RunOptions(image="alpine:latest", command="echo",
                                  args=["hello", "world"]))
    subprocess.run(cmd.argv, check=True)

Related Modules:
    - :mod:`dockercmd.options` for the option schemas consumed here
    - :mod:`dockercmd.engine` for presets and detection
    - :mod:`dockercmd.encoding` for the token shapes

Tags:
    docker, podman, argv, build, run, network, stop
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from dockercmd.command import Command
from dockercmd.encoding import bare_flag, flag_value, key_value_pairs, repeated_flag, to_token
from dockercmd.engine import BaseCommand, GroupsProbe, detect_base_command, groups_probe
from dockercmd.errors import EngineNotFoundError
from dockercmd.options import BuildOptions, CreateNetworkOptions, RunOptions, StopOptions
from dockercmd.settings import DockerCmdSettings, EngineChoice


@dataclass(frozen=True)
class Launcher:
    """Base container command used for building and running containers.

    The base is held as plain immutable tokens; every subcommand starts
    from a fresh :class:`Command`, so launchers are hashable and safe to
    share.
    """

    program: str = "docker"
    base_args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "program", to_token(self.program))
        object.__setattr__(self, "base_args", tuple(to_token(arg) for arg in self.base_args))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_base_command(cls, base: BaseCommand) -> Launcher:
        return cls.from_command(base.command())

    @classmethod
    def from_command(cls, command: Command) -> Launcher:
        """Use a copy of ``command`` (program plus leading args) as the base."""
        return cls(program=command.program, base_args=tuple(command.args))

    @classmethod
    def from_program(cls, program: Any, sudo: bool = False) -> Launcher:
        """Launch ``program`` directly, or through ``sudo`` when requested."""
        if sudo:
            return cls(program="sudo", base_args=(to_token(program),))
        return cls(program=program)

    @classmethod
    def auto(
        cls,
        path_env: str | None = None,
        *,
        probe: GroupsProbe = groups_probe,
    ) -> Launcher | None:
        """Detect the engine for this host.

        Returns ``None`` when neither podman nor docker is on the search
        path. ``path_env`` defaults to the current ``PATH``.
        """
        if path_env is None:
            path_env = os.environ.get("PATH", "")
        base = detect_base_command(path_env, probe=probe)
        if base is None:
            return None
        return cls.from_base_command(base)

    @classmethod
    def require_auto(
        cls,
        path_env: str | None = None,
        *,
        probe: GroupsProbe = groups_probe,
    ) -> Launcher:
        """Like :meth:`auto` but raises :class:`EngineNotFoundError` instead of returning ``None``."""
        launcher = cls.auto(path_env, probe=probe)
        if launcher is None:
            raise EngineNotFoundError()
        return launcher

    @classmethod
    def from_settings(
        cls,
        settings: DockerCmdSettings,
        *,
        path_env: str | None = None,
        probe: GroupsProbe = groups_probe,
    ) -> Launcher | None:
        """Build a launcher from :class:`DockerCmdSettings`.

        An explicit ``program`` wins over ``engine``. Only ``engine=auto``
        can return ``None``.
        """
        if settings.program:
            return cls.from_program(settings.program, sudo=settings.sudo)
        match settings.engine:
            case EngineChoice.AUTO:
                return cls.auto(path_env, probe=probe)
            case EngineChoice.DOCKER:
                return cls.from_base_command(BaseCommand.DOCKER)
            case EngineChoice.SUDO_DOCKER:
                return cls.from_base_command(BaseCommand.SUDO_DOCKER)
            case EngineChoice.PODMAN:
                return cls.from_base_command(BaseCommand.PODMAN)
        raise ValueError(f"unknown engine choice: {settings.engine!r}")

    # ------------------------------------------------------------------
    # Subcommands
    # ------------------------------------------------------------------

    def command(self) -> Command:
        """A fresh copy of the base command."""
        return Command.with_args(self.program, self.base_args)

    def build(self, opt: BuildOptions) -> Command:
        """Create a command for building an image."""
        cmd = self.command()
        cmd.add_arg("build")
        cmd.add_args(repeated_flag("--build-arg", key_value_pairs(opt.build_args)))
        cmd.add_args(flag_value("--file", opt.dockerfile))
        cmd.add_args(flag_value("--iidfile", opt.iidfile))
        cmd.add_args(bare_flag("--no-cache", opt.no_cache))
        cmd.add_args(bare_flag("--pull", opt.pull))
        cmd.add_args(bare_flag("--quiet", opt.quiet))
        cmd.add_args(flag_value("--tag", opt.tag))
        cmd.add_arg(opt.context)
        return cmd

    def create_network(self, opt: CreateNetworkOptions) -> Command:
        """Create a command for creating a network."""
        cmd = self.command()
        cmd.add_arg_pair("network", "create")
        cmd.add_arg(opt.name)
        return cmd

    def remove_network(self, name: str) -> Command:
        """Create a command for removing a network."""
        cmd = self.command()
        cmd.add_arg_pair("network", "rm")
        cmd.add_arg(name)
        return cmd

    def run(self, opt: RunOptions) -> Command:
        """Create a command for running a container."""
        cmd = self.command()
        cmd.add_arg("run")
        cmd.add_args(bare_flag("--detach", opt.detach))
        cmd.add_args(repeated_flag("--env", key_value_pairs(opt.env)))
        cmd.add_args(bare_flag("--init", opt.init))
        cmd.add_args(bare_flag("--interactive", opt.interactive))
        cmd.add_args(flag_value("--name", opt.name))
        cmd.add_args(flag_value("--network", opt.network))
        cmd.add_args(repeated_flag("--publish", opt.publish))
        cmd.add_args(bare_flag("--read-only", opt.read_only))
        cmd.add_args(bare_flag("--rm", opt.remove))
        cmd.add_args(bare_flag("--tty", opt.tty))
        cmd.add_args(flag_value("--user", opt.user))
        cmd.add_args(repeated_flag("--volume", opt.volumes))

        # Image, then command and its args
        cmd.add_arg(opt.image)
        if opt.command is not None:
            cmd.add_arg(opt.command)
        cmd.add_args(opt.args)
        return cmd

    def stop(self, opt: StopOptions) -> Command:
        """Create a command for stopping containers, in the given order."""
        cmd = self.command()
        cmd.add_arg("stop")
        cmd.add_args(flag_value("--time", opt.time))
        cmd.add_args(opt.containers)
        return cmd

    def __str__(self) -> str:
        return self.command().command_line_lossy()


__all__ = ["Launcher"]
