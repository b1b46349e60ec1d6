"""dockercmd: build command lines for Docker and Docker-compatible engines.

Rather than speaking to the Docker daemon, this library produces commands
that run the engine's client (``docker``, ``sudo docker``, ``podman``) in a
subprocess. Option schemas describe what to do; the :class:`Launcher` turns
them into an exact, ordered argv.

Key Concepts:
    Launcher: One method per subcommand (build, run, stop, network create/rm).
    BaseCommand: Engine presets; :meth:`Launcher.auto` picks one for the host.
    BuildOptions / RunOptions / StopOptions / CreateNetworkOptions: Option
        schemas.
    Volume / PublishPorts / PortRange / UserAndGroup / Name / Id: Compound
        values with their own encodings.
    Command: The produced descriptor (program + argv).

Example:
    >>> from dockercmd import Launcher, StopOptions
    >>> Launcher().stop(StopOptions(containers=["abc", "def"], time=123)).command_line_lossy()
    'docker stop --time 123 abc def'
"""

from __future__ import annotations

from dockercmd.command import Command
from dockercmd.engine import BaseCommand, detect_base_command, find_in_path, groups_probe
from dockercmd.errors import (
    CommandError,
    CommandFailedError,
    CommandSpawnError,
    CommandTimeoutError,
    DockerCmdError,
    EngineNotFoundError,
    InvalidValueError,
)
from dockercmd.launcher import Launcher
from dockercmd.options import BuildOptions, CreateNetworkOptions, RunOptions, StopOptions
from dockercmd.runner import CommandOutput, run_command
from dockercmd.settings import DockerCmdSettings, EngineChoice
from dockercmd.values import (
    Id,
    Name,
    NameOrId,
    PortRange,
    PublishPorts,
    UserAndGroup,
    Volume,
)

__version__ = "0.1.0"

__all__ = [
    "BaseCommand",
    "BuildOptions",
    "Command",
    "CommandError",
    "CommandFailedError",
    "CommandOutput",
    "CommandSpawnError",
    "CommandTimeoutError",
    "CreateNetworkOptions",
    "DockerCmdError",
    "DockerCmdSettings",
    "EngineChoice",
    "EngineNotFoundError",
    "Id",
    "InvalidValueError",
    "Launcher",
    "Name",
    "NameOrId",
    "PortRange",
    "PublishPorts",
    "RunOptions",
    "StopOptions",
    "UserAndGroup",
    "Volume",
    "detect_base_command",
    "find_in_path",
    "groups_probe",
    "run_command",
]
