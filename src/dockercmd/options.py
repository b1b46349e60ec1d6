"""Option schemas, one per launcher subcommand.

Each schema is a frozen dataclass of independently defaultable settings.
Field order here is for readability only; the order in which flags are
emitted is fixed by :class:`dockercmd.launcher.Launcher`, so two equal
schemas always produce identical command lines.

Key/value settings (``BuildOptions.build_args``, ``RunOptions.env``) take
either a mapping or an ordered list of pairs. Iteration order is kept and
duplicates are not removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from dockercmd.encoding import KeyValues
from dockercmd.values import PublishPorts, UserAndGroup, Volume


@dataclass(frozen=True)
class BuildOptions:
    """Options for ``build``."""

    context: Any = "."
    """Directory whose files can be pulled into the image."""

    build_args: KeyValues = field(default_factory=list)
    """Build-time variables, emitted as ``--build-arg key=value``."""

    dockerfile: Any | None = None
    """Dockerfile to build; the engine defaults to ``<context>/Dockerfile``."""

    iidfile: Any | None = None
    """Write the image ID to this file."""

    no_cache: bool = False
    """Do not use cache when building the image."""

    pull: bool = False
    """Always attempt to pull a newer version of the base image."""

    quiet: bool = False
    """Suppress the build output and print the image ID on success."""

    tag: str | None = None
    """Name to tag the image with."""


@dataclass(frozen=True)
class CreateNetworkOptions:
    """Options for ``network create``."""

    name: str = ""


@dataclass(frozen=True)
class RunOptions:
    """Options for ``run``."""

    image: str = ""
    """Container image to run."""

    env: KeyValues = field(default_factory=list)
    """Environment variables, emitted as ``--env key=value``."""

    detach: bool = False
    """Run in the background and print the container ID."""

    init: bool = False
    """Run an init inside the container that forwards signals and reaps processes."""

    interactive: bool = False
    """Keep stdin open even if not attached."""

    name: str | None = None
    network: str | None = None

    publish: list[PublishPorts] = field(default_factory=list)
    """Container ports to publish to the host."""

    read_only: bool = False
    """Mount the container's root filesystem as read only."""

    remove: bool = False
    """Automatically remove the container when it exits (``--rm``)."""

    tty: bool = False
    """Allocate a pseudo-TTY."""

    user: UserAndGroup | None = None
    volumes: list[Volume] = field(default_factory=list)

    command: Any | None = None
    """Command to run in place of the image default."""

    args: list[Any] = field(default_factory=list)
    """Arguments passed after ``command``."""


@dataclass(frozen=True)
class StopOptions:
    """Options for ``stop``."""

    containers: list[str] = field(default_factory=list)
    """Container names or IDs, stopped in order."""

    time: int | None = None
    """Seconds to wait before killing the container."""


__all__ = [
    "BuildOptions",
    "CreateNetworkOptions",
    "RunOptions",
    "StopOptions",
]
