"""Container engine presets and host auto-detection.

Picks which engine to launch when the caller has no explicit preference.

Key Concepts:
    BaseCommand: Closed set of launch presets (``docker``, ``sudo docker``,
        ``podman``).
    detect_base_command: Search-path scan plus a ``docker`` group probe that
        decides between the presets, or reports that no engine exists.
    GroupsProbe: Zero-argument callable returning the output of ``groups``
        or ``None``. Injected so the decision table can be tested without
        spawning processes.

Detection order:
    1. ``podman`` on the search path -> PODMAN (the probe is not run)
    2. ``docker`` on the search path -> DOCKER if the current user is in the
       ``docker`` group, otherwise SUDO_DOCKER
    3. neither -> ``None``

A probe that cannot run, or exits non-zero, counts as "not in the docker
group": detection falls back to ``sudo`` rather than raising. The result can
go stale if binaries or group membership change after detection.

Tags:
    docker, podman, sudo, detection, PATH, groups
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Callable
from enum import Enum

from dockercmd.command import Command
from dockercmd.logging import get_logger

logger = get_logger(__name__)

DOCKER_GROUP = "docker"

GroupsProbe = Callable[[], str | None]
"""Returns the captured stdout of ``groups``, or ``None`` if the probe failed."""

ExistsCheck = Callable[[str], bool]


class BaseCommand(str, Enum):
    """Supported launch presets."""

    DOCKER = "docker"
    SUDO_DOCKER = "sudo_docker"
    PODMAN = "podman"

    def command(self) -> Command:
        """The base command every subcommand is appended to."""
        match self:
            case BaseCommand.DOCKER:
                return Command("docker")
            case BaseCommand.SUDO_DOCKER:
                return Command.with_args("sudo", ["docker"])
            case BaseCommand.PODMAN:
                return Command("podman")
        raise ValueError(f"unknown base command: {self!r}")


# ---------------------------------------------------------------------------
# Search path
# ---------------------------------------------------------------------------


def find_in_path(
    name: str,
    path_env: str | None,
    *,
    exists: ExistsCheck = os.path.exists,
) -> str | None:
    """Return the first ``<dir>/<name>`` that exists, scanning dirs in order.

    Only the exact name is matched. Neither the executable bit nor
    platform suffixes such as ``.exe`` are considered.
    """
    if not path_env:
        return None
    for directory in path_env.split(os.pathsep):
        if not directory:
            continue
        candidate = os.path.join(directory, name)
        if exists(candidate):
            return candidate
    return None


# ---------------------------------------------------------------------------
# Group membership
# ---------------------------------------------------------------------------


def groups_probe() -> str | None:
    """Run ``groups`` and return its stdout, or ``None`` on any failure.

    Output is decoded leniently; group names that are not valid UTF-8
    cannot match ``docker`` anyway. Blocks until ``groups`` exits; there is
    no timeout.
    """
    try:
        completed = subprocess.run(
            ["groups"],
            capture_output=True,
            check=False,
        )
    except (subprocess.SubprocessError, OSError) as e:
        logger.warning("engine.groups_probe_failed", error=str(e))
        return None
    if completed.returncode != 0:
        logger.warning(
            "engine.groups_probe_failed",
            returncode=completed.returncode,
            stderr=(completed.stderr or b"").decode("utf-8", errors="replace").strip(),
        )
        return None
    return (completed.stdout or b"").decode("utf-8", errors="replace")


def in_docker_group(probe: GroupsProbe = groups_probe) -> bool:
    """True iff the probe succeeds and lists the ``docker`` group."""
    output = probe()
    if output is None:
        return False
    return DOCKER_GROUP in output.split()


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


def detect_base_command(
    path_env: str | None,
    *,
    probe: GroupsProbe = groups_probe,
    exists: ExistsCheck = os.path.exists,
) -> BaseCommand | None:
    """Choose a :class:`BaseCommand` for this host, or ``None`` if no engine exists.

    Args:
        path_env: Value of the search-path variable (``PATH``).
        probe: Group membership probe, see :func:`groups_probe`.
        exists: File existence check used for the path scan.
    """
    podman = find_in_path("podman", path_env, exists=exists)
    if podman is not None:
        logger.debug("engine.detected", base_command=BaseCommand.PODMAN.value, path=podman)
        return BaseCommand.PODMAN

    docker = find_in_path("docker", path_env, exists=exists)
    if docker is not None:
        base = BaseCommand.DOCKER if in_docker_group(probe) else BaseCommand.SUDO_DOCKER
        logger.debug("engine.detected", base_command=base.value, path=docker)
        return base

    logger.info("engine.not_found")
    return None


__all__ = [
    "BaseCommand",
    "DOCKER_GROUP",
    "ExistsCheck",
    "GroupsProbe",
    "detect_base_command",
    "find_in_path",
    "groups_probe",
    "in_docker_group",
]
