"""Run a :class:`~dockercmd.command.Command` as a subprocess.

The launcher only describes commands; this module is the thin optional
step that executes one. The argv is passed to :func:`subprocess.run` as a
list, never through a shell, so tokens reach the engine exactly as encoded.

Example::

    launcher = Launcher.require_auto()
    out = run_command(
        launcher.run(RunOptions(image="alpine:latest", command="echo",
                                args=["hello", "world"])),
        capture=True,
    )
    assert out.stdout_string_lossy() == "hello world\\n"
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from dataclasses import dataclass

from dockercmd.command import Command
from dockercmd.errors import CommandFailedError, CommandSpawnError, CommandTimeoutError
from dockercmd.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Exit status and (when captured) output of a finished command."""

    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    def stdout_string_lossy(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    def stderr_string_lossy(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


def run_command(
    command: Command,
    *,
    capture: bool = False,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> CommandOutput:
    """Run ``command`` and wait for it to exit.

    Args:
        command: The command to run.
        capture: Capture stdout/stderr instead of inheriting them.
        check: Raise :class:`CommandFailedError` on a non-zero exit.
        env: Replacement environment for the child process.
        timeout: Seconds before the child is killed; ``None`` waits forever.

    Raises:
        CommandSpawnError: The program could not be started.
        CommandTimeoutError: ``timeout`` elapsed.
        CommandFailedError: Non-zero exit with ``check=True``.
    """
    command_line = command.command_line_lossy()
    logger.debug("command.exec", command=command_line)
    try:
        completed = subprocess.run(
            command.argv_bytes(),
            capture_output=capture,
            env=dict(env) if env is not None else None,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandTimeoutError(command_line=command_line, timeout=exc.timeout, cause=exc) from exc
    except OSError as exc:
        raise CommandSpawnError(
            f"Failed to start {command.program}: {exc}",
            command_line=command_line,
            cause=exc,
        ) from exc

    output = CommandOutput(
        returncode=completed.returncode,
        stdout=completed.stdout or b"",
        stderr=completed.stderr or b"",
    )
    if check and not output.success:
        logger.warning("command.failed", command=command_line, returncode=output.returncode)
        raise CommandFailedError(
            command_line=command_line,
            returncode=output.returncode,
            stderr=output.stderr,
        )
    return output


__all__ = ["CommandOutput", "run_command"]
