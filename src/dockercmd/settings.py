"""Environment-driven settings for choosing the container engine.

All fields can be set through ``DOCKERCMD_*`` environment variables or a
``.env`` file::

    DOCKERCMD_ENGINE=podman
    DOCKERCMD_PROGRAM=/opt/bin/nerdctl
    DOCKERCMD_SUDO=true

Precedence when building a launcher (:meth:`Launcher.from_settings`):
``program`` (with ``sudo``) > ``engine`` preset > auto-detection.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dockercmd.logging import configure_logging


class EngineChoice(str, Enum):
    """Which engine to use; ``auto`` runs host detection."""

    AUTO = "auto"
    DOCKER = "docker"
    SUDO_DOCKER = "sudo_docker"
    PODMAN = "podman"


class DockerCmdSettings(BaseSettings):
    """dockercmd configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DOCKERCMD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Engine ───────────────────────────────────────────────────
    engine: EngineChoice = Field(default=EngineChoice.AUTO)
    program: str | None = Field(
        default=None,
        description="Explicit engine program; overrides engine when set",
    )
    sudo: bool = Field(default=False, description="Run program through sudo")

    # ── Logging ──────────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        description="Log renderer; None picks JSON when stdout is not a tty",
    )
    log_service: str = Field(default="dockercmd", description="Value of the service field on log events")

    def apply_logging(self) -> None:
        """Apply ``log_level``/``log_format`` through :func:`dockercmd.logging.configure_logging`."""
        json_format = None if self.log_format is None else self.log_format == "json"
        configure_logging(level=self.log_level, json_format=json_format, service=self.log_service)


__all__ = ["DockerCmdSettings", "EngineChoice"]
