"""
Structured error types for dockercmd.

The library has very few failure modes. Encoding a command line never fails
for well-formed values, and engine detection reports a missing engine as
``None`` rather than raising. What remains is grouped into a small typed
hierarchy so callers can catch by concern:

- **Configuration:** no usable container engine could be resolved
- **Validation:** a value type was constructed outside its invariants
- **Execution:** the optional runner could not spawn or complete a command

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                    DockerCmdError                         │
        │               (message, category, to_dict)                │
        ├──────────────────────────────────────────────────────────┤
        │  EngineNotFoundError   InvalidValueError   CommandError   │
        │  (CONFIG)              (VALIDATION)        (EXECUTION)    │
        │                                                │          │
        │                              CommandSpawnError            │
        │                              CommandFailedError           │
        │                              CommandTimeoutError          │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> err = EngineNotFoundError()
    >>> err.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> err.to_dict()["error_type"]
    'EngineNotFoundError'

Tags:
    error-handling, exception-hierarchy, dockercmd
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    CONFIG = "CONFIG"
    VALIDATION = "VALIDATION"
    EXECUTION = "EXECUTION"
    INTERNAL = "INTERNAL"


class DockerCmdError(Exception):
    """Base exception for all dockercmd errors.

    Subclasses set ``default_category``; an explicit ``category`` passed to
    the constructor wins.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class EngineNotFoundError(DockerCmdError):
    """No container engine (podman or docker) was found on the search path."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, message: str | None = None):
        super().__init__(message or "container command not found: neither podman nor docker is on PATH")


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class InvalidValueError(DockerCmdError, ValueError):
    """A value type was given a value outside its allowed range."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, field: str, value: Any, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"Invalid value for {field}: {value!r}")


# =============================================================================
# EXECUTION ERRORS
# =============================================================================


class CommandError(DockerCmdError):
    """Running a command through :func:`dockercmd.runner.run_command` failed."""

    default_category = ErrorCategory.EXECUTION

    def __init__(self, message: str, *, command_line: str, cause: Exception | None = None):
        self.command_line = command_line
        super().__init__(message, cause=cause)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["command"] = self.command_line
        return result


class CommandSpawnError(CommandError):
    """The program could not be started at all (missing binary, permissions)."""


class CommandTimeoutError(CommandError):
    """The command did not finish within the requested timeout."""

    def __init__(self, *, command_line: str, timeout: float, cause: Exception | None = None):
        self.timeout = timeout
        super().__init__(
            f"Command timed out after {timeout}s: {command_line}",
            command_line=command_line,
            cause=cause,
        )


class CommandFailedError(CommandError):
    """The command ran but exited with a non-zero status."""

    def __init__(self, *, command_line: str, returncode: int, stderr: bytes = b""):
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.decode("utf-8", errors="replace").strip()
        message = f"Command failed (exit {returncode}): {command_line}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message, command_line=command_line)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["returncode"] = self.returncode
        return result


__all__ = [
    "CommandError",
    "CommandFailedError",
    "CommandSpawnError",
    "CommandTimeoutError",
    "DockerCmdError",
    "EngineNotFoundError",
    "ErrorCategory",
    "InvalidValueError",
]
