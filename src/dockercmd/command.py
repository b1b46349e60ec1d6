"""The command descriptor produced by the launcher.

A :class:`Command` is a program plus its ordered argument tokens. It is
only a description; nothing here spawns a process. Hand ``command.argv``
to :mod:`subprocess` (or use :func:`dockercmd.runner.run_command`).
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from dockercmd.encoding import to_token


@dataclass
class Command:
    """A program and its argv tokens, in order."""

    program: str
    args: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.program = to_token(self.program)
        self.args = [to_token(arg) for arg in self.args]

    @classmethod
    def with_args(cls, program: Any, args: Iterable[Any]) -> Command:
        """Create a command with an initial list of arguments."""
        return cls(program=program, args=list(args))

    def add_arg(self, arg: Any) -> Command:
        self.args.append(to_token(arg))
        return self

    def add_arg_pair(self, first: Any, second: Any) -> Command:
        self.args.extend((to_token(first), to_token(second)))
        return self

    def add_args(self, args: Iterable[Any]) -> Command:
        self.args.extend(to_token(arg) for arg in args)
        return self

    @property
    def argv(self) -> list[str]:
        """The full argument vector, program first."""
        return [self.program, *self.args]

    def argv_bytes(self) -> list[bytes]:
        """The argument vector with raw bytes restored."""
        return [os.fsencode(token) for token in self.argv]

    def command_line_lossy(self) -> str:
        """Space-joined command line for display.

        Tokens that carry undecodable bytes are shown with replacement
        characters. The result is not shell-quoted and must not be fed to
        a shell.
        """
        return " ".join(
            token.encode("utf-8", "surrogateescape").decode("utf-8", "replace")
            for token in self.argv
        )

    def copy(self) -> Command:
        return Command(program=self.program, args=list(self.args))

    def __str__(self) -> str:
        return self.command_line_lossy()


__all__ = ["Command"]
