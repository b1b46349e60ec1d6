"""Argument encoding: turn option values into argv tokens.

Every function here is pure. Tokens are handed to the process spawner as
discrete arguments and are never re-parsed by a shell, so no quoting or
splitting is applied.

Raw bytes survive encoding: ``bytes`` and path-like values are decoded with
:func:`os.fsdecode`, whose surrogate escapes are reversed by
:func:`os.fsencode` when :mod:`subprocess` spawns the program.

Three shapes cover every option the launcher emits::

    bare_flag("--rm", True)                  -> ["--rm"]
    flag_value("--name", "web")              -> ["--name", "web"]
    repeated_flag("--env", ["A=1", "B=2"])   -> ["--env", "A=1", "--env", "B=2"]
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Any, Union

Token = Union[str, bytes, os.PathLike, int]
"""Anything that can become a single argv token."""

KeyValues = Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]]
"""Ordered key/value pairs, either as a mapping or a sequence of 2-tuples."""


def to_token(value: Any) -> str:
    """Convert one value into a single argv token.

    Objects exposing an ``arg()`` method (the value types in
    :mod:`dockercmd.values`) are formatted through it.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        # bool is an int subclass
        raise TypeError(f"boolean {value!r} cannot be used as an argv token")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, os.PathLike)):
        return os.fsdecode(value)
    arg = getattr(value, "arg", None)
    if callable(arg):
        return to_token(arg())
    return str(value)


def bare_flag(name: str, enabled: bool) -> list[str]:
    """Emit ``name`` iff ``enabled``."""
    return [name] if enabled else []


def flag_value(name: str, value: Any | None) -> list[str]:
    """Emit ``name`` followed by the value iff the value is present."""
    if value is None:
        return []
    return [name, to_token(value)]


def repeated_flag(name: str, values: Iterable[Any]) -> list[str]:
    """Emit one ``name``/value pair per element, in the given order."""
    tokens: list[str] = []
    for value in values:
        tokens.extend((name, to_token(value)))
    return tokens


def key_value(key: Any, value: Any) -> str:
    """Render one ``key=value`` token."""
    return f"{to_token(key)}={to_token(value)}"


def key_value_pairs(pairs: KeyValues) -> list[str]:
    """Render ordered key/value pairs as ``key=value`` tokens.

    Mappings are walked in their iteration order; sequences of pairs are
    walked as given. Duplicates are kept.
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    return [key_value(key, value) for key, value in items]


__all__ = [
    "KeyValues",
    "Token",
    "bare_flag",
    "flag_value",
    "key_value",
    "key_value_pairs",
    "repeated_flag",
    "to_token",
]
