"""Value types with their own argv encodings.

These are the compound values that appear as a single token after a flag:

    - :class:`UserAndGroup` for ``--user``: ``user`` or ``user:group``
    - :class:`Volume` for ``--volume``: ``src:dst:ro[,opt]*``
    - :class:`PublishPorts` for ``--publish``: ``[ip:][host:]container``

``NameOrId`` is a closed union of :class:`Name` and :class:`Id`; every
formatting site matches on both cases.

Examples:
    >>> UserAndGroup(user=Name("app"), group=Id(1000)).arg()
    'app:1000'
    >>> Volume(src="/data", dst="/srv", options=["z"]).arg()
    '/data:/srv:ro,z'
    >>> PublishPorts(container=PortRange.single(80), ip="127.0.0.1").arg()
    '127.0.0.1::80'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Union

from dockercmd.encoding import to_token
from dockercmd.errors import InvalidValueError

MAX_PORT = 0xFFFF
MAX_ID = 0xFFFF_FFFF


# ---------------------------------------------------------------------------
# Users and groups
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Name:
    """User or group name."""

    value: str


@dataclass(frozen=True)
class Id:
    """Numeric user or group ID (unsigned 32-bit)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not 0 <= self.value <= MAX_ID:
            raise InvalidValueError("id", self.value, f"ID must be in 0..{MAX_ID}: {self.value!r}")


NameOrId = Union[Name, Id]


def as_name_or_id(value: NameOrId | str | int) -> NameOrId:
    """Coerce a plain ``str`` to :class:`Name` and a plain ``int`` to :class:`Id`."""
    if isinstance(value, (Name, Id)):
        return value
    if isinstance(value, str):
        return Name(value)
    return Id(value)


def format_name_or_id(value: NameOrId) -> str:
    match value:
        case Name(value=name):
            return name
        case Id(value=number):
            return str(number)
    raise TypeError(f"expected Name or Id, got {type(value).__name__}")


@dataclass(frozen=True)
class UserAndGroup:
    """User and (optionally) group to run as inside the container."""

    user: NameOrId
    group: NameOrId | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "user", as_name_or_id(self.user))
        if self.group is not None:
            object.__setattr__(self, "group", as_name_or_id(self.group))

    @classmethod
    def current(cls) -> UserAndGroup:
        """The UID and GID of the current process."""
        return cls(user=Id(os.getuid()), group=Id(os.getgid()))

    @classmethod
    def root(cls) -> UserAndGroup:
        return cls(user=Id(0), group=Id(0))

    def arg(self) -> str:
        """Format as ``<user>`` or ``<user>:<group>``."""
        out = format_name_or_id(self.user)
        if self.group is not None:
            out = f"{out}:{format_name_or_id(self.group)}"
        return out


# ---------------------------------------------------------------------------
# Volumes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Volume:
    """Volume mount for ``run --volume``.

    ``src`` is a host path when absolute, otherwise the name of a volume.
    Mounts are read-only unless ``read_write`` is set.
    """

    src: Any
    dst: Any
    read_write: bool = False
    options: list[str] = field(default_factory=list)

    def arg(self) -> str:
        mode = "rw" if self.read_write else "ro"
        out = f"{to_token(self.src)}:{to_token(self.dst)}:{mode}"
        for opt in self.options:
            out = f"{out},{opt}"
        return out


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PortRange:
    """Inclusive range of ports; a single port when ``start == end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            port = getattr(self, name)
            if isinstance(port, bool) or not 0 <= port <= MAX_PORT:
                raise InvalidValueError(name, port, f"port must be in 0..{MAX_PORT}: {port!r}")
        if self.start > self.end:
            raise InvalidValueError(
                "end", self.end, f"port range start {self.start} is greater than end {self.end}"
            )

    @classmethod
    def single(cls, port: int) -> PortRange:
        return cls(start=port, end=port)

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}-{self.end}"

    def arg(self) -> str:
        return str(self)


def as_port_range(value: PortRange | int) -> PortRange:
    if isinstance(value, PortRange):
        return value
    return PortRange.single(value)


@dataclass(frozen=True)
class PublishPorts:
    """Port publishing for ``run --publish``.

    ``container`` is required; ``host`` and ``ip`` are independently
    optional. Plain ``int`` ports are accepted and widened to one-port
    ranges.
    """

    container: PortRange
    host: PortRange | None = None
    ip: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "container", as_port_range(self.container))
        if self.host is not None:
            object.__setattr__(self, "host", as_port_range(self.host))

    def arg(self) -> str:
        if self.ip is not None and self.host is not None:
            return f"{self.ip}:{self.host}:{self.container}"
        if self.ip is not None:
            return f"{self.ip}::{self.container}"
        if self.host is not None:
            return f"{self.host}:{self.container}"
        return str(self.container)


__all__ = [
    "Id",
    "MAX_ID",
    "MAX_PORT",
    "Name",
    "NameOrId",
    "PortRange",
    "PublishPorts",
    "UserAndGroup",
    "Volume",
    "as_name_or_id",
    "as_port_range",
    "format_name_or_id",
]
