"""
Shared pytest fixtures for dockercmd tests.

This module provides:
- Fake search paths built under ``tmp_path``
- Canned ``groups`` probes for the detection decision table
- Opt-in gating for tests that need a real container engine

Usage:
    Fixtures are auto-discovered by pytest; request them as test arguments.
"""

import os
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Ensure dockercmd package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip tests marked ``integration`` unless DOCKERCMD_INTEGRATION is set."""
    if os.environ.get("DOCKERCMD_INTEGRATION", "").lower() in ("1", "true", "yes"):
        return
    skip = pytest.mark.skip(reason="set DOCKERCMD_INTEGRATION=1 to run against a real engine")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def make_path(tmp_path: Path) -> Callable[..., str]:
    """Build a PATH-style string of fresh directories holding the named files.

    ``make_path(["docker"], [], ["podman"])`` creates three directories and
    returns them joined with ``os.pathsep`` in that order.
    """

    def _make(*dirs: list[str]) -> str:
        entries = []
        for index, names in enumerate(dirs):
            directory = tmp_path / f"bin{index}"
            directory.mkdir()
            for name in names:
                (directory / name).write_text("")
            entries.append(str(directory))
        return os.pathsep.join(entries)

    return _make


@pytest.fixture
def in_group_probe() -> Callable[[], str]:
    return lambda: "alice wheel docker\n"


@pytest.fixture
def not_in_group_probe() -> Callable[[], str]:
    return lambda: "alice wheel\n"


@pytest.fixture
def failed_probe() -> Callable[[], None]:
    return lambda: None


@pytest.fixture
def forbidden_probe() -> Callable[[], str]:
    """A probe that fails the test if detection calls it."""

    def _probe() -> str:
        pytest.fail("groups probe must not run")

    return _probe
