"""Launcher registry and utilities."""

import os

from cargo_with.launch.base import Launcher
from cargo_with.launch.execvp import ExecLauncher
from cargo_with.launch.spawn import SpawnLauncher

LAUNCHERS: dict[str, type[Launcher]] = {
    "exec": ExecLauncher,
    "spawn": SpawnLauncher,
}

# Only POSIX execvp keeps the pid and hands over signals and the exit code
DEFAULT_LAUNCHER = "exec" if os.name == "posix" else "spawn"


def get_launcher(name: str | None = None) -> Launcher:
    """Get a launcher instance by name. Defaults to the platform's launcher."""
    launcher_name = name or DEFAULT_LAUNCHER
    if launcher_name not in LAUNCHERS:
        raise ValueError(f"Unknown launcher: {launcher_name}")
    return LAUNCHERS[launcher_name]()


__all__ = [
    "DEFAULT_LAUNCHER",
    "LAUNCHERS",
    "ExecLauncher",
    "Launcher",
    "SpawnLauncher",
    "get_launcher",
]
