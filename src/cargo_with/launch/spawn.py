"""Launcher that runs the wrapper command as a child process."""

import logging
import subprocess
from collections.abc import Sequence

from cargo_with.errors import ChildSignaledError, LaunchError
from cargo_with.launch.base import Launcher

logger = logging.getLogger(__name__)


class SpawnLauncher(Launcher):
    """Launcher that waits for the child and propagates its exit code."""

    name = "spawn"

    def launch(self, command: Sequence[str]) -> int:
        """Run `command` to completion and return its exit code.

        Raises LaunchError if it cannot be started and ChildSignaledError if
        it was killed by a signal.
        """
        argv = list(command)
        try:
            result = subprocess.run(argv)
        except OSError as e:
            raise LaunchError(
                f"Failed to spawn child process `{self.describe(argv)}`: {e}"
            ) from e

        if result.returncode < 0:
            raise ChildSignaledError(self.describe(argv), -result.returncode)

        logger.debug("Child exited with code %d", result.returncode)
        return result.returncode
