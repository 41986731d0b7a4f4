"""Launcher that replaces the current process image."""

import logging
import os
import sys
from collections.abc import Sequence

from cargo_with.errors import LaunchError
from cargo_with.launch.base import Launcher

logger = logging.getLogger(__name__)


class ExecLauncher(Launcher):
    """Launcher using execvp so signals and exit codes reach the caller directly."""

    name = "exec"

    def launch(self, command: Sequence[str]) -> int:
        """Replace this process with `command`. Only returns by raising."""
        argv = list(command)
        logger.debug("Replacing process with `%s`", self.describe(argv))

        # Buffered output would be lost once the image is replaced
        sys.stdout.flush()
        sys.stderr.flush()

        try:
            os.execvp(argv[0], argv)
        except OSError as e:
            raise LaunchError(
                f"Failed to spawn child process `{self.describe(argv)}`: {e}"
            ) from e
        return 0
