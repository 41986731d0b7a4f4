"""Base launcher class."""

import shlex
from abc import ABC, abstractmethod
from collections.abc import Sequence


class Launcher(ABC):
    """Base class for the ways of starting the wrapper command."""

    name: str

    @abstractmethod
    def launch(self, command: Sequence[str]) -> int:
        """Start `command`, whose first element is the executable.

        Returns the exit code to terminate with. Launchers that replace the
        current process never return on success.
        """
        ...

    @staticmethod
    def describe(command: Sequence[str]) -> str:
        """Render a command for messages."""
        return shlex.join(command)
