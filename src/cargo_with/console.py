"""Shared rich consoles and logging setup."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

console = Console()
err_console = Console(stderr=True)

LOG_ENV_VAR = "CARGO_WITH_LOG"

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def resolve_log_level(verbosity: int = 0, env_value: str | None = None) -> int:
    """Resolve the log level from -v flags and the CARGO_WITH_LOG variable.

    The environment variable wins when it names a known level.
    """
    if env_value:
        level = logging.getLevelName(env_value.strip().upper())
        if isinstance(level, int):
            return level
    index = min(max(verbosity, 0), len(_VERBOSITY_LEVELS) - 1)
    return _VERBOSITY_LEVELS[index]


def configure_logging(verbosity: int = 0) -> None:
    """Route log records to stderr through rich."""
    level = resolve_log_level(verbosity, os.environ.get(LOG_ENV_VAR))
    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    logging.basicConfig(level=level, format="%(message)s", handlers=[handler])
    logging.getLogger("cargo_with").setLevel(level)
