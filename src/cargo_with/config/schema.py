"""Configuration schema for cargo-with."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, cast

logger = logging.getLogger(__name__)

LauncherType = Literal["exec", "spawn"]

COMMAND_NAME = "with"
COMMAND_DESCRIPTION = (
    "A third-party cargo extension to run the build artifacts through tools like `gdb`"
)

DEFAULT_CARGO = "cargo"
# --quiet keeps non-JSON status lines out of stdout
DEFAULT_CARGO_ARGS: tuple[str, ...] = ("--message-format=json", "--quiet")
# Artifacts can only be parsed from JSON messages
REQUIRED_CARGO_ARG_PREFIX = "--message-format=json"


@dataclass(frozen=True)
class CargoWithConfig:
    """cargo-with configuration schema.

    None values indicate "not set" and will use defaults or be inherited.
    """

    # Program used to build the artifacts
    cargo: str | None = None
    # Flags always passed to cargo before the user's own flags
    cargo_args: tuple[str, ...] | None = None
    # How the wrapper command is started; None picks the platform default
    launcher: LauncherType | None = None

    @property
    def cargo_program(self) -> str:
        """The cargo executable to invoke."""
        return self.cargo or DEFAULT_CARGO

    @property
    def base_cargo_args(self) -> tuple[str, ...]:
        """The fixed flags requesting machine-readable, quiet output."""
        if self.cargo_args is None:
            return DEFAULT_CARGO_ARGS
        return self.cargo_args

    def merge(self, other: CargoWithConfig) -> CargoWithConfig:
        """Merge another config into this one.

        Values from `other` take precedence when they are not None.
        Returns a new CargoWithConfig instance.
        """
        return CargoWithConfig(
            cargo=other.cargo if other.cargo is not None else self.cargo,
            cargo_args=(
                other.cargo_args if other.cargo_args is not None else self.cargo_args
            ),
            launcher=other.launcher if other.launcher is not None else self.launcher,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CargoWithConfig:
        """Create a CargoWithConfig from a dictionary.

        Unknown keys and values of the wrong type are ignored, as is a
        `cargo_args` list that does not request JSON messages.
        """
        cargo_raw = data.get("cargo")
        cargo = str(cargo_raw) if cargo_raw else None

        cargo_args_raw = data.get("cargo_args")
        cargo_args: tuple[str, ...] | None = None
        if isinstance(cargo_args_raw, (list, tuple)):
            cargo_args = tuple(str(a) for a in cargo_args_raw)
        elif isinstance(cargo_args_raw, str):
            cargo_args = tuple(cargo_args_raw.split())
        if cargo_args is not None and not any(
            a.startswith(REQUIRED_CARGO_ARG_PREFIX) for a in cargo_args
        ):
            logger.warning(
                "Ignoring cargo_args without %s: %s",
                REQUIRED_CARGO_ARG_PREFIX,
                " ".join(cargo_args),
            )
            cargo_args = None

        launcher_raw = data.get("launcher")
        launcher: LauncherType | None = None
        if launcher_raw in ("exec", "spawn"):
            launcher = cast(LauncherType, launcher_raw)

        return cls(cargo=cargo, cargo_args=cargo_args, launcher=launcher)


# Default configuration values (used when not specified anywhere)
DEFAULT_CONFIG = CargoWithConfig(
    cargo=DEFAULT_CARGO,
    cargo_args=DEFAULT_CARGO_ARGS,
)
