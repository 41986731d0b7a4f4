"""Cargo subcommand parsing and invocation."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from cargo_with.cargo.artifacts import ArtifactRecord, parse_artifacts
from cargo_with.config.schema import DEFAULT_CONFIG, CargoWithConfig
from cargo_with.errors import CargoError, UnsupportedCommandError

logger = logging.getLogger(__name__)

ARGS_SEPARATOR = "--"


class CommandKind(Enum):
    """Cargo subcommands whose artifacts can be wrapped."""

    RUN = "run"
    TEST = "test"
    BENCH = "bench"

    @classmethod
    def from_token(cls, token: str) -> CommandKind | None:
        """Map a cargo subcommand token to a kind, or None if unsupported."""
        for kind in cls:
            if kind.value == token:
                return kind
        return None

    @property
    def artifact_command(self) -> str:
        """The cargo subcommand that builds the artifact without running it."""
        if self is CommandKind.RUN:
            return "build"
        return self.value

    @property
    def builds_harness(self) -> bool:
        """True for kinds whose artifact is a test harness (test, bench)."""
        return self is not CommandKind.RUN


def split_cargo_tokens(tokens: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split tokens on the first `--` into cargo tokens and trailing args."""
    tokens = list(tokens)
    if ARGS_SEPARATOR in tokens:
        index = tokens.index(ARGS_SEPARATOR)
        return tokens[:index], tokens[index + 1 :]
    return tokens, []


@dataclass(frozen=True)
class CargoCommand:
    """A cargo subcommand with its extra flags and the args meant for the binary."""

    kind: CommandKind
    args: tuple[str, ...] = ()
    trailing_args: tuple[str, ...] = ()

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> CargoCommand:
        """Parse e.g. `["test", "--release", "--", "filter"]`.

        Raises UnsupportedCommandError if the first token is missing or is
        not one of run, test or bench.
        """
        head, trailing = split_cargo_tokens(tokens)
        if not head:
            raise UnsupportedCommandError("Empty cargo command")

        kind = CommandKind.from_token(head[0])
        if kind is None:
            supported = ", ".join(f"'{k.value}'" for k in CommandKind)
            raise UnsupportedCommandError(
                f"Unable to convert '{head[0]}' into a cargo subcommand "
                f"(supported: {supported})"
            )

        return cls(kind=kind, args=tuple(head[1:]), trailing_args=tuple(trailing))

    def cargo_args(self, config: CargoWithConfig = DEFAULT_CONFIG) -> list[str]:
        """Arguments passed to cargo, without the program name."""
        args = [self.kind.artifact_command, *config.base_cargo_args]
        if self.kind.builds_harness:
            args.append("--no-run")
        args.extend(self.args)
        return args

    def command_line(self, config: CargoWithConfig = DEFAULT_CONFIG) -> str:
        """Space separated cargo invocation, for messages."""
        return " ".join([config.cargo_program, *self.cargo_args(config)])

    def run(self, config: CargoWithConfig = DEFAULT_CONFIG) -> list[ArtifactRecord]:
        """Build with cargo and return the artifacts it reported."""
        command_line = self.command_line(config)
        logger.debug("Executing `%s`", command_line)

        try:
            result = subprocess.run(
                [config.cargo_program, *self.cargo_args(config)],
                capture_output=True,
            )
        except OSError as e:
            raise CargoError(
                f"Unable to run cargo command: `{command_line}` ({e})"
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace")
            stdout = result.stdout.decode("utf-8", errors="replace")
            raise CargoError(
                f"{stderr}\n{stdout}\n"
                "Cargo subcommand failed. "
                "Try running the original cargo command (without cargo-with)"
            )

        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CargoError(
                f"Output of `{command_line}` contained invalid UTF-8 characters"
            ) from e

        # JSON strings may contain U+2028 unescaped, so split on newlines only
        return list(parse_artifacts(output.split("\n")))
