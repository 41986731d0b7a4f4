"""Build, select and launch pipeline for `cargo with`."""

import logging
from collections.abc import Sequence

from cargo_with.cargo import CargoCommand, select_artifact
from cargo_with.config.schema import DEFAULT_CONFIG, CargoWithConfig
from cargo_with.errors import InvalidArtifactPathError
from cargo_with.launch import Launcher, get_launcher
from cargo_with.template import WithCommand

logger = logging.getLogger(__name__)


def resolve_artifact_path(path: str) -> str:
    """Ensure the artifact path can be passed on as UTF-8 text."""
    try:
        path.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InvalidArtifactPathError(
            "Filename of artifact contains non-valid UTF-8 characters"
        ) from e
    return path


def build_command(
    with_cmd: str,
    cargo_tokens: Sequence[str],
    config: CargoWithConfig = DEFAULT_CONFIG,
) -> list[str]:
    """Build the artifact and return the expanded wrapper command.

    `cargo_tokens` is the cargo subcommand with its flags, optionally
    followed by `--` and the arguments for the artifact.
    """
    cargo_cmd = CargoCommand.from_tokens(cargo_tokens)
    wrapper = WithCommand.from_raw(with_cmd, cargo_cmd.trailing_args)

    records = cargo_cmd.run(config)
    logger.debug("Cargo reported %d artifact(s)", len(records))

    record = select_artifact(records, cargo_cmd.kind)
    artifact_path = resolve_artifact_path(record.artifact())
    logger.info("Selected %s: %s", record.describe(), artifact_path)

    return wrapper.expand(artifact_path)


def run_with(
    with_cmd: str,
    cargo_tokens: Sequence[str],
    config: CargoWithConfig = DEFAULT_CONFIG,
    launcher: Launcher | None = None,
) -> int:
    """Run the whole pipeline and launch the wrapper command.

    Returns the exit code to terminate with; the exec launcher does not return.
    """
    command = build_command(with_cmd, cargo_tokens, config)
    if launcher is None:
        launcher = get_launcher(config.launcher)

    logger.debug("Executing `%s`", " ".join(command))
    return launcher.launch(command)
