"""Command-line interface for cargo-with."""

import logging

import click

from cargo_with import __version__
from cargo_with.config import COMMAND_DESCRIPTION, COMMAND_NAME, load_config
from cargo_with.config.schema import CargoWithConfig
from cargo_with.console import configure_logging, console, err_console
from cargo_with.errors import CargoWithError
from cargo_with.launch import DEFAULT_LAUNCHER, LAUNCHERS, get_launcher
from cargo_with.runner import run_with

logger = logging.getLogger(__name__)

WITH_CMD_HELP = (
    "WITH_CMD is executed with the cargo-created binary. Use {bin} to denote "
    "the binary and {args} to denote the arguments passed through cargo "
    "following '--'; if omitted, {bin} and {args} are added as the last "
    "arguments. CARGO_CMD is the cargo command `run`, `test` or `bench`."
)


def version_callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return
    console.print(f"cargo-with [bold cyan]{__version__}[/bold cyan]")
    ctx.exit()


def _print_error(error: Exception) -> None:
    """Print an error to stderr without interpreting rich markup."""
    err_console.print(
        str(error),
        style="red",
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


# Cargo runs `cargo-with with ...`, so the program poses as `cargo`
@click.group(name="cargo", help=COMMAND_DESCRIPTION)
@click.option(
    "--version",
    is_flag=True,
    callback=version_callback,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
def main() -> None:
    """cargo-with entry point."""


@main.command(
    name=COMMAND_NAME,
    help=f"{COMMAND_DESCRIPTION}\n\n{WITH_CMD_HELP}",
    context_settings={
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
@click.argument("with_cmd")
@click.argument("cargo_cmd", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--cargo",
    "cargo",
    help="Cargo executable to build with (overrides the config `cargo` key).",
)
@click.option(
    "--launcher",
    "-l",
    type=click.Choice(list(LAUNCHERS.keys())),
    default=DEFAULT_LAUNCHER,
    help="How to start WITH_CMD: replace this process or spawn a child.",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Increase log verbosity (-v for info, -vv for debug).",
)
@click.pass_context
def with_command(
    ctx: click.Context,
    with_cmd: str,
    cargo_cmd: tuple[str, ...],
    cargo: str | None,
    launcher: str,
    verbose: int,
) -> None:
    """Run a cargo artifact through WITH_CMD."""
    configure_logging(verbose)
    config = load_config()

    def _from_cli(param_name: str) -> bool:
        """Check if a parameter was explicitly set on the command line."""
        source = ctx.get_parameter_source(param_name)
        return source == click.core.ParameterSource.COMMANDLINE

    if cargo and _from_cli("cargo"):
        config = config.merge(CargoWithConfig(cargo=cargo))
    if not _from_cli("launcher") and config.launcher:
        launcher = config.launcher

    # Arguments are not interspersed, so the separator before the cargo
    # command reaches us as a plain token
    tokens = list(cargo_cmd)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]

    logger.debug("With command: %s", with_cmd)
    logger.debug("Cargo command: %s", " ".join(tokens))

    try:
        exit_code = run_with(with_cmd, tokens, config, get_launcher(launcher))
    except CargoWithError as e:
        _print_error(e)
        raise SystemExit(1) from None

    raise SystemExit(exit_code)
