"""Expansion of the wrapper command template."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from cargo_with.errors import EmptyTemplateError

BIN_PLACEHOLDER = "{bin}"
ARGS_PLACEHOLDER = "{args}"


def expand(
    template: str, trailing_args: Sequence[str], artifact_path: str
) -> list[str]:
    """Expand a wrapper command template into an argument vector.

    The template is split on whitespace only; quotes are not interpreted.
    `{bin}` and `{args}` are appended (in that order) when no token equals
    them. A token equal to `{args}` is replaced by the trailing args, and
    `{bin}` is substituted anywhere inside the other tokens, so
    `--args={bin}` works.

    Raises EmptyTemplateError for a blank template.
    """
    tokens = template.split()
    if not tokens:
        raise EmptyTemplateError("Empty with command")

    if BIN_PLACEHOLDER not in tokens:
        tokens.append(BIN_PLACEHOLDER)
    if ARGS_PLACEHOLDER not in tokens:
        tokens.append(ARGS_PLACEHOLDER)

    expanded: list[str] = []
    for token in tokens:
        if token == ARGS_PLACEHOLDER:
            expanded.extend(trailing_args)
        else:
            expanded.append(token.replace(BIN_PLACEHOLDER, artifact_path))

    return expanded


@dataclass(frozen=True)
class WithCommand:
    """The wrapper command given on the command line and the args for `{args}`."""

    template: str
    trailing_args: tuple[str, ...] = ()

    @classmethod
    def from_raw(cls, raw: str, trailing_args: Sequence[str] = ()) -> WithCommand:
        """Create from the raw template string.

        Raises EmptyTemplateError for a blank template.
        """
        if not raw.strip():
            raise EmptyTemplateError("Empty with command")
        return cls(template=raw.strip(), trailing_args=tuple(trailing_args))

    def expand(self, artifact_path: str) -> list[str]:
        """Return the ready-to-execute argument vector for `artifact_path`."""
        return expand(self.template, self.trailing_args, artifact_path)
