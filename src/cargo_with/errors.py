"""Errors raised while building, selecting and launching artifacts."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cargo_with.cargo.artifacts import ArtifactRecord


class CargoWithError(Exception):
    """Base exception for user-facing cargo-with failures."""


class UnsupportedCommandError(CargoWithError):
    """Raised when the cargo subcommand is missing or not run/test/bench."""


class CargoError(CargoWithError):
    """Raised when the cargo invocation fails or produces unusable output."""


class SelectionError(CargoWithError):
    """Raised when the build output does not yield exactly one artifact."""


class NoCandidateError(SelectionError):
    """Raised when no artifact matches the command kind."""


class AmbiguousCandidatesError(SelectionError):
    """Raised when more than one artifact matches the command kind."""

    def __init__(self, message: str, candidates: list[ArtifactRecord]) -> None:
        super().__init__(message)
        self.candidates = candidates


class MissingArtifactPathError(CargoWithError):
    """Raised when a selected artifact record lists no output file."""


class InvalidArtifactPathError(CargoWithError):
    """Raised when the artifact path cannot be represented as UTF-8."""


class EmptyTemplateError(CargoWithError):
    """Raised when the wrapper command expands to nothing."""


class LaunchError(CargoWithError):
    """Raised when the wrapper command cannot be started."""


class ChildSignaledError(LaunchError):
    """Raised when the spawned wrapper command was killed by a signal."""

    def __init__(self, command: str, signal_number: int) -> None:
        super().__init__(
            f"Child process `{command}` was terminated by signal {signal_number}"
        )
        self.signal_number = signal_number
