"""Cargo invocation, artifact parsing and selection."""

from cargo_with.cargo.artifacts import (
    ArtifactRecord,
    Profile,
    Target,
    TargetKind,
    parse_artifact_line,
    parse_artifacts,
)
from cargo_with.cargo.command import (
    CargoCommand,
    CommandKind,
    split_cargo_tokens,
)
from cargo_with.cargo.select import select_artifact

__all__ = [
    "ArtifactRecord",
    "CargoCommand",
    "CommandKind",
    "Profile",
    "Target",
    "TargetKind",
    "parse_artifact_line",
    "parse_artifacts",
    "select_artifact",
    "split_cargo_tokens",
]
