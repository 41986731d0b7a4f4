"""Artifact records decoded from cargo's JSON message stream."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cargo_with.errors import MissingArtifactPathError

logger = logging.getLogger(__name__)

COMPILER_ARTIFACT = "compiler-artifact"


class TargetKind(Enum):
    """Target kinds as cargo spells them in `target.kind`."""

    BIN = "bin"
    EXAMPLE = "example"
    TEST = "test"
    BENCH = "bench"
    LIB = "lib"
    RLIB = "rlib"
    DYLIB = "dylib"
    CDYLIB = "cdylib"
    STATICLIB = "staticlib"
    PROC_MACRO = "proc-macro"
    CUSTOM_BUILD = "custom-build"

    def __str__(self) -> str:
        return self.value


def _require_bool(data: dict[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be a boolean, got {type(value).__name__}")
    return value


def _require_str_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    value = data[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"'{key}' must be a list of strings")
    return tuple(value)


@dataclass(frozen=True)
class Profile:
    """Compilation profile of an artifact."""

    test: bool
    debug_assertions: bool = False
    opt_level: str = "0"
    overflow_checks: bool = False
    debuginfo: int | str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Profile:
        """Create from cargo's `profile` object. `test` is required."""
        return cls(
            test=_require_bool(data, "test"),
            debug_assertions=bool(data.get("debug_assertions", False)),
            opt_level=str(data.get("opt_level", "0")),
            overflow_checks=bool(data.get("overflow_checks", False)),
            debuginfo=data.get("debuginfo"),
        )


@dataclass(frozen=True)
class Target:
    """The cargo target an artifact was compiled from."""

    name: str
    kind: tuple[TargetKind, ...]
    edition: str = ""
    crate_types: tuple[str, ...] = ()
    src_path: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Target:
        """Create from cargo's `target` object. `kind` must be a non-empty list."""
        kinds = _require_str_list(data, "kind")
        if not kinds:
            raise ValueError("'kind' must not be empty")
        crate_types = data.get("crate_types", [])
        return cls(
            name=str(data["name"]),
            kind=tuple(TargetKind(k) for k in kinds),
            edition=str(data.get("edition", "")),
            crate_types=tuple(str(c) for c in crate_types),
            src_path=str(data.get("src_path", "")),
        )

    def has_kind(self, kinds: Iterable[TargetKind]) -> bool:
        """Check if any of this target's kinds is in `kinds`."""
        wanted = set(kinds)
        return any(kind in wanted for kind in self.kind)


@dataclass(frozen=True)
class ArtifactRecord:
    """A single `compiler-artifact` message from cargo."""

    package_id: str
    profile: Profile
    target: Target
    filenames: tuple[str, ...]
    features: tuple[str, ...] = ()
    fresh: bool = False
    reason: str = COMPILER_ARTIFACT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArtifactRecord:
        """Create from a decoded cargo message.

        Raises ValueError, KeyError or TypeError when the message is not a
        compiler artifact or lacks the fields selection depends on. Unknown
        keys are ignored.
        """
        reason = data.get("reason")
        if reason != COMPILER_ARTIFACT:
            raise ValueError(f"Not a compiler artifact: {reason!r}")
        features = data.get("features", [])
        return cls(
            package_id=str(data.get("package_id", "")),
            profile=Profile.from_dict(data["profile"]),
            target=Target.from_dict(data["target"]),
            filenames=_require_str_list(data, "filenames"),
            features=tuple(str(f) for f in features),
            fresh=bool(data.get("fresh", False)),
            reason=reason,
        )

    def artifact(self) -> str:
        """Return the primary output file of this artifact."""
        if not self.filenames:
            raise MissingArtifactPathError(
                f"Artifact record for '{self.target.name}' has no output path"
            )
        return self.filenames[0]

    def describe(self) -> str:
        """Short human-readable label: target name and its first kind."""
        return f"{self.target.name} ({self.target.kind[0]})"


def parse_artifact_line(line: str) -> ArtifactRecord | None:
    """Parse one line of cargo output.

    Returns None for anything that is not a well-formed compiler artifact,
    e.g. build-script-executed notices or plain text.
    """
    stripped = line.strip()
    if not stripped:
        return None

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError:
        logger.debug("Skipping non-JSON line: %s", stripped)
        return None

    if not isinstance(data, dict):
        logger.debug("Skipping non-object JSON line: %s", stripped)
        return None

    try:
        return ArtifactRecord.from_dict(data)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.debug("Skipping cargo message (%s): %s", e, stripped)
        return None


def parse_artifacts(lines: Iterable[str]) -> Iterator[ArtifactRecord]:
    """Lazily parse cargo output lines, dropping anything that is not an artifact."""
    for line in lines:
        record = parse_artifact_line(line)
        if record is not None:
            yield record
