"""Selection of the single artifact to wrap."""

from collections.abc import Iterable

from cargo_with.cargo.artifacts import ArtifactRecord, TargetKind
from cargo_with.cargo.command import CommandKind
from cargo_with.errors import AmbiguousCandidatesError, NoCandidateError

# Target kinds that produce something `cargo run` could execute
RUNNABLE_KINDS = (TargetKind.BIN, TargetKind.EXAMPLE, TargetKind.TEST)

HARNESS_HINT = (
    "Please use `--test`, `--bench`, `--example`, `--bin` or `--lib` "
    "to specify exactly what binary you want to examine"
)
RUN_HINT = (
    "Please use `--example` or `--bin` "
    "to specify exactly what binary you want to examine"
)
NO_HARNESS_HINT = "Make sure the package builds a test or bench target"
NO_RUNNABLE_HINT = "Make sure the package builds a binary, example or test target"


def is_candidate(record: ArtifactRecord, kind: CommandKind) -> bool:
    """Check if an artifact is eligible for the given command kind.

    Test and bench builds mark their harness binaries with a `test` profile,
    whatever the target kind is.
    """
    if kind.builds_harness:
        return record.profile.test
    return record.target.has_kind(RUNNABLE_KINDS)


def select_artifact(
    records: Iterable[ArtifactRecord], kind: CommandKind
) -> ArtifactRecord:
    """Return the one artifact matching `kind`.

    Raises NoCandidateError when nothing matches and AmbiguousCandidatesError
    when more than one artifact matches.
    """
    candidates = [record for record in records if is_candidate(record, kind)]

    if not candidates:
        hint = NO_HARNESS_HINT if kind.builds_harness else NO_RUNNABLE_HINT
        raise NoCandidateError(
            f"Found no possible candidates for `cargo {kind.value}`. {hint}"
        )

    if len(candidates) > 1:
        listing = "\n".join(f"\t- {c.describe()}" for c in candidates)
        hint = HARNESS_HINT if kind.builds_harness else RUN_HINT
        raise AmbiguousCandidatesError(
            f"Found more than one possible candidate:\n\n{listing}\n\n{hint}",
            candidates,
        )

    return candidates[0]
