"""Shared fixtures: cargo JSON messages as cargo emits them."""

import json
from collections.abc import Callable
from typing import Any

import pytest

PACKAGE_ID = "hello 0.1.0 (path+file:///home/user/hello)"


def artifact_message(
    name: str = "hello",
    kinds: tuple[str, ...] = ("bin",),
    test: bool = False,
    filenames: tuple[str, ...] | None = None,
    reason: str = "compiler-artifact",
) -> dict[str, Any]:
    """Build a compiler-artifact message dict."""
    if filenames is None:
        filenames = (f"/home/user/hello/target/debug/{name}",)
    return {
        "reason": reason,
        "package_id": PACKAGE_ID,
        "manifest_path": "/home/user/hello/Cargo.toml",
        "target": {
            "kind": list(kinds),
            "crate_types": ["bin" if "bin" in kinds else "lib"],
            "name": name,
            "src_path": f"/home/user/hello/src/{name}.rs",
            "edition": "2021",
            "doc": True,
            "doctest": False,
            "test": True,
        },
        "profile": {
            "opt_level": "0",
            "debuginfo": 2,
            "debug_assertions": True,
            "overflow_checks": True,
            "test": test,
        },
        "features": [],
        "filenames": list(filenames),
        "executable": filenames[0] if filenames else None,
        "fresh": False,
    }


BUILD_SCRIPT_EXECUTED = {
    "reason": "build-script-executed",
    "package_id": PACKAGE_ID,
    "linked_libs": [],
    "linked_paths": [],
    "cfgs": [],
    "env": [],
    "out_dir": "/home/user/hello/target/debug/build/hello-1234/out",
}

BUILD_FINISHED = {"reason": "build-finished", "success": True}


@pytest.fixture
def make_line() -> Callable[..., str]:
    """Factory for one line of cargo JSON output."""

    def _make_line(**kwargs: Any) -> str:
        return json.dumps(artifact_message(**kwargs))

    return _make_line


@pytest.fixture
def build_script_line() -> str:
    return json.dumps(BUILD_SCRIPT_EXECUTED)


@pytest.fixture
def build_finished_line() -> str:
    return json.dumps(BUILD_FINISHED)
