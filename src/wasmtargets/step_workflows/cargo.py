# step_workflows/cargo.py
from __future__ import annotations

from ..dsl import exe
from ..model import Command


def cargo_fmt(*, program: str = "cargo", check: bool = False, cwd: str | None = None) -> Command:
    """Create a `cargo fmt` command (rewrites sources in place unless `check`)."""
    argv = [program, "fmt"]
    if check:
        argv.append("--check")
    return exe("cargo fmt", *argv, cwd=cwd)
