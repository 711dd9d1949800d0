# step_workflows/wasm_pack.py
from __future__ import annotations

from typing import List

from ..dsl import exe
from ..model import Command

PROFILES = ("dev", "release", "profiling")


# ---------------------------------------------------------------------
# Packager step helper
# ---------------------------------------------------------------------

def wasm_pack_build(
    profile: str,
    *,
    platform: str = "web",
    default_features: bool = True,
    program: str = "wasm-pack",
    cwd: str | None = None,
) -> Command:
    """
    Create a `wasm-pack build` command.

    Cargo flags go after the `--` separator, so disabling default features
    ends up as `-- --no-default-features`.
    """
    if profile not in PROFILES:
        raise ValueError(f"Unknown wasm-pack profile: {profile!r} (expected one of {PROFILES})")

    argv: List[str] = [program, "build", f"--{profile}", "--target", platform]
    if not default_features:
        argv.extend(["--", "--no-default-features"])

    return exe(f"wasm-pack build ({profile})", *argv, cwd=cwd)
