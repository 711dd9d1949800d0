# targets.py
# The built-in target table for a wasm-pack library.
from __future__ import annotations

from typing import Optional

from .dag import TargetTable
from .dsl import echo, remove_dir, table, target
from .settings import Settings
from .step_workflows import cargo_fmt, wasm_pack_build


def default_targets(settings: Optional[Settings] = None) -> TargetTable:
    s = settings or Settings()
    return table(
        # First declared target is the default.
        target(
            "all",
            needs=["clean", "release"],
            description="Clean, then build the release package",
        ),
        target(
            "clean",
            remove_dir(s.package_dir),
            echo(),
            description=f"Remove the {s.package_dir}/ package directory",
        ),
        target(
            "debug",
            wasm_pack_build("dev", platform="web", program=s.packager),
            echo(),
            description="Development build for the web target",
        ),
        target(
            "release",
            wasm_pack_build("release", platform="web", default_features=False, program=s.packager),
            echo(),
            description="Release build for the web target, default features disabled",
        ),
        target(
            "format",
            cargo_fmt(program=s.cargo),
            description="Reformat the Rust sources in place",
        ),
    )
