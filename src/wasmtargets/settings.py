from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class Settings:
    root: str = "."
    package_dir: str = "pkg"
    packager: str = "wasm-pack"
    cargo: str = "cargo"
    verbose: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        root=env.get("WASMTARGETS_ROOT", "."),
        package_dir=env.get("WASMTARGETS_PACKAGE_DIR", "pkg"),
        packager=env.get("WASMTARGETS_PACKAGER", "wasm-pack"),
        cargo=env.get("WASMTARGETS_CARGO", "cargo"),
        verbose=bool(env.get("VERBOSE", "")),
    )
