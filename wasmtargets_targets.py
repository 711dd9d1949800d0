# wasmtargets_targets.py
# Targets for this repo's own demo crate: the stock table plus a format check.
from __future__ import annotations

from wasmtargets import build, table, target
from wasmtargets.dsl import echo, remove_dir
from wasmtargets.step_workflows import cargo_fmt, wasm_pack_build


def targets():
    return table(
        target("all", needs=["clean", "release"]),
        target("clean", remove_dir("pkg"), echo()),
        target("debug", wasm_pack_build("dev"), echo()),
        target("release", wasm_pack_build("release", default_features=False), echo()),
        target("format", cargo_fmt()),

        # CI: fail if sources are not formatted, then do a full release build
        build("ci")
        .depends_on("all")
        .run("Format check", "cargo", "fmt", "--check")
        .echo()
        .describe("Format check + release build")
        .build(),
    )
