from .cargo import cargo_fmt
from .wasm_pack import wasm_pack_build

__all__ = ["cargo_fmt", "wasm_pack_build"]
