from __future__ import annotations

import os
import runpy
import shutil
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence

from .dag import TargetTable
from .errors import BuildError, CommandFailed, TargetsFileError
from .model import ECHO, EXEC, REMOVE_DIR, Command, Target
from .ui.console import Console, get_console

TOOL_HINTS = {
    "wasm-pack": "Install wasm-pack (e.g., cargo install wasm-pack) or fix PATH.",
    "cargo": "Install the Rust toolchain (https://rustup.rs) or fix PATH.",
}

# Shell convention for "command not found".
EXIT_NOT_FOUND = 127


# ----------------------------------------------------------------------
# Executors
# ----------------------------------------------------------------------

class Executor(Protocol):
    def run(self, argv: Sequence[str], cwd: Path) -> int:
        """Run argv in cwd, wait for it, return its exit status."""
        ...


class SubprocessExecutor:
    """Runs commands as child processes; their output goes straight to the terminal."""

    def __init__(self, env: Optional[Dict[str, str]] = None):
        self.env = env

    def run(self, argv: Sequence[str], cwd: Path) -> int:
        env = os.environ.copy()
        env.update(self.env or {})

        try:
            proc = subprocess.run(
                list(argv),
                shell=False,
                cwd=str(cwd),
                env=env,
            )
        except FileNotFoundError:
            tool = argv[0]
            get_console().print_error(
                "Tool not found",
                f"{tool} is not available",
                suggestion=TOOL_HINTS.get(Path(tool).name, f"Install {tool} or fix PATH."),
            )
            return EXIT_NOT_FOUND

        return proc.returncode


# ----------------------------------------------------------------------
# Target file loading (local file/module)
# ----------------------------------------------------------------------

def load_targets(path: str | Path) -> TargetTable:
    """
    Load a target table from a python file path.

    The file must define either:
      - targets() -> TargetTable | List[Target]
      - TARGETS = [Target, ...]
    """
    tf_path = Path(path).expanduser().resolve()
    if not tf_path.exists():
        raise FileNotFoundError(f"Targets file not found: {tf_path}")
    if tf_path.suffix != ".py":
        raise TargetsFileError(str(tf_path), f"must be a .py file, got: {tf_path.name}")

    module_name = f"wasmtargets_targets_{tf_path.stem}"
    try:
        globals_dict = runpy.run_path(str(tf_path), run_name=module_name)

        found = None
        if "targets" in globals_dict and callable(globals_dict["targets"]):
            found = globals_dict["targets"]()
        elif "TARGETS" in globals_dict:
            found = globals_dict["TARGETS"]

        if isinstance(found, TargetTable):
            return found
        if isinstance(found, (list, tuple)) and found and all(isinstance(t, Target) for t in found):
            return TargetTable(found)
    except BuildError:
        raise
    except Exception as e:
        raise TargetsFileError(str(tf_path), f"{type(e).__name__}: {e}") from e

    raise TargetsFileError(
        str(tf_path),
        "define targets() -> TargetTable | List[Target] or TARGETS = [Target, ...]",
    )


# ----------------------------------------------------------------------
# Runner
# ----------------------------------------------------------------------

class TargetRunner:
    """
    Runs a target and its prerequisites against a project root.

    Everything is sequential: a prerequisite (and its own prerequisites) runs
    before the target that needs it, each target at most once per `run()`.
    The first failing command aborts the whole invocation.
    """

    def __init__(
        self,
        table: TargetTable,
        root: str | Path = ".",
        executor: Optional[Executor] = None,
        console: Optional[Console] = None,
    ):
        self.table = table
        self.root = Path(root).resolve()
        self.executor = executor or SubprocessExecutor()
        self.console = console or get_console()

    def run(self, name: str | None = None) -> List[str]:
        # Plan first so an unknown name or a cycle executes nothing.
        order = self.table.plan(name)
        self.console.print_debug(f"plan: {order}")

        for target_name in order:
            self._run_target(self.table[target_name])

        return order

    def _run_target(self, target: Target) -> None:
        self.console.print_target_start(target.name)
        for index, command in enumerate(target.commands):
            status = self._run_command(target, command)
            if status != 0:
                raise CommandFailed(
                    target=target.name,
                    command_index=index,
                    exit_status=status,
                    command=command.describe(),
                )

    def _run_command(self, target: Target, command: Command) -> int:
        if command.kind == EXEC:
            self.console.print_command(command.describe())
            cwd = (self.root / (command.cwd or ".")).resolve()
            if not cwd.is_dir():
                raise FileNotFoundError(f"[{target.name}] command '{command.name}' cwd not found: {cwd}")
            return self.executor.run(command.argv, cwd)

        if command.kind == REMOVE_DIR:
            self.console.print_command(command.describe())
            # Lexical normalization: a symlinked pkg is judged by where the link lives.
            path = Path(os.path.abspath(self.root / (command.path or "")))
            if self.root not in path.parents:
                raise BuildError(f"[{target.name}] refusing to remove a path outside the project root: {path}")
            if not path.is_dir():
                self.console.print_debug(f"{path} does not exist, nothing to remove")
                return 0
            try:
                if path.is_symlink():
                    path.unlink()
                else:
                    shutil.rmtree(path)
            except OSError as e:
                self.console.print_error("Removal failed", f"Could not remove {path}", details=[str(e)])
                return 1
            return 0

        if command.kind == ECHO:
            self.console.print_marker(command.message or "")
            return 0

        raise ValueError(f"[{target.name}] unknown command kind: {command.kind!r}")
