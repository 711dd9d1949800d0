# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

EXEC = "exec"
REMOVE_DIR = "remove_dir"
ECHO = "echo"

COMMAND_KINDS = (EXEC, REMOVE_DIR, ECHO)


@dataclass(frozen=True)
class Command:
    """A single command inside a target body."""
    name: str
    kind: str = EXEC
    argv: Tuple[str, ...] = ()
    cwd: str | None = None       # relative to the project root
    path: str | None = None      # remove_dir only
    message: str | None = None   # echo only

    def __post_init__(self) -> None:
        if self.kind not in COMMAND_KINDS:
            raise ValueError(f"Unknown command kind: {self.kind!r} (expected one of {COMMAND_KINDS})")

    def describe(self) -> str:
        if self.kind == REMOVE_DIR:
            return f'if [ -d "{self.path}" ]; then rm -rf {self.path}; fi'
        if self.kind == ECHO:
            return f"echo {self.message}"
        return " ".join(self.argv)


@dataclass(frozen=True)
class Target:
    """
    A named unit of build work.

    `needs` lists the targets that must run BEFORE this target's own commands,
    in the order they are declared.
    """
    name: str
    commands: Tuple[Command, ...] = ()
    needs: Tuple[str, ...] = field(default_factory=tuple)
    description: Optional[str] = None

    @property
    def prerequisites(self) -> Tuple[str, ...]:
        return self.needs
