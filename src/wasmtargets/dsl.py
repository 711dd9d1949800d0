# src/wasmtargets/dsl.py
from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from .dag import TargetTable
from .model import ECHO, EXEC, REMOVE_DIR, Command, Target

DONE = "Done"


# ---------------------------------------------------------------------
# Command helpers
# ---------------------------------------------------------------------

def exe(name: str, *argv: str, cwd: str | None = None) -> Command:
    """Create a command that runs an external program."""
    if not argv:
        raise ValueError(f"exe({name!r}) needs a program to run")
    return Command(name=name, kind=EXEC, argv=tuple(argv), cwd=cwd)


def remove_dir(path: str) -> Command:
    """Remove `path` recursively if it is a directory; no-op otherwise."""
    return Command(name=f"remove {path}", kind=REMOVE_DIR, path=path)


def echo(message: str = DONE) -> Command:
    return Command(name="echo", kind=ECHO, message=message)


# ---------------------------------------------------------------------
# Functional Target helper
# ---------------------------------------------------------------------

def target(
    name: str,
    *commands: Command,  # allow: target("x", exe(...), echo())
    needs: Optional[List[str]] = None,
    description: str | None = None,
    cwd: str | None = None,  # default cwd applied to exec commands missing cwd
) -> Target:
    if not commands and not needs:
        raise ValueError(f"target({name!r}) must have commands or prerequisites")

    final = list(commands)
    if cwd is not None:
        final = [
            c if c.kind != EXEC or c.cwd is not None else replace(c, cwd=cwd)
            for c in final
        ]

    return Target(
        name=name,
        commands=tuple(final),
        needs=tuple(needs or []),
        description=description,
    )


# ---------------------------------------------------------------------
# Builder API
# ---------------------------------------------------------------------

class TargetBuilder:
    def __init__(self, name: str):
        self.name = name
        self._needs: list[str] = []
        self._commands: list[Command] = []
        self._description: str | None = None

    def depends_on(self, *target_names: str):
        self._needs.extend(target_names)
        return self

    def run(self, name: str, *argv: str, cwd: str | None = None):
        self._commands.append(exe(name, *argv, cwd=cwd))
        return self

    def remove_dir(self, path: str):
        self._commands.append(remove_dir(path))
        return self

    def echo(self, message: str = DONE):
        self._commands.append(echo(message))
        return self

    def describe(self, text: str):
        self._description = text
        return self

    def build(self) -> Target:
        return target(
            self.name,
            *self._commands,
            needs=self._needs,
            description=self._description,
        )


def build(name: str) -> TargetBuilder:
    """Convenience: build('release').run(...).echo().build()"""
    return TargetBuilder(name)


# ---------------------------------------------------------------------
# Table helper
# ---------------------------------------------------------------------

def table(*targets: Target) -> TargetTable:
    """
    Target table helper. The first target passed is the default one.

        from wasmtargets import table, target, exe, echo

        def targets():
            return table(
                target("all", needs=["build"]),
                target("build", exe("Build", "wasm-pack", "build"), echo()),
            )
    """
    return TargetTable(targets)
