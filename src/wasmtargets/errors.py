# errors.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class BuildError(Exception):
    """Base class for everything the target runner raises."""


@dataclass
class UnknownTarget(BuildError):
    name: str
    known: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return f"No such target: {self.name!r}. Known targets: {self.known}"


@dataclass
class CyclicDependency(BuildError):
    path: List[str]

    def __str__(self) -> str:
        return f"Target dependency cycle: {' -> '.join(self.path)}"


@dataclass
class MissingPrerequisite(BuildError):
    target: str
    missing: str

    def __str__(self) -> str:
        return f"Target '{self.target}' needs missing target '{self.missing}'"


@dataclass
class DuplicateTarget(BuildError):
    name: str

    def __str__(self) -> str:
        return f"Duplicate target name: {self.name}"


@dataclass
class CommandFailed(BuildError):
    """
    An external command (or filesystem step) reported failure.

    command_index is the 0-based position inside the target's own commands.
    """
    target: str
    command_index: int
    exit_status: int
    command: str = ""

    def __str__(self) -> str:
        return (
            f"[{self.target}] command #{self.command_index} failed "
            f"(exit={self.exit_status}): {self.command}"
        )


@dataclass
class TargetsFileError(BuildError):
    path: str
    reason: str

    def __str__(self) -> str:
        return f"Invalid targets file {self.path}: {self.reason}"
