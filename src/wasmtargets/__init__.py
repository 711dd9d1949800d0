from .dsl import build, echo, exe, remove_dir, table, target, TargetBuilder
from .dag import TargetTable
from .errors import BuildError, CommandFailed, CyclicDependency, UnknownTarget
from .model import Command, Target
from .runner import TargetRunner, load_targets
from .targets import default_targets

__all__ = [
    "build", "echo", "exe", "remove_dir", "table", "target", "TargetBuilder",
    "TargetTable", "BuildError", "CommandFailed", "CyclicDependency", "UnknownTarget",
    "Command", "Target", "TargetRunner", "load_targets", "default_targets",
]
