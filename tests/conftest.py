from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pytest

from wasmtargets.ui.console import Console, set_console


class RecordingExecutor:
    """Records invocations instead of spawning processes."""

    def __init__(self, statuses: Dict[str, int] | None = None):
        # program argv joined with spaces -> exit status
        self.statuses = statuses or {}
        self.calls: List[Tuple[Tuple[str, ...], Path]] = []

    def run(self, argv: Sequence[str], cwd: Path) -> int:
        self.calls.append((tuple(argv), cwd))
        return self.statuses.get(" ".join(argv), 0)

    @property
    def commands(self) -> List[str]:
        return [" ".join(argv) for argv, _cwd in self.calls]


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def console() -> Console:
    c = Console()
    set_console(c)
    return c
