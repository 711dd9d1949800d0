"""Console output formatting utilities for wasmtargets."""

from __future__ import annotations

import sys
from typing import Iterable, Optional

from ..model import Target


class Console:
    """Centralized console output formatting."""

    def __init__(self, debug: bool = False, verbose: bool = False):
        """
        Initialize console formatter.

        Args:
            debug: If True, show detailed output including stack traces
            verbose: If True, echo each command before it runs
        """
        self.debug = debug
        self.verbose = verbose

    def print_target_start(self, name: str) -> None:
        """Print target start message (verbose only)."""
        if self.verbose:
            print(f"==> {name}")

    def print_command(self, line: str) -> None:
        """Echo a command line before running it (verbose only)."""
        if self.verbose:
            print(line)

    def print_marker(self, message: str) -> None:
        """Print a completion marker."""
        print(message)

    def print_targets(self, targets: Iterable[Target], default: str) -> None:
        """Print the target table."""
        for t in targets:
            suffix = " (default)" if t.name == default else ""
            needs = f" <- {', '.join(t.needs)}" if t.needs else ""
            print(f"  {t.name}{suffix}{needs}")
            if t.description:
                print(f"      {t.description}")

    def print_error(
        self,
        title: str,
        message: str,
        details: Optional[list[str]] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        """
        Print structured error message.

        Args:
            title: Error title
            message: Main error message
            details: Optional list of detail lines
            suggestion: Optional suggestion for user
        """
        print(f"\nERROR: {title}", file=sys.stderr)
        print(f"{message}", file=sys.stderr)
        if details:
            for detail in details:
                print(f"  {detail}", file=sys.stderr)
        if suggestion:
            print(f"\n{suggestion}", file=sys.stderr)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {exc}", file=sys.stderr)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=sys.stderr)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
