# cli.py
from __future__ import annotations

import sys
from pathlib import Path

import click

from wasmtargets.errors import BuildError, CommandFailed, UnknownTarget
from wasmtargets.runner import TargetRunner, load_targets
from wasmtargets.settings import load_settings
from wasmtargets.targets import default_targets
from wasmtargets.ui.console import Console, get_console, set_console


def exit_status_for(exc: CommandFailed) -> int:
    """Pass the failing tool's status through when it fits a process exit code."""
    if 1 <= exc.exit_status <= 255:
        return exc.exit_status
    return 1


@click.command()
@click.argument("target", required=False)
@click.option("--root", default=None, help="Project root (defaults to $WASMTARGETS_ROOT or .)")
@click.option("--targets-file", default=None, help="Python file defining targets() or TARGETS")
@click.option("--verbose", is_flag=True, default=False, help="Echo each command before running it (also: VERBOSE=1)")
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (show stack traces and detailed output)",
)
@click.option("--list", "list_targets", is_flag=True, default=False, help="List targets and exit")
def cli(target, root, targets_file, verbose, debug, list_targets):
    """Run a build target (default: all) for a wasm-pack library."""
    settings = load_settings()
    verbose = verbose or settings.verbose

    console = Console(debug=debug, verbose=verbose)
    set_console(console)

    try:
        table = load_targets(targets_file) if targets_file else default_targets(settings)
    except (BuildError, FileNotFoundError) as e:
        console.print_error("Invalid target table", str(e))
        sys.exit(1)

    if list_targets:
        console.print_targets(table.values(), table.default)
        return

    project_root = Path(root or settings.root)
    if not project_root.is_dir():
        console.print_error("Project root not found", f"Not a directory: {project_root}")
        sys.exit(1)

    runner = TargetRunner(table, root=project_root, console=console)

    try:
        runner.run(target)
    except UnknownTarget as e:
        console.print_error(
            "Unknown target",
            f"No target named {e.name!r}",
            details=[f"Known targets: {', '.join(e.known)}"],
            suggestion="List targets with:\n  wasmtargets --list",
        )
        sys.exit(1)
    except CommandFailed as e:
        console.print_error("Command failed", str(e))
        sys.exit(exit_status_for(e))
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        get_console().print_exception(e)
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
