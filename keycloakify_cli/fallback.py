"""Re-invoke the CLI with the default command when none was given."""

from __future__ import annotations

import subprocess
import sys
from typing import List, Optional, Sequence

from rich.markup import escape

from keycloakify_cli.catalog import DEFAULT_COMMAND
from keycloakify_cli.logging import error_console

HELP_FLAGS = ("--help", "-h")


def should_fall_back(rest: Sequence[str]) -> bool:
    """True when ``rest`` names no subcommand: empty, or led by a non-help option."""
    if not rest:
        return True
    first = rest[0]
    return first.startswith("-") and first not in HELP_FLAGS


def default_cli_command() -> List[str]:
    return [sys.executable, "-m", "keycloakify_cli"]


def fallback_argv(
    rest: Sequence[str], command: Optional[Sequence[str]] = None
) -> List[str]:
    base = list(command) if command else default_cli_command()
    return [*base, DEFAULT_COMMAND, *rest]


def run_fallback(rest: Sequence[str], command: Optional[Sequence[str]] = None) -> int:
    """Run the CLI again with the default command and return its exit status.

    Standard streams are inherited; the call blocks until the child exits.
    A child without a usable status (killed by a signal) maps to 1.
    """
    argv = fallback_argv(rest, command)
    try:
        completed = subprocess.run(argv, check=False)
    except OSError as exc:
        error_console.print(
            f"[error]Failed to run {escape(argv[0])}: {escape(str(exc))}[/]"
        )
        return 1
    if completed.returncode < 0:
        return 1
    return completed.returncode
