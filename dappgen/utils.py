"""Shared utility functions for dappgen.

Provides blocking command execution behind the ``ToolRunner`` port, JSON
formatting, name helpers and Rich-based progress reporting.
"""

from __future__ import annotations

import json
import re
import subprocess
from pathlib import Path
from typing import Any, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# External command execution
# ---------------------------------------------------------------------------


class ExternalCommandError(Exception):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int, cwd: Path | None = None) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.cwd = cwd
        location = f" (in {cwd})" if cwd else ""
        super().__init__(
            f"Command failed with exit code {returncode}{location}: {' '.join(self.cmd)}"
        )


def run_command(
    cmd: Sequence[str],
    cwd: str | Path | None = None,
) -> int:
    """Run a command to completion with inherited stdio.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process; the environment is inherited.

    Returns:
        The child's exit code.  A missing executable is reported as ``127``,
        the code a shell would use.
    """
    try:
        completed = subprocess.run(
            list(cmd),
            cwd=str(cwd) if cwd else None,
            check=False,
        )
    except FileNotFoundError:
        return 127
    return completed.returncode


class ToolRunner(Protocol):
    """Runs an external tool synchronously, raising on a non-zero exit."""

    def run(self, cmd: Sequence[str], cwd: Path | None = None) -> None: ...


class SubprocessToolRunner:
    """``ToolRunner`` that spawns real processes via :func:`run_command`."""

    def run(self, cmd: Sequence[str], cwd: Path | None = None) -> None:
        console.print(f"  [dim]$ {escape(' '.join(cmd))}[/dim]")
        returncode = run_command(cmd, cwd=cwd)
        if returncode != 0:
            raise ExternalCommandError(cmd, returncode, cwd)


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def identifier_slug(name: str) -> str:
    """Reduce a project name to a lowercase alphanumeric identifier.

    The result is usable as a URI scheme and as a segment of an iOS bundle
    identifier or Android package name, so it never starts with a digit.

    Examples::

        identifier_slug("My Dapp")  -> "mydapp"
        identifier_slug("3d-wallet") -> "app3dwallet"
    """
    slug = re.sub(r"[^a-z0-9]", "", name.lower())
    if not slug or slug[0].isdigit():
        slug = f"app{slug}"
    return slug


# ---------------------------------------------------------------------------
# JSON formatting
# ---------------------------------------------------------------------------


def pretty_json(data: Any) -> str:
    """Serialise *data* as 2-space indented JSON with a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step_header(index: int, total: int, name: str) -> None:
    """Print a rule announcing generation step *index* of *total*."""
    console.print(
        Rule(f"[bold bright_cyan] Step {index}/{total}: {name} [/bold bright_cyan]", style="cyan")
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message; *message* is plain text, not markup."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
