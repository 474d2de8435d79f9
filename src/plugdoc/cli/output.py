"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/plugdoc/cli/output.py
import argparse
import sys
from typing import IO, Iterable, Optional

from plugdoc.constants import DEPS_RICH
from plugdoc.exceptions import DependencyError
from plugdoc.registry import PluginEntry


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, raise_on_missing: bool = False) -> bool:
    """Determine if Rich output should be used based on args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    raise_on_missing : bool, default False
        Raise DependencyError if rich is not installed

    Returns
    -------
    bool
        True when ``--rich`` is set and Rich is importable

    """
    if not getattr(args, "rich", False):
        return False

    if not check_rich_available():
        if raise_on_missing:
            raise DependencyError(
                feature_name="rich-output",
                missing_packages=[(name, spec) for name, _import_name, spec in DEPS_RICH],
                message="Rich output requires the optional 'rich' dependency. Install with: pip install plugdoc[rich]",
            )
        return False

    return True


def print_entries_rich(entries: Iterable[PluginEntry]) -> None:
    """Print plugin entries as a Rich table."""
    from rich.console import Console
    from rich.table import Table

    table = Table(title="Plugin Entries")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Arity", style="yellow", justify="right")
    table.add_column("Parameters", style="magenta")
    table.add_column("Returns", style="green")

    for entry in entries:
        table.add_row(entry.name, str(entry.arity), ", ".join(entry.param_types), entry.return_type)

    Console().print(table)


def print_entries_plain(entries: Iterable[PluginEntry], stream: Optional[IO[str]] = None) -> None:
    """Print plugin entries as aligned plain text."""
    target = stream or sys.stdout
    for entry in entries:
        params = ", ".join(entry.param_types)
        target.write(f"{entry.name:<20} ({params}) -> {entry.return_type}\n")
