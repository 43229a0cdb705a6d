"""Shared helpers for CLI commands — option types and console."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

console = Console(highlight=False)

DryRunOpt = Annotated[
    bool,
    typer.Option("--dry-run", "-n", help="Print the git commands without running them"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format (table or json)"),
]
