"""Tables printed by ``git env show``.

Cells are built as ``Text`` so branch names and deploy commands are shown
verbatim, never parsed as Rich markup.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from rich.table import Table
from rich.text import Text


def _cell(value: str | None) -> Text:
    return Text("" if value is None else str(value))


def roles_table(rows: Sequence[tuple[str, str]], *, title: str | None = None) -> Table:
    """Two columns: branch name and its role."""
    table = Table(title=title)
    table.add_column("Branch", no_wrap=True)
    table.add_column("Role", no_wrap=True)
    for branch, role in rows:
        table.add_row(_cell(branch), _cell(role))
    return table


def settings_table(settings: Mapping[str, str | None]) -> Table:
    """Borderless name/value listing, e.g. remote and prod-deploy."""
    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for name, value in settings.items():
        table.add_row(_cell(name), _cell(value))
    return table
