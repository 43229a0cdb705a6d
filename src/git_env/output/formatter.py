"""Output dispatcher — renders ``show`` results as Rich tables or JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

from rich.console import Console

from git_env.output.tables import roles_table, settings_table

console = Console()

FORMATS = ("table", "json")


def output_json(data: Any) -> None:
    """Print data as formatted JSON."""
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")
    console.print_json(json.dumps(data, indent=2, default=str))


def output_table(
    *,
    rows: Sequence[tuple[str, str]] | None = None,
    title: str | None = None,
    settings: Mapping[str, str | None] | None = None,
) -> None:
    """Print the branch roles table followed by the settings listing."""
    if rows is not None:
        console.print(roles_table(rows, title=title))
    if settings:
        console.print(settings_table(settings))


def output(
    data: Any,
    fmt: str = "table",
    *,
    rows: Sequence[tuple[str, str]] | None = None,
    title: str | None = None,
    settings: Mapping[str, str | None] | None = None,
) -> None:
    """Print *data* as JSON, or *rows* and *settings* as tables."""
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format '{fmt}'. Choose from: {', '.join(FORMATS)}")
    if fmt == "json":
        output_json(data)
    else:
        output_table(rows=rows, title=title, settings=settings)
