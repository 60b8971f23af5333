"""Text renderings of query results."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from enum import StrEnum
from io import StringIO

from rich.console import Console
from rich.table import Table

from xmlquery.config import ABSENT_DISPLAY

Row = Sequence[str | None]


class OutputFormat(StrEnum):
    HUMAN = "human"
    JSON = "json"


def render_human(headers: Sequence[str], rows: Sequence[Row], *, color: bool = False) -> str:
    """Render a Rich table captured to text."""
    table = Table(show_header=True, header_style="bold")
    for header in headers:
        table.add_column(header, justify="left")
    for row in rows:
        table.add_row(*[ABSENT_DISPLAY if cell is None else cell for cell in row])

    buf = StringIO()
    console = Console(
        file=buf,
        force_terminal=color,
        width=sys.maxsize,
        color_system="standard" if color else None,
        no_color=not color,
    )
    console.print(table)
    return buf.getvalue().rstrip()


def render_json(headers: Sequence[str], rows: Sequence[Row]) -> str:
    """Render rows as a JSON array of objects keyed by header."""
    payload = [dict(zip(headers, row, strict=False)) for row in rows]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def render(fmt: OutputFormat, headers: Sequence[str], rows: Sequence[Row], *, color: bool = False) -> str:
    if fmt is OutputFormat.JSON:
        return render_json(headers, rows)
    return render_human(headers, rows, color=color)


__all__ = ["OutputFormat", "render", "render_human", "render_json"]
