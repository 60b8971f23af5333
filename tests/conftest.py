from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

CALENDARS_XML = (
    "<calendars>"
    '<calendar id="c1"><entries date="2009-06-01"/></calendar>'
    '<calendar id="c2" title="Google Doodles">'
    '<entries date="2009-06-05" kind="holiday"><date>2009-06-05T09:00:000Z</date><note>Fri</note></entries>'
    '<entries date="2009-06-06"><date>2009-06-06T10:00:000Z</date></entries>'
    "<other/>"
    "</calendar>"
    '<calendar id="c3" title="Later"><entries date="2010-01-01"><date>2010</date></entries></calendar>'
    "</calendars>"
)

MESSAGES_XML = (
    "<messages>"
    "<message><time>2006-04-03T15:00:000Z</time><summary>Visit to Auntie Macharia's House</summary></message>"
    "<note><time>ignored</time></note>"
    "<message><time>2006-04-04T08:30:000Z</time></message>"
    "</messages>"
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def xml_file(tmp_path: Path) -> Callable[..., Path]:
    def write(content: str | bytes, *, filename: str = "doc.xml") -> Path:
        path = tmp_path / filename
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return write
