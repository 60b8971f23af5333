from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from xmlquery.errors import DocumentNotFoundError
from xmlquery.io import read_xml, write_output

if TYPE_CHECKING:
    from pathlib import Path


def test_read_xml_returns_bytes_by_default(tmp_path: Path) -> None:
    path = tmp_path / "doc.xml"
    path.write_bytes(b"<root/>")
    assert read_xml(path) == b"<root/>"


def test_read_xml_decodes_with_encoding(tmp_path: Path) -> None:
    path = tmp_path / "doc.xml"
    path.write_bytes("<root>Привет</root>".encode("cp1251"))
    assert read_xml(path, "cp1251") == "<root>Привет</root>"


def test_read_xml_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError, match="not found"):
        read_xml(tmp_path / "nope.xml")


def test_read_xml_directory_is_not_a_document(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        read_xml(tmp_path)


def test_write_output_to_file_creates_parents(tmp_path: Path) -> None:
    dest = tmp_path / "out" / "result.json"
    write_output("[]", dest)
    assert dest.read_text(encoding="utf-8") == "[]\n"


def test_write_output_dash_means_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    from pathlib import Path

    write_output("hello", Path("-"))
    assert capsys.readouterr().out == "hello\n"
