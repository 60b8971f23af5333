from __future__ import annotations

from pathlib import Path

from xmlquery.errors import DocumentNotFoundError


def read_xml(path: Path, encoding: str | None = None) -> str | bytes:
    """Load XML from *path*.

    Without *encoding* the raw bytes are returned so the parser honours the
    XML declaration; otherwise the file is decoded to text first.
    """
    if not path.is_file():
        msg = f"XML file not found: {path}"
        raise DocumentNotFoundError(msg)
    try:
        if encoding is None:
            return path.read_bytes()
        return path.read_text(encoding=encoding)
    except OSError as exc:
        msg = f"unable to read {path}: {exc.strerror or exc}"
        raise DocumentNotFoundError(msg) from exc


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        print(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text + "\n", encoding="utf-8")


__all__ = ["read_xml", "write_output"]
