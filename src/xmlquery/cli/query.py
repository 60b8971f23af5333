from __future__ import annotations

import sys
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Annotated

import click.utils as click_utils
import typer

from xmlquery.cli.exit_codes import EXIT_DATAERR, EXIT_GENERIC, EXIT_NOINPUT, EXIT_OK
from xmlquery.errors import DocumentNotFoundError, ParseError, XmlQueryError
from xmlquery.facade import XmlQueryFacade, chunk_values
from xmlquery.io import read_xml, write_output
from xmlquery.render import OutputFormat, render

if TYPE_CHECKING:
    from collections.abc import Sequence

# --------------------------------------------------------------------------- #
# Shared option types                                                         #
# --------------------------------------------------------------------------- #

FileArg = Annotated[Path, typer.Argument(help="XML file to query.")]
RequireOpt = Annotated[
    list[str] | None,
    typer.Option(
        "-r",
        "--require",
        help="Attribute key the parent must carry (repeatable; values are not compared).",
    ),
]
ChildOpt = Annotated[str, typer.Option("-c", "--child", help="Tag of the parent's children to read.")]
AttrOpt = Annotated[list[str], typer.Option("-a", "--attr", help="Attribute name to extract (repeatable).")]
TagOpt = Annotated[list[str], typer.Option("-t", "--tag", help="Nested tag whose text to extract (repeatable).")]
FormatOpt = Annotated[
    OutputFormat,
    typer.Option("--format", help="Output format.", case_sensitive=False),
]
OutputOpt = Annotated[
    Path | None,
    typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
]
EncodingOpt = Annotated[
    str | None,
    typer.Option("--encoding", help="Decode the file with ENCODING instead of the XML declaration."),
]


def _is_tty_stdout() -> bool:
    try:
        return bool(getattr(sys.stdout, "isatty", lambda: False)())
    except OSError:
        return False


def _load(file: Path, encoding: str | None) -> XmlQueryFacade:
    try:
        return XmlQueryFacade(file, read_xml(file, encoding))
    except DocumentNotFoundError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_NOINPUT) from exc
    except ParseError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    except LookupError as exc:
        # unknown --encoding name
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    except UnicodeDecodeError as exc:
        typer.echo(f"ERROR: cannot decode {file}: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc
    except XmlQueryError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_GENERIC) from exc


def _emit(
    headers: Sequence[str],
    rows: Sequence[Sequence[str | None]],
    *,
    fmt: OutputFormat,
    output: Path | None,
) -> None:
    to_stdout = output is None or output == Path("-")
    color = bool(to_stdout and _is_tty_stdout() and not click_utils.should_strip_ansi(sys.stdout))
    write_output(render(fmt, headers, rows, color=color), output)
    raise typer.Exit(code=EXIT_OK)


# --------------------------------------------------------------------------- #
# Commands                                                                    #
# --------------------------------------------------------------------------- #


def attrs_cmd(
    file: FileArg,
    element: Annotated[str, typer.Argument(help="Tag of the root's children to match.")],
    attr: AttrOpt,
    fmt: FormatOpt = OutputFormat.HUMAN,
    output: OutputOpt = None,
    encoding: EncodingOpt = None,
) -> None:
    """Print attributes of every root child tagged ELEMENT."""
    facade = _load(file, encoding)
    values = facade.get_tag_name_attributes(element, attr)
    _emit(attr, chunk_values(values, len(attr)), fmt=fmt, output=output)


def child_attrs_cmd(
    file: FileArg,
    parent: Annotated[str, typer.Argument(help="Tag of the root's children to search for a parent.")],
    child: ChildOpt,
    attr: AttrOpt,
    require: RequireOpt = None,
    fmt: FormatOpt = OutputFormat.HUMAN,
    output: OutputOpt = None,
    encoding: EncodingOpt = None,
) -> None:
    """Print child attributes of the first PARENT carrying every --require key."""
    facade = _load(file, encoding)
    values = facade.get_child_elem_atts_within_elem(parent, require or [], child, attr)
    _emit(attr, chunk_values(values, len(attr)), fmt=fmt, output=output)


def child_tags_cmd(
    file: FileArg,
    parent: Annotated[str, typer.Argument(help="Tag of the root's children to search for a parent.")],
    child: ChildOpt,
    tag: TagOpt,
    require: RequireOpt = None,
    fmt: FormatOpt = OutputFormat.HUMAN,
    output: OutputOpt = None,
    encoding: EncodingOpt = None,
) -> None:
    """Print nested tag text of the first PARENT carrying every --require key."""
    facade = _load(file, encoding)
    values = facade.get_child_elem_tags_within_elem(parent, require or [], child, tag)
    _emit(tag, chunk_values(values, len(tag)), fmt=fmt, output=output)


def values_cmd(
    file: FileArg,
    element: Annotated[str, typer.Argument(help="Tag of the root's children to match.")],
    tag: TagOpt,
    fmt: FormatOpt = OutputFormat.HUMAN,
    output: OutputOpt = None,
    encoding: EncodingOpt = None,
) -> None:
    """Print nested tag text for every root child tagged ELEMENT, one row each."""
    facade = _load(file, encoding)
    rows = facade.get_tag_values_within_elems(element, tag)
    _emit(tag, rows, fmt=fmt, output=output)


def register(app: typer.Typer) -> None:
    app.command("attrs")(attrs_cmd)
    app.command("child-attrs")(child_attrs_cmd)
    app.command("child-tags")(child_tags_cmd)
    app.command("values")(values_cmd)


__all__ = ["register"]
