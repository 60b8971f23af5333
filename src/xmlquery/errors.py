"""Centralised exception hierarchy for xmlquery."""

from __future__ import annotations

from os import fspath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike


class XmlQueryError(Exception):
    """Base class for all custom xmlquery exceptions."""


class ParseError(XmlQueryError):
    """XML content could not be parsed into a document.

    Raised while constructing a query facade when the content is not
    well-formed, uses constructs the hardened parser refuses, or cannot be
    decoded. The original parser exception is chained as ``__cause__``.
    """

    def __init__(self, path: str | PathLike[str], detail: str) -> None:
        self.path = fspath(path)
        self.detail = detail
        super().__init__(f"error building XML document {self.path}: {detail}")


class DocumentNotFoundError(XmlQueryError):
    """XML file could not be located or read from disk."""


__all__ = [
    "DocumentNotFoundError",
    "ParseError",
    "XmlQueryError",
]
