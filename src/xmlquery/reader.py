from __future__ import annotations

import io
from typing import TYPE_CHECKING

from defusedxml import DefusedXmlException, ElementTree

from xmlquery import logger
from xmlquery.errors import ParseError

if TYPE_CHECKING:
    from os import PathLike
    from xml.etree.ElementTree import ElementTree as Document


def parse_document(content: str | bytes, *, path: str | PathLike[str] = "<string>") -> Document:
    """Parse XML *content* into a document tree.

    Text is fed to the parser as-is; bytes are parsed as a byte stream so the
    XML declaration decides the encoding. *path* only labels diagnostics.
    """
    stream = io.StringIO(content) if isinstance(content, str) else io.BytesIO(content)
    try:
        document = ElementTree.parse(stream)
    except ElementTree.ParseError as exc:
        raise ParseError(path, str(exc)) from exc
    except DefusedXmlException as exc:
        raise ParseError(path, f"forbidden XML construct ({exc})") from exc
    except LookupError as exc:
        raise ParseError(path, f"unknown encoding ({exc})") from exc
    except (UnicodeError, OSError) as exc:
        raise ParseError(path, f"unable to read XML stream ({exc})") from exc

    logger.debug("parsed %s (root <%s>)", path, document.getroot().tag)
    return document


__all__ = ["parse_document"]
