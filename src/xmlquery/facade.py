"""Read-only queries over the direct children of a parsed XML document's root."""

from __future__ import annotations

from os import fspath
from typing import TYPE_CHECKING

from xmlquery import logger
from xmlquery.reader import parse_document

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from os import PathLike
    from xml.etree.ElementTree import ElementTree as Document

    from xmlquery.types import ElementLike


def _children(element: ElementLike, tag: str) -> Iterator[ElementLike]:
    """Yield direct children of *element* whose tag is exactly *tag*."""
    return (child for child in element if child.tag == tag)


def _own_text(element: ElementLike) -> str:
    """Return the text nodes that belong directly to *element*.

    Leading text plus the tail following each child element; text inside
    descendants is not included.
    """
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def _child_text(element: ElementLike, tag: str) -> str | None:
    """Return the text of the first direct child tagged *tag*, or ``None``."""
    child = next(_children(element, tag), None)
    if child is None:
        return None
    return _own_text(child)


def _has_keys(element: ElementLike, required: Iterable[str]) -> bool:
    # Only key presence counts; required values are never compared.
    return all(element.get(key) is not None for key in required)


def chunk_values(values: Sequence[str | None], width: int) -> list[list[str | None]]:
    """Split a flat query result back into rows of *width* cells."""
    if width <= 0:
        msg = f"width must be positive, got {width}"
        raise ValueError(msg)
    return [list(values[start : start + width]) for start in range(0, len(values), width)]


class XmlQueryFacade:
    """Canned queries over an XML document parsed from a string.

    *path* labels diagnostics only and is never opened. Parsing happens in the
    constructor; a :class:`~xmlquery.errors.ParseError` leaves no instance.

    Every query looks at the root element's direct children. Missing
    attributes and nested tags show up as ``None`` in the result, and a tag
    that matches nothing gives an empty result.
    """

    def __init__(self, path: str | PathLike[str], content: str | bytes) -> None:
        self.path = fspath(path)
        self._document = parse_document(content, path=self.path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"

    @property
    def root(self) -> ElementLike:
        return self._document.getroot()

    def get_document(self) -> Document:
        """Return the parsed document for traversal beyond the canned queries."""
        return self._document

    def get_tag_name_attributes(
        self, element_name: str, attribute_names: Sequence[str]
    ) -> list[str | None]:
        """Collect *attribute_names* from every root child tagged *element_name*.

        The result is flat, ordered by child and then by attribute name, and
        holds ``len(matches) * len(attribute_names)`` values. Use
        :func:`chunk_values` to regroup it per child.
        """
        values: list[str | None] = []
        matches = 0
        for child in _children(self.root, element_name):
            matches += 1
            values.extend(child.get(name) for name in attribute_names)
        logger.debug("%s: %d <%s> element(s) matched", self.path, matches, element_name)
        return values

    def _first_qualifying_parent(
        self, parent_elem_name: str, parent_elem_properties: Iterable[str]
    ) -> ElementLike | None:
        # a bare string names one key, not one key per character
        if isinstance(parent_elem_properties, str):
            parent_elem_properties = [parent_elem_properties]
        required = list(parent_elem_properties)
        for position, parent in enumerate(_children(self.root, parent_elem_name)):
            if _has_keys(parent, required):
                logger.debug(
                    "%s: using <%s> #%d as qualifying parent", self.path, parent_elem_name, position
                )
                return parent
        logger.debug("%s: no <%s> carries keys %s", self.path, parent_elem_name, required)
        return None

    def get_child_elem_atts_within_elem(
        self,
        parent_elem_name: str,
        parent_elem_properties: Iterable[str],
        child_tag: str,
        child_attribute_names: Sequence[str],
    ) -> list[str | None]:
        """Collect child attributes from the first qualifying parent.

        A parent tagged *parent_elem_name* qualifies when it carries every key
        of *parent_elem_properties* (a mapping, any iterable of names, or a
        single name as a string). Values in the mapping are ignored. Only the
        first qualifying parent is read; its *child_tag* children each
        contribute one value per name in *child_attribute_names*.
        """
        parent = self._first_qualifying_parent(parent_elem_name, parent_elem_properties)
        if parent is None:
            return []
        values: list[str | None] = []
        for child in _children(parent, child_tag):
            values.extend(child.get(name) for name in child_attribute_names)
        return values

    def get_child_elem_tags_within_elem(
        self,
        parent_elem_name: str,
        parent_elem_properties: Iterable[str],
        child_tag: str,
        child_text_tag_names: Sequence[str],
    ) -> list[str | None]:
        """Like :meth:`get_child_elem_atts_within_elem`, reading nested tag text.

        Each name in *child_text_tag_names* selects a sub-element of the
        child whose text is returned, or ``None`` when the child has no such
        sub-element.
        """
        parent = self._first_qualifying_parent(parent_elem_name, parent_elem_properties)
        if parent is None:
            return []
        values: list[str | None] = []
        for child in _children(parent, child_tag):
            values.extend(_child_text(child, name) for name in child_text_tag_names)
        return values

    def get_tag_values_within_elems(
        self, tag_name: str, desired_child_text_tags: Sequence[str]
    ) -> list[list[str | None]]:
        """Return one row per root child tagged *tag_name*.

        Row cells follow *desired_child_text_tags* and hold the text of the
        matching sub-element, or ``None`` if it is missing.
        """
        rows = [
            [_child_text(child, name) for name in desired_child_text_tags]
            for child in _children(self.root, tag_name)
        ]
        logger.debug("%s: %d <%s> row(s)", self.path, len(rows), tag_name)
        return rows


__all__ = ["XmlQueryFacade", "chunk_values"]
