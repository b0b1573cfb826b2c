"""Optional-chain traversal over ElementTree documents.

External XML is sparse and its shape is not guaranteed: any element may
be missing at any depth. ``XmlNode`` wraps an element *or its absence*;
every step returns another ``XmlNode`` (possibly absent) instead of
raising, so extraction code reads as a straight chain of lookups and the
only check needed is at the end.

Elements are matched by local name, so documents with or without an XML
namespace are handled alike.
"""

from __future__ import annotations

from xml.etree import ElementTree as ET


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


class XmlNode:

    __slots__ = ("_element",)

    def __init__(self, element: ET.Element | None) -> None:
        self._element = element

    def __bool__(self) -> bool:
        return self._element is not None

    def __repr__(self) -> str:
        return f"XmlNode({self.name!r})" if self else "XmlNode(<absent>)"

    @property
    def name(self) -> str | None:
        if self._element is None:
            return None
        return local_name(self._element.tag)

    def child(self, name: str) -> XmlNode:
        """First direct child called *name*, or an absent node."""
        for node in self.children(name):
            return node
        return XmlNode(None)

    def children(self, name: str) -> list[XmlNode]:
        """All direct children called *name*, in document order."""
        if self._element is None:
            return []
        return [
            XmlNode(element)
            for element in self._element
            if isinstance(element.tag, str) and local_name(element.tag) == name
        ]

    def path(self, *names: str) -> XmlNode:
        """Follow ``child`` through each name in turn."""
        node = self
        for name in names:
            node = node.child(name)
        return node

    def text(self) -> str | None:
        """Stripped text content, or None if absent or blank."""
        if self._element is None or self._element.text is None:
            return None
        return self._element.text.strip() or None
