"""Entry snapshot built from a single ``<node>`` element of an lshw report."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from lxml.etree import _Element as Element

from .property import Property

PropertyValue = Union[str, List[str]]


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""

    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def element_text(element: Element) -> str:
    """Return the concatenated text content of ``element`` and its descendants."""

    return "".join(element.itertext())


class Entry:
    """Snapshot of the direct child elements of one hardware node.

    Repeated child names accumulate into a list in document order. The
    entry keeps no reference to the element it was built from.
    """

    def __init__(self, node: Element) -> None:
        self._properties: Dict[str, PropertyValue] = self._parse_node(node)
        self._keys: List[str] = list(self._properties)
        self._position = 0

    @staticmethod
    def _parse_node(node: Element) -> Dict[str, PropertyValue]:
        properties: Dict[str, PropertyValue] = {}
        for child in node:
            if not isinstance(child.tag, str):
                continue
            name = local_name(child.tag)
            value = element_text(child)
            if name not in properties:
                properties[name] = value
                continue
            existing = properties[name]
            if isinstance(existing, list):
                existing.append(value)
            else:
                properties[name] = [existing, value]
        return properties

    def get_property(self, name: str, as_list: bool = False) -> Optional[Property]:
        if name not in self._properties:
            return None

        value = self._properties[name]
        if as_list:
            return Property(list(value) if isinstance(value, list) else [value])
        return Property(value[0] if isinstance(value, list) else value)

    def get_properties(self) -> Dict[str, PropertyValue]:
        return {
            key: list(value) if isinstance(value, list) else value
            for key, value in self._properties.items()
        }

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def items(self) -> List[Tuple[str, PropertyValue]]:
        return list(self.get_properties().items())

    def rewind(self) -> None:
        """Restart iteration from the first property."""

        self._position = 0

    def __iter__(self) -> Iterator[Tuple[str, Any]]:
        return self

    def __next__(self) -> Tuple[str, Any]:
        if self._position >= len(self._keys):
            raise StopIteration
        key = self._keys[self._position]
        self._position += 1
        value = self._properties[key]
        return key, list(value) if isinstance(value, list) else value

    def __contains__(self, name: object) -> bool:
        return name in self._properties

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"Entry({self._properties!r})"
