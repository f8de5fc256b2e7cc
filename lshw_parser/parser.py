"""Query helpers for the XML report produced by ``lshw -xml``."""

from __future__ import annotations

import logging
import os
import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from lxml import etree

from .components import HardwareComponent, component_from_node
from .entry import Entry, element_text, local_name

logger = logging.getLogger(__name__)

HUB_PATTERNS = (
    re.compile(r"usb\s*(hub|2(\.0)?\s*hub|3(\.0)?\s*hub)", re.IGNORECASE),
    re.compile(r"(pci(e)?\s*bridge)", re.IGNORECASE),
    re.compile(r"(isa\s*bridge)", re.IGNORECASE),
    re.compile(r"hub", re.IGNORECASE),
)

CLASS_QUERY = "//node[@class=$class_name]"

NodeFilter = Callable[[Dict[str, str]], bool]

_MISSING = object()


class ParserError(RuntimeError):
    """Base class for errors raised while loading or querying a report."""


class ParserIOError(ParserError):
    """Raised when the report names a file that cannot be read."""


class XMLParseError(ParserError):
    """Raised when the report is not well-formed XML."""


class QueryError(ParserError):
    """Raised when an XPath query is rejected as invalid."""


class Parser:
    """Parsed lshw report with class, property, filter and XPath lookups."""

    def __init__(self, xml_content: str, skip_hubs: bool = False) -> None:
        self.skip_hubs = skip_hubs
        self._tree: etree._ElementTree = self._load(xml_content).getroottree()

    @staticmethod
    def _load(xml_content: str) -> etree._Element:
        if os.path.isfile(xml_content) and os.access(xml_content, os.R_OK):
            logger.debug("Reading lshw report from %s", xml_content)
            try:
                with open(xml_content, "rb") as handle:
                    source = handle.read()
            except OSError as exc:
                raise ParserIOError(f"Unable to read file: {xml_content}") from exc
        elif os.path.exists(xml_content):
            raise ParserIOError(f"File exists but is not readable: {xml_content}")
        else:
            source = xml_content.encode("utf-8")

        parser = etree.XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False)
        try:
            return etree.fromstring(source, parser)
        except etree.XMLSyntaxError as exc:
            raise XMLParseError(f"Invalid XML content provided: {exc}") from exc

    def get_skip_hubs(self) -> bool:
        return self.skip_hubs

    def set_skip_hubs(self, skip_hubs: bool) -> None:
        self.skip_hubs = skip_hubs

    def get_raw_document(self) -> etree._ElementTree:
        """Return the underlying element tree for queries not covered here."""

        return self._tree

    # Typed lookups -----------------------------------------------------

    def get_system_memory(self) -> List[Entry]:
        return self.search_nodes_by_class("memory")

    def get_cpu_info(self) -> List[Entry]:
        return self.search_nodes_by_class("processor")

    def get_storage_devices(self) -> List[Entry]:
        return self.search_nodes_by_class("disk")

    def get_network_interfaces(self) -> List[Entry]:
        return self.search_nodes_by_class("network")

    # Class lookups -----------------------------------------------------

    def search_node_by_class(self, class_name: str) -> Optional[Entry]:
        """Return the first node of ``class_name``, hubs included."""

        nodes = self._select(CLASS_QUERY, class_name=class_name)
        if not nodes:
            return None
        return Entry(nodes[0])

    def search_nodes_by_class(self, class_name: str) -> List[Entry]:
        nodes = self._select(CLASS_QUERY, class_name=class_name)
        return [Entry(node) for node in self._filter_hubs(nodes)]

    # Filtering ---------------------------------------------------------

    def search_nodes_by_filter(self, node_filter: NodeFilter) -> List[Entry]:
        """Return entries for every node whose flat property map passes ``node_filter``.

        The map holds the node attributes and the text of its direct child
        elements, later children overriding earlier ones with the same name.
        Exceptions raised by ``node_filter`` propagate unchanged.
        """

        results: List[Entry] = []
        for node in self._filter_hubs(self._select("//node")):
            if node_filter(node_properties(node)):
                results.append(Entry(node))
        logger.debug("Filter matched %d node(s)", len(results))
        return results

    def parse_by_properties(self, properties: Mapping[str, Any], logic: str = "and") -> List[Entry]:
        """Match nodes on attribute/child values.

        A list or tuple of expected values matches any of its members. With
        ``logic="and"`` every criterion must match, any other value requires
        at least one.
        """

        def matches(node_properties: Dict[str, str]) -> bool:
            results = []
            for key, expected in properties.items():
                actual = node_properties.get(key, _MISSING)
                if isinstance(expected, (list, tuple)):
                    results.append(actual in expected)
                else:
                    results.append(actual == expected)
            if logic == "and":
                return all(results)
            return any(results)

        return self.search_nodes_by_filter(matches)

    def search_nodes_by_xpath(self, query: str) -> List[Entry]:
        return [Entry(node) for node in self._filter_hubs(self._select(query))]

    def components(self, class_name: Optional[str] = None) -> List[HardwareComponent]:
        """Project matching nodes into flat :class:`HardwareComponent` records."""

        if class_name:
            nodes = self._select(CLASS_QUERY, class_name=class_name)
        else:
            nodes = self._select("//node")
        return [component_from_node(node) for node in self._filter_hubs(nodes)]

    # Hub detection -----------------------------------------------------

    def is_hub(self, node: etree._Element) -> bool:
        description = node.find("description")
        text = element_text(description) if description is not None else ""
        for pattern in HUB_PATTERNS:
            if pattern.search(text):
                return True
        return False

    # Internals ---------------------------------------------------------

    def _select(self, query: str, **variables: str) -> List[etree._Element]:
        try:
            result = self._tree.xpath(query, **variables)
        except etree.XPathError as exc:
            raise QueryError(f"Invalid XPath query provided: {query!r}: {exc}") from exc
        if not isinstance(result, list):
            # Scalar results (count(), string(), booleans) select no nodes.
            return []
        nodes = [
            item for item in result
            if isinstance(item, etree._Element) and isinstance(item.tag, str)
        ]
        logger.debug("Query %r matched %d element(s)", query, len(nodes))
        return nodes

    def _filter_hubs(self, nodes: List[etree._Element]) -> List[etree._Element]:
        if not self.skip_hubs:
            return nodes
        kept = [node for node in nodes if not self.is_hub(node)]
        if len(kept) != len(nodes):
            logger.debug("Skipped %d hub node(s)", len(nodes) - len(kept))
        return kept


def node_properties(node: etree._Element) -> Dict[str, str]:
    """Flatten node attributes and direct child text into one mapping."""

    properties: Dict[str, str] = dict(node.attrib)
    for child in node:
        if isinstance(child.tag, str):
            properties[local_name(child.tag)] = element_text(child)
    return properties
