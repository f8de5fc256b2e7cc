"""Query helpers for lshw XML hardware reports."""

from .components import HardwareComponent, component_from_node
from .config import ConfigError, ParserSettings
from .entry import Entry
from .inventory import InventoryError, scan_lshw, scan_system_inventory
from .parser import (
    HUB_PATTERNS,
    Parser,
    ParserError,
    ParserIOError,
    QueryError,
    XMLParseError,
    node_properties,
)
from .property import Property

__all__ = [
    "__version__",
    "ConfigError",
    "Entry",
    "HUB_PATTERNS",
    "HardwareComponent",
    "InventoryError",
    "Parser",
    "ParserError",
    "ParserIOError",
    "ParserSettings",
    "Property",
    "QueryError",
    "XMLParseError",
    "component_from_node",
    "node_properties",
    "scan_lshw",
    "scan_system_inventory",
]
__version__ = "0.1.0"
