"""Flat hardware component records projected from lshw nodes."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from lxml.etree import _Element as Element

from .entry import element_text, local_name

# Children with nested structure handled separately from plain scalars.
_STRUCTURED_CHILDREN = {"node", "configuration", "capabilities", "resources", "hints"}


@dataclass
class HardwareComponent:
    """Hardware component described by one lshw node."""

    identifier: str
    name: str
    category: str
    vendor: Optional[str] = None
    model: Optional[str] = None
    bus: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    driver: Optional[str] = None
    capabilities: Dict[str, Any] = field(default_factory=dict)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "HardwareComponent":
        return cls(**payload)


def _child_text(node: Element, name: str) -> Optional[str]:
    child = node.find(name)
    if child is None:
        return None
    return element_text(child).strip() or None


def _settings(node: Element) -> Dict[str, str]:
    settings: Dict[str, str] = {}
    for setting in node.findall("configuration/setting"):
        key = setting.get("id")
        if key:
            settings[key] = setting.get("value", "")
    return settings


def _capabilities(node: Element) -> Dict[str, Any]:
    capabilities: Dict[str, Any] = {}
    for capability in node.findall("capabilities/capability"):
        key = capability.get("id")
        if key:
            capabilities[key] = element_text(capability).strip() or True
    return capabilities


def component_from_node(node: Element) -> HardwareComponent:
    """Build a :class:`HardwareComponent` from a ``<node>`` element."""

    category = node.get("class", "")
    businfo = node.get("businfo")
    identifier = node.get("id") or businfo or category
    settings = _settings(node)

    metadata: Dict[str, Any] = {}
    for child in node:
        if not isinstance(child.tag, str):
            continue
        name = local_name(child.tag)
        if name in _STRUCTURED_CHILDREN or name in metadata:
            continue
        metadata[name] = element_text(child)
    if businfo:
        metadata["businfo"] = businfo
    if settings:
        metadata["configuration"] = settings

    tags = [category] if category else []
    if node.get("claimed") == "true":
        tags.append("claimed")
    if node.get("disabled") == "true":
        tags.append("disabled")

    return HardwareComponent(
        identifier=identifier,
        name=_child_text(node, "product") or _child_text(node, "description") or identifier,
        category=category,
        vendor=_child_text(node, "vendor"),
        model=_child_text(node, "product"),
        bus=businfo.split("@", 1)[0] if businfo and "@" in businfo else None,
        tags=tags,
        driver=settings.get("driver"),
        capabilities=_capabilities(node),
        metadata=metadata,
    )
