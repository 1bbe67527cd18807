"""Configuration source protocol and concrete sources.

The world never parses protocol files itself. It asks a source for named
child sections and hands each child, unread, to an entity constructor.

Usage:
    root = XmlSource.from_string(protocol_text)
    for section in root.get_children_parsers("bulk"):
        bulk = Bulk.from_section(context, section)
"""

from __future__ import annotations

import xml.etree.ElementTree as ET  # nosec B405 - protocol files are trusted local input
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigSource(Protocol):
    """A section of structured configuration.

    Implementations return child sections in document order and answer
    None for attributes or params that are absent.
    """

    def get_children_parsers(self, section_name: str) -> list[ConfigSource]:
        """Child sections tagged section_name, in document order."""
        ...

    def get_attribute(self, name: str) -> str | None:
        """Attribute of this section."""
        ...

    def get_param(self, name: str) -> str | None:
        """Text of the param child called name."""
        ...


class MappingSource:
    """Source backed by nested dicts.

    Structure:
        {
            "attributes": {"name": "tank"},
            "params": {"Sbulk": "1.5"},
            "children": {"solute": [{...}, {...}]},
        }

    All keys are optional.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        data = data or {}
        self._attributes: dict[str, str] = {
            k: str(v) for k, v in data.get("attributes", {}).items()
        }
        self._params: dict[str, str] = {k: str(v) for k, v in data.get("params", {}).items()}
        self._children: dict[str, list[Mapping[str, Any]]] = {
            k: list(v) for k, v in data.get("children", {}).items()
        }

    def get_children_parsers(self, section_name: str) -> list[ConfigSource]:
        return [MappingSource(child) for child in self._children.get(section_name, [])]

    def get_attribute(self, name: str) -> str | None:
        return self._attributes.get(name)

    def get_param(self, name: str) -> str | None:
        return self._params.get(name)

    def __repr__(self) -> str:
        return f"MappingSource(attributes={self._attributes!r})"


class XmlSource:
    """Source backed by an ElementTree element.

    Params are ``<param name="...">text</param>`` children of the element.
    """

    def __init__(self, element: ET.Element):
        self._element = element

    @classmethod
    def from_string(cls, text: str) -> XmlSource:
        """Parse text and wrap its root element."""
        return cls(ET.fromstring(text))  # nosec B314

    def get_children_parsers(self, section_name: str) -> list[ConfigSource]:
        return [XmlSource(child) for child in self._element.findall(section_name)]

    def get_attribute(self, name: str) -> str | None:
        return self._element.get(name)

    def get_param(self, name: str) -> str | None:
        for param in self._element.findall("param"):
            if param.get("name") == name:
                return (param.text or "").strip()
        return None

    def __repr__(self) -> str:
        return f"XmlSource(<{self._element.tag} name={self._element.get('name')!r}>)"
