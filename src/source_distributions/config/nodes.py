"""
Read-only views over configuration documents.

The distribution factory only needs three queries on a node: whether a field
exists, its text, and its text parsed as an array of reals. ``MappingNode``
answers them for YAML/dict documents and ``XmlNode`` for XML elements, where
a field may be either an attribute or a child element.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol
from xml.etree import ElementTree as ET


class ConfigNode(Protocol):
    def has(self, name: str) -> bool: ...

    def get_value(
        self, name: str, lowercase: bool = False, strip: bool = False
    ) -> str: ...

    def get_array(self, name: str) -> list[float]: ...

    def child(self, name: str) -> "ConfigNode | None": ...


def _format_text(text: str, lowercase: bool, strip: bool) -> str:
    if lowercase:
        text = text.lower()
    if strip:
        text = text.strip()
    return text


def parse_reals(tokens: Sequence[Any]) -> list[float]:
    """
    Convert tokens to floats, stopping at the first non-numeric token.

    Args:
        tokens: Strings or numbers.

    Returns:
        Values parsed before the first token that is not a real number.
    """
    values: list[float] = []
    for token in tokens:
        if isinstance(token, bool):
            break
        try:
            values.append(float(token))
        except (TypeError, ValueError):
            break
    return values


class MappingNode:
    """
    Node backed by a mapping, e.g. a dict loaded from YAML.

    Fields holding lists are read as arrays directly; scalar fields are
    read as whitespace-separated text.
    """

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def has(self, name: str) -> bool:
        return name in self._data and self._data[name] is not None

    def get_value(
        self, name: str, lowercase: bool = False, strip: bool = False
    ) -> str:
        """Text of a field, or an empty string when it is absent."""
        if not self.has(name):
            return ""

        value = self._data[name]
        if isinstance(value, Sequence) and not isinstance(value, str):
            text = " ".join(str(item) for item in value)
        else:
            text = str(value)
        return _format_text(text, lowercase, strip)

    def get_array(self, name: str) -> list[float]:
        if not self.has(name):
            return []

        value = self._data[name]
        if isinstance(value, Sequence) and not isinstance(value, str):
            return parse_reals(value)
        return parse_reals(str(value).split())

    def child(self, name: str) -> "MappingNode | None":
        value = self._data.get(name)
        if isinstance(value, Mapping):
            return MappingNode(value)
        return None


class XmlNode:
    """Node backed by an XML element. Attributes win over child elements."""

    def __init__(self, element: ET.Element) -> None:
        self._element = element

    def has(self, name: str) -> bool:
        return name in self._element.attrib or (
            self._element.find(name) is not None
        )

    def get_value(
        self, name: str, lowercase: bool = False, strip: bool = False
    ) -> str:
        """Text of an attribute or child element, or an empty string."""
        if name in self._element.attrib:
            text = self._element.attrib[name]
        else:
            sub = self._element.find(name)
            text = (sub.text or "") if sub is not None else ""
        return _format_text(text, lowercase, strip)

    def get_array(self, name: str) -> list[float]:
        return parse_reals(self.get_value(name).split())

    def child(self, name: str) -> "XmlNode | None":
        sub = self._element.find(name)
        if sub is None:
            return None
        return XmlNode(sub)
