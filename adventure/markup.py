"""Read adventure documents into a generic node tree.

Two notations are accepted for the same tree. XML::

    <adventure>
      <item id="key" name="Key" desc="A small brass key."/>
      <entry id="1"><text>Welcome</text></entry>
    </adventure>

and YAML, where every node is a single-key mapping ``{tag: body}``. The body
is either a scalar (the node value) or a mapping of attributes, with the
optional keys ``value`` (node value) and ``children`` (list of nodes)::

    adventure:
      - item: {id: key, name: Key, desc: A small brass key.}
      - entry:
          id: "1"
          children:
            - text: Welcome
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


class MarkupError(ValueError):
    """Raised when a document cannot be turned into a node tree."""


@dataclass
class DataNode:
    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    value: str = ""
    children: list[DataNode] = field(default_factory=list)

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self.attributes.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        raw = self.attributes.get(key)
        if raw is None or raw == "":
            return default
        try:
            return int(raw)
        except ValueError as exc:
            raise MarkupError(f"Attribute '{key}' of <{self.name}> is not an integer: '{raw}'") from exc

    def child(self, name: str) -> DataNode | None:
        """Return the first direct child called ``name``."""
        for node in self.children:
            if node.name == name:
                return node
        return None


def _from_element(element: ET.Element) -> DataNode:
    return DataNode(
        name=element.tag,
        attributes=dict(element.attrib),
        value=(element.text or "").strip(),
        children=[_from_element(child) for child in element],
    )


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


def _from_yaml(raw: Any) -> DataNode:
    if not isinstance(raw, dict) or len(raw) != 1:
        raise MarkupError(f"Expected a single-key mapping for a node, got {raw!r}")
    ((name, body),) = raw.items()
    if not isinstance(body, dict):
        if isinstance(body, list):
            return DataNode(name=str(name), children=[_from_yaml(c) for c in body])
        return DataNode(name=str(name), value=_scalar(body))
    attributes: dict[str, str] = {}
    value = ""
    children: list[DataNode] = []
    for key, val in body.items():
        if key == "children":
            children = [_from_yaml(c) for c in (val or [])]
        elif key == "value":
            value = _scalar(val)
        else:
            attributes[str(key)] = _scalar(val)
    return DataNode(name=str(name), attributes=attributes, value=value, children=children)


def read_xml(text: str) -> DataNode:
    try:
        element = ET.fromstring(text)
    except ET.ParseError as exc:
        raise MarkupError(f"Invalid XML: {exc}") from exc
    return _from_element(element)


def read_yaml(text: str) -> DataNode:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise MarkupError(f"Invalid YAML: {exc}") from exc
    if data is None:
        raise MarkupError("Document is empty")
    return _from_yaml(data)


def read_file(path: str | Path) -> DataNode:
    """Read ``path`` as YAML (``.yaml``/``.yml``) or XML (anything else)."""

    path = Path(path)
    try:
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
    except UnicodeDecodeError as exc:
        raise MarkupError(f"Invalid encoding: {exc}") from exc
    if path.suffix.lower() in (".yaml", ".yml"):
        return read_yaml(text)
    return read_xml(text)


__all__ = ["DataNode", "MarkupError", "read_xml", "read_yaml", "read_file"]
