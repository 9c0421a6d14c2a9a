"""World representation loaded from adventure documents."""

from __future__ import annotations

import inspect
import os
import sys
from pathlib import Path

from . import integrity, markup
from .markup import DataNode
from .script import Entry
from .world_model import PASSAGE, Area, Connection, Container, Item, Prop


class WorldDataError(ValueError):
    """Raised when a document references ids that do not exist."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _fill_container(container: Container, node: DataNode) -> None:
    for child in node.children:
        if child.name != "contains":
            continue
        amount = child.get_int("ammount", child.get_int("amount", 1))
        container.add(child.get_string("item", "") or "", amount)


class World:
    def __init__(self, root: DataNode, debug: bool = False):
        errors = integrity.validate_document(root)
        if errors:
            raise WorldDataError(errors)
        self._root = root
        self._debug_enabled = debug
        self.items: dict[str, Item] = {}
        self.areas: dict[str, Area] = {}
        self.entries: dict[str, Entry] = {}
        self._load()

    def _load(self) -> None:
        self.items.clear()
        self.areas.clear()
        self.entries.clear()
        area_nodes: list[DataNode] = []
        for node in self._root.children:
            tag = node.name.lower()
            if tag == "entry":
                entry = Entry.from_node(node)
                self.entries[entry.id] = entry
            elif tag == "area":
                area_id = node.get_string("id", "") or ""
                self.areas[area_id] = Area(id=area_id)
                area_nodes.append(node)
            elif tag == "item":
                item = Item(
                    id=node.get_string("id", "") or "",
                    name=node.get_string("name", "") or "",
                    description=node.get_string("desc", "") or "",
                )
                self.items[item.id] = item
        # areas reference siblings that are only registered after the first pass
        for node in area_nodes:
            self._load_area(self.areas[node.get_string("id", "") or ""], node)
        self.debug(f"world_loaded areas {list(self.areas)} items {list(self.items)} entries {list(self.entries)}")

    def _load_area(self, area: Area, node: DataNode) -> None:
        area.name = node.get_string("name", "???") or "???"
        area.description = node.get_string("desc", "") or ""
        _fill_container(area.items, node)
        for child in node.children:
            if child.name == "connects":
                kind = child.get_string("type", "") or ""
                area.connections.append(
                    Connection(
                        to=child.get_string("to", "") or "",
                        direction=child.get_string("dir", "") or "",
                        type=kind,
                        open=kind == PASSAGE,
                        key=child.get_string("key") or None,
                    )
                )
            elif child.name == "prop":
                prop = Prop(name=child.get_string("name", "") or "", description=child.get_string("desc", "") or "")
                _fill_container(prop, child)
                area.props.append(prop)

    def debug(self, message: str) -> None:
        if self._debug_enabled:
            frame = inspect.stack()[1]
            filename = os.path.basename(frame.filename)
            lineno = frame.lineno
            print(f"{filename}:{lineno} -- {message}", file=sys.stderr)

    @classmethod
    def from_node(cls, root: DataNode, debug: bool = False) -> World:
        if root.name != "adventure":
            root = root.child("adventure") or root
        return cls(root, debug=debug)

    @classmethod
    def from_file(cls, path: str | Path, debug: bool = False) -> World:
        return cls.from_node(markup.read_file(path), debug=debug)

    def reset(self) -> None:
        """Restore every area to its load-time contents."""
        self._load()

    def find_area(self, area_id: str) -> Area | None:
        return self.areas.get(area_id)

    def find_item(self, item_id: str) -> Item | None:
        return self.items.get(item_id)

    def find_entry(self, entry_id: str) -> Entry | None:
        return self.entries.get(entry_id)

    def item_name(self, item_id: str) -> str:
        item = self.items.get(item_id)
        return item.name if item else item_id


__all__ = ["World", "WorldDataError"]
