"""Data models for world elements."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PASSAGE = "passage"


def compare(token: str, index: int, name: str) -> bool:
    """Return True if ``token`` is the display ``index`` or names ``name``."""
    return token == str(index) or token.casefold() == name.casefold()


class Item(BaseModel):
    id: str
    name: str
    description: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)


class Container(BaseModel):
    """Amount-counted holder of items, keyed by item id.

    Present entries always carry an amount greater than zero.
    """

    entries: dict[str, int] = Field(default_factory=dict)  # noqa

    model_config = ConfigDict(extra="forbid")

    def add(self, item_id: str, amount: int = 1) -> None:
        if amount <= 0:
            return
        self.entries[item_id] = self.entries.get(item_id, 0) + amount

    def remove(self, item_id: str, amount: int = 1) -> int:
        """Remove up to ``amount`` of ``item_id`` and return what was removed."""
        present = self.entries.get(item_id, 0)
        if present <= 0 or amount <= 0:
            return 0
        if present > amount:
            self.entries[item_id] = present - amount
            return amount
        del self.entries[item_id]
        return present

    def move(self, item_id: str, other: Container, amount: int = 1) -> int:
        moved = self.remove(item_id, amount)
        other.add(item_id, moved)
        return moved

    def amount(self, item_id: str) -> int:
        return self.entries.get(item_id, 0)

    def listing(self) -> list[tuple[str, int]]:
        return list(self.entries.items())

    def __contains__(self, item_id: object) -> bool:
        return item_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)


class Prop(Container):
    name: str
    description: str = ""


class Connection(BaseModel):
    to: str
    direction: str
    type: str
    open: bool = False
    key: str | None = None

    model_config = ConfigDict(extra="forbid")


class Area(BaseModel):
    id: str
    name: str = "???"
    description: str = ""
    connections: list[Connection] = Field(default_factory=list)  # noqa
    items: Container = Field(default_factory=Container)  # noqa
    props: list[Prop] = Field(default_factory=list)  # noqa

    model_config = ConfigDict(extra="forbid")

    def find_prop(self, token: str) -> Prop | None:
        for idx, prop in enumerate(self.props, start=1):
            if compare(token, idx, prop.name):
                return prop
        return None

    def find_connection(self, direction: str) -> Connection | None:
        dir_cf = direction.casefold()
        for connection in self.connections:
            if connection.direction.casefold() == dir_cf:
                return connection
        return None


__all__ = [
    "PASSAGE",
    "compare",
    "Item",
    "Container",
    "Prop",
    "Connection",
    "Area",
]
