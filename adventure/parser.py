"""Tokenize player input and resolve nouns against the world."""

from __future__ import annotations

from dataclasses import dataclass, field

from .session import State
from .world import World
from .world_model import Container, Item, Prop, compare

BAG = "bag"
FROM = "from"

OPPOSITE_DIRECTIONS: dict[str, str] = {
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
    "up": "down",
    "down": "up",
}


@dataclass
class ParsedInput:
    verb: str
    args: list[str] = field(default_factory=list)

    @property
    def argument(self) -> str:
        return " ".join(self.args)


@dataclass
class Target:
    """A resolved noun and the container that currently holds it.

    ``container`` is None when a prop itself was matched.
    """

    entity: Item | Prop
    container: Container | None = None

    @property
    def item(self) -> Item | None:
        return self.entity if isinstance(self.entity, Item) else None

    @property
    def prop(self) -> Prop | None:
        return self.entity if isinstance(self.entity, Prop) else None


def parse(line: str) -> ParsedInput:
    tokens = line.split()
    if not tokens:
        return ParsedInput("")
    return ParsedInput(tokens[0].lower(), tokens[1:])


def opposite_direction(direction: str | None) -> str | None:
    if direction is None:
        return None
    return OPPOSITE_DIRECTIONS.get(direction.casefold())


def resolve_in(world: World, container: Container, token: str) -> Item | None:
    """Match ``token`` against the enumerated contents of ``container``."""
    for idx, (item_id, _amount) in enumerate(container.listing(), start=1):
        item = world.find_item(item_id)
        if item is not None and compare(token, idx, item.name):
            return item
    return None


def resolve_source(state: State, token: str) -> Container | None:
    if token.casefold() == BAG:
        return state.items
    if state.area is None:
        return None
    return state.area.find_prop(token)


def split_from(args: list[str]) -> tuple[str, str | None]:
    """Split ``X from Y`` into its two sides; the source is None without ``from``."""
    lowered = [a.casefold() for a in args]
    if FROM not in lowered:
        return " ".join(args), None
    pos = lowered.index(FROM)
    return " ".join(args[:pos]), " ".join(args[pos + 1 :])


def resolve_target(world: World, state: State, args: list[str]) -> Target | None:
    """Resolve ``<target>`` or ``<target> from <source>`` for take and examine."""

    token, source = split_from(args)
    if not token:
        return None
    if source is not None:
        if not source:
            return None
        container = resolve_source(state, source)
        if container is None:
            return None
        item = resolve_in(world, container, token)
        return Target(item, container) if item else None

    area = state.area
    if area is None:
        return None
    item = resolve_in(world, area.items, token)
    if item is not None:
        return Target(item, area.items)
    prop = area.find_prop(token)
    if prop is not None:
        return Target(prop)
    return None


__all__ = [
    "BAG",
    "OPPOSITE_DIRECTIONS",
    "ParsedInput",
    "Target",
    "parse",
    "opposite_direction",
    "resolve_in",
    "resolve_source",
    "split_from",
    "resolve_target",
]
