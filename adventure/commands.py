"""Free-text command handling for the game."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from . import parser, world
from .interfaces import IOBackend
from .script import ContinueCommand, CustomCommand, SelectCommand, SelectOption
from .session import Session, State
from .world_model import Prop


def require_args(n: int) -> Callable[[Callable[..., bool | None]], Callable[..., bool]]:
    """Ensure that at least ``n`` tokens follow the verb.

    Extra tokens are passed through; handlers that need none ignore them.
    """

    def decorator(func: Callable[..., bool | None]) -> Callable[..., bool]:
        @wraps(func)
        def wrapper(self, *args: str) -> bool:
            if len(args) < n:
                return False
            res = func(self, *args)
            return bool(res) if res is not None else True

        return wrapper

    return decorator


class CommandProcessor:
    """Parse and execute free-text player commands."""

    def __init__(
        self,
        world: world.World,
        session: Session,
        messages: dict[str, str],
        io: IOBackend,
        reset: Callable[[], None],
    ) -> None:
        self.world = world
        self.session = session
        self.messages = messages
        self.io = io
        self.reset = reset

    @property
    def state(self) -> State:
        return self.session.state

    def execute(self, raw: str) -> bool:
        """Run one line of player input; return False if it was not understood."""

        parsed = parser.parse(raw)
        if not parsed.verb:
            return True
        handler = getattr(self, f"cmd_{parsed.verb}", None)
        self.world.debug(f"command {parsed.verb} args {parsed.args}")
        ok = bool(handler(*parsed.args)) if handler else False
        if not ok:
            self.io.output(self.messages["not_understood"])
        return ok

    def _article(self, amount: int) -> str:
        return self.messages["article_some"] if amount > 1 else self.messages["article_one"]

    def _describe_contents(self, prop: Prop) -> None:
        if not len(prop):
            self.io.output(self.messages["prop_empty"].format(prop=prop.name))
            return
        self.io.output(self.messages["prop_contents"].format(prop=prop.name))
        for idx, (item_id, amount) in enumerate(prop.listing(), start=1):
            self.io.output(
                self.messages["prop_entry"].format(
                    article=self._article(amount),
                    item=self.world.item_name(item_id),
                    index=idx,
                )
            )

    def _finish(self, _game: object) -> bool:
        self.io.output(self.messages["farewell"])
        self.session.finished = True
        self.world.debug("session finished")
        return True

    @require_args(0)
    def cmd_restart(self, *_tokens: str) -> bool:
        self.io.output(self.messages["restarted"])
        self.reset()
        return True

    @require_args(0)
    def cmd_quit(self, *_tokens: str) -> bool:
        self.session.push(
            SelectCommand(
                self.messages["quit_prompt"],
                [
                    SelectOption(self.messages["quit_yes"], CustomCommand(self._finish)),
                    SelectOption(self.messages["quit_no"], ContinueCommand()),
                ],
            )
        )
        return True

    @require_args(0)
    def cmd_items(self, *_tokens: str) -> bool:
        listing = self.state.items.listing()
        if not listing:
            self.io.output(self.messages["inventory_empty"])
            return True
        self.io.output(self.messages["inventory_header"])
        for item_id, amount in listing:
            self.io.output(self.messages["inventory_entry"].format(item=self.world.item_name(item_id), amount=amount))
        return True

    @require_args(1)
    def cmd_drop(self, *tokens: str) -> bool:
        area = self.state.area
        item = parser.resolve_in(self.world, self.state.items, " ".join(tokens))
        if area is None or item is None:
            self.io.output(self.messages["drop_failure"])
            return True
        self.state.items.move(item.id, area.items)
        self.world.debug(f"inventory {self.state.items.entries} area {area.id} items {area.items.entries}")
        self.io.output(self.messages["dropped"].format(item=item.name))
        return True

    @require_args(1)
    def cmd_take(self, *tokens: str) -> bool:
        target = parser.resolve_target(self.world, self.state, list(tokens))
        item = target.item if target else None
        if target is None or item is None or target.container is None:
            self.io.output(self.messages["take_failure"])
            return True
        if target.container is self.state.items:
            self.io.output(self.messages["already_carried"].format(item=item.name))
            return True
        target.container.move(item.id, self.state.items)
        self.world.debug(f"inventory {self.state.items.entries}")
        self.io.output(self.messages["taken"].format(item=item.name))
        return True

    @require_args(1)
    def cmd_examine(self, *tokens: str) -> bool:
        target = parser.resolve_target(self.world, self.state, list(tokens))
        if target is None:
            self.io.output(self.messages["examine_failure"])
            return True
        prop = target.prop
        if prop is not None:
            if prop.description:
                self.io.output(prop.description)
            self._describe_contents(prop)
            return True
        item = target.item
        if item is not None:
            self.io.output(item.description or item.name)
        return True

    @require_args(1)
    def cmd_go(self, *tokens: str) -> bool:
        requested = " ".join(tokens)
        going_back = requested.casefold() == "back"
        direction = parser.opposite_direction(self.session.last_direction) if going_back else requested
        area = self.state.area
        connection = area.find_connection(direction) if area is not None and direction else None
        if connection is None:
            self.io.output(self.messages["cannot_move"])
        elif not connection.open:
            self.io.output(self.messages["blocked"].format(type=connection.type, direction=connection.direction))
        else:
            self.io.output(self.messages["moved"].format(direction=connection.direction))
            self.session.last_direction = connection.direction
            self.state.area = self.world.find_area(connection.to)
            self.world.debug(f"location {connection.to}")
        if going_back:
            self.session.last_direction = None
        return True

    @require_args(1)
    def cmd_open(self, *tokens: str) -> bool:
        area = self.state.area
        connection = area.find_connection(" ".join(tokens)) if area is not None else None
        if area is None or connection is None:
            self.io.output(self.messages["open_failure"])
            return True
        fmt = {"type": connection.type, "direction": connection.direction}
        if connection.open:
            self.io.output(self.messages["already_open"].format(**fmt))
            return True
        if connection.key and connection.key not in self.state.items:
            self.io.output(self.messages["needs_key"].format(item=self.world.item_name(connection.key), **fmt))
            return True
        connection.open = True
        destination = self.world.find_area(connection.to)
        if destination is not None:
            for back in destination.connections:
                if back.to == area.id and back.type == connection.type:
                    back.open = True
        self.world.debug(f"opened {area.id} [{connection.direction}] -> {connection.to}")
        self.io.output(self.messages["opened"].format(**fmt))
        return True

    @require_args(0)
    def cmd_look(self, *_tokens: str) -> bool:
        area = self.state.area
        if area is None:
            return True
        self.io.output(area.description)
        for idx, prop in enumerate(area.props, start=1):
            self.io.output(self.messages["look_prop"].format(prop=prop.name, index=idx))
        for connection in area.connections:
            self.io.output(self.messages["look_connection"].format(type=connection.type, direction=connection.direction))
        for idx, (item_id, amount) in enumerate(area.items.listing(), start=1):
            self.io.output(
                self.messages["look_item"].format(
                    article=self._article(amount),
                    item=self.world.item_name(item_id),
                    index=idx,
                )
            )
        return True


__all__ = ["CommandProcessor", "require_args"]
