"""Scripted commands and the entries that sequence them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .markup import DataNode

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .game import Game


class ScriptIndexError(IndexError):
    """Raised when a command is read past the end of an entry."""


class Command(ABC):
    """Base class for every scripted or queued command.

    ``execute`` returns True when the command completed in one step. A command
    returning False suspends the engine until ``receive_input`` yields the
    follow-up command.
    """

    @abstractmethod
    def execute(self, game: Game) -> bool:
        ...

    def receive_input(self, line: str) -> Command | None:
        return None


@dataclass
class TextCommand(Command):
    text: str

    def execute(self, game: Game) -> bool:
        game.io.output(self.text)
        return True


@dataclass
class EnterCommand(Command):
    area_id: str

    def execute(self, game: Game) -> bool:
        game.session.state.area = game.world.find_area(self.area_id)
        game.world.debug(f"enter area {self.area_id}")
        return True


@dataclass
class ContinueCommand(Command):
    def execute(self, game: Game) -> bool:
        return True


@dataclass
class CustomCommand(Command):
    action: Callable[[Game], bool]

    def execute(self, game: Game) -> bool:
        return self.action(game)


@dataclass
class SelectOption:
    text: str
    command: Command


@dataclass
class SelectCommand(Command):
    text: str
    options: list[SelectOption] = field(default_factory=list)

    def execute(self, game: Game) -> bool:
        game.io.output(self.text)
        template = game.messages.get("select_option", "{index} - {text}")
        for idx, option in enumerate(self.options, start=1):
            game.io.output(template.format(index=idx, text=option.text))
        return False

    def receive_input(self, line: str) -> Command | None:
        line = line.strip()
        for idx, option in enumerate(self.options, start=1):
            if line == str(idx) or line == option.text:
                return option.command
        return None


def _select_from_node(node: DataNode) -> SelectCommand:
    prompt = node.get_string("text") or node.value
    options: list[SelectOption] = []
    for child in node.children:
        if child.name.lower() != "option":
            continue
        follow_up: Command | None = None
        for sub in child.children:
            follow_up = command_from_node(sub)
            if follow_up is not None:
                break
        text = child.get_string("text") or child.value
        options.append(SelectOption(text, follow_up or ContinueCommand()))
    return SelectCommand(prompt, options)


def command_from_node(node: DataNode) -> Command | None:
    """Build a command from ``node``; unknown tags give None."""

    tag = node.name.lower()
    if tag == "text":
        return TextCommand(node.value)
    if tag == "enter":
        return EnterCommand(node.get_string("area", "") or "")
    if tag == "continue":
        return ContinueCommand()
    if tag == "select":
        return _select_from_node(node)
    return None


class Entry:
    """A named scene: an ordered, immutable list of commands."""

    def __init__(self, entry_id: str, commands: list[Command] | None = None):
        self.id = entry_id
        self._commands = tuple(commands or ())

    @classmethod
    def from_node(cls, node: DataNode) -> Entry:
        commands: list[Command] = []
        for child in node.children:
            if child.name == "id":
                continue
            cmd = command_from_node(child)
            if cmd is not None:
                commands.append(cmd)
        return cls(node.get_string("id", "") or "", commands)

    @property
    def command_count(self) -> int:
        return len(self._commands)

    def get_command(self, index: int) -> Command:
        if not 0 <= index < len(self._commands):
            raise ScriptIndexError(f"Entry '{self.id}' has no command at index {index} (count {len(self._commands)})")
        return self._commands[index]


__all__ = [
    "ScriptIndexError",
    "Command",
    "TextCommand",
    "EnterCommand",
    "ContinueCommand",
    "CustomCommand",
    "SelectOption",
    "SelectCommand",
    "command_from_node",
    "Entry",
]
