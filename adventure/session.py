"""Mutable runtime state of one play session."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .script import Command, Entry
from .world_model import Area, Container


@dataclass
class State:
    area: Area | None = None
    items: Container = field(default_factory=Container)


@dataclass
class Session:
    """Everything the engine mutates while ticking.

    ``pending`` holds a select command waiting for a matching answer; while it
    is set the engine reads input for it instead of advancing.
    """

    state: State = field(default_factory=State)
    queue: deque[Command] = field(default_factory=deque)
    entry: Entry | None = None
    cursor: int = 0
    last_direction: str | None = None
    pending: Command | None = None
    finished: bool = False

    def push(self, command: Command) -> None:
        self.queue.append(command)

    def set_entry(self, entry: Entry | None) -> None:
        self.entry = entry
        self.cursor = 0

    @property
    def script_exhausted(self) -> bool:
        return self.entry is None or self.cursor >= self.entry.command_count


__all__ = ["State", "Session"]
