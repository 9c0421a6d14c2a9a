"""Boundary between the interpreter and whoever is playing."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IOBackend(Protocol):
    """Line-oriented player transport used by ``Game``.

    Scripted text, command replies and ``ERROR:`` load reports all go through
    ``output``. ``get_input`` is called once per tick while the engine is idle
    or suspended on a select; raising ``EOFError`` ends the session.
    """

    def get_input(self, prompt: str = "> ") -> str:  # pragma: no cover - interface
        """Show the prompt marker and return the player's next line."""
        ...

    def output(self, text: str) -> None:  # pragma: no cover - interface
        """Show one line of game text."""
        ...


__all__ = ["IOBackend"]
