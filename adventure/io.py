"""Console transport for a play session."""

from __future__ import annotations

from .interfaces import IOBackend


class ConsoleIO(IOBackend):
    """Prompt and read player lines from stdin, print game text to stdout.

    Output is flushed per line so narration appears before the next prompt
    even when stdout is a pipe.
    """

    def get_input(self, prompt: str = "> ") -> str:
        # piped worlds written on Windows leave a carriage return behind
        return input(prompt).rstrip("\r")

    def output(self, text: str) -> None:
        print(text, flush=True)


__all__ = ["ConsoleIO"]
