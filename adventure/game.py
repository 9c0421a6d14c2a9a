"""Core interpreter loop."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from . import i18n
from .commands import CommandProcessor
from .integrity import START_ENTRY
from .interfaces import IOBackend
from .io import ConsoleIO
from .markup import MarkupError
from .script import Command
from .session import Session, State
from .world import World, WorldDataError


class EngineState(Enum):
    RUNNING_QUEUE = "running_queue"
    RUNNING_SCRIPT = "running_script"
    AWAITING_INPUT = "awaiting_input"
    SUSPENDED = "suspended"
    FINISHED = "finished"


class Game:
    """Drive one session over a loaded world.

    Every call to :meth:`tick` performs one unit of work: an answer for a
    suspended select, one queued command, one scripted command, or one round
    of free-text input, in that order of priority.
    """

    def __init__(
        self,
        world_data_path: str | Path,
        io_backend: IOBackend | None = None,
        language: str = "en",
        debug: bool = False,
    ) -> None:
        self.io = io_backend or ConsoleIO()
        self.debug = debug
        self.messages = i18n.load_messages(language, self.io)
        self.prompt = self.messages.get("prompt", "> ")

        try:
            self.world = World.from_file(world_data_path, debug=debug)
        except FileNotFoundError as exc:
            self.io.output(f"ERROR: Missing world file: {exc}")
            raise SystemExit from exc
        except OSError as exc:
            self.io.output(f"ERROR: Cannot read world file: {exc}")
            raise SystemExit from exc
        except MarkupError as exc:
            self.io.output(f"ERROR: Invalid world file: {exc}")
            raise SystemExit from exc
        except WorldDataError as exc:
            for msg in exc.errors:
                self.io.output(f"ERROR: {msg}")
            raise SystemExit("Integrity check failed") from exc

        self.session = Session()
        self.command_processor = CommandProcessor(
            self.world,
            self.session,
            self.messages,
            self.io,
            self.reset,
        )
        self.reset()

    @property
    def state(self) -> EngineState:
        session = self.session
        if session.finished:
            return EngineState.FINISHED
        if session.pending is not None:
            return EngineState.SUSPENDED
        if session.queue:
            return EngineState.RUNNING_QUEUE
        if not session.script_exhausted:
            return EngineState.RUNNING_SCRIPT
        return EngineState.AWAITING_INPUT

    @property
    def finished(self) -> bool:
        return self.session.finished

    def reset(self) -> None:
        """Start over from the first entry with a fresh player state."""
        session = self.session
        self.world.reset()
        session.state = State()
        session.queue.clear()
        session.pending = None
        session.last_direction = None
        session.finished = False
        session.set_entry(self.world.find_entry(START_ENTRY))
        self.world.debug(f"reset entry {START_ENTRY}")

    def _execute(self, cmd: Command) -> None:
        if not cmd.execute(self):
            self.session.pending = cmd
            self.world.debug(f"suspended on {type(cmd).__name__}")

    def _await_selection(self, pending: Command) -> None:
        session = self.session
        follow_up = pending.receive_input(self.io.get_input(self.prompt))
        if follow_up is not None:
            session.pending = None
            session.push(follow_up)

    def tick(self) -> bool:
        """Perform one unit of work; return False once the session has ended."""

        session = self.session
        if session.finished:
            return False
        if session.pending is not None:
            self._await_selection(session.pending)
        elif session.queue:
            self._execute(session.queue.popleft())
        elif session.entry is not None and not session.script_exhausted:
            cmd = session.entry.get_command(session.cursor)
            session.cursor += 1
            self._execute(cmd)
        else:
            self.command_processor.execute(self.io.get_input(self.prompt))
        return True

    def run(self) -> None:
        try:
            while self.tick():
                pass
        except (EOFError, KeyboardInterrupt):
            self.io.output(self.messages["farewell"])


def run(
    world_data_path: str | Path,
    io_backend: IOBackend | None = None,
    language: str = "en",
    debug: bool = False,
) -> None:
    Game(world_data_path, io_backend=io_backend, language=language, debug=debug).run()


__all__ = ["EngineState", "Game", "run"]
