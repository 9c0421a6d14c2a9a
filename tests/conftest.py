import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from adventure.game import EngineState, Game  # noqa: E402
from adventure.interfaces import IOBackend  # noqa: E402

TWO_AREAS = """<adventure>
  <area id="A" name="Alpha" desc="Area A.">
    <connects to="B" dir="east" type="passage"/>
  </area>
  <area id="B" name="Beta" desc="Area B.">
    <connects to="A" dir="west" type="passage"/>
  </area>
  <entry id="1">
    <text>Welcome</text>
    <enter area="A"/>
  </entry>
</adventure>
"""

HALL = """<adventure>
  <item id="coin" name="Coin" desc="A copper coin."/>
  <item id="key" name="Key" desc="An iron key."/>
  <item id="toy" name="Chest" desc="A toy chest."/>
  <item id="letter" name="Letter" desc="A sealed letter."/>
  <area id="hall" name="Hall" desc="A dusty hall.">
    <contains item="coin" ammount="3"/>
    <contains item="toy"/>
    <connects to="vault" dir="north" type="door" key="key"/>
    <connects to="yard" dir="south" type="passage"/>
    <connects to="attic" dir="up" type="door"/>
    <prop name="Chest" desc="A heavy oak chest.">
      <contains item="letter"/>
      <contains item="key"/>
    </prop>
    <prop name="Shelf" desc="An empty shelf."/>
  </area>
  <area id="vault" name="Vault" desc="A cold vault.">
    <connects to="hall" dir="south" type="door" key="key"/>
  </area>
  <area id="attic" name="Attic" desc="A low attic.">
    <connects to="hall" dir="down" type="door"/>
  </area>
  <area id="yard" name="Yard" desc="A muddy yard.">
    <connects to="hall" dir="north" type="passage"/>
    <connects to="shed" dir="inside" type="passage"/>
  </area>
  <area id="shed" name="Shed" desc="A tiny shed.">
    <connects to="yard" dir="outside" type="passage"/>
  </area>
  <entry id="1">
    <enter area="hall"/>
  </entry>
</adventure>
"""


class DummyIO(IOBackend):
    def __init__(self, inputs: list[str] | None = None) -> None:
        self.inputs = inputs or []
        self.outputs: list[str] = []
        self.prompts = 0

    def get_input(self, prompt: str = "> ") -> str:  # noqa: ARG002 - test stub
        self.prompts += 1
        if not self.inputs:
            raise EOFError
        return self.inputs.pop(0)

    def output(self, text: str) -> None:
        self.outputs.append(text)


def write_world(path: Path, text: str, name: str = "world.xml") -> Path:
    target = path / name
    target.write_text(text, encoding="utf-8")
    return target


def drain(game: Game) -> None:
    """Tick until the engine needs player input."""
    while game.state in (EngineState.RUNNING_QUEUE, EngineState.RUNNING_SCRIPT):
        assert game.tick()


def send(game: Game, line: str) -> list[str]:
    """Feed one line of input and return what the engine printed for it."""
    io = game.io
    start = len(io.outputs)
    io.inputs.append(line)
    assert game.tick()
    drain(game)
    return io.outputs[start:]


@pytest.fixture
def io_backend() -> DummyIO:
    return DummyIO()


@pytest.fixture
def two_area_path(tmp_path) -> Path:
    return write_world(tmp_path, TWO_AREAS)


@pytest.fixture
def hall_path(tmp_path) -> Path:
    return write_world(tmp_path, HALL)


@pytest.fixture
def hall_game(hall_path, io_backend) -> Game:
    g = Game(hall_path, io_backend=io_backend)
    drain(g)
    return g
