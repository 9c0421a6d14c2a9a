"""Player-facing message catalogues bundled under ``adventure/data``.

Free-text command replies are looked up by key (``not_understood``,
``moved``, ``look_connection`` ...) in ``messages.<language>.yaml``.
"""

from pathlib import Path

import yaml

from .interfaces import IOBackend

DATA_DIR = Path(__file__).resolve().parent / "data"


def _load_yaml(path: Path, io: IOBackend) -> dict:
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except FileNotFoundError as exc:
        io.output(f"ERROR: Missing file '{path.name}'")
        raise SystemExit from exc
    except yaml.YAMLError as exc:
        io.output(f"ERROR: Invalid YAML in '{path.name}': {exc}")
        raise SystemExit from exc
    if not isinstance(data, dict):
        io.output(f"ERROR: Message catalogue '{path.name}' must map keys to text")
        raise SystemExit
    return data


def load_messages(language: str, io: IOBackend) -> dict[str, str]:
    """Return the reply templates for ``language``; stop the session if unusable."""
    return {str(key): str(text) for key, text in _load_yaml(DATA_DIR / f"messages.{language}.yaml", io).items()}
