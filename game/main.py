"""Entry point for running the sample adventure."""

import argparse
import contextlib
from pathlib import Path

from adventure.game import run

DEFAULT_WORLD = Path(__file__).parent.parent / "data" / "adventure.xml"


def run_cli(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        "world",
        nargs="?",
        default=str(DEFAULT_WORLD),
        help="Adventure document to play (XML, or YAML with a .yaml/.yml suffix)",
    )
    parser.add_argument("--language", default="en")
    parser.add_argument(
        "--debug",
        nargs="?",
        const=True,
        metavar="FILE",
        help="Enable debug tracing on STDERR; optionally redirect the trace to FILE",
    )
    args = parser.parse_args(argv)
    debug_opt = args.debug

    if isinstance(debug_opt, str):  # --debug FILE provided
        with open(debug_opt, "w", encoding="utf-8") as fh, contextlib.redirect_stderr(fh):
            run(args.world, language=args.language, debug=True)
    else:
        run(args.world, language=args.language, debug=bool(debug_opt))


if __name__ == "__main__":
    run_cli()
