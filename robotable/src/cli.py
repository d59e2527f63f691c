"""
Command-line runner.

    robotable run script.txt --multiple --render
    robotable run -                       (read the script from stdin)
    robotable run --example example1
    robotable random --seed 42
    robotable examples
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import create_config
from .generation.random_commands import generate_random_script
from .scripts import list_examples, load_example
from .session import Session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robotable",
        description="Simulate robots moving on a table from a command script.",
    )
    parser.add_argument("--width", type=int, default=None, help="Table width (default: ROBOTABLE_WIDTH or 5)")
    parser.add_argument("--height", type=int, default=None, help="Table height (default: ROBOTABLE_HEIGHT or 5)")
    parser.add_argument("--log-level", type=str, default=None, help="Python logging level")

    sub = parser.add_subparsers(dest="action", required=True)

    run = sub.add_parser("run", help="Execute a command script")
    run.add_argument("script", nargs="?", default=None, help="Script file, or '-' for stdin")
    run.add_argument("--example", type=str, default=None, help="Run a bundled example instead of a file")
    run.add_argument("--multiple", action="store_true", help="PLACE adds robots instead of relocating")
    run.add_argument("--quiet", action="store_true", help="Only print reports")
    run.add_argument("--render", action="store_true", help="Draw the table after the script")

    rnd = sub.add_parser("random", help="Print a random command script")
    rnd.add_argument("--seed", type=int, default=None)
    rnd.add_argument("--rounds", type=int, default=10)

    sub.add_parser("examples", help="List bundled example scripts")

    return parser


def _read_script(args: argparse.Namespace) -> str:
    if args.example:
        return load_example(args.example)
    if args.script in (None, "-"):
        return sys.stdin.read()
    with open(args.script, encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = create_config(width=args.width, height=args.height)
    except ValueError as e:
        parser.error(str(e))
    if args.log_level:
        config.log_level = args.log_level
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        filename=config.log_file,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.action == "examples":
        for name in list_examples():
            print(name)
        return 0

    if args.action == "random":
        print(generate_random_script(
            config.table.width, config.table.height, seed=args.seed, rounds=args.rounds
        ))
        return 0

    try:
        script = _read_script(args)
    except OSError as e:
        parser.error(str(e))

    if args.quiet:
        config.logging_enabled = False
    session = Session(config=config)
    result = session.run(script, multiple=args.multiple or config.multiple)

    lines = result.messages if not args.quiet else result.reports
    for line in lines:
        print(line)
    if args.render:
        print()
        print(session.render())

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
