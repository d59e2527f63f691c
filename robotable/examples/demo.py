#!/usr/bin/env python3
"""
Robotable Demo

This script runs a few command scripts through a session and prints
the outcome log, the reports and the table after each run.
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import create_config
from src.generation.random_commands import generate_random_script
from src.scripts import list_examples, load_example
from src.session import Session


def print_separator(title: str = ""):
    """Print a visual separator."""
    print("\n" + "=" * 70)
    if title:
        print(f"  {title}")
        print("=" * 70)


def show(session: Session, script: str, multiple: bool = False):
    """Run a script and print everything a user would see."""
    result = session.run(script, multiple=multiple)

    print("\nScript:")
    for line in script.strip().splitlines():
        print(f"  {line}")

    print("\nLog:")
    for message in result.messages:
        print(f"  {message}")

    print(f"\n{'OK' if result.success else 'ERRORS'} - "
          f"{len(result.errors)} errors, {len(result.warnings)} warnings")
    print()
    print(session.render())


def demo_examples():
    """Run every bundled example on a fresh table."""
    for name in list_examples():
        print_separator(f"Example: {name}")
        session = Session(config=create_config(width=5, height=5))
        show(session, load_example(name), multiple=name.startswith("multiple"))


def demo_random(seed: int = 42):
    """Run a reproducible random script."""
    print_separator(f"Random script (seed={seed})")
    session = Session(config=create_config(width=5, height=5))
    show(session, generate_random_script(5, 5, seed=seed))


def main():
    """Run all demos."""
    demo_examples()
    demo_random()

    print_separator("DEMO COMPLETE")


if __name__ == "__main__":
    main()
