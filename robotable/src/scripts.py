"""
Example Scripts

Command scripts bundled with the package under data/examples/.
"""

from pathlib import Path
from typing import List

EXAMPLES_DIR = Path(__file__).parent.parent / "data" / "examples"


def list_examples() -> List[str]:
    """Names of the bundled example scripts, sorted."""
    return sorted(p.stem for p in EXAMPLES_DIR.glob("*.txt"))


def load_example(name: str) -> str:
    """
    Read a bundled example script.

    Args:
        name: Script name without extension (see list_examples())

    Raises:
        FileNotFoundError: If no example has that name
    """
    path = EXAMPLES_DIR / f"{name}.txt"
    if not path.is_file():
        raise FileNotFoundError(
            f"No example named '{name}'. Available: {', '.join(list_examples())}"
        )
    return path.read_text(encoding="utf-8")
