"""
Random Command Generation

Produces random but reproducible command scripts for exploring the
simulator by hand or for regression tests. Generated scripts carry no
guarantee beyond being grammatical.
"""

import numpy as np
from typing import List, Optional

from ..table.robot import Facing


class RandomCommandGenerator:
    """
    Generates scripts of the shape:

        PLACE x,y,FACING
        (LEFT | RIGHT | nothing) [MOVE] [PLACE x,y,FACING]   x rounds
        REPORT

    Each round turns left or right with probability 1/3 each, moves with
    probability `move_probability` and adds an extra PLACE with
    probability `place_probability`.
    """

    def __init__(
        self,
        width: int,
        height: int,
        rounds: int = 10,
        move_probability: float = 0.5,
        place_probability: float = 0.1,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Args:
            width: Table width placements are drawn from
            height: Table height placements are drawn from
            rounds: Number of turn/move/place rounds
            move_probability: Chance of a MOVE per round
            place_probability: Chance of an extra PLACE per round
            seed: Random seed for reproducibility (ignored if rng is given)
            rng: Explicit numpy random generator
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Table dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.rounds = rounds
        self.move_probability = move_probability
        self.place_probability = place_probability
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def random_place(self) -> str:
        """A PLACE command at a uniformly random cell and facing."""
        x = int(self.rng.integers(self.width))
        y = int(self.rng.integers(self.height))
        facing = Facing(int(self.rng.integers(4)))
        return f"PLACE {x},{y},{facing.name}"

    def generate_commands(self) -> List[str]:
        """Generate one script as a list of command lines."""
        commands = [self.random_place()]

        for _ in range(self.rounds):
            turn = int(self.rng.integers(3)) - 1
            if turn < 0:
                commands.append("LEFT")
            elif turn > 0:
                commands.append("RIGHT")

            if self.rng.random() < self.move_probability:
                commands.append("MOVE")

            if self.rng.random() < self.place_probability:
                commands.append(self.random_place())

        commands.append("REPORT")
        return commands

    def generate(self) -> str:
        """Generate one script as newline-separated text."""
        return "\n".join(self.generate_commands())


def generate_random_script(width: int, height: int, seed: Optional[int] = None, **kwargs) -> str:
    """Convenience wrapper around RandomCommandGenerator.generate()."""
    return RandomCommandGenerator(width, height, seed=seed, **kwargs).generate()
