"""
Generation Module

Reproducible random command scripts.
"""

from .random_commands import RandomCommandGenerator, generate_random_script

__all__ = [
    "RandomCommandGenerator",
    "generate_random_script",
]
