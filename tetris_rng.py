"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import KINDS


class UniformRandom:
    """Draws each of the seven kinds with probability 1/7, independent of history."""
    PIECES = list(KINDS)

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_piece(self) -> str:
        return self._rng.choice(self.PIECES)
