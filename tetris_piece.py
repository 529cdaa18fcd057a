"""Piece model, shape catalog, clockwise rotation"""
from dataclasses import dataclass
from typing import List, Sequence

COLS, ROWS = 10, 20

# Immutable catalog; pieces always work on a list copy.
SHAPES = {
    "I": ((1,1,1,1),),
    "O": ((1,1),(1,1)),
    "T": ((0,1,0),(1,1,1)),
    "S": ((0,1,1),(1,1,0)),
    "Z": ((1,1,0),(0,1,1)),
    "J": ((1,0,0),(1,1,1)),
    "L": ((0,0,1),(1,1,1)),
}

COLORS = {
    "I": "#00f0f0",
    "O": "#f0f000",
    "T": "#a000f0",
    "S": "#00f000",
    "Z": "#f00000",
    "J": "#0000f0",
    "L": "#f0a000",
}

KINDS = tuple(SHAPES)


def rotate_cw(m: Sequence[Sequence[int]]) -> List[List[int]]:
    """Rotate an R x C matrix 90 degrees clockwise into a C x R matrix.

    out[j][R-1-i] == m[i][j]. The result is not recentered.
    """
    rows, cols = len(m), len(m[0])
    out = [[0] * rows for _ in range(cols)]
    for i in range(rows):
        for j in range(cols):
            out[j][rows - 1 - i] = m[i][j]
    return out


@dataclass
class Piece:
    t: str
    shape: List[List[int]]
    x: int = 0
    y: int = 0

    @property
    def color(self) -> str:
        return COLORS[self.t]

    @property
    def width(self) -> int:
        return len(self.shape[0])

    @property
    def height(self) -> int:
        return len(self.shape)

    def cells(self):
        """Board coordinates of every occupied cell, including rows above the top."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

    @staticmethod
    def spawn(t: str, cols: int = COLS):
        s = [list(r) for r in SHAPES[t]]
        return Piece(t, s, cols // 2 - len(s[0]) // 2, 0)
