"""
Game-state engine.

Holds the board, the active and next piece, score/lines/level and the run
state. The host drives it with two kinds of calls:

  * a per-frame time advance (``update()`` from the engine clock, or
    ``advance_time(ms)`` with an explicit delta), and
  * the seven logical actions coming from the input layer.

Every method runs to completion synchronously; nothing here schedules itself
or touches pygame. Rejected actions (blocked move, blocked rotation, action
while paused) leave the state untouched and raise nothing.
"""
from __future__ import annotations
import enum
import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from tetris_config import CONFIG
from tetris_piece import Piece, rotate_cw, COLS, ROWS
from tetris_board import Board, new_board, collide, merge, sweep
from tetris_rng import UniformRandom

log = logging.getLogger(__name__)

KICK_OFFSETS = (0, -1, 1, -2, 2)


class RunState(enum.Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Celebration:
    rows: Tuple[int, ...]
    count: int


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


def drop_interval_for(level: int, base: int = 1000, step: int = 100, floor: int = 100) -> int:
    return max(floor, base - (level - 1) * step)


class TetrisEngine:
    def __init__(self, rng=None, clock: Optional[Callable[[], float]] = None,
                 cols: int = COLS, rows: int = ROWS):
        self.cols, self.rows = cols, rows
        self.rng = rng if rng is not None else UniformRandom(CONFIG["SEED"])
        self.clock = clock or monotonic_ms

        self.base_drop_ms = CONFIG["BASE_DROP_MS"]
        self.min_drop_ms = CONFIG["MIN_DROP_MS"]
        self.drop_step_ms = CONFIG["DROP_STEP_MS"]
        self.lines_per_level = CONFIG["LINES_PER_LEVEL"]
        self.line_scores = tuple(CONFIG["LINE_SCORES"])

        self.board: Board = new_board(cols, rows)
        self.current: Optional[Piece] = None
        self.next_piece: Optional[Piece] = None
        self.score = 0
        self.lines = 0
        self.level = 1
        self.state = RunState.NOT_STARTED
        self.drop_interval_ms = self.base_drop_ms
        self.drop_counter_ms = 0.0
        self._last_time = 0.0
        self._celebrations: List[Celebration] = []

    # ---------- Lifecycle ----------
    def start_game(self):
        self.board = new_board(self.cols, self.rows)
        self.score = 0
        self.lines = 0
        self.level = 1
        self.drop_interval_ms = self.base_drop_ms
        self.drop_counter_ms = 0.0
        self._celebrations.clear()
        # the previewed piece carries over into the new game
        self.current = None
        self.state = RunState.RUNNING
        self.spawn_next()
        self._last_time = self.clock()
        log.info("game started")

    def toggle_pause(self):
        if self.state is RunState.RUNNING:
            self.state = RunState.PAUSED
            log.debug("paused")
        elif self.state is RunState.PAUSED:
            self.state = RunState.RUNNING
            self._last_time = self.clock()
            log.debug("resumed")

    @property
    def running(self) -> bool:
        return self.state is RunState.RUNNING

    # ---------- Time ----------
    def update(self):
        """Advance by the wall-clock time since the previous call."""
        if not self.running: return
        now = self.clock()
        delta = now - self._last_time
        self._last_time = now
        self.advance_time(delta)

    def advance_time(self, delta_ms: float):
        if not self.running: return
        self.drop_counter_ms += max(0.0, delta_ms)
        if self.drop_counter_ms < self.drop_interval_ms: return
        if self.current is not None:
            if not self.collides(self.current.shape, self.current.x, self.current.y + 1):
                self.current.y += 1
            else:
                self._lock_piece()
        self.drop_counter_ms = 0.0

    # ---------- Actions ----------
    def move_left(self): self._move(-1, 0)

    def move_right(self): self._move(1, 0)

    def soft_drop(self): self._move(0, 1)

    def _move(self, dx: int, dy: int):
        if not self.running or self.current is None: return
        p = self.current
        if not self.collides(p.shape, p.x + dx, p.y + dy):
            p.x += dx; p.y += dy

    def rotate(self):
        if not self.running or self.current is None: return
        p = self.current
        rotated = rotate_cw(p.shape)
        for dx in KICK_OFFSETS:
            if not self.collides(rotated, p.x + dx, p.y):
                p.shape = rotated
                p.x += dx
                return

    def hard_drop(self):
        if not self.running or self.current is None: return
        p = self.current
        y = p.y
        while not self.collides(p.shape, p.x, y + 1):
            y += 1
        p.y = y
        self._lock_piece()

    # ---------- Rules ----------
    def collides(self, shape, x: int, y: int) -> bool:
        return collide(self.board, shape, x, y)

    def spawn_next(self):
        self.current = self.next_piece or self._draw()
        self.next_piece = self._draw()
        self.current.x = self.cols // 2 - self.current.width // 2
        self.current.y = 0
        if self.collides(self.current.shape, self.current.x, self.current.y):
            self.state = RunState.GAME_OVER
            log.info("game over: score=%d lines=%d level=%d", self.score, self.lines, self.level)

    def _draw(self) -> Piece:
        return Piece.spawn(self.rng.next_piece(), self.cols)

    def _lock_piece(self):
        if self.current is None: return
        # cells above the top row are dropped
        merge(self.board, self.current)
        self._clear_lines()
        self.spawn_next()

    def _clear_lines(self):
        cleared = sweep(self.board)
        n = len(cleared)
        if not n: return
        self.lines += n
        self.score += self.line_scores[n] * self.level
        new_level = self.lines // self.lines_per_level + 1
        if new_level > self.level:
            self.level = new_level
            self.drop_interval_ms = drop_interval_for(
                self.level, self.base_drop_ms, self.drop_step_ms, self.min_drop_ms)
            log.info("level %d, drop interval %d ms", self.level, self.drop_interval_ms)
        self._celebrations.append(Celebration(tuple(cleared), n))

    def pop_celebrations(self) -> List[Celebration]:
        """Return pending line-clear events once; later calls won't repeat them."""
        out, self._celebrations = self._celebrations, []
        return out
