"""Keyboard -> logical action -> engine call"""
import enum
from typing import Optional
import pygame
from tetris_engine import TetrisEngine, RunState


class Action(enum.Enum):
    START = "start"
    PAUSE = "pause"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"


HANDLERS = {
    Action.START: TetrisEngine.start_game,
    Action.PAUSE: TetrisEngine.toggle_pause,
    Action.MOVE_LEFT: TetrisEngine.move_left,
    Action.MOVE_RIGHT: TetrisEngine.move_right,
    Action.SOFT_DROP: TetrisEngine.soft_drop,
    Action.ROTATE: TetrisEngine.rotate,
    Action.HARD_DROP: TetrisEngine.hard_drop,
}

PLAY_KEYS = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_p: Action.PAUSE,
}


def dispatch(engine: TetrisEngine, action: Action):
    try:
        handler = HANDLERS[action]
    except KeyError:
        raise ValueError(f"unknown action: {action!r}") from None
    handler(engine)


def action_for_key(state: RunState, key: int) -> Optional[Action]:
    """Space starts outside a game, P pauses/resumes; other keys only act while running."""
    if state is RunState.RUNNING:
        return PLAY_KEYS.get(key)
    if key == pygame.K_SPACE and state in (RunState.NOT_STARTED, RunState.GAME_OVER):
        return Action.START
    if key == pygame.K_p and state is RunState.PAUSED:
        return Action.PAUSE
    return None


class InputAdapter:
    def __init__(self, engine: TetrisEngine):
        self.engine = engine

    def handle(self, e) -> Optional[Action]:
        if e.type != pygame.KEYDOWN: return None
        action = action_for_key(self.engine.state, e.key)
        if action is not None:
            dispatch(self.engine, action)
        return action
