import pygame
from typing import Optional, Tuple
from tetris_engine import RunState

def overlay_text(state: RunState, score: int) -> Optional[Tuple[str, str]]:
    if state is RunState.NOT_STARTED:
        return "Tetris", "Press Space to Start"
    if state is RunState.PAUSED:
        return "Paused", "Press P to Resume"
    if state is RunState.GAME_OVER:
        return "Game Over", f"Final Score: {score}"
    return None

class Overlay:
    """Title/message panel drawn over the board whenever the game isn't running."""
    def __init__(self, big_font, font):
        self.big_font = big_font
        self.font = font

    def draw(self, screen, rect: pygame.Rect, state: RunState, score: int):
        text = overlay_text(state, score)
        if text is None: return
        title, message = text
        s = pygame.Surface(rect.size, pygame.SRCALPHA); s.fill((20, 25, 40, 200))
        screen.blit(s, rect.topleft)
        t = self.big_font.render(title, True, (255, 255, 255))
        m = self.font.render(message, True, (200, 210, 235))
        screen.blit(t, t.get_rect(center=(rect.centerx, rect.centery - 20)))
        screen.blit(m, m.get_rect(center=(rect.centerx, rect.centery + 20)))
