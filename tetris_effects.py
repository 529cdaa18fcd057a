"""Line-clear cosmetics: screen flash and particle bursts"""
import colorsys
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple
import pygame
from tetris_piece import COLS

FLASH_START = 0.6
FLASH_FADE = 0.05
PARTICLES_PER_CELL = 5
PARTICLE_GRAVITY = 0.3

@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    decay: float
    color: Tuple[int, int, int]
    size: float

class Effects:
    """Consumes Celebration events; steps once per frame, independent of gameplay."""
    def __init__(self, cell: int, rng: Optional[random.Random] = None):
        self.cell = cell
        self.rng = rng or random.Random()
        self.particles: List[Particle] = []
        self.flash = 0.0
        self._flash_surf: Optional[pygame.Surface] = None
        self._layer: Optional[pygame.Surface] = None

    def celebrate(self, rows):
        self.flash = FLASH_START
        c = self.cell
        for row in rows:
            cy = row * c + c / 2
            for col in range(COLS):
                cx = col * c + c / 2
                for _ in range(PARTICLES_PER_CELL):
                    self.particles.append(self._particle(cx, cy))

    def _particle(self, x, y) -> Particle:
        r = self.rng
        h = r.random()
        rgb = tuple(int(v * 255) for v in colorsys.hls_to_rgb(h, 0.6, 1.0))
        return Particle(
            x=x, y=y,
            vx=(r.random() - 0.5) * 8,
            vy=(r.random() - 0.5) * 8 - 2,
            life=1.0,
            decay=0.02 + r.random() * 0.02,
            color=rgb,
            size=3 + r.random() * 4,
        )

    def step(self):
        alive = []
        for p in self.particles:
            p.x += p.vx; p.y += p.vy
            p.vy += PARTICLE_GRAVITY
            p.life -= p.decay
            if p.life > 0: alive.append(p)
        self.particles = alive
        if self.flash > 0:
            self.flash = max(0.0, self.flash - FLASH_FADE)

    def _surfaces(self, size: Tuple[int, int]):
        """Board-sized flash and particle layers, rebuilt only when the board size changes."""
        if self._layer is None or self._layer.get_size() != tuple(size):
            self._flash_surf = pygame.Surface(size)
            self._flash_surf.fill((255, 255, 255))
            self._layer = pygame.Surface(size, pygame.SRCALPHA)
        return self._flash_surf, self._layer

    def draw(self, screen: pygame.Surface, origin: Tuple[int, int], size: Tuple[int, int]):
        if self.flash <= 0 and not self.particles: return
        flash_surf, layer = self._surfaces(size)
        prev_clip = screen.get_clip()
        screen.set_clip(pygame.Rect(origin, size))
        if self.flash > 0:
            flash_surf.set_alpha(int(255 * self.flash))
            screen.blit(flash_surf, origin)
        if self.particles:
            layer.fill((0, 0, 0, 0))
            for p in self.particles:
                rad = max(1, int(p.size))
                pygame.draw.circle(layer, (*p.color, int(255 * p.life)), (int(p.x), int(p.y)), rad)
            screen.blit(layer, origin)
        screen.set_clip(prev_clip)
