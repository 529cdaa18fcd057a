import random
import unittest

import pygame

from tetris_effects import Effects, Particle, FLASH_START, PARTICLES_PER_CELL
from tetris_engine import RunState
from tetris_overlay import overlay_text
from tetris_piece import COLS


class EffectsTests(unittest.TestCase):
    def test_celebrate_spawns_particles_per_cell(self):
        fx = Effects(30, random.Random(1))
        fx.celebrate((19, 18))
        self.assertEqual(len(fx.particles), 2 * COLS * PARTICLES_PER_CELL)
        self.assertEqual(fx.flash, FLASH_START)
        p = fx.particles[0]
        self.assertEqual((p.x, p.y), (15, 19 * 30 + 15))
        self.assertTrue(3 <= p.size <= 7)

    def test_particles_and_flash_fade_out(self):
        fx = Effects(30, random.Random(2))
        fx.celebrate((0,))
        fx.step()
        self.assertAlmostEqual(fx.flash, 0.55)
        for _ in range(60):
            fx.step()
        self.assertEqual(fx.particles, [])
        self.assertEqual(fx.flash, 0.0)


    def test_draw_stays_inside_board(self):
        screen = pygame.Surface((300, 300))
        fx = Effects(30)
        fx.particles = [
            Particle(x=-20, y=10, vx=0, vy=0, life=1.0, decay=0.02, color=(255, 0, 0), size=4),
            Particle(x=30, y=30, vx=0, vy=0, life=1.0, decay=0.02, color=(255, 0, 0), size=4),
        ]
        fx.draw(screen, (100, 100), (60, 60))
        self.assertEqual(screen.get_at((80, 110)).r, 0)
        self.assertEqual(screen.get_at((130, 130)).r, 255)
        self.assertEqual(screen.get_clip(), screen.get_rect())

    def test_flash_covers_board_only(self):
        screen = pygame.Surface((300, 300))
        fx = Effects(30)
        fx.flash = FLASH_START
        fx.draw(screen, (100, 100), (60, 60))
        self.assertGreater(screen.get_at((120, 120)).r, 0)
        self.assertEqual(screen.get_at((50, 50)).r, 0)


class OverlayTextTests(unittest.TestCase):
    def test_messages(self):
        self.assertEqual(overlay_text(RunState.NOT_STARTED, 0), ("Tetris", "Press Space to Start"))
        self.assertEqual(overlay_text(RunState.PAUSED, 0), ("Paused", "Press P to Resume"))
        self.assertEqual(overlay_text(RunState.GAME_OVER, 1200), ("Game Over", "Final Score: 1200"))
        self.assertIsNone(overlay_text(RunState.RUNNING, 0))


if __name__ == "__main__":
    unittest.main()
