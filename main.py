import argparse
import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_engine import TetrisEngine
from tetris_rng import UniformRandom
from tetris_input import InputAdapter
from tetris_overlay import Overlay
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_effects import Effects

log = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle game")
    p.add_argument("--seed", type=int, default=CONFIG["SEED"], help="piece randomizer seed")
    p.add_argument("--cell-size", type=int, default=CONFIG["CELL_SIZE"])
    p.add_argument("--log-level", default="WARNING")
    return p.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    CONFIG["SEED"] = args.seed
    CONFIG["CELL_SIZE"] = args.cell_size

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 24)
    big_font = pygame.font.SysFont(None, 48)

    render = RenderAssets(dims, font)
    overlay = Overlay(big_font, font)
    effects = Effects(dims.cell)
    clock = pygame.time.Clock()

    # the host owns the clock; the engine only sees milliseconds
    engine = TetrisEngine(UniformRandom(CONFIG["SEED"]), clock=pygame.time.get_ticks)
    adapter = InputAdapter(engine)
    log.info("window %dx%d, seed=%s", dims.total_w, dims.total_h, CONFIG["SEED"])

    while True:
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE):
                pygame.quit()
                return 0
            adapter.handle(e)

        engine.update()
        for c in engine.pop_celebrations():
            effects.celebrate(c.rows)
        effects.step()

        render.draw_frame(screen, engine, effects)
        overlay.draw(screen, render.board_rect, engine.state, engine.score)
        pygame.display.flip()


if __name__ == '__main__':
    sys.exit(main())
