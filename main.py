import logging
import sys

import pygame

from tetris import Engine
from tetris_config import CONFIG
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_timer import PygameTickTimer

log = logging.getLogger(__name__)

KEYMAP = {
    pygame.K_LEFT: Engine.move_left,
    pygame.K_RIGHT: Engine.move_right,
    pygame.K_UP: Engine.rotate,
    pygame.K_DOWN: Engine.drop,
    pygame.K_SPACE: Engine.hard_drop,
    pygame.K_r: Engine.reset,
}


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Classic Tetris")
    font = pygame.font.SysFont(None, 22)
    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    engine = Engine()
    timer = PygameTickTimer()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, timer.event_type])
    engine.attach(timer)
    log.info("started, tick every %d ms", engine.period_ms)

    try:
        while True:
            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    return
                if timer.handle(e):
                    continue
                if e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        return
                    op = KEYMAP.get(e.key)
                    if op:
                        op(engine)

            render.draw(screen, engine.snapshot())
            pygame.display.flip()
            clock.tick(60)
    finally:
        engine.detach()
        pygame.quit()


if __name__ == '__main__':
    sys.exit(main())
