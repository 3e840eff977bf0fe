import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from stickymaze.render.palette import color_for
from stickymaze.render.tileset import Tileset

def test_tiles_are_cached_and_sized():
    pygame.font.init()
    try:
        tiles = Tileset(16)
        a = tiles.get("X")
        assert a is tiles.get("X")
        assert a.get_size() == (16, 16)
        assert tuple(a.get_at((0, 0))) == color_for("X")
        assert tiles.view("5", 32).get_size() == (32, 32)
        assert tiles.view("5", 16) is tiles.get("5")
    finally:
        pygame.font.quit()
