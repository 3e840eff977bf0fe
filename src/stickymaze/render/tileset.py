# src/stickymaze/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache

from .palette import color_for, text_color_for

class Tileset:
    """
    Tiny cached tile factory for the viewer:
      - One solid tile per maze character, labelled with the character
      - Returns pygame.Surface of exactly (tile_size, tile_size)
    """
    def __init__(self, tile_size: int, font=None):
        self.tile_size = tile_size
        self.font = font or pygame.font.SysFont(None, max(10, tile_size // 2))

    @lru_cache(maxsize=64)
    def get(self, ch: str) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(color_for(ch))
        txt = self.font.render(ch, True, text_color_for(ch))
        r = txt.get_rect(center=(self.tile_size // 2, self.tile_size // 2))
        img.blit(txt, r)
        return img

    @lru_cache(maxsize=256)
    def view(self, ch: str, size: int) -> pygame.Surface:
        base = self.get(ch)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
