# src/stickymaze/render/palette.py
from typing import Tuple

from ..tiles import WALL_CHAR, START_CHAR, GOAL_CHAR, STICKY_MIN, STICKY_MAX

RGBA = Tuple[int, int, int, int]

def color_for(ch: str) -> RGBA:
    if ch == WALL_CHAR:  return ( 60,  60,  60, 255)
    if ch == START_CHAR: return (  0, 200,  80, 255)
    if ch == GOAL_CHAR:  return (255, 210,   0, 255)
    if len(ch) == 1 and "0" <= ch <= "9" and STICKY_MIN <= int(ch) <= STICKY_MAX:
        # 1 = pale sand, 9 = deep mud
        t = (int(ch) - STICKY_MIN) / (STICKY_MAX - STICKY_MIN)
        return (int(240 - 110 * t), int(230 - 140 * t), int(200 - 150 * t), 255)
    return (255, 0, 255, 255)  # unknown char: loud magenta

def text_color_for(ch: str) -> RGBA:
    # Dark labels on light tiles, light labels on dark ones.
    r, g, b, _ = color_for(ch)
    return (0, 0, 0, 255) if (r + g + b) > 380 else (230, 230, 230, 255)
