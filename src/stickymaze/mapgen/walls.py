# src/stickymaze/mapgen/walls.py
# Wall model for a bordered (width+2) x (height+2) grid.
# Coordinates are 0-based; the interior is 1..width x 1..height.

from typing import List, Tuple
from ..grid import Cell

Wall = Tuple[Cell, Cell]

def canonical(a: Cell, b: Cell) -> Wall:
    """Order a wall's endpoints so the same pair always hashes the same."""
    return (a, b) if a <= b else (b, a)

def build_walls(width: int, height: int) -> List[Wall]:
    """
    Every candidate passage, in row-major order:
    - an east wall ((x,y),(x+1,y)) and a south wall ((x,y),(x,y+1)) per
      interior cell;
    - walls into the far border (x == width+1 / y == height+1) ARE included,
      walls into the near border (x == 0 / y == 0) are never created.
    The far-border walls are dropped later by is_border_wall().
    """
    walls: List[Wall] = []
    for y in range(1, height + 1):
        for x in range(1, width + 1):
            walls.append(((x, y), (x + 1, y)))
            walls.append(((x, y), (x, y + 1)))
    return walls

def is_border_wall(wall: Wall, width: int, height: int) -> bool:
    # Permanently closed: the wall leaves the interior.
    (x1, y1), (x2, y2) = wall
    return x1 == 0 or y1 == 0 or x2 == width + 1 or y2 == height + 1
