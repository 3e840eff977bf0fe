# src/stickymaze/mapgen/placement.py
import logging
from typing import List, Optional, Tuple

from ..grid import Cell, Grid
from ..tiles import BORDER, START, GOAL

log = logging.getLogger(__name__)

def eligible_cells(grid: Grid) -> List[Cell]:
    return [(x, y) for (x, y) in grid.interior_cells() if grid.get(x, y) != BORDER]

def place_start_goal(grid: Grid, rng) -> Tuple[Optional[Cell], Optional[Cell]]:
    """
    Shuffle the eligible interior cells, pop one for START and one for GOAL,
    overwriting their stickiness. With fewer than two candidates, warn and
    place what fits (START first). Returns (start, goal); None = not placed.
    """
    cells = eligible_cells(grid)
    rng.shuffle(cells)

    if len(cells) < 2:
        log.warning("Not enough non-wall cells to place 'S' and 'G' (%d available).", len(cells))

    start = goal = None
    if cells:
        start = cells.pop()
        grid.set(*start, START)
    if cells:
        goal = cells.pop()
        grid.set(*goal, GOAL)
    return start, goal
