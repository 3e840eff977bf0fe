# src/stickymaze/mapgen/kruskal.py
# Randomized Kruskal: every wall has equal weight, so the edge order is just
# a uniform shuffle of the candidate walls.

import logging
from typing import Iterable, Set

from ..grid import cell_index
from ..unionfind import DisjointSet
from .walls import Wall, is_border_wall

log = logging.getLogger(__name__)

def carve_spanning_tree(walls: Iterable[Wall], width: int, height: int, rng) -> Set[Wall]:
    """
    Return the set of walls to open so the interior cells form a spanning tree.
    `rng` only needs a shuffle(list) method.
    """
    sets = DisjointSet((width + 2) * (height + 2))
    order = list(walls)
    rng.shuffle(order)

    opened: Set[Wall] = set()
    skipped = 0
    for wall in order:
        if is_border_wall(wall, width, height):
            skipped += 1
            continue
        cell1, cell2 = wall
        set1 = sets.find(cell_index(cell1, width))
        set2 = sets.find(cell_index(cell2, width))
        if set1 != set2:
            opened.add(wall)
            sets.union(set1, set2)

    log.debug("kruskal %dx%d: %d walls, %d border, %d opened",
              width, height, len(order), skipped, len(opened))
    return opened
