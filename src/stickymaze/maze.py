# src/stickymaze/maze.py
# The Maze aggregate: built once, generated once, optionally annotated once.

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Set, Tuple

from .grid import Cell, Grid, cell_index
from .rng import PMRandom
from .tiles import BORDER, STICKY_MIN, STICKY_MAX
from .mapgen.walls import Wall, build_walls, canonical
from .mapgen.kruskal import carve_spanning_tree
from .mapgen.placement import place_start_goal

@dataclass
class Maze:
    width: int
    height: int
    walls: List[Wall]
    stickiness: Grid
    open_walls: Set[Wall] = field(default_factory=set)
    rng: Any = field(default_factory=PMRandom.from_entropy, repr=False, compare=False)

    @classmethod
    def new(cls, width: int, height: int, rng=None) -> "Maze":
        """
        Allocate the bordered grid, draw a 1..9 weight for every interior cell
        and build the candidate wall list. No wall is open yet.
        `rng` needs randint(a, b) and shuffle(list); PMRandom or random.Random.
        """
        if rng is None:
            rng = PMRandom.from_entropy()
        grid = Grid.empty(width, height, BORDER)
        for x, y in grid.interior_cells():
            grid.set(x, y, rng.randint(STICKY_MIN, STICKY_MAX))
        return cls(width=width, height=height, walls=build_walls(width, height),
                   stickiness=grid, rng=rng)

    def generate(self) -> "Maze":
        self.open_walls = carve_spanning_tree(self.walls, self.width, self.height, self.rng)
        return self

    def add_map(self) -> Tuple[Optional[Cell], Optional[Cell]]:
        return place_start_goal(self.stickiness, self.rng)

    def cell_id(self, cell: Cell) -> int:
        return cell_index(cell, self.width)

    def is_open(self, a: Cell, b: Cell) -> bool:
        return canonical(a, b) in self.open_walls

    def interior_cells(self) -> Iterator[Cell]:
        return self.stickiness.interior_cells()
