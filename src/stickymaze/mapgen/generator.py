# src/stickymaze/mapgen/generator.py
# One-call pipeline used by the CLI and the tools.

from typing import Optional

from ..maze import Maze
from ..rng import PMRandom

def generate_maze(width: int, height: int, seed: Optional[int] = None, with_map: bool = False) -> Maze:
    rng = PMRandom.from_entropy() if seed is None else PMRandom.from_seed(seed)
    maze = Maze.new(width, height, rng).generate()
    if with_map:
        maze.add_map()
    return maze
