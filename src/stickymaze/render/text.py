# src/stickymaze/render/text.py
# Flat character grid: one char per cell, border ring included.

from typing import List

from ..maze import Maze
from ..tiles import WALL_CHAR, marker_char

def char_at(maze: Maze, x: int, y: int) -> str:
    value = maze.stickiness.get(x, y)
    marker = marker_char(value)
    if marker is not None:
        return marker
    # Only the two outgoing walls (east, south) are consulted, so a dead end
    # reached from the west or north also renders as a wall.
    if (((x, y), (x + 1, y)) not in maze.open_walls
            and ((x, y), (x, y + 1)) not in maze.open_walls):
        return WALL_CHAR
    return str(value)

def render_lines(maze: Maze) -> List[str]:
    return [
        "".join(char_at(maze, x, y) for x in range(maze.width + 2))
        for y in range(maze.height + 2)
    ]

def render_text(maze: Maze) -> str:
    return "\n".join(render_lines(maze)) + "\n"

def save_to_file(maze: Maze, path: str) -> None:
    """Create/truncate `path` and write the maze. OSError propagates."""
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(render_text(maze))
