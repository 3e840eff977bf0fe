from dataclasses import dataclass
from typing import Optional

VERSION = "1.1.0"
DEFAULT_SIZE = 10

@dataclass(frozen=True)
class MazeConfig:
    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE
    output: Optional[str] = None   # None = print to stdout
    with_map: bool = False         # place Start/Goal
    seed: Optional[int] = None     # None = fresh entropy each run

DEFAULTS = MazeConfig()
