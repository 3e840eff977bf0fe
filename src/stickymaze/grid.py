from dataclasses import dataclass
from typing import Iterator, List, Tuple

Cell = Tuple[int, int]

def cell_index(cell: Cell, width: int) -> int:
    """Flat index of a cell in a grid whose interior is `width` wide."""
    x, y = cell
    return x + y * (width + 2)

@dataclass
class Grid:
    """(width+2) x (height+2) cell values; the outer ring is the border."""
    buf: List[int]
    width: int
    height: int

    @classmethod
    def empty(cls, width: int, height: int, border: int) -> "Grid":
        if width < 0 or height < 0:
            raise ValueError(f"grid size must be >= 0, got {width}x{height}")
        # Everything starts as border; the generator overwrites the interior.
        buf = [border] * ((width + 2) * (height + 2))
        return cls(buf=buf, width=width, height=height)

    @property
    def stride(self) -> int:
        return self.width + 2

    @property
    def rows(self) -> int:
        return self.height + 2

    def idx(self, x: int, y: int) -> int:
        return cell_index((x, y), self.width)

    def get(self, x: int, y: int) -> int:
        return self.buf[self.idx(x, y)]

    def set(self, x: int, y: int, v: int) -> None:
        self.buf[self.idx(x, y)] = v

    def is_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width + 1 or y == self.height + 1

    def interior_cells(self) -> Iterator[Cell]:
        # Row-major, the order weights are drawn in.
        for y in range(1, self.height + 1):
            for x in range(1, self.width + 1):
                yield (x, y)

    def as_matrix(self) -> List[List[int]]:
        return [[self.get(x, y) for x in range(self.stride)] for y in range(self.rows)]
