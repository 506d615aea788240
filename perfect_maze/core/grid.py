import logging
from array import array
from typing import Iterator, List, Optional, Tuple

from perfect_maze.core.errors import (
    CellIndexError,
    InvalidDimensionsError,
    MazeError,
    UninitializedCellError,
)

logger = logging.getLogger(__name__)

# Side bitmasks
TOP    = 0b0001
RIGHT  = 0b0010
BOTTOM = 0b0100
LEFT   = 0b1000

SIDE_NAMES = {TOP: "top", RIGHT: "right", BOTTOM: "bottom", LEFT: "left"}


class Cell:
    """
    A grid position holding the ids of its four walls.
    Ids index into the owning maze's wall arena; neighbours share ids.
    """
    __slots__ = ('x', 'y', 'top', 'bottom', 'left', 'right')

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.top: Optional[int] = None
        self.bottom: Optional[int] = None
        self.left: Optional[int] = None
        self.right: Optional[int] = None

    def wall(self, side: int) -> int:
        try:
            name = SIDE_NAMES[side]
        except KeyError:
            raise ValueError(f"Unknown side {side!r}") from None
        wall_id = getattr(self, name)
        if wall_id is None:
            raise UninitializedCellError(
                f"Cell ({self.x}, {self.y}) has no {name} wall; maze topology was not built"
            )
        return wall_id

    def __repr__(self):
        return f"Cell({self.x}, {self.y})"


class Maze:
    TOP = TOP
    RIGHT = RIGHT
    BOTTOM = BOTTOM
    LEFT = LEFT

    __slots__ = ('width', 'height', 'cells', 'walls', 'wall_cells', 'algorithm')

    def __init__(self, width: int, height: int, algorithm=None):
        self._check_dimensions(width, height)
        self.width = width
        self.height = height
        self.algorithm = algorithm
        self.cells: List[List[Cell]] = []
        # 1 = active, one byte per wall
        self.walls = array('B')
        self.wall_cells: List[Tuple[Tuple[int, int], ...]] = []

        self.reconstruct()
        if self.algorithm is not None:
            self.regenerate()

    @staticmethod
    def _check_dimensions(width, height):
        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidDimensionsError(width, height)

    @staticmethod
    def wall_count(width: int, height: int) -> int:
        return width * (height + 1) + height * (width + 1)

    def reconstruct(self):
        """
        Rebuilds cells and walls for the current size. All walls start active.
        Each cell allocates its own top and left wall and hands them to the
        cell above / to the left; the bottom row and right column then get
        their outer walls.
        """
        width, height = self.width, self.height
        self._check_dimensions(width, height)

        cells = [[Cell(x, y) for y in range(height)] for x in range(width)]
        wall_cells: List[Tuple[Tuple[int, int], ...]] = []

        for x in range(width):
            for y in range(height):
                cell = cells[x][y]

                cell.top = len(wall_cells)
                if y != 0:
                    cells[x][y - 1].bottom = cell.top
                    wall_cells.append(((x, y), (x, y - 1)))
                else:
                    wall_cells.append(((x, y),))

                cell.left = len(wall_cells)
                if x != 0:
                    cells[x - 1][y].right = cell.left
                    wall_cells.append(((x, y), (x - 1, y)))
                else:
                    wall_cells.append(((x, y),))

        for x in range(width):
            cells[x][height - 1].bottom = len(wall_cells)
            wall_cells.append(((x, height - 1),))

        for y in range(height):
            cells[width - 1][y].right = len(wall_cells)
            wall_cells.append(((width - 1, y),))

        self.cells = cells
        self.wall_cells = wall_cells
        self.walls = array('B', [1] * len(wall_cells))
        logger.debug("Built %dx%d topology with %d walls", width, height, len(wall_cells))

    def reset(self):
        """Sets every wall back to active. Topology is untouched."""
        for i in range(len(self.walls)):
            self.walls[i] = 1

    def set_algorithm(self, algorithm):
        """Replaces the generation algorithm. Does not regenerate."""
        self.algorithm = algorithm

    set_strategy = set_algorithm

    def regenerate(self):
        if self.algorithm is None:
            raise MazeError("No generation algorithm set")
        logger.debug("Regenerating %dx%d maze with %s", self.width, self.height, self.algorithm.name)
        self.reset()
        self.algorithm.generate(self)
        logger.debug("Generation cleared %d interior walls", sum(1 for _ in self.cleared_interior_walls()))

    # Cell / wall access

    def cell(self, x: int, y: int) -> Cell:
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, int):
                raise CellIndexError(x, y)
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.cells[x][y]
        raise CellIndexError(x, y)

    def wall_id(self, x: int, y: int, side: int) -> int:
        return self.cell(x, y).wall(side)

    def has_wall(self, x: int, y: int, side: int) -> bool:
        return self.walls[self.wall_id(x, y, side)] != 0

    def is_top_active(self, x: int, y: int) -> bool:
        return self.has_wall(x, y, TOP)

    def is_bottom_active(self, x: int, y: int) -> bool:
        return self.has_wall(x, y, BOTTOM)

    def is_left_active(self, x: int, y: int) -> bool:
        return self.has_wall(x, y, LEFT)

    def is_right_active(self, x: int, y: int) -> bool:
        return self.has_wall(x, y, RIGHT)

    def is_wall_active(self, wall_id: int) -> bool:
        return self.walls[wall_id] != 0

    def clear_wall(self, wall_id: int):
        self.walls[wall_id] = 0

    def is_boundary(self, wall_id: int) -> bool:
        return len(self.wall_cells[wall_id]) == 1

    def carve_path(self, x: int, y: int, side: int):
        """
        Clears the wall on 'side' of (x, y). Shared walls are a single slot,
        so the neighbour sees the passage too.
        """
        self.clear_wall(self.wall_id(x, y, side))

    def open_exits(self):
        """Entrance on the left of (0,0), exit on the right of the far corner."""
        self.carve_path(0, 0, LEFT)
        self.carve_path(self.width - 1, self.height - 1, RIGHT)

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, side_to_neighbor) for all valid grid neighbors.
        Does NOT check walls.
        """
        if x > 0:
            yield (x - 1, y, LEFT)
        if x < self.width - 1:
            yield (x + 1, y, RIGHT)
        if y > 0:
            yield (x, y - 1, TOP)
        if y < self.height - 1:
            yield (x, y + 1, BOTTOM)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        cell = self.cell(x, y)
        for nx, ny, side in self.get_neighbors(x, y):
            if not self.walls[cell.wall(side)]:
                yield (nx, ny)

    def interior_walls(self) -> Iterator[int]:
        for wall_id, incident in enumerate(self.wall_cells):
            if len(incident) == 2:
                yield wall_id

    def cleared_interior_walls(self) -> Iterator[int]:
        for wall_id in self.interior_walls():
            if not self.walls[wall_id]:
                yield wall_id

    def __str__(self):
        from perfect_maze.viz.text import render_text
        return render_text(self)

    def __repr__(self):
        name = self.algorithm.name if self.algorithm is not None else None
        return f"Maze({self.width}, {self.height}, algorithm={name!r})"
