class MazeError(Exception):
    """Base class for maze errors."""


class InvalidDimensionsError(MazeError, ValueError):
    def __init__(self, width, height):
        super().__init__(f"Maze dimensions must be positive integers, got {width}x{height}")
        self.width = width
        self.height = height


class UninitializedCellError(MazeError, RuntimeError):
    """Raised when a cell's wall is read before the maze wired it."""


class CellIndexError(MazeError, IndexError):
    def __init__(self, x: int, y: int):
        super().__init__(f"Coordinate ({x}, {y}) out of bounds")
        self.x = x
        self.y = y
