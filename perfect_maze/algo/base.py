import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from perfect_maze.core.grid import Maze


class MazeAlgorithm(ABC):
    name = "base"

    # Yield a status string every N cleared walls
    PROGRESS_INTERVAL = 100

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.seed = seed
        # One source for the algorithm's lifetime: each regeneration differs,
        # two instances with the same seed match.
        self.rng = rng if rng is not None else random.Random(seed)
        self.step_count = 0

    @abstractmethod
    def run(self, maze: Maze) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        Expects every wall of 'maze' to be active; clears walls in place.
        """
        pass

    def generate(self, maze: Maze):
        """Helper to run the algorithm to completion."""
        for _ in self.run(maze):
            pass

    def _carved(self) -> bool:
        self.step_count += 1
        return self.step_count % self.PROGRESS_INTERVAL == 0

    def __repr__(self):
        return f"{type(self).__name__}(seed={self.seed!r})"
