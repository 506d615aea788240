from typing import Iterator, List

from perfect_maze.core.grid import Maze
from perfect_maze.algo.base import MazeAlgorithm


class DisjointSet:
    """Union-find with path halving and union by size."""

    def __init__(self, size: int):
        self.parent: List[int] = list(range(size))
        self.size: List[int] = [1] * size
        self.count = size

    def find(self, x: int) -> int:
        while self.parent[x] != x:
            self.parent[x] = self.parent[self.parent[x]]
            x = self.parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """Merges the sets holding a and b. Returns False if already joined."""
        ra = self.find(a)
        rb = self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        self.count -= 1
        return True


class KruskalsAlgorithm(MazeAlgorithm):
    name = "kruskal"

    def run(self, maze: Maze) -> Iterator[str]:
        self.step_count = 0
        height = maze.height

        # Every wall, boundary ones included; those have a single incident
        # cell and are always skipped.
        order = list(range(len(maze.walls)))
        self.rng.shuffle(order)

        # One singleton set per cell, cell (x, y) -> x * height + y
        sets = DisjointSet(maze.width * height)

        for wall_id in order:
            if sets.count == 1:
                break

            incident = maze.wall_cells[wall_id]
            if len(incident) != 2:
                continue

            (ax, ay), (bx, by) = incident
            if sets.union(ax * height + ay, bx * height + by):
                maze.clear_wall(wall_id)
                if self._carved():
                    yield f"Sets: {sets.count}"

        maze.open_exits()
        yield "Done"
