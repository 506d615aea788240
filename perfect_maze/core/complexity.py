from collections import deque

import numpy as np

from perfect_maze.core.grid import Maze


class MazeAnalyzer:
    @staticmethod
    def to_array(maze: Maze) -> np.ndarray:
        """
        Snapshot of wall state, shape (height, width).
        Each entry is the bitmask of that cell's ACTIVE walls (Maze.TOP | ...).
        """
        out = np.zeros((maze.height, maze.width), dtype=np.uint8)
        walls = maze.walls
        for x, column in enumerate(maze.cells):
            for y, cell in enumerate(column):
                val = 0
                if walls[cell.wall(Maze.TOP)]: val |= Maze.TOP
                if walls[cell.wall(Maze.RIGHT)]: val |= Maze.RIGHT
                if walls[cell.wall(Maze.BOTTOM)]: val |= Maze.BOTTOM
                if walls[cell.wall(Maze.LEFT)]: val |= Maze.LEFT
                out[y, x] = val
        return out

    @staticmethod
    def _closed_sides(maze: Maze) -> np.ndarray:
        # Outer edges count as closed so the entrance/exit don't skew stats
        arr = MazeAnalyzer.to_array(maze)
        arr[0, :] |= Maze.TOP
        arr[-1, :] |= Maze.BOTTOM
        arr[:, 0] |= Maze.LEFT
        arr[:, -1] |= Maze.RIGHT

        count = np.zeros(arr.shape, dtype=np.uint8)
        for bit in (Maze.TOP, Maze.RIGHT, Maze.BOTTOM, Maze.LEFT):
            count += (arr & bit) != 0
        return count

    @staticmethod
    def calculate_stats(maze: Maze):
        closed = MazeAnalyzer._closed_sides(maze)

        dead_ends = int(np.count_nonzero(closed == 3))
        corridors = int(np.count_nonzero(closed == 2))
        junctions = int(np.count_nonzero(closed <= 1))

        total = maze.width * maze.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100,
            "passages": sum(1 for _ in maze.cleared_interior_walls()),
        }

    @staticmethod
    def is_perfect(maze: Maze) -> bool:
        """
        True if the cleared interior walls form a spanning tree:
        N-1 passages, every cell reachable from (0,0), and no cell
        reached twice.
        """
        total = maze.width * maze.height
        if sum(1 for _ in maze.cleared_interior_walls()) != total - 1:
            return False

        parent = {(0, 0): None}
        queue = deque([(0, 0)])
        while queue:
            current = queue.popleft()
            for nxt in maze.get_open_neighbors(*current):
                if nxt == parent[current]:
                    continue
                if nxt in parent:
                    return False # Cycle
                parent[nxt] = current
                queue.append(nxt)

        return len(parent) == total
