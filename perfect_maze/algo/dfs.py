from typing import Iterator, List, Tuple

from perfect_maze.core.grid import Maze
from perfect_maze.algo.base import MazeAlgorithm


class DepthFirstSearch(MazeAlgorithm):
    """
    Randomized depth-first search with an explicit backtracking stack.
    Finishes when the walk backtracks out of its starting cell.
    """
    name = "dfs"

    def run(self, maze: Maze) -> Iterator[str]:
        rng = self.rng
        self.step_count = 0
        width, height = maze.width, maze.height

        start = (rng.randrange(width), rng.randrange(height))
        visited = [[False] * height for _ in range(width)]
        visited[start[0]][start[1]] = True

        # Cells we moved away from; the current cell is never on it
        stack: List[Tuple[int, int]] = []
        cx, cy = start

        while True:
            neighbors = [
                (nx, ny, side)
                for nx, ny, side in maze.get_neighbors(cx, cy)
                if not visited[nx][ny]
            ]

            if neighbors:
                nx, ny, side = rng.choice(neighbors)
                maze.carve_path(cx, cy, side)
                stack.append((cx, cy))
                cx, cy = nx, ny
                visited[cx][cy] = True

                if self._carved():
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Dead end. Leaving the start cell means every cell is done.
                if (cx, cy) == start or not stack:
                    break
                cx, cy = stack.pop()

        maze.open_exits()
        yield "Done"
