from typing import Iterator, List

from perfect_maze.core.grid import Maze
from perfect_maze.algo.base import MazeAlgorithm


class PrimsAlgorithm(MazeAlgorithm):
    name = "prim"

    def run(self, maze: Maze) -> Iterator[str]:
        rng = self.rng
        self.step_count = 0
        width, height = maze.width, maze.height

        sx, sy = rng.randrange(width), rng.randrange(height)
        visited = [[False] * height for _ in range(width)]
        visited[sx][sy] = True

        # Frontier: list of interior wall ids touching the visited region.
        # Duplicates are allowed, a wall may be pushed once per incident cell.
        frontier: List[int] = []

        def add_walls(x, y, skip=None):
            cell = maze.cells[x][y]
            for _, _, side in maze.get_neighbors(x, y):
                wall_id = cell.wall(side)
                if wall_id != skip:
                    frontier.append(wall_id)

        add_walls(sx, sy)

        while frontier:
            idx = rng.randrange(len(frontier))
            wall_id = frontier[idx]

            # Incident pair comes from the table built with the topology
            (ax, ay), (bx, by) = maze.wall_cells[wall_id]
            a_visited = visited[ax][ay]
            b_visited = visited[bx][by]

            if a_visited != b_visited:
                nx, ny = (bx, by) if a_visited else (ax, ay)
                maze.clear_wall(wall_id)
                visited[nx][ny] = True
                add_walls(nx, ny, skip=wall_id)

                if self._carved():
                    yield f"Frontier: {len(frontier)}"

            # Swap remove for O(1)
            frontier[idx] = frontier[-1]
            frontier.pop()

        maze.open_exits()
        yield "Done"
