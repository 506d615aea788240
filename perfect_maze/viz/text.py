from perfect_maze.core.grid import Maze

BLOCK = "██"
BLANK = "  "


def render_text(maze: Maze, block: str = BLOCK, blank: str = BLANK) -> str:
    """
    Draws the maze as text, two rows per cell row:
    corners + top edges, then left edges + cell interiors.
    A closing row carries the bottom edges.
    """
    lines = []

    for y in range(maze.height):
        top = []
        middle = []
        for x in range(maze.width):
            top.append(block)
            top.append(block if maze.is_top_active(x, y) else blank)
            middle.append(block if maze.is_left_active(x, y) else blank)
            middle.append(blank)

        top.append(block)
        middle.append(block if maze.is_right_active(maze.width - 1, y) else blank)
        lines.append("".join(top))
        lines.append("".join(middle))

    bottom = []
    for x in range(maze.width):
        bottom.append(block)
        bottom.append(block if maze.is_bottom_active(x, maze.height - 1) else blank)
    bottom.append(block)
    lines.append("".join(bottom))

    return "\n".join(lines) + "\n"
