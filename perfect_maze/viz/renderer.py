import pygame

from perfect_maze.core.grid import Maze


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_TEXT = (255, 255, 255)

    # Generator yields per frame (each yield is ~100 cleared walls)
    STEPS_PER_FRAME = 1

    def __init__(self, maze: Maze, algorithm=None, width=1280, height=720):
        self.maze = maze
        self.algorithm = algorithm
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = algorithm is None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire maze on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.maze.width
        zoom_y = available_h / self.maze.height
        self.cell_size = max(1.0, min(zoom_x, zoom_y))

        total_w = self.maze.width * self.cell_size
        total_h = self.maze.height * self.cell_size
        self.offset_x = (self.screen_width - total_w) / 2
        self.offset_y = (self.screen_height - total_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Perfect Maze - {self.maze.width}x{self.maze.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(1.0, min(200.0, self.cell_size))

                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        maze = self.maze
        walls = maze.walls

        # Culling: visible cell range
        start_x = max(0, int(-self.offset_x / self.cell_size))
        start_y = max(0, int(-self.offset_y / self.cell_size))
        end_x = min(maze.width, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_y = min(maze.height, int((self.screen_height - self.offset_y) / self.cell_size) + 1)

        size = int(self.cell_size)
        color = self.COLOR_WALL
        for x in range(start_x, end_x):
            column = maze.cells[x]
            for y in range(start_y, end_y):
                cell = column[y]
                px, py = self.world_to_screen(x, y)
                px, py = int(px), int(py)

                # Each shared wall is drawn once, by the cell above / to the left
                if walls[cell.wall(Maze.BOTTOM)]:
                    pygame.draw.line(self.surface, color, (px, py + size), (px + size, py + size), 1)
                if walls[cell.wall(Maze.RIGHT)]:
                    pygame.draw.line(self.surface, color, (px + size, py), (px + size, py + size), 1)
                if y == 0 and walls[cell.wall(Maze.TOP)]:
                    pygame.draw.line(self.surface, color, (px, py), (px + size, py), 1)
                if x == 0 and walls[cell.wall(Maze.LEFT)]:
                    pygame.draw.line(self.surface, color, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.maze.width * self.maze.height
        algo = self.algorithm.name if self.algorithm else "-"
        status = "Done" if self.gen_finished else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.maze.width}x{self.maze.height} ({cells:,})",
            f"Algorithm: {algo}",
            f"Status: {status}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_TEXT)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step(self, gen_iter):
        """Advances generation by one frame's worth of steps."""
        try:
            for _ in range(self.STEPS_PER_FRAME):
                next(gen_iter)
        except StopIteration:
            self.gen_finished = True

    def run_loop(self):
        gen_iter = None
        if self.algorithm:
            # Animate from a fully walled maze
            self.maze.reset()
            gen_iter = self.algorithm.run(self.maze)

        while self.running:
            self.handle_input()

            if gen_iter and not self.gen_finished:
                self.step(gen_iter)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
