import unittest
import sys
import os

# Headless display for pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pygame

from perfect_maze.core.grid import Maze
from perfect_maze.core.complexity import MazeAnalyzer
from perfect_maze.algo.prim import PrimsAlgorithm
from perfect_maze.viz.renderer import Renderer

class TestRenderer(unittest.TestCase):
    def make_renderer(self, maze, algorithm=None):
        renderer = Renderer(maze, algorithm=algorithm, width=200, height=200)
        try:
            renderer.init_window()
        except Exception as e:
            self.skipTest(f"pygame could not open a window: {e}")
        self.addCleanup(pygame.quit)
        return renderer

    def test_fit_to_screen(self):
        renderer = Renderer(Maze(1, 1), width=200, height=200)
        renderer.fit_to_screen()
        self.assertEqual(renderer.cell_size, 120.0)
        self.assertEqual((renderer.offset_x, renderer.offset_y), (40.0, 40.0))

    def test_draws_active_walls(self):
        maze = Maze(1, 1)
        renderer = self.make_renderer(maze)
        renderer.draw_grid()

        # Top wall runs along y=40, cell interior stays background
        self.assertEqual(tuple(renderer.surface.get_at((100, 40)))[:3], Renderer.COLOR_WALL)
        self.assertEqual(tuple(renderer.surface.get_at((100, 100)))[:3], Renderer.COLOR_BG)

        maze.carve_path(0, 0, Maze.TOP)
        renderer.draw_grid()
        self.assertEqual(tuple(renderer.surface.get_at((100, 40)))[:3], Renderer.COLOR_BG)

    def test_animated_generation(self):
        maze = Maze(12, 12)
        algorithm = PrimsAlgorithm(seed=3)
        renderer = self.make_renderer(maze, algorithm)
        self.assertFalse(renderer.gen_finished)

        gen_iter = algorithm.run(maze)
        while not renderer.gen_finished:
            renderer.step(gen_iter)
            renderer.draw_grid()
            renderer.draw_hud()

        self.assertTrue(MazeAnalyzer.is_perfect(maze))

if __name__ == '__main__':
    unittest.main()
