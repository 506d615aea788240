import io
import unittest
import sys
import os
from contextlib import redirect_stderr, redirect_stdout

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.main import main
from perfect_maze.algo.registry import ALGORITHMS
from perfect_maze.algo.kruskal import KruskalsAlgorithm
from perfect_maze.core.complexity import MazeAnalyzer

class TestCommandLine(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            result = main(argv)
        return result, out.getvalue()

    def test_generate(self):
        maze, out = self.run_main(["generate", "--width", "4", "--height", "3",
                                   "--algo", "prim", "--seed", "1", "--stats"])
        self.assertEqual((maze.width, maze.height), (4, 3))
        self.assertEqual(out, str(maze))
        self.assertEqual(len(out.splitlines()), 7)
        self.assertTrue(MazeAnalyzer.is_perfect(maze))

    def test_generate_is_seeded(self):
        _, first = self.run_main(["generate", "--algo", "kruskal", "--seed", "99"])
        _, second = self.run_main(["generate", "--algo", "kruskal", "--seed", "99"])
        self.assertEqual(first, second)

    def test_demo(self):
        maze, out = self.run_main(["demo", "--size", "5", "--seed", "2"])
        self.assertIn("Depth First Search:", out)
        self.assertIn("Prim's Algorithm", out)
        self.assertIn("Kruskal's Algorithm", out)
        self.assertIsInstance(maze.algorithm, KruskalsAlgorithm)
        self.assertTrue(out.rstrip("\n").endswith(str(maze).rstrip("\n")))

    def test_benchmark(self):
        results, out = self.run_main(["benchmark", "--size", "6", "--repeat", "1"])
        self.assertEqual(set(results), set(ALGORITHMS))
        for name in ALGORITHMS:
            self.assertIn(name, out)

    def test_invalid_size(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.run_main(["generate", "--width", "0"])
        self.assertEqual(ctx.exception.code, 2)

    def test_no_command(self):
        result, out = self.run_main([])
        self.assertIsNone(result)
        self.assertIn("usage", out)

if __name__ == '__main__':
    unittest.main()
