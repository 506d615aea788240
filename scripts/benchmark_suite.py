import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.core.grid import Maze
from perfect_maze.core.complexity import MazeAnalyzer
from perfect_maze.algo.registry import ALGORITHMS, create_algorithm

def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height:,} cells) ---")

    # 1. Topology
    start_time = time.perf_counter()
    maze = Maze(width, height)
    print(f"Topology Init: {time.perf_counter() - start_time:.4f}s ({len(maze.walls):,} walls)")

    # 2. Generation, same topology for every algorithm
    results = {}
    for name in ALGORITHMS:
        maze.set_algorithm(create_algorithm(name, seed=42))

        gen_start = time.perf_counter()
        maze.regenerate()
        gen_time = time.perf_counter() - gen_start

        rate = (width * height) / gen_time if gen_time > 0 else float("inf")
        results[name] = rate
        stats = MazeAnalyzer.calculate_stats(maze)
        print(f"{name:<8} {gen_time:.4f}s  "
              f"{rate:,.0f} cells/sec  "
              f"dead ends {stats['dead_end_percent']:.1f}%")

    return results

def run_suite():
    sizes = [
        (15, 15),
        (50, 50),
        (200, 200),
        (500, 500),
    ]

    for w, h in sizes:
        benchmark_size(w, h)

if __name__ == "__main__":
    run_suite()
