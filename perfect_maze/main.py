import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'perfect_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from perfect_maze.algo.registry import ALGORITHMS, create_algorithm
from perfect_maze.core.errors import MazeError
from perfect_maze.core.grid import Maze


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Perfect Maze: spanning-tree maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a maze and print it")
    gen_parser.add_argument("--width", type=int, default=15, help="Maze Width")
    gen_parser.add_argument("--height", type=int, default=15, help="Maze Height")
    gen_parser.add_argument("--algo", type=str, default="dfs", choices=ALGORITHMS, help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation in a pygame window")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics")

    # Demo Command
    demo_parser = subparsers.add_parser("demo", help="Render one maze with each algorithm in turn")
    demo_parser.add_argument("--size", type=int, default=15, help="Maze width and height")
    demo_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time each generation algorithm")
    bench_parser.add_argument("--size", type=int, default=50, help="Benchmark size")
    bench_parser.add_argument("--repeat", type=int, default=3, help="Regenerations per algorithm")

    return parser


def run_generate(args, logger):
    logger.info(f"Generating {args.width}x{args.height} maze with {args.algo.upper()}...")
    algorithm = create_algorithm(args.algo, seed=args.seed)

    if args.visual:
        # Topology only; the renderer drives generation
        maze = Maze(args.width, args.height)
        maze.set_algorithm(algorithm)

        from perfect_maze.viz.renderer import Renderer
        logger.info("Visual mode enabled - Opening window...")
        renderer = Renderer(maze, algorithm=algorithm)
        renderer.init_window()
        renderer.run_loop()
        if not renderer.gen_finished:
            logger.info("Window closed early, finishing generation headless...")
            maze.regenerate()
    else:
        maze = Maze(args.width, args.height, algorithm)

    print(maze, end="")

    if args.stats:
        from perfect_maze.core.complexity import MazeAnalyzer
        stats = MazeAnalyzer.calculate_stats(maze)
        logger.info(f"Stats: {stats}")

    return maze


def run_demo(args, logger):
    # Topology is built once; each algorithm regenerates it
    maze = Maze(args.size, args.size, create_algorithm("dfs", seed=args.seed))

    print("===Maze Generator Test===")
    print("\nDepth First Search:")
    print(maze)

    maze.set_algorithm(create_algorithm("prim", seed=args.seed))
    maze.regenerate()
    print("\nPrim's Algorithm")
    print(maze)

    maze.set_algorithm(create_algorithm("kruskal", seed=args.seed))
    maze.regenerate()
    print("\nKruskal's Algorithm")
    print(maze)

    logger.debug("Demo complete")
    return maze


def run_benchmark(args, logger):
    logger.info(f"Running Generation Benchmark (Size: {args.size}x{args.size})...")

    t0 = time.time()
    maze = Maze(args.size, args.size)
    logger.info(f"Topology built in {time.time()-t0:.4f}s ({len(maze.walls)} walls)")

    print(f"\n{'ALGORITHM':<12} | {'BEST (s)':<10} | {'MEAN (s)':<10} | {'CELLS/SEC':<12}")
    print("-" * 52)

    results = {}
    for name in ALGORITHMS:
        maze.set_algorithm(create_algorithm(name, seed=123))
        timings = []
        for _ in range(args.repeat):
            t_start = time.perf_counter()
            maze.regenerate()
            timings.append(time.perf_counter() - t_start)

        best = min(timings)
        mean = sum(timings) / len(timings)
        rate = (args.size * args.size) / best if best > 0 else float("inf")
        results[name] = best
        print(f"{name:<12} | {best:<10.4f} | {mean:<10.4f} | {rate:<12,.0f}")

    return results


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("perfect_maze")

    if args.command is None:
        parser.print_help()
        return None

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "generate":
            return run_generate(args, logger)
        elif args.command == "demo":
            return run_demo(args, logger)
        elif args.command == "benchmark":
            if args.repeat < 1:
                parser.error("--repeat must be at least 1")
            return run_benchmark(args, logger)
    except MazeError as e:
        logger.error(str(e))
        parser.error(str(e))


if __name__ == "__main__":
    main()
