import argparse
import sys
import os
import time
import logging

# Ensure project root is in path so we can import 'maze_backtracker' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_backtracker import config as defaults


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Backtracker: step-by-step recursive backtracker")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--rows", type=int, default=defaults.ROWS, help="Grid rows")
    gen_parser.add_argument("--cols", type=int, default=defaults.COLS, help="Grid columns")
    gen_parser.add_argument("--width", type=int, default=defaults.WIDTH, help="Canvas width (px)")
    gen_parser.add_argument("--height", type=int, default=defaults.HEIGHT, help="Canvas height (px)")
    gen_parser.add_argument("--fps", type=int, default=defaults.FPS, help="Ticks per second")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Show visualization")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")
    gen_parser.add_argument("--close-when-done", action="store_true", help="Close the window once the maze is complete")
    gen_parser.add_argument("--check", action="store_true", help="Verify state invariants after every step")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time headless generation")
    bench_parser.add_argument("--sizes", type=int, nargs="+", default=[20, 50, 100, 200], help="Square grid sizes")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser


def run_generate(args, logger):
    from maze_backtracker.config import SketchConfig
    from maze_backtracker.viz.sketch import MazeSketch
    from maze_backtracker.core import analysis

    try:
        cfg = SketchConfig(width=args.width, height=args.height,
                           rows=args.rows, cols=args.cols, fps=args.fps)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    sketch = MazeSketch(cfg, seed=args.seed, check_invariants=args.check)
    logger.info(f"Generating {cfg.cols}x{cfg.rows} maze (seed={args.seed})...")

    if args.visual or args.record:
        logger.info("Visual mode enabled - Opening window...")
        from maze_backtracker.viz.renderer import Renderer
        renderer = Renderer(sketch, record=args.record, close_when_done=args.close_when_done)

        if args.record:
            import datetime
            if not os.path.exists("recordings"):
                os.makedirs("recordings")

            ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            fname = f"gen_{cfg.cols}x{cfg.rows}_{ts}.mp4"
            renderer.recorder.output_file = os.path.join("recordings", fname)
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        renderer.init_window()
        renderer.run_loop()
    else:
        logger.info("Headless generation...")
        sketch.generator.run_all()

    gen = sketch.generator
    if sketch.finished:
        logger.info(f"Done in {gen.step_count} steps ({gen.pushes} pushes, {gen.pops} pops)")
        logger.info(f"Stats: {analysis.calculate_stats(sketch.state.grid)}")
    else:
        logger.info(f"Stopped early after {gen.step_count} steps")
    return 0


def run_benchmark(args, logger):
    from maze_backtracker.core.state import create_state
    from maze_backtracker.algo.dfs import RecursiveBacktracker

    print(f"\n{'SIZE':<12} | {'STEPS':<10} | {'TIME (s)':<10} | {'CELLS/SEC':<12}")
    print("-" * 52)

    for size in args.sizes:
        logger.debug(f"Benchmarking {size}x{size}")
        state = create_state(size, size)
        gen = RecursiveBacktracker(state, seed=args.seed)

        t0 = time.time()
        gen.run_all()
        duration = time.time() - t0

        rate = (size * size) / duration if duration > 0 else float("inf")
        print(f"{f'{size}x{size}':<12} | {gen.step_count:<10} | {duration:<10.4f} | {rate:<12,.0f}")
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("maze_backtracker")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        return run_generate(args, logger)
    elif args.command == "benchmark":
        return run_benchmark(args, logger)
    return 0


if __name__ == "__main__":
    sys.exit(main())
