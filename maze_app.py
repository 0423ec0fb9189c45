#Random grid mazes with A* shortest paths
#Each run fills the interior with random walls, then solves it with A* and checks the length against BFS
#Runs can be watched and edited in a pygame window or printed as text metrics

#To run this code, open terminal, follow directories to where the files are then run "python3 maze_app.py"
#To save multiple runs to a csv file, run "python3 maze_app.py --mode cli --runs 10 --csv-output results.csv"

from __future__ import annotations

import argparse
import csv
import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

from logging_config import setup_logging
from maze_grid import DEFAULT_WALL_PROBABILITY, Grid
from pathfinder import PathFinder, SolveResult, breadth_first_path

logger = logging.getLogger(__name__)


ALGORITHMS: Dict[str, Callable[[Grid], SolveResult]] = {
    "A*": PathFinder().solve_detailed,
    "BFS": breadth_first_path,
}

CSV_FIELDS = [
    "run",
    "seed",
    "rows",
    "cols",
    "wall_probability",
    "algorithm",
    "outcome",
    "elapsed",
    "expanded",
    "path_length",
]


def make_grid(args, seed: Optional[int]) -> Grid:
    grid = Grid(args.rows, args.cols, seed=seed)
    if args.start:
        grid.set_start(*args.start)
    if args.end:
        grid.set_end(*args.end)
    grid.randomize(args.wall_probability)
    return grid


def resolve_seed(args) -> int:
    return args.seed if args.seed is not None else random.randint(0, 1_000_000_000)


def run_cli_mode(args) -> List[Dict[str, object]]:
    base_seed = resolve_seed(args)
    rows = []
    for run_idx in range(args.runs):
        seed = base_seed + run_idx
        grid = make_grid(args, seed)
        print(f"\nRun {run_idx + 1}/{args.runs} | maze {args.rows}x{args.cols} | seed: {seed} | start={grid.start} end={grid.end} | wall_probability={args.wall_probability}")

        results: Dict[str, SolveResult] = {}
        for alg_name, solve in ALGORITHMS.items():
            result = solve(grid)
            results[alg_name] = result
            path_length = len(result.path) if result.path else "-"
            print(f"[{alg_name}] outcome={result.outcome.value} elapsed={result.elapsed:.4f}s expanded={result.expanded} path_len={path_length}")
            rows.append({
                "run": run_idx + 1,
                "seed": seed,
                "rows": args.rows,
                "cols": args.cols,
                "wall_probability": args.wall_probability,
                "algorithm": alg_name,
                "outcome": result.outcome.value,
                "elapsed": f"{result.elapsed:.6f}",
                "expanded": result.expanded,
                "path_length": len(result.path),
            })

        if len(results["A*"].path) != len(results["BFS"].path):
            logger.error("A* and BFS disagree on seed %s: %d vs %d", seed, len(results["A*"].path), len(results["BFS"].path))
            print("MISMATCH: A* and BFS path lengths differ")

        grid.set_path(results["A*"].path)
        if args.show:
            print(grid.to_text())

    if args.csv_output:
        write_csv(args.csv_output, rows)
        print(f"\nWrote {len(rows)} rows to {args.csv_output}")
    return rows


def write_csv(path: str, rows: Sequence[Dict[str, object]]) -> None:
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)


def run_visual_mode(args) -> None:
    from visualizer import MazeVisualizer

    grid = make_grid(args, resolve_seed(args))
    viewer = MazeVisualizer(
        grid=grid,
        finder=PathFinder(),
        wall_probability=args.wall_probability,
        cell_size=args.cell_size,
    )
    viewer.run()


def prompt_for_mode():
    response = input("Run visualizer? (y/n): ").strip().lower()
    return "visual" if response.startswith("y") else "cli"


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(description="Random grid maze with A* shortest path and optional visualizer.")
    parser.add_argument("--mode", choices=["visual", "cli"], help="Choose 'visual' for pygame viewer or 'cli' for text metrics.")
    parser.add_argument("--rows", type=int, default=20, help="Maze height in cells, including the outer wall.")
    parser.add_argument("--cols", type=int, default=20, help="Maze width in cells, including the outer wall.")
    parser.add_argument("--wall-probability", type=float, default=DEFAULT_WALL_PROBABILITY, help="Chance that an interior cell becomes a wall (clamped to [0, 1]).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the first run; later runs use seed+1, seed+2, ... (default: random).")
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None, help="Start cell (default: 1 1).")
    parser.add_argument("--end", type=int, nargs=2, metavar=("X", "Y"), default=None, help="End cell (default: cols-2 rows-2).")
    parser.add_argument("--runs", type=positive_int, default=1, help="Number of runs to execute in CLI mode.")
    parser.add_argument("--show", action="store_true", help="Print each maze with its A* path in CLI mode.")
    parser.add_argument("--csv-output", type=str, default=None, help="Path to write CSV metrics.")
    parser.add_argument("--cell-size", type=int, default=24, help="Cell size in pixels for visual mode.")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING", help="Logging level.")
    parser.add_argument("--log-file", type=str, default=None, help="Also write the log to this file.")
    args = parser.parse_args(argv)
    if args.rows < 3 or args.cols < 3:
        parser.error("--rows and --cols must be at least 3")
    return args


def main(argv: Optional[Sequence[str]] = None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    mode = args.mode or prompt_for_mode()
    if mode == "visual":
        run_visual_mode(args)
    else:
        run_cli_mode(args)


if __name__ == "__main__":
    main()
