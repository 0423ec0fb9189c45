import csv
import logging

import pytest

from logging_config import LOGGER_NAMES
from maze_app import CSV_FIELDS, main, make_grid, parse_args, run_cli_mode
from maze_grid import CellState


def test_parse_args_defaults():
    args = parse_args([])
    assert args.mode is None
    assert (args.rows, args.cols) == (20, 20)
    assert args.wall_probability == pytest.approx(0.3)
    assert args.runs == 1
    assert args.start is None and args.end is None


def test_parse_args_rejects_bad_values():
    with pytest.raises(SystemExit):
        parse_args(["--rows", "2"])
    with pytest.raises(SystemExit):
        parse_args(["--runs", "0"])


def test_make_grid_places_endpoints():
    args = parse_args(["--rows", "9", "--cols", "12", "--start", "2", "3", "--end", "10", "7", "--wall-probability", "0.9"])
    grid = make_grid(args, seed=4)
    assert grid.start_point() == (2, 3)
    assert grid.end_point() == (10, 7)
    assert grid.cell_state(2, 3) == CellState.OPEN
    assert grid.cell_state(10, 7) == CellState.OPEN


def test_cli_mode_writes_csv(tmp_path, capsys):
    out = tmp_path / "results.csv"
    args = parse_args(["--mode", "cli", "--runs", "3", "--seed", "10", "--rows", "12", "--cols", "12", "--csv-output", str(out)])
    rows = run_cli_mode(args)

    assert len(rows) == 6
    with open(out, newline="") as f:
        reader = csv.DictReader(f)
        assert reader.fieldnames == CSV_FIELDS
        written = list(reader)
    assert [r["seed"] for r in written] == ["10", "10", "11", "11", "12", "12"]
    assert {r["algorithm"] for r in written} == {"A*", "BFS"}

    # A* and BFS agree on every run
    for a_star, bfs in zip(written[::2], written[1::2]):
        assert a_star["outcome"] == bfs["outcome"]
        assert a_star["path_length"] == bfs["path_length"]

    printed = capsys.readouterr().out
    assert "MISMATCH" not in printed
    assert "Wrote 6 rows" in printed


@pytest.fixture
def reset_loggers():
    yield
    for name in LOGGER_NAMES:
        logging.getLogger(name).handlers.clear()


def test_main_show_prints_maze(capsys, reset_loggers):
    main(["--mode", "cli", "--seed", "3", "--rows", "6", "--cols", "8", "--wall-probability", "0", "--show"])
    printed = capsys.readouterr().out
    assert "outcome=found" in printed
    assert "#S" in printed
    assert "E#" in printed
