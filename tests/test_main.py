import pytest

from main import main, parse_args, render_ascii
from grid_core import Grid
from maze_gen import Algorithm, generate_maze


def test_parse_args_defaults():
    args = parse_args([])
    assert args.rows == 10 and args.columns == 10
    assert args.algorithm == "recursive_backtracker"
    assert args.ascii == "plain"
    assert not args.images and not args.stl


def test_parse_args_rejects_unknown_algorithm():
    with pytest.raises(SystemExit):
        parse_args(["3", "3", "--algorithm", "prims"])


@pytest.mark.parametrize("mode", ["plain", "distances", "path", "color"])
def test_main_prints_maze(mode, capsys):
    assert main(["3", "4", "--algorithm", "sidewinder", "--seed", "1", "--ascii", mode]) == 0
    out = capsys.readouterr().out
    assert "+---+---+---+---+" in out
    assert "Longest path:" in out


def test_main_rejects_bad_dimensions(capsys):
    assert main(["0", "4"]) == 2
    assert "ERROR:" in capsys.readouterr().out


def test_main_is_reproducible(capsys):
    main(["5", "5", "--algorithm", "aldous_broder", "--seed", "9"])
    first = capsys.readouterr().out
    main(["5", "5", "--algorithm", "aldous_broder", "--seed", "9"])
    second = capsys.readouterr().out
    strip = lambda text: text.split("--- Total Execution Time")[0]
    assert strip(first) == strip(second)


def test_main_writes_images_and_stl(tmp_path):
    out_dir = tmp_path / "out"
    code = main(["4", "4", "--seed", "3", "--ascii", "none", "--images", "--stl", "--output-dir", str(out_dir)])
    assert code == 0
    for name in ("maze_links.png", "maze_walls.png", "maze_connectivity.png", "maze_solution.png", "maze_2d_flat.stl"):
        assert (out_dir / name).exists()


def test_render_ascii_path_mode_marks_goal():
    grid = Grid(3, 1)
    generate_maze(grid, Algorithm.BINARY_TREE, seed=0)
    lines = render_ascii(grid, "path").splitlines()
    assert lines[5] == "| 2 |"


def test_render_ascii_rejects_unknown_mode():
    with pytest.raises(ValueError):
        render_ascii(Grid(1, 1), "sepia")
