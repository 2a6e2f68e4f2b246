import pytest

from puzzlekit.shikaku import ShikakuSolver, solve_shikaku


def _assert_valid(grid, rows):
    assert "-" not in "".join(rows)
    regions = {}
    for r, row in enumerate(rows):
        for c, letter in enumerate(row):
            regions.setdefault(letter, []).append((r, c))
    for cells in regions.values():
        rs = [r for r, _ in cells]
        cs = [c for _, c in cells]
        area = (max(rs) - min(rs) + 1) * (max(cs) - min(cs) + 1)
        assert area == len(cells)
        numbers = [grid[r][c] for r, c in cells if grid[r][c]]
        assert numbers == [len(cells)]


def test_single_rectangle():
    assert solve_shikaku([[2, 0]]) == ["1", "AA"]


def test_two_ways_first_is_horizontal():
    grid = [[2, 0], [0, 2]]
    count, rows = ShikakuSolver(grid).solve()
    assert count == 2
    assert rows == ["AA", "BB"]
    _assert_valid(grid, rows)


def test_rows_puzzle_is_valid():
    grid = [[3, 0, 0], [0, 0, 3], [3, 0, 0]]
    count, rows = ShikakuSolver(grid).solve()
    assert count >= 1
    _assert_valid(grid, rows)


def test_solve_is_repeatable():
    grid = [[2, 0, 2, 0], [0, 4, 0, 0], [0, 0, 0, 4]]
    solver = ShikakuSolver(grid)
    first = solver.solve()
    assert solver.solve() == first


def test_unsolvable_has_no_rows():
    assert solve_shikaku([[3, 0]]) == ["0"]


def test_summary_matches_solver():
    grid = [[0, 4], [0, 0], [2, 0]]
    count, rows = ShikakuSolver(grid).solve()
    assert solve_shikaku(grid) == [str(count), *rows]


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        ShikakuSolver([[1, 0], [1]])