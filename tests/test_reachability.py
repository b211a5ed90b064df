"""Unit tests for the bounded reachable-path search."""

import random
import sys
import os
from collections import deque

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tilearena.ai.reachability import (
    InvalidArgumentError,
    ReachabilitySearch,
    enumerate_steps,
    max_reachable_cells,
    search,
)
from tilearena.core.enums import Material
from tilearena.core.grid import Grid
from tilearena.core.models import Vector2


def _grid(w: int = 5, h: int = 5) -> Grid:
    return Grid(w, h, default=Material.FLOOR)


def _v(x: int, y: int) -> Vector2:
    return Vector2(x, y)


def _random_grid(seed: int, w: int = 9, h: int = 9, density: float = 0.3) -> Grid:
    rnd = random.Random(seed)
    g = _grid(w, h)
    for x in range(w):
        for y in range(h):
            if rnd.random() < density:
                g.set_xy(x, y, Material.WALL)
    return g


def _bfs_distances(grid: Grid, start: Vector2, max_cost: int) -> dict[Vector2, int]:
    """Reference 4-way flood fill with unit step cost."""
    costs = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        if costs[cur] >= max_cost:
            continue
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nxt = Vector2(cur.x + dx, cur.y + dy)
            if nxt in costs or not grid.is_open(nxt.x, nxt.y):
                continue
            costs[nxt] = costs[cur] + 1
            q.append(nxt)
    return costs


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------

class TestScenarios:
    def test_single_tile_zero_range(self):
        g = _grid(1, 1)
        assert search(g, _v(0, 0), 0) == {_v(0, 0): (_v(0, 0),)}

    def test_open_grid_range_one(self):
        g = _grid(5, 5)
        result = search(g, _v(2, 2), 1)
        assert set(result) == {_v(2, 2), _v(1, 2), _v(3, 2), _v(2, 1), _v(2, 3)}
        for path in result.values():
            assert len(path) <= 2
        assert result[_v(1, 2)] == (_v(1, 2), _v(2, 2))

    def test_routes_around_blocked_center(self):
        g = _grid(3, 3)
        g.set(_v(1, 1), Material.WALL)
        result = search(g, _v(0, 0), 4)
        assert _v(1, 1) not in result
        expected = {_v(x, y) for x in range(3) for y in range(3)} - {_v(1, 1)}
        assert set(result) == expected
        # Both routes to the far corner take four moves; the right-first one wins.
        assert result[_v(2, 2)] == (_v(2, 2), _v(2, 1), _v(2, 0), _v(1, 0), _v(0, 0))

    def test_negative_range_rejected(self):
        with pytest.raises(InvalidArgumentError):
            search(_grid(), _v(0, 0), -1)

    def test_start_outside_grid_rejected(self):
        with pytest.raises(InvalidArgumentError):
            search(_grid(5, 5), _v(10, 10), 2)

    @pytest.mark.parametrize("start", [_v(-1, 0), _v(0, -1), _v(5, 0), _v(0, 5)])
    def test_each_edge_of_bounds_rejected(self, start):
        with pytest.raises(InvalidArgumentError):
            search(_grid(5, 5), start, 1)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            search(_grid(), _v(0, 0), -3)


# ---------------------------------------------------------------------------
# Traversal order and tie-breaking
# ---------------------------------------------------------------------------

class TestTieBreaking:
    def test_left_branch_claims_diagonals_first(self):
        g = _grid(3, 3)
        result = search(g, _v(1, 1), 2)
        assert result[_v(0, 0)] == (_v(0, 0), _v(0, 1), _v(1, 1))
        assert result[_v(0, 2)] == (_v(0, 2), _v(0, 1), _v(1, 1))
        assert result[_v(2, 2)] == (_v(2, 2), _v(2, 1), _v(1, 1))
        assert result[_v(2, 0)] == (_v(2, 0), _v(2, 1), _v(1, 1))

    def test_longer_first_visit_is_replaced_by_shorter(self):
        # (0,1) is first reached the long way round via (1,0) and (1,1).
        g = _grid(2, 2)
        result = search(g, _v(0, 0), 3)
        assert result[_v(0, 1)] == (_v(0, 1), _v(0, 0))
        assert result[_v(1, 1)] == (_v(1, 1), _v(1, 0), _v(0, 0))

    def test_edge_start_never_steps_off_grid(self):
        g = _grid(3, 1)
        result = search(g, _v(0, 0), 5)
        assert set(result) == {_v(0, 0), _v(1, 0), _v(2, 0)}

    def test_walled_in_start_yields_only_itself(self):
        g = Grid.from_rows([
            ".#.",
            "#.#",
            ".#.",
        ])
        assert search(g, _v(1, 1), 3) == {_v(1, 1): (_v(1, 1),)}

    def test_blocked_start_is_not_an_error(self):
        g = _grid(3, 3)
        g.set(_v(1, 1), Material.WALL)
        result = search(g, _v(1, 1), 1)
        assert result[_v(1, 1)] == (_v(1, 1),)
        assert len(result) == 5


# ---------------------------------------------------------------------------
# Invariants over random layouts
# ---------------------------------------------------------------------------

class TestInvariants:
    @pytest.mark.parametrize("seed", range(8))
    def test_paths_are_valid_and_shortest(self, seed):
        g = _random_grid(seed)
        start = _v(4, 4)
        g.set(start, Material.FLOOR)
        move_range = 5
        result = search(g, start, move_range)
        distances = _bfs_distances(g, start, move_range)

        assert set(result) == set(distances)
        for dest, path in result.items():
            assert path[0] == dest
            assert path[-1] == start
            assert len(path) - 1 == distances[dest] <= move_range
            for a, b in zip(path, path[1:]):
                assert a.manhattan(b) == 1
            for cell in path[:-1]:
                assert g.is_open(cell.x, cell.y)
            assert start.chebyshev(dest) <= move_range

    @pytest.mark.parametrize("seed", range(4))
    def test_idempotent(self, seed):
        g = _random_grid(seed)
        g.set(_v(3, 3), Material.FLOOR)
        first = search(g, _v(3, 3), 4)
        second = search(g, _v(3, 3), 4)
        assert first == second
        assert list(first) == list(second)

    @pytest.mark.parametrize("seed", range(4))
    def test_monotonic_in_range(self, seed):
        g = _random_grid(seed, density=0.25)
        start = _v(4, 4)
        g.set(start, Material.FLOOR)
        previous = search(g, start, 0)
        for move_range in range(1, 7):
            current = search(g, start, move_range)
            assert set(previous) <= set(current)
            for dest, path in previous.items():
                assert len(current[dest]) <= len(path)
            previous = current

    def test_blocked_cells_never_appear(self):
        g = _random_grid(11, density=0.4)
        g.set(_v(4, 4), Material.FLOOR)
        walls = {_v(x, y) for x in range(g.width) for y in range(g.height) if not g.is_open(x, y)}
        result = search(g, _v(4, 4), 8)
        for dest, path in result.items():
            assert dest not in walls
            assert not walls.intersection(path)

    def test_open_grid_fills_the_diamond(self):
        g = _grid(11, 11)
        result = search(g, _v(5, 5), 4)
        assert len(result) == max_reachable_cells(4)
        assert all(_v(5, 5).manhattan(d) <= 4 for d in result)

    def test_range_far_beyond_grid(self):
        g = _grid(3, 3)
        result = search(g, _v(0, 0), 10**6)
        assert len(result) == 9
        assert all(len(path) - 1 == _v(0, 0).manhattan(dest) for dest, path in result.items())
        assert len(list(enumerate_steps(g, _v(0, 0), 10**6))) >= 9

    @pytest.mark.parametrize("start", [_v(0, 0), _v(6, 0), _v(0, 4), _v(6, 4), _v(3, 2)])
    def test_box_clipped_at_every_edge(self, start):
        g = _grid(7, 5)
        for move_range in (1, 3, 6, 50):
            result = search(g, start, move_range)
            expected = {
                _v(x, y) for x in range(7) for y in range(5)
                if start.manhattan(_v(x, y)) <= move_range
            }
            assert set(result) == expected


# ---------------------------------------------------------------------------
# Step trace
# ---------------------------------------------------------------------------

class TestEnumerateSteps:
    def test_full_trace_on_small_grid(self):
        g = _grid(3, 3)
        s = _v(1, 1)
        steps = list(enumerate_steps(g, s, 2))
        assert steps == [
            (s,),
            (_v(0, 1), s),
            (_v(0, 2), _v(0, 1), s),
            (_v(0, 0), _v(0, 1), s),
            (_v(2, 1), s),
            (_v(2, 2), _v(2, 1), s),
            (_v(2, 0), _v(2, 1), s),
            (_v(1, 2), s),
            (_v(1, 0), s),
        ]

    def test_revisits_show_up_in_trace(self):
        g = _grid(2, 2)
        steps = list(enumerate_steps(g, _v(0, 0), 3))
        assert len(steps) == 5
        heads = [step[0] for step in steps]
        assert heads.count(_v(0, 1)) == 2

    def test_zero_range_trace(self):
        assert list(enumerate_steps(_grid(), _v(2, 2), 0)) == [(_v(2, 2),)]

    def test_is_lazy_and_restartable(self):
        g = _random_grid(3)
        g.set(_v(4, 4), Material.FLOOR)
        it = enumerate_steps(g, _v(4, 4), 4)
        assert next(it) == (_v(4, 4),)
        assert list(enumerate_steps(g, _v(4, 4), 4)) == list(enumerate_steps(g, _v(4, 4), 4))

    def test_validation_happens_before_iteration(self):
        with pytest.raises(InvalidArgumentError):
            enumerate_steps(_grid(), _v(0, 0), -1)
        with pytest.raises(InvalidArgumentError):
            enumerate_steps(_grid(5, 5), _v(7, 0), 1)

    @pytest.mark.parametrize("seed", range(4))
    def test_last_write_per_cell_matches_search(self, seed):
        g = _random_grid(seed)
        g.set(_v(4, 4), Material.FLOOR)
        last: dict[Vector2, tuple] = {}
        for step in enumerate_steps(g, _v(4, 4), 5):
            assert step[-1] == _v(4, 4)
            last[step[0]] = step
        assert last == search(g, _v(4, 4), 5)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    @pytest.mark.parametrize("r,expected", [(0, 1), (1, 5), (2, 13), (3, 25)])
    def test_max_reachable_cells(self, r, expected):
        assert max_reachable_cells(r) == expected

    def test_max_reachable_cells_negative(self):
        with pytest.raises(InvalidArgumentError):
            max_reachable_cells(-1)

    def test_bound_search_object(self):
        g = _grid(3, 3)
        finder = ReachabilitySearch(g)
        assert finder.grid is g
        assert finder.search(_v(1, 1), 1) == search(g, _v(1, 1), 1)
        assert finder.path_to(_v(1, 1), 2, _v(2, 2)) == (_v(2, 2), _v(2, 1), _v(1, 1))
        assert finder.path_to(_v(0, 0), 1, _v(2, 2)) is None
        assert list(finder.enumerate_steps(_v(0, 0), 0)) == [(_v(0, 0),)]
