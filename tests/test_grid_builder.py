import numpy as np
import pytest

from maze_gen.constants import HORIZ_SPLIT_WINDOW, VERT_SPLIT_WINDOW
from maze_gen.errors import GenerationInvariantViolation, InvalidDimension
from maze_gen.grid.builder import GridBuilder, build_maze_grid, pos_to_space, pos_to_wall
from maze_gen.grid.tags import ENTRANCE_DOOR, EXIT_DOOR, Tag, find_cells


def test_index_mapping():
    assert [pos_to_space(k) for k in (1, 2, 3)] == [1, 3, 5]
    assert [pos_to_wall(k) for k in (1, 2, 3)] == [2, 4, 6]


def test_initial_walls_form_lattice():
    b = GridBuilder(3, 2, np.random.default_rng(0))
    grid = b._init_grid()
    assert grid.shape == (5, 7)
    wall = int(Tag.WALL)
    assert np.all(grid[0, :] == wall) and np.all(grid[-1, :] == wall)
    assert np.all(grid[:, 0] == wall) and np.all(grid[:, -1] == wall)
    assert np.all(grid[::2, ::2] == wall)
    # Rooms and the passages between them start open
    assert grid[1, 1] == 0 and grid[1, 2] == 0 and grid[2, 1] == 0 and grid[3, 5] == 0


@pytest.mark.parametrize("width,height", [(1, 1), (2, 3), (5, 5), (12, 7)])
def test_doors_on_border_odd_columns(width, height):
    maze = build_maze_grid(width, height, np.random.default_rng(width * 100 + height))
    H, W = maze.shape
    assert (H, W) == (2 * height + 1, 2 * width + 1)
    exits = find_cells(maze.tags, Tag.EXIT)
    entrances = find_cells(maze.tags, Tag.ENTRANCE)
    assert exits == [maze.exit] and entrances == [maze.entrance]
    ei, ej = maze.exit
    ni, nj = maze.entrance
    assert ei == 0 and ni == H - 1
    for j in (ej, nj):
        assert j % 2 == 1
        assert 0 < j < W - 1
    assert maze.tags[maze.exit] == EXIT_DOOR
    assert maze.tags[maze.entrance] == ENTRANCE_DOOR


def test_door_columns_cover_all_rooms():
    cols = set()
    for seed in range(200):
        maze = build_maze_grid(3, 1, np.random.default_rng(seed))
        cols.add(maze.exit[1])
    assert cols == {1, 3, 5}


def test_smallest_maze_has_single_room_with_key():
    maze = build_maze_grid(1, 1, np.random.default_rng(3))
    assert maze.shape == (3, 3)
    assert maze.partitions == []
    assert maze.key == (1, 1)
    assert maze.tags[1, 1] == int(Tag.KEY)
    assert maze.tags[0, 1] == EXIT_DOOR
    assert maze.tags[2, 1] == ENTRANCE_DOOR
    assert int(np.count_nonzero(maze.tags == int(Tag.WALL))) == 6


def test_single_column_maze_is_not_partitioned():
    maze = build_maze_grid(1, 6, np.random.default_rng(0))
    assert maze.partitions == []
    assert np.all(maze.tags[1:-1, 1] != int(Tag.WALL))


@pytest.mark.parametrize("bad", [0, -1, 2.5, "3", None, True])
def test_invalid_dimension(bad):
    with pytest.raises(InvalidDimension):
        GridBuilder(bad, 3)
    with pytest.raises(InvalidDimension):
        build_maze_grid(3, bad)


def test_invalid_dimension_is_value_error():
    with pytest.raises(ValueError):
        build_maze_grid(0, 0)


def test_split_windows():
    b = GridBuilder(10, 10, np.random.default_rng(0))
    horiz = {b._pick_split(1, 9, HORIZ_SPLIT_WINDOW) for _ in range(300)}
    vert = {b._pick_split(1, 9, VERT_SPLIT_WINDOW) for _ in range(300)}
    assert horiz == {4, 5, 6, 7}
    assert vert == {4, 5, 6}
    # Forced and two-line regions
    assert b._pick_split(3, 3, HORIZ_SPLIT_WINDOW) == 3
    assert {b._pick_split(1, 2, VERT_SPLIT_WINDOW) for _ in range(20)} == {2}


def test_partition_outside_interior_raises():
    b = GridBuilder(2, 2, np.random.default_rng(0))
    b.grid = b._init_grid()
    with pytest.raises(GenerationInvariantViolation):
        b.partition(0, 1, 1, 1)
    with pytest.raises(GenerationInvariantViolation):
        b.partition(1, 2, 1, 1)


def test_empty_region_is_terminal():
    b = GridBuilder(4, 4, np.random.default_rng(0))
    b.grid = b._init_grid()
    before = b.grid.copy()
    b.partition(2, 1, 1, 3)
    b.partition(1, 3, 3, 2)
    assert np.array_equal(before, b.grid)
    assert b.partitions == []


@pytest.mark.parametrize("seed", range(10))
def test_every_partition_leaves_three_arms_open(seed):
    rng = np.random.default_rng(seed)
    width = int(rng.integers(2, 20))
    height = int(rng.integers(2, 20))
    maze = build_maze_grid(width, height, rng)
    assert maze.partitions, "expected at least one partition"
    wall = int(Tag.WALL)
    for p in maze.partitions:
        assert sum(p.gaps) == 3
        assert len(p.carved) == 3
        open_arms = 0
        for arm in p.arms():
            assert arm, "arm spans must be non-empty"
            if any(not (int(maze.tags[c]) & wall) for c in arm):
                open_arms += 1
        assert open_arms >= 3
        for c in p.carved:
            assert not (int(maze.tags[c]) & wall)


def test_partition_walls_stay_inside_interior():
    maze = build_maze_grid(9, 6, np.random.default_rng(11))
    H, W = maze.shape
    for p in maze.partitions:
        assert 1 <= p.row_span[0] <= p.wall_row <= p.row_span[1] <= H - 2
        assert 1 <= p.col_span[0] <= p.wall_col <= p.col_span[1] <= W - 2
        assert p.wall_row % 2 == 0 and p.wall_col % 2 == 0
