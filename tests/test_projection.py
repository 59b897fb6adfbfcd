import numpy as np
import pytest

from maze_gen import build_maze_grid
from maze_gen.grid.tags import ENTRANCE_DOOR, EXIT_DOOR, Tag
from maze_gen.projection import ProjectionConfig, cell_to_world, project_grid

W_ = int(Tag.WALL)
K_ = int(Tag.KEY)


def make_tags():
    return np.array(
        [
            [W_, W_, W_, EXIT_DOOR, W_],
            [W_, K_, 0, 0, W_],
            [W_, ENTRANCE_DOOR, W_, W_, W_],
        ],
        dtype=np.uint8,
    )


def test_wall_blocks_and_default_scale():
    out = project_grid(make_tags())
    assert len(out.walls) == 10
    first = out.walls[0]
    assert first.dimension == (4.0, 5.0, 4.0)
    assert first.position == (-40.0, 0.0, -40.0)
    last = out.walls[-1]
    assert last.position == ((2 - 10) * 4.0, 0.0, (4 - 10) * 4.0)


def test_door_coordinates_are_swapped():
    out = project_grid(make_tags())
    # EXIT-tagged cell (0, 3) is reported as the entrance
    assert out.entrance == (-40.0, 0.0, -28.0)
    # ENTRANCE-tagged cell (2, 1) is reported as the exit
    assert out.exit == (-32.0, 0.0, -36.0)


def test_key_coordinate_reported():
    out = project_grid(make_tags())
    assert out.key == (-36.0, 0.0, -36.0)
    no_key = make_tags()
    no_key[1, 1] = 0
    assert project_grid(no_key).key is None


def test_custom_projection_config():
    cfg = ProjectionConfig(unit=1.0, wall_height=2.0, offset=0)
    out = project_grid(make_tags(), cfg)
    assert out.walls[0].dimension == (1.0, 2.0, 1.0)
    assert out.walls[0].position == (0.0, 0.0, 0.0)
    assert cell_to_world(2, 3, cfg) == (2.0, 0.0, 3.0)


def test_projection_config_rejects_bad_unit():
    with pytest.raises(AssertionError):
        ProjectionConfig(unit=0.0)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_generated_maze_projection_counts_and_positions(seed):
    maze = build_maze_grid(7, 5, np.random.default_rng(seed))
    out = project_grid(maze)
    n_walls = int(np.count_nonzero(maze.tags & W_))
    assert len(out.walls) == n_walls
    unit, offset = 4.0, 10
    for rec in out.walls:
        x, y, z = rec.position
        assert y == 0.0
        for v in (x, z):
            k = v / unit + offset
            assert k == int(k) and k >= 0
    positions = {rec.position for rec in out.walls}
    assert len(positions) == n_walls
    assert out.entrance == cell_to_world(*maze.exit, ProjectionConfig())
    assert out.exit == cell_to_world(*maze.entrance, ProjectionConfig())
    assert out.key == cell_to_world(*maze.key, ProjectionConfig())
