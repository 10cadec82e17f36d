import pytest
from core.grid import GridConfig

def test_grid_from_resolution_floors():
    g = GridConfig.from_resolution(800, 600, 20)
    assert (g.width, g.height) == (40, 30)
    g = GridConfig.from_resolution(650, 495, 20)
    assert (g.width, g.height) == (32, 24)

def test_grid_contains_bounds(grid):
    assert grid.contains((0, 0))
    assert grid.contains((31, 23))
    assert not grid.contains((-1, 0))
    assert not grid.contains((0, -1))
    assert not grid.contains((32, 0))
    assert not grid.contains((0, 24))

def test_grid_center_and_cells():
    g = GridConfig(3, 2)
    assert g.center == (1, 1)
    assert g.area == 6
    assert sorted(g.cells()) == [(x, y) for x in range(3) for y in range(2)]

def test_grid_is_immutable(grid):
    with pytest.raises(AttributeError):
        grid.width = 5

@pytest.mark.parametrize("w,h", [(0, 10), (10, 0), (-1, 5)])
def test_grid_rejects_empty(w, h):
    with pytest.raises(ValueError):
        GridConfig(w, h)

def test_resolution_smaller_than_cell_is_rejected():
    with pytest.raises(ValueError):
        GridConfig.from_resolution(10, 480, 20)
