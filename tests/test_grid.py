import math

import pytest

from discscatter.sampling.grid import EMPTY, DiscGrid


def test_grid_dimensions_cover_bounding_square():
    cell = 1.5 / math.sqrt(2.0)
    g = DiscGrid(10.0, cell)
    n = math.ceil(20.0 / cell)
    assert g.shape == (n, n)
    assert g.cells.shape == (n * n,)
    assert (g.cells == EMPTY).all()
    assert g.occupied() == 0


def test_locate_origin_and_clamp():
    g = DiscGrid(2.0, 1.0)
    assert g.shape == (4, 4)
    assert g.locate(-2.0, -2.0) == (0, 0)
    assert g.locate(0.0, 0.0) == (2, 2)
    assert g.locate(2.0, 2.0) == (3, 3)
    assert g.locate(-5.0, 9.0) == (3, 0)


def test_flat_addressing_row_major():
    g = DiscGrid(2.0, 1.0)
    g.put(1.5, -1.5, 7)       # col 3, row 0
    assert g.get(0, 3) == 7
    assert g.cells[0 * g.width + 3] == 7
    g.store(2, 1, 4)
    assert g.cells[2 * g.width + 1] == 4
    assert g.occupied() == 2


def test_around_is_clamped_5x5():
    g = DiscGrid(5.0, 1.0)
    for i, (r, c) in enumerate([(0, 0), (2, 2), (3, 3), (5, 5)]):
        g.store(r, c, i)
    assert sorted(g.around(0, 0)) == [0, 1]
    assert sorted(g.around(3, 3)) == [1, 2, 3]
    assert list(g.around(9, 0)) == []


def test_tiny_radius_still_one_cell():
    g = DiscGrid(0.01, 5.0)
    assert g.shape == (1, 1)


@pytest.mark.parametrize("radius,cell", [(0.0, 1.0), (1.0, 0.0), (-1.0, 1.0)])
def test_bad_dimensions(radius, cell):
    with pytest.raises(ValueError):
        DiscGrid(radius, cell)
