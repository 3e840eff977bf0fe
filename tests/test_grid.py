import pytest

from stickymaze.grid import Grid, cell_index

def test_flat_index_layout():
    g = Grid.empty(3, 2, border=88)
    assert len(g.buf) == 5 * 4
    assert g.idx(0, 0) == 0
    assert g.idx(4, 0) == 4
    assert g.idx(0, 1) == 5
    assert cell_index((2, 3), 3) == 2 + 3 * 5

def test_border_ring_and_interior():
    g = Grid.empty(3, 2, border=88)
    assert list(g.interior_cells()) == [(1, 1), (2, 1), (3, 1), (1, 2), (2, 2), (3, 2)]
    for y in range(g.rows):
        for x in range(g.stride):
            assert g.is_border(x, y) == ((x, y) not in set(g.interior_cells()))

def test_get_set_and_matrix():
    g = Grid.empty(1, 1, border=88)
    g.set(1, 1, 5)
    assert g.get(1, 1) == 5
    assert g.as_matrix() == [[88, 88, 88], [88, 5, 88], [88, 88, 88]]

def test_zero_size_is_border_only():
    g = Grid.empty(0, 0, border=88)
    assert g.buf == [88] * 4
    assert list(g.interior_cells()) == []

def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Grid.empty(-1, 3, border=88)
