import numpy as np
import pytest

from blastwave.conditions import FREESTREAM, POST_SHOCK, new_bc2, new_ic


@pytest.fixture
def grid():
    x = np.linspace(0.0, 2.0, 9)
    y = np.linspace(0.0, 1.1, 9)
    return x, y


def _zeros(grid):
    x, y = grid
    return [np.zeros((y.size, x.size)) for _ in range(4)]


def test_ic_corner_states(grid):
    x, y = grid
    u, v, rho, p = new_ic(*_zeros(grid), x, y)
    assert (u[0, 0], v[0, 0], rho[0, 0], p[0, 0]) == pytest.approx(FREESTREAM)
    assert (u[0, -1], v[0, -1], rho[0, -1], p[0, -1]) == pytest.approx(POST_SHOCK)


def test_ic_only_two_states(grid):
    x, y = grid
    u, v, rho, p = new_ic(*_zeros(grid), x, y)
    assert set(np.unique(u)) <= {FREESTREAM[0], POST_SHOCK[0]}
    assert set(np.unique(p)) <= {FREESTREAM[3], POST_SHOCK[3]}


def test_ic_freestream_is_prefix_of_each_row(grid):
    x, y = grid
    u, *_ = new_ic(*_zeros(grid), x, y)
    for row in u == FREESTREAM[0]:
        count = int(row.sum())
        assert row[:count].all()
        assert not row[count:].any()


def test_ic_fields_consistent(grid):
    x, y = grid
    u, v, rho, p = new_ic(*_zeros(grid), x, y)
    np.testing.assert_array_equal(u == FREESTREAM[0], rho == FREESTREAM[2])
    np.testing.assert_array_equal(v == FREESTREAM[1], p == FREESTREAM[3])


def test_ic_shape_mismatch(grid):
    x, y = grid
    fields = _zeros(grid)
    fields[2] = np.zeros((y.size, x.size + 1))
    with pytest.raises(ValueError):
        new_ic(*fields, x, y)


def test_bc_last_row(grid):
    x, y = grid
    u, v, rho, p = new_bc2(*_zeros(grid), x, y)
    np.testing.assert_array_equal(u[-1, 3:], POST_SHOCK[0])
    np.testing.assert_array_equal(rho[-1, 3:], POST_SHOCK[2])
    np.testing.assert_array_equal(p[-1, 3:], POST_SHOCK[3])


def test_bc_interior_untouched(grid):
    x, y = grid
    fields = [np.full((y.size, x.size), 7.5) for _ in range(4)]
    out = new_bc2(*fields, x, y)
    for field in out:
        np.testing.assert_array_equal(field[:-1, 3:], 7.5)


def test_bc_left_columns(grid):
    x, y = grid
    u, v, rho, p = new_bc2(*_zeros(grid), x, y)
    assert rho[0, 0] == FREESTREAM[2]
    assert set(np.unique(u[:, :3])) <= {FREESTREAM[0], POST_SHOCK[0]}
    np.testing.assert_array_equal(u[:, :3] == FREESTREAM[0], p[:, :3] == FREESTREAM[3])


def test_bc_leaves_inputs_unchanged(grid):
    x, y = grid
    fields = _zeros(grid)
    new_bc2(*fields, x, y)
    for field in fields:
        assert not field.any()


def test_bc_needs_three_columns():
    x = np.linspace(0.0, 2.0, 2)
    y = np.linspace(0.0, 1.1, 4)
    fields = [np.zeros((4, 2)) for _ in range(4)]
    with pytest.raises(ValueError):
        new_bc2(*fields, x, y)


def test_bc_shape_mismatch(grid):
    x, y = grid
    fields = _zeros(grid)
    fields[0] = np.zeros((3, 3))
    with pytest.raises(ValueError):
        new_bc2(*fields, x, y)