import itertools

import pytest
from hypothesis import given, strategies as st

from kyotools.cumsum_nd import CumsumND


def test_one_dimension_full_range_is_total():
    values = [3, -1, 4, 1, 5]
    cs = CumsumND([len(values)])
    for i, v in enumerate(values):
        cs.add([i], v)
    cs.build()
    assert cs.query([0], [len(values)]) == sum(values)
    assert cs.query([1], [4]) == sum(values[1:4])


def test_empty_box_is_zero():
    cs = CumsumND([3, 3])
    cs.add([1, 1], 9)
    cs.build()
    assert cs.query([1, 1], [1, 3]) == 0
    assert cs.query([2, 0], [2, 3]) == 0


def test_single_cell_query_returns_value():
    cs = CumsumND([4, 5, 2])
    cs.add([2, 3, 1], 17)
    cs.build()
    assert cs.query([2, 3, 1], [3, 4, 2]) == 17
    assert cs.query([0, 0, 0], [4, 5, 2]) == 17


def test_repeated_add_accumulates():
    cs = CumsumND([2, 2])
    cs.add([0, 1], 5)
    cs.add([0, 1], 6)
    cs.build()
    assert cs.query([0, 1], [1, 2]) == 11


def test_float_values():
    cs = CumsumND([3])
    cs.add([0], 0.5)
    cs.add([2], 0.25)
    cs.build()
    assert cs.query([0], [3]) == pytest.approx(0.75)


def test_wrong_dimension_raises():
    cs = CumsumND([2, 2])
    with pytest.raises(ValueError):
        cs.add([1], 1)
    with pytest.raises(ValueError):
        cs.query([0, 0, 0], [1, 1, 1])


def test_out_of_range_raises():
    cs = CumsumND([2, 2])
    with pytest.raises(IndexError):
        cs.add([2, 0], 1)
    with pytest.raises(IndexError):
        cs.query([0, 0], [3, 1])


def test_invalid_sizes_raise():
    with pytest.raises(ValueError):
        CumsumND([])
    with pytest.raises(ValueError):
        CumsumND([3, -1])


@st.composite
def grids(draw):
    h = draw(st.integers(1, 5))
    w = draw(st.integers(1, 5))
    points = draw(
        st.lists(
            st.tuples(st.integers(0, h - 1), st.integers(0, w - 1), st.integers(-50, 50)),
            max_size=20,
        )
    )
    y1 = draw(st.integers(0, h))
    y2 = draw(st.integers(y1, h))
    x1 = draw(st.integers(0, w))
    x2 = draw(st.integers(x1, w))
    return h, w, points, (y1, x1), (y2, x2)


@given(grids())
def test_two_dimensional_matches_direct_sum(case):
    h, w, points, starts, ends = case
    cs = CumsumND([h, w])
    for y, x, v in points:
        cs.add([y, x], v)
    cs.build()
    expected = sum(
        v for y, x, v in points if starts[0] <= y < ends[0] and starts[1] <= x < ends[1]
    )
    assert cs.query(starts, ends) == expected


@given(
    st.lists(
        st.tuples(st.integers(0, 2), st.integers(0, 3), st.integers(0, 1), st.integers(-9, 9)),
        max_size=15,
    )
)
def test_three_dimensional_total_and_cells(points):
    sizes = (3, 4, 2)
    cs = CumsumND(sizes)
    for a, b, c, v in points:
        cs.add((a, b, c), v)
    cs.build()
    assert cs.query((0, 0, 0), sizes) == sum(p[3] for p in points)
    for cell in itertools.product(*(range(s) for s in sizes)):
        upper = tuple(c + 1 for c in cell)
        assert cs.query(cell, upper) == sum(p[3] for p in points if p[:3] == cell)