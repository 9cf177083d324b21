import pytest

from tbalab.contest_points import GridPoint


def coords(point):
    return (point.x, point.y)


def test_parse_and_str_round_trip():
    assert str(GridPoint.parse("3 -4")) == "3 -4"


@pytest.mark.parametrize("text", ["1", "1 2 3", "a b"])
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        GridPoint.parse(text)


def test_add():
    assert coords(GridPoint(1, 2) + GridPoint(3, -5)) == (1 + 3, 2 - 5)


def test_mul_scalar():
    assert coords(GridPoint(2, -3) * 4) == (2 * 4, -3 * 4)


def test_mul_point():
    assert coords(GridPoint(2, -3) * GridPoint(5, 6)) == (2 * 5, -3 * 6)


def test_mul_unsupported_type():
    with pytest.raises(TypeError):
        GridPoint(1, 2) * "x"


def test_clear_in_place():
    point = GridPoint(7, -8)
    result = point.clear()
    assert result is point
    assert coords(point) == (0, 0)


def test_flips_leave_original():
    point = GridPoint(3, 4)
    assert coords(point.flip_x()) == (-3, 4)
    assert coords(point.flip_y()) == (3, -4)
    assert coords(point) == (3, 4)


def test_equality_by_norm():
    assert GridPoint(1, 2) == GridPoint(-3, 0)
    assert not (GridPoint(1, 2) != GridPoint(0, -3))
    assert GridPoint(1, 2) != GridPoint(1, 3)


@pytest.mark.parametrize(
    "a, b",
    [((1, 2), (3, 4)), ((-5, 0), (1, 1)), ((2, 2), (-4, 0)), ((0, 0), (0, 0))],
)
def test_ordering_consistency(a, b):
    p, q = GridPoint(*a), GridPoint(*b)
    assert (p < q) == (q > p)
    assert (p <= q) == (not p > q)
    assert (p >= q) == (not p < q)
    assert (p == q) == (p <= q and p >= q)
    assert (p != q) == (not p == q)


def test_strict_order():
    assert GridPoint(1, 1) < GridPoint(0, -3)
    assert GridPoint(0, -3) > GridPoint(1, 1)


def test_touches_axis():
    assert GridPoint(0, 5).touches_axis(GridPoint(1, 1)) is True
    assert GridPoint(1, 1).touches_axis(GridPoint(2, 0)) is True
    assert GridPoint(1, 1).touches_axis(GridPoint(2, 2)) is False


def test_shares_axis():
    assert GridPoint(0, 5).shares_axis(GridPoint(0, -2)) is True
    assert GridPoint(3, 0).shares_axis(GridPoint(-1, 0)) is True
    assert GridPoint(0, 5).shares_axis(GridPoint(1, 0)) is False


def test_same_quadrant():
    assert GridPoint(1, 2).same_quadrant(GridPoint(3, 4)) is True
    assert GridPoint(-1, -2).same_quadrant(GridPoint(-3, -4)) is True
    assert GridPoint(1, 2).same_quadrant(GridPoint(-3, 4)) is False
    assert GridPoint(1, 2).same_quadrant(GridPoint(3, -4)) is False
    assert GridPoint(1, 0).same_quadrant(GridPoint(3, 4)) is False


def test_triangle_area_of_same_point_is_zero():
    assert GridPoint(3, 4).triangle_area(GridPoint(3, 4)) == 0.0


def test_triangle_area_value_and_symmetry():
    p, q = GridPoint(2, 0), GridPoint(0, 3)
    assert p.triangle_area(q) == 3.0
    assert q.triangle_area(p) == p.triangle_area(q)


def test_triangle_area_collinear():
    assert GridPoint(1, 1).triangle_area(GridPoint(2, 2)) == 0.0