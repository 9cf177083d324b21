import math

import pytest

from tbalab.geometry import Circle, Line, Point, Shape, main


def test_shape_is_abstract():
    with pytest.raises(TypeError):
        Shape()


def test_point_has_no_length_or_area():
    point = Point(1, 2)
    assert point.length() == 0
    assert point.area() == 0


def test_point_str():
    assert str(Point(1, 2)) == "(1, 2)"
    assert str(Point()) == "(0, 0)"


def test_line_length_is_symmetric():
    a, b = Point(1, 2), Point(2, 4)
    assert Line(a, b).length() == pytest.approx(Line(b, a).length())
    assert Line(a, a).length() == 0


def test_line_length_three_four_five():
    assert Line(Point(0, 0), Point(3, 4)).length() == pytest.approx(5.0)


def test_line_area_is_zero():
    assert Line(Point(0, 0), Point(3, 4)).area() == 0


def test_line_copies_points():
    start = Point(1, 2)
    line = Line(start, Point(2, 4))
    start.x = 100
    assert line.start.x == 1


def test_line_str():
    assert str(Line(Point(1, 2), Point(2, 4))) == "(1, 2) – (2, 4)"


def test_unit_circle_area_is_pi():
    assert Circle(Point(1, 2), 1).area() == pytest.approx(math.pi)


@pytest.mark.parametrize("radius", [0.5, 1.0, 3.0])
def test_circle_length_and_area_relation(radius):
    circle = Circle(radius=radius)
    assert circle.length() == pytest.approx(2 * circle.area() / radius)


def test_circle_str():
    assert str(Circle(Point(1, 2), 1)) == "center (1, 2), radius 1"


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert lines[:3] == ["(0, 0)", "(0, 0) – (0, 0)", "center (0, 0), radius 0"]
    assert lines[3] == ""
    assert "center (1, 2), radius 1" in lines