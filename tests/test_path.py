import numpy as np
import pytest
from shapely.geometry import Point

from src.penstroke.path import Circle, Direction, ShapePath


def _square(path: ShapePath, size: float = 10.0) -> None:
    path.move_to(0.0, 0.0)
    path.line_to(size, 0.0)
    path.line_to(size, size)
    path.line_to(0.0, size)
    path.close()


def test_records_circles_and_polygons() -> None:
    p = ShapePath()
    assert p.is_empty
    p.add_circle(1.0, 2.0, 3.0)
    _square(p)
    assert len(p) == 2
    assert p.circles == [Circle(1.0, 2.0, 3.0, Direction.CCW)]
    polys = p.polygons()
    assert len(polys) == 1
    np.testing.assert_allclose(
        polys[0], np.array([[0.0, 0.0], [10.0, 0.0], [10.0, 10.0], [0.0, 10.0]])
    )


def test_add_path_copies_primitives() -> None:
    a = ShapePath()
    _square(a)
    a.add_circle(0.0, 0.0, 1.0)
    b = ShapePath()
    b.add_path(a)
    a.rewind()
    assert a.is_empty
    assert len(b) == 2
    assert b.subpaths[0].closed
    assert len(b.subpaths[0].points) == 4


def test_bounds_cover_circles_and_points() -> None:
    p = ShapePath()
    assert p.bounds() is None
    p.add_circle(0.0, 0.0, 2.0)
    p.move_to(5.0, -7.0)
    p.line_to(6.0, 1.0)
    assert p.bounds() == pytest.approx((-2.0, -7.0, 6.0, 2.0))


def test_svg_d_has_two_arcs_per_circle() -> None:
    p = ShapePath()
    p.add_circle(0.0, 0.0, 5.0)
    p.add_circle(20.0, 0.0, 5.0, Direction.CW)
    d = p.to_svg_d()
    assert d.startswith("M")
    assert d.count("A") == 4


def test_svg_d_skips_zero_radius_circles() -> None:
    p = ShapePath()
    p.add_circle(0.0, 0.0, 0.0)
    assert p.to_svg_d() == ""
    _square(p)
    d = p.to_svg_d()
    assert "A" not in d
    assert d.count("L") == 4


def test_geometry_union_area() -> None:
    p = ShapePath()
    p.add_circle(0.0, 0.0, 10.0)
    geom = p.to_geometry()
    assert geom.area == pytest.approx(np.pi * 100.0, rel=1e-2)

    _square(p, size=30.0)
    geom = p.to_geometry()
    assert geom.contains(Point(25.0, 25.0))
    assert geom.contains(Point(-5.0, -5.0))
    assert not geom.contains(Point(-9.0, 25.0))


def test_open_subpaths_have_no_area() -> None:
    p = ShapePath()
    p.move_to(0.0, 0.0)
    p.line_to(10.0, 0.0)
    p.line_to(10.0, 10.0)
    assert p.to_geometry().is_empty
