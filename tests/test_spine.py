import numpy as np
import pytest

from src.penstroke.bounds import MARGIN, BoundingRect
from src.penstroke.spine import Spine, Vertex


def test_empty_spine_array_shape() -> None:
    s = Spine()
    assert len(s) == 0
    assert s.as_array().shape == (0, 3)
    assert s.positions().shape == (0, 2)


def test_spine_array_views() -> None:
    s = Spine([(0.0, 1.0, 2.0)])
    s.append(Vertex(3.0, 4.0, 5.0))
    np.testing.assert_allclose(s.as_array(), [[0.0, 1.0, 2.0], [3.0, 4.0, 5.0]])
    np.testing.assert_allclose(s.positions(), [[0.0, 1.0], [3.0, 4.0]])
    assert s[-1] == Vertex(3.0, 4.0, 5.0)
    assert s[:1] == [Vertex(0.0, 1.0, 2.0)]


def test_spine_replace_and_reset() -> None:
    s = Spine()
    s.replace_array(np.array([[1.0, 1.0, 1.0], [2.0, 2.0, 2.0]]))
    assert list(s) == [Vertex(1.0, 1.0, 1.0), Vertex(2.0, 2.0, 2.0)]
    s.reset_to(Vertex(0.0, 0.0, 1.0))
    assert len(s) == 1
    s.clear()
    assert len(s) == 0


def test_bounding_rect_margin_and_growth() -> None:
    b = BoundingRect()
    assert b.as_tuple() == (0.0, 0.0, 0.0, 0.0)
    b.set_around(10.0, 5.0, 2.0)
    pad = 2.0 + MARGIN
    assert b.as_tuple() == pytest.approx((10.0 - pad, 5.0 - pad, 10.0 + pad, 5.0 + pad))
    b.extend(0.0, 20.0, 1.0)
    assert b.as_tuple() == pytest.approx((-2.0, 2.0, 13.0, 22.0))
    assert b.as_viewbox() == pytest.approx((-2.0, 2.0, 15.0, 20.0))
    b.reset()
    assert b.width == 0.0
    assert b.height == 0.0
