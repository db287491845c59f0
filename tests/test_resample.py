import numpy as np
import pytest

from src.penstroke.arc_sampler import QuadArcSampler
from src.penstroke.resample import quad_resample, subdivide


def _straight(n: int = 5, step: float = 10.0, radius: float = 2.0) -> np.ndarray:
    xs = np.arange(n, dtype=np.float64) * step
    return np.stack([xs, np.zeros_like(xs), np.full_like(xs, radius)], axis=1)


def test_subdivide_excludes_start_and_interpolates_radius() -> None:
    s = QuadArcSampler((0.0, 0.0), (8.0, 0.0))
    pts = subdivide(s, 4, 1.0, 5.0)
    np.testing.assert_allclose(
        np.array(pts),
        np.array([[2.0, 0.0, 2.0], [4.0, 0.0, 3.0], [6.0, 0.0, 4.0], [8.0, 0.0, 5.0]]),
    )


def test_quad_resample_straight_line() -> None:
    out = quad_resample(_straight(), 2)
    assert out.shape == (7, 3)
    np.testing.assert_allclose(out[:, 0], [0.0, 5.0, 10.0, 20.0, 30.0, 35.0, 40.0])
    np.testing.assert_allclose(out[:, 1], 0.0, atol=1e-12)
    np.testing.assert_allclose(out[:, 2], 2.0)


def test_quad_resample_upscale_multiplies_vertices() -> None:
    out = quad_resample(_straight(), 2, upscale_factor=2)
    assert out.shape == (13, 3)
    assert bool(np.all(np.diff(out[:, 0]) > 0))


def test_quad_resample_keeps_both_ends() -> None:
    V = np.array(
        [[0.0, 0.0, 1.0], [10.0, 3.0, 2.0], [14.0, 12.0, 3.0], [5.0, 20.0, 2.5]]
    )
    for level in (1, 2, 3, 7):
        out = quad_resample(V, level)
        np.testing.assert_allclose(out[0], V[0])
        np.testing.assert_allclose(out[-1], V[-1], atol=1e-6)


def test_quad_resample_rounds_corners() -> None:
    V = np.array([[0.0, 0.0, 1.0], [10.0, 0.0, 1.0], [10.0, 10.0, 1.0]])
    out = quad_resample(V, 1)
    np.testing.assert_allclose(
        out[:, :2],
        np.array([[0.0, 0.0], [5.0, 0.0], [10.0, 5.0], [10.0, 10.0]]),
        atol=1e-6,
    )


@pytest.mark.parametrize("level", [0, -3])
def test_quad_resample_non_positive_level_is_identity(level: int) -> None:
    V = _straight()
    out = quad_resample(V, level)
    np.testing.assert_array_equal(out, V)
    assert out is not V


def test_quad_resample_single_vertex_is_identity() -> None:
    V = np.array([[1.0, 2.0, 3.0]])
    np.testing.assert_array_equal(quad_resample(V, 3), V)


def test_quad_resample_uses_sampler_factory() -> None:
    calls: list[tuple[tuple[float, float], ...]] = []

    def factory(start, control, end):
        calls.append((start, control, end))
        return QuadArcSampler(start, end)

    quad_resample(_straight(), 2, sampler_factory=factory)
    assert len(calls) == 3
    assert calls[0] == ((0.0, 0.0), (0.0, 0.0), (10.0, 0.0))
    assert calls[-1][2] == (40.0, 0.0)


def test_quad_resample_keeps_tip_of_reversing_stroke() -> None:
    xs = np.array([0.0, 10.0, 20.0, 10.0, 0.0])
    V = np.stack([xs, np.zeros_like(xs), np.full_like(xs, 2.0)], axis=1)
    out = quad_resample(V, 1, upscale_factor=2)
    assert out.shape == (11, 3)
    assert float(out[:, 0].max()) > 17.0
    assert float(out[:, 0].max()) == pytest.approx(17.5, abs=1e-6)
    np.testing.assert_allclose(out[-1], V[-1], atol=1e-6)
