from __future__ import annotations

import numpy as np
from beartype import beartype
from beartype.typing import Callable
from jaxtyping import Float, jaxtyped

from .arc_sampler import ArcSampler, QuadArcSampler
from .types import NpVertices

SamplerFactory = Callable[
    [tuple[float, float], tuple[float, float], tuple[float, float]], ArcSampler
]


def _quad_sampler(
    start: tuple[float, float],
    control: tuple[float, float],
    end: tuple[float, float],
) -> ArcSampler:
    return QuadArcSampler(start, end, control=control)


def subdivide(
    sampler: ArcSampler,
    n: int,
    prev_radius: float,
    next_radius: float,
) -> list[tuple[float, float, float]]:
    """
    sampler: arc to walk
    n: number of points, evenly spaced by arc length, arc start excluded
    prev_radius, next_radius: radius at the arc start and end
    Returns n (x, y, radius) tuples with linearly interpolated radius
    """
    length = sampler.total_length()
    out: list[tuple[float, float, float]] = []
    for j in range(1, n + 1):
        x, y = sampler.position_at_distance(j * length / n)
        radius = prev_radius + (next_radius - prev_radius) * j / n
        out.append((x, y, radius))
    return out


@jaxtyped(typechecker=beartype)
def quad_resample(
    vertices: NpVertices,
    level: int,
    upscale_factor: int = 1,
    sampler_factory: SamplerFactory = _quad_sampler,
) -> Float[np.ndarray, "M 3"]:
    """
    vertices: (N,3) rows of [x, y, radius]
    level: stride between control vertices; arcs run from one stride midpoint
        to the next with vertices[i] as control point
    upscale_factor: points per arc is upscale_factor * level (values below 1
        read as 1)
    sampler_factory: (start, control, end) -> ArcSampler
    Returns (M,3) resampled by arc length. The first vertex is kept as is and
    the final stride ends on the last one. level <= 0 or N < 2 returns a copy.
    """
    V = np.asarray(vertices, dtype=np.float64)
    N = V.shape[0]
    if level <= 0 or N < 2:
        return V.copy()
    n = max(1, upscale_factor) * level

    prev = V[0]
    out: list[tuple[float, float, float]] = [(prev[0], prev[1], prev[2])]
    for i in range(0, N, level):
        if i + level < N:
            cur = 0.5 * (V[i] + V[i + level])
        else:
            cur = V[N - 1]
        anchor = V[i]
        sampler = sampler_factory(
            (float(prev[0]), float(prev[1])),
            (float(anchor[0]), float(anchor[1])),
            (float(cur[0]), float(cur[1])),
        )
        out.extend(subdivide(sampler, n, float(prev[2]), float(cur[2])))
        prev = cur
    return np.asarray(out, dtype=np.float64)
