from __future__ import annotations

import math
from typing import Protocol

from ..utils import debug, debug_helpers
from .bias import direction_bias, gap_rejects
from .bounds import BoundingRect
from .config import ContourType, StrokeConfig
from .contour import make_contour_builder
from .path import Direction, ShapePath
from .resample import quad_resample
from .smoothing import InputSmoother, RawSample
from .spine import Spine, Vertex
from .transform import AffineMap


class Renderer(Protocol):
    def draw_path(self, path: ShapePath) -> None: ...


class PenStroke:
    """Variable-width stroke built incrementally from pointer samples.

    Usage mirrors a path API: ``move_to`` starts the stroke, ``line_to`` feeds
    samples, ``finish`` flushes the input averaging buffer. ``contour_path``
    holds the whole outline, ``last_segment`` what was added since it was
    last drawn or cleared. Fill both with a nonzero rule.

    Not thread safe: a stroke belongs to one thread of control.
    """

    def __init__(
        self,
        contour_type: ContourType = ContourType.CIRCLE_SEQUENCE,
        config: StrokeConfig | None = None,
    ) -> None:
        self._contour_type = contour_type
        self.config = config if config is not None else StrokeConfig()
        self._builder = make_contour_builder(contour_type)

        self.contour_path = ShapePath()
        self.last_segment = ShapePath()
        self.bounds = BoundingRect()
        self.spine = Spine()

        self._smoother = InputSmoother(self.config.input_buffer_size)
        self._prev: Vertex | None = None

    @property
    def contour_type(self) -> ContourType:
        return self._contour_type

    @property
    def min_gap_factor(self) -> float:
        return self.config.min_gap_factor

    @min_gap_factor.setter
    def min_gap_factor(self, value: float) -> None:
        self.config.min_gap_factor = value

    @property
    def direction_bias_vector(self) -> tuple[float, float]:
        return self.config.direction_bias_vector

    @direction_bias_vector.setter
    def direction_bias_vector(self, value: tuple[float, float]) -> None:
        self.config.direction_bias_vector = value

    @property
    def direction_bias_level(self) -> float:
        return self.config.direction_bias_level

    @direction_bias_level.setter
    def direction_bias_level(self, value: float) -> None:
        self.config.direction_bias_level = value

    @property
    def input_buffer_size(self) -> int:
        return self.config.input_buffer_size

    @input_buffer_size.setter
    def input_buffer_size(self, value: int) -> None:
        self.config.input_buffer_size = value
        self._smoother.capacity = self.config.input_buffer_size

    @property
    def is_empty(self) -> bool:
        return len(self.spine) == 0

    def move_to(self, x: float, y: float, radius: float) -> None:
        """Start a new stroke at (x, y).

        The start disk gets the thinnest possible biased radius,
        ``(1 - level) * radius``.
        """
        r = (1.0 - self.config.direction_bias_level) * radius
        vertex = Vertex(float(x), float(y), float(r))
        self._seed(vertex)
        self.spine.reset_to(vertex)
        debug.log(f"move_to x={vertex.x:.6g} y={vertex.y:.6g} r={vertex.radius:.6g}")

    def line_to(self, x: float, y: float, radius: float) -> None:
        """Feed one raw sample. Ignored until ``move_to`` has been called."""
        if self._prev is None:
            return
        self._smoother.capacity = self.config.input_buffer_size
        mean = self._smoother.push(RawSample(float(x), float(y), float(radius)))
        self._extend(mean.x, mean.y, mean.radius, live=True)

    def finish(self) -> None:
        """Flush samples still held by the input buffer.

        Only matters when ``input_buffer_size > 1``.
        """
        means = self._smoother.drain()
        for mean in means:
            self._extend(mean.x, mean.y, mean.radius, live=True)
        debug.log(f"finish: drained={len(means)} vertices={len(self.spine)}")

    def rewind(self) -> None:
        """Drop everything; the stroke behaves like a new one afterwards."""
        self.contour_path.rewind()
        self.last_segment.rewind()
        self.bounds.reset()
        self.spine.clear()
        self._smoother.reset()
        self._prev = None
        debug.log("rewind")

    def restart(self) -> None:
        """Go back to the first vertex, e.g. while previewing a straight line."""
        if self.is_empty:
            return
        first = self.spine[0]
        self.rewind()
        self._seed(first)
        self.spine.reset_to(first)
        debug.log(f"restart at x={first.x:.6g} y={first.y:.6g}")

    def transform(self, matrix: AffineMap) -> None:
        """Map vertex positions through ``matrix``. Radii are kept as is."""
        if self.is_empty:
            return
        V = self.spine.as_array()
        V[:, :2] = matrix.map_points(self.spine.positions())
        self.spine.replace_array(V)
        debug.log(f"transform: vertices={len(self.spine)}")
        self._rebuild()

    def quad_smooth(self, level: int, upscale_factor: int = 1) -> None:
        """Smooth the spine with quadratic arcs; higher level smooths more.

        The spine ends up with about ``upscale_factor`` times more vertices.
        An upscale above 1 is useful after the path was enlarged.
        """
        if level <= 0 or len(self.spine) < 2:
            return
        if upscale_factor < 1:
            debug_helpers.log_once(
                "quad_smooth.upscale", f"upscale_factor={upscale_factor} read as 1"
            )
        V = quad_resample(self.spine.as_array(), int(level), int(upscale_factor))
        debug_helpers.log_array("quad_smooth spine", V)
        self.spine.replace_array(V)
        self._rebuild()

    def draw(self, renderer: Renderer) -> None:
        renderer.draw_path(self.contour_path)

    def draw_last_segment(self, renderer: Renderer) -> None:
        """Draw only what was added since the previous call, then forget it."""
        renderer.draw_path(self.last_segment)
        self.last_segment.rewind()

    def clear_last_segment(self) -> None:
        self.last_segment.rewind()

    def _seed(self, vertex: Vertex) -> None:
        self.contour_path.rewind()
        self.contour_path.add_circle(vertex.x, vertex.y, vertex.radius, Direction.CCW)
        self.last_segment.rewind()
        self.last_segment.add_circle(vertex.x, vertex.y, vertex.radius, Direction.CCW)
        self.bounds.set_around(vertex.x, vertex.y, vertex.radius)
        self._prev = vertex

    def _extend(self, x: float, y: float, radius: float, *, live: bool) -> bool:
        """Accept path shared by live capture and replay.

        Live samples get the direction bias, go through the configured gap
        filter and are recorded in the spine. Replayed vertices already carry
        their final radius and only skip degenerate steps.
        """
        prev = self._prev
        if prev is None:
            return False
        dx = x - prev.x
        dy = y - prev.y
        norm = math.hypot(dx, dy)
        if norm == 0.0:
            return False

        cfg = self.config
        if live:
            radius = radius * direction_bias(
                dx / norm,
                dy / norm,
                cfg.direction_bias_vector,
                cfg.direction_bias_level,
            )
            gap_factor = cfg.min_gap_factor
        else:
            gap_factor = 0.0
        if gap_rejects(norm, radius, prev.radius, gap_factor, cfg.min_gap_offset):
            return False

        vertex = Vertex(float(x), float(y), float(radius))
        if live:
            self.spine.append(vertex)
        self.bounds.extend(vertex.x, vertex.y, vertex.radius)
        self._builder.extend(prev, vertex, self.contour_path, self.last_segment)
        self._prev = vertex
        return True

    def _rebuild(self) -> None:
        """Regenerate contour, last segment and bounds from the spine."""
        first, *rest = self.spine
        self._seed(first)
        accepted = sum(self._extend(v.x, v.y, v.radius, live=False) for v in rest)
        debug.log(f"rebuild: vertices={len(self.spine)} steps={accepted}")
