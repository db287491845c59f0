"""Path-primitive sink used for contours.

``ShapePath`` only records primitives (circles and polylines). Turning them
into something drawable is left to ``to_svg_d`` (SVG path data through
svgpathtools) and ``to_geometry`` (a filled shapely region).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeAlias

import numpy as np
from shapely.geometry import Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from svgpathtools import Arc, Line, Path  # type: ignore[reportMissingTypeStubs]

from .types import NpPositions


class Direction(Enum):
    CW = "cw"
    CCW = "ccw"


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    direction: Direction = Direction.CCW


@dataclass
class SubPath:
    points: list[tuple[float, float]] = field(default_factory=list)
    closed: bool = False

    def copy(self) -> SubPath:
        return SubPath(list(self.points), self.closed)


Primitive: TypeAlias = Circle | SubPath


class PathSink(Protocol):
    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def close(self) -> None: ...

    def add_circle(
        self, x: float, y: float, radius: float, direction: Direction = ...
    ) -> None: ...

    def add_path(self, other: ShapePath) -> None: ...

    def rewind(self) -> None: ...


class ShapePath:
    def __init__(self) -> None:
        self._primitives: list[Primitive] = []
        self._current: SubPath | None = None

    def __len__(self) -> int:
        return len(self._primitives)

    def __repr__(self) -> str:
        return f"ShapePath({self._primitives!r})"

    @property
    def is_empty(self) -> bool:
        return not self._primitives

    @property
    def primitives(self) -> list[Primitive]:
        return list(self._primitives)

    @property
    def circles(self) -> list[Circle]:
        return [p for p in self._primitives if isinstance(p, Circle)]

    @property
    def subpaths(self) -> list[SubPath]:
        return [p for p in self._primitives if isinstance(p, SubPath)]

    def polygons(self) -> list[NpPositions]:
        """Closed subpaths as (N,2) vertex arrays."""
        return [
            np.asarray(sp.points, dtype=np.float64)
            for sp in self.subpaths
            if sp.closed
        ]

    def move_to(self, x: float, y: float) -> None:
        self._current = SubPath([(float(x), float(y))])
        self._primitives.append(self._current)

    def line_to(self, x: float, y: float) -> None:
        if self._current is None:
            self.move_to(x, y)
            return
        self._current.points.append((float(x), float(y)))

    def close(self) -> None:
        if self._current is not None:
            self._current.closed = True
            self._current = None

    def add_circle(
        self,
        x: float,
        y: float,
        radius: float,
        direction: Direction = Direction.CCW,
    ) -> None:
        self._primitives.append(Circle(float(x), float(y), float(radius), direction))
        self._current = None

    def add_path(self, other: ShapePath) -> None:
        for prim in other._primitives:
            self._primitives.append(prim.copy() if isinstance(prim, SubPath) else prim)
        self._current = None

    def rewind(self) -> None:
        self._primitives.clear()
        self._current = None

    def bounds(self) -> tuple[float, float, float, float] | None:
        """(minx, miny, maxx, maxy) of all primitives, None when empty."""
        xs: list[float] = []
        ys: list[float] = []
        for prim in self._primitives:
            if isinstance(prim, Circle):
                xs += [prim.x - prim.radius, prim.x + prim.radius]
                ys += [prim.y - prim.radius, prim.y + prim.radius]
            else:
                xs += [p[0] for p in prim.points]
                ys += [p[1] for p in prim.points]
        if not xs:
            return None
        return (min(xs), min(ys), max(xs), max(ys))

    def to_svg_path(self) -> Path:
        """svgpathtools Path; circles become two half arcs.

        Zero-radius circles and single-point subpaths carry no area and are
        left out.
        """
        segments: list[Arc | Line] = []
        for prim in self._primitives:
            if isinstance(prim, Circle):
                if prim.radius <= 0.0:
                    continue
                center = complex(prim.x, prim.y)
                radius = complex(prim.radius, prim.radius)
                start = center + prim.radius
                mid = center - prim.radius
                # y grows downwards, so a positive sweep is clockwise on screen
                sweep = prim.direction is Direction.CW
                segments.append(Arc(start, radius, 0.0, False, sweep, mid))
                segments.append(Arc(mid, radius, 0.0, False, sweep, start))
                continue
            pts = [complex(x, y) for x, y in prim.points]
            if len(pts) < 2:
                continue
            if prim.closed and pts[0] != pts[-1]:
                pts.append(pts[0])
            segments.extend(Line(a, b) for a, b in zip(pts[:-1], pts[1:]) if a != b)
        return Path(*segments)

    def to_svg_d(self) -> str:
        if self.is_empty:
            return ""
        path = self.to_svg_path()
        if len(path) == 0:
            return ""
        return path.d()

    def to_geometry(self, quad_segs: int = 16) -> BaseGeometry:
        """Filled region covered by the path (nonzero winding of its parts)."""
        parts: list[BaseGeometry] = []
        for prim in self._primitives:
            if isinstance(prim, Circle):
                if prim.radius > 0.0:
                    parts.append(
                        Point(prim.x, prim.y).buffer(prim.radius, quad_segs=quad_segs)
                    )
                continue
            if not prim.closed or len(prim.points) < 3:
                continue
            poly = Polygon(prim.points)
            if not poly.is_valid:
                poly = poly.buffer(0)
            if not poly.is_empty:
                parts.append(poly)
        return unary_union(parts)
