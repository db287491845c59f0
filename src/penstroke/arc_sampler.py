from __future__ import annotations

from typing import Protocol

from svgpathtools import Line, QuadraticBezier  # type: ignore[reportMissingTypeStubs]


class ArcSampler(Protocol):
    def total_length(self) -> float: ...

    def position_at_distance(self, distance: float) -> tuple[float, float]: ...


class QuadArcSampler:
    """Arc-length parameterized line or quadratic Bezier.

    Built from two points (a line) or three (start, control, end). A control
    point in line with the endpoints stays a quadratic: when it lies beyond
    an endpoint the curve overshoots and comes back, and that excursion
    counts towards the length.
    """

    def __init__(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        control: tuple[float, float] | None = None,
    ) -> None:
        p0 = complex(start[0], start[1])
        p2 = complex(end[0], end[1])
        self._segment: Line | QuadraticBezier
        if control is None:
            self._segment = Line(p0, p2)
        else:
            self._segment = QuadraticBezier(p0, complex(control[0], control[1]), p2)
        self._length = float(self._segment.length())

    @property
    def is_line(self) -> bool:
        return isinstance(self._segment, Line)

    def total_length(self) -> float:
        return self._length

    def position_at_distance(self, distance: float) -> tuple[float, float]:
        seg = self._segment
        if self._length <= 0.0 or distance <= 0.0:
            z = seg.start
        elif distance >= self._length:
            z = seg.end
        elif isinstance(seg, Line):
            z = seg.point(distance / self._length)
        else:
            z = seg.point(seg.ilength(distance))
        return (float(z.real), float(z.imag))

