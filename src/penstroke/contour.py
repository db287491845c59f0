"""Outline construction strategies.

Each strategy turns one accepted step (previous vertex -> new vertex) into
primitives and appends them to the cumulative contour and to the last
segment.
"""

from __future__ import annotations

import math
from typing import Protocol

from .config import MAX_GAP_FACTOR, ContourType
from .path import Direction, ShapePath
from .spine import Vertex


class ContourBuilder(Protocol):
    def extend(
        self,
        prev: Vertex,
        cur: Vertex,
        contour: ShapePath,
        last_segment: ShapePath,
    ) -> None: ...


def stamp_count(
    distance: float,
    radius_a: float,
    radius_b: float,
    max_gap_factor: float,
) -> int:
    """Number of disks needed so that neighbours overlap enough.

    Spacing follows the thinner end. A zero-radius end (a fully biased start
    disk) spaces by the other one, so the taper between them is still filled.
    """
    smallest = min(radius_a, radius_b)
    if smallest <= 0.0:
        smallest = max(radius_a, radius_b)
    if smallest <= 0.0:
        return 1
    return int(distance / (max_gap_factor * smallest)) + 1


def tangent_quad(prev: Vertex, cur: Vertex) -> list[tuple[float, float]] | None:
    """
    prev, cur: circles as (x, y, radius)
    Returns the 4 corners of the outer-tangent quadrilateral as
    (prev left, prev right, cur right, cur left), or None when one circle lies
    inside the other, tangency included
    """
    dx = cur.x - prev.x
    dy = cur.y - prev.y
    norm = math.hypot(dx, dy)
    dr = cur.radius - prev.radius
    if not norm > abs(dr):
        return None
    dx /= norm
    dy /= norm
    cos_t = -dr / norm
    sin_t = math.sqrt(max(0.0, 1.0 - cos_t * cos_t))

    left_x = dx * cos_t + dy * sin_t
    left_y = -dx * sin_t + dy * cos_t
    right_x = dx * cos_t - dy * sin_t
    right_y = dx * sin_t + dy * cos_t
    return [
        (prev.x + left_x * prev.radius, prev.y + left_y * prev.radius),
        (prev.x + right_x * prev.radius, prev.y + right_y * prev.radius),
        (cur.x + right_x * cur.radius, cur.y + right_y * cur.radius),
        (cur.x + left_x * cur.radius, cur.y + left_y * cur.radius),
    ]


class CircleSequenceBuilder:
    """Dense train of overlapping disks with linearly interpolated radius."""

    def __init__(self, max_gap_factor: float = MAX_GAP_FACTOR) -> None:
        self.max_gap_factor = max_gap_factor

    def extend(
        self,
        prev: Vertex,
        cur: Vertex,
        contour: ShapePath,
        last_segment: ShapePath,
    ) -> None:
        distance = math.hypot(cur.x - prev.x, cur.y - prev.y)
        n = stamp_count(distance, prev.radius, cur.radius, self.max_gap_factor)
        for i in range(1, n + 1):
            x = prev.x + (cur.x - prev.x) * i / n
            y = prev.y + (cur.y - prev.y) * i / n
            radius = prev.radius + (cur.radius - prev.radius) * i / n
            last_segment.add_circle(x, y, radius, Direction.CCW)
            contour.add_circle(x, y, radius, Direction.CCW)


class TangentJoinBuilder:
    """Tangent quadrilateral between consecutive circles, capped by a disk."""

    def extend(
        self,
        prev: Vertex,
        cur: Vertex,
        contour: ShapePath,
        last_segment: ShapePath,
    ) -> None:
        step = ShapePath()
        corners = tangent_quad(prev, cur)
        if corners is not None:
            step.move_to(*corners[0])
            for corner in corners[1:]:
                step.line_to(*corner)
            step.close()
        step.add_circle(cur.x, cur.y, cur.radius, Direction.CCW)
        last_segment.add_path(step)
        contour.add_path(step)


def make_contour_builder(contour_type: ContourType) -> ContourBuilder:
    if contour_type is ContourType.CIRCLE_SEQUENCE:
        return CircleSequenceBuilder()
    if contour_type is ContourType.JOIN_WITH_TANGENTS:
        return TangentJoinBuilder()
    raise ValueError(f"unknown contour type: {contour_type!r}")
