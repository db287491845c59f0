from __future__ import annotations


def direction_bias(
    ux: float,
    uy: float,
    bias_vector: tuple[float, float],
    level: float,
) -> float:
    """Radius scale factor for a unit movement direction (ux, uy).

    1.0 when moving along ``bias_vector``, ``1 - level`` when moving against
    it. ``bias_vector`` must be unit length.
    """
    dot = ux * bias_vector[0] + uy * bias_vector[1]
    return 0.5 * (dot * level + 2.0 - level)


def gap_rejects(
    distance: float,
    radius: float,
    prev_radius: float,
    gap_factor: float,
    gap_offset: float,
) -> bool:
    """True when a candidate vertex is too close to the previous one.

    Both the travelled distance and the radius growth are measured against
    ``gap_factor * radius + gap_offset``.
    """
    return max(distance, radius - prev_radius) < gap_factor * radius + gap_offset
