from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar

# Only used by the circle-sequence strategy. Larger values make strokes look
# like a string of beads.
MAX_GAP_FACTOR = 0.15

DEFAULT_BIAS_VECTOR = (1.0 / math.sqrt(2.0), -1.0 / math.sqrt(2.0))
FALLBACK_BIAS_VECTOR = (1.0, 0.0)

MIN_BUFFER_SIZE = 1
MAX_BUFFER_SIZE = 100


class ContourType(Enum):
    """Outline construction strategy, fixed for the lifetime of a stroke."""

    CIRCLE_SEQUENCE = "circles"
    JOIN_WITH_TANGENTS = "tangents"


def normalize_bias_vector(vector: tuple[float, float]) -> tuple[float, float]:
    """Rescale to unit length. A zero vector resolves to the x axis."""
    x, y = float(vector[0]), float(vector[1])
    norm = math.hypot(x, y)
    if norm == 0.0:
        return FALLBACK_BIAS_VECTOR
    return (x / norm, y / norm)


def clamp_bias_level(level: float) -> float:
    return min(max(float(level), 0.0), 1.0)


def clamp_buffer_size(size: int) -> int:
    return min(max(int(size), MIN_BUFFER_SIZE), MAX_BUFFER_SIZE)


_RESOLVERS: dict[str, Callable[[Any], Any]] = {
    "direction_bias_vector": normalize_bias_vector,
    "direction_bias_level": clamp_bias_level,
    "input_buffer_size": clamp_buffer_size,
    "min_gap_factor": float,
    "min_gap_offset": float,
}


@dataclass
class StrokeConfig:
    """Tunables of a pen stroke.

    Every assignment (including the ones made by ``__init__``) goes through
    the matching resolver, so the stored value is always the clamped or
    normalized one.

    - min_gap_factor: minimum distance between two spine vertices, relative
      to the radius.
    - min_gap_offset: absolute part of that distance, in path units.
    - direction_bias_vector: axis along which strokes are thickest.
    - direction_bias_level: how much thinner strokes get when moving against
      the bias axis. Independent from pressure.
    - input_buffer_size: number of raw samples averaged into one. Values
      below 5 add little lag.
    """

    min_gap_factor: float = 0.1
    min_gap_offset: float = 0.1
    direction_bias_vector: tuple[float, float] = DEFAULT_BIAS_VECTOR
    direction_bias_level: float = 0.7
    input_buffer_size: int = 3

    max_gap_factor: ClassVar[float] = MAX_GAP_FACTOR

    def __setattr__(self, name: str, value: Any) -> None:
        resolver = _RESOLVERS.get(name)
        if resolver is not None:
            value = resolver(value)
        object.__setattr__(self, name, value)
