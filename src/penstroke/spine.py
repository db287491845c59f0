from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple, overload

import numpy as np

from .types import NpPositions, NpVertices


class Vertex(NamedTuple):
    """Accepted stroke control point. ``radius`` is already direction-biased."""

    x: float
    y: float
    radius: float


class Spine:
    """Ordered vertices of a stroke: centerline plus radius."""

    def __init__(self, vertices: Iterable[Vertex] = ()) -> None:
        self._vertices: list[Vertex] = [Vertex(*v) for v in vertices]

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    @overload
    def __getitem__(self, index: int) -> Vertex: ...

    @overload
    def __getitem__(self, index: slice) -> list[Vertex]: ...

    def __getitem__(self, index: int | slice) -> Vertex | list[Vertex]:
        return self._vertices[index]

    def __repr__(self) -> str:
        return f"Spine({self._vertices!r})"

    def append(self, vertex: Vertex) -> None:
        self._vertices.append(vertex)

    def reset_to(self, vertex: Vertex) -> None:
        self._vertices = [vertex]

    def replace_array(self, arr: NpVertices) -> None:
        self._vertices = [
            Vertex(float(x), float(y), float(r)) for x, y, r in np.asarray(arr)
        ]

    def clear(self) -> None:
        self._vertices.clear()

    def as_array(self) -> NpVertices:
        """(N,3) float64 array of ``[x, y, radius]`` rows."""
        if not self._vertices:
            return np.zeros((0, 3), dtype=np.float64)
        return np.asarray(self._vertices, dtype=np.float64)

    def positions(self) -> NpPositions:
        return self.as_array()[:, :2]
