from __future__ import annotations

import math
from typing import Protocol

import numpy as np
from beartype import beartype
from jaxtyping import jaxtyped

from .types import NpAffine, NpPositions


class AffineMap(Protocol):
    def map_points(self, points: NpPositions) -> NpPositions: ...


@jaxtyped(typechecker=beartype)
def apply_affine(matrix: NpAffine, points: NpPositions) -> NpPositions:
    """
    matrix: (3,3) homogeneous affine, last row [0, 0, 1]
    points: (N,2)
    Returns (N,2) mapped points
    """
    return points @ matrix[:2, :2].T + matrix[:2, 2]


class Matrix2D:
    """2D affine map in SVG order: x' = a*x + c*y + e, y' = b*x + d*y + f."""

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        e: float = 0.0,
        f: float = 0.0,
    ) -> None:
        self.matrix: NpAffine = np.array(
            [[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64
        )

    def __repr__(self) -> str:
        a, c, e = self.matrix[0]
        b, d, f = self.matrix[1]
        return f"Matrix2D({a:g}, {b:g}, {c:g}, {d:g}, {e:g}, {f:g})"

    @classmethod
    def from_array(cls, matrix: np.ndarray) -> Matrix2D:
        M = np.asarray(matrix, dtype=np.float64)
        if M.shape != (3, 3):
            raise ValueError("matrix must have shape (3,3)")
        out = cls()
        out.matrix = M.copy()
        return out

    @classmethod
    def identity(cls) -> Matrix2D:
        return cls()

    @classmethod
    def translation(cls, tx: float, ty: float) -> Matrix2D:
        return cls(e=tx, f=ty)

    @classmethod
    def scaling(cls, sx: float, sy: float | None = None) -> Matrix2D:
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotation(cls, degrees: float, cx: float = 0.0, cy: float = 0.0) -> Matrix2D:
        """Rotation about (cx, cy). Positive angles turn +x towards +y."""
        th = math.radians(degrees)
        cos_t, sin_t = math.cos(th), math.sin(th)
        rot = cls(a=cos_t, b=sin_t, c=-sin_t, d=cos_t)
        if cx == 0.0 and cy == 0.0:
            return rot
        return cls.translation(-cx, -cy).then(rot).then(cls.translation(cx, cy))

    def then(self, other: Matrix2D) -> Matrix2D:
        """Map that applies ``self`` first, then ``other``."""
        return Matrix2D.from_array(other.matrix @ self.matrix)

    def map_points(self, points: NpPositions) -> NpPositions:
        P = np.asarray(points, dtype=np.float64)
        if P.ndim != 2 or P.shape[1] != 2:
            raise ValueError("points must have shape (N,2)")
        return apply_affine(self.matrix, P)
