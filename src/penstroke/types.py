from __future__ import annotations

from typing import TypeAlias

import numpy as np
from jaxtyping import Float

NpPositions: TypeAlias = Float[np.ndarray, "N 2"]
NpVertices: TypeAlias = Float[np.ndarray, "N 3"]
NpAffine: TypeAlias = Float[np.ndarray, "3 3"]
