from __future__ import annotations

from typing import TypeAlias

import numpy as np
from jaxtyping import Int

# Integer vertex sequence, one (x, y) row per vertex.
Vertices: TypeAlias = Int[np.ndarray, "N 2"]
Point: TypeAlias = Int[np.ndarray, "2"]
# One (p1, cp1, cp2, p2) row per consecutive vertex pair.
CurveDescription: TypeAlias = Int[np.ndarray, "S 4 2"]
