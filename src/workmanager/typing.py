"""
Type aliases for Work Manager.

Roster state is stored in NumPy arrays indexed by worker position (rows)
and by catalog order (columns), so the aliases below are the only array
types the package deals with.
"""

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

Float1D: TypeAlias = NDArray[np.float64]
Bool1D: TypeAlias = NDArray[np.bool_]
Idx1D: TypeAlias = NDArray[np.intp]

Float2D: TypeAlias = NDArray[np.float64]
Int2D: TypeAlias = NDArray[np.int64]
Bool2D: TypeAlias = NDArray[np.bool_]

__all__ = [
    "Float1D",
    "Bool1D",
    "Idx1D",
    "Float2D",
    "Int2D",
    "Bool2D",
]
