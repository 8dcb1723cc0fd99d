"""Grid index helpers.

Conversions between flattened grid indices and (column, row) coordinates,
plus NumPy views of an identicon's grid for inspection and previews.
"""

from typing import Tuple

import numpy as np
import numpy.typing as npt

from avatarme.config import GRID_WIDTH
from avatarme.identicon import Identicon

UInt8Array = npt.NDArray[np.uint8]
BoolArray = npt.NDArray[np.bool_]


def index_to_position(index: int, grid_width: int = GRID_WIDTH) -> Tuple[int, int]:
    """Return ``(column, row)`` of a flattened grid index."""
    return index % grid_width, index // grid_width


def grid_matrix(identicon: Identicon) -> UInt8Array:
    """Return the grid as a ``rows × GRID_WIDTH`` array of byte values."""
    return np.array(list(identicon.grid), dtype=np.uint8).reshape(-1, GRID_WIDTH)


def cell_mask(identicon: Identicon) -> BoolArray:
    """Return a ``rows × GRID_WIDTH`` mask, True where a cell is retained."""
    mask: BoolArray = np.zeros(len(identicon.grid), dtype=np.bool_)
    for cell in identicon.cells:
        mask[cell.index] = True
    return mask.reshape(-1, GRID_WIDTH)
