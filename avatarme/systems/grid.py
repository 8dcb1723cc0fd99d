"""Grid building stage.

A 3-byte window slides over the digest one byte at a time, starting at
offsets 0, 1, 2, ... for as long as ``offset + 3 <= len(digest) - 1`` holds.
Each window ``[a, b, c]`` is mirrored into a 5-byte row ``[a, b, c, b, a]``.
Only the first ``GRID_WIDTH`` rows land on the canvas, so windows at
offsets 0..4 make up the grid: exactly 5 rows and 25 bytes for a 16-byte
digest. The last digest byte never contributes.

Overlapping windows and the bound are kept as-is so that grids (and
therefore images) stay identical to previously generated identicons.
"""

from dataclasses import replace
from typing import List, Sequence

from pyrsistent import pvector

from avatarme.config import GRID_WIDTH
from avatarme.identicon import Identicon

CHUNK_SIZE = 3


def mirror_chunk(chunk: Sequence[int]) -> List[int]:
    """Return ``[a, b, c, b, a]`` for a chunk ``[a, b, c]``."""
    a, b, c = chunk
    return [a, b, c, b, a]


def build_grid(identicon: Identicon) -> Identicon:
    """Expand the digest into the flattened mirrored grid.

    Args:
        identicon (Identicon): Record with ``digest`` set.

    Returns:
        Identicon: Record with ``grid`` set (25 entries for a 16-byte digest).
    """
    digest = identicon.digest
    grid: List[int] = []
    for offset in range(GRID_WIDTH):
        if offset + CHUNK_SIZE > len(digest) - 1:
            break
        grid.extend(mirror_chunk(digest[offset : offset + CHUNK_SIZE]))
    return replace(identicon, grid=pvector(grid))
