"""Pixel mapping stage.

Each retained cell becomes one square on the canvas. For grid index ``i``
the column is ``i % 5`` and the row ``i // 5``; the square's top-left corner
is ``(column * cell_size, row * cell_size)`` and it spans ``cell_size``
pixels in both directions.
"""

from dataclasses import replace

from pyrsistent import pvector

from avatarme.config import CELL_SIZE
from avatarme.identicon import Identicon, PixelRect, Point
from avatarme.utils.grid import index_to_position


def cell_to_rect(index: int, cell_size: int = CELL_SIZE) -> PixelRect:
    """Return the canvas rectangle covered by grid cell ``index``."""
    column, row = index_to_position(index)
    top_left = Point(column * cell_size, row * cell_size)
    bottom_right = Point(top_left.x + cell_size, top_left.y + cell_size)
    return PixelRect(top_left=top_left, bottom_right=bottom_right)


def build_pixel_map(identicon: Identicon, cell_size: int = CELL_SIZE) -> Identicon:
    """Map every retained cell to its rectangle, preserving cell order.

    Args:
        identicon (Identicon): Record with ``cells`` set.
        cell_size (int): Side length of one grid cell in pixels.

    Returns:
        Identicon: Record with ``pixel_map`` set.
    """
    rects = [cell_to_rect(cell.index, cell_size) for cell in identicon.cells]
    return replace(identicon, pixel_map=pvector(rects))
