"""Core immutable ``Identicon`` record.

The record starts out holding only the input name and its digest and is
enriched by each pipeline stage in turn (color, grid, retained cells, pixel
rectangles). Stages never mutate a record; they return a new one via
:func:`dataclasses.replace`.

Design notes:

* Sequences are persistent vectors (``pyrsistent.PVector``) so a record can
    be shared freely between stages and callers.
* ``digest`` is empty and ``color`` is black until the corresponding stages
    have run. Drawing an un-enriched record yields an empty canvas.
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from avatarme.types import RGB


@dataclass(frozen=True)
class Point:
    """Pixel coordinate.

    Attributes:
        x: Column in pixels (0 at left).
        y: Row in pixels (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class PixelRect:
    """Axis-aligned rectangle covering the half-open range
    ``[top_left.x, bottom_right.x) × [top_left.y, bottom_right.y)``."""

    top_left: Point
    bottom_right: Point

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y


@dataclass(frozen=True)
class GridCell:
    """A grid byte tagged with its position.

    Attributes:
        value: Byte value taken from the grid (0-255).
        index: Position in the flattened grid (0-24 for a 5×5 grid).
    """

    value: int
    index: int


@dataclass(frozen=True)
class Identicon:
    """Identicon under construction.

    Attributes:
        name (str): Input string; also the output file stem.
        digest (bytes): 16-byte MD5 digest of the encoded name.
        color (RGB): Fill color, the first three digest bytes.
        grid (PVector[int]): Flattened mirrored grid, 25 bytes for a 16-byte digest.
        cells (PVector[GridCell]): Even-valued grid cells, in grid order.
        pixel_map (PVector[PixelRect]): One rectangle per retained cell, same order.
    """

    name: str
    digest: bytes = b""
    color: RGB = (0, 0, 0)
    grid: PVector[int] = pvector()
    cells: PVector[GridCell] = pvector()
    pixel_map: PVector[PixelRect] = pvector()

    @property
    def description(self) -> PMap[str, Any]:
        """JSON-friendly view of the record.

        Bytes are rendered as hex and dataclasses as plain mappings, so the
        result can be passed through ``pyrsistent.thaw`` and dumped directly.
        """
        return pmap(
            {
                "name": self.name,
                "digest": self.digest.hex(),
                "color": pvector(self.color),
                "grid": self.grid,
                "cells": pvector(
                    [pmap({"value": c.value, "index": c.index}) for c in self.cells]
                ),
                "pixel_map": pvector(
                    [
                        pvector(
                            [
                                r.top_left.x,
                                r.top_left.y,
                                r.bottom_right.x,
                                r.bottom_right.y,
                            ]
                        )
                        for r in self.pixel_map
                    ]
                ),
            }
        )
