from dataclasses import dataclass

from avatarme.types import RGBA

# Cells per grid row; the grid builder always produces 5 mirrored chunks.
GRID_WIDTH = 5
CELL_SIZE = 50
TRANSPARENT: RGBA = (0, 0, 0, 0)


@dataclass(frozen=True)
class Config:
    cell_size: int = CELL_SIZE
    output_dir: str = "."
    background: RGBA = TRANSPARENT

    @property
    def image_size(self) -> int:
        """Side length of the square canvas in pixels."""
        return self.cell_size * GRID_WIDTH


DEFAULT_CONFIG = Config()
