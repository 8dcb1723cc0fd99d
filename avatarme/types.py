"""Common type aliases.

``Transform`` is the single extension point of the pipeline: every stage
between hashing and drawing has this shape.
"""

from typing import Callable, Tuple, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from avatarme.identicon import Identicon

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

Transform = Callable[["Identicon"], "Identicon"]
