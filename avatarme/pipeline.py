"""Pipeline orchestration.

Wires the stages together in their fixed order::

    hash_input -> pick_color -> build_grid -> filter_odd_squares
               -> build_pixel_map -> draw_identicon

Every stage between hashing and drawing is an ``Identicon -> Identicon``
transform; :func:`pipe` applies a sequence of them left to right. Only
:func:`create_identicon` touches the filesystem.
"""

import logging
from functools import partial
from typing import Tuple, Union

from avatarme.config import DEFAULT_CONFIG, Config
from avatarme.identicon import Identicon
from avatarme.renderer.raster import draw_identicon
from avatarme.systems.color import pick_color
from avatarme.systems.filter import filter_odd_squares
from avatarme.systems.grid import build_grid
from avatarme.systems.hash import hash_input
from avatarme.systems.pixel_map import build_pixel_map
from avatarme.types import Transform

logger = logging.getLogger(__name__)


def transforms_for(config: Config) -> Tuple[Transform, ...]:
    """Return the ordered stages used to build an identicon under ``config``."""
    return (
        pick_color,
        build_grid,
        filter_odd_squares,
        partial(build_pixel_map, cell_size=config.cell_size),
    )


DEFAULT_TRANSFORMS: Tuple[Transform, ...] = transforms_for(DEFAULT_CONFIG)


def pipe(identicon: Identicon, *transforms: Transform) -> Identicon:
    """Apply ``transforms`` to ``identicon`` in order and return the result."""
    for transform in transforms:
        logger.debug("Applying %s to %r", _transform_name(transform), identicon.name)
        identicon = transform(identicon)
    return identicon


def _transform_name(transform: Transform) -> str:
    if isinstance(transform, partial):
        return transform.func.__name__
    return getattr(transform, "__name__", repr(transform))


def generate(data: Union[str, bytes], config: Config = DEFAULT_CONFIG) -> Identicon:
    """Hash ``data`` and run every in-memory stage over the result.

    Args:
        data: Input string or bytes.
        config: Settings the pixel map is computed for.

    Returns:
        Identicon: Fully built record, ready for :func:`draw_identicon`.
    """
    return pipe(hash_input(data), *transforms_for(config))


def create_identicon(data: Union[str, bytes], config: Config = DEFAULT_CONFIG) -> str:
    """Build the identicon for ``data`` and write it as a PNG.

    Returns:
        str: Path of the written image.

    Raises:
        OutputWriteFailure: If the image cannot be written.
    """
    return draw_identicon(generate(data, config), config)
