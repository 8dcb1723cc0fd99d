import io
import logging
import os

from PIL import Image, ImageDraw

from avatarme.config import DEFAULT_CONFIG, Config
from avatarme.errors import OutputWriteFailure
from avatarme.identicon import Identicon

logger = logging.getLogger(__name__)

OPAQUE = 255


def render(identicon: Identicon, config: Config = DEFAULT_CONFIG) -> Image.Image:
    """
    Draws every rectangle of the pixel map onto a fresh canvas in the identicon's color.
    """
    size = config.image_size
    img = Image.new("RGBA", (size, size), config.background)
    draw = ImageDraw.Draw(img)
    fill = (*identicon.color, OPAQUE)
    for rect in identicon.pixel_map:
        # ImageDraw includes both corners; rects are half-open.
        draw.rectangle(
            [
                rect.top_left.x,
                rect.top_left.y,
                rect.bottom_right.x - 1,
                rect.bottom_right.y - 1,
            ],
            fill=fill,
        )
    return img


def output_path(identicon: Identicon, config: Config = DEFAULT_CONFIG) -> str:
    return os.path.join(config.output_dir, f"{identicon.name}.png")


def encode_png(identicon: Identicon, config: Config = DEFAULT_CONFIG) -> bytes:
    buffer = io.BytesIO()
    render(identicon, config).save(buffer, format="PNG")
    return buffer.getvalue()


def draw_identicon(identicon: Identicon, config: Config = DEFAULT_CONFIG) -> str:
    """Render ``identicon`` and write it to ``<output_dir>/<name>.png``.

    Args:
        identicon (Identicon): Record with ``color`` and ``pixel_map`` set.
        config (Config): Canvas and output settings.

    Returns:
        str: Path of the written file.

    Raises:
        OutputWriteFailure: If the file cannot be created or written.
    """
    img = render(identicon, config)
    path = output_path(identicon, config)
    try:
        img.save(path, format="PNG")
    except (OSError, ValueError) as exc:
        raise OutputWriteFailure(path, exc) from exc
    logger.info("Wrote identicon for %r to %s", identicon.name, path)
    return path
