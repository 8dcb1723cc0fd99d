from dataclasses import replace

from avatarme.identicon import Identicon


def pick_color(identicon: Identicon) -> Identicon:
    """Use the first three digest bytes as the RGB fill color."""
    r, g, b = identicon.digest[:3]
    return replace(identicon, color=(r, g, b))
