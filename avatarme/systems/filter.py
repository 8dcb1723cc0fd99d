from dataclasses import replace

from pyrsistent import pvector

from avatarme.identicon import GridCell, Identicon


def is_filled(value: int) -> bool:
    """Even-valued grid bytes are drawn; odd ones stay blank."""
    return value % 2 == 0


def filter_odd_squares(identicon: Identicon) -> Identicon:
    """Keep the even-valued grid cells, tagged with their grid index.

    Odd cells are dropped entirely, so indices in the result are sparse but
    ascending.
    """
    cells = [
        GridCell(value=value, index=index)
        for index, value in enumerate(identicon.grid)
        if is_filled(value)
    ]
    return replace(identicon, cells=pvector(cells))
