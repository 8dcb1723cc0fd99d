from avatarme.systems.color import pick_color
from avatarme.systems.hash import hash_input
from tests.test_utils import make_identicon


def test_color_is_first_three_digest_bytes() -> None:
    identicon = pick_color(make_identicon(bytes([200, 17, 64]) + bytes(13)))
    assert identicon.color == (200, 17, 64)


def test_color_from_hashed_input() -> None:
    hashed = hash_input("banana")
    assert pick_color(hashed).color == tuple(hashed.digest[:3])


def test_pick_color_leaves_input_untouched() -> None:
    original = make_identicon()
    pick_color(original)
    assert original.color == (0, 0, 0)
