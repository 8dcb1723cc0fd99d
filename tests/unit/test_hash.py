import hashlib

import pytest

from avatarme.systems.hash import hash_input


@pytest.mark.parametrize("name", ["banana", "", "ünïcödé", "a much longer input string"])
def test_digest_is_md5_of_utf8_name(name: str) -> None:
    identicon = hash_input(name)
    assert identicon.name == name
    assert identicon.digest == hashlib.md5(name.encode("utf-8")).digest()
    assert len(identicon.digest) == 16


def test_hashing_is_deterministic() -> None:
    assert hash_input("banana") == hash_input("banana")


def test_different_inputs_give_different_digests() -> None:
    assert hash_input("banana").digest != hash_input("bananas").digest


def test_bytes_input_is_hashed_verbatim() -> None:
    raw = b"\xffbanana"
    identicon = hash_input(raw)
    assert identicon.digest == hashlib.md5(raw).digest()
    assert identicon.name == "\ufffdbanana"


def test_str_and_equivalent_bytes_agree() -> None:
    assert hash_input("banana") == hash_input(b"banana")


def test_later_stages_are_unset() -> None:
    identicon = hash_input("banana")
    assert identicon.color == (0, 0, 0)
    assert len(identicon.grid) == 0
    assert len(identicon.cells) == 0
    assert len(identicon.pixel_map) == 0
