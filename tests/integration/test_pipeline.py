import hashlib
import logging
from functools import partial

from PIL import Image

from avatarme.config import Config
from avatarme.identicon import Identicon
from avatarme.pipeline import (
    DEFAULT_TRANSFORMS,
    create_identicon,
    generate,
    pipe,
    transforms_for,
)
from avatarme.systems.color import pick_color
from avatarme.systems.filter import filter_odd_squares
from avatarme.systems.grid import build_grid
from avatarme.systems.hash import hash_input
from avatarme.systems.pixel_map import build_pixel_map, cell_to_rect


def test_pipe_applies_left_to_right() -> None:
    calls = []

    def first(identicon: Identicon) -> Identicon:
        calls.append("first")
        return identicon

    def second(identicon: Identicon) -> Identicon:
        calls.append("second")
        return identicon

    pipe(Identicon(name="x"), first, second)
    assert calls == ["first", "second"]


def test_pipe_without_transforms_is_identity() -> None:
    identicon = Identicon(name="x")
    assert pipe(identicon) is identicon


def test_generate_matches_direct_calls() -> None:
    direct = build_pixel_map(
        filter_odd_squares(build_grid(pick_color(hash_input("banana"))))
    )
    assert generate("banana") == direct
    assert pipe(hash_input("banana"), *DEFAULT_TRANSFORMS) == direct


def test_default_transforms_end_with_bound_pixel_map() -> None:
    assert DEFAULT_TRANSFORMS[:3] == (pick_color, build_grid, filter_odd_squares)
    last = DEFAULT_TRANSFORMS[3]
    assert isinstance(last, partial)
    assert last.func is build_pixel_map
    assert last.keywords == {"cell_size": 50}


def test_transforms_for_custom_cell_size() -> None:
    transforms = transforms_for(Config(cell_size=10))
    assert transforms[:3] == (pick_color, build_grid, filter_odd_squares)
    assert isinstance(transforms[3], partial)
    identicon = generate("banana", Config(cell_size=10))
    assert all(rect.width == 10 for rect in identicon.pixel_map)


def test_banana_end_to_end(tmp_path) -> None:
    identicon = generate("banana")
    digest = hashlib.md5(b"banana").digest()

    assert identicon.name == "banana"
    assert identicon.digest == digest
    assert identicon.color == tuple(digest[:3])
    assert len(identicon.grid) == 25
    assert all(cell.value % 2 == 0 for cell in identicon.cells)
    assert list(identicon.pixel_map) == [cell_to_rect(c.index) for c in identicon.cells]
    assert generate("banana") == identicon

    path = create_identicon("banana", Config(output_dir=str(tmp_path)))
    assert path == str(tmp_path / "banana.png")
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == (250, 250)


def test_stages_are_logged_at_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="avatarme.pipeline"):
        generate("banana")
    messages = [record.getMessage() for record in caplog.records]
    assert any("pick_color" in m for m in messages)
    assert any("build_pixel_map" in m for m in messages)


def test_write_is_logged_at_info(tmp_path, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="avatarme.renderer.raster"):
        create_identicon("banana", Config(output_dir=str(tmp_path)))
    assert any("banana.png" in record.getMessage() for record in caplog.records)
