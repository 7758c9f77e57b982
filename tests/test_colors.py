from __future__ import annotations

import random
import re

import pytest

from colorhunt.services.colors import (
    COLOR_CATALOG,
    RGB,
    find_color,
    hex_to_rgb,
    parse_rgb,
    pick_random,
    rgb_to_hex,
)

CANONICAL_HEX = re.compile(r"^#[0-9A-F]{6}$")


def test_rgb_to_hex_is_uppercase_and_padded():
    assert rgb_to_hex(RGB(183, 40, 46)) == "#B7282E"
    assert rgb_to_hex(RGB(0, 10, 255)) == "#000AFF"


def test_hex_round_trip():
    for color in [RGB(0, 0, 0), RGB(255, 255, 255), RGB(1, 128, 254), RGB(183, 40, 46)]:
        assert hex_to_rgb(rgb_to_hex(color)) == color


def test_hex_to_rgb_accepts_lowercase_and_missing_hash():
    assert hex_to_rgb("b7282e") == RGB(183, 40, 46)
    assert hex_to_rgb("  #b7282E ") == RGB(183, 40, 46)


@pytest.mark.parametrize("value", ["", "#FFF", "#GGGGGG", "#1234567", None, 123])
def test_hex_to_rgb_rejects_invalid(value):
    with pytest.raises(ValueError):
        hex_to_rgb(value)


def test_rgb_to_hex_rejects_out_of_range():
    with pytest.raises(ValueError):
        rgb_to_hex((256, 0, 0))
    with pytest.raises(ValueError):
        rgb_to_hex((-1, 0, 0))


def test_parse_rgb_accepts_client_shapes():
    assert parse_rgb("#B7282E") == RGB(183, 40, 46)
    assert parse_rgb({"r": 183, "g": 40, "b": 46}) == RGB(183, 40, 46)
    assert parse_rgb([183, 40, 46]) == RGB(183, 40, 46)


@pytest.mark.parametrize(
    "value",
    [None, {"r": 1, "g": 2}, {"r": 1.5, "g": 2, "b": 3}, [True, 0, 0], [1, 2], [300, 0, 0]],
)
def test_parse_rgb_rejects_bad_input(value):
    with pytest.raises(ValueError):
        parse_rgb(value)


def test_catalog_names_are_unique_and_hex_canonical():
    names = [color.name for color in COLOR_CATALOG]
    assert len(names) >= 30
    assert len(set(names)) == len(names)
    assert all(name.strip() for name in names)
    assert all(CANONICAL_HEX.match(color.hex) for color in COLOR_CATALOG)


def test_pick_random_covers_catalog():
    rng = random.Random(1234)
    seen = {pick_random(rng) for _ in range(3000)}
    assert seen == set(COLOR_CATALOG)


def test_pick_random_without_rng_returns_catalog_color():
    assert pick_random() in COLOR_CATALOG


def test_find_color_is_exact():
    red = find_color("あかいろ (Red)")
    assert red is not None and red.rgb == RGB(183, 40, 46)
    assert find_color("あかいろ (red)") is None
    assert find_color(["あかいろ (Red)"]) is None


def test_catalog_keeps_original_names():
    original = [
        ("さくら色 (Pink)", "#FECAE0"),
        ("そらいろ (Sky Blue)", "#87CEEB"),
        ("わかくさいろ (Green)", "#ABC900"),
        ("ひまわりいろ (Yellow)", "#FFC800"),
        ("あかいろ (Red)", "#B7282E"),
        ("ふじいろ (Purple)", "#BB94D7"),
        ("まっちゃいろ (Dark Green)", "#8BA36D"),
        ("るりいろ (Deep Blue)", "#2A5CAA"),
        ("きんいろ (Gold)", "#E6B422"),
        ("すみいろ (Black)", "#333333"),
        ("さんごいろ (Coral)", "#F88379"),
        ("もえぎいろ (Green)", "#006E4F"),
        ("やまぶきいろ (Orange)", "#FFA400"),
        ("あいいろ (Navy)", "#165E83"),
        ("ぼたんいろ (Magenta)", "#E7609E"),
    ]
    for name, hex_value in original:
        color = find_color(name)
        assert color is not None and color.hex == hex_value
