"""Color values, hex conversion and the target color catalog."""

from __future__ import annotations

import math
import random
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence

HEX_RE = re.compile(r"^#?([0-9A-Fa-f]{6})$")


class RGB(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class ColorTarget:
    """A named color the player is asked to find."""

    name: str
    hex: str

    @property
    def rgb(self) -> RGB:
        return hex_to_rgb(self.hex)

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "hex": self.hex}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""

    return int(math.floor(value + 0.5))


def _valid_channel(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


def rgb_to_hex(rgb: Sequence[int]) -> str:
    r, g, b = rgb
    if not all(_valid_channel(c) for c in (r, g, b)):
        raise ValueError("RGB channels must be integers in 0-255")
    return f"#{r:02X}{g:02X}{b:02X}"


def hex_to_rgb(text: str) -> RGB:
    match = HEX_RE.match(text.strip()) if isinstance(text, str) else None
    if not match:
        raise ValueError(f"Invalid hex color: {text!r}")
    value = match.group(1)
    return RGB(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def parse_rgb(value: Any) -> RGB:
    """Read a color sent by a client: a hex string, ``{r, g, b}`` or a triple."""

    if isinstance(value, str):
        return hex_to_rgb(value)
    if isinstance(value, Mapping):
        try:
            channels = [value["r"], value["g"], value["b"]]
        except KeyError as exc:
            raise ValueError(f"Missing channel {exc.args[0]!r}") from exc
    elif isinstance(value, Sequence) and len(value) == 3:
        channels = list(value)
    else:
        raise ValueError("Color must be a hex string, an {r, g, b} object or a triple")

    if not all(_valid_channel(c) for c in channels):
        raise ValueError("RGB channels must be integers in 0-255")
    return RGB(*channels)


COLOR_CATALOG: tuple[ColorTarget, ...] = (
    ColorTarget("さくら色 (Pink)", "#FECAE0"),
    ColorTarget("そらいろ (Sky Blue)", "#87CEEB"),
    ColorTarget("わかくさいろ (Green)", "#ABC900"),
    ColorTarget("ひまわりいろ (Yellow)", "#FFC800"),
    ColorTarget("あかいろ (Red)", "#B7282E"),
    ColorTarget("ふじいろ (Purple)", "#BB94D7"),
    ColorTarget("まっちゃいろ (Dark Green)", "#8BA36D"),
    ColorTarget("るりいろ (Deep Blue)", "#2A5CAA"),
    ColorTarget("きんいろ (Gold)", "#E6B422"),
    ColorTarget("すみいろ (Black)", "#333333"),
    ColorTarget("さんごいろ (Coral)", "#F88379"),
    ColorTarget("もえぎいろ (Green)", "#006E4F"),
    ColorTarget("やまぶきいろ (Orange)", "#FFA400"),
    ColorTarget("あいいろ (Navy)", "#165E83"),
    ColorTarget("ぼたんいろ (Magenta)", "#E7609E"),
    ColorTarget("ももいろ (Peach)", "#F09199"),
    ColorTarget("だいだいいろ (Tangerine)", "#EE7800"),
    ColorTarget("レモンいろ (Lemon)", "#FFF33F"),
    ColorTarget("みずいろ (Light Blue)", "#BCE2E8"),
    ColorTarget("ぐんじょういろ (Ultramarine)", "#4C6CB3"),
    ColorTarget("むらさき (Purple)", "#884898"),
    ColorTarget("ちゃいろ (Brown)", "#965042"),
    ColorTarget("はいいろ (Gray)", "#7D7D7D"),
    ColorTarget("しろいろ (White)", "#FFFFFF"),
    ColorTarget("くさいろ (Grass)", "#7B8D42"),
    ColorTarget("わさびいろ (Wasabi)", "#A8BF93"),
    ColorTarget("べにいろ (Crimson)", "#D7003A"),
    ColorTarget("こはくいろ (Amber)", "#BF783A"),
    ColorTarget("あさぎいろ (Teal)", "#00A3AF"),
    ColorTarget("えんじいろ (Dark Red)", "#B94047"),
    ColorTarget("うぐいすいろ (Olive)", "#928C36"),
    ColorTarget("かきいろ (Persimmon)", "#ED6D3D"),
    ColorTarget("ときいろ (Salmon Pink)", "#F4B3C2"),
    ColorTarget("ききょういろ (Bellflower)", "#5654A2"),
    ColorTarget("あおみどり (Blue Green)", "#00A497"),
    ColorTarget("なのはないろ (Rapeseed)", "#FFEC47"),
)

_CATALOG_BY_NAME: Dict[str, ColorTarget] = {color.name: color for color in COLOR_CATALOG}


def pick_random(rng: Optional[random.Random] = None) -> ColorTarget:
    """Pick a target color uniformly at random."""

    return (rng or random).choice(COLOR_CATALOG)


def find_color(name: Any) -> Optional[ColorTarget]:
    """Exact, case-sensitive catalog lookup."""

    if not isinstance(name, str):
        return None
    return _CATALOG_BY_NAME.get(name)


def catalog_to_list() -> List[Dict[str, str]]:
    return [color.to_dict() for color in COLOR_CATALOG]


__all__ = [
    "COLOR_CATALOG",
    "ColorTarget",
    "RGB",
    "catalog_to_list",
    "find_color",
    "hex_to_rgb",
    "parse_rgb",
    "pick_random",
    "rgb_to_hex",
    "round_half_up",
]
