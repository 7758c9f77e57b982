"""Service layer helpers."""

from .colors import (
    COLOR_CATALOG,
    RGB,
    ColorTarget,
    catalog_to_list,
    find_color,
    hex_to_rgb,
    parse_rgb,
    pick_random,
    rgb_to_hex,
)
from .commentary import FALLBACK_COMMENTARY, CommentaryGenerator
from .rankings import SubmissionError, ranking_to_dict, validate_submission
from .sampler import SAMPLE_WINDOW, sample_center, sample_image
from .scoring import color_distance, score_colors

__all__ = [
    "COLOR_CATALOG",
    "CommentaryGenerator",
    "ColorTarget",
    "FALLBACK_COMMENTARY",
    "RGB",
    "SAMPLE_WINDOW",
    "SubmissionError",
    "catalog_to_list",
    "color_distance",
    "find_color",
    "hex_to_rgb",
    "parse_rgb",
    "pick_random",
    "ranking_to_dict",
    "rgb_to_hex",
    "sample_center",
    "sample_image",
    "score_colors",
    "validate_submission",
]
