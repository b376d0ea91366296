"""Vision module - template matching and red-pixel classification."""

from .template_locator import locate, find_ball, load_template, MatchResult, BALL_TEMPLATE
from .color_classifier import (
    is_target_color,
    is_target_color_relative,
    is_target_color_absolute,
    get_classifier,
    create_target_mask,
    count_target_pixels,
)

__all__ = [
    'locate',
    'find_ball',
    'load_template',
    'MatchResult',
    'BALL_TEMPLATE',
    'is_target_color',
    'is_target_color_relative',
    'is_target_color_absolute',
    'get_classifier',
    'create_target_mask',
    'count_target_pixels',
]
