"""Red-pixel classification for strike-zone tracking.

Two rules are supported:

- relative: red must exceed green plus blue, each subtraction clamped at
  zero. Tolerant of lighting changes; used by default.
- absolute: red at least 200 with green and blue both under 100. The
  earliest detection heuristic, kept for reproducing old runs.

Scalar predicates take a pixel as (channel2, channel1, channel0), i.e.
(red, green, blue) for BGRA captures.
"""
import numpy as np

from shot_assist.capture.frame import Frame
from shot_assist.config.game_config import RELATIVE_RULE, ABSOLUTE_RULE

ABSOLUTE_RED_MIN = 200
ABSOLUTE_OTHER_MAX = 100


def _saturating_sub(a, b):
    return a - b if a > b else 0


def is_target_color_relative(pixel):
    """True when red - green - blue > 0 with saturating subtraction."""
    c2, c1, c0 = pixel[:3]
    return _saturating_sub(_saturating_sub(c2, c1), c0) > 0


def is_target_color_absolute(pixel):
    """True when red >= 200 and green, blue < 100."""
    c2, c1, c0 = pixel[:3]
    return c2 >= ABSOLUTE_RED_MIN and c1 < ABSOLUTE_OTHER_MAX and c0 < ABSOLUTE_OTHER_MAX


_CLASSIFIERS = {
    RELATIVE_RULE: is_target_color_relative,
    ABSOLUTE_RULE: is_target_color_absolute,
}


def get_classifier(rule):
    """Return the scalar predicate for a rule name.

    Raises:
        ValueError: if the rule is unknown
    """
    try:
        return _CLASSIFIERS[rule]
    except KeyError:
        raise ValueError(f"Unknown color rule '{rule}', expected one of {tuple(_CLASSIFIERS)}") from None


def is_target_color(pixel, rule=RELATIVE_RULE):
    """Classify a single (red, green, blue) pixel with the given rule."""
    return get_classifier(rule)(pixel)


def create_target_mask(pixels, rule=RELATIVE_RULE):
    """Create a boolean mask of target-colored pixels.

    Args:
        pixels: Array of shape (H, W, 4) or (N, 4) in BGRA order
        rule: Color rule name

    Returns:
        Boolean array over the leading dimensions, True where the pixel
        satisfies the rule. Agrees exactly with the scalar predicates.
    """
    get_classifier(rule)
    # Widen so sums and differences cannot wrap
    b = pixels[..., 0].astype(np.int16)
    g = pixels[..., 1].astype(np.int16)
    r = pixels[..., 2].astype(np.int16)

    if rule == RELATIVE_RULE:
        # sat(sat(r - g) - b) > 0  <=>  r > g + b
        return r > g + b
    return (r >= ABSOLUTE_RED_MIN) & (g < ABSOLUTE_OTHER_MAX) & (b < ABSOLUTE_OTHER_MAX)


def count_target_pixels(frame: Frame, rule=RELATIVE_RULE) -> int:
    """Count pixels in a frame that satisfy the color rule."""
    return int(np.count_nonzero(create_target_mask(frame.pixels(), rule)))
