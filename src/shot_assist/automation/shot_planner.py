"""Shot geometry - aim vectors and fixed shot points relative to the game window."""

import math
from enum import Enum
from typing import Optional, Tuple

from shot_assist.capture.frame import Point
from shot_assist.errors import DegenerateVector


class ShotType(Enum):
    """Shot variants, keyed by their single-letter command."""
    CENTER = "c"
    LOB = "l"
    MANUAL = "m"
    AIMED = "a"

    @classmethod
    def from_command(cls, command):
        """Return the ShotType for a command letter, or None."""
        for shot_type in cls:
            if shot_type.value == command:
                return shot_type
        return None


def plan_aim(origin: Point, target: Point, desired_length: float = 125.0) -> Tuple[float, float]:
    """
    Scale the origin->target displacement to desired_length.

    Direction is preserved; only the magnitude changes.

    Raises:
        DegenerateVector: if origin and target are the same point
    """
    dx = target.x - origin.x
    dy = target.y - origin.y
    length = math.hypot(dx, dy)
    if length == 0:
        raise DegenerateVector(f"Cannot aim from ({origin.x}, {origin.y}) at itself")
    scale = desired_length / length
    return dx * scale, dy * scale


def focus_point(game_origin: Point, config) -> Point:
    """Point just above the game area; clicking it restores window focus."""
    return Point(game_origin.x + config.game_width // 2, game_origin.y - 5)


def center_shot_point(game_origin: Point, config) -> Point:
    return Point(game_origin.x + config.game_width // 2,
                 game_origin.y + 11 * config.game_height // 16)


def lob_shot_point(game_origin: Point, config) -> Point:
    """Bottom of the playfield, keeping the whole strike zone inside it."""
    return Point(game_origin.x + config.game_width // 2,
                 game_origin.y + config.game_height - config.target_radius - 1)


def aimed_shot_point(ball: Point, toward: Point, config) -> Point:
    """Point aim_length away from the ball in the direction of toward."""
    dx, dy = plan_aim(ball, toward, config.aim_length)
    return Point(ball.x + round(dx), ball.y + round(dy))


def plan_shot(shot_type: ShotType, game_origin: Point, config,
              pointer_origin: Optional[Point] = None, ball: Optional[Point] = None) -> Point:
    """
    Decide where to press for a shot.

    Args:
        shot_type: Which shot to take
        game_origin: Top-left corner of the game window
        config: GameConfig with game geometry
        pointer_origin: Pointer position before the shot (MANUAL, AIMED)
        ball: Located ball position (AIMED)

    Raises:
        ValueError: if a required point is missing for the shot type
        DegenerateVector: for AIMED when the ball is under the pointer
    """
    if shot_type is ShotType.CENTER:
        return center_shot_point(game_origin, config)
    if shot_type is ShotType.LOB:
        return lob_shot_point(game_origin, config)
    if pointer_origin is None:
        raise ValueError(f"{shot_type.name} shot needs the original pointer position")
    if shot_type is ShotType.MANUAL:
        return pointer_origin
    if ball is None:
        raise ValueError("AIMED shot needs a located ball")
    return aimed_shot_point(ball, pointer_origin, config)
