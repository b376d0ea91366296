"""Ball location by sliding-window template matching over raw frame bytes."""
from dataclasses import dataclass

import cv2
import numpy as np

from shot_assist.capture.frame import Frame, Point, BYTES_PER_PIXEL
from shot_assist.errors import InsufficientData

# One horizontal run across the ball, BGRX: rim, shaded side, highlight, rim.
BALL_TEMPLATE = bytes([
    40, 90, 200, 0,
    50, 120, 235, 0,
    200, 230, 250, 0,
    235, 245, 255, 0,
    60, 130, 240, 0,
    40, 90, 200, 0,
])


@dataclass(frozen=True)
class MatchResult:
    """Best template match: screen location, difference score, byte offset."""
    location: Point
    score: int
    offset: int


def match_scores(data, template) -> np.ndarray:
    """Sum of absolute byte differences for every byte offset.

    Args:
        data: Frame buffer (bytes-like)
        template: Template bytes, no longer than data

    Returns:
        int64 array of length len(data) - len(template) + 1, where entry i
        is the score of the window starting at byte i
    """
    buf = np.frombuffer(data, dtype=np.uint8).astype(np.int32)
    tpl = np.frombuffer(template, dtype=np.uint8).astype(np.int32)
    n_offsets = buf.size - tpl.size + 1

    # Accumulate one template byte at a time over all offsets at once
    scores = np.zeros(n_offsets, dtype=np.int64)
    for k, expected in enumerate(tpl):
        scores += np.abs(buf[k:k + n_offsets] - expected)
    return scores


def locate(frame: Frame, template=BALL_TEMPLATE, pixel_aligned=False) -> MatchResult:
    """
    Find the best match for a template in a frame.

    Every byte offset is scored, so windows that straddle pixel boundaries
    take part in the search. The lowest score wins and ties go to the
    earliest offset. The winning offset is recentred on the template's
    middle byte before conversion to a pixel position.

    Args:
        frame: Captured frame to search
        template: Template bytes in the frame's channel order
        pixel_aligned: Only consider offsets on pixel boundaries

    Returns:
        MatchResult with the screen location of the match

    Raises:
        InsufficientData: if the frame buffer is shorter than the template
    """
    if len(template) == 0:
        raise InsufficientData("Template is empty")
    if len(frame.data) < len(template):
        raise InsufficientData(
            f"Frame buffer ({len(frame.data)} bytes) is shorter than template ({len(template)} bytes)"
        )

    scores = match_scores(frame.data, template)
    if pixel_aligned:
        aligned = scores[::BYTES_PER_PIXEL]
        offset = int(np.argmin(aligned)) * BYTES_PER_PIXEL
    else:
        offset = int(np.argmin(scores))

    pixel_index = (offset + len(template) // 2) // BYTES_PER_PIXEL
    location = Point(
        frame.x + pixel_index % frame.width,
        frame.y + pixel_index // frame.width,
    )
    return MatchResult(location, int(scores[offset]), offset)


def find_ball(frame_source, game_origin: Point, config, template=BALL_TEMPLATE) -> MatchResult:
    """Capture the game area and locate the ball in it."""
    frame = frame_source.capture(game_origin.x, game_origin.y, config.game_width, config.game_height)
    result = locate(frame, template)
    print(f"[Vision] Ball at ({result.location.x}, {result.location.y}), score {result.score}")
    return result


def load_template(path, padding=0) -> bytes:
    """
    Load a template image from disk as BGRX bytes.

    Grayscale, BGR and BGRA images are accepted. The fourth byte of every
    pixel is set to `padding` to match the capture's unused byte.
    """
    image = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if image is None:
        raise OSError(f"Unable to read template image {path}")

    if image.ndim == 2:
        image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGRA)
    elif image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2BGRA)
    image = np.ascontiguousarray(image, dtype=np.uint8)
    image[..., 3] = padding
    return image.tobytes()
