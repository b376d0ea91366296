"""Strike detection - watches the red-pixel count around the shot point for the hit flash."""

import time
from dataclasses import dataclass, field

from shot_assist.automation.frame_pacer import DeadlinePolicy, FramePacer
from shot_assist.capture.frame import Point
from shot_assist.config.game_config import (
    GameConfig,
    BASELINE_FIRST,
    DELTA_TRIGGER,
    SATURATION_TRIGGER,
)
from shot_assist.vision.color_classifier import count_target_pixels


@dataclass(frozen=True)
class Baseline:
    """Reference count recorded at the start of a session."""
    count: int
    is_terminal: bool = field(default=False, init=False, repr=False)


@dataclass(frozen=True)
class Rising:
    """Count changed between consecutive samples without triggering."""
    count: int
    is_terminal: bool = field(default=False, init=False, repr=False)


@dataclass(frozen=True)
class Triggered:
    """Hit detected on sample frame_index with the given count."""
    frame_index: int
    count: int
    is_terminal: bool = field(default=True, init=False, repr=False)


@dataclass(frozen=True)
class TimedOut:
    """Sample budget exhausted without a hit."""
    is_terminal: bool = field(default=True, init=False, repr=False)


def capture_region(center: Point, radius: int):
    """Capture rectangle (x, y, width, height) of side 2*radius centred on center."""
    return (center.x - radius, center.y - radius, radius * 2, radius * 2)


def _report(observer, outcome):
    print(f"[Track] {outcome}")
    if observer is not None:
        observer(outcome)


def track(center: Point, radius: int, frame_source, deadline_policy: DeadlinePolicy,
          config=None, observer=None, perf_logger=None, pacer=None):
    """
    Watch the strike zone until the hit flash shows up or the budget runs out.

    Each sample captures the square around center, counts target-colored
    pixels and compares against session state:

    - delta policy: the first count (first nonzero count by default) becomes
      the baseline; a later count above baseline + trigger_delta triggers.
    - saturation policy: any count at or above the saturation threshold
      triggers.

    Count changes that do not trigger are reported as Rising. Baseline and
    Rising go to observer; they never affect control flow.

    Args:
        center: Screen point the strike zone is centred on
        radius: Half the side of the captured square
        frame_source: Object with capture(x, y, width, height) -> Frame
        deadline_policy: Sampling cadence and budget
        config: GameConfig with detection policy (default GameConfig())
        observer: Optional callable receiving every outcome
        perf_logger: Optional PerformanceLogger for per-sample timings
        pacer: Optional FramePacer (built from deadline_policy when omitted)

    Returns:
        Triggered(frame_index, count) or TimedOut()

    Raises:
        CaptureError: a capture failed; the session is abandoned
    """
    if config is None:
        config = GameConfig()
    if pacer is None:
        pacer = FramePacer.for_policy(deadline_policy)

    x, y, width, height = capture_region(center, radius)
    saturation = config.effective_saturation_threshold()

    if perf_logger is not None:
        perf_logger.start_session(f"track ({center.x}, {center.y}) r={radius}")

    outcome = None
    try:
        pacer.settle(deadline_policy.settle_time)
        pacer.start()

        baseline = None
        previous = None
        for i in range(deadline_policy.max_samples):
            t0 = time.perf_counter()
            frame = frame_source.capture(x, y, width, height)
            t1 = time.perf_counter()
            count = count_target_pixels(frame, config.color_rule)
            t2 = time.perf_counter()
            if perf_logger is not None:
                perf_logger.log_sample(i, count, (t1 - t0) * 1000, (t2 - t1) * 1000)

            if config.trigger_policy == SATURATION_TRIGGER and count >= saturation:
                outcome = Triggered(i, count)
                _report(observer, outcome)
                return outcome

            if baseline is None:
                if config.baseline_mode == BASELINE_FIRST or count > 0:
                    baseline = count
                    _report(observer, Baseline(count))
            elif config.trigger_policy == DELTA_TRIGGER and count > baseline + config.trigger_delta:
                outcome = Triggered(i, count)
                _report(observer, outcome)
                return outcome
            elif count != previous:
                _report(observer, Rising(count))

            previous = count
            pacer.wait()

        outcome = TimedOut()
        _report(observer, outcome)
        return outcome
    finally:
        if perf_logger is not None:
            perf_logger.end_session(outcome if outcome is not None else "aborted")
