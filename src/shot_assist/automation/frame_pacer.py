"""Sample pacing for the tracking loop - absolute deadlines and settle delays."""

import time
from dataclasses import dataclass

DEFAULT_PERIOD = 0.016  # 60 FPS
DEFAULT_PACED_SAMPLES = 60
DEFAULT_SETTLE_FRAMES = 10
DEFAULT_UNPACED_SAMPLES = 1000


@dataclass(frozen=True)
class DeadlinePolicy:
    """How often and how long a tracking session samples.

    Attributes:
        period: Seconds between samples when paced
        max_samples: Sample budget for the session
        settle_time: Seconds to wait before the first sample
        paced: False means sample as fast as captures return
    """
    period: float = DEFAULT_PERIOD
    max_samples: int = DEFAULT_PACED_SAMPLES
    settle_time: float = DEFAULT_PERIOD * DEFAULT_SETTLE_FRAMES
    paced: bool = True

    @classmethod
    def paced_policy(cls, period=DEFAULT_PERIOD, max_samples=DEFAULT_PACED_SAMPLES,
                     settle_frames=DEFAULT_SETTLE_FRAMES):
        """Small fixed budget at a fixed cadence after a settling delay."""
        return cls(period, max_samples, period * settle_frames, True)

    @classmethod
    def unpaced_policy(cls, max_samples=DEFAULT_UNPACED_SAMPLES):
        """Large budget, no sleeping at all."""
        return cls(0.0, max_samples, 0.0, False)

    @classmethod
    def from_config(cls, config):
        """Build the policy selected by a GameConfig."""
        if config.paced:
            return cls.paced_policy(config.frame_period, config.max_samples, config.settle_frames)
        return cls.unpaced_policy(config.unpaced_max_samples)


class FramePacer:
    """
    Fixed-period pacing with an absolute deadline.

    The deadline advances by exactly one period per wait(), so time spent
    processing a sample comes out of the sleep rather than adding to it.
    When a sample overruns its slot, following waits return immediately
    until the schedule has caught up; no sample is dropped.
    """

    def __init__(self, period, paced=True, clock=time.perf_counter, sleep=time.sleep):
        self.period = period
        self.paced = paced
        self.clock = clock
        self.sleep = sleep
        self.deadline = None

    @classmethod
    def for_policy(cls, policy, clock=time.perf_counter, sleep=time.sleep):
        return cls(policy.period, policy.paced, clock, sleep)

    def settle(self, duration):
        """Block once for duration seconds before sampling starts."""
        if self.paced and duration > 0:
            self.sleep(duration)

    def start(self):
        """Set the first deadline one period from now."""
        self.deadline = self.clock() + self.period

    def remaining(self):
        """Seconds left until the current deadline, clamped to zero."""
        if self.deadline is None:
            return 0.0
        return max(0.0, self.deadline - self.clock())

    def wait(self):
        """Sleep until the current deadline, then advance it one period."""
        if not self.paced:
            return
        if self.deadline is None:
            self.start()
        slack = self.remaining()
        if slack > 0:
            self.sleep(slack)
        self.deadline += self.period
