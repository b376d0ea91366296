"""Automation module - sample pacing, strike tracking, shot planning and execution."""

from shot_assist.automation.frame_pacer import DeadlinePolicy, FramePacer
from shot_assist.automation.target_tracker import (
    track,
    Baseline,
    Rising,
    Triggered,
    TimedOut,
)
from shot_assist.automation.shot_planner import (
    ShotType,
    plan_aim,
    plan_shot,
    center_shot_point,
    lob_shot_point,
)
from shot_assist.automation.shot_executor import ShotExecutor
from shot_assist.automation.performance_logger import PerformanceLogger

__all__ = [
    'DeadlinePolicy',
    'FramePacer',
    'track',
    'Baseline',
    'Rising',
    'Triggered',
    'TimedOut',
    'ShotType',
    'plan_aim',
    'plan_shot',
    'center_shot_point',
    'lob_shot_point',
    'ShotExecutor',
    'PerformanceLogger',
]
