"""Shot execution - drives the pointer through one shot and tracks the result."""

import time

from shot_assist.automation.frame_pacer import DeadlinePolicy
from shot_assist.automation.shot_planner import ShotType, focus_point, plan_shot
from shot_assist.automation.target_tracker import track
from shot_assist.capture.frame import Point
from shot_assist.errors import DegenerateVector
from shot_assist.vision.template_locator import BALL_TEMPLATE, find_ball


class ShotExecutor:
    """Takes shots in a game window at a fixed screen position."""

    def __init__(self, pointer, frame_source, game_origin: Point, config,
                 policy=None, perf_logger=None, template=BALL_TEMPLATE, sleep=time.sleep):
        self.pointer = pointer
        self.frame_source = frame_source
        self.game_origin = game_origin
        self.config = config
        self.policy = policy if policy is not None else DeadlinePolicy.from_config(config)
        self.perf_logger = perf_logger
        self.template = template
        self.sleep = sleep

    def _press_point(self, shot_type, pointer_origin):
        if shot_type is not ShotType.AIMED:
            return plan_shot(shot_type, self.game_origin, self.config, pointer_origin)

        ball = find_ball(self.frame_source, self.game_origin, self.config, self.template).location
        try:
            return plan_shot(shot_type, self.game_origin, self.config, pointer_origin, ball)
        except DegenerateVector as e:
            print(f"[Shot] {e}; pressing on the ball without aiming")
            return ball

    def take_shot(self, shot_type: ShotType):
        """
        Take one shot and watch for the hit.

        Sequence: remember the pointer, click above the game to give it
        focus, move to the shot point, hold the left button while tracking
        the strike zone, release, and put the pointer back.

        The button is always released and the pointer always restored, even
        when tracking fails; the failure is then re-raised.

        Returns:
            Triggered or TimedOut from the tracking session
        """
        orig_pos = self.pointer.position()
        print(f"[Shot] {shot_type.name.lower()} shot from ({orig_pos.x}, {orig_pos.y})")

        try:
            # Restore game window focus
            focus = focus_point(self.game_origin, self.config)
            self.pointer.move(focus.x, focus.y)
            self.pointer.click("left")
            self.sleep(self.config.focus_delay)

            target = self._press_point(shot_type, orig_pos)
            self.pointer.move(target.x, target.y)

            self.pointer.press("left")
            try:
                outcome = track(self.pointer.position(), self.config.target_radius,
                                self.frame_source, self.policy, self.config,
                                perf_logger=self.perf_logger)
            finally:
                self.pointer.release("left")
        finally:
            self.pointer.move(orig_pos.x, orig_pos.y)

        return outcome
