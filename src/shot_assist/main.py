#!/usr/bin/env python3
"""
Shot Assist - takes shots in a fixed-layout arcade mini-game.

Run once without --ready to check the game position: the game area is
saved as a PNG snapshot. Then run with --ready and pick shots at the prompt.
"""

import argparse
import sys

from shot_assist.automation.performance_logger import PerformanceLogger
from shot_assist.automation.shot_executor import ShotExecutor
from shot_assist.automation.shot_planner import ShotType
from shot_assist.capture.frame import Point
from shot_assist.capture.x11_capture import X11FrameSource, save_snapshot
from shot_assist.config.game_config import COLOR_RULES, TRIGGER_POLICIES, create_game_config
from shot_assist.control.pointer import X11Pointer
from shot_assist.errors import ShotAssistError

USAGE = "Shot types: [c]enter, [l]ob, [m]anual, [a]imed, [q]uit"


def check_display(frame_source, game_origin):
    """Abort on display setups the fixed game geometry cannot handle."""
    width, height, scale = frame_source.display_info()
    print(f"Screen dimensions: {width}x{height}px, scale factor: {scale}x")
    if scale != 1.0:
        raise SystemExit(f"Pixel scaling not yet supported (scale {scale}x)")

    monitor_x, monitor_y = frame_source.monitor_origin(game_origin.x, game_origin.y)
    if (monitor_x, monitor_y) != (0, 0):
        raise SystemExit(f"Multi-monitor not yet supported (game on monitor at {monitor_x}, {monitor_y})")


def take_snapshot(frame_source, pointer, game_origin, config, path):
    """Print pointer position and save the game area for inspection."""
    pos = pointer.position()
    print(f"mouse pos = ({pos.x}, {pos.y})")
    frame = frame_source.capture(game_origin.x, game_origin.y, config.game_width, config.game_height)
    return save_snapshot(frame, path)


def run_prompt(executor, read_line=input):
    """
    Read single-letter commands until 'q' or end of input.

    Shot failures are reported and the prompt continues; they never
    end the session.
    """
    print(USAGE)
    while True:
        try:
            command = read_line("> ").strip()
        except EOFError:
            break

        if command == "q":
            break

        shot_type = ShotType.from_command(command)
        if shot_type is None:
            print(f"Invalid input: {command!r}. {USAGE}")
            continue

        try:
            outcome = executor.take_shot(shot_type)
            print(f"[Shot] {outcome}")
        except ShotAssistError as e:
            print(f"[Shot] {shot_type.name.lower()} shot failed: {e}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Aim and strike in an arcade mini-game, watching for the hit flash"
    )
    parser.add_argument(
        "--game-x",
        type=int,
        default=550,
        help="Screen x of the game window's top-left corner (default: 550)"
    )
    parser.add_argument(
        "--game-y",
        type=int,
        default=609,
        help="Screen y of the game window's top-left corner (default: 609)"
    )
    parser.add_argument(
        "--ready",
        action="store_true",
        help="Start the shot prompt instead of saving a snapshot"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file with configuration overrides"
    )
    parser.add_argument(
        "--unpaced",
        action="store_true",
        help="Sample as fast as captures return instead of at 60 FPS"
    )
    parser.add_argument(
        "--color-rule",
        choices=COLOR_RULES,
        default=None,
        help="Red pixel classification rule (default: relative)"
    )
    parser.add_argument(
        "--trigger",
        choices=TRIGGER_POLICIES,
        default=None,
        help="Hit detection policy (default: delta)"
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        default="target/game.png",
        help="Where to save the game snapshot (default: target/game.png)"
    )
    parser.add_argument(
        "--perf-log",
        action="store_true",
        help="Write per-sample tracking timings to log/"
    )

    args = parser.parse_args(argv)

    try:
        config = create_game_config(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    game_origin = Point(args.game_x, args.game_y)
    frame_source = X11FrameSource()
    try:
        check_display(frame_source, game_origin)
        pointer = X11Pointer()

        if not args.ready:
            take_snapshot(frame_source, pointer, game_origin, config, args.snapshot)
            return 0

        perf_logger = PerformanceLogger() if args.perf_log else None
        executor = ShotExecutor(pointer, frame_source, game_origin, config, perf_logger=perf_logger)
        run_prompt(executor)
    except ShotAssistError as e:
        print(f"Error: {e}")
        return 1
    finally:
        frame_source.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
